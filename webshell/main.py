from fastapi import Depends, FastAPI
from .infer import DEFAULT_COLLABORATORS, Collaborators
from .models import HealthResponse, RawOptions, ResolvedOptions
from .normalize import build_options
from .rules import TOOL_VERSION

app = FastAPI(
    title="webshell-options",
    description="Resolves partial web page options into a complete desktop app shell configuration",
    version=TOOL_VERSION,
)


def get_collaborators() -> Collaborators:
    return DEFAULT_COLLABORATORS


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}

@app.post("/options", response_model=ResolvedOptions)
async def resolve_options(raw: RawOptions, collaborators: Collaborators = Depends(get_collaborators)):
    return await build_options(raw, collaborators)
