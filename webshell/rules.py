"""
Deterministic defaults for resolving app shell options.

Every value here is a process-wide constant. Tables are read-only mappings.
"""

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from types import MappingProxyType

try:
    TOOL_VERSION = version("webshell-options")
except PackageNotFoundError:
    # Running from a source checkout that was never installed.
    TOOL_VERSION = "0.0.0"

# Packaging copies the shell template from here; the path never changes per call.
PLACEHOLDER_APP_DIR = str(Path(__file__).resolve().parent / "app")

ELECTRON_VERSION = "0.36.4"
DEFAULT_APP_NAME = "APP"

DEFAULT_WIDTH = 1280
DEFAULT_HEIGHT = 800

FAKE_USER_AGENTS = MappingProxyType({
    "darwin": "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_10_1) AppleWebKit/537.36 "
              "(KHTML, like Gecko) Chrome/41.0.2227.1 Safari/537.36",
    "win32": "Mozilla/5.0 (Windows NT 6.1) AppleWebKit/537.36 "
             "(KHTML, like Gecko) Chrome/41.0.2228.0 Safari/537.36",
    "linux": "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
             "(KHTML, like Gecko) Chrome/41.0.2227.0 Safari/537.36",
})

# Keys are lowercase; lookups lowercase the caller's value first.
PLATFORM_ALIASES = MappingProxyType({
    "windows": "win32",
    "osx": "darwin",
    "mac": "darwin",
})

# Spaces in the app name break dock pinning on Ubuntu.
KEBAB_NAME_PLATFORM = "linux"
