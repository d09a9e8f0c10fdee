"""
Collaborators the option pipeline depends on.

Host inference (platform, arch) is done locally. Icon and title discovery need
the network, so the package only ships finders that report no source; callers
inject real ones through Collaborators.
"""

from __future__ import annotations

import inspect
import platform as host
import sys
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional, Union

from .models import Inferred
from .naming import sanitize_filename
from .urls import normalize_url

IconFinder = Callable[[Optional[str], str], Union[str, None, Awaitable[Optional[str]]]]
TitleFinder = Callable[[Optional[str]], Union[str, None, Awaitable[Optional[str]]]]

_ARCH_NAMES = {
    "x86_64": "x64",
    "amd64": "x64",
    "x64": "x64",
    "i386": "ia32",
    "i686": "ia32",
    "x86": "ia32",
    "aarch64": "arm64",
    "arm64": "arm64",
    "armv7l": "armv7l",
}


class InferenceError(Exception):
    """Raised by a finder that cannot produce a value."""


def infer_platform() -> str:
    if sys.platform.startswith("linux"):
        return "linux"
    if sys.platform in ("win32", "cygwin"):
        return "win32"
    return sys.platform


def infer_arch() -> str:
    machine = host.machine().lower()
    return _ARCH_NAMES.get(machine, machine)


def no_icon_source(url: Optional[str], platform: str) -> Optional[str]:
    raise InferenceError("no icon source configured")


def no_title_source(url: Optional[str]) -> Optional[str]:
    raise InferenceError("no title source configured")


async def attempt(finder: Callable[..., Any], *args: Any) -> Inferred:
    """
    Call a finder once and report the outcome as an Inferred.

    The finder may be a plain function or a coroutine function. Raising at call
    time, raising while awaited and returning nothing are all failures.
    """
    try:
        value = finder(*args)
        if inspect.isawaitable(value):
            value = await value
    except Exception as exc:
        return Inferred.failure(str(exc) or type(exc).__name__)

    if not value:
        return Inferred.failure("nothing returned")
    return Inferred.success(str(value))


@dataclass(frozen=True)
class Collaborators:
    normalize_url: Callable[[Optional[str]], Optional[str]] = normalize_url
    infer_platform: Callable[[], str] = infer_platform
    infer_arch: Callable[[], str] = infer_arch
    find_icon: IconFinder = no_icon_source
    find_title: TitleFinder = no_title_source
    sanitize_filename: Callable[[str], str] = sanitize_filename


DEFAULT_COLLABORATORS = Collaborators()
