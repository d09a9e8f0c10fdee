"""
Option normalization for wrapping a web page into a desktop app shell.

Stages (run in this order by build_options):
- resolve_defaults: caller options -> fully-populated options, never fails
- infer_missing: icon and title inference, each falling back on failure
- finalize: platform aliases + filesystem-safe ASCII name
"""

from __future__ import annotations

import asyncio
import logging
import os
from typing import Any, Dict, Optional, Union

from .infer import DEFAULT_COLLABORATORS, Collaborators, attempt
from .models import RawOptions, ResolvedOptions
from .naming import kebab_case, strip_non_ascii
from .rules import (
    DEFAULT_APP_NAME,
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    ELECTRON_VERSION,
    FAKE_USER_AGENTS,
    KEBAB_NAME_PLATFORM,
    PLACEHOLDER_APP_DIR,
    PLATFORM_ALIASES,
    TOOL_VERSION,
)

logger = logging.getLogger(__name__)

RawInput = Union[RawOptions, Dict[str, Any], None]


def normalize_platform(platform: str) -> str:
    return PLATFORM_ALIASES.get(platform.lower(), platform)


def fake_user_agent(host_platform: str) -> Optional[str]:
    return FAKE_USER_AGENTS.get(host_platform)


def _as_raw(raw: RawInput) -> RawOptions:
    if raw is None:
        return RawOptions()
    if isinstance(raw, RawOptions):
        return raw
    return RawOptions.model_validate(raw)


def resolve_defaults(raw: RawInput = None, collaborators: Collaborators = DEFAULT_COLLABORATORS) -> ResolvedOptions:
    """
    Fill every field from the caller's value or its fixed default.

    Empty strings, zero and False count as absent. Honest mode always wins over
    any user agent. The platform is alias-normalized here so the title stage
    checks the final value.
    """
    raw = _as_raw(raw)

    options = ResolvedOptions(
        dir=PLACEHOLDER_APP_DIR,
        name=raw.name,
        target_url=collaborators.normalize_url(raw.target_url),
        platform=raw.platform or collaborators.infer_platform(),
        arch=raw.arch or collaborators.infer_arch(),
        version=raw.electron_version or ELECTRON_VERSION,
        nativefier_version=TOOL_VERSION,
        out=raw.out or os.getcwd(),
        overwrite=raw.overwrite,
        asar=raw.conceal or False,
        icon=raw.icon,
        counter=raw.counter or False,
        width=raw.width or DEFAULT_WIDTH,
        height=raw.height or DEFAULT_HEIGHT,
        show_menu_bar=raw.show_menu_bar or False,
        user_agent=raw.user_agent or fake_user_agent(collaborators.infer_platform()),
        ignore_certificate=raw.ignore_certificate or False,
        insecure=raw.insecure or False,
        flash_plugin_dir=raw.flash or None,
        inject=raw.inject or None,
        full_screen=raw.full_screen or False,
    )

    if raw.honest:
        options.user_agent = None

    options.platform = normalize_platform(options.platform)
    return options


async def _infer_icon(options: ResolvedOptions, collaborators: Collaborators) -> None:
    if options.icon:
        return

    result = await attempt(collaborators.find_icon, options.target_url, options.platform)
    if result.ok:
        options.icon = result.value
    else:
        logger.warning("Cannot automatically retrieve the app icon: %s", result.reason)


async def _infer_name(options: ResolvedOptions, collaborators: Collaborators) -> None:
    if options.name:
        return

    result = await attempt(collaborators.find_title, options.target_url)
    name = result.value.strip() if result.ok else ""
    if not name:
        logger.warning(
            "Unable to automatically determine app name (%s), falling back to '%s'",
            result.reason or "blank title",
            DEFAULT_APP_NAME,
        )
        name = DEFAULT_APP_NAME

    if options.platform == KEBAB_NAME_PLATFORM:
        name = kebab_case(name)
    options.name = name


async def infer_missing(options: ResolvedOptions, collaborators: Collaborators = DEFAULT_COLLABORATORS) -> ResolvedOptions:
    """
    Infer the icon and the name where the caller left them unset.

    Both stages run concurrently and write disjoint fields. Each one turns its
    own failures into a fallback, so neither can stop the other.
    """
    await asyncio.gather(
        _infer_icon(options, collaborators),
        _infer_name(options, collaborators),
    )
    return options


def safe_app_name(name: Optional[str], collaborators: Collaborators = DEFAULT_COLLABORATORS) -> str:
    cleaned = strip_non_ascii(name or "").strip()
    cleaned = collaborators.sanitize_filename(cleaned).strip()
    # Trimming can expose a dot-only or reserved name again.
    cleaned = collaborators.sanitize_filename(cleaned)
    if not cleaned:
        logger.warning("App name %r has no filesystem-safe characters, using '%s'", name, DEFAULT_APP_NAME)
        return DEFAULT_APP_NAME
    return cleaned


def finalize(options: ResolvedOptions, collaborators: Collaborators = DEFAULT_COLLABORATORS) -> ResolvedOptions:
    options.platform = normalize_platform(options.platform)
    options.name = safe_app_name(options.name, collaborators)
    return options


async def build_options(raw: RawInput = None, collaborators: Optional[Collaborators] = None) -> ResolvedOptions:
    """
    Resolve caller options into the configuration handed to packaging.

    Expected inference failures never raise; they end up as fallbacks.
    """
    collaborators = collaborators or DEFAULT_COLLABORATORS
    options = resolve_defaults(raw, collaborators)
    await infer_missing(options, collaborators)
    return finalize(options, collaborators)


def normalize_options(raw: RawInput = None, collaborators: Optional[Collaborators] = None) -> ResolvedOptions:
    """Blocking form of build_options for callers without an event loop."""
    return asyncio.run(build_options(raw, collaborators))
