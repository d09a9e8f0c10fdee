"""Target URL normalization."""

from __future__ import annotations

import re
from typing import Optional

_SCHEME = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*://")


def normalize_url(raw_url: Optional[str]) -> Optional[str]:
    """Trim the URL and prefix http:// when it carries no scheme."""
    if raw_url is None:
        return None
    url = raw_url.strip()
    if not url:
        return None
    if not _SCHEME.match(url):
        url = f"http://{url}"
    return url
