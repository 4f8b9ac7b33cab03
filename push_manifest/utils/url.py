"""URL normalisation and URL ↔ filesystem path mapping."""

import os
import re
import urllib.parse
from pathlib import Path, PurePosixPath

from ..config import (
    FONT_EXTENSIONS,
    IMAGE_EXTENSIONS,
    SCRIPT_EXTENSIONS,
    SKIPPED_SCHEMES,
    STYLE_EXTENSIONS,
)
from ..models import ResourceType


def normalise_url(raw: str, page_url: str) -> str | None:
    """
    Convert *raw* to a root-relative URL, resolving it against *page_url*
    (the root-relative URL of the document it was found in).
    Strips the fragment and pure cache-buster query strings such as
    '?202406291158020553184798', but keeps meaningful query strings.

    Returns None for data:, javascript:, mailto: and similar URLs, and for
    anything carrying its own scheme or host, which cannot be pushed.
    """
    raw = raw.strip()
    if not raw or raw.lower().startswith(SKIPPED_SCHEMES):
        return None

    parsed = urllib.parse.urlparse(raw)
    if parsed.scheme or parsed.netloc:
        return None

    parsed = urllib.parse.urlparse(urllib.parse.urljoin(page_url, raw))

    qs = parsed.query
    if qs and re.fullmatch(r"[0-9a-f]{10,}", qs, re.IGNORECASE):
        qs = ""

    path = parsed.path or "/"
    if not path.startswith("/"):
        path = "/" + path
    return urllib.parse.urlunparse(("", "", path, "", qs, ""))


def page_url_for(path: Path, base_dir: Path) -> str:
    """
    Root-relative URL of the document at *path* when served from *base_dir*.

    /srv/site/index.html, base /srv/site   → /index.html
    /srv/site/elements/x.html              → /elements/x.html
    """
    rel = PurePosixPath(Path(os.path.relpath(path, base_dir)).as_posix())
    return urllib.parse.urljoin("/", str(rel))


def url_to_path(url: str, base_dir: Path) -> Path:
    """
    Map a root-relative *url* back to an absolute path inside *base_dir*.
    The query string is ignored and percent-escapes are decoded.
    """
    path = urllib.parse.unquote(urllib.parse.urlparse(url).path).lstrip("/")
    return (base_dir / Path(path)).resolve()


def type_from_extension(url: str, default: ResourceType = ResourceType.OTHER) -> ResourceType:
    """Guess a resource type from the file extension of *url*."""
    suffix = PurePosixPath(urllib.parse.urlparse(url).path).suffix.lower()
    if suffix in FONT_EXTENSIONS:
        return ResourceType.FONT
    if suffix in IMAGE_EXTENSIONS:
        return ResourceType.IMAGE
    if suffix in STYLE_EXTENSIONS:
        return ResourceType.STYLE
    if suffix in SCRIPT_EXTENSIONS:
        return ResourceType.SCRIPT
    return default
