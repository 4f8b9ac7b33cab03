"""
push_manifest.extract.html
===========================
Extracts pushable resource URLs from HTML using BeautifulSoup.

Handles:
* ``<link>`` by ``rel`` (stylesheet, import, icons, manifest) and
  ``rel="preload"`` by its ``as`` attribute
* ``<script src>``, ``<img src/srcset>``, ``<picture><source>``,
  ``<input type="image">`` and ``<video poster>``
* Inline ``<style>`` blocks and ``style=""`` attributes (delegated to the
  css module)
"""

import re
from pathlib import Path

from bs4 import BeautifulSoup

from ..config import LINK_REL_TYPES, PRELOAD_AS_TYPES, PRELOAD_RELS
from ..models import ResourceType
from ..utils.files import read_document_async
from ..utils.log import log
from ..utils.url import normalise_url
from .css import extract_css_urls

_BS4_PARSER = "lxml"

_SRCSET_GAP_RE = re.compile(r"[\s,]*")
_SRCSET_URL_RE = re.compile(r"\S+")


def _rel_tokens(el) -> list[str]:
    rel = el.get("rel") or []
    if isinstance(rel, str):
        rel = rel.split()
    return [token.lower() for token in rel]


def _link_type(el) -> ResourceType | None:
    """Resource type of a ``<link>`` element, or None when it is not pushable."""
    tokens = _rel_tokens(el)
    preload = [t for t in tokens if t in PRELOAD_RELS]
    if preload:
        as_ = (el.get("as") or "").strip().lower()
        if as_ in PRELOAD_AS_TYPES:
            return ResourceType(PRELOAD_AS_TYPES[as_])
        if not as_ and "modulepreload" in preload:
            return ResourceType.SCRIPT
        return ResourceType.OTHER
    if "stylesheet" in tokens:
        return ResourceType.STYLE
    for token in tokens:
        if token in LINK_REL_TYPES:
            return ResourceType(LINK_REL_TYPES[token])
    return None


def _srcset_urls(srcset: str) -> list[str]:
    """
    ``"a.png 1x, b.png 2x"`` → ``["a.png", "b.png"]``

    A candidate URL runs to the next whitespace, so commas inside it (as in
    ``data:`` URLs) do not split it; its descriptors run to the next comma
    outside parentheses.
    """
    urls = []
    pos, end = 0, len(srcset)
    while True:
        pos = _SRCSET_GAP_RE.match(srcset, pos).end()
        if pos >= end:
            break
        m = _SRCSET_URL_RE.match(srcset, pos)
        url, pos = m.group(0), m.end()
        if url.endswith(","):
            url = url.rstrip(",")
        else:
            nesting = 0
            while pos < end:
                ch = srcset[pos]
                if ch == "(":
                    nesting += 1
                elif ch == ")" and nesting:
                    nesting -= 1
                elif ch == "," and not nesting:
                    break
                pos += 1
        if url:
            urls.append(url)
    return urls


def extract_resources(html: str, page_url: str) -> list[tuple[str, ResourceType]]:
    """
    Return ``(url, type)`` pairs for every statically referenced resource
    in *html*, in source order.

    Parameters
    ----------
    html     : Raw HTML text; malformed markup is tolerated.
    page_url : Root-relative URL of the document (for relative resolution).
    """
    found: list[tuple[str, ResourceType]] = []

    def _add(raw, rtype: ResourceType) -> None:
        if not raw:
            return
        n = normalise_url(raw, page_url)
        if n:
            found.append((n, rtype))

    try:
        soup = BeautifulSoup(html, _BS4_PARSER)
    except Exception as exc:
        log.debug("[SKIP] Unparseable markup in %s: %s", page_url, exc)
        return found

    for el in soup.find_all(True):
        tag = el.name
        if tag == "link":
            rtype = _link_type(el)
            if rtype is not None:
                _add(el.get("href"), rtype)
        elif tag == "script":
            _add(el.get("src"), ResourceType.SCRIPT)
        elif tag == "img":
            _add(el.get("src"), ResourceType.IMAGE)
            for url in _srcset_urls(el.get("srcset") or ""):
                _add(url, ResourceType.IMAGE)
        elif tag == "source" and el.parent is not None and el.parent.name == "picture":
            _add(el.get("src"), ResourceType.IMAGE)
            for url in _srcset_urls(el.get("srcset") or ""):
                _add(url, ResourceType.IMAGE)
        elif tag == "input" and (el.get("type") or "").lower() == "image":
            _add(el.get("src"), ResourceType.IMAGE)
        elif tag == "video":
            _add(el.get("poster"), ResourceType.IMAGE)
        elif tag == "style":
            found.extend(extract_css_urls(el.string or "", page_url))

        # style="background: url(...)"
        inline = el.get("style")
        if inline:
            found.extend(extract_css_urls(inline, page_url))

    return found


async def extract_document(path: Path, page_url: str) -> list[tuple[str, ResourceType]]:
    """
    Read the HTML file at *path* and extract its resources.

    ``OSError`` from the read propagates; callers decide whether a missing
    document is fatal.
    """
    html = await read_document_async(path)
    return extract_resources(html, page_url)
