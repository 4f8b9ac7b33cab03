"""
push_manifest.extract.css
==========================
Extracts resource URLs from CSS text (``url()`` references and ``@import``
rules), in source order.
"""

import re

from ..models import ResourceType
from ..utils.url import normalise_url, type_from_extension

_CSS_COMMENT_RE = re.compile(r"/\*.*?\*/", re.S)
_CSS_URL_RE     = re.compile(r"""url\(\s*['"]?([^)'"\s]+)['"]?\s*\)""", re.I)
_CSS_IMPORT_RE  = re.compile(
    r"""@import\s+(?:url\(\s*['"]?([^)'"\s]+)['"]?\s*\)|['"]([^'"]+)['"])""", re.I
)


def extract_css_urls(css: str, page_url: str) -> list[tuple[str, ResourceType]]:
    """
    Return ``(url, type)`` pairs for every reference in *css*.

    Parameters
    ----------
    css      : Raw CSS text (a stylesheet, a ``<style>`` block or a
               ``style=""`` attribute).
    page_url : Root-relative URL the CSS was found in, used for relative
               resolution.

    ``@import`` targets, quoted or ``url()``, are always styles; other
    ``url()`` targets are typed by their file extension.
    """
    css = _CSS_COMMENT_RE.sub("", css)
    hits: list[tuple[int, str, ResourceType]] = []
    import_spans: list[tuple[int, int]] = []
    for m in _CSS_IMPORT_RE.finditer(css):
        import_spans.append(m.span())
        hits.append((m.start(), m.group(1) or m.group(2), ResourceType.STYLE))
    for m in _CSS_URL_RE.finditer(css):
        if any(start <= m.start() < stop for start, stop in import_spans):
            continue
        hits.append((m.start(), m.group(1), type_from_extension(m.group(1))))

    found: list[tuple[str, ResourceType]] = []
    for _, raw, rtype in sorted(hits, key=lambda h: h[0]):
        n = normalise_url(raw, page_url)
        if n:
            found.append((n, rtype))
    return found
