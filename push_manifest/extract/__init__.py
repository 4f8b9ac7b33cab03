"""
push_manifest.extract
======================
Sub-package for extracting resource references from HTML and CSS.

Public API
----------
    from push_manifest.extract import extract_resources, extract_document
"""

from .css import extract_css_urls
from .html import extract_document, extract_resources

__all__ = ["extract_css_urls", "extract_document", "extract_resources"]
