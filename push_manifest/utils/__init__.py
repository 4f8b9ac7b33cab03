"""Utility helpers for URL normalisation, file I/O and logging."""

from .url import normalise_url, page_url_for, url_to_path, type_from_extension
from .files import read_document, read_document_async, dump_manifest, save_file, write_manifest
from .log import setup_logging, log

__all__ = [
    "normalise_url",
    "page_url_for",
    "url_to_path",
    "type_from_extension",
    "read_document",
    "read_document_async",
    "dump_manifest",
    "save_file",
    "write_manifest",
    "setup_logging",
    "log",
]
