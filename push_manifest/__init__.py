"""
push_manifest
=============
Generates an HTTP/2 push manifest by statically scanning HTML entry
documents for the stylesheets, scripts, images, fonts and HTML imports
they reference.

Package structure
-----------------
push_manifest/
├── __init__.py       – package init and public API
├── config.py         – configuration constants
├── errors.py         – fatal error types
├── models.py         – ResourceType / ResourceDescriptor
├── cli.py            – argparse CLI (``python -m push_manifest``)
├── extract/          – resource extraction from HTML / CSS
├── core/             – import resolution, deduplication, assembly
└── utils/            – URL mapping, file I/O, logging

Quick start
-----------
    from push_manifest import build_manifest

    entries = build_manifest(["index.html"], name="push-manifest.json")
"""

from .core import ImportResolver, PushManifest, aggregate, build_manifest
from .errors import InputResolutionError, ManifestWriteError, PushManifestError
from .extract import extract_resources
from .models import ResourceDescriptor, ResourceType

__version__ = "1.0.0"

__all__ = [
    "ImportResolver",
    "PushManifest",
    "aggregate",
    "build_manifest",
    "extract_resources",
    "InputResolutionError",
    "ManifestWriteError",
    "PushManifestError",
    "ResourceDescriptor",
    "ResourceType",
]
