"""Core pipeline – import resolution, deduplication and manifest assembly."""

from .aggregate import aggregate
from .manifest import PushManifest, build_manifest, to_entries
from .resolver import ImportResolver

__all__ = ["aggregate", "ImportResolver", "PushManifest", "build_manifest", "to_entries"]
