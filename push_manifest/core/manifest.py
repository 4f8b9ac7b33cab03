"""
Manifest assembly: one flat mapping per document, merged by input name
when more than one document is given.
"""

import asyncio
import sys
from pathlib import Path
from typing import Sequence

from tqdm import tqdm

from ..config import DEFAULT_MANIFEST_NAME
from ..errors import InputResolutionError
from ..models import ResourceDescriptor
from ..utils.files import write_manifest
from ..utils.log import log
from .resolver import ImportResolver


def to_entries(resources: dict[str, ResourceDescriptor]) -> dict[str, dict]:
    """``{url: descriptor}`` → ``{url: {"type": ..., "weight": ...}}``"""
    return {url: desc.to_entry() for url, desc in resources.items()}


class PushManifest:
    """
    Builds and writes the push manifest for a list of HTML documents.

    Parameters
    ----------
    inputs           : Document paths, in the order they were supplied.
    name             : Output filename (default ``DEFAULT_MANIFEST_NAME``).
    base_dir         : Directory served as ``/``. Defaults to each
                       document's own directory.
    scan_stylesheets : Follow local stylesheets for fonts and images.
    show_progress    : Show a tqdm bar while processing several documents.
    """

    def __init__(
        self,
        inputs: Sequence[str | Path],
        name: str | Path | None = None,
        base_dir: str | Path | None = None,
        scan_stylesheets: bool = True,
        show_progress: bool = False,
    ) -> None:
        if not inputs:
            raise InputResolutionError("No input documents given")
        self.inputs = [str(doc) for doc in inputs]
        self.name = Path(name or DEFAULT_MANIFEST_NAME)
        self.base_dir = Path(base_dir) if base_dir is not None else None
        self.scan_stylesheets = scan_stylesheets
        self.show_progress = show_progress
        self.entries: dict = {}

    @property
    def multi_document(self) -> bool:
        return len(self.inputs) > 1

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def document_entries(self, document: str) -> dict[str, dict]:
        """Resolve one input document into its flat ``{url: entry}`` mapping."""
        path = Path(document)
        if not path.name:
            raise InputResolutionError(f"No document name in {document!r}")
        base = self.base_dir if self.base_dir is not None else path.parent
        resolver = ImportResolver(base, scan_stylesheets=self.scan_stylesheets)
        return to_entries(await resolver.resolve(path))

    async def generate(self) -> dict:
        """
        Build the manifest entries.

        A single document yields its flat mapping. Several documents are
        processed one after another and keyed by their input name; a
        document that fails is skipped with a warning unless every one fails.
        """
        if not self.multi_document:
            self.entries = await self.document_entries(self.inputs[0])
            return self.entries

        merged: dict[str, dict] = {}
        docs = tqdm(
            self.inputs, desc="Documents", unit="doc",
            disable=not self.show_progress, file=sys.stderr,
        )
        for document in docs:
            try:
                merged[document] = await self.document_entries(document)
            except InputResolutionError as exc:
                log.warning("[SKIP] %s", exc)
        if not merged:
            raise InputResolutionError("None of the input documents could be read")
        self.entries = merged
        return merged

    async def write(self) -> Path:
        return await write_manifest(self.name, self.entries)

    async def run(self) -> dict:
        await self.generate()
        await self.write()
        return self.entries


def build_manifest(
    inputs: Sequence[str | Path],
    name: str | Path | None = None,
    base_dir: str | Path | None = None,
    scan_stylesheets: bool = True,
    write: bool = True,
) -> dict:
    """Synchronous entry point: generate (and by default write) a manifest."""
    manifest = PushManifest(
        inputs, name=name, base_dir=base_dir, scan_stylesheets=scan_stylesheets
    )
    if write:
        return asyncio.run(manifest.run())
    return asyncio.run(manifest.generate())
