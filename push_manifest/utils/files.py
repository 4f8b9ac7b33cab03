"""Reading input documents and persisting the manifest."""

import asyncio
import contextlib
import json
import os
import tempfile
from pathlib import Path

from ..config import JSON_INDENT
from ..errors import ManifestWriteError
from .log import log


def read_document(path: Path) -> str:
    """Return the text of *path* decoded as UTF-8, replacing invalid bytes."""
    return path.read_bytes().decode("utf-8", errors="replace")


async def read_document_async(path: Path) -> str:
    """Read *path* on the default executor so the event loop is not blocked."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, read_document, path)


def dump_manifest(entries: dict) -> str:
    """Pretty-print *entries* as JSON, keeping key order."""
    return json.dumps(entries, indent=JSON_INDENT, ensure_ascii=False) + "\n"


def save_file(local_path: Path, content: bytes) -> None:
    """
    Replace *local_path* with *content*, creating parent directories.

    The bytes go to a temporary sibling first and are moved into place with
    ``os.replace`` so a failed write never leaves a truncated file behind.
    """
    local_path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(
        dir=local_path.parent, prefix=f".{local_path.name}.", suffix=".tmp"
    )
    try:
        with os.fdopen(fd, "wb") as fh:
            fh.write(content)
        os.chmod(tmp, 0o644)
        os.replace(tmp, local_path)
    except BaseException:
        with contextlib.suppress(OSError):
            os.unlink(tmp)
        raise
    log.debug("Saved → %s (%d bytes)", local_path, len(content))


async def write_manifest(path: Path, entries: dict) -> Path:
    """Serialise *entries* and write them to *path*, replacing any old file."""
    data = dump_manifest(entries).encode("utf-8")
    loop = asyncio.get_running_loop()
    try:
        await loop.run_in_executor(None, save_file, path, data)
    except OSError as exc:
        raise ManifestWriteError(f"Cannot write manifest {path}: {exc}") from exc
    log.info("[WRITE] %s (%d entries)", path, len(entries))
    return path
