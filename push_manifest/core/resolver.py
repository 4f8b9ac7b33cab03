"""
Depth-first HTML-import traversal.

Every HTML document is read at most once per traversal; a stylesheet is
read again only when a shallower reference reaches it. The visited and
scanned bookkeeping is owned by the caller and passed down explicitly, so a
resolver can be reused for any number of independent traversals.
"""

from pathlib import Path

from ..config import BASE_WEIGHT, WEIGHT_STEP
from ..errors import InputResolutionError
from ..extract import extract_css_urls, extract_document
from ..models import ResourceDescriptor, ResourceType
from ..utils.files import read_document_async
from ..utils.log import log
from ..utils.url import page_url_for, url_to_path
from .aggregate import aggregate


class ImportResolver:
    """
    Collects the resources of one document and everything it imports.

    Parameters
    ----------
    base_dir         : Directory served as ``/``; every URL is expressed
                       relative to it.
    scan_stylesheets : Also read local stylesheets and collect the fonts,
                       images and nested ``@import`` rules they reference.
    """

    def __init__(self, base_dir: Path, scan_stylesheets: bool = True) -> None:
        self.base_dir = Path(base_dir).resolve()
        self.scan_stylesheets = scan_stylesheets

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def resolve(self, path: Path) -> dict[str, ResourceDescriptor]:
        """
        Return the deduplicated resources of the document at *path*.

        Raises InputResolutionError when the document itself cannot be read.
        """
        try:
            root = Path(path).resolve()
            visited = {root}
            found = await self.collect(root, visited)
        except (OSError, ValueError) as exc:
            raise InputResolutionError(f"Cannot read {path}: {exc}") from exc
        resources = aggregate(found, exclude=(page_url_for(root, self.base_dir),))
        log.debug("%s: %d resource(s), %d document(s) visited",
                  path, len(resources), len(visited))
        return resources

    async def collect(
        self,
        path: Path,
        visited: set[Path],
        depth: int = 0,
        scanned: dict[Path, int] | None = None,
    ) -> list[ResourceDescriptor]:
        """
        Extract *path* and recurse into its HTML imports in source order.

        *path* must already be in *visited*. *scanned* maps each stylesheet
        read so far to the lowest weight it was read at. The returned list
        may contain the same URL more than once; ``aggregate`` settles that.
        """
        if scanned is None:
            scanned = {}
        page_url = page_url_for(path, self.base_dir)
        pairs = await extract_document(path, page_url)
        weight = BASE_WEIGHT + depth * WEIGHT_STEP

        found: list[ResourceDescriptor] = []
        for url, rtype in pairs:
            found.append(ResourceDescriptor(url, rtype, weight))
            if rtype is ResourceType.HTML_IMPORT:
                found.extend(await self._follow_import(url, visited, depth, scanned))
            elif rtype is ResourceType.STYLE and self.scan_stylesheets:
                found.extend(await self._scan_stylesheet(url, scanned, weight))
        return found

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    async def _follow_import(
        self, url: str, visited: set[Path], depth: int, scanned: dict[Path, int]
    ) -> list[ResourceDescriptor]:
        try:
            target = url_to_path(url, self.base_dir)
        except ValueError as exc:
            log.warning("[SKIP] Import %s has an unusable path: %s", url, exc)
            return []
        if target in visited:
            log.debug("[CYCLE] %s already visited", url)
            return []
        visited.add(target)
        log.debug("[IMPORT] %s (depth %d)", url, depth + 1)
        try:
            return await self.collect(target, visited, depth + 1, scanned)
        except (OSError, ValueError) as exc:
            log.warning("[SKIP] Import %s could not be read: %s", url, exc)
            return []

    async def _scan_stylesheet(
        self, url: str, scanned: dict[Path, int], weight: int
    ) -> list[ResourceDescriptor]:
        # a stylesheet is read again only when reached at a lower weight
        try:
            target = url_to_path(url, self.base_dir)
        except ValueError as exc:
            log.debug("[CSS] %s not scanned: %s", url, exc)
            return []
        if target in scanned and scanned[target] <= weight:
            return []
        scanned[target] = weight
        try:
            css = await read_document_async(target)
        except (OSError, ValueError) as exc:
            log.debug("[CSS] %s not scanned: %s", url, exc)
            return []

        found: list[ResourceDescriptor] = []
        for ref, rtype in extract_css_urls(css, url):
            found.append(ResourceDescriptor(ref, rtype, weight))
            if rtype is ResourceType.STYLE:
                found.extend(await self._scan_stylesheet(ref, scanned, weight))
        return found
