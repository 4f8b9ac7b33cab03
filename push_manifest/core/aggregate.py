"""Deduplication of resources discovered along several import paths."""

from typing import Iterable

from ..models import ResourceDescriptor


def aggregate(
    descriptors: Iterable[ResourceDescriptor],
    exclude: Iterable[str] = (),
) -> dict[str, ResourceDescriptor]:
    """
    Keep exactly one descriptor per URL.

    The lower weight wins; on a tie the first discovery is kept. The result
    is ordered by first discovery, so identical input yields identical
    output. URLs in *exclude* (the document's own URL) are dropped.
    """
    excluded = set(exclude)
    merged: dict[str, ResourceDescriptor] = {}
    for desc in descriptors:
        if desc.url in excluded:
            continue
        current = merged.get(desc.url)
        if current is None or desc.weight < current.weight:
            merged[desc.url] = desc
    return merged
