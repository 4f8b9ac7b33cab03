"""Resource types and descriptors shared by the extractor and resolver."""

from dataclasses import dataclass
from enum import Enum


class ResourceType(str, Enum):
    """Fixed set of resource kinds a push manifest may list."""

    STYLE = "style"
    SCRIPT = "script"
    IMAGE = "image"
    FONT = "font"
    HTML_IMPORT = "html-import"
    OTHER = "other"


@dataclass(frozen=True)
class ResourceDescriptor:
    """One discovered static resource.

    Attributes
    ----------
    url    : Root-relative URL, always starting with ``/``.
    type   : Kind of resource, derived from the referencing tag.
    weight : Positive priority hint; lower means closer to the root document.
    """

    url: str
    type: ResourceType
    weight: int

    def to_entry(self) -> dict:
        return {"type": self.type.value, "weight": self.weight}
