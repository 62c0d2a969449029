"""
Document part model classes for docx_mergefield.

A WordprocessingML package keeps the main body, every header and every
footer in separate XML parts. Each part has its own root element, so merge
fields are searched part by part.
"""

from dataclasses import dataclass
from enum import Enum

from lxml import etree


class PartKind(Enum):
    """Kinds of parts searched for merge fields.

    Parts of a document are always visited in declaration order:
    MAIN first, then HEADER parts, then FOOTER parts. FRAGMENT marks a
    caller-supplied subtree that is not a whole part.
    """

    MAIN = "main"
    HEADER = "header"
    FOOTER = "footer"
    FRAGMENT = "fragment"


@dataclass(frozen=True)
class DocumentPart:
    """One XML part of a document together with its kind.

    Attributes:
        kind: Which category of part this is
        element: Root element of the part (w:document, w:hdr or w:ftr)
        partname: Package part name (e.g., "/word/header1.xml"), if known
    """

    kind: PartKind
    element: etree._Element
    partname: str | None = None

    def __repr__(self) -> str:
        """Return string representation of the part."""
        return f"<DocumentPart {self.kind.value} {self.partname or '?'}>"
