"""
FieldMarker handle for field instruction elements.
"""

from __future__ import annotations

from dataclasses import dataclass

from lxml import etree

from ..constants import MERGEFIELD_KEYWORD, w
from .part import PartKind


@dataclass(frozen=True)
class FieldMarker:
    """Read-only handle on a w:instrText element.

    The handle wraps the element found by the locator together with the kind
    of part it was found in. Equality follows the wrapped element, so two
    lookups over an unchanged document produce equal markers.

    Attributes:
        element: The w:instrText element
        part: Kind of part the marker was found in

    Example:
        >>> marker = get_merge_fields(doc, "FirstName")[0]
        >>> marker.name
        'FirstName'
        >>> marker.replace_with_text("Alice")
    """

    element: etree._Element
    part: PartKind = PartKind.FRAGMENT

    @property
    def instruction(self) -> str:
        """Raw instruction text, or an empty string when there is none."""
        return self.element.text or ""

    @property
    def is_merge_field(self) -> bool:
        """Whether the instruction is a MERGEFIELD instruction."""
        tokens = self.instruction.split()
        return bool(tokens) and tokens[0].upper() == MERGEFIELD_KEYWORD

    @property
    def name(self) -> str | None:
        """Name of the merge field.

        This is the token following the MERGEFIELD keyword with surrounding
        double quotes removed.

        Returns:
            The field name, or None for non-merge fields and blank names
        """
        if not self.is_merge_field:
            return None
        tokens = self.instruction.split()
        if len(tokens) < 2:
            return None
        name = tokens[1].strip('"')
        return name or None

    @property
    def run(self) -> etree._Element | None:
        """The instruction run (w:r) containing the marker, if any."""
        parent = self.element.getparent()
        if parent is not None and parent.tag == w("r"):
            return parent
        return None

    @property
    def is_attached(self) -> bool:
        """Whether the marker still sits inside an instruction run."""
        return self.run is not None

    @property
    def paragraph(self) -> etree._Element | None:
        """The paragraph (w:p) containing the marker, if any."""
        from ..locator import get_paragraph

        return get_paragraph(self.element)

    def replace_with_text(self, text: str | None) -> None:
        """Replace this field with literal text.

        See :func:`docx_mergefield.replacer.replace_with_text`.
        """
        from ..replacer import replace_with_text

        replace_with_text(self, text)

    def __repr__(self) -> str:
        """Return string representation of the marker."""
        return f"<FieldMarker {self.part.value}: {self.instruction.strip()!r}>"
