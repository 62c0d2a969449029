"""
Model classes for docx_mergefield.

These classes provide read-only handles around OOXML elements.
"""

from docx_mergefield.models.field_marker import FieldMarker
from docx_mergefield.models.part import DocumentPart, PartKind

__all__ = ["DocumentPart", "FieldMarker", "PartKind"]
