"""
docx_mergefield - Locate and replace merge fields in Word documents.

This package finds MERGEFIELD placeholders in the main body, headers and
footers of a Word document and replaces them with literal text, removing the
field's structural runs. Excess fields can be blanked or have their whole
paragraph removed.

Example:
    >>> from docx import Document
    >>> from docx_mergefield import get_merge_fields, replace_with_positional_text
    >>> doc = Document("letter.docx")
    >>> for marker in get_merge_fields(doc, "FirstName"):
    ...     marker.replace_with_text("Alice")
    >>> items = get_merge_fields(doc, "LineItem")
    >>> replace_with_positional_text(items, ["Widget", "Gadget"], remove_excess=True)
    >>> doc.save("letter_filled.docx")
"""

__version__ = "0.1.0"
__all__ = [
    "get_merge_fields",
    "where_name_is",
    "get_paragraph",
    "replace_with_text",
    "replace_all_with_text",
    "replace_with_positional_text",
    "resolve_field_runs",
    "document_parts",
    "FieldMarker",
    "FieldRuns",
    "DocumentPart",
    "PartKind",
    "NameMatcher",
    "PrefixNameMatcher",
    "TokenNameMatcher",
    "DocxMergeFieldError",
    "InvalidArgumentError",
]

# Import python-docx integration
from .compat import document_parts
from .errors import DocxMergeFieldError, InvalidArgumentError

# Import field discovery
from .locator import get_merge_fields, get_paragraph, where_name_is

# Import name matching strategies
from .matching import NameMatcher, PrefixNameMatcher, TokenNameMatcher

# Import model classes
from .models.field_marker import FieldMarker
from .models.part import DocumentPart, PartKind

# Import replacement functions
from .replacer import (
    FieldRuns,
    replace_all_with_text,
    replace_with_positional_text,
    replace_with_text,
    resolve_field_runs,
)
