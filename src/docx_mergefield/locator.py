"""
Merge field discovery.

Field markers are the w:instrText elements holding a field instruction such
as " MERGEFIELD  FirstName ". They are searched in a python-docx Document
(main part, then headers, then footers), in a single DocumentPart, or in any
lxml subtree.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from lxml import etree

from .compat import document_parts, is_python_docx_document
from .constants import NO_NAME_PLACEHOLDER, w
from .errors import InvalidArgumentError
from .matching import DEFAULT_MATCHER, NameMatcher
from .models.field_marker import FieldMarker
from .models.part import DocumentPart, PartKind

logger = logging.getLogger(__name__)


def get_merge_fields(
    scope: Any,
    name: str | None = None,
    matcher: NameMatcher | None = None,
) -> list[FieldMarker]:
    """Get the field markers contained in a document, part or element.

    Args:
        scope: Where to search - can be:
               - A python-docx Document (main part, headers and footers)
               - A DocumentPart
               - An lxml element (its descendants only)
        name: Optional merge field name. When omitted or blank, every field
              marker is returned, whatever its field type.
        matcher: Name matching strategy (default: PrefixNameMatcher)

    Returns:
        List of FieldMarker objects in document order, part by part

    Raises:
        InvalidArgumentError: If scope is None
        TypeError: If scope is not a supported type

    Example:
        >>> from docx import Document
        >>> doc = Document("letter.docx")
        >>> for marker in get_merge_fields(doc, "FirstName"):
        ...     marker.replace_with_text("Alice")
        >>> doc.save("letter_filled.docx")
    """
    if scope is None:
        raise InvalidArgumentError("scope")

    markers: list[FieldMarker] = []
    for part in _resolve_parts(scope):
        found = [
            FieldMarker(element, part.kind)
            for element in part.element.iterdescendants(w("instrText"))
        ]
        logger.debug(
            "Found %d field marker(s) in %s part %s", len(found), part.kind.value, part.partname
        )
        markers.extend(found)

    if name is None or not name.strip():
        return markers

    return where_name_is(markers, name, matcher=matcher)


def where_name_is(
    fields: Iterable[FieldMarker] | None,
    name: str | None,
    matcher: NameMatcher | None = None,
) -> list[FieldMarker]:
    """Filter field markers by merge field name.

    A blank name is replaced by a placeholder name, so only fields literally
    named "<NoNameMergeField>" match it.

    Args:
        fields: Field markers to filter
        name: The merge field name
        matcher: Name matching strategy (default: PrefixNameMatcher)

    Returns:
        List of the markers whose instruction names the field. Empty if
        fields is None or empty.
    """
    if fields is None:
        return []

    matcher = matcher or DEFAULT_MATCHER
    wanted = name if name is not None and name.strip() else NO_NAME_PLACEHOLDER
    return [
        field
        for field in fields
        if field.element.text is not None and matcher.matches(field.element.text, wanted)
    ]


def get_paragraph(element: etree._Element | None) -> etree._Element | None:
    """Get the immediate containing paragraph of an element.

    Args:
        element: Any element of a part tree

    Returns:
        The element itself if it is a w:p, otherwise the nearest w:p
        ancestor, or None if there is none
    """
    if element is None:
        return None

    paragraph_tag = w("p")
    if element.tag == paragraph_tag:
        return element

    return next(element.iterancestors(paragraph_tag), None)


def _resolve_parts(scope: Any) -> list[DocumentPart]:
    """Turn a search scope into the list of parts to search."""
    if isinstance(scope, DocumentPart):
        return [scope]
    if isinstance(scope, etree._Element):
        return [DocumentPart(PartKind.FRAGMENT, scope)]
    if is_python_docx_document(scope):
        return document_parts(scope)

    raise TypeError(
        f"Cannot search {type(scope).__name__} for merge fields. "
        "Pass a python-docx Document, a DocumentPart or an lxml element."
    )
