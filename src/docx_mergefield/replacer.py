"""
Merge field replacement.

A complex field is written by Word as a sequence of sibling runs:

    <w:r><w:fldChar w:fldCharType="begin"/></w:r>
    <w:r><w:instrText> MERGEFIELD  FirstName </w:instrText></w:r>
    <w:r><w:fldChar w:fldCharType="separate"/></w:r>
    <w:r><w:t>«FirstName»</w:t></w:r>
    <w:r><w:fldChar w:fldCharType="end"/></w:r>

Replacing the field removes the begin, instruction, separator and end runs
and rewrites the text of the remaining result run. Documents edited by hand
often miss some of these runs, so each one is looked up independently and a
missing run is skipped rather than reported.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from lxml import etree

from .constants import FLD_CHAR_BEGIN, FLD_CHAR_END, FLD_CHAR_SEPARATE, w, xml
from .errors import InvalidArgumentError
from .locator import get_paragraph
from .models.field_marker import FieldMarker

logger = logging.getLogger(__name__)


class RunKind(Enum):
    """Role a run plays in a complex field."""

    BEGIN = "begin"
    INSTRUCTION = "instruction"
    SEPARATE = "separate"
    END = "end"
    CONTENT = "content"


_FLD_CHAR_KINDS = {
    FLD_CHAR_BEGIN: RunKind.BEGIN,
    FLD_CHAR_SEPARATE: RunKind.SEPARATE,
    FLD_CHAR_END: RunKind.END,
}


class FieldRunState(Enum):
    """States of the run sequence resolver."""

    SEEK_BEGIN = "seek_begin"
    SEEK_SEPARATOR = "seek_separator"
    SEEK_TEXT = "seek_text"
    SEEK_END = "seek_end"
    DONE = "done"


@dataclass
class FieldRuns:
    """The runs implementing one complex field.

    Every attribute is None when the corresponding run was not found.

    Attributes:
        instruction: Run containing the w:instrText marker
        begin: Run with the begin field character
        separator: Run with the separate field character
        text: Result run carrying the displayed text
        end: Run with the end field character
    """

    instruction: etree._Element | None = None
    begin: etree._Element | None = None
    separator: etree._Element | None = None
    text: etree._Element | None = None
    end: etree._Element | None = None

    @property
    def structural_runs(self) -> list[etree._Element]:
        """Runs removed on replacement (everything but the text run)."""
        runs = [self.instruction, self.begin, self.separator, self.end]
        return [run for run in runs if run is not None]

    @property
    def text_node(self) -> etree._Element | None:
        """First w:t of the text run, if any."""
        if self.text is None:
            return None
        return self.text.find(w("t"))


def resolve_field_runs(field: FieldMarker | etree._Element) -> FieldRuns:
    """Find the runs making up the field around a marker.

    The lookup walks the sibling runs of the instruction run through the
    states SEEK_BEGIN, SEEK_SEPARATOR, SEEK_TEXT and SEEK_END. Each state
    inspects a single run: a run of the expected kind is recorded and the
    search continues after it, any other run is left alone and the next
    state inspects the same position. Nothing is modified.

    Args:
        field: A FieldMarker or a w:instrText element

    Returns:
        FieldRuns with the runs that were found

    Raises:
        InvalidArgumentError: If field is None
        TypeError: If the element is not a w:instrText
    """
    element = _marker_element(field)
    runs = FieldRuns()

    parent = element.getparent()
    if parent is None or parent.tag != w("r"):
        logger.debug("Field marker is not inside a run, nothing to resolve")
        return runs
    runs.instruction = parent

    cursor = parent
    state = FieldRunState.SEEK_BEGIN
    while state is not FieldRunState.DONE:
        if state is FieldRunState.SEEK_BEGIN:
            candidate = _previous_run(parent)
            if _run_kind(candidate) is RunKind.BEGIN:
                runs.begin = candidate
            state = FieldRunState.SEEK_SEPARATOR

        elif state is FieldRunState.SEEK_SEPARATOR:
            candidate = _next_run(cursor)
            if _run_kind(candidate) is RunKind.SEPARATE:
                runs.separator = candidate
                cursor = candidate
            state = FieldRunState.SEEK_TEXT

        elif state is FieldRunState.SEEK_TEXT:
            candidate = _next_run(cursor)
            if _run_kind(candidate) is RunKind.CONTENT:
                runs.text = candidate
                cursor = candidate
            state = FieldRunState.SEEK_END

        elif state is FieldRunState.SEEK_END:
            candidate = _next_run(cursor)
            if _run_kind(candidate) is RunKind.END:
                runs.end = candidate
            state = FieldRunState.DONE

    return runs


def replace_with_text(field: FieldMarker | etree._Element, text: str | None) -> None:
    """Remove a merge field and replace it with the given text.

    The begin, instruction, separator and end runs are removed. The result
    run is kept and its first w:t receives the text. When there is no result
    run (or it has no w:t) the field disappears without replacement text.

    Args:
        field: A FieldMarker or a w:instrText element
        text: The replacement text (None is treated as an empty string)

    Raises:
        InvalidArgumentError: If field is None
        TypeError: If the element is not a w:instrText

    Example:
        >>> marker = get_merge_fields(doc, "FirstName")[0]
        >>> replace_with_text(marker, "Alice")
    """
    runs = resolve_field_runs(field)

    for run in runs.structural_runs:
        _remove(run)
    logger.debug("Removed %d field run(s)", len(runs.structural_runs))

    text_node = runs.text_node
    if text_node is None:
        logger.debug("Field has no result text node, no replacement text inserted")
        return

    _set_text(text_node, text or "")


def replace_all_with_text(
    fields: Iterable[FieldMarker | etree._Element] | None, text: str | None
) -> None:
    """Replace every field in a collection with the same text.

    Args:
        fields: Field markers, e.g. the result of get_merge_fields()
        text: The replacement text (None is treated as an empty string)

    Raises:
        InvalidArgumentError: If fields is None
    """
    if fields is None:
        raise InvalidArgumentError("fields")

    for field in list(fields):
        replace_with_text(field, text)


def replace_with_positional_text(
    fields: Iterable[FieldMarker | etree._Element] | None,
    texts: Iterable[str | None] | None,
    remove_excess: bool = False,
) -> None:
    """Replace fields with texts paired up by position.

    The first field receives the first text, the second field the second
    text, and so on. Fields beyond the end of texts are either replaced with
    an empty string or, with remove_excess, removed along with their whole
    paragraph.

    Args:
        fields: Field markers, e.g. the result of get_merge_fields()
        texts: Replacement values (None entries become empty strings)
        remove_excess: Remove the paragraph of every field without a value
                       instead of blanking the field (default: False)

    Raises:
        InvalidArgumentError: If fields is None

    Example:
        >>> items = get_merge_fields(doc, "LineItem")
        >>> replace_with_positional_text(items, ["Widget", "Gadget"], remove_excess=True)
    """
    if fields is None:
        raise InvalidArgumentError("fields")

    markers = list(fields)
    if not markers:
        return

    values = list(texts) if texts is not None else []
    for index, field in enumerate(markers):
        if index < len(values):
            replace_with_text(field, values[index] or "")
        elif remove_excess:
            paragraph = get_paragraph(_marker_element(field))
            if paragraph is None:
                logger.debug("Excess field %d has no paragraph, skipped", index)
                continue
            _remove(paragraph)
            logger.debug("Removed paragraph of excess field %d", index)
        else:
            replace_with_text(field, "")


def _marker_element(field: FieldMarker | etree._Element | None) -> etree._Element:
    """Unwrap a FieldMarker and check the element is a w:instrText."""
    if field is None:
        raise InvalidArgumentError("field")

    element = field.element if isinstance(field, FieldMarker) else field
    if not isinstance(element, etree._Element) or element.tag != w("instrText"):
        raise TypeError(f"Expected a w:instrText element or FieldMarker, got {field!r}")
    return element


def _previous_run(run: etree._Element) -> etree._Element | None:
    return next(run.itersiblings(w("r"), preceding=True), None)


def _next_run(run: etree._Element) -> etree._Element | None:
    return next(run.itersiblings(w("r")), None)


def _run_kind(run: etree._Element | None) -> RunKind | None:
    """Classify a run by the field character or instruction it holds."""
    if run is None:
        return None

    fld_char = run.find(w("fldChar"))
    if fld_char is not None:
        # Unknown fldCharType values leave the run unclassified
        return _FLD_CHAR_KINDS.get(fld_char.get(w("fldCharType")))

    if run.find(w("instrText")) is not None:
        return RunKind.INSTRUCTION

    return RunKind.CONTENT


def _set_text(text_node: etree._Element, value: str) -> None:
    """Overwrite a w:t value, preserving leading/trailing whitespace."""
    text_node.text = value
    if value and (value[0].isspace() or value[-1].isspace()):
        text_node.set(xml("space"), "preserve")


def _remove(element: etree._Element) -> None:
    parent = element.getparent()
    if parent is not None:
        parent.remove(element)
