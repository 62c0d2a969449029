"""
Compatibility helpers for integrating with python-docx.

python-docx owns the document package: it opens and saves the .docx file and
exposes the main document part together with its related header and footer
parts. This module turns a loaded python-docx Document into the ordered list
of parts the locator searches.
"""

from __future__ import annotations

import logging
from typing import Any

from docx.document import Document as PythonDocxDocument
from docx.opc.constants import RELATIONSHIP_TYPE as RT

from .models.part import DocumentPart, PartKind

logger = logging.getLogger(__name__)

# Related part kinds in the order they are searched after the main part
_RELATED_PART_TYPES = (
    (PartKind.HEADER, RT.HEADER),
    (PartKind.FOOTER, RT.FOOTER),
)


def is_python_docx_document(obj: Any) -> bool:
    """Check whether an object is a python-docx Document."""
    return isinstance(obj, PythonDocxDocument)


def document_parts(document: Any) -> list[DocumentPart]:
    """List the parts of a python-docx Document that can hold merge fields.

    The main document part comes first, followed by every header part and
    then every footer part. Header and footer parts are listed in the order
    of the main part's relationships. A part reached through more than one
    relationship is listed once.

    Args:
        document: A python-docx Document object

    Returns:
        List of DocumentPart records

    Raises:
        TypeError: If the input is not a python-docx Document

    Example:
        >>> from docx import Document
        >>> doc = Document("letter.docx")
        >>> [part.kind.value for part in document_parts(doc)]
        ['main', 'header', 'footer']
    """
    if not is_python_docx_document(document):
        raise TypeError(
            f"Expected python-docx Document, got {type(document).__name__}. "
            "Pass a Document object created with: from docx import Document"
        )

    main_part = document.part
    parts = [DocumentPart(PartKind.MAIN, document.element, str(main_part.partname))]
    seen: set[str] = {str(main_part.partname)}

    relationships = list(main_part.rels.values())
    for kind, reltype in _RELATED_PART_TYPES:
        for rel in relationships:
            if rel.is_external or rel.reltype != reltype:
                continue

            target = rel.target_part
            partname = str(target.partname)
            if partname in seen:
                continue
            seen.add(partname)

            element = getattr(target, "element", None)
            if element is None:
                logger.debug("Skipping %s part without XML element: %s", kind.value, partname)
                continue
            parts.append(DocumentPart(kind, element, partname))

    return parts
