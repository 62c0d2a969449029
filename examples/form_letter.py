"""
Example filling a form letter template with merge field values.

The template is expected to contain single-value fields (FirstName, Company)
and a list of LineItem fields, one per paragraph. Line items without a value
have their paragraph removed.

Usage:
    python examples/form_letter.py template.docx output.docx
"""

import logging
import sys

from docx import Document

from docx_mergefield import get_merge_fields, replace_all_with_text, replace_with_positional_text


def main(template_path: str, output_path: str) -> None:
    """Fill the template and save the result."""
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    doc = Document(template_path)

    print("Fields in template:")
    for marker in get_merge_fields(doc):
        print(f"   {marker.part.value:<7} {marker.name or marker.instruction.strip()}")

    replace_all_with_text(get_merge_fields(doc, "FirstName"), "Alice")
    replace_all_with_text(get_merge_fields(doc, "Company"), "Acme Corp")

    line_items = get_merge_fields(doc, "LineItem")
    replace_with_positional_text(line_items, ["Widget x 10", "Gadget x 3"], remove_excess=True)

    doc.save(output_path)
    print(f"\nSaved to {output_path}")


if __name__ == "__main__":
    if len(sys.argv) != 3:
        print(__doc__)
        sys.exit(1)
    main(sys.argv[1], sys.argv[2])
