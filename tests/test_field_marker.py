"""Tests for the FieldMarker handle."""

from lxml import etree

from docx_mergefield import FieldMarker, PartKind

WORD_NAMESPACE = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"


def create_marker(instruction: str | None, part: PartKind = PartKind.MAIN) -> FieldMarker:
    """Create a marker inside a run inside a paragraph."""
    paragraph = etree.fromstring(
        f'<w:p xmlns:w="{WORD_NAMESPACE}"><w:r><w:instrText/></w:r></w:p>'
    )
    instr = paragraph.find(f".//{{{WORD_NAMESPACE}}}instrText")
    instr.text = instruction
    return FieldMarker(instr, part)


class TestFieldMarkerName:
    """Test name parsing."""

    def test_simple_name(self):
        """The token after MERGEFIELD is the name."""
        assert create_marker(" MERGEFIELD  FirstName ").name == "FirstName"

    def test_name_with_switches(self):
        """Switches after the name are ignored."""
        marker = create_marker(' MERGEFIELD  Total \\# "0.00" \\* MERGEFORMAT ')

        assert marker.name == "Total"

    def test_quoted_name(self):
        """Surrounding double quotes are stripped."""
        assert create_marker(' MERGEFIELD  "FirstName" ').name == "FirstName"

    def test_blank_name(self):
        """A MERGEFIELD without a name has no name."""
        assert create_marker(" MERGEFIELD   ").name is None

    def test_non_merge_field(self):
        """Other field types have no name."""
        marker = create_marker(" PAGE ")

        assert marker.name is None
        assert not marker.is_merge_field

    def test_empty_instruction(self):
        """A marker without text has an empty instruction."""
        marker = create_marker(None)

        assert marker.instruction == ""
        assert marker.name is None
        assert not marker.is_merge_field


class TestFieldMarkerStructure:
    """Test navigation properties."""

    def test_run_and_paragraph(self):
        """The marker exposes its run and paragraph."""
        marker = create_marker(" MERGEFIELD  A ")

        assert marker.run.tag == f"{{{WORD_NAMESPACE}}}r"
        assert marker.paragraph.tag == f"{{{WORD_NAMESPACE}}}p"
        assert marker.is_attached

    def test_detached_marker(self):
        """A marker without a run is not attached."""
        instr = etree.fromstring(f'<w:instrText xmlns:w="{WORD_NAMESPACE}"> PAGE </w:instrText>')
        marker = FieldMarker(instr)

        assert marker.run is None
        assert marker.paragraph is None
        assert not marker.is_attached
        assert marker.part is PartKind.FRAGMENT

    def test_equality_follows_element(self):
        """Markers wrapping the same element are equal and hash alike."""
        marker = create_marker(" MERGEFIELD  A ", PartKind.HEADER)
        same = FieldMarker(marker.element, PartKind.HEADER)
        other = create_marker(" MERGEFIELD  A ", PartKind.HEADER)

        assert marker == same
        assert hash(marker) == hash(same)
        assert marker != other

    def test_repr(self):
        """The repr shows the part kind and instruction."""
        marker = create_marker(" MERGEFIELD  A ", PartKind.FOOTER)

        assert repr(marker) == "<FieldMarker footer: 'MERGEFIELD  A'>"
