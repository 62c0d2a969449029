"""
Centralized constants for OOXML namespaces and merge field literals.

Import from here rather than repeating namespace URLs or field instruction
strings in individual modules.
"""

# =============================================================================
# Word Processing Namespaces
# =============================================================================

# Main WordprocessingML namespace (Word 2007+)
WORD_NAMESPACE = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"

# XML namespace (xml:space)
XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"

# Basic namespace map with just the main Word namespace
NSMAP = {"w": WORD_NAMESPACE}


# =============================================================================
# Field Instruction Literals
# =============================================================================

# Keyword that opens a merge field instruction
MERGEFIELD_KEYWORD = "MERGEFIELD"

# Canonical start of a merge field instruction as Word writes it:
# one leading space, the keyword, then two spaces before the name.
MERGEFIELD_PREFIX = " MERGEFIELD  "

# Name substituted when a blank name is used to filter an existing collection
NO_NAME_PLACEHOLDER = "<NoNameMergeField>"

# w:fldCharType values
FLD_CHAR_BEGIN = "begin"
FLD_CHAR_SEPARATE = "separate"
FLD_CHAR_END = "end"


# =============================================================================
# Helper Functions
# =============================================================================


def w(tag: str) -> str:
    """Create a fully qualified Word namespace tag.

    Args:
        tag: Tag name without namespace prefix (e.g., "p", "r", "instrText")

    Returns:
        Fully qualified tag (e.g., "{http://...wordprocessingml/2006/main}p")

    Example:
        >>> w("p")
        '{http://schemas.openxmlformats.org/wordprocessingml/2006/main}p'
    """
    return f"{{{WORD_NAMESPACE}}}{tag}"


def xml(tag: str) -> str:
    """Create a fully qualified XML namespace attribute name.

    Args:
        tag: Attribute name without prefix (e.g., "space")

    Returns:
        Fully qualified name with the XML namespace
    """
    return f"{{{XML_NAMESPACE}}}{tag}"
