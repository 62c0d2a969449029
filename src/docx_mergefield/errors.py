"""
Custom exception classes for the docx_mergefield package.

Only missing required inputs are reported as errors. Structural gaps in the
document (absent field runs, absent paragraphs) are tolerated by the locator
and replacer and never raise.
"""


class DocxMergeFieldError(Exception):
    """Base exception for all docx_mergefield errors."""

    pass


class InvalidArgumentError(DocxMergeFieldError, ValueError):
    """Raised when a required argument is None.

    Attributes:
        argument: Name of the offending parameter
        hint: Optional extra context shown after the message
    """

    def __init__(self, argument: str, hint: str | None = None) -> None:
        self.argument = argument
        self.hint = hint
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message."""
        msg = f"Argument '{self.argument}' must not be None"
        if self.hint:
            msg += f"\n\nNote: {self.hint}"
        return msg
