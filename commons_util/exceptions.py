"""
Exceptions raised by the parsing helpers.
"""

from typing import Optional


class InvalidFormatError(ValueError):
    """
    Raised when a date pattern is invalid or a string holds no embedded date.

    Attributes:
        text: The string that was searched (None when the pattern itself was rejected)
        regex: The search expression derived from the pattern, if one was built
        pattern: The date pattern supplied by the caller
    """

    def __init__(
        self,
        message: str,
        text: Optional[str] = None,
        regex: Optional[str] = None,
        pattern: Optional[str] = None
    ):
        super().__init__(message)
        self.text = text
        self.regex = regex
        self.pattern = pattern
