"""Exception classes for codetint.

Provides standardized exceptions for error handling throughout codetint.
Tokenizers themselves never raise for malformed source text; errors are
reserved for caller contract violations.
"""

from __future__ import annotations


class CodetintError(Exception):
    """Base exception for all codetint errors.

    Subclass this for specific error categories.
    """

    pass


class UnknownLanguageError(CodetintError, ValueError):
    """Raised when a language selector does not name a supported language."""

    def __init__(self, language: object) -> None:
        """Initialize with the rejected selector.

        Args:
            language: The value that could not be resolved
        """
        self.language = language
        super().__init__(f"Unknown language: {language!r}")


class PlaceholderMismatchError(CodetintError):
    """Raised when a restoration pass does not consume its extraction exactly.

    Every extraction produces one marker per match; restoring must find
    exactly that many markers in the rewritten text.
    """

    def __init__(self, expected: int, found: int) -> None:
        """Initialize placeholder mismatch error.

        Args:
            expected: Number of extracted substrings waiting to be restored
            found: Number of markers present in the text
        """
        self.expected = expected
        self.found = found
        super().__init__(
            f"Placeholder mismatch: {expected} extracted substring(s), "
            f"{found} marker(s) in text"
        )


class ThemeError(CodetintError):
    """Error in theme configuration.

    Raised when a theme is neither a preset name nor a mapping of
    namespaces to token styles.
    """

    pass
