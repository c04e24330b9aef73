"""
LT-Signer Custom Exception Classes

- Explicit error types for each failure mode
- All exceptions carry context for logging
"""

from typing import Optional, Dict, Any


class SignerError(Exception):
    """
    Base exception for all LT-Signer errors.

    Attributes:
        message: Human-readable error description
        context: Additional context for debugging (path, etc.)
        original_error: Wrapped exception if this is a re-raise
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None
    ):
        self.message = message
        self.context = context or {}
        self.original_error = original_error
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dict for logging/serialization."""
        return {
            'error_type': self.__class__.__name__,
            'message': self.message,
            'context': self.context,
            'original_error': str(self.original_error) if self.original_error else None
        }


class UsageError(SignerError):
    """
    Raised when the command line is missing the body file path.

    Example:
        raise UsageError(USAGE)
    """
    pass


class FileReadError(SignerError):
    """
    Raised when the body file cannot be read or decoded as UTF-8.

    Covers missing files, permission errors, directories and invalid
    UTF-8. The underlying OSError/UnicodeDecodeError is kept in
    ``original_error``.

    Example:
        raise FileReadError(
            f"Error reading file: {path}",
            context={'path': str(path)},
            original_error=e
        )
    """

    def __str__(self) -> str:
        if self.original_error is not None:
            return f"{self.message}\n{self.original_error}"
        return self.message


class SignatureMismatchError(SignerError):
    """Raised when a candidate signature does not match the body."""
    pass
