"""Base domain error class for Railway-Oriented Programming.

DomainError is the base class for every error this package returns.
Errors flow through the system as data (Result types), not exceptions.

Architecture:
- Does NOT inherit from Exception (not raised, returned in Result)
- Uses dataclass inheritance (NOT Protocol/ABC)
- Optional ``cause`` keeps the underlying failure (a library exception or a
  lower-level DomainError) without taking part in equality

Usage:
    from credguard.core.errors import DomainError
    from credguard.core.enums import ErrorCode

    @dataclass(frozen=True, slots=True, kw_only=True)
    class MyError(DomainError):
        pass  # Inherits code, message, details, cause
"""

from dataclasses import dataclass, field

from credguard.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error (does NOT inherit from Exception).

    Two errors compare equal when their code, message and details match.
    The cause is carried for diagnostics only.

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable error message.
        details: Optional context for debugging.
        cause: Optional underlying failure that produced this error.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None
    cause: "DomainError | BaseException | None" = field(
        default=None, compare=False, repr=False
    )

    def is_kind(self, code: ErrorCode) -> bool:
        """Return True when this error carries the given code."""
        return self.code is code

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"
