"""
Classified errors surfaced by the Duties API
"""

from __future__ import annotations

from enum import Enum

from graphql import GraphQLError

UNKNOWN_ERROR_MESSAGE = "Unknown error"


class ErrorCode(str, Enum):
    """Error codes exposed in ``extensions.code`` of GraphQL errors."""

    BAD_USER_INPUT = "BAD_USER_INPUT"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class DutyError:
    """Base class for errors returned by the repository and resolvers.

    Instances are values carried inside ``Err`` results rather than raised.
    """

    code: ErrorCode = ErrorCode.INTERNAL_SERVER_ERROR
    default_message: str = UNKNOWN_ERROR_MESSAGE

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DutyError):
            return NotImplemented
        return type(self) is type(other) and self.message == other.message

    def __hash__(self) -> int:
        return hash((type(self), self.message))

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"

    def to_graphql_error(self) -> GraphQLError:
        """Convert to a GraphQL error carrying the error code extension."""
        return GraphQLError(self.message, extensions={"code": self.code.value})


class InvalidInput(DutyError):
    """A required argument is missing or empty."""

    code = ErrorCode.BAD_USER_INPUT
    default_message = "Invalid user input"


class DuplicateName(DutyError):
    """Another duty already uses the requested name."""

    code = ErrorCode.BAD_USER_INPUT
    default_message = "Duty already existed"


class NotFound(DutyError):
    """No duty exists with the requested id."""

    code = ErrorCode.BAD_USER_INPUT
    default_message = "Duty not found"


class InternalError(DutyError):
    """Storage failure normalized at the repository boundary."""

    code = ErrorCode.INTERNAL_SERVER_ERROR

    @classmethod
    def from_exception(cls, exc: BaseException) -> InternalError:
        return cls(str(exc) or None)
