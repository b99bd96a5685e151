"""
Tests for result values and classified errors
"""

from graphql import GraphQLError

from duties.errors import (
    DuplicateName,
    ErrorCode,
    InternalError,
    InvalidInput,
    NotFound,
)
from duties.result import Err, Ok


class TestResult:
    def test_ok(self):
        result = Ok(42)

        assert result.is_ok()
        assert not result.is_err()
        assert result.value == 42

    def test_err(self):
        result = Err(NotFound())

        assert result.is_err()
        assert not result.is_ok()
        assert result.error == NotFound()

    def test_equality(self):
        assert Ok([1]) == Ok([1])
        assert Err(NotFound()) == Err(NotFound())
        assert Err(NotFound()) != Err(InvalidInput())
        assert Ok(False) != Err(InternalError())


class TestErrors:
    def test_codes(self):
        assert InvalidInput().code is ErrorCode.BAD_USER_INPUT
        assert DuplicateName().code is ErrorCode.BAD_USER_INPUT
        assert NotFound().code is ErrorCode.BAD_USER_INPUT
        assert InternalError().code is ErrorCode.INTERNAL_SERVER_ERROR

    def test_default_messages(self):
        assert InvalidInput().message == "Invalid user input"
        assert DuplicateName().message == "Duty already existed"
        assert NotFound().message == "Duty not found"
        assert InternalError().message == "Unknown error"

    def test_internal_error_from_exception(self):
        assert InternalError.from_exception(RuntimeError("boom")).message == "boom"
        assert InternalError.from_exception(RuntimeError()).message == "Unknown error"

    def test_same_message_different_type_not_equal(self):
        assert InternalError("Duty not found") != NotFound()

    def test_to_graphql_error(self):
        error = DuplicateName("Duty's name already exist").to_graphql_error()

        assert isinstance(error, GraphQLError)
        assert error.message == "Duty's name already exist"
        assert error.extensions == {"code": "BAD_USER_INPUT"}
