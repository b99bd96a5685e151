"""
Tests executing duty operations against the Strawberry schema
"""

from unittest.mock import AsyncMock, patch

import pytest
from graphql import GraphQLError

from duties.errors import InternalError
from duties.graphql.schema import format_error, schema, validate_schema
from duties.graphql.types.duty import Duty
from duties.result import Err, Ok

DUTY_ID = "3c649136-a832-4f13-a526-edeb27ab6299"


def test_schema_is_valid():
    validate_schema()


def test_schema_exposes_duty_operations():
    sdl = schema.as_str()

    assert "duties: [Duty!]!" in sdl
    assert "createDuty(name: String!): Duty!" in sdl
    assert "updateDuty(id: String!, name: String!): Duty!" in sdl
    assert "deleteDuty(id: String!): Duty!" in sdl


class TestQueries:
    @pytest.mark.asyncio
    async def test_duties(self):
        with patch("duties.repository.list_duties", new_callable=AsyncMock) as list_duties:
            list_duties.return_value = Ok([Duty(id=DUTY_ID, name="Duty 1")])

            result = await schema.execute("query Duties { duties { id name } }")

        assert result.errors is None
        assert result.data == {"duties": [{"id": DUTY_ID, "name": "Duty 1"}]}

    @pytest.mark.asyncio
    async def test_duties_database_failure(self):
        with patch("duties.repository.list_duties", new_callable=AsyncMock) as list_duties:
            list_duties.return_value = Err(InternalError())

            result = await schema.execute("query Duties { duties { id name } }")

        assert result.data is None
        assert len(result.errors) == 1
        assert result.errors[0].message == "Unknown error"
        assert result.errors[0].extensions == {"code": "INTERNAL_SERVER_ERROR"}


class TestMutations:
    @pytest.mark.asyncio
    async def test_create_duty_invalid_input(self):
        result = await schema.execute('mutation { createDuty(name: "") { id name } }')

        assert result.data is None
        assert result.errors[0].message == "Invalid user input"
        assert result.errors[0].extensions == {"code": "BAD_USER_INPUT"}

    @pytest.mark.asyncio
    async def test_create_duty(self):
        with (
            patch("duties.repository.exists", new_callable=AsyncMock) as exists,
            patch("duties.repository.insert_duty", new_callable=AsyncMock) as insert_duty,
        ):
            exists.return_value = Ok(False)
            insert_duty.side_effect = lambda id, name: Ok(Duty(id=id, name=name))

            result = await schema.execute(
                "mutation CreateDuty($name: String!) { createDuty(name: $name) { id name } }",
                variable_values={"name": "Duty 1"},
            )

        assert result.errors is None
        assert result.data["createDuty"]["name"] == "Duty 1"
        assert result.data["createDuty"]["id"]

    @pytest.mark.asyncio
    async def test_update_duty_not_found(self):
        with (
            patch("duties.repository.exists", new_callable=AsyncMock) as exists,
            patch("duties.repository.update_duty", new_callable=AsyncMock) as update_duty,
        ):
            exists.return_value = Ok(False)

            result = await schema.execute(
                'mutation { updateDuty(id: "X", name: "Y") { id name } }'
            )

        update_duty.assert_not_called()
        assert result.errors[0].message == "Duty not found"
        assert result.errors[0].extensions == {"code": "BAD_USER_INPUT"}

    @pytest.mark.asyncio
    async def test_delete_duty(self):
        with (
            patch("duties.repository.exists", new_callable=AsyncMock) as exists,
            patch("duties.repository.remove_duty", new_callable=AsyncMock) as remove_duty,
        ):
            exists.return_value = Ok(True)
            remove_duty.return_value = Ok(Duty(id=DUTY_ID, name="Duty 1"))

            result = await schema.execute(
                f'mutation {{ deleteDuty(id: "{DUTY_ID}") {{ id name }} }}'
            )

        assert result.errors is None
        assert result.data == {"deleteDuty": {"id": DUTY_ID, "name": "Duty 1"}}


class TestFormatError:
    def _error(self) -> GraphQLError:
        return GraphQLError(
            "Duty not found",
            extensions={"code": "BAD_USER_INPUT", "stacktrace": ["line 1"]},
        )

    def test_development_keeps_full_error(self):
        formatted = format_error(self._error(), development=True)

        assert formatted["message"] == "Duty not found"
        assert formatted["extensions"] == {"code": "BAD_USER_INPUT", "stacktrace": ["line 1"]}

    def test_production_keeps_only_message_and_code(self):
        formatted = format_error(self._error(), development=False)

        assert formatted == {"message": "Duty not found", "extensions": {"code": "BAD_USER_INPUT"}}

    def test_production_error_without_code(self):
        formatted = format_error(GraphQLError("Syntax Error"), development=False)

        assert formatted == {"message": "Syntax Error"}
