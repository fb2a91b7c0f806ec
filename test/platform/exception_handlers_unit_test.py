import json

import pytest

from src.platform.exception.exception_handlers import custom_error_handler
from src.platform.exception.exceptions import (
    CapacityError,
    StateConflictError,
    TransientError,
)


def _body(response) -> dict:
    return json.loads(response.body)


@pytest.mark.unit
class TestCustomErrorHandler:
    @pytest.mark.asyncio
    async def test_capacity_error_names_the_ticket_type(self) -> None:
        response = await custom_error_handler(
            None,  # type: ignore[arg-type]
            CapacityError(ticket_type_id=5, ticket_type_name='VIP', requested=3),
        )

        assert response.status_code == 409
        assert _body(response) == {
            'detail': 'Not enough tickets available for VIP',
            'ticket_type_id': 5,
        }

    @pytest.mark.asyncio
    async def test_transient_error_is_flagged_retryable(self) -> None:
        response = await custom_error_handler(
            None,  # type: ignore[arg-type]
            TransientError('Store temporarily unavailable, please retry'),
        )

        assert response.status_code == 503
        assert _body(response)['retryable'] is True

    @pytest.mark.asyncio
    async def test_state_conflict_is_409_without_retry_hint(self) -> None:
        response = await custom_error_handler(
            None,  # type: ignore[arg-type]
            StateConflictError('Cannot move order from paid to cancelled'),
        )

        assert response.status_code == 409
        assert 'retryable' not in _body(response)
