"""
Unit tests for CreateBookingUseCase

Flow under test:
1. Entity validation (Fail Fast, store untouched)
2. Referenced user / restaurant existence
3. Insert
4. booking_created notification (best-effort)
"""

from datetime import date
from typing import Any
from unittest.mock import AsyncMock, MagicMock, Mock

import pytest

from src.platform.exception.exceptions import DomainError, PersistenceError
from src.service.dining.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.dining.app.interface.i_notification_publisher import NotificationEvent
from src.service.dining.domain.entity.booking_entity import Booking
from test.test_constants import MALFORMED_ID, TEST_RESTAURANT_ID_1, TEST_USER_ID_1


SAVED_BOOKING_ID = '65f1c2a9e4b0a1b2c3d4a001'


@pytest.fixture
def mock_booking_command_repo() -> Mock:
    repo = AsyncMock()
    repo.create = AsyncMock(side_effect=lambda *, booking: booking.with_id(SAVED_BOOKING_ID))
    return repo


@pytest.fixture
def mock_user_query_repo() -> Mock:
    repo = AsyncMock()
    repo.exists = AsyncMock(return_value=True)
    return repo


@pytest.fixture
def mock_restaurant_query_repo() -> Mock:
    repo = AsyncMock()
    repo.exists = AsyncMock(return_value=True)
    return repo


@pytest.fixture
def mock_notification_publisher() -> Mock:
    publisher = MagicMock()
    publisher.publish = MagicMock()
    return publisher


@pytest.fixture
def create_booking_use_case(
    mock_booking_command_repo: Mock,
    mock_user_query_repo: Mock,
    mock_restaurant_query_repo: Mock,
    mock_notification_publisher: Mock,
) -> CreateBookingUseCase:
    return CreateBookingUseCase(
        booking_command_repo=mock_booking_command_repo,
        user_query_repo=mock_user_query_repo,
        restaurant_query_repo=mock_restaurant_query_repo,
        notification_publisher=mock_notification_publisher,
    )


@pytest.fixture
def valid_booking_params() -> dict[str, Any]:
    return {
        'user_id': TEST_USER_ID_1,
        'restaurant_id': TEST_RESTAURANT_ID_1,
        'date': date(2025, 3, 21),
        'time': '19:30',
        'seats': 4,
        'amount_paid': 500,
        'confirmation_code': 'order_NkR7qP4h1XyZ2a',
    }


@pytest.mark.unit
class TestCreateBookingUseCase:
    @pytest.mark.asyncio
    async def test_create_booking_success(
        self,
        create_booking_use_case: CreateBookingUseCase,
        mock_booking_command_repo: Mock,
        mock_notification_publisher: Mock,
        valid_booking_params: dict[str, Any],
    ) -> None:
        # Act
        booking = await create_booking_use_case.create_booking(**valid_booking_params)

        # Assert
        assert isinstance(booking, Booking)
        assert booking.id == SAVED_BOOKING_ID
        assert booking.seats == 4
        mock_booking_command_repo.create.assert_awaited_once()

        mock_notification_publisher.publish.assert_called_once()
        event_name, payload = mock_notification_publisher.publish.call_args.args
        assert event_name == NotificationEvent.BOOKING_CREATED == 'booking_created'
        assert payload['id'] == SAVED_BOOKING_ID
        assert payload['restaurantId'] == TEST_RESTAURANT_ID_1
        assert payload['date'] == '2025-03-21'

    @pytest.mark.asyncio
    async def test_malformed_user_id_fails_before_store(
        self,
        create_booking_use_case: CreateBookingUseCase,
        mock_booking_command_repo: Mock,
        mock_user_query_repo: Mock,
        valid_booking_params: dict[str, Any],
    ) -> None:
        # Arrange
        valid_booking_params['user_id'] = MALFORMED_ID

        # Act & Assert
        with pytest.raises(DomainError, match='Invalid userId format'):
            await create_booking_use_case.create_booking(**valid_booking_params)

        mock_user_query_repo.exists.assert_not_awaited()
        mock_booking_command_repo.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_zero_seats_rejected(
        self,
        create_booking_use_case: CreateBookingUseCase,
        mock_booking_command_repo: Mock,
        valid_booking_params: dict[str, Any],
    ) -> None:
        valid_booking_params['seats'] = 0

        with pytest.raises(DomainError):
            await create_booking_use_case.create_booking(**valid_booking_params)

        mock_booking_command_repo.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_user_rejected(
        self,
        create_booking_use_case: CreateBookingUseCase,
        mock_user_query_repo: Mock,
        mock_booking_command_repo: Mock,
        valid_booking_params: dict[str, Any],
    ) -> None:
        mock_user_query_repo.exists.return_value = False

        with pytest.raises(DomainError, match='Referenced user does not exist'):
            await create_booking_use_case.create_booking(**valid_booking_params)

        mock_booking_command_repo.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_restaurant_rejected(
        self,
        create_booking_use_case: CreateBookingUseCase,
        mock_restaurant_query_repo: Mock,
        mock_booking_command_repo: Mock,
        valid_booking_params: dict[str, Any],
    ) -> None:
        mock_restaurant_query_repo.exists.return_value = False

        with pytest.raises(DomainError, match='Referenced restaurant does not exist'):
            await create_booking_use_case.create_booking(**valid_booking_params)

        mock_booking_command_repo.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_persistence_failure_propagates_without_notification(
        self,
        create_booking_use_case: CreateBookingUseCase,
        mock_booking_command_repo: Mock,
        mock_notification_publisher: Mock,
        valid_booking_params: dict[str, Any],
    ) -> None:
        mock_booking_command_repo.create.side_effect = PersistenceError('Failed to save booking')

        with pytest.raises(PersistenceError):
            await create_booking_use_case.create_booking(**valid_booking_params)

        mock_notification_publisher.publish.assert_not_called()

    @pytest.mark.asyncio
    async def test_notification_failure_does_not_fail_booking(
        self,
        create_booking_use_case: CreateBookingUseCase,
        mock_notification_publisher: Mock,
        valid_booking_params: dict[str, Any],
    ) -> None:
        mock_notification_publisher.publish.side_effect = RuntimeError('channel broken')

        booking = await create_booking_use_case.create_booking(**valid_booking_params)

        assert booking.id == SAVED_BOOKING_ID

    @pytest.mark.asyncio
    async def test_duplicate_bookings_are_not_prevented(
        self,
        create_booking_use_case: CreateBookingUseCase,
        mock_booking_command_repo: Mock,
        valid_booking_params: dict[str, Any],
    ) -> None:
        await create_booking_use_case.create_booking(**valid_booking_params)
        await create_booking_use_case.create_booking(**valid_booking_params)

        assert mock_booking_command_repo.create.await_count == 2
