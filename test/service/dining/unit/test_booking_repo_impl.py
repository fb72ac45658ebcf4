from datetime import date
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

from bson import ObjectId
import pytest
from pymongo import ASCENDING
from pymongo.errors import ServerSelectionTimeoutError

from src.platform.exception.exceptions import PersistenceError
from src.service.dining.domain.entity.booking_entity import Booking
from src.service.dining.driven_adapter.repo.booking_command_repo_impl import (
    BookingCommandRepoImpl,
)
from src.service.dining.driven_adapter.repo.booking_query_repo_impl import BookingQueryRepoImpl
from test.test_constants import TEST_RESTAURANT_ID_1, TEST_USER_ID_1


@pytest.fixture
def mock_collection() -> MagicMock:
    return MagicMock()


@pytest.fixture
def mock_database(mock_collection: MagicMock) -> MagicMock:
    database = MagicMock()
    database.collection.return_value = mock_collection
    return database


def _new_booking() -> Booking:
    return Booking(
        user_id=TEST_USER_ID_1,
        restaurant_id=TEST_RESTAURANT_ID_1,
        date=date(2025, 3, 21),
        time='19:30',
        seats=2,
        amount_paid=250.0,
        confirmation_code='order_abc',
    )


@pytest.mark.unit
class TestBookingCommandRepoImpl:
    @pytest.mark.asyncio
    async def test_create_returns_booking_with_generated_id(
        self, mock_database: MagicMock, mock_collection: MagicMock
    ) -> None:
        inserted_id = ObjectId()
        mock_collection.insert_one = AsyncMock(
            return_value=SimpleNamespace(inserted_id=inserted_id)
        )
        repo = BookingCommandRepoImpl(database=mock_database)

        saved = await repo.create(booking=_new_booking())

        assert saved.id == str(inserted_id)
        document = mock_collection.insert_one.await_args.args[0]
        assert document['userId'] == ObjectId(TEST_USER_ID_1)

    @pytest.mark.asyncio
    async def test_driver_error_becomes_persistence_error(
        self, mock_database: MagicMock, mock_collection: MagicMock
    ) -> None:
        mock_collection.insert_one = AsyncMock(
            side_effect=ServerSelectionTimeoutError('no servers')
        )
        repo = BookingCommandRepoImpl(database=mock_database)

        with pytest.raises(PersistenceError) as exc_info:
            await repo.create(booking=_new_booking())

        # Driver detail is logged, never returned
        assert exc_info.value.message == 'Failed to save booking'


@pytest.mark.unit
class TestBookingQueryRepoImpl:
    @pytest.mark.asyncio
    async def test_list_by_user_in_insertion_order(
        self, mock_database: MagicMock, mock_collection: MagicMock
    ) -> None:
        first, second = ObjectId(), ObjectId()
        cursor = MagicMock()
        cursor.sort.return_value = cursor
        cursor.to_list = AsyncMock(
            return_value=[
                {
                    '_id': oid,
                    'userId': ObjectId(TEST_USER_ID_1),
                    'restaurantId': ObjectId(TEST_RESTAURANT_ID_1),
                    'date': '2025-03-21',
                    'time': '19:30',
                    'seats': 2,
                    'amountPaid': 0,
                    'confirmationCode': 'order_abc',
                }
                for oid in (first, second)
            ]
        )
        mock_collection.find.return_value = cursor
        repo = BookingQueryRepoImpl(database=mock_database)

        bookings = await repo.list_by_user(user_id=TEST_USER_ID_1)

        mock_collection.find.assert_called_once_with({'userId': ObjectId(TEST_USER_ID_1)})
        cursor.sort.assert_called_once_with('_id', ASCENDING)
        assert [b.id for b in bookings] == [str(first), str(second)]

    @pytest.mark.asyncio
    async def test_list_by_user_empty(
        self, mock_database: MagicMock, mock_collection: MagicMock
    ) -> None:
        cursor = MagicMock()
        cursor.sort.return_value = cursor
        cursor.to_list = AsyncMock(return_value=[])
        mock_collection.find.return_value = cursor
        repo = BookingQueryRepoImpl(database=mock_database)

        assert await repo.list_by_user(user_id=TEST_USER_ID_1) == []
