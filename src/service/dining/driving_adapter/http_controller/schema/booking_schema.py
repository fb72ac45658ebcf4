import datetime
from typing import List, Optional

from pydantic import ConfigDict, StrictFloat, StrictInt

from src.platform.types import ObjectIdStr
from src.service.dining.app.dto import BookingWithRestaurant
from src.service.dining.domain.entity.booking_entity import Booking
from src.service.dining.driving_adapter.http_controller.schema.camel_model import CamelModel
from src.service.dining.driving_adapter.http_controller.schema.restaurant_schema import (
    RestaurantResponse,
)


class BookingCreateRequest(CamelModel):
    # Ids and time are checked by the domain so callers get field-specific messages
    user_id: str
    restaurant_id: str
    date: datetime.date
    time: str
    # No coercion from JSON booleans or numeric strings
    seats: StrictInt
    amount_paid: StrictFloat
    confirmation_code: str

    model_config = ConfigDict(
        json_schema_extra={
            'examples': [
                {
                    'userId': '65f1c2a9e4b0a1b2c3d4e5f6',
                    'restaurantId': '65f1c2a9e4b0a1b2c3d4e5f7',
                    'date': '2025-03-21',
                    'time': '19:30',
                    'seats': 4,
                    'amountPaid': 500,
                    'confirmationCode': 'order_NkR7qP4h1XyZ2a',
                }
            ]
        }
    )


class BookingResponse(CamelModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'id': '65f1c2a9e4b0a1b2c3d4e5f8',
                'userId': '65f1c2a9e4b0a1b2c3d4e5f6',
                'restaurantId': '65f1c2a9e4b0a1b2c3d4e5f7',
                'date': '2025-03-21',
                'time': '19:30',
                'seats': 4,
                'amountPaid': 500.0,
                'confirmationCode': 'order_NkR7qP4h1XyZ2a',
                'createdAt': '2025-03-20T10:30:00Z',
            }
        },
    )

    id: ObjectIdStr
    user_id: ObjectIdStr
    restaurant_id: ObjectIdStr
    date: datetime.date
    time: str
    seats: int
    amount_paid: float
    confirmation_code: str
    created_at: Optional[datetime.datetime] = None

    @classmethod
    def from_entity(cls, booking: Booking) -> 'BookingResponse':
        return cls(
            id=booking.id,
            user_id=booking.user_id,
            restaurant_id=booking.restaurant_id,
            date=booking.date,
            time=booking.time,
            seats=booking.seats,
            amount_paid=booking.amount_paid,
            confirmation_code=booking.confirmation_code,
            created_at=booking.created_at,
        )


class BookingWithRestaurantResponse(CamelModel):
    """Booking with `restaurantId` replaced by the restaurant document (null when it is gone)"""

    id: ObjectIdStr
    user_id: ObjectIdStr
    restaurant_id: Optional[RestaurantResponse]
    date: datetime.date
    time: str
    seats: int
    amount_paid: float
    confirmation_code: str
    created_at: Optional[datetime.datetime] = None

    @classmethod
    def from_dto(cls, item: BookingWithRestaurant) -> 'BookingWithRestaurantResponse':
        booking = item.booking
        return cls(
            id=booking.id,
            user_id=booking.user_id,
            restaurant_id=(
                RestaurantResponse.from_entity(item.restaurant) if item.restaurant else None
            ),
            date=booking.date,
            time=booking.time,
            seats=booking.seats,
            amount_paid=booking.amount_paid,
            confirmation_code=booking.confirmation_code,
            created_at=booking.created_at,
        )


def to_booking_responses(bookings: List[Booking]) -> List[BookingResponse]:
    return [BookingResponse.from_entity(b) for b in bookings]
