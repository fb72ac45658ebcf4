from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from opentelemetry import trace

from src.platform.constant.route_constant import (
    BOOKING_CREATE,
    BOOKING_LIST_BY_USER,
    BOOKING_RAW_LIST,
)
from src.platform.exception.exceptions import PersistenceError
from src.platform.logging.loguru_io import Logger
from src.service.dining.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.dining.app.query.list_bookings_use_case import ListBookingsUseCase
from src.service.dining.driving_adapter.http_controller.schema.booking_schema import (
    BookingCreateRequest,
    BookingResponse,
    BookingWithRestaurantResponse,
    to_booking_responses,
)


router = APIRouter(tags=['booking'])
tracer = trace.get_tracer(__name__)


@router.post(BOOKING_CREATE, status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_booking(
    request: BookingCreateRequest,
    booking_use_case: CreateBookingUseCase = Depends(CreateBookingUseCase.depends),
) -> BookingResponse:
    with tracer.start_as_current_span('controller.create_booking') as span:
        span.set_attribute('restaurant_id', request.restaurant_id)
        span.set_attribute('seats', request.seats)

        booking = await booking_use_case.create_booking(
            user_id=request.user_id,
            restaurant_id=request.restaurant_id,
            date=request.date,
            time=request.time,
            seats=request.seats,
            amount_paid=request.amount_paid,
            confirmation_code=request.confirmation_code,
        )

        if booking.id is None:
            raise PersistenceError('Failed to save booking')

        return BookingResponse.from_entity(booking)


@router.get(BOOKING_LIST_BY_USER)
@Logger.io
async def list_user_bookings(
    user_id: str,
    use_case: ListBookingsUseCase = Depends(ListBookingsUseCase.depends),
) -> List[BookingWithRestaurantResponse]:
    """Bookings of a user with each restaurant expanded. Empty list when there are none."""
    items = await use_case.list_bookings_with_restaurant(user_id=user_id)
    return [BookingWithRestaurantResponse.from_dto(item) for item in items]


@router.get(BOOKING_RAW_LIST)
@Logger.io
async def list_bookings(
    user_id: Optional[str] = Query(None, alias='userId'),
    use_case: ListBookingsUseCase = Depends(ListBookingsUseCase.depends),
) -> List[BookingResponse]:
    bookings = await use_case.list_bookings_for_user(user_id=user_id)
    return to_booking_responses(bookings)
