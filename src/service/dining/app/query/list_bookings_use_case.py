from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.service.dining.app.dto import BookingWithRestaurant
from src.service.dining.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.dining.app.interface.i_restaurant_query_repo import IRestaurantQueryRepo
from src.service.dining.domain.entity.booking_entity import Booking
from src.service.dining.domain.identity_validator import require_valid_identifier


class ListBookingsUseCase:
    """
    Bookings owned by a user, in insertion order.

    A user with no bookings gets an empty list, never an error.
    """

    def __init__(
        self,
        *,
        booking_query_repo: IBookingQueryRepo,
        restaurant_query_repo: IRestaurantQueryRepo,
    ) -> None:
        self.booking_query_repo = booking_query_repo
        self.restaurant_query_repo = restaurant_query_repo
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        booking_query_repo: IBookingQueryRepo = Depends(Provide[Container.booking_query_repo]),
        restaurant_query_repo: IRestaurantQueryRepo = Depends(
            Provide[Container.restaurant_query_repo]
        ),
    ) -> Self:
        return cls(
            booking_query_repo=booking_query_repo,
            restaurant_query_repo=restaurant_query_repo,
        )

    @Logger.io
    async def list_bookings_for_user(self, *, user_id: str | None) -> List[Booking]:
        """
        Raises:
            DomainError: user_id missing or malformed (store not touched)
            PersistenceError: store unreachable
        """
        with self.tracer.start_as_current_span('use_case.list_bookings'):
            user_id = require_valid_identifier(user_id, field='userId')
            bookings = await self.booking_query_repo.list_by_user(user_id=user_id)
            metrics.record_booking_lookup(expanded=False, found=bool(bookings))
            return bookings

    @Logger.io
    async def list_bookings_with_restaurant(
        self, *, user_id: str | None
    ) -> List[BookingWithRestaurant]:
        """Same as list_bookings_for_user, with each restaurant reference resolved in one batch."""
        with self.tracer.start_as_current_span('use_case.list_bookings_with_restaurant'):
            user_id = require_valid_identifier(user_id, field='userId')
            bookings = await self.booking_query_repo.list_by_user(user_id=user_id)
            metrics.record_booking_lookup(expanded=True, found=bool(bookings))
            if not bookings:
                return []

            restaurants = await self.restaurant_query_repo.get_by_ids(
                restaurant_ids={b.restaurant_id for b in bookings}
            )
            return [
                BookingWithRestaurant(booking=b, restaurant=restaurants.get(b.restaurant_id))
                for b in bookings
            ]
