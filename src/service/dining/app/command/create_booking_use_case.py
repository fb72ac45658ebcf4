from datetime import date
from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.exception.exceptions import DomainError, PersistenceError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.service.dining.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.dining.app.interface.i_notification_publisher import (
    INotificationPublisher,
    NotificationEvent,
)
from src.service.dining.app.interface.i_restaurant_query_repo import IRestaurantQueryRepo
from src.service.dining.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.dining.domain.entity.booking_entity import Booking


class CreateBookingUseCase:
    """
    Create booking use case

    Flow:
    1. Build the Booking entity (format + invariant checks, Fail Fast, no store access)
    2. Check the referenced user and restaurant exist
    3. Insert into the booking store
    4. Publish booking_created to realtime clients (best-effort)
    5. Return the stored booking with its generated id

    Payment is correlated by the caller: confirmation_code carries the
    gateway order reference obtained beforehand from POST /api/payment.
    """

    def __init__(
        self,
        *,
        booking_command_repo: IBookingCommandRepo,
        user_query_repo: IUserQueryRepo,
        restaurant_query_repo: IRestaurantQueryRepo,
        notification_publisher: INotificationPublisher,
    ) -> None:
        self.booking_command_repo = booking_command_repo
        self.user_query_repo = user_query_repo
        self.restaurant_query_repo = restaurant_query_repo
        self.notification_publisher = notification_publisher
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        booking_command_repo: IBookingCommandRepo = Depends(
            Provide[Container.booking_command_repo]
        ),
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
        restaurant_query_repo: IRestaurantQueryRepo = Depends(
            Provide[Container.restaurant_query_repo]
        ),
        notification_publisher: INotificationPublisher = Depends(
            Provide[Container.notification_channel]
        ),
    ) -> Self:
        return cls(
            booking_command_repo=booking_command_repo,
            user_query_repo=user_query_repo,
            restaurant_query_repo=restaurant_query_repo,
            notification_publisher=notification_publisher,
        )

    @Logger.io
    async def create_booking(
        self,
        *,
        user_id: str,
        restaurant_id: str,
        date: date,
        time: str,
        seats: int,
        amount_paid: float,
        confirmation_code: str,
    ) -> Booking:
        """
        Raises:
            DomainError: malformed/missing fields or unknown user/restaurant
            PersistenceError: store unreachable or write rejected (not retried)
        """
        with self.tracer.start_as_current_span('use_case.create_booking') as span:
            try:
                booking = Booking.create(
                    user_id=user_id,
                    restaurant_id=restaurant_id,
                    date=date,
                    time=time,
                    seats=seats,
                    amount_paid=amount_paid,
                    confirmation_code=confirmation_code,
                )
                await self._ensure_references_exist(booking)
            except DomainError:
                metrics.record_booking_rejected(reason='invalid_request')
                raise

            try:
                saved = await self.booking_command_repo.create(booking=booking)
            except PersistenceError:
                metrics.record_booking_rejected(reason='persistence_failure')
                raise

            span.set_attribute('booking.id', saved.id or '')
            metrics.record_booking_created()
            Logger.base.info(
                f'📝 [CREATE-BOOKING] Booking {saved.id} saved for user {saved.user_id}, '
                f'restaurant {saved.restaurant_id}, {saved.date} {saved.time} x{saved.seats}'
            )

            self._notify_booking_created(saved)
            return saved

    async def _ensure_references_exist(self, booking: Booking) -> None:
        # Checked right before insert, not held against concurrent deletion
        if not await self.user_query_repo.exists(user_id=booking.user_id):
            raise DomainError('Referenced user does not exist')
        if not await self.restaurant_query_repo.exists(restaurant_id=booking.restaurant_id):
            raise DomainError('Referenced restaurant does not exist')

    def _notify_booking_created(self, booking: Booking) -> None:
        try:
            self.notification_publisher.publish(
                NotificationEvent.BOOKING_CREATED,
                {
                    'id': booking.id,
                    'restaurantId': booking.restaurant_id,
                    'date': booking.date.isoformat(),
                    'time': booking.time,
                    'seats': booking.seats,
                },
            )
        except Exception as e:
            Logger.base.warning(
                f'⚠️ [CREATE-BOOKING] Notification skipped for {booking.id}: '
                f'{type(e).__name__}: {e}'
            )
