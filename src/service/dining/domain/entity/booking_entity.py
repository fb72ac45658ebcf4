from datetime import date, datetime, timezone
import math
import re
from typing import Optional

import attrs

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.dining.domain.identity_validator import require_valid_identifier


_TIME_OF_DAY = re.compile(r'([01]\d|2[0-3]):[0-5]\d')


@attrs.define
class Booking:
    user_id: str
    restaurant_id: str
    date: date
    time: str
    seats: int
    amount_paid: float
    confirmation_code: str
    id: Optional[str] = None
    created_at: Optional[datetime] = None

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        user_id: str,
        restaurant_id: str,
        date: date,
        time: str,
        seats: int,
        amount_paid: float,
        confirmation_code: str,
    ) -> 'Booking':
        """
        Build a new, not yet persisted booking.

        Raises:
            DomainError: any field violates the booking invariants
        """
        user_id = require_valid_identifier(user_id, field='userId')
        restaurant_id = require_valid_identifier(restaurant_id, field='restaurantId')

        if isinstance(seats, bool) or not isinstance(seats, int) or seats <= 0:
            raise DomainError('seats must be a positive integer')

        if isinstance(amount_paid, bool) or not isinstance(amount_paid, int | float):
            raise DomainError('amountPaid must be a number')
        if not math.isfinite(amount_paid) or amount_paid < 0:
            raise DomainError('amountPaid must not be negative')

        if not isinstance(time, str) or not _TIME_OF_DAY.fullmatch(time):
            raise DomainError('time must be in HH:MM format')

        if not confirmation_code or not confirmation_code.strip():
            raise DomainError('confirmationCode is required')

        return cls(
            user_id=user_id,
            restaurant_id=restaurant_id,
            date=date,
            time=time,
            seats=seats,
            amount_paid=float(amount_paid),
            confirmation_code=confirmation_code.strip(),
            created_at=datetime.now(timezone.utc),
        )

    def with_id(self, booking_id: str) -> 'Booking':
        return attrs.evolve(self, id=booking_id)
