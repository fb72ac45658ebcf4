"""
Booking Command Repository Interface

Insert-only: bookings are immutable once stored and never hard-deleted.
"""

from abc import ABC, abstractmethod

from src.service.dining.domain.entity.booking_entity import Booking


class IBookingCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, booking: Booking) -> Booking:
        """
        Persist a new booking

        Args:
            booking: Booking entity without id

        Returns:
            Stored booking with its generated id

        Raises:
            PersistenceError: store unreachable or write rejected
        """
        pass
