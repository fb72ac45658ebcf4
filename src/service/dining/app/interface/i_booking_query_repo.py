from abc import ABC, abstractmethod
from typing import List

from src.service.dining.domain.entity.booking_entity import Booking


class IBookingQueryRepo(ABC):
    """Repository interface for booking read operations"""

    @abstractmethod
    async def list_by_user(self, *, user_id: str) -> List[Booking]:
        """Bookings owned by user_id in insertion order (empty list when none)"""
        pass
