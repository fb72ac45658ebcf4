from typing import Optional

import attrs

from src.service.dining.domain.entity.booking_entity import Booking
from src.service.dining.domain.entity.restaurant_entity import Restaurant


@attrs.frozen
class BookingWithRestaurant:
    """Booking with its restaurant reference resolved (None when the restaurant is gone)"""

    booking: Booking
    restaurant: Optional[Restaurant]
