"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.dining.app.command import (
    add_restaurant_use_case,
    create_booking_use_case,
    create_payment_order_use_case,
)
from src.service.dining.app.query import get_restaurant_use_case, list_bookings_use_case
from src.service.dining.driving_adapter.http_controller.auth import jwt_auth


WIRE_MODULES: list[ModuleType] = [
    create_booking_use_case,
    create_payment_order_use_case,
    add_restaurant_use_case,
    list_bookings_use_case,
    get_restaurant_use_case,
    jwt_auth,
]
