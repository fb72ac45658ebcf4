"""
Test Configuration and Fixtures

This module provides:
- Environment setup that must happen before application modules are imported
- In-memory fakes for the document store and the payment gateway
- A TestClient whose DI container serves those fakes

Architecture:
- Unit tests (test/**/unit/): construct use cases / adapters directly with mocks
- API tests (test/**/integration/): go through the `client` fixture, no MongoDB needed
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings and the loguru sinks read these at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    from test.test_constants import TEST_SECRET_KEY

    os.environ['SECRET_KEY'] = TEST_SECRET_KEY
    os.environ['MONGO_DB_NAME'] = 'restaurant_booking_test'
    os.environ['SERVICE_NAME'] = 'restaurant-booking-test'


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from collections.abc import Generator  # noqa: E402

from dependency_injector import providers  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402

from src.platform.config.di import container  # noqa: E402
from src.service.dining.domain.value_object.receipt_id import ReceiptIdGenerator  # noqa: E402
from src.service.dining.driven_adapter.notification.notification_channel_impl import (  # noqa: E402
    NotificationChannelImpl,
)
from src.service.dining.driving_adapter.http_controller.auth.jwt_auth import JwtAuth  # noqa: E402
from test.service.dining.fakes import (  # noqa: E402
    FakePaymentGateway,
    InMemoryBookingStore,
    InMemoryRestaurantStore,
    InMemoryUserStore,
)
from test.test_constants import (  # noqa: E402
    TEST_OWNER_ID,
    TEST_RESTAURANT_ID_1,
    TEST_RESTAURANT_ID_2,
    TEST_SECRET_KEY,
    TEST_USER_ID_1,
    TEST_USER_ID_2,
)


# =============================================================================
# Fakes
# =============================================================================
@pytest.fixture
def user_store() -> InMemoryUserStore:
    return InMemoryUserStore(user_ids={TEST_USER_ID_1, TEST_USER_ID_2, TEST_OWNER_ID})


@pytest.fixture
def restaurant_store() -> InMemoryRestaurantStore:
    store = InMemoryRestaurantStore()
    store.seed(restaurant_id=TEST_RESTAURANT_ID_1, owner_id=TEST_OWNER_ID, name='Spice Route')
    store.seed(restaurant_id=TEST_RESTAURANT_ID_2, owner_id=TEST_OWNER_ID, name='Harbour Grill')
    return store


@pytest.fixture
def booking_store() -> InMemoryBookingStore:
    return InMemoryBookingStore()


@pytest.fixture
def payment_gateway() -> FakePaymentGateway:
    return FakePaymentGateway()


@pytest.fixture
def notification_channel() -> NotificationChannelImpl:
    return NotificationChannelImpl()


@pytest.fixture
def jwt_auth() -> JwtAuth:
    return JwtAuth(secret=TEST_SECRET_KEY)


@pytest.fixture
def owner_auth_headers(jwt_auth: JwtAuth) -> dict[str, str]:
    return {'Authorization': f'Bearer {jwt_auth.create_jwt_token(principal_id=TEST_OWNER_ID)}'}


# =============================================================================
# Test client
# =============================================================================
@pytest.fixture
def client(
    user_store: InMemoryUserStore,
    restaurant_store: InMemoryRestaurantStore,
    booking_store: InMemoryBookingStore,
    payment_gateway: FakePaymentGateway,
    notification_channel: NotificationChannelImpl,
    jwt_auth: JwtAuth,
) -> Generator[TestClient, None, None]:
    from test.test_main import app

    overrides = [
        (container.booking_command_repo, booking_store),
        (container.booking_query_repo, booking_store),
        (container.restaurant_command_repo, restaurant_store),
        (container.restaurant_query_repo, restaurant_store),
        (container.user_query_repo, user_store),
        (container.payment_gateway, payment_gateway),
        (container.receipt_id_generator, ReceiptIdGenerator()),
        (container.notification_channel, notification_channel),
        (container.jwt_auth, jwt_auth),
    ]
    for provider, fake in overrides:
        provider.override(providers.Object(fake))

    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        for provider, _ in overrides:
            provider.reset_override()
