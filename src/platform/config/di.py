"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi.html
"""

from dependency_injector import containers, providers

from src.platform.database.mongo_setting import MongoDatabase
from src.service.dining.domain.value_object.receipt_id import ReceiptIdGenerator
from src.service.dining.driven_adapter.notification.notification_channel_impl import (
    NotificationChannelImpl,
)
from src.service.dining.driven_adapter.payment.razorpay_gateway_impl import RazorpayGatewayImpl
from src.service.dining.driven_adapter.repo.booking_command_repo_impl import (
    BookingCommandRepoImpl,
)
from src.service.dining.driven_adapter.repo.booking_query_repo_impl import BookingQueryRepoImpl
from src.service.dining.driven_adapter.repo.restaurant_command_repo_impl import (
    RestaurantCommandRepoImpl,
)
from src.service.dining.driven_adapter.repo.restaurant_query_repo_impl import (
    RestaurantQueryRepoImpl,
)
from src.service.dining.driven_adapter.repo.user_query_repo_impl import UserQueryRepoImpl
from src.service.dining.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


class Container(containers.DeclarativeContainer):
    # Database (client is created lazily on first query)
    mongo_database = providers.Singleton(MongoDatabase)

    # Repositories (stateless - share the process-wide client)
    booking_command_repo = providers.Singleton(BookingCommandRepoImpl, database=mongo_database)
    booking_query_repo = providers.Singleton(BookingQueryRepoImpl, database=mongo_database)
    restaurant_command_repo = providers.Singleton(
        RestaurantCommandRepoImpl, database=mongo_database
    )
    restaurant_query_repo = providers.Singleton(RestaurantQueryRepoImpl, database=mongo_database)
    user_query_repo = providers.Singleton(UserQueryRepoImpl, database=mongo_database)

    # Payment gateway
    payment_gateway = providers.Singleton(RazorpayGatewayImpl)
    receipt_id_generator = providers.Singleton(ReceiptIdGenerator)

    # Realtime notification channel (opened/closed by main.py lifespan)
    notification_channel = providers.Singleton(NotificationChannelImpl)

    # Auth service
    jwt_auth = providers.Singleton(JwtAuth)


container = Container()
