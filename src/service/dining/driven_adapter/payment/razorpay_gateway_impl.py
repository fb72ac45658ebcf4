"""
Razorpay order gateway

The razorpay SDK is synchronous (requests based), so each call runs in a
worker thread to keep the event loop free.
"""

from typing import Any, Dict

import anyio.to_thread
import razorpay
from razorpay.errors import BadRequestError, GatewayError, ServerError
from requests import RequestException

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import GatewayRejectedError, GatewayUnavailableError
from src.platform.logging.loguru_io import Logger
from src.service.dining.app.interface.i_payment_gateway import IPaymentGateway
from src.service.dining.domain.entity.payment_order_entity import PaymentOrder


ORDER_FAILED_MESSAGE = 'Failed to create order'


class RazorpayGatewayImpl(IPaymentGateway):
    def __init__(self, *, key_id: str | None = None, key_secret: str | None = None) -> None:
        self.key_id = key_id if key_id is not None else settings.RAZORPAY_KEY_ID
        self._key_secret = (
            key_secret
            if key_secret is not None
            else settings.RAZORPAY_KEY_SECRET.get_secret_value()
        )
        self._client: razorpay.Client | None = None

    @property
    def client(self) -> razorpay.Client:
        if self._client is None:
            if not self.key_id or not self._key_secret:
                raise GatewayUnavailableError(ORDER_FAILED_MESSAGE)
            self._client = razorpay.Client(auth=(self.key_id, self._key_secret))
        return self._client

    @Logger.io
    async def create_order(self, *, amount: int, currency: str, receipt: str) -> PaymentOrder:
        options: Dict[str, Any] = {
            'amount': amount,
            'currency': currency,
            'receipt': receipt,
        }
        client = self.client

        try:
            payload = await anyio.to_thread.run_sync(client.order.create, options)
        except BadRequestError as e:
            Logger.base.warning(f'💳 [RAZORPAY] Order rejected: receipt={receipt}, reason={e}')
            raise GatewayRejectedError(ORDER_FAILED_MESSAGE, reason=str(e)) from e
        except (ServerError, GatewayError, RequestException) as e:
            Logger.base.error(
                f'💳 [RAZORPAY] Gateway unavailable: receipt={receipt}, {type(e).__name__}: {e}'
            )
            raise GatewayUnavailableError(ORDER_FAILED_MESSAGE) from e

        order = PaymentOrder.from_gateway_payload(payload)
        Logger.base.info(
            f'💳 [RAZORPAY] Order created: id={order.id}, receipt={order.receipt}, '
            f'amount={order.amount} {order.currency}'
        )
        return order
