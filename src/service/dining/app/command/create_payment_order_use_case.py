from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.exception.exceptions import GatewayRejectedError, GatewayUnavailableError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.service.dining.app.interface.i_payment_gateway import IPaymentGateway
from src.service.dining.domain.entity.payment_order_entity import PaymentOrder
from src.service.dining.domain.value_object.money import normalize_currency, to_minor_units
from src.service.dining.domain.value_object.receipt_id import ReceiptIdGenerator


class CreatePaymentOrderUseCase:
    """
    Open a gateway order for a prospective booking.

    The amount arrives in major units and is sent to the gateway in minor
    units. Nothing is persisted here: the returned order id is what the
    client later passes as the booking's confirmation code.
    """

    def __init__(
        self,
        *,
        payment_gateway: IPaymentGateway,
        receipt_id_generator: ReceiptIdGenerator,
    ) -> None:
        self.payment_gateway = payment_gateway
        self.receipt_id_generator = receipt_id_generator
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        payment_gateway: IPaymentGateway = Depends(Provide[Container.payment_gateway]),
        receipt_id_generator: ReceiptIdGenerator = Depends(
            Provide[Container.receipt_id_generator]
        ),
    ) -> Self:
        return cls(payment_gateway=payment_gateway, receipt_id_generator=receipt_id_generator)

    @Logger.io
    async def create_payment_order(self, *, amount: float, currency: str) -> PaymentOrder:
        with self.tracer.start_as_current_span('use_case.create_payment_order') as span:
            code = normalize_currency(currency)
            minor_amount = to_minor_units(amount, code)
            receipt = self.receipt_id_generator.next_id()
            span.set_attribute('payment.receipt', receipt)

            try:
                order = await self.payment_gateway.create_order(
                    amount=minor_amount, currency=code, receipt=receipt
                )
            except GatewayRejectedError:
                metrics.record_payment_order(currency=code, result='rejected')
                raise
            except GatewayUnavailableError:
                metrics.record_payment_order(currency=code, result='unavailable')
                raise

            metrics.record_payment_order(currency=code, result='created')
            return order
