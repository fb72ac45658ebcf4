from fastapi import APIRouter, Depends

from src.platform.constant.route_constant import PAYMENT_CREATE
from src.platform.logging.loguru_io import Logger
from src.service.dining.app.command.create_payment_order_use_case import (
    CreatePaymentOrderUseCase,
)
from src.service.dining.driving_adapter.http_controller.schema.payment_schema import (
    PaymentOrderRequest,
    PaymentOrderResponse,
)


router = APIRouter(tags=['payment'])


@router.post(PAYMENT_CREATE)
@Logger.io
async def create_payment_order(
    request: PaymentOrderRequest,
    use_case: CreatePaymentOrderUseCase = Depends(CreatePaymentOrderUseCase.depends),
) -> PaymentOrderResponse:
    # The returned order id becomes the booking's confirmationCode once the client has paid
    order = await use_case.create_payment_order(amount=request.amount, currency=request.currency)
    return PaymentOrderResponse.from_entity(order)
