import datetime
from typing import Optional

from pydantic import ConfigDict

from src.service.dining.domain.entity.payment_order_entity import PaymentOrder
from src.service.dining.driving_adapter.http_controller.schema.camel_model import CamelModel


class PaymentOrderRequest(CamelModel):
    amount: float  # major units, e.g. rupees
    currency: str = 'INR'

    model_config = ConfigDict(json_schema_extra={'example': {'amount': 500, 'currency': 'INR'}})


class PaymentOrderResponse(CamelModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'id': 'order_NkR7qP4h1XyZ2a',
                'entity': 'order',
                'amount': 50000,
                'amountPaid': 0,
                'amountDue': 50000,
                'currency': 'INR',
                'receipt': 'order_rcptid_1710930600000000',
                'status': 'created',
                'attempts': 0,
                'createdAt': '2025-03-20T10:30:00Z',
            }
        },
    )

    id: str
    entity: str
    amount: int  # minor units
    amount_paid: int
    amount_due: int
    currency: str
    receipt: str
    status: str
    attempts: int
    created_at: Optional[datetime.datetime] = None

    @classmethod
    def from_entity(cls, order: PaymentOrder) -> 'PaymentOrderResponse':
        return cls(
            id=order.id,
            entity=order.entity,
            amount=order.amount,
            amount_paid=order.amount_paid,
            amount_due=order.amount_due,
            currency=order.currency,
            receipt=order.receipt,
            status=order.status,
            attempts=order.attempts,
            created_at=order.created_at,
        )
