from datetime import datetime, timezone
from typing import Any, Dict, Optional

import attrs


@attrs.define
class PaymentOrder:
    """Gateway order as returned by the payment provider. Referenced, never persisted here."""

    id: str
    amount: int  # minor units
    currency: str
    receipt: str
    status: str = 'created'
    entity: str = 'order'
    amount_paid: int = 0
    amount_due: int = 0
    attempts: int = 0
    created_at: Optional[datetime] = None

    @classmethod
    def from_gateway_payload(cls, payload: Dict[str, Any]) -> 'PaymentOrder':
        created_at = payload.get('created_at')
        return cls(
            id=payload['id'],
            entity=payload.get('entity', 'order'),
            amount=int(payload['amount']),
            amount_paid=int(payload.get('amount_paid', 0)),
            amount_due=int(payload.get('amount_due', payload['amount'])),
            currency=payload['currency'],
            receipt=payload.get('receipt', ''),
            status=payload.get('status', 'created'),
            attempts=int(payload.get('attempts', 0)),
            # Razorpay returns unix seconds
            created_at=(
                datetime.fromtimestamp(created_at, tz=timezone.utc)
                if isinstance(created_at, int | float)
                else created_at
            ),
        )
