"""
Payment Gateway Interface

Abstraction over the external payment provider's order API.
"""

from abc import ABC, abstractmethod

from src.service.dining.domain.entity.payment_order_entity import PaymentOrder


class IPaymentGateway(ABC):
    @abstractmethod
    async def create_order(self, *, amount: int, currency: str, receipt: str) -> PaymentOrder:
        """
        Create a payment order

        Args:
            amount: Amount in minor units (e.g. paise)
            currency: ISO currency code
            receipt: Caller-generated receipt id

        Raises:
            GatewayUnavailableError: network failure or provider-side error
            GatewayRejectedError: provider refused the request
        """
        pass
