from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from src.platform.exception.exceptions import DomainError


# Minor units per major unit for the currencies the gateway account accepts
MINOR_UNIT_FACTOR: dict[str, int] = {
    'INR': 100,
    'USD': 100,
    'EUR': 100,
    'GBP': 100,
    'SGD': 100,
    'AED': 100,
}


def normalize_currency(currency: str) -> str:
    code = (currency or '').strip().upper()
    if code not in MINOR_UNIT_FACTOR:
        raise DomainError(f'Unsupported currency: {currency}')
    return code


def to_minor_units(amount: float | int | str, currency: str) -> int:
    """
    Convert a major-unit amount (e.g. rupees) to gateway minor units (e.g. paise).

    Raises:
        DomainError: amount is not a positive number or currency is unsupported
    """
    code = normalize_currency(currency)
    try:
        value = Decimal(str(amount))
    except InvalidOperation:
        raise DomainError('amount must be a number')
    if not value.is_finite() or value <= 0:
        raise DomainError('amount must be greater than zero')

    minor = (value * MINOR_UNIT_FACTOR[code]).quantize(Decimal('1'), rounding=ROUND_HALF_UP)
    return int(minor)
