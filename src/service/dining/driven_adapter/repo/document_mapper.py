"""
Entity <-> MongoDB document conversion

Documents keep the field names of the existing collections (camelCase, ObjectId refs),
entities use snake_case and plain string ids.
"""

from contextlib import contextmanager
from datetime import date, datetime
from typing import Any, Dict, Iterator

from bson import ObjectId

from src.platform.exception.exceptions import PersistenceError
from src.platform.logging.loguru_io import Logger
from src.platform.types.object_id_types import is_object_id_hex
from src.service.dining.domain.entity.booking_entity import Booking
from src.service.dining.domain.entity.restaurant_entity import Restaurant


@contextmanager
def _decoding(kind: str, doc: Dict[str, Any]) -> Iterator[None]:
    """Stored documents that do not fit the entity surface as PersistenceError."""
    try:
        yield
    except (KeyError, TypeError, ValueError) as e:
        Logger.base.error(
            f'🗄️  [MONGO] Malformed {kind} document {doc.get("_id")}: {type(e).__name__}: {e}'
        )
        raise PersistenceError(f'Error reading stored {kind}') from e


def _as_id(value: Any) -> str:
    text = str(value)
    if not is_object_id_hex(text):
        raise ValueError(f'not a document id: {text!r}')
    return text.lower()


def _as_date(value: Any) -> date:
    # Older documents hold a BSON datetime instead of an ISO string
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def booking_to_document(booking: Booking) -> Dict[str, Any]:
    return {
        'userId': ObjectId(booking.user_id),
        'restaurantId': ObjectId(booking.restaurant_id),
        'date': booking.date.isoformat(),
        'time': booking.time,
        'seats': booking.seats,
        'amountPaid': booking.amount_paid,
        'confirmationCode': booking.confirmation_code,
        'createdAt': booking.created_at,
    }


def booking_from_document(doc: Dict[str, Any]) -> Booking:
    with _decoding('booking', doc):
        return Booking(
            id=_as_id(doc['_id']),
            user_id=_as_id(doc['userId']),
            restaurant_id=_as_id(doc['restaurantId']),
            date=_as_date(doc['date']),
            time=doc['time'],
            seats=int(doc['seats']),
            amount_paid=float(doc.get('amountPaid', 0)),
            confirmation_code=doc.get('confirmationCode', ''),
            created_at=doc.get('createdAt'),
        )


def restaurant_to_document(restaurant: Restaurant) -> Dict[str, Any]:
    return {
        'ownerId': ObjectId(restaurant.owner_id),
        'name': restaurant.name,
        'location': restaurant.location,
        'contact': restaurant.contact,
        'cuisine': restaurant.cuisine,
        'features': restaurant.features,
        'hours': restaurant.hours,
        'menu': restaurant.menu,
        'images': restaurant.images,
        'createdAt': restaurant.created_at,
    }


def restaurant_from_document(doc: Dict[str, Any]) -> Restaurant:
    features = doc.get('features') or []
    with _decoding('restaurant', doc):
        return Restaurant(
            id=_as_id(doc['_id']),
            owner_id=_as_id(doc.get('ownerId')),
            name=doc.get('name', ''),
            location=doc.get('location', '') or '',
            contact=doc.get('contact', '') or '',
            cuisine=doc.get('cuisine', '') or '',
            features=[features] if isinstance(features, str) else list(features),
            hours=doc.get('hours', '') or '',
            menu=list(doc.get('menu') or []),
            images=list(doc.get('images') or []),
            created_at=doc.get('createdAt'),
        )
