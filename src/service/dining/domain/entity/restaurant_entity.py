from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import attrs

from src.platform.exception.exceptions import DomainError
from src.service.dining.domain.identity_validator import require_valid_identifier


@attrs.define
class Restaurant:
    owner_id: str
    name: str
    location: str = ''
    contact: str = ''
    cuisine: str = ''
    features: List[str] = attrs.field(factory=list)
    hours: str = ''
    menu: List[Dict[str, Any]] = attrs.field(factory=list)
    images: List[str] = attrs.field(factory=list)
    id: Optional[str] = None
    created_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        *,
        owner_id: str,
        name: str,
        location: str = '',
        contact: str = '',
        cuisine: str = '',
        features: List[str] | None = None,
        hours: str = '',
        menu: List[Dict[str, Any]] | None = None,
        images: List[str] | None = None,
    ) -> 'Restaurant':
        owner_id = require_valid_identifier(owner_id, field='ownerId')
        if not name or not name.strip():
            raise DomainError('name is required')

        return cls(
            owner_id=owner_id,
            name=name.strip(),
            location=location,
            contact=contact,
            cuisine=cuisine,
            features=list(features or []),
            hours=hours,
            menu=list(menu or []),
            images=list(images or []),
            created_at=datetime.now(timezone.utc),
        )
