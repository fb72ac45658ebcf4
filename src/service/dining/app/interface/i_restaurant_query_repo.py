from abc import ABC, abstractmethod
from typing import Dict, Iterable, Optional

from src.service.dining.domain.entity.restaurant_entity import Restaurant


class IRestaurantQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, restaurant_id: str) -> Optional[Restaurant]:
        pass

    @abstractmethod
    async def get_by_ids(self, *, restaurant_ids: Iterable[str]) -> Dict[str, Restaurant]:
        """Batch lookup keyed by restaurant id, missing ids are simply absent"""
        pass

    @abstractmethod
    async def exists(self, *, restaurant_id: str) -> bool:
        pass
