from abc import ABC, abstractmethod

from src.service.dining.domain.entity.restaurant_entity import Restaurant


class IRestaurantCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, restaurant: Restaurant) -> Restaurant:
        pass
