from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import DomainError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.dining.app.interface.i_restaurant_query_repo import IRestaurantQueryRepo
from src.service.dining.domain.entity.restaurant_entity import Restaurant
from src.service.dining.domain.identity_validator import validate


class GetRestaurantUseCase:
    def __init__(self, *, restaurant_query_repo: IRestaurantQueryRepo) -> None:
        self.restaurant_query_repo = restaurant_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        restaurant_query_repo: IRestaurantQueryRepo = Depends(
            Provide[Container.restaurant_query_repo]
        ),
    ) -> Self:
        return cls(restaurant_query_repo=restaurant_query_repo)

    @Logger.io
    async def get_restaurant(self, *, restaurant_id: str) -> Restaurant:
        if not validate(restaurant_id).is_valid:
            raise DomainError('Invalid restaurant ID')

        restaurant = await self.restaurant_query_repo.get_by_id(
            restaurant_id=restaurant_id.lower()
        )
        if restaurant is None:
            raise NotFoundError('Restaurant not found')
        return restaurant
