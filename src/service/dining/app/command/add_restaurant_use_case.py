from typing import Any, Dict, List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.dining.app.interface.i_restaurant_command_repo import IRestaurantCommandRepo
from src.service.dining.domain.entity.restaurant_entity import Restaurant
from src.service.dining.domain.identity_validator import require_matching_principal


class AddRestaurantUseCase:
    def __init__(self, *, restaurant_command_repo: IRestaurantCommandRepo) -> None:
        self.restaurant_command_repo = restaurant_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        restaurant_command_repo: IRestaurantCommandRepo = Depends(
            Provide[Container.restaurant_command_repo]
        ),
    ) -> Self:
        return cls(restaurant_command_repo=restaurant_command_repo)

    @Logger.io
    async def add_restaurant(
        self,
        *,
        principal_id: str | None,
        owner_id: str,
        name: str,
        location: str = '',
        contact: str = '',
        cuisine: str = '',
        features: List[str] | None = None,
        hours: str = '',
        menu: List[Dict[str, Any]] | None = None,
        images: List[str] | None = None,
    ) -> Restaurant:
        """
        Raises:
            ForbiddenError: owner_id is not the authenticated principal
            DomainError: restaurant fields invalid
        """
        owner_id = require_matching_principal(owner_id, principal_id)
        restaurant = Restaurant.create(
            owner_id=owner_id,
            name=name,
            location=location,
            contact=contact,
            cuisine=cuisine,
            features=features,
            hours=hours,
            menu=menu,
            images=images,
        )
        return await self.restaurant_command_repo.create(restaurant=restaurant)
