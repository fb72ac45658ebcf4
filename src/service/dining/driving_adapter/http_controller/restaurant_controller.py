from fastapi import APIRouter, Depends, status

from src.platform.constant.route_constant import RESTAURANT_ADD, RESTAURANT_GET
from src.platform.logging.loguru_io import Logger
from src.service.dining.app.command.add_restaurant_use_case import AddRestaurantUseCase
from src.service.dining.app.query.get_restaurant_use_case import GetRestaurantUseCase
from src.service.dining.driving_adapter.http_controller.auth.jwt_auth import (
    get_current_principal,
)
from src.service.dining.driving_adapter.http_controller.schema.restaurant_schema import (
    RestaurantCreatedResponse,
    RestaurantCreateRequest,
    RestaurantResponse,
)


router = APIRouter(tags=['restaurant'])


@router.get(RESTAURANT_GET)
@Logger.io
async def get_restaurant(
    restaurant_id: str,
    use_case: GetRestaurantUseCase = Depends(GetRestaurantUseCase.depends),
) -> RestaurantResponse:
    restaurant = await use_case.get_restaurant(restaurant_id=restaurant_id)
    return RestaurantResponse.from_entity(restaurant)


@router.post(RESTAURANT_ADD, status_code=status.HTTP_201_CREATED)
@Logger.io
async def add_restaurant(
    request: RestaurantCreateRequest,
    principal_id: str = Depends(get_current_principal),
    use_case: AddRestaurantUseCase = Depends(AddRestaurantUseCase.depends),
) -> RestaurantCreatedResponse:
    restaurant = await use_case.add_restaurant(
        principal_id=principal_id,
        owner_id=request.owner_id,
        name=request.name,
        location=request.location,
        contact=request.contact,
        cuisine=request.cuisine,
        features=request.features,
        hours=request.hours,
        menu=request.menu,
        images=request.images,
    )
    return RestaurantCreatedResponse(
        message='Restaurant added successfully!',
        data=RestaurantResponse.from_entity(restaurant),
    )
