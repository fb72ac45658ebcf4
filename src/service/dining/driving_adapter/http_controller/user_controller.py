from fastapi import APIRouter

from src.platform.constant.route_constant import USER_AVAILABILITY
from src.platform.logging.loguru_io import Logger
from src.service.dining.driving_adapter.http_controller.schema.user_schema import (
    UserAvailabilityResponse,
)


router = APIRouter(tags=['user'])


@router.get(USER_AVAILABILITY)
@Logger.io
async def get_user_availability(user_id: str) -> UserAvailabilityResponse:
    # Availability is not tracked yet, every user is reported available
    return UserAvailabilityResponse(user_id=user_id, availability=True)
