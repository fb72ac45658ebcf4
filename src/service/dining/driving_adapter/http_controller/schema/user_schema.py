from src.service.dining.driving_adapter.http_controller.schema.camel_model import CamelModel


class UserAvailabilityResponse(CamelModel):
    user_id: str
    availability: bool
