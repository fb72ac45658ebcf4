import datetime
from typing import Any, Dict, List, Optional

from pydantic import ConfigDict

from src.platform.types import ObjectIdStr
from src.service.dining.domain.entity.restaurant_entity import Restaurant
from src.service.dining.driving_adapter.http_controller.schema.camel_model import CamelModel


class RestaurantCreateRequest(CamelModel):
    owner_id: str
    name: str
    location: str = ''
    contact: str = ''
    cuisine: str = ''
    features: List[str] = []
    hours: str = ''
    menu: List[Dict[str, Any]] = []
    images: List[str] = []

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'ownerId': '65f1c2a9e4b0a1b2c3d4e5f6',
                'name': 'Spice Route',
                'location': 'MG Road, Bengaluru',
                'contact': '+91 80 1234 5678',
                'cuisine': 'South Indian',
                'features': ['Outdoor seating', 'Vegetarian friendly'],
                'hours': '11:00-23:00',
                'menu': [{'name': 'Masala Dosa', 'price': 120}],
                'images': ['/uploads/spice-route.jpg'],
            }
        }
    )


class RestaurantResponse(CamelModel):
    id: ObjectIdStr
    owner_id: ObjectIdStr
    name: str
    location: str = ''
    contact: str = ''
    cuisine: str = ''
    features: List[str] = []
    hours: str = ''
    menu: List[Dict[str, Any]] = []
    images: List[str] = []
    created_at: Optional[datetime.datetime] = None

    @classmethod
    def from_entity(cls, restaurant: Restaurant) -> 'RestaurantResponse':
        return cls(
            id=restaurant.id,
            owner_id=restaurant.owner_id,
            name=restaurant.name,
            location=restaurant.location,
            contact=restaurant.contact,
            cuisine=restaurant.cuisine,
            features=restaurant.features,
            hours=restaurant.hours,
            menu=restaurant.menu,
            images=restaurant.images,
            created_at=restaurant.created_at,
        )


class RestaurantCreatedResponse(CamelModel):
    message: str
    data: RestaurantResponse

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'message': 'Restaurant added successfully!',
                'data': {'id': '65f1c2a9e4b0a1b2c3d4e5f7', 'name': 'Spice Route'},
            }
        }
    )
