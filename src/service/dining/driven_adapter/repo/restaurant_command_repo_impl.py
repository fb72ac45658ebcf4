import attrs

from src.platform.database.mongo_setting import (
    CollectionName,
    MongoDatabase,
    translate_store_errors,
)
from src.platform.logging.loguru_io import Logger
from src.service.dining.app.interface.i_restaurant_command_repo import IRestaurantCommandRepo
from src.service.dining.domain.entity.restaurant_entity import Restaurant
from src.service.dining.driven_adapter.repo.document_mapper import restaurant_to_document


class RestaurantCommandRepoImpl(IRestaurantCommandRepo):
    def __init__(self, *, database: MongoDatabase) -> None:
        self.database = database

    @Logger.io
    async def create(self, *, restaurant: Restaurant) -> Restaurant:
        collection = self.database.collection(CollectionName.RESTAURANTS)
        with translate_store_errors('Failed to save restaurant'):
            result = await collection.insert_one(restaurant_to_document(restaurant))
        return attrs.evolve(restaurant, id=str(result.inserted_id))
