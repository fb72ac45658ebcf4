from typing import Dict, Iterable, Optional

from bson import ObjectId

from src.platform.database.mongo_setting import (
    CollectionName,
    MongoDatabase,
    translate_store_errors,
)
from src.platform.logging.loguru_io import Logger
from src.service.dining.app.interface.i_restaurant_query_repo import IRestaurantQueryRepo
from src.service.dining.domain.entity.restaurant_entity import Restaurant
from src.service.dining.driven_adapter.repo.document_mapper import restaurant_from_document


class RestaurantQueryRepoImpl(IRestaurantQueryRepo):
    def __init__(self, *, database: MongoDatabase) -> None:
        self.database = database

    @Logger.io
    async def get_by_id(self, *, restaurant_id: str) -> Optional[Restaurant]:
        collection = self.database.collection(CollectionName.RESTAURANTS)
        with translate_store_errors('Error fetching restaurant'):
            doc = await collection.find_one({'_id': ObjectId(restaurant_id)})
        return restaurant_from_document(doc) if doc else None

    @Logger.io
    async def get_by_ids(self, *, restaurant_ids: Iterable[str]) -> Dict[str, Restaurant]:
        object_ids = [ObjectId(rid) for rid in set(restaurant_ids)]
        if not object_ids:
            return {}

        collection = self.database.collection(CollectionName.RESTAURANTS)
        with translate_store_errors('Error fetching restaurants'):
            documents = await collection.find({'_id': {'$in': object_ids}}).to_list(length=None)

        restaurants = (restaurant_from_document(doc) for doc in documents)
        return {restaurant.id: restaurant for restaurant in restaurants if restaurant.id}

    @Logger.io
    async def exists(self, *, restaurant_id: str) -> bool:
        collection = self.database.collection(CollectionName.RESTAURANTS)
        with translate_store_errors('Error fetching restaurant'):
            count = await collection.count_documents({'_id': ObjectId(restaurant_id)}, limit=1)
        return count > 0
