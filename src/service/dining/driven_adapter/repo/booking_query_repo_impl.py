from typing import List

from bson import ObjectId
from pymongo import ASCENDING

from src.platform.database.mongo_setting import (
    CollectionName,
    MongoDatabase,
    translate_store_errors,
)
from src.platform.logging.loguru_io import Logger
from src.service.dining.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.dining.domain.entity.booking_entity import Booking
from src.service.dining.driven_adapter.repo.document_mapper import booking_from_document


class BookingQueryRepoImpl(IBookingQueryRepo):
    def __init__(self, *, database: MongoDatabase) -> None:
        self.database = database

    @Logger.io
    async def list_by_user(self, *, user_id: str) -> List[Booking]:
        collection = self.database.collection(CollectionName.BOOKINGS)
        with translate_store_errors('Error fetching bookings'):
            cursor = collection.find({'userId': ObjectId(user_id)}).sort('_id', ASCENDING)
            documents = await cursor.to_list(length=None)
        return [booking_from_document(doc) for doc in documents]
