from src.platform.database.mongo_setting import (
    CollectionName,
    MongoDatabase,
    translate_store_errors,
)
from src.platform.logging.loguru_io import Logger
from src.service.dining.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.dining.domain.entity.booking_entity import Booking
from src.service.dining.driven_adapter.repo.document_mapper import booking_to_document


class BookingCommandRepoImpl(IBookingCommandRepo):
    def __init__(self, *, database: MongoDatabase) -> None:
        self.database = database

    @Logger.io
    async def create(self, *, booking: Booking) -> Booking:
        collection = self.database.collection(CollectionName.BOOKINGS)
        with translate_store_errors('Failed to save booking'):
            result = await collection.insert_one(booking_to_document(booking))
        return booking.with_id(str(result.inserted_id))
