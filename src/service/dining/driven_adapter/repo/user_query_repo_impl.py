from bson import ObjectId

from src.platform.database.mongo_setting import (
    CollectionName,
    MongoDatabase,
    translate_store_errors,
)
from src.platform.logging.loguru_io import Logger
from src.service.dining.app.interface.i_user_query_repo import IUserQueryRepo


class UserQueryRepoImpl(IUserQueryRepo):
    def __init__(self, *, database: MongoDatabase) -> None:
        self.database = database

    @Logger.io
    async def exists(self, *, user_id: str) -> bool:
        collection = self.database.collection(CollectionName.USERS)
        with translate_store_errors('Error fetching user'):
            count = await collection.count_documents({'_id': ObjectId(user_id)}, limit=1)
        return count > 0
