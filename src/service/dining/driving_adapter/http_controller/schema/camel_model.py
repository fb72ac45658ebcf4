from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """JSON bodies use camelCase keys (userId, amountPaid, ...), Python code uses snake_case."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
