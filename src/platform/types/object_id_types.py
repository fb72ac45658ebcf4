"""
https://docs.pydantic.dev/latest/concepts/types/#customizing-validation-with-__get_pydantic_core_schema__
Document id Pydantic type integration

Request bodies carry MongoDB document ids as 24-character hex strings.
ObjectIdStr validates that format once at the HTTP boundary and keeps the value
as a plain lowercase string inside the application, so entities never depend on bson.

```python
class BookingCreateRequest(BaseModel):
    user_id: ObjectIdStr
```
"""

import re
from typing import Any

from bson import ObjectId
from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema


OBJECT_ID_PATTERN = r'^[0-9a-fA-F]{24}$'
_OBJECT_ID_HEX = re.compile(r'[0-9a-fA-F]{24}')


def is_object_id_hex(candidate: Any) -> bool:
    """Pure format check: 24 hex characters, nothing else."""
    # Exactly 24 hex digits, no surrounding or embedded whitespace
    return isinstance(candidate, str) and _OBJECT_ID_HEX.fullmatch(candidate) is not None


class ObjectIdStr(str):
    """Pydantic-compatible document id (24 hex chars), normalised to lowercase."""

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        def validate_object_id(value: Any) -> str:
            if isinstance(value, ObjectId):
                return str(value)
            if not is_object_id_hex(value):
                raise ValueError(f'Invalid identifier format: {value!r}')
            return value.lower()

        return core_schema.json_or_python_schema(
            json_schema=core_schema.chain_schema(
                [
                    core_schema.str_schema(),
                    core_schema.no_info_plain_validator_function(validate_object_id),
                ]
            ),
            python_schema=core_schema.no_info_plain_validator_function(validate_object_id),
            serialization=core_schema.plain_serializer_function_ser_schema(
                str,
                when_used='always',
                return_schema=core_schema.str_schema(),
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {
            'type': 'string',
            'pattern': OBJECT_ID_PATTERN,
            'example': '507f1f77bcf86cd799439011',
        }
