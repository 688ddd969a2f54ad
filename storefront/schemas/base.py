"""Base schema configuration shared by request and response models"""

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

# Money stays a Decimal in Python and is written to JSON as a number
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

# Signed 32-bit, the range of an Integer column on every supported backend
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
DbInt = Annotated[int, Field(ge=INT_MIN, le=INT_MAX)]


class BaseSchema(BaseModel):
    """Base schema with common configuration"""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class MessageResponse(BaseSchema):
    """Plain confirmation message"""
    message: str
