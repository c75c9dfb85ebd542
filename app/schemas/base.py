"""
Base Pydantic schemas with common configuration.

These are templates that other schemas inherit from.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base schema for the JSON surface.

    Fields are snake_case in Python and camelCase on the wire
    (``due_date`` <-> ``dueDate``). Incoming payloads may use either.
    Unknown keys are ignored so clients can send back a full task.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class CamelRead(CamelModel):
    """
    Base schema for reading rows.

    This tells Pydantic to work with SQLAlchemy models.
    """

    model_config = ConfigDict(from_attributes=True)
