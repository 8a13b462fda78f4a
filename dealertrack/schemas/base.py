"""
Shared schema configuration and coercing field types.
"""
from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Annotated

from dealertrack.models.base import to_float, to_int

# Numbers arrive from HTML forms as strings or blanks; anything that is not
# numeric becomes 0.
Amount = Annotated[float, BeforeValidator(to_float)]
Count = Annotated[int, BeforeValidator(to_int)]


class CamelModel(BaseModel):
    """Snake_case attributes exposed as camelCase JSON keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_record(self) -> dict:
        """Dump only the fields the caller actually sent, keyed by JSON name."""
        return self.model_dump(by_alias=True, exclude_unset=True)


class DeleteResult(BaseModel):
    """Acknowledgment returned by DELETE endpoints."""
    success: bool = True
