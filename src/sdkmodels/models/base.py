"""Base classes for SDK request/response models."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic_core import PydanticSerializationError


class SdkModel(BaseModel):
    """Base class for all SDK models.

    Models accept either field names or wire aliases on input and ignore keys
    they do not know, so newer server payloads still decode.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    service: ClassVar[str] = ""

    def to_json(self) -> str:
        """Wire JSON: aliased keys, unset optional fields omitted."""
        return self.model_dump_json(by_alias=True, exclude_none=True)

    def __str__(self) -> str:
        name = type(self).__name__
        try:
            return f"{name} {self.to_json()}"
        except PydanticSerializationError:
            return f"{name} {{}}"


class SdkResponse(SdkModel):
    """Base class for response models.

    ``http_status_code`` is filled in by the transport and never serialized.
    """

    http_status_code: int | None = Field(default=None, exclude=True)
