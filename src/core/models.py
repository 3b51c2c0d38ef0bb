"""Immutable request models for the analysis tools.

Each tool accepts one of two argument shapes: the UVL model text alone
(ModelRequest) or the text plus a configuration file path
(ModelRequestWithConfig). The models double as the source of the
JSON schemas published in the tool catalog.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from core.errors import InvalidInputError


class ModelRequest(BaseModel):
    """Arguments for operations that only need the feature model."""

    model_config = ConfigDict(frozen=True)

    content: str = Field(
        min_length=1,
        description="UVL (universal variability language) feature model content",
    )


class ModelRequestWithConfig(ModelRequest):
    """Arguments for operations that also read a configuration file.

    The path is handed to the engine untouched; whether the file exists
    is the engine's concern.
    """

    config_file: str = Field(
        alias="configFile",
        description="Path to the configuration file",
    )


RequestT = TypeVar("RequestT", bound=ModelRequest)


def parse_request(model: Type[RequestT], arguments: Optional[Mapping[str, Any]]) -> RequestT:
    """Validate a raw argument bag against a request model.

    Raises InvalidInputError carrying the validation diagnostic.
    """
    try:
        return model.model_validate(arguments if arguments is not None else {})
    except PydanticValidationError as e:
        raise InvalidInputError(f"Invalid input: {e}") from e


def input_schema(model: Type[ModelRequest]) -> dict[str, Any]:
    return model.model_json_schema(by_alias=True)
