"""
Shared API schema pieces.

Request and response bodies use camelCase JSON keys; Python code uses the
snake_case field names.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

DataT = TypeVar("DataT")


class CamelModel(BaseModel):
    """Base model with camelCase aliases, accepting either naming on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ToolResponse(BaseModel, Generic[DataT]):
    """Success envelope returned by every calculator endpoint."""

    success: bool = True
    data: DataT


class ErrorResponse(BaseModel):
    """Failure envelope for rejected input and internal errors."""

    success: bool = False
    error: str
