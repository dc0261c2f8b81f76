"""Pydantic models for the TODO API."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class TaskCreate(BaseModel):
    """Request body for creating a new task.

    Unknown keys are ignored and ``completed`` is accepted but never honoured;
    the store always creates open tasks. A JSON ``null`` body or field decodes
    to the zero value, while a value of the wrong type is rejected.
    """

    model_config = ConfigDict(strict=True)

    content: str = Field(default="", description="The task text, stored verbatim")
    completed: bool = Field(default=False, description="Ignored on creation")

    @model_validator(mode="before")
    @classmethod
    def _null_body_is_empty(cls, data: Any) -> Any:
        return {} if data is None else data

    @field_validator("content", mode="before")
    @classmethod
    def _null_content_is_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("completed", mode="before")
    @classmethod
    def _null_completed_is_false(cls, value: Any) -> Any:
        return False if value is None else value


class Task(BaseModel):
    """A task item in the store."""

    id: int = Field(..., description="Server-assigned, strictly increasing identifier")
    content: str = Field(..., description="The task text")
    completed: bool = Field(default=False, description="Whether the task has been completed")
