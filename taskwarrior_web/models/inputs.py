"""Input models for Taskwarrior Web MCP tools."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from taskwarrior_web.enums import ResponseFormat
from taskwarrior_web.models.task import TaskModel


class ListTasksInput(BaseModel):
    """Input model for listing tasks under the active context."""

    model_config = ConfigDict(str_strip_whitespace=True)

    limit: int | None = Field(default=50, description="Maximum number of tasks to return", ge=1, le=500)
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown' for human-readable or 'json' for machine-readable",
    )


class UpdateTasksInput(BaseModel):
    """Input model for creating or updating tasks via `task import`."""

    tasks: list[TaskModel] = Field(
        default_factory=list,
        description="Task objects; tasks with a known uuid are updated, the rest are created",
    )


class DeleteTasksInput(BaseModel):
    """Input model for deleting tasks by UUID."""

    model_config = ConfigDict(str_strip_whitespace=True)

    uuids: list[str] = Field(default_factory=list, description="UUIDs of the tasks to delete", max_length=500)


class ListContextsInput(BaseModel):
    """Input model for listing contexts."""

    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown' for human-readable or 'json' for machine-readable",
    )


class SetContextInput(BaseModel):
    """Input model for switching the active context."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., description="Context to activate, or 'none' to clear it", min_length=1)
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown' for human-readable or 'json' for machine-readable",
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Context name cannot be empty")
        return v.strip()
