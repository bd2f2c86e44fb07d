"""MCP tool definitions mirroring the HTTP API."""

import json

from mcp.types import ToolAnnotations

from taskwarrior_web.enums import ResponseFormat
from taskwarrior_web.errors import TaskwarriorError
from taskwarrior_web.gateway import get_gateway
from taskwarrior_web.models.inputs import (
    DeleteTasksInput,
    ListContextsInput,
    ListTasksInput,
    SetContextInput,
    UpdateTasksInput,
)
from taskwarrior_web.server import mcp
from taskwarrior_web.utils.formatters import _format_contexts_markdown, _format_tasks_markdown
from taskwarrior_web.utils.parsers import _parse_tasks


@mcp.tool(
    name="taskwarrior_list",
    annotations=ToolAnnotations(
        title="List Tasks",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def taskwarrior_list(params: ListTasksInput) -> str:
    """
    List tasks selected by the active Taskwarrior context.

    USE THIS WHEN:
    - Looking at the tasks the user currently works on
    - Checking which context is active together with its tasks

    DO NOT USE WHEN:
    - You want a different subset → switch with taskwarrior_set_context first

    Args:
        params: ListTasksInput containing limit and response_format

    Returns:
        Tasks (markdown or JSON) headed by the active context
    """
    try:
        result = get_gateway().list_tasks()
    except TaskwarriorError as e:
        return e.message

    total = len(result.tasks)
    raw_tasks = result.tasks[: params.limit] if params.limit else result.tasks

    if params.response_format == ResponseFormat.JSON:
        return json.dumps(
            {"context": result.context, "total": total, "count": len(raw_tasks), "tasks": raw_tasks},
            indent=2,
        )

    return _format_tasks_markdown(_parse_tasks(raw_tasks), result.context, total)


@mcp.tool(
    name="taskwarrior_update",
    annotations=ToolAnnotations(
        title="Create or Update Tasks",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def taskwarrior_update(params: UpdateTasksInput) -> str:
    """
    Create or update tasks by importing them into Taskwarrior.

    Tasks carrying the uuid of an existing task replace its attributes;
    tasks without a uuid are created.

    Args:
        params: UpdateTasksInput containing the task objects

    Returns:
        Taskwarrior's import report, or the error it produced

    Examples:
        - Rename: params with tasks=[{"uuid": "a1b2...", "description": "New text"}]
        - Create: params with tasks=[{"description": "Buy milk", "project": "home"}]
    """
    result = get_gateway().update_tasks(params.tasks)
    if result.success:
        return f"Tasks updated successfully.\n{result.message}"
    return result.message


@mcp.tool(
    name="taskwarrior_delete",
    annotations=ToolAnnotations(
        title="Delete Tasks",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def taskwarrior_delete(params: DeleteTasksInput) -> str:
    """
    Delete tasks by UUID.

    Args:
        params: DeleteTasksInput containing the uuids

    Returns:
        Confirmation message
    """
    result = get_gateway().delete_tasks(params.uuids)
    if result.success:
        return f"Tasks deleted.\n{result.message}"
    return result.message


@mcp.tool(
    name="taskwarrior_contexts",
    annotations=ToolAnnotations(
        title="List Contexts",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def taskwarrior_contexts(params: ListContextsInput) -> str:
    """
    List the configured Taskwarrior contexts and show which one is active.

    "none" is always listed; it stands for "no context".

    Args:
        params: ListContextsInput with response_format

    Returns:
        Context names with the active one marked
    """
    result = get_gateway().list_contexts()
    if params.response_format == ResponseFormat.JSON:
        return result.model_dump_json(indent=2)
    return _format_contexts_markdown(result)


@mcp.tool(
    name="taskwarrior_set_context",
    annotations=ToolAnnotations(
        title="Set Context",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def taskwarrior_set_context(params: SetContextInput) -> str:
    """
    Switch the active Taskwarrior context and list the tasks it selects.

    Args:
        params: SetContextInput with the context name ("none" clears it)

    Returns:
        The context now active and its tasks

    Examples:
        - Work context: params with name="work"
        - Clear context: params with name="none"
    """
    try:
        result = get_gateway().set_context(params.name)
    except TaskwarriorError as e:
        return e.message

    if params.response_format == ResponseFormat.JSON:
        return result.model_dump_json(indent=2)

    if result.tasks is None:
        return f"Context set to '{result.context}', but its tasks could not be exported."
    return _format_tasks_markdown(_parse_tasks(result.tasks), result.context)
