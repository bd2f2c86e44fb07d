"""Markdown rendering of gateway results for the MCP tools."""

from taskwarrior_web.models.api import ContextListResult
from taskwarrior_web.models.context import NONE_CONTEXT
from taskwarrior_web.models.task import TaskModel


def _format_task_markdown(task: TaskModel) -> str:
    """Format a single task as markdown."""
    lines = []

    task_id = task.id if task.id else (task.uuid[:8] if task.uuid else "?")
    desc = task.description or "No description"
    lines.append(f"### [{task_id}] {desc}")

    details = []
    if task.status != "pending":
        details.append(f"**Status**: {task.status}")
    if task.project:
        details.append(f"**Project**: {task.project}")
    if task.priority:
        priority_map = {"H": "High", "M": "Medium", "L": "Low"}
        details.append(f"**Priority**: {priority_map.get(task.priority, task.priority)}")
    if task.due:
        details.append(f"**Due**: {task.due}")
    if task.tags:
        details.append(f"**Tags**: {', '.join(task.tags)}")
    if task.urgency:
        details.append(f"**Urgency**: {task.urgency:.2f}")

    if details:
        lines.append(" | ".join(details))

    if task.annotations:
        lines.append("**Notes:**")
        for ann in task.annotations:
            entry = ann.entry[:10] if ann.entry else ""
            lines.append(f"  - [{entry}] {ann.description}")

    return "\n".join(lines)


def _format_tasks_markdown(tasks: list[TaskModel], context: str = NONE_CONTEXT, total: int | None = None) -> str:
    """Format a list of tasks as markdown, headed by the context they came from."""
    title = "Tasks" if context == NONE_CONTEXT else f"Tasks in context '{context}'"
    if not tasks:
        return f"# {title}\n\nNo tasks found."

    count = f"*{len(tasks)} task(s)*"
    if total is not None and total > len(tasks):
        count = f"*{len(tasks)} of {total} task(s)*"
    lines = [f"# {title}", count, ""]

    for task in tasks:
        lines.append(_format_task_markdown(task))
        lines.append("")

    return "\n".join(lines)


def _format_contexts_markdown(result: ContextListResult) -> str:
    """Format the context list, marking the active one."""
    lines = ["# Contexts", ""]
    for name in result.contexts:
        marker = " (active)" if name == result.active else ""
        lines.append(f"- {name}{marker}")
    return "\n".join(lines)
