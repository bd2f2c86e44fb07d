"""CLI utilities for Taskwarrior interaction."""

import json
import logging
import shlex
import subprocess
from typing import Any

from taskwarrior_web.config import get_settings

logger = logging.getLogger(__name__)


def _run_task_command(args: list[str], input_text: str | None = None) -> tuple[bool, str]:
    """
    Execute a Taskwarrior command and return the result.

    Args:
        args: List of command arguments (without 'task' prefix)
        input_text: Optional input to send to stdin (JSON for `import`)

    Returns:
        Tuple of (success: bool, output: str)
    """
    settings = get_settings()
    timeout = settings.command_timeout
    try:
        cmd = [settings.task_binary] + args
        logger.debug("Running %s", cmd)
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            timeout=timeout,
            input=input_text,
            env=settings.task_environment(),
        )

        output = result.stdout.strip()
        if result.returncode != 0:
            error = result.stderr.strip() or output
            logger.debug("task %s exited with %s: %s", " ".join(args), result.returncode, error)
            return False, f"Error: {error}"

        return True, output

    except subprocess.TimeoutExpired:
        logger.warning("task %s timed out after %ss", " ".join(args), timeout)
        return False, f"Error: Command timed out after {timeout:g} seconds"
    except FileNotFoundError:
        logger.error("Taskwarrior binary %r not found", settings.task_binary)
        return False, (
            "Error: Taskwarrior is not installed or not in PATH. Install it with 'brew install task' or equivalent."
        )
    except Exception as e:
        logger.exception("Unexpected failure running task %s", " ".join(args))
        return False, f"Error: Unexpected error - {type(e).__name__}: {str(e)}"


def _get_tasks_json(filter_expr: str | None = None) -> tuple[bool, list[dict[str, Any]] | str]:
    """
    Get tasks as JSON from Taskwarrior.

    The filter expression is split into words the way a shell would, so a
    context definition such as "+work or +urgent" reaches Taskwarrior as
    separate terms rather than as one quoted word.

    Args:
        filter_expr: Optional filter expression

    Returns:
        Tuple of (success: bool, tasks: List[dict] | error: str)
    """
    args = []

    if filter_expr:
        try:
            args.extend(shlex.split(filter_expr))
        except ValueError as e:
            return False, f"Error: Invalid filter expression {filter_expr!r} - {str(e)}"

    args.append("export")

    success, output = _run_task_command(args)
    if not success:
        return False, output

    try:
        tasks = json.loads(output) if output else []
    except json.JSONDecodeError as e:
        return False, f"Error: Failed to parse task output - {str(e)}"

    if not isinstance(tasks, list):
        return False, "Error: Failed to parse task output - expected a JSON array"
    return True, tasks
