# src/task_tracker/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from ..core.state import AppState
from ..tasks.errors import TaskError
from ..tasks.task_models import Task

CommandHandler = Callable[[AppState, list[str]], Awaitable[str]]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    async def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.

        Task errors (unknown id, blank title...) become the reply text;
        anything else is logged and reported as an internal error.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            return await handler(state, args)
        except TaskError as e:
            return str(e)
        except Exception:
            logger.exception("Command /%s crashed.", name)
            return "Internal error while handling a command."

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def format_task(task: Task) -> str:
    mark = "x" if task.completed else " "
    return f"#{task.id} [{mark}] {task.title}: {task.description}"


def _format_list(header: str, tasks: list[Task]) -> str:
    if not tasks:
        return f"{header}: none."
    return "\n".join([f"{header} ({len(tasks)}):", *(f"  {format_task(t)}" for t in tasks)])


def _parse_id(args: list[str]) -> int | None:
    if not args:
        return None
    try:
        return int(args[0])
    except ValueError:
        return None


def _split_title_description(args: list[str]) -> tuple[str, str]:
    """'buy milk | two bottles' -> ('buy milk', 'two bottles'); validation is the service's job."""
    title, _, description = " ".join(args).partition("|")
    return title, description


async def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


async def cmd_status(state: AppState, args: list[str]) -> str:
    done = await state.task_service.get_completed_tasks()
    pending = await state.task_service.get_pending_tasks()
    app_name = getattr(state.settings, "app_name", "tasks")
    return (
        "Status:\n"
        f"  App: {app_name}\n"
        f"  Tasks: {len(done) + len(pending)} total, {len(done)} done, {len(pending)} pending"
    )


async def cmd_list(state: AppState, args: list[str]) -> str:
    return _format_list("Tasks", await state.task_service.get_all_tasks())


async def cmd_done(state: AppState, args: list[str]) -> str:
    return _format_list("Completed tasks", await state.task_service.get_completed_tasks())


async def cmd_pending(state: AppState, args: list[str]) -> str:
    return _format_list("Pending tasks", await state.task_service.get_pending_tasks())


async def cmd_show(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /show <id>"
    return format_task(await state.task_service.get_task_by_id(task_id))


async def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add <title> | <description>
    """
    title, description = _split_title_description(args)
    task = await state.task_service.create_task(title, description)
    if task is None:
        return "Task created."
    return f"Task created: {format_task(task)}"


async def cmd_edit(state: AppState, args: list[str]) -> str:
    """
    /edit <id> <title> | <description>

    Keeps the current completion flag.
    """
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /edit <id> <title> | <description>"

    current = await state.task_service.get_task_by_id(task_id)
    title, description = _split_title_description(args[1:])
    await state.task_service.update_task(
        Task(id=task_id, title=title, description=description, completed=current.completed)
    )
    return f"Task #{task_id} updated."


async def cmd_toggle(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /toggle <id>"
    task = await state.task_service.toggle_task_completion(task_id)
    return f"Task #{task.id} is now {'done' if task.completed else 'pending'}."


async def cmd_delete(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /delete <id>"
    await state.task_service.delete_task(task_id)
    return f"Task #{task_id} deleted."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show task totals.")
registry.register("list", cmd_list, help_text="List all tasks.", aliases=["ls"])
registry.register("done", cmd_done, help_text="List completed tasks.")
registry.register("pending", cmd_pending, help_text="List pending tasks.")
registry.register("show", cmd_show, help_text="Show one task: /show <id>.")
registry.register("add", cmd_add, help_text="Create a task: /add <title> | <description>.")
registry.register(
    "edit", cmd_edit, help_text="Edit a task: /edit <id> <title> | <description>."
)
registry.register("toggle", cmd_toggle, help_text="Flip done/pending: /toggle <id>.")
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <id>.", aliases=["rm"])
