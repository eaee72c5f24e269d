# Switchyard CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""command.py

Defines `Command`, a ready-made handler that wraps a plain function, and the
`command` decorator that builds one.

The wrapped function is called as `action(command, args)`: it receives the
`Command` instance (for `is_set`, `get_values`, `write_text` and `dispatcher`)
and the positional arguments. A returned string is written as one output line,
a returned iterable of strings is written line by line, and None writes nothing.

Example:
    @command(
        "greet",
        usage_text="greet <name> - Say hello.",
        switches=[SwitchDescriptor(names=["shout"], short_names=["s"])],
    )
    def greet(cmd: Command, args: list[str]) -> str:
        message = f"Hello, {' '.join(args) or 'world'}!"
        return message.upper() if cmd.is_set("shout") else message

    Dispatcher([greet]).process(["greet", "-s", "Ada"])  # ['HELLO, ADA!']
"""
from __future__ import annotations

from typing import Any, Callable, Iterable, Sequence

from switchyard.exceptions import InvalidActionError
from switchyard.handler import CommandHandler
from switchyard.switch import SwitchDescriptor

Action = Callable[["Command", list[str]], Any]


class Command(CommandHandler):
    """
    Command handler backed by a callable.

    Args:
        primary_name (str): Unique name of the command.
        action (Callable[[Command, list[str]], Any]): Function run with the
            command and its positional arguments.
        names (str | Sequence[str] | None): Names the command answers to. A
            single string is one name. Defaults to `[primary_name]`.
        parent_name (str): `primary_name` of the parent command.
        switches (Iterable[SwitchDescriptor | dict]): Accepted switches. Dicts are
            validated into `SwitchDescriptor`.
        usage_text (str): Line shown in the parent's usage listing.
        usage_priority (int): Sort order in usage listings.
        process_switches (bool): Whether the dispatcher extracts switches.
    """

    def __init__(
        self,
        primary_name: str,
        action: Action,
        *,
        names: str | Sequence[str] | None = None,
        parent_name: str = "",
        switches: Iterable[SwitchDescriptor | dict[str, Any]] = (),
        usage_text: str = "",
        usage_priority: int = 100,
        process_switches: bool = True,
    ) -> None:
        super().__init__()
        if not callable(action):
            raise InvalidActionError(
                f"Action for command '{primary_name}' must be callable, "
                f"got {type(action).__name__}."
            )
        self.primary_name = primary_name
        self.action = action
        if isinstance(names, str):
            names = (names,)
        self.names = tuple(names) if names else (primary_name,)
        self.parent_name = parent_name
        self.switches = tuple(
            switch
            if isinstance(switch, SwitchDescriptor)
            else SwitchDescriptor.model_validate(switch)
            for switch in switches
        )
        self.usage_text = usage_text
        self.usage_priority = usage_priority
        self.process_switches = process_switches

    def process_command(self, args: list[str]) -> None:
        result = self.action(self, args)
        if result is None:
            return
        if isinstance(result, str):
            self.write_text(result)
            return
        for line in result:
            self.write_text(str(line))


def command(
    primary_name: str | None = None,
    **options: Any,
) -> Callable[[Action], Command]:
    """
    Build a `Command` from the decorated function.

    `primary_name` defaults to the function name. Remaining keyword arguments
    are passed to `Command`.
    """

    def decorator(function: Action) -> Command:
        return Command(primary_name or function.__name__, function, **options)

    return decorator
