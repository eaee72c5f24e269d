# Switchyard CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `CommandHandler`, the base class for application command handlers.

A handler declares who it is (`primary_name`, `names`, `parent_name`), what
switches it accepts (`switches`), and how it shows up in usage output
(`usage_text`, `usage_priority`). Subclasses implement `process_command`,
which receives the positional arguments left over after switch extraction and
writes output with `write_text`.

Example:
    class VersionCommand(CommandHandler):
        primary_name = "version"
        names = ("version",)
        usage_text = "Prints the version of the application."
        switches = (SwitchDescriptor(names=["long"], short_names=["l"]),)

        def process_command(self, args):
            self.write_text("Version: 1.0.0.0")
            if self.is_set("long"):
                self.write_text("Built with Switchyard.")

Switch state lives in a `SwitchStore` held by composition, and the output
buffer lives on the instance. Neither is reset between runs; call `reset()` or
build a new instance to start fresh.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from switchyard.exceptions import InvalidSwitchError
from switchyard.logger import logger
from switchyard.protocols import DispatcherProtocol
from switchyard.switch import SwitchDescriptor
from switchyard.switch_store import SwitchStore


class CommandHandler(ABC):
    """
    Base class for command handlers.

    Attributes:
        primary_name (str): Unique name, used as `parent_name` by sub-commands.
        names (Sequence[str]): Names the command answers to on the command line.
            Include "default" to catch anything no sibling handler matches.
        parent_name (str): `primary_name` of the parent command, "" for top level.
        switches (Sequence[SwitchDescriptor]): Switches this command accepts.
        usage_text (str): Line shown in the parent's usage listing.
        usage_priority (int): Sort order in usage listings, lower values first.
        process_switches (bool): When False, every token is passed to
            `process_command` untouched.
        dispatcher (DispatcherProtocol | None): Dispatcher that last ran this
            handler. Use it to run sub-commands.
    """

    primary_name: str = ""
    names: Sequence[str] = ()
    parent_name: str = ""
    switches: Sequence[SwitchDescriptor] = ()
    usage_text: str = ""
    usage_priority: int = 100
    process_switches: bool = True

    def __init__(self) -> None:
        self.switch_store: SwitchStore = SwitchStore()
        self.dispatcher: DispatcherProtocol | None = None
        self._output: list[str] = []

    @abstractmethod
    def process_command(self, args: list[str]) -> None:
        """Handle the command. `args` holds the positional arguments only."""
        raise NotImplementedError("process_command must be implemented by subclasses")

    def run(self, dispatcher: DispatcherProtocol, args: Sequence[str]) -> list[str]:
        """
        Run the command on behalf of `dispatcher` and return its output lines.

        Switch keys are checked against the declared switches only after
        `process_command` has returned, so the command has already acted by the
        time an undeclared switch is reported.

        Raises:
            InvalidSwitchError: If the switch store holds a key that is not
                declared by this handler.
        """
        self.dispatcher = dispatcher
        logger.debug("[%s] Running with args: %s", self.primary_name, list(args))
        self.process_command(list(args))

        unknown = self.switch_store.unknown_keys(self.switches)
        if unknown:
            logger.warning(
                "[%s] Switch '%s' is not declared by this command.",
                self.primary_name,
                unknown[0],
            )
            raise InvalidSwitchError(unknown[0])

        return list(self._output)

    def mark_present(self, key: str) -> None:
        self.switch_store.mark_present(key)

    def append_value(self, key: str, value: str) -> None:
        self.switch_store.append_value(key, value)

    def is_set(self, name: str) -> bool:
        """Check if a switch was passed, by any of its long or short names."""
        return self.switch_store.is_set(name, self.switches)

    def get_values(self, name: str) -> list[str] | None:
        """
        Return the values passed to a switch.

        Returns None if the switch is not declared or was not passed, and an
        empty list if it was passed without values.
        """
        return self.switch_store.get_values(name, self.switches)

    def write_text(self, message: str) -> None:
        """Add a line to the output returned from `run`."""
        self._output.append(message)

    def reset(self) -> None:
        """Forget recorded switches and output lines."""
        self.switch_store.clear()
        self._output.clear()

    def usage(self) -> list[str]:
        lines = [
            f"Usage for {self.primary_name} :",
            self.usage_text,
            "",
            "Supported Switches: ",
        ]
        for switch in sorted(self.switches, key=lambda s: s.usage_priority):
            lines.append(switch.usage_line())
        return lines

    def __str__(self) -> str:
        return (
            f"{type(self).__name__}(primary_name='{self.primary_name}', "
            f"names={list(self.names)}, parent_name='{self.parent_name}', "
            f"switches={len(self.switches)})"
        )

    def __repr__(self) -> str:
        return str(self)
