# Switchyard CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Main class for dispatching command lines to Switchyard command handlers.

The `Dispatcher` receives an already-built collection of handlers and turns a
token list into output lines:

- Usage for a scope when no command (or `-?`) is given, or the command is unknown.
- A fixed error line when a switch appears where a command was expected.
- The handler's usage when `-?` follows the command.
- A list of missing required switches.
- Otherwise, whatever the handler writes while running.

Handlers form a tree through `parent_name`. Top-level handlers have an empty
parent; a handler runs its sub-commands by calling
`self.dispatcher.process_sub_command(self.primary_name, args)`.

Resolution rules, in order:
1. The first handler in the scope that lists the token among its `names`.
2. Otherwise the first handler in the scope that lists "default".
A handler that lists "default" always receives the full token list, command
name included.

Example:
    dispatcher = Dispatcher([VersionCommand()])
    for line in dispatcher.process(["version", "--long"]):
        print(line)
"""
from __future__ import annotations

from typing import Iterable, Sequence

from switchyard.exceptions import SwitchError
from switchyard.logger import logger
from switchyard.protocols import CommandHandlerProtocol
from switchyard.switch import HELP_SWITCH
from switchyard.tokenizer import HELP_PREFIX, SHORT_PREFIX, extract_switches

DEFAULT_NAME = "default"
USAGE_HEADER = "Usage: "
UNEXPECTED_SWITCH_MESSAGE = (
    "Unexpected - when command was expected. Please start with command."
)
INVALID_SWITCHES_MESSAGE = (
    "Invalid switches passed in. Please use -? to list available switches."
)
MISSING_SWITCHES_MESSAGE = "You need to use the following switches: "


class Dispatcher:
    """
    Resolves command lines against a registry of command handlers.

    Args:
        handlers (Iterable[CommandHandlerProtocol]): The handler registry. Order
            matters: when two handlers in the same scope answer to a name, the
            one registered first wins.

    Methods:
        process(): Dispatch a top-level command line.
        process_sub_command(): Dispatch a command line within a parent scope.
        get_sub_commands(): List the primary names of a command's children.
        usage(): Build the usage listing for a scope.
        find_handler(): Look up the handler that answers a name in a scope.
    """

    def __init__(self, handlers: Iterable[CommandHandlerProtocol]) -> None:
        self._handlers: tuple[CommandHandlerProtocol, ...] = tuple(handlers)
        for handler in self._handlers:
            if not isinstance(handler, CommandHandlerProtocol):
                raise TypeError(
                    f"{handler!r} does not implement the command handler interface."
                )
        logger.debug("Dispatcher created with %d handler(s).", len(self._handlers))

    @property
    def handlers(self) -> tuple[CommandHandlerProtocol, ...]:
        return self._handlers

    def process(self, tokens: Sequence[str]) -> list[str]:
        """Dispatch a top-level command line."""
        return self.process_sub_command("", tokens)

    def process_sub_command(self, parent_name: str, tokens: Sequence[str]) -> list[str]:
        """
        Dispatch `tokens` among the handlers whose parent is `parent_name`.

        Returns:
            list[str]: Output lines. Switch errors and errors raised while the
            handler runs are reported as the invalid-switches line rather than
            raised; the cause is kept in the log.
        """
        tokens = list(tokens)
        logger.debug("Dispatching %s under parent '%s'.", tokens, parent_name)

        if not tokens or tokens[0] == HELP_PREFIX:
            return self.usage(parent_name)

        if tokens[0].startswith(SHORT_PREFIX):
            return [UNEXPECTED_SWITCH_MESSAGE]

        handler = self.find_handler(parent_name, tokens[0])
        if handler is None:
            logger.info("Unknown command '%s' under parent '%s'.", tokens[0], parent_name)
            return self.usage(parent_name)
        logger.info("Command '%s' selected.", handler.primary_name)

        command_args = tokens if DEFAULT_NAME in handler.names else tokens[1:]
        try:
            positional = extract_switches(handler, command_args)

            if handler.is_set(HELP_SWITCH):
                return handler.usage()

            missing = [
                switch.first_name
                for switch in handler.switches
                if switch.required and not handler.is_set(switch.first_name)
            ]
            if missing:
                logger.info(
                    "[%s] Missing required switches: %s",
                    handler.primary_name,
                    missing,
                )
                return [MISSING_SWITCHES_MESSAGE + ",".join(missing)]

            return handler.run(self, positional)
        except SwitchError as error:
            logger.debug("[%s] %s", handler.primary_name, error)
            return [INVALID_SWITCHES_MESSAGE]
        except Exception:
            logger.exception("[%s] Command failed.", handler.primary_name)
            return [INVALID_SWITCHES_MESSAGE]

    def find_handler(
        self, parent_name: str, name: str
    ) -> CommandHandlerProtocol | None:
        """Return the handler answering `name` in `parent_name`, falling back to "default"."""
        scope = [h for h in self._handlers if h.parent_name == parent_name]
        handler = next((h for h in scope if name in h.names), None)
        if handler is None:
            handler = next((h for h in scope if DEFAULT_NAME in h.names), None)
        return handler

    def get_sub_commands(self, parent_name: str) -> list[str]:
        """Return the primary names of all handlers under `parent_name`, ignoring case."""
        parent = parent_name.casefold()
        return [
            handler.primary_name
            for handler in self._handlers
            if handler.parent_name.casefold() == parent
        ]

    def usage(self, parent_name: str) -> list[str]:
        scope = [h for h in self._handlers if h.parent_name == parent_name]
        lines = [USAGE_HEADER]
        lines.extend(h.usage_text for h in sorted(scope, key=lambda h: h.usage_priority))
        return lines

    def __str__(self) -> str:
        return f"Dispatcher(handlers={len(self._handlers)})"

    def __repr__(self) -> str:
        return str(self)
