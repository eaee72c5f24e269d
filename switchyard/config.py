# Switchyard CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Builds a Switchyard handler registry from a YAML or TOML file.

Each entry under `commands` is either a handler class to instantiate:

    - handler: mypkg.commands.VersionCommand

or a declarative command backed by a function:

    - primary_name: remote
      usage_text: "remote <add|list> - Manage remotes."
      action: mypkg.tasks.remote
      switches:
        - names: [verbose]
          short_names: [v]
      subcommands:
        - primary_name: add
          action: mypkg.tasks.remote_add

Sub-commands get their `parent_name` from the entry they are nested under.
Only the handler registry comes from the file; switch values always come
from the command line.
"""
from __future__ import annotations

import importlib
import sys
from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, model_validator

from switchyard.command import Command
from switchyard.console import console
from switchyard.dispatcher import Dispatcher
from switchyard.exceptions import HandlerConfigError
from switchyard.handler import CommandHandler
from switchyard.logger import logger
from switchyard.protocols import CommandHandlerProtocol
from switchyard.switch import SwitchDescriptor

MAX_DEPTH = 5
HANDLER_DECLARED_FIELDS = frozenset(
    {
        "primary_name",
        "names",
        "switches",
        "usage_text",
        "usage_priority",
        "process_switches",
    }
)


def import_action(dotted_path: str) -> Any:
    """Dynamically imports an object from a dotted path like 'my.module.func'."""
    module_path, _, attr = dotted_path.rpartition(".")
    if not module_path:
        console.print(f"[bold red]Invalid action path:[/] {dotted_path}")
        sys.exit(1)
    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError as error:
        logger.error("Failed to import module '%s': %s", module_path, error)
        console.print(
            f"[bold red]Could not import '{dotted_path}': {error}[/]\n"
            "Ensure the module is installed and discoverable via PYTHONPATH."
        )
        sys.exit(1)
    try:
        action = getattr(module, attr)
    except AttributeError as error:
        logger.error(
            "Module '%s' does not have attribute '%s': %s", module_path, attr, error
        )
        console.print(
            f"[bold red]Module '{module_path}' has no attribute '{attr}': {error}[/]"
        )
        sys.exit(1)
    return action


class RawCommand(BaseModel):
    """Raw command model for Switchyard configuration."""

    handler: str | None = None
    primary_name: str | None = None
    action: str | None = None
    names: list[str] = Field(default_factory=list)
    switches: list[SwitchDescriptor] = Field(default_factory=list)
    usage_text: str = ""
    usage_priority: int = 100
    process_switches: bool = True
    subcommands: list[dict[str, Any]] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_source(self) -> RawCommand:
        if self.handler:
            if self.action:
                raise ValueError("Use either 'handler' or 'action', not both.")
            ignored = sorted(self.model_fields_set & HANDLER_DECLARED_FIELDS)
            if ignored:
                raise ValueError(
                    f"'handler' entries take their settings from the class; "
                    f"remove: {', '.join(ignored)}."
                )
            return self
        if not self.primary_name or not self.action:
            raise ValueError("Commands need 'primary_name' and 'action', or 'handler'.")
        return self


def build_handler(raw_command: RawCommand, parent_name: str) -> CommandHandlerProtocol:
    if raw_command.handler:
        handler_cls = import_action(raw_command.handler)
        if not (isinstance(handler_cls, type) and issubclass(handler_cls, CommandHandler)):
            raise HandlerConfigError(
                f"'{raw_command.handler}' is not a CommandHandler subclass."
            )
        handler = handler_cls()
        if parent_name and handler.parent_name != parent_name:
            raise HandlerConfigError(
                f"Handler '{handler.primary_name}' is nested under '{parent_name}' "
                f"but declares parent '{handler.parent_name}'."
            )
        return handler

    assert raw_command.primary_name is not None and raw_command.action is not None
    return Command(
        raw_command.primary_name,
        import_action(raw_command.action),
        names=raw_command.names or None,
        parent_name=parent_name,
        switches=raw_command.switches,
        usage_text=raw_command.usage_text,
        usage_priority=raw_command.usage_priority,
        process_switches=raw_command.process_switches,
    )


def convert_commands(
    raw_commands: list[dict[str, Any]], parent_name: str = "", _depth: int = 0
) -> list[CommandHandlerProtocol]:
    """Turn raw command entries into handlers, flattening nested sub-commands."""
    if _depth > MAX_DEPTH:
        raise HandlerConfigError(
            f"Maximum sub-command depth exceeded ({MAX_DEPTH} levels deep)"
        )
    handlers: list[CommandHandlerProtocol] = []
    for entry in raw_commands:
        try:
            raw_command = RawCommand.model_validate(entry)
        except ValidationError as error:
            raise HandlerConfigError(f"Invalid command entry {entry!r}: {error}") from error
        handler = build_handler(raw_command, parent_name)
        handlers.append(handler)
        handlers.extend(
            convert_commands(
                raw_command.subcommands, handler.primary_name, _depth=_depth + 1
            )
        )
    return handlers


def loader(file_path: Path | str) -> Dispatcher:
    """
    Load a Switchyard handler registry from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to the config file (YAML or TOML).

    Returns:
        Dispatcher: A dispatcher over the configured handlers.

    Raises:
        TypeError: If `file_path` is not a string or Path.
        FileNotFoundError: If the file does not exist.
        ValueError: If the file format is unsupported or the content is not a mapping.
        HandlerConfigError: If a command entry is invalid.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if not isinstance(raw_config, dict) or not isinstance(
        raw_config.get("commands"), list
    ):
        raise ValueError(
            "Configuration file must contain a dictionary with a list of commands.\n"
            "Example:\n"
            "commands:\n"
            "  - primary_name: 'version'\n"
            "    usage_text: 'version - Print the version.'\n"
            "    action: 'my_module.version'"
        )

    handlers = convert_commands(raw_config["commands"])
    logger.debug("Loaded %d handler(s) from '%s'.", len(handlers), path)
    return Dispatcher(handlers)
