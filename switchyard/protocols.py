# Switchyard CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines structural protocols for the objects the dispatcher works with.

Protocols:
- CommandHandlerProtocol: anything the dispatcher can select, tokenize for, and run.
- DispatcherProtocol: what a running handler may call back into to run sub-commands.

Handlers do not need to inherit from `CommandHandler`; any object exposing these
attributes and methods can be registered. `CommandHandler` is the stock
implementation that keeps its switch state in a `SwitchStore`.
"""
from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from switchyard.switch import SwitchDescriptor


@runtime_checkable
class DispatcherProtocol(Protocol):
    def process(self, tokens: Sequence[str]) -> list[str]: ...

    def process_sub_command(
        self, parent_name: str, tokens: Sequence[str]
    ) -> list[str]: ...

    def get_sub_commands(self, parent_name: str) -> list[str]: ...


@runtime_checkable
class CommandHandlerProtocol(Protocol):
    primary_name: str
    names: Sequence[str]
    parent_name: str
    switches: Sequence[SwitchDescriptor]
    usage_text: str
    usage_priority: int
    process_switches: bool

    def run(
        self, dispatcher: DispatcherProtocol, args: Sequence[str]
    ) -> list[str]: ...

    def mark_present(self, key: str) -> None: ...

    def append_value(self, key: str, value: str) -> None: ...

    def is_set(self, name: str) -> bool: ...

    def get_values(self, name: str) -> list[str] | None: ...

    def usage(self) -> list[str]: ...
