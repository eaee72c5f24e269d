# Switchyard CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Implements `SwitchStore`, the per-handler record of switches seen on a command line.

The store maps the literal key used on the command line (`long`, `l`, `?`) to the
values collected for it. A key mapped to an empty list means the switch was
present without values.

Lookups go through the handler's declared switches: a name passed to `is_set` or
`get_values` is first resolved to a `SwitchDescriptor`, and the store then looks
for any key that resolves to that same descriptor. This lets a handler ask for
`"verbose"` when the user typed `-v`.

The store is never cleared automatically. Whoever owns the handler decides
whether instances are reused between invocations.
"""
from __future__ import annotations

from typing import Iterator, Sequence

from switchyard.switch import HELP_SWITCH, SwitchDescriptor


class SwitchStore:
    """Ordered mapping of raw switch keys to their collected values."""

    def __init__(self) -> None:
        self._data: dict[str, list[str]] = {}

    def mark_present(self, key: str) -> None:
        """Record `key` as present. Calling this more than once has no further effect."""
        self._data.setdefault(key, [])

    def append_value(self, key: str, value: str) -> None:
        """Append `value` to `key`, creating the entry if it does not exist yet."""
        self._data.setdefault(key, []).append(value)

    def clear(self) -> None:
        self._data.clear()

    def keys(self) -> list[str]:
        return list(self._data)

    def raw_values(self, key: str) -> list[str] | None:
        """Return the values stored under the literal `key`, without resolution."""
        return self._data.get(key)

    @staticmethod
    def resolve(
        name: str, switches: Sequence[SwitchDescriptor]
    ) -> SwitchDescriptor | None:
        """Return the first declared switch answering to `name`."""
        return next((switch for switch in switches if switch.matches(name)), None)

    def find_key(self, switch: SwitchDescriptor) -> str | None:
        """Return the first stored key that names `switch`."""
        return next((key for key in self._data if switch.matches(key)), None)

    def is_set(self, name: str, switches: Sequence[SwitchDescriptor]) -> bool:
        if name == HELP_SWITCH:
            return HELP_SWITCH in self._data
        switch = self.resolve(name, switches)
        if switch is None:
            return False
        return self.find_key(switch) is not None

    def get_values(
        self, name: str, switches: Sequence[SwitchDescriptor]
    ) -> list[str] | None:
        switch = self.resolve(name, switches)
        if switch is None:
            return None
        key = self.find_key(switch)
        if key is None:
            return None
        return self._data[key]

    def unknown_keys(self, switches: Sequence[SwitchDescriptor]) -> list[str]:
        """Return stored keys that no declared switch answers to."""
        return [
            key
            for key in self._data
            if key != HELP_SWITCH and self.resolve(key, switches) is None
        ]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __str__(self) -> str:
        return f"SwitchStore({self._data})"

    def __repr__(self) -> str:
        return str(self)
