# Switchyard CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `SwitchDescriptor`, the static declaration of one command-line switch.

A switch has long names (`--verbose`) and short names (`-v`). Long names are
matched case-insensitively and are stored lowercase; short names are matched
exactly, so `-e` and `-E` are different switches.

A switch can pull a fixed number of values off the command line:

    SwitchDescriptor(names=["copy"], short_names=["c"], argument_count=2)

makes `--copy a.txt b.txt` record `["a.txt", "b.txt"]` under `copy`, whatever
those two tokens look like.

Descriptors are frozen once created; handlers own them and expose them through
their `switches` attribute.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

HELP_SWITCH = "?"


class SwitchDescriptor(BaseModel):
    """
    Declaration of a single switch supported by a command handler.

    Attributes:
        names (tuple[str, ...]): Long form names, used as `--name`. Lowercase.
        short_names (tuple[str, ...]): Short form names, used as `-n`. Case sensitive.
        required (bool): Whether the dispatcher refuses to run the command without it.
        argument_count (int): Number of tokens consumed as values after the switch.
        usage_text (str): Help text shown in the handler's usage output.
        usage_priority (int): Sort order in usage output, lower values first.
    """

    model_config = ConfigDict(frozen=True)

    names: tuple[str, ...] = ()
    short_names: tuple[str, ...] = ()
    required: bool = False
    argument_count: int = Field(default=0, ge=0)
    usage_text: str = ""
    usage_priority: int = 100

    @field_validator("names", mode="before")
    @classmethod
    def normalize_names(cls, value):
        if isinstance(value, str):
            value = (value,)
        return tuple(str(name).lower() for name in value)

    @field_validator("short_names", mode="before")
    @classmethod
    def validate_short_names(cls, value):
        if isinstance(value, str):
            value = (value,)
        return tuple(value)

    @property
    def first_name(self) -> str:
        """Name used when reporting the switch, the first long name if it has one."""
        if self.names:
            return self.names[0]
        if self.short_names:
            return self.short_names[0]
        return ""

    def matches_long(self, key: str) -> bool:
        return key.lower() in self.names

    def matches_short(self, key: str) -> bool:
        return key in self.short_names

    def matches(self, key: str) -> bool:
        """Return True if `key` names this switch in either its long or short form."""
        return self.matches_long(key) or self.matches_short(key)

    def usage_line(self) -> str:
        names = ",".join(self.names) + "," + ",".join(self.short_names)
        return f"\t{names}\t - {self.usage_text}"

    def __str__(self) -> str:
        return (
            f"SwitchDescriptor(names={list(self.names)}, "
            f"short_names={list(self.short_names)}, required={self.required}, "
            f"argument_count={self.argument_count})"
        )
