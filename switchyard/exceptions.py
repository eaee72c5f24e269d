# Switchyard CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used in the Switchyard CLI framework.

Exception Hierarchy:
- SwitchyardError
    ├── SwitchError
    │     ├── UnknownSwitchError
    │     └── InvalidSwitchError
    ├── InvalidActionError
    └── HandlerConfigError

`UnknownSwitchError` is raised while tokenizing a command line and
`InvalidSwitchError` after a handler has already processed its arguments.
The dispatcher turns both into a single user-facing line; code that calls
`CommandHandler.run` directly is expected to catch `InvalidSwitchError` itself.
"""


class SwitchyardError(Exception):
    """Base exception for the Switchyard framework."""


class SwitchError(SwitchyardError):
    """Exception raised when a switch on the command line cannot be honoured."""


class UnknownSwitchError(SwitchError):
    """Exception raised when a switch name is not declared by the selected handler."""

    def __init__(self, key: str, command: str = ""):
        self.key = key
        self.command = command
        where = f" for '{command}'" if command else ""
        super().__init__(f"Unknown switch '{key}'{where}.")


class InvalidSwitchError(SwitchError):
    """Exception raised when a stored switch is not valid for the command that ran."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"The switch {key} is not a valid switch for this command!")


class InvalidActionError(SwitchyardError):
    """Exception raised when a command action is not callable."""


class HandlerConfigError(SwitchyardError):
    """Exception raised when a handler configuration file cannot be turned into handlers."""
