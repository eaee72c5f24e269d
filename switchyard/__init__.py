"""
Switchyard CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .command import Command, command
from .dispatcher import Dispatcher
from .exceptions import InvalidSwitchError, SwitchyardError, UnknownSwitchError
from .handler import CommandHandler
from .logger import logger
from .protocols import CommandHandlerProtocol, DispatcherProtocol
from .switch import SwitchDescriptor
from .switch_store import SwitchStore
from .version import __version__

__all__ = [
    "Command",
    "CommandHandler",
    "CommandHandlerProtocol",
    "Dispatcher",
    "DispatcherProtocol",
    "InvalidSwitchError",
    "SwitchDescriptor",
    "SwitchStore",
    "SwitchyardError",
    "UnknownSwitchError",
    "__version__",
    "command",
    "logger",
]
