# Switchyard CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Splits a command's tokens into switches and positional arguments.

`extract_switches` walks the tokens once, recording switches on the handler
through `mark_present` / `append_value` and returning everything else:

- `--name` is a long switch. The name is lower-cased before it is recorded.
- `-n` is a short switch. The name keeps its case.
- A switch declared with `argument_count = N` takes the next N tokens as its
  values, even when they start with `-`.
- `-?` (or anything starting with it) marks the help pseudo-switch and stops
  the walk. Remaining tokens are ignored and no positional arguments are returned.

There is no bundling of short switches (`-abc` is the single switch `abc`) and
no `--name=value` form.
"""
from __future__ import annotations

from typing import Sequence

from switchyard.exceptions import UnknownSwitchError
from switchyard.logger import logger
from switchyard.protocols import CommandHandlerProtocol
from switchyard.switch import HELP_SWITCH

LONG_PREFIX = "--"
SHORT_PREFIX = "-"
HELP_PREFIX = SHORT_PREFIX + HELP_SWITCH


def extract_switches(
    handler: CommandHandlerProtocol, tokens: Sequence[str]
) -> list[str]:
    """
    Record the switches in `tokens` on `handler` and return the positional arguments.

    Raises:
        UnknownSwitchError: If a switch is not declared by `handler`. Switches
            seen before the failing token stay recorded.
    """
    if not handler.process_switches:
        return list(tokens)

    positional: list[str] = []
    pending = 0
    pending_key: str | None = None

    for token in tokens:
        if pending > 0:
            assert pending_key is not None
            handler.append_value(pending_key, token)
            pending -= 1
            continue

        if token.startswith(HELP_PREFIX):
            handler.mark_present(HELP_SWITCH)
            logger.debug("[%s] Help switch found.", handler.primary_name)
            return []

        if token.startswith(LONG_PREFIX):
            key = token[len(LONG_PREFIX) :].lower()
            handler.mark_present(key)
            switch = next(
                (s for s in handler.switches if s.matches_long(key)),
                None,
            )
        elif token.startswith(SHORT_PREFIX):
            key = token[len(SHORT_PREFIX) :]
            handler.mark_present(key)
            switch = next(
                (s for s in handler.switches if s.matches_short(key)),
                None,
            )
        else:
            positional.append(token)
            continue

        if switch is None:
            raise UnknownSwitchError(key, handler.primary_name)
        pending = switch.argument_count
        pending_key = key

    if pending:
        logger.debug(
            "[%s] Switch '%s' expected %d more value(s).",
            handler.primary_name,
            pending_key,
            pending,
        )
    return positional
