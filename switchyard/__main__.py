"""
Switchyard CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Sequence

from switchyard.config import loader
from switchyard.console import console, print_lines
from switchyard.logger import logger
from switchyard.utils import setup_logging


def find_switchyard_config() -> Path | None:
    candidates = [
        Path.cwd() / "switchyard.yaml",
        Path.cwd() / "switchyard.toml",
        Path.cwd() / ".switchyard.yaml",
        Path.cwd() / ".switchyard.toml",
        Path(os.environ.get("SWITCHYARD_CONFIG", "switchyard.yaml")),
        Path.home() / ".config" / "switchyard" / "switchyard.yaml",
        Path.home() / ".config" / "switchyard" / "switchyard.toml",
    ]
    return next((p for p in candidates if p.is_file()), None)


def bootstrap() -> Path | None:
    config_path = find_switchyard_config()
    if config_path and str(config_path.parent) not in sys.path:
        sys.path.insert(0, str(config_path.parent))
    return config_path


def main(argv: Sequence[str] | None = None) -> int:
    setup_logging(console_log_level=logging.WARNING)
    config_path = bootstrap()
    if not config_path:
        console.print(
            "[bold red]No switchyard.yaml or switchyard.toml found.[/] "
            "Set SWITCHYARD_CONFIG to point at one."
        )
        return 1

    dispatcher = loader(config_path)
    tokens = list(sys.argv[1:] if argv is None else argv)
    logger.debug("Running %s with config '%s'.", tokens, config_path)
    print_lines(dispatcher.process(tokens))
    return 0


if __name__ == "__main__":
    sys.exit(main())
