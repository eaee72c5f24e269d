import logging

from switchyard import Command, Dispatcher, SwitchDescriptor, command
from switchyard.console import print_lines
from switchyard.utils import setup_logging

setup_logging(console_log_level=logging.DEBUG, log_filename=None)


@command(
    "copy",
    usage_text="copy --from <src> --to <dst> - Pretend to copy a file.",
    switches=[
        SwitchDescriptor(names=["from"], short_names=["f"], argument_count=1, required=True),
        SwitchDescriptor(names=["to"], short_names=["t"], argument_count=1, required=True),
        SwitchDescriptor(names=["dry-run"], short_names=["n"], usage_text="Do nothing."),
    ],
)
def copy(cmd: Command, args: list[str]) -> str:
    source = cmd.get_values("from")[0]
    target = cmd.get_values("to")[0]
    prefix = "Would copy" if cmd.is_set("dry-run") else "Copied"
    return f"{prefix} {source} -> {target}"


if __name__ == "__main__":
    dispatcher = Dispatcher([copy])
    print_lines(dispatcher.process(["copy", "-f", "a.txt", "--TO", "b.txt", "-n"]))
    print_lines(dispatcher.process(["copy", "-f", "a.txt"]))
    print_lines(dispatcher.process([]))
