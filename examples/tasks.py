"""Actions referenced from switchyard.yaml."""
from switchyard import Command

REMOTES: dict[str, str] = {}


def greet(cmd: Command, args: list[str]) -> str:
    message = f"Hello, {' '.join(args) or 'world'}!"
    return message.upper() if cmd.is_set("shout") else message


def remote(cmd: Command, args: list[str]) -> list[str]:
    return cmd.dispatcher.process_sub_command(cmd.primary_name, args)


def remote_add(cmd: Command, args: list[str]) -> str:
    url = cmd.get_values("url")[0]
    REMOTES[args[0] if args else "origin"] = url
    return f"Added remote {args[0] if args else 'origin'} -> {url}"


def remote_list(cmd: Command, args: list[str]) -> list[str]:
    lines = [f"{name}\t{url}" for name, url in REMOTES.items()]
    return lines or ["No remotes configured."]


def echo(cmd: Command, args: list[str]) -> str:
    return " ".join(args)
