import logging
import sys
import textwrap
from pathlib import Path

import pytest
from rich.logging import RichHandler

from switchyard.__main__ import bootstrap, find_switchyard_config, main

CONFIG = textwrap.dedent(
    """
    commands:
      - primary_name: greet
        usage_text: "greet [name] - Say hello."
        action: main_tasks.greet
        switches:
          - names: [shout]
            short_names: [s]
            usage_text: "Greet loudly."
    """
)

TASKS = textwrap.dedent(
    """
    def greet(cmd, args):
        message = "Hello, " + (" ".join(args) or "world") + "!"
        return message.upper() if cmd.is_set("shout") else message
    """
)


@pytest.fixture(autouse=True)
def fake_home(monkeypatch, tmp_path):
    """Redirect Path.home() to a temporary directory for all tests."""
    temp_home = tmp_path / "home"
    temp_home.mkdir()
    monkeypatch.setattr(Path, "home", lambda: temp_home)
    return temp_home


@pytest.fixture(autouse=True)
def project_dir(monkeypatch, tmp_path):
    """Run every test from an empty project directory."""
    project = tmp_path / "project"
    project.mkdir()
    monkeypatch.chdir(project)
    monkeypatch.delenv("SWITCHYARD_CONFIG", raising=False)
    monkeypatch.setattr(sys, "path", list(sys.path))
    monkeypatch.delitem(sys.modules, "main_tasks", raising=False)
    return project


@pytest.fixture(autouse=True)
def restore_root_logger(monkeypatch):
    monkeypatch.delenv("SWITCHYARD_LOG_MODE", raising=False)
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def write_project(directory: Path, config_name: str = "switchyard.yaml") -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    (directory / "main_tasks.py").write_text(TASKS, encoding="UTF-8")
    config_file = directory / config_name
    config_file.write_text(CONFIG, encoding="UTF-8")
    return config_file


def test_find_switchyard_config(project_dir):
    config_file = write_project(project_dir)
    assert find_switchyard_config() == config_file


def test_find_switchyard_config_none():
    assert find_switchyard_config() is None


def test_find_switchyard_config_from_env(monkeypatch, tmp_path):
    config_file = write_project(tmp_path / "elsewhere", "custom.yaml")
    monkeypatch.setenv("SWITCHYARD_CONFIG", str(config_file))
    assert find_switchyard_config() == config_file


def test_bootstrap_with_global_config(fake_home):
    config_file = write_project(fake_home / ".config" / "switchyard")
    assert bootstrap() == config_file
    assert str(config_file.parent) in sys.path


def test_bootstrap_no_config():
    sys_path_before = list(sys.path)
    assert bootstrap() is None
    assert sys.path == sys_path_before


def test_main_dispatches_and_prints(project_dir, capsys):
    write_project(project_dir)
    assert main(["greet", "-s", "Ada"]) == 0
    assert "HELLO, ADA!" in capsys.readouterr().out


def test_main_prints_usage(project_dir, capsys):
    write_project(project_dir)
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Usage:" in out
    assert "greet [name] - Say hello." in out


def test_main_reads_sys_argv(project_dir, monkeypatch, capsys):
    write_project(project_dir)
    monkeypatch.setattr(sys, "argv", ["switchyard", "greet", "--bogus"])
    assert main() == 0
    assert "Invalid switches passed in" in capsys.readouterr().out


def test_main_without_config(capsys):
    assert main(["greet"]) == 1
    assert "No switchyard.yaml" in capsys.readouterr().out


def test_main_configures_logging(project_dir):
    write_project(project_dir)
    assert main(["greet"]) == 0
    console_handler, file_handler = logging.getLogger().handlers
    assert not isinstance(console_handler, logging.FileHandler)
    assert isinstance(file_handler, logging.FileHandler)
    assert Path(file_handler.baseFilename).resolve() == (
        project_dir / "switchyard.log"
    ).resolve()


def test_main_log_mode_from_env(project_dir, monkeypatch):
    write_project(project_dir)
    monkeypatch.setenv("SWITCHYARD_LOG_MODE", "json")
    assert main(["greet"]) == 0
    console_handler = logging.getLogger().handlers[0]
    assert not isinstance(console_handler, RichHandler)
    assert type(console_handler) is logging.StreamHandler


def test_main_logs_dispatch_to_file(project_dir):
    write_project(project_dir)
    assert main(["greet", "Ada"]) == 0
    for handler in logging.getLogger().handlers:
        handler.flush()
    assert "Command 'greet' selected." in (project_dir / "switchyard.log").read_text()
