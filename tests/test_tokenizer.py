import pytest

from switchyard.exceptions import UnknownSwitchError
from switchyard.handler import CommandHandler
from switchyard.switch import SwitchDescriptor
from switchyard.tokenizer import extract_switches


class TokenHandler(CommandHandler):
    primary_name = "tokens"
    names = ("tokens",)
    switches = (
        SwitchDescriptor(names=["flag"], short_names=["f"]),
        SwitchDescriptor(names=["pair"], short_names=["p"], argument_count=2),
        SwitchDescriptor(names=["edit"], short_names=["e"], argument_count=1),
    )

    def process_command(self, args):
        pass


@pytest.fixture
def handler():
    return TokenHandler()


def test_positional_only(handler):
    assert extract_switches(handler, ["a", "b"]) == ["a", "b"]
    assert len(handler.switch_store) == 0


def test_long_switch_is_lowercased(handler):
    assert extract_switches(handler, ["--FLAG", "a"]) == ["a"]
    assert handler.switch_store.keys() == ["flag"]
    assert handler.is_set("flag")


def test_short_switch_keeps_case(handler):
    extract_switches(handler, ["-f"])
    assert handler.switch_store.keys() == ["f"]


def test_short_switch_wrong_case_fails(handler):
    with pytest.raises(UnknownSwitchError) as exc_info:
        extract_switches(handler, ["-F"])
    assert exc_info.value.key == "F"
    assert exc_info.value.command == "tokens"


def test_unknown_long_switch_fails_after_recording(handler):
    with pytest.raises(UnknownSwitchError):
        extract_switches(handler, ["-f", "--badswitch", "a"])
    assert handler.switch_store.keys() == ["f", "badswitch"]


def test_switch_values_are_consumed_in_order(handler):
    positional = extract_switches(handler, ["x", "--pair", "para1", "para2", "y"])
    assert positional == ["x", "y"]
    assert handler.get_values("pair") == ["para1", "para2"]


def test_switch_values_are_taken_verbatim(handler):
    positional = extract_switches(handler, ["-p", "--flag", "-?", "-e", "-x"])
    assert positional == []
    assert handler.get_values("pair") == ["--flag", "-?"]
    assert handler.get_values("edit") == ["-x"]
    assert not handler.is_set("flag")
    assert not handler.is_set("?")


def test_values_stored_under_typed_key(handler):
    extract_switches(handler, ["-e", "one", "--EDIT", "two"])
    assert handler.switch_store.raw_values("e") == ["one"]
    assert handler.switch_store.raw_values("edit") == ["two"]
    assert handler.get_values("edit") == ["one"]


def test_repeated_switch_accumulates(handler):
    extract_switches(handler, ["-e", "one", "-e", "two"])
    assert handler.get_values("e") == ["one", "two"]


def test_missing_values_at_end(handler):
    assert extract_switches(handler, ["--pair", "only"]) == []
    assert handler.get_values("pair") == ["only"]


def test_help_stops_tokenizing(handler):
    assert extract_switches(handler, ["a", "-?", "--badswitch", "b"]) == []
    assert handler.is_set("?")
    assert "badswitch" not in handler.switch_store


def test_help_prefix_stops_tokenizing(handler):
    assert extract_switches(handler, ["-?verbose", "a"]) == []
    assert handler.is_set("?")


def test_process_switches_disabled(handler):
    handler.process_switches = False
    tokens = ["--badswitch", "-?", "a"]
    assert extract_switches(handler, tokens) == tokens
    assert len(handler.switch_store) == 0


def test_bare_dashes(handler):
    with pytest.raises(UnknownSwitchError):
        extract_switches(handler, ["--"])
    assert "" in handler.switch_store
