from switchyard.switch import SwitchDescriptor
from switchyard.switch_store import SwitchStore

SWITCHES = (
    SwitchDescriptor(names=["long", "full"], short_names=["l"]),
    SwitchDescriptor(names=["exclude"], short_names=["e", "E"], argument_count=1),
)


def test_mark_present_creates_empty_entry():
    store = SwitchStore()
    store.mark_present("long")
    assert "long" in store
    assert store.raw_values("long") == []


def test_mark_present_is_idempotent():
    store = SwitchStore()
    store.append_value("exclude", "a")
    store.mark_present("exclude")
    store.mark_present("exclude")
    assert store.raw_values("exclude") == ["a"]
    assert len(store) == 1


def test_append_value_without_mark_present():
    store = SwitchStore()
    store.append_value("exclude", "a")
    assert store.get_values("exclude", SWITCHES) == ["a"]


def test_mark_present_then_append_value_holds_one_value():
    store = SwitchStore()
    store.mark_present("exclude")
    store.append_value("exclude", "a")
    assert store.get_values("exclude", SWITCHES) == ["a"]


def test_values_keep_insertion_order():
    store = SwitchStore()
    for value in ("one", "two", "three"):
        store.append_value("e", value)
    assert store.get_values("exclude", SWITCHES) == ["one", "two", "three"]


def test_is_set_false_for_undeclared_name():
    store = SwitchStore()
    store.mark_present("bogus")
    assert store.is_set("bogus", SWITCHES) is False


def test_is_set_false_before_anything_is_stored():
    store = SwitchStore()
    assert store.is_set("long", SWITCHES) is False


def test_is_set_resolves_through_descriptor():
    store = SwitchStore()
    store.mark_present("l")
    assert store.is_set("long", SWITCHES)
    assert store.is_set("full", SWITCHES)
    assert store.is_set("LONG", SWITCHES)
    assert store.is_set("l", SWITCHES)


def test_short_name_lookup_is_case_sensitive():
    switches = (
        SwitchDescriptor(names=["edit"], short_names=["e"]),
        SwitchDescriptor(names=["everything"], short_names=["E"]),
    )
    store = SwitchStore()
    store.mark_present("E")
    assert store.is_set("everything", switches)
    assert not store.is_set("edit", switches)
    assert not store.is_set("e", switches)


def test_help_switch_is_set_only_when_marked():
    store = SwitchStore()
    assert store.is_set("?", SWITCHES) is False
    store.mark_present("long")
    assert store.is_set("?", SWITCHES) is False
    store.mark_present("?")
    assert store.is_set("?", SWITCHES) is True
    assert store.is_set("?", ()) is True


def test_get_values_none_when_undeclared_or_unset():
    store = SwitchStore()
    store.append_value("bogus", "x")
    assert store.get_values("bogus", SWITCHES) is None
    assert store.get_values("exclude", SWITCHES) is None


def test_get_values_empty_list_when_present_without_values():
    store = SwitchStore()
    store.mark_present("full")
    assert store.get_values("long", SWITCHES) == []


def test_get_values_returns_first_matching_key():
    store = SwitchStore()
    store.append_value("e", "first")
    store.append_value("E", "second")
    assert store.get_values("exclude", SWITCHES) == ["first"]


def test_unknown_keys():
    store = SwitchStore()
    store.mark_present("LONG")
    store.mark_present("?")
    store.mark_present("nope")
    store.mark_present("L")
    assert store.unknown_keys(SWITCHES) == ["nope", "L"]


def test_clear():
    store = SwitchStore()
    store.mark_present("long")
    store.clear()
    assert len(store) == 0
    assert list(store) == []


def test_resolve():
    assert SwitchStore.resolve("FULL", SWITCHES) is SWITCHES[0]
    assert SwitchStore.resolve("E", SWITCHES) is SWITCHES[1]
    assert SwitchStore.resolve("missing", SWITCHES) is None
