"""Tests for saving the live arrangement under a new name."""

from unittest.mock import MagicMock

from layoutcycle.add_config import PROMPT_MESSAGE, AddConfigWorkflow
from layoutcycle.dialog import MAX_NAME_LENGTH
from layoutcycle.settings import Settings
from layoutcycle.store import ConfigStore

from conftest import D1, D2, FakeSwitcher, make_config


def build(settings, dialog, switcher=None):
    settings.set_configs([make_config("A", 100, [D1])])
    store = ConfigStore(settings)
    store.reload()
    switcher = switcher or FakeSwitcher(displays=[D1, D2], live_hash=555)
    on_added = MagicMock()
    workflow = AddConfigWorkflow(store, switcher, dialog, on_added=on_added)
    return store, workflow, on_added


def test_begin_prepares_and_opens_prompt(settings, dialog):
    store, workflow, _ = build(settings, dialog)
    dialog.set_name("leftover")

    workflow.begin()

    assert dialog.get_message() == PROMPT_MESSAGE
    assert dialog.get_name() == ""
    assert dialog.presented == 1
    assert workflow.pending


def test_confirm_appends_live_arrangement(settings, settings_file, dialog):
    store, workflow, on_added = build(settings, dialog)
    before = store.configs[0].to_tuple()

    workflow.begin()
    dialog.set_name("Desk")
    dialog.confirm()

    assert len(store.configs) == 2
    assert store.configs[0].to_tuple() == before
    added = store.configs[1]
    assert added.name == "Desk"
    assert added.hash == 555
    assert added.physical_displays == (D1, D2)
    persisted = Settings(settings_file).get_configs()
    assert [c.to_tuple() for c in persisted] == [c.to_tuple() for c in store.configs]
    on_added.assert_called_once_with()
    assert not workflow.pending


def test_cancel_changes_nothing(settings, dialog):
    store, workflow, on_added = build(settings, dialog)
    settings.set_configs = MagicMock()

    workflow.begin()
    dialog.set_name("Desk")
    dialog.cancel()

    assert len(store.configs) == 1
    settings.set_configs.assert_not_called()
    on_added.assert_not_called()


def test_dialog_reuse_fires_handler_once(settings, dialog):
    store, workflow, on_added = build(settings, dialog)

    workflow.begin()
    dialog.set_name("First")
    dialog.confirm()
    dialog.confirm()

    assert [c.name for c in store.configs] == ["A", "First"]
    assert on_added.call_count == 1


def test_begin_twice_keeps_single_subscription(settings, dialog):
    store, workflow, on_added = build(settings, dialog)

    workflow.begin()
    workflow.begin()
    dialog.set_name("Once")
    dialog.confirm()

    assert [c.name for c in store.configs] == ["A", "Once"]


def test_missing_live_state_aborts(settings, dialog):
    store, workflow, on_added = build(settings, dialog, FakeSwitcher(displays=None))

    workflow.begin()
    dialog.set_name("Desk")
    dialog.confirm()

    assert len(store.configs) == 1
    on_added.assert_not_called()


def test_name_is_bounded(settings, dialog):
    store, workflow, _ = build(settings, dialog)

    workflow.begin()
    dialog.set_name("A very long configuration name")
    dialog.confirm()

    assert store.configs[-1].name == "A very long configuration name"[:MAX_NAME_LENGTH]


def test_cancel_detaches_pending_prompt(settings, dialog):
    store, workflow, on_added = build(settings, dialog)

    workflow.begin()
    workflow.cancel()
    dialog.confirm()

    assert len(store.configs) == 1
