"""Tests for keyboard and pointer handling."""

import asyncio

import pytest

from tests.conftest import THREE_OPTIONS, Recorder, make_controller
from typeahead.dispatch import PASS, PREVENT, Key, KeyResult
from typeahead.events import CHANGE


def _opened(endpoint=None, **kwargs):
    ctl = make_controller(endpoint, **kwargs)
    ctl.replace_results(THREE_OPTIONS)
    return ctl


def _labels_while_pressing(ctl, key, times):
    labels = [ctl.selected_option.label]
    for _ in range(times):
        ctl.dispatcher.key(key)
        labels.append(ctl.selected_option.label)
    return labels


def test_unknown_key_passes():
    ctl = _opened()
    assert ctl.dispatcher.key("x") == PASS
    assert ctl.dispatcher.key("pagedown") == PASS


def test_accepts_key_enum():
    ctl = _opened()
    assert ctl.dispatcher.key(Key.ARROW_DOWN) == PREVENT


def test_arrow_down_cycles_with_wraparound():
    ctl = _opened()
    assert _labels_while_pressing(ctl, "down", 3) == ["Alice", "Bob", "Charlie", "Alice"]


def test_arrow_up_wraps_to_last():
    ctl = _opened()
    assert _labels_while_pressing(ctl, "up", 3) == ["Alice", "Charlie", "Bob", "Alice"]


def test_arrow_keys_update_active_descendant():
    ctl = _opened()
    ctl.dispatcher.key("down")
    assert ctl.active_descendant == ctl.results[1].id


def test_arrow_up_with_no_results_is_harmless():
    ctl = make_controller()
    assert ctl.dispatcher.key("up") == PREVENT
    assert ctl.selected_option is None


def test_escape_closes_and_clears():
    ctl = _opened()
    assert ctl.dispatcher.key("escape") == KeyResult(prevent_default=True, stop=True)
    assert not ctl.visibility.is_open
    assert len(ctl.results) == 0


def test_escape_when_closed_passes():
    ctl = make_controller()
    assert ctl.dispatcher.key("escape") == PASS


@pytest.mark.asyncio
async def test_arrow_down_when_closed_reveals(endpoint):
    ctl = make_controller(endpoint)
    ctl.input.value = "al"
    assert ctl.dispatcher.key("down") == PASS
    await asyncio.sleep(0.01)
    assert endpoint.queries == ["al"]
    assert ctl.visibility.is_open


@pytest.mark.asyncio
async def test_arrow_down_when_closed_without_reveal(endpoint):
    ctl = make_controller(endpoint, reveal_on_keydown=False)
    ctl.input.value = "al"
    ctl.dispatcher.key("down")
    await asyncio.sleep(0.01)
    assert endpoint.queries == []


def test_tab_commits_selection_without_suppressing():
    ctl = _opened()
    rec = Recorder(ctl, CHANGE)
    assert ctl.dispatcher.key("tab") == PASS
    assert ctl.input.value == "Alice"
    assert len(rec.details(CHANGE)) == 1


def test_tab_without_selection_does_nothing():
    ctl = make_controller()
    rec = Recorder(ctl, CHANGE)
    assert ctl.dispatcher.key("tab") == PASS
    assert rec.seen == []


def test_enter_commits_selection():
    ctl = _opened()
    ctl.dispatcher.key("down")
    assert ctl.dispatcher.key("enter") == PREVENT
    assert ctl.input.value == "Bob"
    assert ctl.hidden.value == "Bob"


def test_enter_commits_and_submits_when_configured():
    ctl = _opened(submit_on_enter=True)
    assert ctl.dispatcher.key("enter") == PASS
    assert ctl.input.value == "Alice"


def test_enter_commits_free_text_when_match_not_required():
    ctl = make_controller(require_match=False)
    rec = Recorder(ctl, CHANGE)
    ctl.input.value = "custom text"
    assert ctl.dispatcher.key("enter") == PREVENT
    [detail] = rec.details(CHANGE)
    assert detail.value == "custom text"
    assert ctl.hidden.value == "custom text"


def test_enter_free_text_submits_when_configured():
    ctl = make_controller(require_match=False, submit_on_enter=True)
    ctl.input.value = "custom text"
    assert ctl.dispatcher.key("enter") == PASS


def test_enter_free_text_rejected_when_match_required():
    ctl = make_controller()
    rec = Recorder(ctl, CHANGE)
    ctl.input.value = "custom text"
    assert ctl.dispatcher.key("enter") == PREVENT
    assert rec.seen == []
    assert ctl.hidden.value == ""


def test_enter_with_empty_input_commits_nothing():
    ctl = make_controller(require_match=False, submit_on_enter=True)
    rec = Recorder(ctl, CHANGE)
    assert ctl.dispatcher.key("enter") == PREVENT
    assert rec.seen == []


@pytest.mark.asyncio
async def test_input_change_clears_hidden_value():
    ctl = _opened()
    ctl.committer.commit(ctl.results[0])
    assert ctl.hidden.value == "Alice"
    ctl.dispatcher.input_changed("Alic")
    assert ctl.hidden.value == ""
    assert ctl.input.value == "Alic"
    ctl.disconnect()


@pytest.mark.asyncio
async def test_click_reveals_when_enabled(endpoint):
    ctl = make_controller(endpoint, reveal_on_click=True)
    ctl.input.value = "b"
    ctl.dispatcher.click()
    await asyncio.sleep(0.01)
    assert endpoint.queries == ["b"]


@pytest.mark.asyncio
async def test_click_ignored_when_disabled(endpoint):
    ctl = make_controller(endpoint)
    ctl.input.value = "b"
    ctl.dispatcher.click()
    await asyncio.sleep(0.01)
    assert endpoint.queries == []


@pytest.mark.asyncio
async def test_click_after_commit_is_noop(endpoint):
    ctl = make_controller(endpoint, reveal_on_click=True)
    ctl.committer.commit_value("done")
    ctl.dispatcher.click()
    await asyncio.sleep(0.01)
    assert endpoint.queries == []


@pytest.mark.asyncio
async def test_focus_reveals_when_enabled(endpoint):
    ctl = make_controller(endpoint, reveal_on_focus=True)
    ctl.input.value = "c"
    ctl.dispatcher.focus()
    await asyncio.sleep(0.01)
    assert endpoint.queries == ["c"]


@pytest.mark.asyncio
async def test_focus_after_commit_is_noop(endpoint):
    ctl = make_controller(endpoint, reveal_on_focus=True)
    ctl.committer.commit_value("done")
    ctl.dispatcher.focus()
    await asyncio.sleep(0.01)
    assert endpoint.queries == []


def test_blur_closes():
    ctl = _opened()
    ctl.dispatcher.blur()
    assert not ctl.visibility.is_open


def test_blur_during_pointer_down_keeps_open():
    ctl = _opened()
    ctl.dispatcher.results_pointer_down()
    ctl.dispatcher.blur()
    assert ctl.visibility.is_open
    ctl.dispatcher.results_pointer_up()
    ctl.dispatcher.blur()
    assert not ctl.visibility.is_open


def test_option_click_commits():
    ctl = _opened()
    rec = Recorder(ctl, CHANGE)
    ctl.dispatcher.option_clicked(ctl.results[2].id)
    assert ctl.input.value == "Charlie"
    assert rec.details(CHANGE)[0].value == "Charlie"


def test_disabled_option_click_is_silent():
    ctl = make_controller()
    ctl.replace_results('<li role="option" id="a" aria-disabled="true">A</li>')
    rec = Recorder(ctl, CHANGE)
    ctl.dispatcher.option_clicked("a")
    ctl.dispatcher.option_clicked("missing")
    assert rec.seen == []
    assert ctl.visibility.is_open
