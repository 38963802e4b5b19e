"""Tests for the remote control and its one-step undo."""

import pytest

from lightremote.domain.interfaces import Remote
from lightremote.domain.models import CommandKind, InvalidBrightnessLevel
from lightremote.factory import RemoteSystem, create_light_and_remote


def test_factory_returns_unpackable_pair():
    light, remote = create_light_and_remote()
    assert isinstance(remote, Remote)
    assert light.is_on is False
    assert remote.last_command is None


def test_factory_pairs_are_independent():
    first = create_light_and_remote()
    second = create_light_and_remote()
    first.remote.press_brightness_button(10)
    first.remote.press_off_button()
    assert second.light.is_on is False
    assert second.light.brightness == 100
    second.remote.press_undo_button()
    assert first.light.is_on is False


def test_on_and_off_buttons(system: RemoteSystem):
    light, remote = system
    for press, expected in [
        (remote.press_on_button, True),
        (remote.press_off_button, False),
        (remote.press_off_button, False),
        (remote.press_on_button, True),
    ]:
        press()
        assert light.is_on is expected


def test_brightness_button_sets_level_and_turns_on(system: RemoteSystem):
    system.remote.press_brightness_button(42)
    assert system.light.brightness == 42
    assert system.light.is_on is True
    assert system.remote.last_command is CommandKind.BRIGHTNESS


def test_undo_restores_previous_brightness(system: RemoteSystem):
    system.remote.press_brightness_button(80)
    system.remote.press_brightness_button(20)
    system.remote.press_undo_button()
    assert system.light.brightness == 80


def test_undo_on_from_off_state(system: RemoteSystem):
    assert system.light.is_on is False
    system.remote.press_on_button()
    assert system.light.is_on is True
    system.remote.press_undo_button()
    assert system.light.is_on is False


def test_undo_off_from_on_state(system: RemoteSystem):
    system.light.turn_on()
    system.remote.press_off_button()
    assert system.light.is_on is False
    system.remote.press_undo_button()
    assert system.light.is_on is True


def test_undo_only_reverses_last_command(system: RemoteSystem):
    remote, light = system.remote, system.light
    remote.press_on_button()
    remote.press_brightness_button(50)
    remote.press_off_button()
    assert light.is_on is False
    assert light.brightness == 50

    remote.press_undo_button()
    assert light.is_on is True
    assert light.brightness == 50


def test_undo_first_brightness_restores_default(system: RemoteSystem):
    remote, light = system.remote, system.light
    remote.press_on_button()
    remote.press_off_button()
    remote.press_brightness_button(55)
    assert light.brightness == 55
    remote.press_undo_button()
    assert light.brightness == 100


def test_undo_with_empty_history_is_noop(system: RemoteSystem):
    system.remote.press_undo_button()
    assert system.light.is_on is False
    assert system.light.brightness == 100
    assert system.remote.last_command is None


def test_double_undo_of_on_reruns_same_command(system: RemoteSystem):
    system.remote.press_on_button()
    system.remote.press_undo_button()
    assert system.light.is_on is False
    system.remote.press_undo_button()
    assert system.light.is_on is False
    assert system.remote.last_command is CommandKind.ON


def test_double_undo_of_off_keeps_light_on(system: RemoteSystem):
    system.remote.press_off_button()
    system.remote.press_undo_button()
    assert system.light.is_on is True
    system.remote.press_undo_button()
    assert system.light.is_on is True
    assert system.remote.last_command is CommandKind.OFF


def test_brightness_press_without_level_then_undo(system: RemoteSystem):
    system.remote.press_brightness_button(60)
    system.remote.press_brightness_button()
    assert system.light.brightness == 60
    system.remote.press_undo_button()
    assert system.light.brightness == 60
    assert system.light.is_on is True


def test_out_of_range_brightness_is_recorded_in_lenient_mode(system: RemoteSystem):
    system.remote.press_brightness_button(30)
    system.remote.press_on_button()
    system.remote.press_brightness_button(200)
    assert system.light.brightness == 30
    assert system.remote.last_command is CommandKind.BRIGHTNESS


def test_strict_mode_rejection_leaves_history_untouched(strict_system: RemoteSystem):
    remote, light = strict_system.remote, strict_system.light
    remote.press_brightness_button(30)
    remote.press_off_button()
    with pytest.raises(InvalidBrightnessLevel):
        remote.press_brightness_button(-1)
    assert light.is_on is False
    assert light.brightness == 30
    assert remote.last_command is CommandKind.OFF

    remote.press_undo_button()
    assert light.is_on is True


def test_strict_setting_used_when_not_given(monkeypatch):
    from lightremote.core.config import settings

    monkeypatch.setattr(settings, "strict_brightness", True)
    _, remote = create_light_and_remote()
    with pytest.raises(InvalidBrightnessLevel):
        remote.press_brightness_button(101)
