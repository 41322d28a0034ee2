import pygame
import pytest

from core2d.input import (
    MAX_SCANCODES,
    KeyboardState,
    get_mouse_pressed,
    is_mouse_pressed,
)


def _pressed(*held):
    state = [False] * 20
    for code in held:
        state[code] = True
    return state


def test_fresh_state_has_nothing_held():
    keys = KeyboardState()
    assert not any(keys.is_held(code) for code in range(MAX_SCANCODES))


def test_press_then_hold_then_release():
    keys = KeyboardState()
    keys.update(_pressed(4))
    assert keys.is_just_pressed(4)
    assert keys.is_held(4)
    assert not keys.is_just_released(4)

    keys.update(_pressed(4))
    assert not keys.is_just_pressed(4)
    assert keys.is_held(4)

    keys.update(_pressed())
    assert keys.is_just_released(4)
    assert not keys.is_held(4)

    keys.update(_pressed())
    assert not keys.is_just_released(4)


def test_other_keys_unaffected():
    keys = KeyboardState()
    keys.update(_pressed(7))
    assert not keys.is_held(6)
    assert not keys.is_just_pressed(8)


def test_long_sequence_is_truncated():
    keys = KeyboardState()
    keys.update([True] * (MAX_SCANCODES + 50))
    assert keys.is_held(MAX_SCANCODES - 1)
    assert not keys.is_held(MAX_SCANCODES + 10)


def test_short_sequence_keeps_tail_values():
    keys = KeyboardState()
    keys.update([True] * 30)
    keys.update([False] * 10)
    assert not keys.is_held(5)
    assert keys.is_held(25)


@pytest.mark.parametrize("code", [-1, MAX_SCANCODES])
def test_out_of_range_scancode_is_never_active(code):
    keys = KeyboardState()
    keys.update([True] * MAX_SCANCODES)
    assert keys.is_held(code) is False
    assert keys.is_just_pressed(code) is False


def test_mouse_press_matches_button():
    event = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3)
    assert is_mouse_pressed(event, 3)
    assert not is_mouse_pressed(event, 1)


def test_mouse_release_is_not_a_press():
    event = pygame.event.Event(pygame.MOUSEBUTTONUP, button=3)
    assert not is_mouse_pressed(event, 3)


def test_get_mouse_pressed_returns_button():
    event = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=2)
    assert get_mouse_pressed(event) == 2


def test_get_mouse_pressed_without_button():
    event = pygame.event.Event(pygame.USEREVENT)
    assert get_mouse_pressed(event) == 0