"""Keyboard and mouse state, and the key and button names the scripts use."""

from __future__ import annotations

import time
from enum import Enum, Flag, auto

from pobruntime.geometry import Point

DOUBLE_CLICK_INTERVAL = 0.4


class KeyCode(Enum):
    """Physical keys."""

    A = auto()
    B = auto()
    C = auto()
    D = auto()
    E = auto()
    F = auto()
    G = auto()
    H = auto()
    I = auto()  # noqa: E741
    J = auto()
    K = auto()
    L = auto()
    M = auto()
    N = auto()
    O = auto()  # noqa: E741
    P = auto()
    Q = auto()
    R = auto()
    S = auto()
    T = auto()
    U = auto()
    V = auto()
    W = auto()
    X = auto()
    Y = auto()
    Z = auto()
    DIGIT0 = auto()
    DIGIT1 = auto()
    DIGIT2 = auto()
    DIGIT3 = auto()
    DIGIT4 = auto()
    DIGIT5 = auto()
    DIGIT6 = auto()
    DIGIT7 = auto()
    DIGIT8 = auto()
    DIGIT9 = auto()
    SHIFT_LEFT = auto()
    SHIFT_RIGHT = auto()
    CONTROL_LEFT = auto()
    CONTROL_RIGHT = auto()
    ALT_LEFT = auto()
    ALT_RIGHT = auto()
    F1 = auto()
    F2 = auto()
    F3 = auto()
    F4 = auto()
    F5 = auto()
    F6 = auto()
    F7 = auto()
    F8 = auto()
    F9 = auto()
    F10 = auto()
    F11 = auto()
    F12 = auto()
    SPACE = auto()
    BACKSPACE = auto()
    TAB = auto()
    ENTER = auto()
    ESCAPE = auto()
    PAUSE = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    END = auto()
    HOME = auto()
    PRINT_SCREEN = auto()
    INSERT = auto()
    DELETE = auto()
    ARROW_UP = auto()
    ARROW_DOWN = auto()
    ARROW_LEFT = auto()
    ARROW_RIGHT = auto()
    NUM_LOCK = auto()
    SCROLL_LOCK = auto()
    CAPS_LOCK = auto()
    EQUAL = auto()
    MINUS = auto()
    COMMA = auto()
    PERIOD = auto()
    SLASH = auto()
    SEMICOLON = auto()
    NUMPAD_ADD = auto()
    NUMPAD_SUBTRACT = auto()
    NUMPAD_ENTER = auto()
    NUMPAD0 = auto()
    NUMPAD1 = auto()


class MouseButton(Enum):
    """Mouse buttons."""

    LEFT = auto()
    RIGHT = auto()
    MIDDLE = auto()
    BACK = auto()
    FORWARD = auto()
    OTHER = auto()


class Modifiers(Flag):
    """Held modifier keys."""

    NONE = 0
    SHIFT = auto()
    CONTROL = auto()
    ALT = auto()
    SUPER = auto()


class InputState:
    """Tracks which keys and buttons are held and where the cursor is."""

    def __init__(self) -> None:
        self._modifiers = Modifiers.NONE
        self._keys_pressed: set[KeyCode] = set()
        self._mouse_pressed: set[MouseButton] = set()
        self._mouse_last_pressed: dict[MouseButton, float] = {}
        self._cursor_pos = Point(0.0, 0.0)

    @property
    def mouse_pos(self) -> Point:
        return self._cursor_pos

    @property
    def modifiers(self) -> Modifiers:
        return self._modifiers

    def key_pressed(self, code: KeyCode) -> bool:
        return code in self._keys_pressed

    def mouse_pressed(self, button: MouseButton) -> bool:
        return button in self._mouse_pressed

    def on_modifiers_changed(self, modifiers: Modifiers) -> None:
        self._modifiers = modifiers

    def on_cursor_moved(self, x: float, y: float) -> None:
        self._cursor_pos = Point(float(x), float(y))

    def on_key(self, code: KeyCode, pressed: bool) -> None:
        if pressed:
            self._keys_pressed.add(code)
        else:
            self._keys_pressed.discard(code)

    def on_mouse_button(self, button: MouseButton, pressed: bool) -> None:
        if pressed:
            self._mouse_pressed.add(button)
        else:
            self._mouse_pressed.discard(button)

    def is_double_click(self, button: MouseButton, now: float | None = None) -> bool:
        """Record a press at ``now`` (seconds) and tell whether it follows the last one closely."""
        if now is None:
            now = time.monotonic()
        last = self._mouse_last_pressed.get(button)
        self._mouse_last_pressed[button] = now
        return last is not None and now - last < DOUBLE_CLICK_INTERVAL


_LETTERS = {chr(ord("A") + n): KeyCode[chr(ord("A") + n)] for n in range(26)}
_DIGITS = {str(n): KeyCode[f"DIGIT{n}"] for n in range(10)}
_FKEYS = {f"F{n}": KeyCode[f"F{n}"] for n in range(1, 13)}

_NAMED_KEYS = {
    "SHIFT": KeyCode.SHIFT_LEFT,
    "CTRL": KeyCode.CONTROL_LEFT,
    "ALT": KeyCode.ALT_LEFT,
    " ": KeyCode.SPACE,
    "BACK": KeyCode.BACKSPACE,
    "TAB": KeyCode.TAB,
    "RETURN": KeyCode.ENTER,
    "ESCAPE": KeyCode.ESCAPE,
    "PAUSE": KeyCode.PAUSE,
    "PAGEUP": KeyCode.PAGE_UP,
    "PAGEDOWN": KeyCode.PAGE_DOWN,
    "END": KeyCode.END,
    "HOME": KeyCode.HOME,
    "PRINTSCREEN": KeyCode.PRINT_SCREEN,
    "INSERT": KeyCode.INSERT,
    "DELETE": KeyCode.DELETE,
    "UP": KeyCode.ARROW_UP,
    "DOWN": KeyCode.ARROW_DOWN,
    "LEFT": KeyCode.ARROW_LEFT,
    "RIGHT": KeyCode.ARROW_RIGHT,
    "NUMLOCK": KeyCode.NUM_LOCK,
    "SCROLL": KeyCode.SCROLL_LOCK,
}

_STR_TO_KEY = {**_LETTERS, **_DIGITS, **_FKEYS, **_NAMED_KEYS}

_KEY_TO_STR = {
    **{code: name.lower() for name, code in _LETTERS.items()},
    **{code: name for name, code in _DIGITS.items()},
    **{code: name for name, code in _FKEYS.items()},
    **{code: name for name, code in _NAMED_KEYS.items()},
    KeyCode.EQUAL: "+",
    KeyCode.MINUS: "-",
    KeyCode.COMMA: ",",
    KeyCode.PERIOD: ".",
    KeyCode.SLASH: "/",
    KeyCode.NUMPAD_ADD: "+",
    KeyCode.NUMPAD_SUBTRACT: "-",
    KeyCode.NUMPAD_ENTER: "RETURN",
    KeyCode.NUMPAD0: "0",
}

_STR_TO_BUTTON = {
    "LEFTBUTTON": MouseButton.LEFT,
    "RIGHTBUTTON": MouseButton.RIGHT,
    "MIDDLEBUTTON": MouseButton.MIDDLE,
    "MOUSE4": MouseButton.BACK,
    "MOUSE5": MouseButton.FORWARD,
}

_BUTTON_TO_STR = {button: name for name, button in _STR_TO_BUTTON.items()}


def str_as_keycode(s: str) -> KeyCode | None:
    """The key named by ``s`` (case-insensitive), or None."""
    return _STR_TO_KEY.get(s.upper())


def keycode_as_str(code: KeyCode) -> str | None:
    """The script-side name of a key, or None if it has none."""
    return _KEY_TO_STR.get(code)


def str_as_mousebutton(s: str) -> MouseButton | None:
    """The mouse button named by ``s`` (case-insensitive), or None."""
    return _STR_TO_BUTTON.get(s.upper())


def mousebutton_as_str(button: MouseButton) -> str | None:
    """The script-side name of a mouse button, or None if it has none."""
    return _BUTTON_TO_STR.get(button)