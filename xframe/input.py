"""Keyboard, mouse and game pad state tracking driven by window events."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

logger = logging.getLogger(__name__)

KEY_COUNT = 512
MAX_KEY_CODE = 256
MOUSE_BUTTON_COUNT = 3
MAX_PLAYERS = 4
WHEEL_DELTA = 120


@dataclass(frozen=True)
class GamePadState:
    """A snapshot of one game pad."""

    connected: bool = False
    a: bool = False
    b: bool = False
    x: bool = False
    y: bool = False
    left_shoulder: bool = False
    left_trigger: bool = False
    right_shoulder: bool = False
    right_trigger: bool = False
    dpad_up: bool = False
    dpad_down: bool = False
    dpad_left: bool = False
    dpad_right: bool = False
    left_stick_up: bool = False
    left_stick_down: bool = False
    left_stick_left: bool = False
    left_stick_right: bool = False
    right_stick_up: bool = False
    right_stick_down: bool = False
    right_stick_left: bool = False
    right_stick_right: bool = False
    left_x: float = 0.0
    left_y: float = 0.0
    right_x: float = 0.0
    right_y: float = 0.0


def _check_index(index: int, count: int, what: str) -> int:
    if not 0 <= index < count:
        raise IndexError(f"[InputSystem] {what} {index} out of range 0..{count - 1}.")
    return index


class InputSystem:
    """Collects input events and turns them into per-frame state.

    Event methods (``key_down``, ``mouse_move`` and so on) record the raw
    state as it arrives; ``update`` is called once per frame to compute
    presses, mouse movement and game pad snapshots.
    """

    def __init__(self) -> None:
        self._curr_keys = [False] * KEY_COUNT
        self._prev_keys = [False] * KEY_COUNT
        self._pressed_keys = [False] * KEY_COUNT

        self.clip_mouse_to_window = False

        self._curr_mouse_x = -1
        self._curr_mouse_y = -1
        self._prev_mouse_x = -1
        self._prev_mouse_y = -1
        self._mouse_move_x = 0
        self._mouse_move_y = 0
        self._mouse_wheel = 0.0

        self._curr_buttons = [False] * MOUSE_BUTTON_COUNT
        self._prev_buttons = [False] * MOUSE_BUTTON_COUNT
        self._pressed_buttons = [False] * MOUSE_BUTTON_COUNT

        self.mouse_left_edge = False
        self.mouse_right_edge = False
        self.mouse_top_edge = False
        self.mouse_bottom_edge = False

        self._gamepads = [GamePadState() for _ in range(MAX_PLAYERS)]
        self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    def initialize(self) -> None:
        if self._initialized:
            logger.info("[InputSystem] System already initialized.")
            return
        logger.info("[InputSystem] Initializing...")
        self._initialized = True
        logger.info("[InputSystem] System initialized.")

    def terminate(self) -> None:
        if not self._initialized:
            logger.info("[InputSystem] System already terminated.")
            return
        logger.info("[InputSystem] Terminating...")
        self._initialized = False
        logger.info("[InputSystem] System terminated.")

    # Events -----------------------------------------------------------------

    def activate(self, active: bool) -> None:
        """The application gained or lost focus."""
        if not active:
            self.mouse_left_edge = False
            self.mouse_right_edge = False
            self.mouse_top_edge = False
            self.mouse_bottom_edge = False

    def key_down(self, key: int) -> None:
        if 0 <= key < MAX_KEY_CODE:
            self._curr_keys[key] = True

    def key_up(self, key: int) -> None:
        if 0 <= key < MAX_KEY_CODE:
            self._curr_keys[key] = False

    def mouse_button_down(self, button: int) -> None:
        self._curr_buttons[_check_index(button, MOUSE_BUTTON_COUNT, "Mouse button")] = True

    def mouse_button_up(self, button: int) -> None:
        self._curr_buttons[_check_index(button, MOUSE_BUTTON_COUNT, "Mouse button")] = False

    def mouse_wheel(self, delta: int) -> None:
        """Accumulate a raw wheel delta, in units of one notch per WHEEL_DELTA."""
        self._mouse_wheel += delta / WHEEL_DELTA

    def mouse_move(self, x: int, y: int, client_width: int, client_height: int) -> None:
        """The cursor moved to (x, y) inside a client area of the given size."""
        self._curr_mouse_x = x
        self._curr_mouse_y = y
        if self._prev_mouse_x == -1:
            self._prev_mouse_x = x
            self._prev_mouse_y = y
        self.mouse_left_edge = x <= 0
        self.mouse_right_edge = x + 1 >= client_width
        self.mouse_top_edge = y <= 0
        self.mouse_bottom_edge = y + 1 >= client_height

    # Frame update -----------------------------------------------------------

    def update(self, gamepad_states: Iterable[GamePadState] = ()) -> None:
        """Advance one frame; missing game pad states count as disconnected."""
        if not self._initialized:
            raise RuntimeError("[InputSystem] System not initialized.")

        self._pressed_keys = [
            curr and not prev for curr, prev in zip(self._curr_keys, self._prev_keys)
        ]
        self._prev_keys = list(self._curr_keys)

        self._mouse_move_x = self._curr_mouse_x - self._prev_mouse_x
        self._mouse_move_y = self._curr_mouse_y - self._prev_mouse_y
        self._prev_mouse_x = self._curr_mouse_x
        self._prev_mouse_y = self._curr_mouse_y

        self._pressed_buttons = [
            curr and not prev
            for curr, prev in zip(self._curr_buttons, self._prev_buttons)
        ]
        self._prev_buttons = list(self._curr_buttons)

        states = list(gamepad_states)[:MAX_PLAYERS]
        states.extend(GamePadState() for _ in range(MAX_PLAYERS - len(states)))
        self._gamepads = states

    # Queries ----------------------------------------------------------------

    def is_key_down(self, key: int) -> bool:
        return self._curr_keys[_check_index(key, KEY_COUNT, "Key")]

    def is_key_pressed(self, key: int) -> bool:
        return self._pressed_keys[_check_index(key, KEY_COUNT, "Key")]

    def is_mouse_down(self, button: int) -> bool:
        return self._curr_buttons[_check_index(button, MOUSE_BUTTON_COUNT, "Mouse button")]

    def is_mouse_pressed(self, button: int) -> bool:
        return self._pressed_buttons[
            _check_index(button, MOUSE_BUTTON_COUNT, "Mouse button")
        ]

    @property
    def mouse_move_x(self) -> int:
        return self._mouse_move_x

    @property
    def mouse_move_y(self) -> int:
        return self._mouse_move_y

    @property
    def mouse_move_z(self) -> float:
        """Accumulated wheel movement in notches."""
        return self._mouse_wheel

    @property
    def mouse_screen_x(self) -> int:
        return self._curr_mouse_x

    @property
    def mouse_screen_y(self) -> int:
        return self._curr_mouse_y

    def gamepad(self, player: int) -> GamePadState:
        return self._gamepads[_check_index(player, MAX_PLAYERS, "Player")]

    def is_gamepad_connected(self, player: int) -> bool:
        return self.gamepad(player).connected