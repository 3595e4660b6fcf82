"""Decoder for the telnet command port: key events and command lines."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Union

TELNET_PORT = 23
MAX_CLIENTS = 1

KEY_PRESSED = 239
KEY_RELEASED = 238


@dataclass(frozen=True)
class KeyEvent:
    """A key press sent over the connection: HID modifier byte and key code."""

    modifiers: int
    key: int

    @property
    def ctrl(self) -> bool:
        return bool(self.modifiers & 0x11)

    @property
    def shift(self) -> bool:
        return bool(self.modifiers & 0x22)

    @property
    def alt(self) -> bool:
        return bool(self.modifiers & 0x44)


class _State(IntEnum):
    TEXT = 0
    PRESS_MOD = 2
    RELEASE_MOD = 3
    PRESS_KEY = 4
    RELEASE_KEY = 5


class TelnetKeyDecoder:
    """Split a client byte stream into key events and command lines.

    Byte 239 introduces a key press (modifier byte, key code), byte 238 a key
    release, which is consumed and ignored. Other bytes of 238 and above are
    dropped. Remaining bytes form lines ended by CR or LF; a line longer than
    ``line_size`` is discarded.
    """

    def __init__(self, line_size: int = 256):
        if line_size < 1:
            raise ValueError("line_size must be positive")
        self.line_size = line_size
        self._state = _State.TEXT
        self._modifier = 0
        self._line = bytearray()

    def feed(self, data: bytes) -> list[Union[KeyEvent, str]]:
        """Decode received bytes; return key events and completed lines in order."""
        events: list[Union[KeyEvent, str]] = []
        for c in data:
            state = self._state
            if state is _State.PRESS_MOD:
                self._modifier = c
                self._state = _State.PRESS_KEY
            elif state is _State.RELEASE_MOD:
                self._modifier = c
                self._state = _State.RELEASE_KEY
            elif state is _State.PRESS_KEY:
                events.append(KeyEvent(self._modifier, c))
                self._state = _State.TEXT
            elif state is _State.RELEASE_KEY:
                self._state = _State.TEXT
            elif c == KEY_PRESSED:
                self._state = _State.PRESS_MOD
            elif c == KEY_RELEASED:
                self._state = _State.RELEASE_MOD
            elif c > KEY_PRESSED:
                continue
            elif c in (0x0A, 0x0D):
                if self._line:
                    events.append(self._line.decode("latin-1"))
                self._line.clear()
            else:
                self._line.append(c)
                if len(self._line) >= self.line_size:
                    self._line.clear()
        return events