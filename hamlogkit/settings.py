"""Line reading and the key/value settings file."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from itertools import takewhile
from pathlib import Path
from typing import IO, Iterable, Iterator, Sequence

LINE_SIZE = 128
_NEWLINE = "\r\n"
_ATOI = re.compile(r"\s*([+-]?\d+)")


class LineTerminator(Enum):
    """How lines are terminated in a file."""

    CR = 0x0D
    LF = 0x0A
    CRLF = 0x0D0A


def read_lines(
    stream: IO[str], term: LineTerminator = LineTerminator.CRLF, size: int = LINE_SIZE
) -> Iterator[str]:
    """Yield lines from a text stream.

    With CRLF termination carriage returns are dropped and a line feed ends a
    line. A line longer than ``size`` is yielded in pieces of ``size``
    characters. A final line without a terminator is yielded if non-empty.
    """
    term = LineTerminator(term)
    chars: list[str] = []
    while True:
        if len(chars) >= size:
            yield "".join(chars)
            chars = []
        c = stream.read(1)
        if not c:
            break
        if c == "\r":
            if term is LineTerminator.CR:
                yield "".join(chars)
                chars = []
                continue
            if term is LineTerminator.CRLF:
                continue
        elif c == "\n" and term in (LineTerminator.CRLF, LineTerminator.LF):
            yield "".join(chars)
            chars = []
            continue
        chars.append(c)
    if chars:
        yield "".join(chars)


def settings_path(directory: str | Path, name: str = "") -> Path:
    """Return the settings file path for a profile name ("" is the default)."""
    return Path(directory) / f"{name or 'settings'}.txt"


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


class SettingKind(Enum):
    """Type of value a setting holds."""

    INT = "int"
    TEXT = "text"


@dataclass
class SettingItem:
    """One named setting and its current value."""

    name: str
    kind: SettingKind
    value: int | str

    def parse(self, text: str) -> None:
        """Set the value from its textual form."""
        self.value = _atoi(text) if self.kind is SettingKind.INT else text


class Settings:
    """An ordered collection of settings, read from and written to text files."""

    def __init__(self, items: Iterable[SettingItem]):
        self._items: dict[str, SettingItem] = {item.name: item for item in items}

    def __iter__(self) -> Iterator[SettingItem]:
        return iter(self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, name: object) -> bool:
        return name in self._items

    def __getitem__(self, name: str) -> int | str:
        return self._items[name].value

    def __setitem__(self, name: str, value: int | str) -> None:
        item = self._items[name]
        if item.kind is SettingKind.INT:
            if not isinstance(value, int):
                raise TypeError(f"{name} takes an integer")
        elif not isinstance(value, str):
            raise TypeError(f"{name} takes a string")
        item.value = value

    def assign(self, line: str) -> bool:
        """Apply a ``name value`` line; return whether a known setting was set."""
        stripped = line.lstrip(" ")
        if not stripped:
            return False
        name, sep, value = stripped.partition(" ")
        if not sep or not value:
            return False
        item = self._items.get(name)
        if item is None:
            return False
        item.parse(value)
        return True

    def dump(self, stream: IO[str]) -> None:
        """Write every setting as a ``name value`` line."""
        for item in self._items.values():
            stream.write(f"{item.name} {item.value}{_NEWLINE}")

    def load(self, path: str | Path) -> int:
        """Read settings from a file, stopping at the first empty line.

        Returns the number of lines that set a known setting.
        """
        assigned = 0
        with open(path, encoding="utf-8", newline="") as stream:
            for line in takewhile(bool, read_lines(stream, LineTerminator.CRLF, LINE_SIZE)):
                assigned += self.assign(line)
        return assigned

    def save(self, path: str | Path) -> None:
        """Write all settings to a file."""
        with open(path, "w", encoding="utf-8", newline="") as stream:
            self.dump(stream)

    def radios_enabled(self) -> tuple[bool, bool, bool]:
        """Return which of the three radios are enabled."""
        flags = int(self["radios_enabled"])
        return tuple(bool((flags >> i) & 1) for i in range(3))  # type: ignore[return-value]

    def set_radios_enabled(self, flags: Sequence[bool]) -> None:
        """Store the enabled state of the three radios as a bit mask."""
        if len(flags) != 3:
            raise ValueError("exactly three radio flags are expected")
        self["radios_enabled"] = sum(int(bool(f)) << i for i, f in enumerate(flags))


_TEXT_NAMES = (
    ["my_callsign", "sent_exch"]
    + [f"cw_msg_{i}" for i in range(1, 8)]
)
_INT_NAMES = ["dupechk_mask", "contest_id", "bandmap_mask", "multi_type", "voice_memory_enable"]
_TAIL = [
    ("cluster_name", SettingKind.TEXT),
    ("cluster_cmd", SettingKind.TEXT),
    ("email_addr", SettingKind.TEXT),
    ("rig_name_1", SettingKind.TEXT),
    ("rig_name_2", SettingKind.TEXT),
    ("rig_name_3", SettingKind.TEXT),
    ("radios_enabled", SettingKind.INT),
    ("radio_mode", SettingKind.INT),
    ("callhistfn", SettingKind.TEXT),
    ("power_code", SettingKind.TEXT),
    ("zserver_name", SettingKind.TEXT),
    ("my_name", SettingKind.TEXT),
]


def default_settings() -> Settings:
    """Return the station settings with empty values, in file order."""
    layout = (
        [(n, SettingKind.TEXT) for n in _TEXT_NAMES]
        + [(n, SettingKind.INT) for n in _INT_NAMES]
        + _TAIL
    )
    return Settings(
        SettingItem(name, kind, 0 if kind is SettingKind.INT else "")
        for name, kind in layout
    )