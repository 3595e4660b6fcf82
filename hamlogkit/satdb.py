"""Satellite database: transponder plans, TLE parsing and frequency offsets."""

from __future__ import annotations

import re
from dataclasses import dataclass
from itertools import takewhile
from typing import IO, Iterable, Iterator, Sequence

from hamlogkit.constants import SAT_NAMES
from hamlogkit.settings import LINE_SIZE, LineTerminator, read_lines

TLE_LINE_LENGTH = 69
_MAX_RECORD_LINE = 128
_MAX_DOWNLOAD_LINE = 256
_NEWLINE = "\r\n"

_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INT = re.compile(r"\s*([+-]?\d+)")

TleRecord = tuple[str, str, str]


def _atof(text: str) -> float:
    match = _FLOAT.match(text)
    return float(match.group(1)) if match else 0.0


def _atoi(text: str) -> int:
    match = _INT.match(text)
    return int(match.group(1)) if match else 0


@dataclass(frozen=True)
class Transponder:
    """Frequency plan of a satellite: bands in MHz, offset in kHz."""

    name: str
    up_f0: float
    up_f1: float
    up_mode: str
    dn_f0: float
    dn_f1: float
    dn_mode: str
    beacon: float
    offset: float


TRANSPONDERS: tuple[Transponder, ...] = (
    Transponder("FO-29", 145.900, 146.000, "LSB", 435.800, 435.900, "USB", 435.795, 2.4),
    Transponder("AO-73", 435.130, 435.150, "LSB", 145.950, 145.970, "USB", 0.0, 1.5),
    Transponder("AO-07", 145.850, 145.950, "USB", 29.400, 29.500, "USB", 29.502, 0.0),
    Transponder("XW-2A", 435.030, 435.050, "LSB", 145.665, 145.685, "USB", 145.660, -1.3),
    Transponder("XW-2B", 435.090, 435.110, "LSB", 145.730, 145.750, "USB", 145.725, 0.0),
    Transponder("XW-2C", 435.150, 435.170, "LSB", 145.795, 145.815, "USB", 145.790, 0.0),
    Transponder("XW-2D", 435.210, 435.230, "LSB", 145.860, 145.880, "USB", 145.855, 0.0),
    Transponder("MESAT1", 145.910, 145.940, "LSB", 435.810, 435.840, "USB", 435.800, 0.0),
    Transponder("RS-44", 145.935, 145.995, "LSB", 435.610, 435.670, "USB", 435.605, -0.45),
    Transponder("EO-88", 435.015, 435.045, "LSB", 145.960, 145.990, "USB", 0.0, 0.1),
    Transponder("CAS-4A", 435.210, 435.230, "LSB", 145.860, 145.880, "USB", 145.855, -1.1),
    Transponder("CAS-4B", 435.270, 435.290, "LSB", 145.915, 145.935, "USB", 145.910, -1.5),
    Transponder("JO-97", 435.100, 435.120, "LSB", 145.855, 145.875, "USB", 145.840, -1.8),
    Transponder("FO-99", 145.900, 145.930, "LSB", 435.880, 435.910, "USB", 437.075, -1.0),
    Transponder("HO-113", 145.855, 145.885, "LSB", 435.195, 435.165, "USB", 435.575, 0.8),
    Transponder("ISS", 144.49, 145.80, "FM", 145.80, 437.80, "FM", 0.0, 0.0),
    Transponder("IO-117", 435.300, 435.320, "USB", 435.300, 435.320, "USB", 0.0, 0.0),
    Transponder("FO-118", 145.805, 145.835, "LSB", 435.525, 435.555, "USB", 435.570, 0.0),
    Transponder("CAS-10", 145.855, 145.885, "LSB", 435.195, 435.165, "USB", 435.575, 0.0),
)

_TRANSPONDERS_BY_NAME = {t.name: t for t in TRANSPONDERS}


@dataclass
class SatInfo:
    """Orbital elements and transponder frequencies (Hz) of one satellite."""

    name: str = ""
    year: int = 0
    epoch: float = 0.0
    inclination: float = 0.0
    raan: float = 0.0
    eccentricity: float = 0.0
    arg_perigee: float = 0.0
    mean_anomaly: float = 0.0
    mean_motion: float = 0.0
    time_motion_d: float = 0.0
    epoch_orbit: int = 0
    up_f0: int = 0
    up_f1: int = 0
    dn_f0: int = 0
    dn_f1: int = 0
    bc_f0: int = 0
    offset_freq: int = 0
    up_mode: str = ""
    dn_mode: str = ""


def parse_tle_elements(name: str, line1: str, line2: str) -> SatInfo:
    """Build a SatInfo from a name and the two lines of a TLE set."""
    return SatInfo(
        name=name,
        year=_atoi(line1[18:20]) + 2000,
        epoch=_atof(line1[20:32]),
        inclination=_atof(line2[8:16]),
        raan=_atof(line2[17:25]),
        eccentricity=_atof("0." + line2[26:33]),
        arg_perigee=_atof(line2[34:42]),
        mean_anomaly=_atof(line2[43:51]),
        mean_motion=_atof(line2[52:63]),
        time_motion_d=_atof(line1[33:43]),
        epoch_orbit=_atoi(line2[63:68]),
    )


def _raw_lines(lines: Iterable[str]) -> Iterator[str]:
    """Yield non-empty lines with the line feed removed and cut at a stray CR."""
    for raw in lines:
        raw = raw[:-1] if raw.endswith("\n") else raw
        if not raw:
            continue
        yield raw.split("\r", 1)[0]


def iter_tle_records(lines: Iterable[str]) -> Iterator[TleRecord]:
    """Yield (name, line1, line2) from the record lines of a TLE file.

    A name must be followed by a line starting with "1"; otherwise that line is
    dropped and a new name is expected. After line 1, lines not starting with
    "2" are ignored until one does.
    """
    state = 0
    name = line1 = ""
    for line in _raw_lines(lines):
        if state == 0:
            name = line
            state = 1
        elif state == 1:
            if line.startswith("1"):
                line1 = line
                state = 2
            else:
                state = 0
        elif line.startswith("2"):
            yield name, line1, line
            state = 0


def reassemble_tle_download(lines: Iterable[str]) -> Iterator[TleRecord]:
    """Yield (name, line1, line2) from a downloaded TLE text.

    The first line is a status line and is skipped. A TLE line shorter than
    69 characters is taken as cut by an interleaved line: the next line is
    skipped and the one after it is appended. An empty line ends the data.
    """
    state = 0
    current = ""
    name = line1 = ""
    for raw in lines:
        raw = raw[:-1] if raw.endswith("\n") else raw
        if not raw:
            continue
        if len(raw) >= _MAX_DOWNLOAD_LINE:
            continue
        if state == 0:
            state = 2
            continue
        line = raw.split("\r", 1)[0]
        if state == 2:
            if len(line) + len(current) > _MAX_RECORD_LINE:
                current = ""
                continue
            current += line
            state = 1
        else:
            current = line
        if not current:
            return
        if current.startswith("1"):
            if len(current) != TLE_LINE_LENGTH:
                state = 0
                continue
            line1 = current
        elif current.startswith("2"):
            if len(current) != TLE_LINE_LENGTH:
                state = 0
                continue
            yield name, line1, current
        else:
            name = current


def write_tle_file(stream: IO[str], unixtime: int, records: Iterable[TleRecord]) -> None:
    """Write a TLE file: the download time, then name and two lines per record."""
    stream.write(f"{unixtime}{_NEWLINE}")
    for name, line1, line2 in records:
        stream.write(f"{name}{_NEWLINE}{line1}{_NEWLINE}{line2}{_NEWLINE}")


class SatDatabase:
    """Satellites of interest with their elements, frequencies and offsets."""

    def __init__(self, names: Sequence[str] = SAT_NAMES):
        self.names: tuple[str, ...] = tuple(names)
        self.entries: list[SatInfo] = [SatInfo() for _ in self.names]
        self.tle_unixtime = 0

    def __getitem__(self, name: str) -> SatInfo:
        return self.entries[self.find(name)]

    def find(self, name: str) -> int:
        """Return the index of a satellite name; KeyError if it is not known."""
        try:
            return self.names.index(name)
        except ValueError:
            raise KeyError(name) from None

    def apply_transponder(self, name: str) -> bool:
        """Copy the transponder plan of a satellite into its entry.

        Returns False if no transponder plan is known for the satellite.
        """
        entry = self.entries[self.find(name)]
        plan = _TRANSPONDERS_BY_NAME.get(name)
        if plan is None:
            return False
        entry.up_f0 = int(plan.up_f0 * 1_000_000.0)
        entry.up_f1 = int(plan.up_f1 * 1_000_000.0)
        entry.dn_f0 = int(plan.dn_f0 * 1_000_000.0)
        entry.dn_f1 = int(plan.dn_f1 * 1_000_000.0)
        entry.bc_f0 = int(plan.beacon * 1_000_000.0)
        entry.offset_freq = int(plan.offset * 1000.0)
        entry.up_mode = plan.up_mode
        entry.dn_mode = plan.dn_mode
        return True

    def read_tle(self, stream: Iterable[str]) -> int:
        """Load elements of known satellites from a TLE file.

        The first line holds the Unix time of the download; it is stored in
        ``tle_unixtime`` and returned.
        """
        lines = _raw_lines(stream)
        header = next(lines, "")
        self.tle_unixtime = _atoi(header)
        for name, line1, line2 in iter_tle_records(lines):
            try:
                index = self.find(name)
            except KeyError:
                continue
            entry = parse_tle_elements(name, line1, line2)
            old = self.entries[index]
            entry.offset_freq = old.offset_freq
            self.entries[index] = entry
            self.apply_transponder(name)
        return self.tle_unixtime

    def load_offsets(self, stream: IO[str]) -> int:
        """Read ``name offset`` lines; return how many offsets were set."""
        count = 0
        for line in takewhile(bool, read_lines(stream, LineTerminator.CRLF, LINE_SIZE)):
            tokens = line.split()
            if not tokens:
                break
            try:
                index = self.find(tokens[0])
            except KeyError:
                continue
            self.entries[index].offset_freq = _atoi(tokens[1]) if len(tokens) > 1 else 0
            count += 1
        return count

    def save_offsets(self, stream: IO[str]) -> None:
        """Write a ``name offset`` line for every loaded satellite."""
        for entry in self.entries:
            if entry.name:
                stream.write(f"{entry.name} {entry.offset_freq}{_NEWLINE}")

    def adjust_offset(self, name: str, dfreq: int) -> int:
        """Shift the frequency offset of a satellite; return the new offset."""
        entry = self.entries[self.find(name)]
        entry.offset_freq += dfreq
        return entry.offset_freq

    def valid(self) -> list[SatInfo]:
        """Return the entries that hold orbital elements."""
        return [entry for entry in self.entries if entry.year != 0]