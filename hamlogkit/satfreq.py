"""Doppler-corrected uplink/downlink frequency tracking for linear transponders."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import NamedTuple, Optional

from hamlogkit.satdb import SatInfo

SPEED_OF_LIGHT_KM_S = 299792.0


class TrackingMode(IntEnum):
    """Which side of the link is held fixed while the other is corrected."""

    RX_FIX = 0
    TX_FIX = 1
    SAT_FIX = 2
    NO_TRACK = 3


class VfoMode(IntEnum):
    """How uplink and downlink are spread over rigs and VFOs."""

    SINGLE_A_TX = 0
    SINGLE_A_RX = 1
    MULTI_TX_0 = 2
    MULTI_TX_1 = 3

    @property
    def label(self) -> str:
        """Short label shown on the satellite display."""
        return {
            VfoMode.SINGLE_A_RX: "RATB",
            VfoMode.SINGLE_A_TX: "RBTA",
            VfoMode.MULTI_TX_0: "R1T0",
            VfoMode.MULTI_TX_1: "R0T1",
        }[self]


class _RigUpdate(NamedTuple):
    radio: int
    vfo: int
    freq: int
    tx: bool


def _tdiv(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _tmod(a: int, b: int) -> int:
    return a - b * _tdiv(a, b)


def doppler_factor(range_rate: float) -> float:
    """Return the received/transmitted frequency ratio for a range rate in km/s."""
    return 1.0 - range_rate / SPEED_OF_LIGHT_KM_S


def freq2str(freq: int) -> str:
    """Format a frequency in Hz as ``MMM.kkk.hh`` (MHz, kHz, tens of Hz)."""
    freq = int(freq)
    mhz = _tdiv(freq, 1_000_000)
    khz = _tmod(_tdiv(freq, 1000), 1000)
    tens = _tdiv(_tmod(freq, 1000), 10)
    return f"{mhz:3d}.{khz:03d}.{tens:02d}"


def route_frequency(vfo_mode: VfoMode, tx: bool) -> tuple[int, int]:
    """Return (radio index, vfo) that carries the uplink (tx) or downlink."""
    vfo_mode = VfoMode(vfo_mode)
    if vfo_mode is VfoMode.MULTI_TX_0:
        return (0, 0) if tx else (1, 0)
    if vfo_mode is VfoMode.MULTI_TX_1:
        return (1, 0) if tx else (0, 0)
    if vfo_mode is VfoMode.SINGLE_A_TX:
        return (0, 0) if tx else (0, 1)
    return (0, 1) if tx else (0, 0)


@dataclass
class FrequencyTracker:
    """Uplink/downlink frequencies (Hz) of the selected satellite."""

    sat: Optional[SatInfo] = None
    tracking_mode: TrackingMode = TrackingMode.RX_FIX
    vfo_mode: VfoMode = VfoMode.SINGLE_A_RX
    up_f: int = 0
    dn_f: int = 0
    satdn_f: int = 0
    beacon_f: int = 0
    inband: bool = True
    up_f_prev: int = 0
    dn_f_prev: int = 0
    freq_tolerance: int = 0
    suppressed: bool = False
    rotator_az: int = 0
    rotator_track: bool = False

    def calc(self, range_rate: float) -> list[_RigUpdate]:
        """Recompute frequencies for a range rate; return the rig updates due."""
        sat = self.sat
        if sat is None or self.suppressed:
            return []
        factor = doppler_factor(range_rate)
        self.beacon_f = int(sat.bc_f0 * factor) if sat.bc_f0 != 0 else 0
        dn_low = sat.dn_f0 + sat.offset_freq
        dn_high = sat.dn_f1 + sat.offset_freq
        mode = self.tracking_mode
        if mode is TrackingMode.RX_FIX:
            fsat0 = self.dn_f / factor
            self.satdn_f = int(fsat0)
            ofs = fsat0 - dn_low
            self.up_f = int((sat.up_f1 - ofs) / factor)
        elif mode is TrackingMode.TX_FIX:
            fsat0 = self.up_f * factor
            self.inband = sat.up_f0 <= fsat0 <= sat.up_f1
            ofs = sat.up_f1 - fsat0
            self.satdn_f = int(dn_low + ofs)
            self.dn_f = int(self.satdn_f * factor)
        elif mode is TrackingMode.SAT_FIX:
            fsat0 = self.satdn_f
            self.inband = dn_low <= fsat0 <= dn_high
            ofs = fsat0 - dn_low
            self.up_f = int((sat.up_f1 - ofs) / factor)
            self.dn_f = int(self.satdn_f * factor)
        return self.pending_updates()

    def _with_mode(self, mode: TrackingMode, satdn_f: int, range_rate: float) -> list[_RigUpdate]:
        saved = self.tracking_mode
        self.tracking_mode = mode
        self.satdn_f = satdn_f
        try:
            return self.calc(range_rate)
        finally:
            self.tracking_mode = saved

    def set_center(self, range_rate: float) -> list[_RigUpdate]:
        """Tune to the centre of the downlink passband."""
        if self.sat is None:
            return []
        center = self.sat.dn_f0 // 2 + self.sat.dn_f1 // 2
        return self._with_mode(TrackingMode.SAT_FIX, center, range_rate)

    def set_beacon(self, range_rate: float) -> list[_RigUpdate]:
        """Tune the downlink to the beacon, if the satellite has one."""
        if self.sat is None or self.sat.bc_f0 == 0:
            return []
        return self._with_mode(TrackingMode.SAT_FIX, self.sat.bc_f0, range_rate)

    def _due(self, freq: int, prev: int) -> bool:
        if prev == 0:
            return True
        return abs(prev - freq) > self.freq_tolerance

    def _send_up(self) -> list[_RigUpdate]:
        if not self._due(self.up_f, self.up_f_prev):
            return []
        self.up_f_prev = self.up_f
        radio, vfo = route_frequency(self.vfo_mode, True)
        return [_RigUpdate(radio, vfo, self.up_f, True)]

    def _send_dn(self) -> list[_RigUpdate]:
        if not self._due(self.dn_f, self.dn_f_prev):
            return []
        self.dn_f_prev = self.dn_f
        radio, vfo = route_frequency(self.vfo_mode, False)
        return [_RigUpdate(radio, vfo, self.dn_f, False)]

    def pending_updates(self) -> list[_RigUpdate]:
        """Return the rig frequency changes that exceed the tolerance."""
        mode = self.tracking_mode
        if mode is TrackingMode.TX_FIX:
            return self._send_dn()
        if mode is TrackingMode.RX_FIX:
            return self._send_up()
        if mode is TrackingMode.SAT_FIX:
            return self._send_up() + self._send_dn()
        return []

    def display_lines(self, sat_name: str, locator: str, az: float, el: float) -> list[str]:
        """Return the six lines of the satellite status display."""
        mode = self.tracking_mode
        track = "T" if self.rotator_track else " "
        offset = self.sat.offset_freq if self.sat is not None else 0
        sign = "+" if offset >= 0 else "-"
        return [
            f"{sat_name:<6s} {locator:<6s} az{self.rotator_az:03d}{track}",
            f"AZ:{az:3.0f} EL:{el:3.0f} {self.vfo_mode.label}",
            f"TX{'*' if mode is TrackingMode.TX_FIX else ' '}:{freq2str(self.up_f)}",
            f"RX{'*' if mode is TrackingMode.RX_FIX else ' '}:{freq2str(self.dn_f)}",
            f"S {'*' if mode is TrackingMode.SAT_FIX else ' '}:{freq2str(self.satdn_f)}"
            f"{' ' if self.inband else '!'}",
            f"Ofs:{sign}{freq2str(abs(offset))}",
        ]