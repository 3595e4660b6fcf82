"""SO2R switching: transmit radio, receive focus and headphone routing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

N_RADIOS = 3


def _check_radio(index: int) -> None:
    if not 0 <= index < N_RADIOS:
        raise ValueError(f"radio index out of range: {index}")


@dataclass
class So2rState:
    """State of the SO2R switch box and the callbacks that drive it.

    ``mic_switch`` receives the transmit radio; ``phone_switch`` receives the
    left and right headphone bit masks (bit n set routes radio n).
    """

    so2r_tx: int = 0
    so2r_rx: int = 0
    stereo: int = 0
    focused_radio: int = 0
    focused_radio_prev: int = 0
    so2rmini: bool = False
    radio_mode: int = 0
    mic_switch: Optional[Callable[[int], None]] = None
    phone_switch: Optional[Callable[[int, int], None]] = None

    def set_tx(self, tx: int) -> bool:
        """Select the transmitting radio; return whether it changed."""
        _check_radio(tx)
        if self.so2r_tx == tx:
            return False
        self.so2r_tx = tx
        if not self.so2rmini and self.mic_switch is not None:
            self.mic_switch(tx)
        return True

    def set_rx(self, rx: int) -> bool:
        """Select the receiving radio and focus it; return whether it changed."""
        _check_radio(rx)
        if self.so2r_rx == rx:
            return False
        self.so2r_rx = rx
        if self.focused_radio != rx:
            self.focused_radio_prev = self.focused_radio
        self.focused_radio = rx
        if not self.so2rmini:
            self._apply_phones()
        return True

    def set_stereo(self, stereo: int) -> None:
        """Switch stereo (both focused radios heard) on or off."""
        self.stereo = int(stereo)
        if self.radio_mode in (0, 1, 2) and not self.so2rmini:
            self._apply_phones()

    def phone_switches(self) -> tuple[int, int]:
        """Return the (left, right) headphone masks for the current state."""
        left = right = 0
        if self.stereo == 1:
            heard = (self.focused_radio, self.focused_radio_prev)
            if 0 in heard:
                left |= 1
            if 2 in heard:
                left |= 4
                right |= 4
            if 1 in heard:
                right |= 2
        elif self.stereo == 0 and 0 <= self.focused_radio < N_RADIOS:
            left = right = 1 << self.focused_radio
        return left, right

    def process(self, rx_request: Optional[int] = None, tx_request: Optional[int] = None) -> int:
        """Apply pending receive and transmit requests; return the focused radio."""
        if rx_request is not None:
            _check_radio(rx_request)
            self.focused_radio_prev = self.focused_radio
            self.focused_radio = rx_request
            self.set_rx(rx_request)
        if tx_request is not None:
            self.set_tx(tx_request)
        return self.focused_radio

    def _apply_phones(self) -> None:
        if self.phone_switch is not None:
            self.phone_switch(*self.phone_switches())