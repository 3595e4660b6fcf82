# hamlogkit

Building blocks for a contest logger for amateur radio stations. The package
handles the chores around the log itself. It uses only the standard library.

## Modules

- **`hamlogkit.constants`**: the rig mode names (`MODE_NAMES`), their
  categories (`ModeType`: CW, phone, digital) and the satellite names the
  database tracks (`SAT_NAMES`). `mode_id` and `modetype_of` look up a
  mode name and raise `ValueError` if the name is unknown.
- **`hamlogkit.settings`**: `read_lines` splits a text stream on CR, LF or
  CR LF (`LineTerminator`) and cuts overlong lines into pieces. `Settings`
  holds an ordered set of `SettingItem`s, each an integer or text
  (`SettingKind`). `Settings.assign` applies a `name value` line,
  `dump` / `save` write the settings, and `load` reads them up to the first
  empty line. `radios_enabled` / `set_radios_enabled` map the three
  radio flags to a bit mask. `default_settings()` gives the station settings
  with empty values, and `settings_path` builds `<name>.txt`, or
  `settings.txt` when no name is given.
- **`hamlogkit.satdb`**: the transponder plans (`Transponder`,
  `TRANSPONDERS`) and the satellite database (`SatDatabase` of `SatInfo`).
  `SatDatabase.read_tle` reads a TLE file whose first line is the Unix time
  of the download. `iter_tle_records` and `parse_tle_elements` do the
  parsing. `reassemble_tle_download` rebuilds downloaded TLE text whose lines
  were broken, and `write_tle_file` writes records back with the time
  header. Per-satellite frequency offsets are handled by `load_offsets`,
  `save_offsets` and `adjust_offset`, and `apply_transponder` copies a plan
  into an entry.
- **`hamlogkit.satfreq`**: `FrequencyTracker.calc` computes the Doppler
  corrected uplink and downlink frequencies from a range rate in km/s. It
  holds the downlink, the uplink or the satellite frequency fixed, as set by
  `TrackingMode`. `set_center` and `set_beacon` tune to the passband
  centre or to the beacon. The tracker returns the rig updates that exceed
  its tolerance. `route_frequency` tells which radio and VFO get each
  frequency under a `VfoMode`. `display_lines` and `freq2str` produce
  the status text.
- **`hamlogkit.rigcmd`**: `frequency_commands` builds the commands that
  set a frequency. For Icom rigs (`RigType.IC705`, `RigType.IC9700`) these
  are CI-V body bytes without preamble, address or end byte. For Yaesu and
  Kenwood CAT they are `FA...;` strings. `dec2bcd` and
  `civ_frequency_bytes` do the BCD encoding.
- **`hamlogkit.so2r`**: `So2rState` tracks the transmitting and receiving
  radio, the focused radio and the stereo setting, and calls optional
  `mic_switch` / `phone_switch` callbacks. `phone_switches` gives the
  left and right headphone masks.
- **`hamlogkit.telnet`**: `TelnetKeyDecoder.feed` splits a byte stream
  from a remote keyboard into `KeyEvent`s (byte 239, modifier, key) and
  command lines. Key releases (byte 238) are consumed and ignored.
- **`hamlogkit.timekeep`**: `ClockSync.update` replaces the clock time
  with NTP time once they have differed by the threshold on enough
  consecutive updates. `format_short` and `format_long` give the display
  timestamps.
- **`hamlogkit.files`**: `list_dir` walks a directory tree to a given
  depth, and `benchmark_file_io` times reading a file and overwriting it
  with 1 MiB.

## What it does not do

The package computes values and builds commands; it does not talk to
anything. It opens no serial ports, sockets or telnet server, and it queries
no NTP server. It has no orbit propagator, so satellite positions, range rates
and pass times (AOS, LOS) must come from elsewhere. It draws no display, keeps
no QSO log and provides no command-line program.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Load settings from a file and save them back:

```python
from hamlogkit.settings import default_settings, settings_path

settings = default_settings()
settings.load(settings_path("/data", "contest"))
settings.assign("my_callsign JA1XYZ")
settings.save(settings_path("/data", "contest"))
```

Read a TLE file into the satellite database:

```python
from hamlogkit.satdb import SatDatabase

db = SatDatabase()
with open("tle.txt", encoding="ascii") as stream:
    db.read_tle(stream)
for sat in db.valid():
    print(sat)
```

Build the commands that set a rig's frequency:

```python
from hamlogkit.rigcmd import RigType, dec2bcd, frequency_commands

assert dec2bcd(45) == 0x45
commands = frequency_commands(RigType.IC9700, 0, 145_900_000, 0)
```

Format a frequency the way the satellite display shows it:

```python
from hamlogkit.satfreq import freq2str

print(freq2str(145_900_000))   # 145.900.00
```