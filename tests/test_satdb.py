import io

import pytest

from hamlogkit.satdb import (
    SatDatabase,
    iter_tle_records,
    parse_tle_elements,
    reassemble_tle_download,
    write_tle_file,
)

ISS1 = "1 25544U 98067A   19181.39493521 -.00156611  00000-0 -26708-2 0  9993"
ISS2 = "2 25544  51.6396 295.7455 0007987  98.4040   9.2643 15.51194651177305"


def test_parse_tle_elements_iss():
    info = parse_tle_elements("ISS", ISS1, ISS2)
    assert info.name == "ISS"
    assert info.year == 2019
    assert info.epoch == pytest.approx(181.39493521)
    assert info.inclination == pytest.approx(51.6396)
    assert info.raan == pytest.approx(295.7455)
    assert info.eccentricity == pytest.approx(0.0007987)
    assert info.arg_perigee == pytest.approx(98.404)
    assert info.mean_anomaly == pytest.approx(9.2643)
    assert info.mean_motion == pytest.approx(15.51194651)
    assert info.time_motion_d == pytest.approx(-0.00156611)
    assert info.epoch_orbit == 17730


def test_iter_tle_records_skips_bad_line1():
    lines = ["FOO", "X bad", "ISS", ISS1, "junk", ISS2]
    assert list(iter_tle_records(lines)) == [("ISS", ISS1, ISS2)]


def test_write_and_read_round_trip():
    buf = io.StringIO()
    write_tle_file(buf, 1700000000, [("UNKNOWN", ISS1, ISS2), ("ISS", ISS1, ISS2)])
    buf.seek(0)
    db = SatDatabase()
    assert db.read_tle(buf) == 1700000000
    assert db.tle_unixtime == 1700000000
    assert [e.name for e in db.valid()] == ["ISS"]
    assert db["ISS"].epoch_orbit == 17730
    assert db["ISS"].up_mode == "FM"


def test_reassemble_plain_download():
    lines = ["status\n", "ISS\r\n", ISS1 + "\r\n", ISS2 + "\r\n", "\r\n", "AFTER\n"]
    assert list(reassemble_tle_download(lines)) == [("ISS", ISS1, ISS2)]


def test_reassemble_cut_line():
    lines = ["status", "ISS", ISS1[:30], "45", ISS1[30:], ISS2]
    assert list(reassemble_tle_download(lines)) == [("ISS", ISS1, ISS2)]


def test_apply_transponder_fo29():
    db = SatDatabase()
    assert db.apply_transponder("FO-29") is True
    entry = db["FO-29"]
    assert abs(entry.up_f0 - 145_900_000) <= 1
    assert abs(entry.dn_f1 - 435_900_000) <= 1
    assert abs(entry.offset_freq - 2400) <= 1
    assert (entry.up_mode, entry.dn_mode) == ("LSB", "USB")


def test_apply_transponder_without_plan():
    db = SatDatabase()
    assert db.apply_transponder("AO-27") is False
    assert db["AO-27"].up_f0 == 0


def test_apply_transponder_negative_offset():
    db = SatDatabase()
    assert db.apply_transponder("RS-44") is True
    entry = db["RS-44"]
    assert abs(entry.up_f0 - 145_935_000) <= 1
    assert abs(entry.offset_freq - (-450)) <= 1


def test_find_unknown_raises():
    with pytest.raises(KeyError):
        SatDatabase().find("NOPE")


def test_offsets_round_trip():
    buf = io.StringIO()
    write_tle_file(buf, 1, [("ISS", ISS1, ISS2)])
    buf.seek(0)
    db = SatDatabase()
    db.read_tle(buf)
    assert db.adjust_offset("ISS", 100) == 100
    assert db.adjust_offset("ISS", -250) == -150
    out = io.StringIO()
    db.save_offsets(out)
    assert out.getvalue() == "ISS -150\r\n"
    other = SatDatabase()
    assert other.load_offsets(io.StringIO(out.getvalue())) == 1
    assert other["ISS"].offset_freq == -150


def test_load_offsets_skips_unknown_and_stops_at_blank():
    db = SatDatabase()
    text = "NOPE 5\r\nRS-44 -450\r\n\r\nFO-29 9\r\n"
    assert db.load_offsets(io.StringIO(text)) == 1
    assert db["RS-44"].offset_freq == -450
    assert db["FO-29"].offset_freq == 0