import io

import pytest

from hamlogkit.settings import (
    LineTerminator,
    SettingItem,
    SettingKind,
    Settings,
    default_settings,
    read_lines,
    settings_path,
)


def test_read_lines_crlf_drops_cr():
    stream = io.StringIO("abc\r\ndef\r\n")
    assert list(read_lines(stream, LineTerminator.CRLF, 128)) == ["abc", "def"]


def test_read_lines_lf_keeps_cr():
    stream = io.StringIO("abc\r\ndef\n")
    assert list(read_lines(stream, LineTerminator.LF, 128)) == ["abc\r", "def"]


def test_read_lines_cr_keeps_lf():
    stream = io.StringIO("abc\rdef\nx\r")
    assert list(read_lines(stream, LineTerminator.CR, 128)) == ["abc", "def\nx"]


def test_read_lines_final_unterminated_line():
    stream = io.StringIO("one\ntwo")
    assert list(read_lines(stream, LineTerminator.LF, 128)) == ["one", "two"]


def test_read_lines_splits_long_lines():
    text = "abcdefghij"
    pieces = list(read_lines(io.StringIO(text + "\n"), LineTerminator.LF, 4))
    assert "".join(pieces) == text
    assert all(len(p) <= 4 for p in pieces)
    assert pieces[0] == text[:4]


def test_read_lines_yields_empty_lines():
    stream = io.StringIO("a\n\nb\n")
    assert list(read_lines(stream, LineTerminator.LF, 128)) == ["a", "", "b"]


def test_settings_path(tmp_path):
    assert settings_path(tmp_path, "") == tmp_path / "settings.txt"
    assert settings_path(tmp_path, "contest") == tmp_path / "contest.txt"


def test_default_settings_order_and_values():
    settings = default_settings()
    names = [item.name for item in settings]
    assert names[0] == "my_callsign"
    assert names[-1] == "my_name"
    assert "cw_msg_7" in settings
    assert settings["contest_id"] == 0
    assert settings["my_callsign"] == ""


def test_assign_int_and_text():
    settings = default_settings()
    assert settings.assign("contest_id 12")
    assert settings["contest_id"] == 12
    assert settings.assign("cw_msg_1 CQ TEST DE JA1ZZZ")
    assert settings["cw_msg_1"] == "CQ TEST DE JA1ZZZ"


def test_assign_int_parses_leading_number_only():
    settings = default_settings()
    assert settings.assign("radio_mode 2abc")
    assert settings["radio_mode"] == 2
    assert settings.assign("radio_mode xyz")
    assert settings["radio_mode"] == 0


@pytest.mark.parametrize("line", ["", "   ", "contest_id", "contest_id ", "unknown 5"])
def test_assign_rejects(line):
    settings = default_settings()
    assert settings.assign(line) is False
    assert settings["contest_id"] == 0


def test_dump_format():
    settings = Settings(
        [
            SettingItem("my_callsign", SettingKind.TEXT, "JA1ZZZ"),
            SettingItem("contest_id", SettingKind.INT, 3),
        ]
    )
    out = io.StringIO()
    settings.dump(out)
    assert out.getvalue() == "my_callsign JA1ZZZ\r\ncontest_id 3\r\n"


def test_save_load_round_trip(tmp_path):
    path = settings_path(tmp_path, "")
    original = default_settings()
    original["my_callsign"] = "JA1ZZZ"
    original["cw_msg_2"] = "5NN 13M"
    original["bandmap_mask"] = 5
    original["email_addr"] = "user@example.com"
    original.save(path)

    loaded = default_settings()
    loaded.load(path)
    assert [(i.name, i.value) for i in loaded] == [(i.name, i.value) for i in original]


def test_load_stops_at_empty_line(tmp_path):
    path = tmp_path / "s.txt"
    path.write_bytes(b"contest_id 4\r\n\r\nradio_mode 2\r\n")
    settings = default_settings()
    assert settings.load(path) == 1
    assert settings["contest_id"] == 4
    assert settings["radio_mode"] == 0


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        default_settings().load(tmp_path / "absent.txt")


def test_radios_enabled_round_trip():
    settings = default_settings()
    for flags in [(True, False, True), (False, True, False), (True, True, True)]:
        settings.set_radios_enabled(flags)
        assert settings.radios_enabled() == flags


def test_radios_enabled_bit_layout():
    settings = default_settings()
    settings.set_radios_enabled([True, True, False])
    assert settings["radios_enabled"] == 3
    with pytest.raises(ValueError):
        settings.set_radios_enabled([True])


def test_setitem_checks():
    settings = default_settings()
    with pytest.raises(KeyError):
        settings["nothing"] = 1
    with pytest.raises(TypeError):
        settings["contest_id"] = "3"
    with pytest.raises(TypeError):
        settings["my_name"] = 3
    assert "nothing" not in settings
    assert settings["contest_id"] == 0
    assert settings["my_name"] == ""