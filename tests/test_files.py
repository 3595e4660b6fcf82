import pytest

from hamlogkit.files import benchmark_file_io, list_dir


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "a.txt").write_bytes(b"hello")
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "b.txt").write_bytes(b"xy")
    return tmp_path


def test_list_dir_top_level_only(tree):
    entries = list(list_dir(tree, 0))
    assert [(e.path.name, e.is_dir, e.size) for e in entries] == [
        ("a.txt", False, 5),
        ("sub", True, None),
    ]


def test_list_dir_recurses(tree):
    entries = list(list_dir(tree, 1))
    assert [(e.path.name, e.depth) for e in entries] == [("a.txt", 0), ("sub", 0), ("b.txt", 1)]


def test_list_dir_format(tree):
    lines = [str(e) for e in list_dir(tree, 0)]
    assert lines == ["  FILE: a.txt  SIZE: 5", "  DIR : sub"]


def test_list_dir_errors(tree):
    with pytest.raises(NotADirectoryError):
        list(list_dir(tree / "a.txt"))
    with pytest.raises(FileNotFoundError):
        list(list_dir(tree / "missing"))


def test_benchmark_existing_file(tmp_path):
    target = tmp_path / "test.bin"
    target.write_bytes(b"z" * 1000)
    result = benchmark_file_io(target)
    assert result.bytes_read == 1000
    assert result.bytes_written == 512 * 2048
    assert target.stat().st_size == 512 * 2048


def test_benchmark_missing_file(tmp_path):
    target = tmp_path / "new.bin"
    result = benchmark_file_io(target)
    assert result.bytes_read is None
    assert target.read_bytes() == bytes(512 * 2048)