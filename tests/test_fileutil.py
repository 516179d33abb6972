import pytest

from infrakit import fileutil


def test_load_binary_round_trip(tmp_path):
    target = tmp_path / "data.bin"
    payload = bytes(range(256))
    target.write_bytes(payload)
    assert fileutil.load_binary(target) == payload


def test_load_binary_missing_file_gives_none(tmp_path):
    assert fileutil.load_binary(tmp_path / "absent.bin") is None


def test_load_text_round_trip(tmp_path):
    target = tmp_path / "note.txt"
    text = "first line\r\nsecond 测试\n"
    target.write_bytes(text.encode("utf-8"))
    assert fileutil.load_text(str(target)) == text


def test_load_text_missing_file_gives_none(tmp_path):
    assert fileutil.load_text(tmp_path / "absent.txt") is None


def test_ensure_directory_creates_parent_of_file(tmp_path):
    fileutil.ensure_directory_exist(tmp_path / "made" / "file.txt")
    assert (tmp_path / "made").is_dir()
    assert not (tmp_path / "made" / "file.txt").exists()


def test_ensure_directory_keeps_existing_directory(tmp_path):
    existing = tmp_path / "here"
    existing.mkdir()
    (existing / "keep.txt").write_text("x")
    fileutil.ensure_directory_exist(existing)
    assert (existing / "keep.txt").read_text() == "x"


def test_ensure_directory_creates_only_one_level(tmp_path):
    with pytest.raises(FileNotFoundError):
        fileutil.ensure_directory_exist(tmp_path / "a" / "b" / "file.txt")


@pytest.mark.parametrize(
    "path, name, stem, extension",
    [
        ("dir/archive.tar.gz", "archive.tar.gz", "archive.tar", ".gz"),
        ("/root/readme", "readme", "readme", ""),
        ("folder/.bashrc", ".bashrc", ".bashrc", ""),
        ("image.png", "image.png", "image", ".png"),
    ],
)
def test_file_name_parts(path, name, stem, extension):
    assert fileutil.get_file_name(path) == name
    assert fileutil.get_file_name_without_extension(path) == stem
    assert fileutil.get_file_extension(path) == extension


def test_name_parts_recombine():
    path = "some/where/report.final.csv"
    combined = fileutil.get_file_name_without_extension(path) + fileutil.get_file_extension(path)
    assert combined == fileutil.get_file_name(path)


@pytest.mark.parametrize(
    "line, expected",
    [
        ("a,b,c", ["a", "b", "c"]),
        ('"a,b",c', ["a,b", "c"]),
        ("", [""]),
        ("a,", ["a", ""]),
        (",a", ["", "a"]),
        ('"",x', ['""', "x"]),
        ('"q"', ["q"]),
    ],
)
def test_split_csv_line(line, expected):
    assert fileutil.split_csv_line(line) == expected


def test_split_csv_line_field_count_matches_unquoted_commas():
    line = 'one,"two, three",four,"five"'
    assert len(fileutil.split_csv_line(line)) == 4