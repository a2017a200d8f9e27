import pytest

from gittree.utils import compress, create_hash, decompress, normalize_path, to_hex_id, to_raw_id


@pytest.mark.parametrize(
    "path, expected",
    [
        ("", []),
        ("/", []),
        ("a", ["a"]),
        ("/a", ["a"]),
        ("a/b/c", ["a", "b", "c"]),
        ("/a/b/", ["a", "b"]),
        (["a", "b"], ["a", "b"]),
        (("a",), ["a"]),
        ([], []),
    ],
)
def test_normalize_path(path, expected):
    assert normalize_path(path) == expected


def test_create_hash():
    assert create_hash("blob 12\0hello world\n") == "3b18e512dba79e4c8300dd08aeb37f8e728b8dad"


def test_ids_convert_between_hex_and_raw():
    hex_id = "3b18e512dba79e4c8300dd08aeb37f8e728b8dad"
    raw_id = to_raw_id(hex_id)
    assert len(raw_id) == 20
    assert to_hex_id(raw_id) == hex_id


def test_compress():
    assert decompress(compress(b"some content", level=9)) == b"some content"
