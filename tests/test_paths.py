import pytest
from pathlib import Path
from moi_reader.scanning.paths import PathResolver
from moi_reader.exceptions import InvalidExtensionError, PathError, PathNotFoundError


def test_directory_lists_moi_files_sorted(tmp_path):
    (tmp_path / "b.MOI").write_bytes(b"")
    (tmp_path / "A.moi").write_bytes(b"")
    (tmp_path / "c.Moi").write_bytes(b"")
    (tmp_path / "c.MOD").write_bytes(b"")
    (tmp_path / "notes.txt").write_text("x")

    nested = tmp_path / "nested"
    nested.mkdir()
    (nested / "deep.MOI").write_bytes(b"")

    files = PathResolver().resolve(tmp_path)

    assert [f.name for f in files] == ["A.moi", "b.MOI", "c.Moi"]
    assert all(f.parent == tmp_path for f in files)


def test_directory_entries_named_like_moi_are_skipped(tmp_path):
    (tmp_path / "folder.MOI").mkdir()
    assert PathResolver().resolve(tmp_path) == []


def test_empty_directory_resolves_to_nothing(tmp_path):
    assert PathResolver().resolve(str(tmp_path)) == []


def test_single_file_accepted_case_insensitively(tmp_path):
    p = tmp_path / "MOV001.moi"
    p.write_bytes(b"")
    assert PathResolver().resolve(str(p)) == [p]


def test_wrong_extension_is_rejected(tmp_path):
    p = tmp_path / "MOV001.MOD"
    p.write_bytes(b"")
    with pytest.raises(InvalidExtensionError) as exc:
        PathResolver().resolve(p)
    assert str(p) in str(exc.value)


def test_missing_path_is_rejected(tmp_path):
    missing = tmp_path / "nope"
    with pytest.raises(PathNotFoundError) as exc:
        PathResolver().resolve(missing)
    assert str(missing) in str(exc.value)
    assert isinstance(exc.value, PathError)


def test_bare_moi_file_name_is_accepted(tmp_path):
    p = tmp_path / ".MOI"
    p.write_bytes(b"")
    (tmp_path / "MOI").write_bytes(b"")

    assert PathResolver().resolve(tmp_path) == [p]
    assert PathResolver().resolve(p) == [p]
