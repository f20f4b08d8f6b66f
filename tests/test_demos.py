import errno
import os

import pytest

from fspathkit.demos import (
    LsSummary,
    describe,
    error_report,
    list_directory,
    main,
    make_smile_files,
    simple_ls,
    status_report,
    symlink_parent_resolution,
    walk_tree,
)
from fspathkit.fspath import FsPath
from fspathkit.status import FileType, FilesystemError


def _touch(path, data=""):
    with open(path, "w", encoding="utf-8") as f:
        f.write(data)


@pytest.fixture
def tree(tmp_path):
    # tmp/d1/d2/d3/f3, tmp/d1/f1, tmp/top
    (tmp_path / "d1" / "d2" / "d3").mkdir(parents=True)
    _touch(tmp_path / "d1" / "f1")
    _touch(tmp_path / "d1" / "d2" / "d3" / "f3")
    _touch(tmp_path / "top")
    return tmp_path


def test_describe_regular_file(tmp_path):
    data = "file-f1"
    f = tmp_path / "f1"
    _touch(f, data)
    assert describe(str(f)) == f"{FsPath(str(f)).quoted()} size is {len(data)}"


def test_describe_directory_and_missing(tmp_path):
    assert describe(str(tmp_path)) == f"{FsPath(str(tmp_path)).quoted()} is a directory"
    missing = str(tmp_path / "nosuch")
    assert describe(missing) == f"{FsPath(missing).quoted()} does not exist"


def test_describe_other(tmp_path):
    fifo = str(tmp_path / "pipe")
    os.mkfifo(fifo)
    assert describe(fifo).endswith("exists, but is not a regular file or directory")


def test_list_directory_sorted_and_unsorted(tmp_path):
    for name in ("f1", "d2", "f0"):
        _touch(tmp_path / name)
    names = [str(p.filename()) for p in list_directory(str(tmp_path))]
    assert set(names) == {"f1", "d2", "f0"}
    sorted_paths = list_directory(str(tmp_path), sort=True)
    assert [str(p.filename()) for p in sorted_paths] == sorted(names)
    assert all(p.parent_path() == FsPath(str(tmp_path)) for p in sorted_paths)


def test_list_directory_errors(tmp_path):
    with pytest.raises(FilesystemError) as info:
        list_directory(str(tmp_path / "nosuchdirectory"))
    assert info.value.errno == errno.ENOENT
    with pytest.raises(FilesystemError):
        list_directory("")


def test_simple_ls_counts(tmp_path):
    _touch(tmp_path / "a")
    _touch(tmp_path / "b")
    (tmp_path / "d").mkdir()
    os.symlink(str(tmp_path / "nowhere"), str(tmp_path / "dangling"))
    summary = simple_ls(str(tmp_path))
    assert isinstance(summary, LsSummary)
    assert summary.is_directory
    assert (summary.file_count, summary.dir_count, summary.other_count, summary.err_count) == (
        2,
        1,
        1,
        0,
    )
    assert '"d" [directory]' in summary.lines
    assert '"dangling" [other]' in summary.lines
    assert "\n2 files\n1 directories\n1 others\n0 errors\n" in summary.render()


def test_simple_ls_file_and_missing(tmp_path):
    f = tmp_path / "only"
    _touch(f)
    summary = simple_ls(str(f))
    assert not summary.is_directory
    assert summary.render() == f"\nFound: {FsPath(str(f)).quoted()}\n"
    with pytest.raises(FilesystemError):
        simple_ls(str(tmp_path / "nosuch"))


def test_simple_ls_makes_path_absolute(tmp_path, monkeypatch):
    (tmp_path / "sub").mkdir()
    monkeypatch.chdir(tmp_path)
    summary = simple_ls("sub")
    assert summary.path.is_absolute()
    assert summary.path == FsPath(str(tmp_path)) / "sub"


def test_walk_tree_full(tree):
    found = {(level, str(p.filename())) for level, p in walk_tree(str(tree))}
    assert found == {
        (0, "d1"),
        (0, "top"),
        (1, "f1"),
        (1, "d2"),
        (2, "d3"),
        (3, "f3"),
    }


def test_walk_tree_max_level(tree):
    found = {(level, str(p.filename())) for level, p in walk_tree(str(tree), max_level=1)}
    assert found == {(0, "d1"), (0, "top"), (1, "f1"), (1, "d2")}
    assert all(level <= 1 for level, _ in walk_tree(str(tree), max_level=1))


def test_walk_tree_does_not_follow_directory_symlinks(tmp_path):
    (tmp_path / "x").mkdir()
    _touch(tmp_path / "x" / "inside")
    os.symlink(str(tmp_path / "x"), str(tmp_path / "y"), target_is_directory=True)
    paths = [p for _, p in walk_tree(str(tmp_path))]
    assert FsPath(str(tmp_path)) / "y" in paths
    assert FsPath(str(tmp_path)) / "y" / "inside" not in paths
    assert FsPath(str(tmp_path)) / "x" / "inside" in paths


def test_walk_tree_errors(tmp_path):
    missing = str(tmp_path / "nosuch")
    with pytest.raises(FilesystemError):
        list(walk_tree(missing))
    errors = []
    assert list(walk_tree(missing, on_error=errors.append)) == []
    assert len(errors) == 1
    assert errors[0].errno == errno.ENOENT


def test_make_smile_files(tmp_path):
    created = make_smile_files(str(tmp_path))
    expected = {
        "smile",
        "smile\u263a",
        "smile2",
        "smile2\u263a",
        "smile3",
        "smile3\u263a",
        "smile4",
        "smile4\u263a",
    }
    assert {str(p.filename()) for p in created} == expected
    assert set(os.listdir(tmp_path)) == expected


def test_symlink_parent_resolution(tmp_path):
    assert symlink_parent_resolution(str(tmp_path)) == "POSIX"
    # running again clears the residue first
    assert symlink_parent_resolution(str(tmp_path)) == "POSIX"


def test_status_report_regular_file(tmp_path):
    f = tmp_path / "f"
    _touch(f)
    report = status_report(str(f))
    assert "clears ec." in report
    assert (
        f's.type() is {int(FileType.REGULAR_FILE)}, which is defined as "regular_file"'
        in report
    )
    assert f"exists({FsPath(str(f)).quoted()}) is true" in report


def test_status_report_missing(tmp_path):
    missing = str(tmp_path / "nosuch")
    report = status_report(missing)
    assert "sets ec to indicate an error:" in report
    assert f"   ec.value() is {errno.ENOENT}" in report
    assert 'which is defined as "file_not_found"' in report
    assert f"exists({FsPath(missing).quoted()}) is false" in report


def test_status_report_symlink(tmp_path):
    _touch(tmp_path / "target")
    link = str(tmp_path / "link")
    os.symlink(str(tmp_path / "target"), link)
    report = status_report(link)
    assert "is_symlink(s) is true" in report
    assert 'which is defined as "symlink_file"' in report


def test_error_report_directories(tmp_path):
    empty = tmp_path / "empty"
    empty.mkdir()
    report = error_report(str(empty))
    assert "  Equal to the end iterator" in report
    assert "  Did not throw exception\n  Returns: true" in report
    _touch(tmp_path / "f")
    assert "  Not equal to the end iterator" in error_report(str(tmp_path))


def test_error_report_missing(tmp_path):
    report = error_report(str(tmp_path / "nosuch"))
    assert "threw filesystem_error exception" in report
    assert f"value() is {errno.ENOENT}" in report
    assert "  file_status::type() is file_not_found" in report
    assert "  Returns: false" in report


def test_main_file_size(tmp_path, capsys):
    data = "1234567890"
    f = tmp_path / "f"
    _touch(f, data)
    assert main(["file_size", str(f)]) == 0
    assert capsys.readouterr().out == f"size of {f} is {len(data)}\n"
    missing = str(tmp_path / "nosuch")
    assert main(["file_size", missing]) == 1
    assert capsys.readouterr().out == f"not found: {missing}\n"
    assert main(["file_size", str(tmp_path)]) == 1
    assert capsys.readouterr().out == f"not a regular file: {tmp_path}\n"


def test_main_usage_and_echo(capsys):
    assert main([]) == 1
    assert main(["echo"]) == 1
    assert capsys.readouterr().out.endswith("Usage: tut0 path\n")
    assert main(["echo", "foo/bar"]) == 0
    assert capsys.readouterr().out == "foo/bar\n"


def test_main_sorted_listing(tmp_path, capsys):
    for name in ("c", "a", "b"):
        _touch(tmp_path / name)
    assert main(["sorted", str(tmp_path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == f"{FsPath(str(tmp_path)).quoted()} is a directory containing:"
    assert lines[1:] == ['    "a"', '    "b"', '    "c"']


def test_main_walk_indentation(tree, capsys):
    assert main(["walk", str(tree)]) == 0
    lines = capsys.readouterr().out.splitlines()
    top = "  " + (FsPath(str(tree)) / "top").quoted()
    f1 = "    " + (FsPath(str(tree)) / "d1" / "f1").quoted()
    assert top in lines
    assert f1 in lines
    assert not any("d3" in line for line in lines)