import functools
import operator
import os
import pathlib

import pytest

from fspathkit.fspath import FsPath, lexicographical_compare


SAMPLES = ["/foo/bar", "//net/a", "a/b", "//net", "/", "", "a/b/", "a"]


def test_construct_from_various_sources():
    assert FsPath(b"a/b") == FsPath("a/b")
    assert FsPath(list("abc")).native() == "abc"
    assert FsPath(pathlib.PurePosixPath("x/y")).native() == "x/y"
    assert FsPath(FsPath("q")).native() == "q"


def test_invalid_source_raises():
    with pytest.raises(TypeError):
        FsPath(42)


def test_string_forms():
    p = FsPath("a/b")
    assert os.fspath(p) == "a/b"
    assert str(p) == "a/b"
    assert p.generic_string() == "a/b"
    assert "a/b" in repr(p)


def test_quoted_escapes_quotes():
    assert FsPath('say "hi"').quoted() == '"say &"hi&""'


def test_append_from_source_cases():
    base = FsPath("//xyz/abc")
    assert (base / "foo").native() == "//xyz/abc/foo"
    assert (base / "foo/bar").native() == "//xyz/abc/foo/bar"
    assert (base / "./foo").native() == "//xyz/abc/./foo"
    assert (base / "../foo").native() == "//xyz/abc/../foo"
    assert base.root_name() / "/foo" == "//xyz/foo"


def test_append_empty_and_existing_separator():
    assert (FsPath("//xyz/abc") / "").native() == "//xyz/abc"
    assert (FsPath("//xyz/") / "abc").native() == "//xyz/abc"
    assert ("//xyz" / FsPath("/abc")).native() == "//xyz/abc"


def test_concat_adds_no_separator():
    p = FsPath("foo")
    assert (p + ".txt").native() == "foo.txt"
    assert p.concat("bar").native() == "foobar"


def test_modifiers_do_not_mutate():
    p = FsPath("a/b.txt")
    p.remove_filename()
    p.replace_extension("md")
    p.clear()
    assert p.native() == "a/b.txt"


def test_clear_and_make_preferred():
    assert FsPath("a/b").clear().empty()
    assert FsPath("a/b").make_preferred().native() == "a/b"


@pytest.mark.parametrize("text", ["a/b", "/a/b", "a/b/", "//net/a", "a", "/"])
def test_remove_filename_matches_parent_path(text):
    p = FsPath(text)
    assert p.remove_filename().native() == p.parent_path().native()


def test_replace_extension():
    p = FsPath("dir/foo.txt")
    assert p.replace_extension("md").extension() == ".md"
    assert p.replace_extension(".md").stem() == "foo"
    assert p.replace_extension().native() == "dir/foo"


def test_decomposition_network_path():
    p = FsPath("//xyz/abc")
    assert p.root_name() == "//xyz"
    assert p.root_path() == "//xyz/"
    assert p.root_directory() == "/"
    assert p.relative_path() == "abc"
    assert p.is_absolute()


@pytest.mark.parametrize("text", SAMPLES)
def test_root_path_plus_relative_path(text):
    p = FsPath(text)
    assert p.root_path() / p.relative_path() == p


@pytest.mark.parametrize("text", ["a/b", "/a/b", "a/b/", "//net/a", "a", "/"])
def test_parent_path_plus_filename(text):
    p = FsPath(text)
    assert p.parent_path() / p.filename() == p


def test_trailing_separator_gives_dot_filename():
    p = FsPath("foo/")
    assert p.filename() == "."
    assert p.filename_is_dot()
    assert not FsPath("foo").filename_is_dot()


def test_filename_is_dot_dot():
    assert FsPath("foo/..").filename_is_dot_dot()
    assert FsPath("..").filename_is_dot_dot()
    assert not FsPath("foo..").filename_is_dot_dot()


@pytest.mark.parametrize("text", [".profile", "a.tar.gz", "..", ".", "/", "dir/name"])
def test_stem_and_extension_rebuild_filename(text):
    p = FsPath(text)
    assert (p.stem() + p.extension()) == p.filename()


def test_dot_names_have_no_extension():
    for text in (".", ".."):
        p = FsPath(text)
        assert p.extension().empty()
        assert p.stem().native() == text


@pytest.mark.parametrize("text", SAMPLES + [".profile", "x.y"])
def test_has_queries_consistent(text):
    p = FsPath(text)
    assert p.has_root_name() == (not p.root_name().empty())
    assert p.has_root_directory() == (not p.root_directory().empty())
    assert p.has_relative_path() == (not p.relative_path().empty())
    assert p.has_parent_path() == (not p.parent_path().empty())
    assert p.has_stem() == (not p.stem().empty())
    assert p.has_extension() == (not p.extension().empty())
    assert p.has_filename() == (not p.empty())
    assert p.has_root_path() == (p.has_root_name() or p.has_root_directory())
    assert p.is_relative() == (not p.is_absolute())


def test_absolute_and_relative():
    assert FsPath("/a").is_absolute()
    assert not FsPath("a").is_absolute()
    assert not FsPath("//net").is_absolute()
    assert FsPath("//net/a").is_absolute()


def test_iteration_elements():
    p = FsPath("/foo/bar/")
    names = [e.native() for e in p]
    assert names == ["/", "foo", "bar", "."]
    assert len(p) == len(names)
    assert [e.native() for e in reversed(p)] == names[::-1]


@pytest.mark.parametrize("text", ["/foo/bar/", "//net/a", "a/b", "a//b"])
def test_elements_rejoin_to_same_path(text):
    p = FsPath(text)
    assert functools.reduce(operator.truediv, p, FsPath()) == p


def test_empty_path_has_no_elements():
    p = FsPath()
    assert list(p) == []
    assert len(p) == 0
    assert not p


def test_equality_and_hash_ignore_redundant_separators():
    a = FsPath("a//b")
    b = FsPath("a/b")
    assert a == b
    assert hash(a) == hash(b)
    assert a == "a/b"
    assert a.compare("a/b") == 0


def test_ordering():
    assert FsPath("a/b") < FsPath("a/c")
    assert FsPath("a") < FsPath("a/b")
    assert FsPath("b") > "a/b"
    assert FsPath("a/b").compare("a/c") < 0
    assert FsPath("a/c").compare("a/b") > 0
    assert sorted([FsPath("b"), FsPath("a/b"), FsPath("a")]) == ["a", "a/b", "b"]


def test_lexically_normal_source_cases():
    assert FsPath("no-such/foo/../bar").lexically_normal() == "no-such/bar"
    assert FsPath("no-such/foo/bar").lexically_normal() == "no-such/foo/bar"
    assert FsPath("").lexically_normal().empty()
    assert FsPath("a/..").lexically_normal() == "."


@pytest.mark.parametrize("text", ["a/./b/../c", "foo/bar/../", "/..", "a/..", "./x", "a/b/c"])
def test_lexically_normal_idempotent(text):
    once = FsPath(text).lexically_normal()
    assert once.lexically_normal().native() == once.native()


@pytest.mark.parametrize("target,base", [("/a/b/c", "/a"), ("/a/b", "/a/x/y"), ("a/b", "a/c/d")])
def test_lexically_relative_round_trip(target, base):
    rel = FsPath(target).lexically_relative(base)
    assert (FsPath(base) / rel).lexically_normal() == FsPath(target).lexically_normal()


def test_lexically_relative_same_and_disjoint():
    assert FsPath("a/b").lexically_relative("a/b") == "."
    assert FsPath("a").lexically_relative("/b").empty()
    assert FsPath("a").lexically_proximate("/b") == "a"
    assert FsPath("/a/b").lexically_proximate("/a") == "b"


def test_lexicographical_compare():
    assert lexicographical_compare(FsPath("a"), FsPath("b"))
    assert not lexicographical_compare(FsPath("b"), FsPath("a"))
    assert not lexicographical_compare(FsPath("a/b"), FsPath("a//b"))
    assert lexicographical_compare(["a"], ["a", "b"])