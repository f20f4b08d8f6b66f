# fspathkit

Tools for working with filesystem paths as text and for asking the
filesystem what a path refers to.

## What it offers

- `fspathkit.fspath.FsPath`: an immutable path value in the generic,
  slash-separated format. It splits itself into root name (such as
  `//host`), root directory, relative path, parent path, filename, stem
  and extension without touching the disk. It iterates over its elements,
  joins with `/` (`append`), concatenates with `+` (`concat`), normalises
  lexically (`lexically_normal`) and computes relative forms
  (`lexically_relative`, `lexically_proximate`). Every modifier
  (`remove_filename`, `replace_extension`, `make_preferred`, `clear`)
  returns a new path. Comparison and hashing go element by element, so
  `FsPath("a//b") == FsPath("a/b")` and `FsPath("a/b") < FsPath("a/c")`.
  `lexicographical_compare` compares two element sequences.
- `fspathkit.pathparse`: the scanning functions the path type is built
  on (`root_name_end`, `root_directory_start`, `filename_start`,
  `parent_path_end`, `iter_elements`, `needs_separator`, and the
  separator tests).
- `fspathkit.status`: `status`, `symlink_status`, `exists`,
  `is_regular_file`, `is_directory`, `is_symlink`, `is_other`,
  `status_known`, `type_present`, `permissions_present` and `file_size`,
  with a `FileType` enum, a `FileStatus` value and a `FilesystemError`
  exception (a subclass of `OSError`) that carries the paths involved in
  `path1` and `path2`. A missing object gives a `FILE_NOT_FOUND` status
  rather than an error; `file_size` raises for anything that is not a
  regular file.
- `fspathkit.codecvt`: names and messages for character-conversion
  results (`CodecvtResult`, `codecvt_message`, `category_name`).
- `fspathkit.pathinfo`: `compose`, `path_report` and `stem_chain`.
- `fspathkit.pathtable`: `columns`, `read_cases` and `render_table`
  for building an HTML path decomposition table.
- `fspathkit.demos`: small ready-made tools: `describe`,
  `list_directory`, `simple_ls` (returning an `LsSummary`), `walk_tree`,
  `status_report`, `error_report`, `make_smile_files` and
  `symlink_parent_resolution`.

## Installing

```
pip install fspathkit
```

For running the test suite:

```
pip install "fspathkit[test]"
pytest
```

## Using the library

```python
from fspathkit.fspath import FsPath

p = FsPath("/usr/local/lib/libfoo.so.1")
print(p.parent_path())       # /usr/local/lib
print(p.filename())          # libfoo.so.1
print(p.stem())              # libfoo.so
print(p.extension())         # .1
print([str(e) for e in p])   # ['/', 'usr', 'local', 'lib', 'libfoo.so.1']

q = FsPath("a/b/../c/./d").lexically_normal()
print(q)                     # a/c/d

print(FsPath("/a/d").lexically_relative("/a/b/c"))   # ../../d
```

```python
from fspathkit.status import status, FileType, FilesystemError, file_size

st = status("pyproject.toml")
if st.type is FileType.REGULAR_FILE:
    print(file_size("pyproject.toml"))

try:
    file_size("no such file")
except FilesystemError as err:
    print(err)
```

```python
from fspathkit.demos import walk_tree

for level, entry in walk_tree(".", max_level=1):
    print("  " * level + str(entry))
```

## Command-line tools

Show how a path composed from one or more elements decomposes:

```
fspath-info foo/bar baz
```

Peel extensions off a filename one at a time:

```
fspath-stems archive.tar.gz
```

Build an HTML path decomposition table. Run it once in `POSIX` mode to
record the cell values in the second file, then in `Windows` mode to
produce a table in which cells that differ from the recorded values are
shaded and show both:

```
fspath-table POSIX cases.txt posix-results.txt table.html
fspath-table Windows cases.txt posix-results.txt table.html
```

Lines in the input file starting with `#` are ignored; every other line,
including an empty one, becomes a table row.

Run one of the demonstration tools by name:

```
fspath-demo ls some/directory
fspath-demo describe some/file
fspath-demo walk some/directory
```

The commands are `file_size`, `echo`, `size`, `describe`, `list`,
`sorted`, `ls`, `status`, `errors`, `smile`, `walk`, `walk-all`,
`walk-quiet` and `dspr`. Run `fspath-demo` with no arguments to list them.

## What it does not do

- Paths are parsed in the generic slash-separated format only. Drive
  letters and backslash separators get no special treatment, and
  `make_preferred` returns the path unchanged.
- There are no general operations that change the filesystem: no copy,
  rename, remove, create-directory, permission or timestamp functions.
  The only writes are those made by the demo tools `make_smile_files` and
  `symlink_parent_resolution` and by the table generator's output files.
- There is no conversion between character encodings; `fspathkit.codecvt`
  only names conversion results.