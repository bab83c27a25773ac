# makejust

`makejust` copies a set of build templates into the directory you are working
in and then runs the install script among them. The templates are a
`Makefile`, an `install_script.sh` and a `default_config.conf`.

## Installation

```
pip install .
```

To run the test suite, install the test extra as well:

```
pip install ".[test]"
pytest
```

## Where the templates come from

Templates are read from a template folder:

- the directory named by the environment variable `MAKEJUST_TEMPLATE_DIR`, if it is set;
- otherwise a `template` directory next to the `makejust` package files.

The package does not ship any template files of its own. Put `Makefile`,
`install_script.sh` and `default_config.conf` in a directory and point
`MAKEJUST_TEMPLATE_DIR` at it, or place them in `makejust/template`.
Files whose names match `*.DS_Store` are ignored.

## Command-line use

Run the command from the directory that should receive the templates:

```
make-just
```

It takes no options apart from `-h`/`--help`. It does the following, in this order:

1. Prints the canonical paths of `.`, `src` and a system executable (`/bin/ls`,
   or `cmd.exe` on Windows). These paths must exist. The command therefore has to be
   run from a directory that contains `src`, or it stops with an error.
2. Writes `Makefile` and `install_script.sh` into the current directory and
   reports each file it extracts.
3. If `install_script.sh` is now present, adds execute permission for owner,
   group and others, and runs it. If the script exits with a non-zero status,
   the command reports the failure and stops with a `ScriptError`.
4. Writes `default_config.conf`.

If a template is missing from the template folder, the command reports an
error and goes on with the next step.

Set `MAKEJUST_LOG` to a logging level name (for example `DEBUG`) to change the
log level. The default is `WARNING`.

## Library use

The pieces behind the command can also be used on their own:

```python
from pathlib import Path

from makejust.embed import TemplateStore, default_store
from makejust.cli import extract, make_executable, execute_script, canonicalize_path

store = default_store()
for name in store:          # relative names of all included files, sorted
    print(name)

extract("Makefile", store, Path("."))       # returns the written path, or None
make_executable(Path("install_script.sh"))
execute_script(Path("install_script.sh"))   # raises ScriptError on failure
print(canonicalize_path("."))
```

- `TemplateStore(folder, exclude)` serves the files below any directory. It skips
  names that match the `exclude` glob patterns.
- `TemplateStore.get(name)` returns an `EmbeddedFile` with `name` and `data` (bytes). It returns
  `None` when the file is absent or excluded, and also when the name is absolute or contains `..`.
  `EmbeddedFile.text()` decodes the data as UTF-8, with invalid bytes replaced.
- `canonicalize_path(path)` returns the absolute path with symlinks resolved. It raises if
  the path does not exist.
- `ScriptError` is an `OSError` that carries the script's `returncode`.

`makejust.arith.add(left, right)` adds two unsigned 64-bit integers. It raises
`ValueError` for negative operands and `OverflowError` when an operand or the sum
does not fit in 64 bits.