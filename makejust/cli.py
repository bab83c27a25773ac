"""Command that unpacks the templates and runs the install script."""

from __future__ import annotations

import argparse
import logging
import os
import stat
import subprocess
import sys
from pathlib import Path

from makejust.embed import TemplateStore, default_store

SCRIPT_NAME = "install_script.sh"
LOG_LEVEL_ENV = "MAKEJUST_LOG"


class ScriptError(OSError):
    """A script ran but exited unsuccessfully."""

    def __init__(self, returncode: int):
        super().__init__(f"Script execution failed with exit code: {returncode}")
        self.returncode = returncode


def make_executable(script_path: str | os.PathLike[str]) -> None:
    """Add execute permission for owner, group and others."""
    path = Path(script_path)
    mode = path.stat().st_mode
    path.chmod(stat.S_IMODE(mode) | 0o111)
    print(path.name)


def execute_script(script_path: str | os.PathLike[str]) -> None:
    """Run a script and wait for it; raise ``ScriptError`` if it fails."""
    path = Path(script_path)
    print(f"Executing script: {path}")
    result = subprocess.run([os.fspath(path.absolute())], check=False)
    if result.returncode == 0:
        print(f"Script '{path}' executed successfully.")
        return
    print(f"Script '{path}' failed with exit code: {result.returncode}", file=sys.stderr)
    raise ScriptError(result.returncode)


def canonicalize_path(path: str | os.PathLike[str]) -> Path:
    """Absolute path with symlinks and ``.``/``..`` resolved; must exist."""
    return Path(path).absolute().resolve(strict=True)


def extract(
    filename: str,
    store: TemplateStore | None = None,
    dest: str | os.PathLike[str] = ".",
) -> Path | None:
    """Write a template file into ``dest``; return its path or ``None`` if absent."""
    store = default_store() if store is None else store
    dest_path = Path(dest)
    print(f"Path to current directory: {dest_path}")
    output_path = dest_path / filename
    embedded = store.get(filename)
    if embedded is None:
        print(f"Error: Embedded file '{filename}' not found!", file=sys.stderr)
        return None
    output_path.write_bytes(embedded.data)
    print(f"Successfully extracted '{filename}' to '{output_path}'")
    return output_path


def _configure_logging() -> None:
    level = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    logging.basicConfig(stream=sys.stdout, level=level)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="make-just", description="Generate a justfile config.")
    parser.parse_args(argv)
    _configure_logging()
    store = default_store()

    print(f"Canonical path of '.': {canonicalize_path('.')}")
    print(f"Canonical path of 'src': {canonicalize_path('src')}")
    absolute = r"C:\Windows\System32\cmd.exe" if os.name == "nt" else "/bin/ls"
    print(f"Canonical path of '{absolute}': {canonicalize_path(absolute)}")

    extract("Makefile", store)
    extract(SCRIPT_NAME, store)

    print(f"Canonical path of '.': {canonicalize_path('.')}")
    script_path = Path(".") / SCRIPT_NAME
    if script_path.exists():
        print(f"Attempting to make '{SCRIPT_NAME}' executable...")
        try:
            make_executable(script_path)
        except OSError as exc:
            print(f"Error making '{SCRIPT_NAME}' executable: {exc}", file=sys.stderr)
        else:
            print(f"Successfully made '{SCRIPT_NAME}' executable.")
        print(f"Now attempting to execute '{SCRIPT_NAME}'...")
        execute_script(script_path)
    else:
        print(
            f"Error: Script '{SCRIPT_NAME}' does not exist in the current directory.",
            file=sys.stderr,
        )

    extract("default_config.conf", store)
    return 0


if __name__ == "__main__":
    sys.exit(main())