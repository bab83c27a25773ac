"""Access to the bundled template files."""

from __future__ import annotations

import fnmatch
import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path, PurePosixPath

DEFAULT_EXCLUDE = ("*.DS_Store",)
TEMPLATE_DIR_ENV = "MAKEJUST_TEMPLATE_DIR"


@dataclass(frozen=True)
class EmbeddedFile:
    """A template file: its relative name and raw contents."""

    name: str
    data: bytes

    def text(self) -> str:
        """Contents decoded as UTF-8, with invalid bytes replaced."""
        return self.data.decode("utf-8", errors="replace")


class TemplateStore:
    """Read-only view of the files below a template folder."""

    def __init__(self, folder: str | os.PathLike[str], exclude: str | Iterable[str] = DEFAULT_EXCLUDE):
        self.folder = Path(folder)
        self.exclude = (exclude,) if isinstance(exclude, str) else tuple(exclude)

    def _excluded(self, name: str) -> bool:
        return any(fnmatch.fnmatchcase(name, pattern) for pattern in self.exclude)

    def __iter__(self) -> Iterator[str]:
        """Yield the relative names of all included files, sorted."""
        if not self.folder.is_dir():
            return
        names = sorted(
            path.relative_to(self.folder).as_posix()
            for path in self.folder.rglob("*")
            if path.is_file()
        )
        yield from (name for name in names if not self._excluded(name))

    def get(self, name: str) -> EmbeddedFile | None:
        """Return the named file, or ``None`` if it is absent or excluded."""
        relative = PurePosixPath(name.replace("\\", "/"))
        if not relative.parts or relative.is_absolute() or ".." in relative.parts:
            return None
        key = relative.as_posix()
        if self._excluded(key):
            return None
        path = self.folder.joinpath(*relative.parts)
        if not path.is_file():
            return None
        return EmbeddedFile(key, path.read_bytes())


def default_store() -> TemplateStore:
    """The template store, taken from ``$MAKEJUST_TEMPLATE_DIR`` if set."""
    folder = os.environ.get(TEMPLATE_DIR_ENV) or Path(__file__).with_name("template")
    return TemplateStore(folder, DEFAULT_EXCLUDE)