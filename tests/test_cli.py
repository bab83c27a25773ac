import os
from pathlib import Path

import pytest

from makejust.cli import (
    ScriptError,
    canonicalize_path,
    execute_script,
    extract,
    main,
    make_executable,
)
from makejust.embed import TEMPLATE_DIR_ENV, TemplateStore


def _script(path: Path, body: str) -> Path:
    path.write_text("#!/bin/sh\n" + body + "\n")
    path.chmod(0o644)
    return path


def test_canonicalize_relative(tmp_path, monkeypatch):
    (tmp_path / "src").mkdir()
    monkeypatch.chdir(tmp_path)
    assert canonicalize_path(".") == tmp_path.resolve()
    assert canonicalize_path("src/../src") == (tmp_path / "src").resolve()


def test_canonicalize_follows_symlink(tmp_path):
    target = tmp_path / "target"
    target.mkdir()
    link = tmp_path / "link"
    link.symlink_to(target)
    assert canonicalize_path(link) == target.resolve()


def test_canonicalize_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        canonicalize_path(tmp_path / "absent")


def test_make_executable_sets_bits(tmp_path):
    script = _script(tmp_path / "s.sh", "true")
    make_executable(script)
    assert script.stat().st_mode & 0o777 == 0o755


def test_make_executable_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        make_executable(tmp_path / "absent.sh")


def test_execute_script_success(tmp_path, capsys):
    marker = tmp_path / "ran.txt"
    script = _script(tmp_path / "ok.sh", f"echo done > '{marker}'")
    make_executable(script)
    execute_script(script)
    assert marker.read_text().strip() == "done"
    assert "executed successfully" in capsys.readouterr().out


def test_execute_script_failure(tmp_path, capsys):
    script = _script(tmp_path / "bad.sh", "exit 3")
    make_executable(script)
    with pytest.raises(ScriptError) as info:
        execute_script(script)
    assert info.value.returncode == 3
    assert "failed with exit code: 3" in capsys.readouterr().err


def test_extract_writes_file(tmp_path):
    templates = tmp_path / "templates"
    templates.mkdir()
    (templates / "Makefile").write_bytes(b"help:\n\t@echo\n")
    out = tmp_path / "out"
    out.mkdir()
    written = extract("Makefile", TemplateStore(templates), out)
    assert written == out / "Makefile"
    assert written.read_bytes() == b"help:\n\t@echo\n"


def test_extract_missing(tmp_path, capsys):
    result = extract("default_config.conf", TemplateStore(tmp_path), tmp_path)
    assert result is None
    assert "Error: Embedded file 'default_config.conf' not found!" in capsys.readouterr().err


def test_main_requires_src(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv(TEMPLATE_DIR_ENV, str(tmp_path / "none"))
    with pytest.raises(FileNotFoundError):
        main([])


def test_main_help():
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0


def test_main_full_flow(tmp_path, monkeypatch, capsys):
    templates = tmp_path / "templates"
    templates.mkdir()
    (templates / "Makefile").write_text("all:\n\techo all\n")
    _script(templates / "install_script.sh", "echo installed > ran.txt")
    work = tmp_path / "work"
    (work / "src").mkdir(parents=True)
    monkeypatch.chdir(work)
    monkeypatch.setenv(TEMPLATE_DIR_ENV, str(templates))

    assert main([]) == 0

    assert (work / "Makefile").read_text() == "all:\n\techo all\n"
    assert (work / "ran.txt").read_text().strip() == "installed"
    assert os.stat(work / "install_script.sh").st_mode & 0o111 == 0o111
    captured = capsys.readouterr()
    assert f"Canonical path of '.': {work.resolve()}" in captured.out
    assert "Error: Embedded file 'default_config.conf' not found!" in captured.err


def test_main_without_script(tmp_path, monkeypatch, capsys):
    work = tmp_path / "work"
    (work / "src").mkdir(parents=True)
    monkeypatch.chdir(work)
    monkeypatch.setenv(TEMPLATE_DIR_ENV, str(tmp_path / "none"))
    assert main([]) == 0
    assert "Script 'install_script.sh' does not exist" in capsys.readouterr().err