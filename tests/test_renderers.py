import subprocess
from pathlib import Path

import pytest

from slidesite.errors import BuildError, RenderError
from slidesite.executable_utils import find_executable
from slidesite.protocols import SiteRenderer
from slidesite.renderers import RevealMdRenderer


def make_local_bin(project: Path, name: str = "reveal-md") -> Path:
    local = project / "node_modules" / ".bin" / name
    local.parent.mkdir(parents=True, exist_ok=True)
    local.write_text("#!/bin/sh\necho ok\n", encoding="utf-8")
    return local


def test_find_executable_path_first(monkeypatch, tmp_path):
    local = make_local_bin(tmp_path)
    monkeypatch.setattr("slidesite.executable_utils.shutil.which", lambda name: "/usr/bin/reveal-md")

    assert find_executable("reveal-md", tmp_path) == "/usr/bin/reveal-md"
    assert find_executable("reveal-md", tmp_path, prefer_local=True) == str(local)


def test_find_executable_falls_back(monkeypatch, tmp_path):
    monkeypatch.setattr("slidesite.executable_utils.shutil.which", lambda name: None)
    assert find_executable("reveal-md") is None
    assert find_executable("reveal-md", tmp_path, prefer_local=True) is None

    local = make_local_bin(tmp_path)
    assert find_executable("reveal-md", tmp_path) == str(local)


def test_reveal_md_renderer_is_site_renderer(tmp_path):
    assert isinstance(RevealMdRenderer(tmp_path), SiteRenderer)


def test_render_runs_static_export(monkeypatch, tmp_path):
    local = make_local_bin(tmp_path)
    monkeypatch.setattr("slidesite.executable_utils.shutil.which", lambda name: "/usr/bin/reveal-md")
    calls = {}

    def fake_run(cmd, cwd=None):
        calls["cmd"] = cmd
        calls["cwd"] = cwd
        return subprocess.CompletedProcess(cmd, 0)

    monkeypatch.setattr("slidesite.renderers.subprocess.run", fake_run)
    RevealMdRenderer(tmp_path).render(
        Path("markdown/workshop"), Path("_static"), Path("themes/simplabs.css")
    )
    assert calls["cmd"] == [
        str(local),
        "markdown/workshop",
        "--static",
        "_static",
        "--theme",
        "themes/simplabs.css",
    ]
    assert calls["cwd"] == tmp_path


def test_render_missing_executable(monkeypatch, tmp_path):
    monkeypatch.setattr("slidesite.executable_utils.shutil.which", lambda name: None)
    ran = []
    monkeypatch.setattr("slidesite.renderers.subprocess.run", lambda *a, **k: ran.append(a))

    with pytest.raises(RenderError) as excinfo:
        RevealMdRenderer(tmp_path).render(tmp_path / "md", tmp_path / "out", tmp_path / "t.css")
    assert "reveal-md not found" in excinfo.value.message
    assert excinfo.value.returncode is None
    assert not ran


def test_render_nonzero_exit(monkeypatch, tmp_path):
    monkeypatch.setattr("slidesite.executable_utils.shutil.which", lambda name: "/usr/bin/reveal-md")
    monkeypatch.setattr(
        "slidesite.renderers.subprocess.run",
        lambda cmd, cwd=None: subprocess.CompletedProcess(cmd, 2),
    )

    with pytest.raises(BuildError) as excinfo:
        RevealMdRenderer(tmp_path).render(tmp_path / "md", tmp_path / "out", tmp_path / "t.css")
    assert isinstance(excinfo.value, RenderError)
    assert excinfo.value.returncode == 2
    assert excinfo.value.command[0] == "/usr/bin/reveal-md"
    assert "exited with status 2" in str(excinfo.value)


def test_render_os_error(monkeypatch, tmp_path):
    monkeypatch.setattr("slidesite.executable_utils.shutil.which", lambda name: "/usr/bin/reveal-md")

    def fake_run(cmd, cwd=None):
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr("slidesite.renderers.subprocess.run", fake_run)
    with pytest.raises(RenderError) as excinfo:
        RevealMdRenderer(tmp_path).render(tmp_path / "md", tmp_path / "out", tmp_path / "t.css")
    assert isinstance(excinfo.value.original_error, PermissionError)
    assert isinstance(excinfo.value.__cause__, PermissionError)
