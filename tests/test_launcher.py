import subprocess

import pytest

from ssm.core import launcher as launcher_mod
from ssm.core.errors import LaunchError, SSHClientNotFound
from ssm.core.launcher import Launcher
from ssm.core.models import Profile

PROFILE = Profile(name="web", host="10.0.0.1", port=2222, username="deploy", key_path="/keys/web")


def test_build_command():
    cmd = Launcher().build_command(PROFILE, "/usr/bin/ssh")

    assert cmd == ["/usr/bin/ssh", "deploy@10.0.0.1", "-p", "2222", "-i", "/keys/web"]


def test_missing_client_is_reported(monkeypatch):
    monkeypatch.setattr(launcher_mod.shutil, "which", lambda name: None)

    with pytest.raises(SSHClientNotFound):
        Launcher(platform="linux").launch(PROFILE)


def test_windows_looks_for_ssh_exe(monkeypatch):
    seen = []

    def which(name):
        seen.append(name)
        return r"C:\Windows\System32\OpenSSH\ssh.exe"

    monkeypatch.setattr(launcher_mod.shutil, "which", which)

    assert Launcher(platform="win32").find_client().endswith("ssh.exe")
    assert seen == ["ssh.exe"]


def test_launch_returns_exit_status(monkeypatch):
    calls = []

    def run(cmd, *args, **kwargs):
        calls.append((cmd, kwargs))
        return subprocess.CompletedProcess(cmd, 255)

    monkeypatch.setattr(launcher_mod.shutil, "which", lambda name: "/usr/bin/ssh")
    monkeypatch.setattr(launcher_mod.subprocess, "run", run)

    status = Launcher(platform="linux").launch(PROFILE)

    assert status == 255
    cmd, kwargs = calls[0]
    assert cmd == ["/usr/bin/ssh", "deploy@10.0.0.1", "-p", "2222", "-i", "/keys/web"]
    # stdio is inherited, not captured
    assert "stdout" not in kwargs and "capture_output" not in kwargs


def test_spawn_failure_raises_launch_error(monkeypatch):
    def run(cmd, *args, **kwargs):
        raise PermissionError("denied")

    monkeypatch.setattr(launcher_mod.shutil, "which", lambda name: "/usr/bin/ssh")
    monkeypatch.setattr(launcher_mod.subprocess, "run", run)

    with pytest.raises(LaunchError) as excinfo:
        Launcher(platform="linux").launch(PROFILE)
    assert not isinstance(excinfo.value, SSHClientNotFound)
