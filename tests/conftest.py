"""Shared test fixtures."""

import subprocess

import pytest

from vboxctl.cli.handlers import build_registry
from vboxctl.config import Settings
from vboxctl.registry import Context
from vboxctl.vboxmanage import VBoxManage


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the caller's environment out of the tests."""
    for var in ("VBOXCTL_DEFAULT_COMMAND", "VBOXCTL_VBOXMANAGE", "EDITOR", "OSTYPE", "NO_COLOR"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def settings():
    return Settings(ostype="linux-gnu")


@pytest.fixture
def registry():
    return build_registry()


@pytest.fixture
def ctx(settings, registry):
    """Handler context backed by the real VBoxManage wrapper."""
    return Context(settings=settings, registry=registry, tool=VBoxManage("VBoxManage"))


@pytest.fixture
def mock_run(mocker):
    """Patch subprocess.run; VBoxManage succeeds with empty output."""
    return mocker.patch(
        "subprocess.run",
        return_value=subprocess.CompletedProcess(args=[], returncode=0, stdout=""),
    )


def tool_calls(mock_run) -> list[list[str]]:
    """Command lines passed to subprocess.run, in order."""
    return [c.args[0] for c in mock_run.call_args_list]


def outputs(*stdouts: str) -> list[subprocess.CompletedProcess]:
    """side_effect for mock_run returning each stdout in turn."""
    return [subprocess.CompletedProcess(args=[], returncode=0, stdout=s) for s in stdouts]


SHOWVMINFO_RUNNING = """\
Name:                        box
Groups:                      /
Guest OS:                    Ubuntu (64-bit)
UUID:                        2b9e4c1a-5a8d-4f3e-9d1c-0a1b2c3d4e5f
State:                       running (since 2024-05-01T09:15:02.123000000)
Memory size:                 2048MB
NIC 1:                       MAC: 080027AA1234, Attachment: NAT, Cable connected: on
NIC 1 Rule(0):   name = tcp5000, protocol = tcp, host ip = 127.0.0.1, host port = 5000, guest ip = , guest port = 5000
NIC 1 Rule(1):   name = ssh, protocol = tcp, host ip = 127.0.0.1, host port = 2222, guest ip = , guest port = 22
NIC 2:                       disabled
"""

LIST_VMS_LONG = """\
Name:                        box
Groups:                      /
State:                       running (since 2024-05-01T09:15:02.123000000)
Name: 'share', Host path: '/home/me/share' (machine mapping), writable

Name:                        windows-11
Groups:                      /
State:                       powered off (since 2024-04-30T18:00:00.000000000)

Name:                        db
Groups:                      /
State:                       saved (since 2024-04-29T08:00:00.000000000)
"""
