"""
Shared test fixtures for shellquote tests.
"""

import shutil
import subprocess

import pytest

from shellquote import configure_logging

SH = shutil.which("sh")

requires_sh = pytest.mark.skipif(SH is None, reason="no POSIX shell available")


def sh_eval(quoted: str) -> str:
    """Run quoted text through sh and return the words it saw.

    Each argument comes back wrapped in brackets, so word boundaries are
    visible in the output.
    """
    result = subprocess.run(
        [SH, "-c", "printf '[%s]' " + quoted],
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout


def bracketed(*args: str) -> str:
    """Expected sh_eval output for the given arguments."""
    return "".join(f"[{a}]" for a in args)


@pytest.fixture
def log_file(tmp_path):
    """Enable rejection logging into a temp file for the duration of a test."""
    path = tmp_path / "logs" / "shellquote.log"
    configure_logging(path)
    yield path
    configure_logging(None)
