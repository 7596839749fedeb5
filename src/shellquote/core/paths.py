"""Make local path arguments unambiguous."""

from __future__ import annotations


def local_path(s: str) -> str:
    """Return s in a form that can only be read as a local path.

    A leading '-' looks like a flag and a leading '~' is subject to tilde
    expansion. A ':' before the first '/' looks like a remote host:path
    specifier to scp, rsync and friends. All three get a './' prefix. An
    empty string becomes '.'.
    """
    if not s:
        return "."
    if s[0] in "-~":
        return "./" + s
    leading = s.split("/", 1)[0]
    if ":" in leading:
        return "./" + s
    return s
