"""Resolve declared dependency paths against the declaring module's location.

Resolution is pure path algebra over POSIX-style strings. A resolved path that
names no known module is not an error here; the graph builder decides what a
miss means.
"""

from __future__ import annotations

import posixpath


def is_well_formed(path: object) -> bool:
    """True when ``path`` can take part in path resolution."""
    return isinstance(path, str) and bool(path.strip()) and "\x00" not in path


def is_absolute(path: str) -> bool:
    return path.startswith("/")


def resolve(raw_path: str, from_identity: str) -> str:
    """Resolve ``raw_path`` as declared by the module at ``from_identity``.

    Absolute paths come back unchanged. Relative paths (``./``, ``../``) and
    bare references are joined with the directory that contains
    ``from_identity`` and normalized.
    """
    if is_absolute(raw_path):
        return raw_path
    base_dir = posixpath.dirname(from_identity)
    # Bare references ("vpc", "modules/vpc") are treated as relative.
    return posixpath.normpath(posixpath.join(base_dir, raw_path))


def containing_directory(identity: str) -> str:
    return posixpath.dirname(identity)


def join(directory: str, filename: str) -> str:
    return posixpath.join(directory, filename)
