"""Small file-system helpers used by rules and conditionals."""

from __future__ import annotations

import hashlib
import os
import re
import shutil

if os.name != "nt":
    import pwd

_OCTAL = re.compile(r"[+-]?[0-7]+")


def copy(src: str, dst: str) -> None:
    """Copy the contents of ``src`` into ``dst``, creating or truncating it."""
    with open(src, "rb") as reader, open(dst, "wb") as writer:
        shutil.copyfileobj(reader, writer)


def exists(name: str) -> bool:
    """Report whether the named file or directory exists."""
    try:
        os.stat(name)
    except FileNotFoundError:
        return False
    except OSError:
        return True
    return True


def size(name: str) -> int:
    """Return the size of the named file in bytes."""
    return os.stat(name).st_size


def hash_file(path: str) -> str:
    """Return the hex SHA1 digest of the file's contents."""
    digest = hashlib.sha1()
    with open(path, "rb") as handle:
        for chunk in iter(lambda: handle.read(65536), b""):
            digest.update(chunk)
    return digest.hexdigest()


def identical(a: str, b: str) -> bool:
    """Return True if the two files have identical contents."""
    return hash_file(a) == hash_file(b)


def _parse_octal(mode: str) -> int:
    # Unparseable modes are treated as zero.
    if not _OCTAL.fullmatch(mode):
        return 0
    return int(mode, 8)


def _lookup_user(name: str) -> "pwd.struct_passwd":
    try:
        return pwd.getpwnam(name)
    except KeyError:
        raise LookupError(f"user: unknown user {name}") from None


def change_mode(path: str, mode: str) -> bool:
    """Set the octal permission ``mode`` on ``path``; return True if it changed."""
    if os.name == "nt":
        return False
    wanted = _parse_octal(mode)
    current = os.stat(path).st_mode & 0o777
    if current != wanted:
        os.chmod(path, wanted & 0o777)
        return True
    return False


def change_owner(path: str, owner: str) -> bool:
    """Make ``owner`` the owner of ``path``; return True if it changed."""
    if os.name == "nt":
        return False
    info = os.stat(path)
    uid = _lookup_user(owner).pw_uid
    if uid != info.st_uid:
        os.chown(path, uid, info.st_gid)
        return True
    return False


def change_group(path: str, group: str) -> bool:
    """Set the group of ``path`` to the primary group of the account ``group``.

    Returns True if the group changed.
    """
    if os.name == "nt":
        return False
    info = os.stat(path)
    gid = _lookup_user(group).pw_gid
    if gid != info.st_gid:
        os.chown(path, info.st_uid, gid)
        return True
    return False