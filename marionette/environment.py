"""Run-time variables and the options shared with modules."""

from __future__ import annotations

import getpass
import logging
import os
import platform
import re
import socket
import subprocess
import sys
from dataclasses import dataclass

from .lexer import Token, TokenType

log = logging.getLogger(__name__)

_ARCH_NAMES = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "i386": "386",
    "i686": "386",
    "x86": "386",
    "armv7l": "arm",
    "armv6l": "arm",
}

# $name, ${name}, ${ (bad, eaten), or a single special character.
_VARIABLE = re.compile(
    r"\$(?:\{(?P<braced>[^}]*)\}|(?P<open>\{)|(?P<special>[*#$@!?\-0-9])"
    r"|(?P<plain>[A-Za-z0-9_]+))"
)


@dataclass
class Config:
    """Options set on the command line and shared with every module."""

    debug: bool = False
    verbose: bool = False


class CommandError(RuntimeError):
    """A backtick command could not be run or exited unsuccessfully."""


def _host_arch() -> str:
    machine = platform.machine().lower()
    return _ARCH_NAMES.get(machine, machine)


def _host_os() -> str:
    if sys.platform in ("win32", "cygwin"):
        return "windows"
    return re.sub(r"\d+$", "", sys.platform)


def _user_details() -> tuple[str, str]:
    try:
        import pwd

        entry = pwd.getpwuid(os.getuid())
        return entry.pw_name, entry.pw_dir
    except (ImportError, KeyError, AttributeError):
        pass
    try:
        return getpass.getuser(), os.path.expanduser("~")
    except (OSError, KeyError):
        return "", ""


class Environment:
    """Variables visible to a recipe while it runs."""

    def __init__(self) -> None:
        self._vars: dict[str, str] = {
            "ARCH": _host_arch(),
            "OS": _host_os(),
            "HOSTNAME": "unknown",
        }
        try:
            self._vars["HOSTNAME"] = socket.gethostname()
        except OSError:
            pass
        self._vars["USERNAME"], self._vars["HOMEDIR"] = _user_details()
        for key, value in self._vars.items():
            log.debug("Set default variable %s -> %s", key, value)

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any earlier value."""
        self._vars[key] = value

    def get(self, key: str) -> str | None:
        """Return the value stored under ``key``, or None if unset."""
        return self._vars.get(key)

    def variables(self) -> dict[str, str]:
        """Return a copy of every variable currently set."""
        return dict(self._vars)

    def _lookup(self, name: str) -> str:
        value = self._vars.get(name)
        if value is not None:
            return value
        return os.environ.get(name, "")

    def expand_variables(self, text: str) -> str:
        """Replace ``$name`` and ``${name}`` references in ``text``.

        Recipe variables take precedence over the process environment;
        unknown names expand to the empty string.
        """

        def replace(match: re.Match[str]) -> str:
            if match.group("open") is not None:
                return ""
            name = next(
                g for g in match.group("braced", "special", "plain") if g is not None
            )
            return self._lookup(name) if name else ""

        return _VARIABLE.sub(replace, text)

    def expand_token_variables(self, tok: Token) -> str:
        """Expand a token; a backtick token is run as a shell command.

        The command's combined output, less one trailing newline, is returned.
        """
        value = self.expand_variables(tok.literal)
        if tok.type is not TokenType.BACKTICK:
            return value
        try:
            result = subprocess.run(
                ["/bin/bash", "-c", value],
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                check=False,
            )
        except OSError as err:
            raise CommandError(f"error running command '{value}' {err}") from err
        if result.returncode != 0:
            raise CommandError(
                f"error running command '{value}' exit status {result.returncode}"
            )
        output = result.stdout.decode("utf-8", errors="replace")
        return output[:-1] if output.endswith("\n") else output