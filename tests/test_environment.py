import re
import socket
import sys

import pytest

from marionette.environment import CommandError, Config, Environment
from marionette.lexer import Token, TokenType


def test_expected_defaults():
    env = Environment()
    os_name = env.get("OS")
    assert os_name
    assert sys.platform.startswith(os_name) or (
        os_name == "windows" and sys.platform == "win32"
    )
    arch = env.get("ARCH")
    assert arch and arch == arch.lower()
    assert env.get("HOSTNAME") == socket.gethostname()
    assert {"USERNAME", "HOMEDIR"} <= set(env.variables())


def test_set():
    env = Environment()
    count = len(env.variables())
    assert env.get("STEVE") is None

    env.set("STEVE", "KEMP")
    assert env.get("STEVE") == "KEMP"
    assert len(env.variables()) == count + 1

    env.set("STEVE", "STEVE")
    assert env.get("STEVE") == "STEVE"
    assert len(env.variables()) == count + 1


def test_env_variable(monkeypatch):
    env = Environment()
    monkeypatch.setenv("NAME", "world")
    out = env.expand_token_variables(Token(TokenType.STRING, "Hello, ${NAME}"))
    assert out == "Hello, world"

    env.set("NAME", "Steve")
    out = env.expand_token_variables(Token(TokenType.STRING, "Hello, ${NAME}"))
    assert out == "Hello, Steve"


def test_unbraced_and_unknown_variables(monkeypatch):
    monkeypatch.delenv("MARIONETTE_MISSING", raising=False)
    env = Environment()
    env.set("foo", "bar")
    assert env.expand_variables("$foo/x") == "bar/x"
    assert env.expand_variables("[${MARIONETTE_MISSING}]") == "[]"
    assert env.expand_variables("no variables") == "no variables"


def test_dollar_edge_cases():
    env = Environment()
    assert env.expand_variables("cost $") == "cost $"
    assert env.expand_variables("a $ b") == "a $ b"
    assert env.expand_variables("x${}y") == "xy"
    assert env.expand_variables("${foo") == "foo"


def test_command_expansion():
    env = Environment()
    out = env.expand_token_variables(Token(TokenType.BACKTICK, "echo passwd"))
    assert out == "passwd"


def test_command_expansion_uses_variables():
    env = Environment()
    env.set("WORD", "steve")
    out = env.expand_token_variables(Token(TokenType.BACKTICK, "echo ${WORD}"))
    assert out == "steve"


def test_missing_command():
    env = Environment()
    cmd = "/no/such/file/directory"
    with pytest.raises(CommandError, match=re.escape(cmd)):
        env.expand_token_variables(Token(TokenType.BACKTICK, cmd))


def test_config_defaults():
    cfg = Config()
    assert (cfg.debug, cfg.verbose) == (False, False)
    assert Config(debug=True).debug is True