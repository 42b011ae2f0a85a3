"""Recipe lexer, variable environment and file helpers for marionette."""

__version__ = "0.1.0"

__all__ = ["environment", "files", "lexer"]