"""Errors collections that symbol table may raise (user-facing ones)."""

from .symbol_redefinition import SymbolRedefinitionError

__all__ = ["SymbolRedefinitionError"]
