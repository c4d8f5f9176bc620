"""Monkey language lexer package."""

# Main API
from monkey.monkey import Monkey

# Exceptions
from monkey.monkey_error import MonkeyError, MonkeyLexError

# Lower-level components
from monkey.monkey_lexer import MonkeyLexer
from monkey.monkey_token import KEYWORDS, MonkeyToken, MonkeyTokenType, lookup_ident


__all__ = [
    # Main API
    "Monkey",

    # Exceptions
    "MonkeyError", "MonkeyLexError",

    # Lower-level components
    "KEYWORDS", "MonkeyLexer", "MonkeyToken", "MonkeyTokenType", "lookup_ident"
]
