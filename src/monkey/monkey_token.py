"""Token types, token representation and keyword table for Monkey source."""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class MonkeyTokenType(Enum):
    """Token types for Monkey source."""
    ILLEGAL = "ILLEGAL"
    EOF = "EOF"

    # Identifiers and literals
    IDENT = "IDENT"
    INT = "INT"

    # Operators
    ASSIGN = "="
    PLUS = "+"
    MINUS = "-"
    BANG = "!"
    ASTERISK = "*"
    SLASH = "/"
    LT = "<"
    GT = ">"
    EQ = "=="
    NOT_EQ = "!="

    # Delimiters
    COMMA = ","
    SEMICOLON = ";"
    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"

    # Keywords
    FUNCTION = "FUNCTION"
    LET = "LET"
    TRUE = "TRUE"
    FALSE = "FALSE"
    IF = "IF"
    ELSE = "ELSE"
    RETURN = "RETURN"


@dataclass(frozen=True)
class MonkeyToken:
    """
    Represents a single token in Monkey source.

    Attributes:
        type: The kind of token
        literal: The source text the token was scanned from (empty for EOF)
    """
    type: MonkeyTokenType
    literal: str

    def __repr__(self) -> str:
        return f"MonkeyToken({self.type.name}, {self.literal!r})"


KEYWORDS: Mapping[str, MonkeyTokenType] = MappingProxyType({
    "fn": MonkeyTokenType.FUNCTION,
    "let": MonkeyTokenType.LET,
    "true": MonkeyTokenType.TRUE,
    "false": MonkeyTokenType.FALSE,
    "if": MonkeyTokenType.IF,
    "else": MonkeyTokenType.ELSE,
    "return": MonkeyTokenType.RETURN,
})


def lookup_ident(ident: str) -> MonkeyTokenType:
    """
    Map an identifier-like word to its token type.

    Args:
        ident: The scanned word

    Returns:
        The keyword's token type, or IDENT if the word is not reserved
    """
    return KEYWORDS.get(ident, MonkeyTokenType.IDENT)
