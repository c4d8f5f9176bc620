"""
Monkey Lexer

This module implements a single-pass lexer for Monkey source.  Tokens are
produced one at a time by `next_token`; the lexer never raises while lexing,
unrecognised characters are returned as ILLEGAL tokens for the consumer to
handle.
"""

import logging
from typing import ClassVar, Dict, FrozenSet, Iterator

from monkey.monkey_error import MonkeyLexError
from monkey.monkey_token import MonkeyToken, MonkeyTokenType, lookup_ident


class MonkeyLexer:
    """
    Lexer for Monkey source.

    The lexer holds a cursor over an immutable input string.  `_ch` is the
    character under examination (or "" once the input is exhausted),
    `_position` is its index and `_read_position` is the index of the next
    unread character.  `_read_char` is the only method that moves the cursor.

    Character classes are ASCII only.  Subclasses may override the class-level
    tables, and `extra_letters` widens the letter class for one instance.
    """

    _WHITESPACE_CHARS: ClassVar[FrozenSet[str]] = frozenset(" \t\n\r")
    _LETTER_CHARS: ClassVar[FrozenSet[str]] = frozenset(
        "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_"
    )
    _DIGIT_CHARS: ClassVar[FrozenSet[str]] = frozenset("0123456789")

    _SINGLE_CHAR_TOKENS: ClassVar[Dict[str, MonkeyTokenType]] = {
        '=': MonkeyTokenType.ASSIGN,
        '+': MonkeyTokenType.PLUS,
        '-': MonkeyTokenType.MINUS,
        '!': MonkeyTokenType.BANG,
        '*': MonkeyTokenType.ASTERISK,
        '/': MonkeyTokenType.SLASH,
        '<': MonkeyTokenType.LT,
        '>': MonkeyTokenType.GT,
        ',': MonkeyTokenType.COMMA,
        ';': MonkeyTokenType.SEMICOLON,
        '(': MonkeyTokenType.LPAREN,
        ')': MonkeyTokenType.RPAREN,
        '{': MonkeyTokenType.LBRACE,
        '}': MonkeyTokenType.RBRACE,
    }

    # Operators that need one character of lookahead
    _TWO_CHAR_TOKENS: ClassVar[Dict[str, MonkeyTokenType]] = {
        '==': MonkeyTokenType.EQ,
        '!=': MonkeyTokenType.NOT_EQ,
    }

    def __init__(self, source: str, extra_letters: str = "") -> None:
        """
        Initialize the lexer with a complete source string.

        Args:
            source: The Monkey source to lex
            extra_letters: Additional characters to treat as letters, e.g. "?"

        Raises:
            MonkeyLexError: If source or extra_letters is not a string, or
                extra_letters contains whitespace or digits
        """
        if not isinstance(source, str):
            raise MonkeyLexError(
                message="Lexer input must be a string",
                received=f"Input of type {type(source).__name__}",
                expected="str",
                suggestion="Decode bytes before lexing, e.g. source.decode('ascii')"
            )

        if not isinstance(extra_letters, str):
            raise MonkeyLexError(
                message="Extra letters must be a string",
                received=f"extra_letters of type {type(extra_letters).__name__}",
                expected="str",
                suggestion="Pass the characters as one string, e.g. extra_letters='?'"
            )

        clashing = sorted(set(extra_letters) & (self._WHITESPACE_CHARS | self._DIGIT_CHARS))
        if clashing:
            raise MonkeyLexError(
                message="Extra letters cannot include whitespace or digits",
                received=f"extra_letters={extra_letters!r}",
                expected="Punctuation characters such as '?'",
                context=f"Clashing characters: {clashing!r}"
            )

        self._logger = logging.getLogger("MonkeyLexer")
        self._input = source
        self._input_len = len(source)
        self._letter_chars = self._LETTER_CHARS | frozenset(extra_letters)
        self._position = 0
        self._read_position = 0
        self._ch = ""
        self._read_char()

        self._logger.debug("created lexer for %d characters", self._input_len)

    @property
    def position(self) -> int:
        """Index of the character currently being examined."""
        return self._position

    @property
    def read_position(self) -> int:
        """Index of the next unread character."""
        return self._read_position

    @property
    def ch(self) -> str:
        """The current character, or "" at end of input."""
        return self._ch

    def __iter__(self) -> Iterator[MonkeyToken]:
        """Yield tokens up to and including the first EOF."""
        while True:
            token = self.next_token()
            yield token
            if token.type is MonkeyTokenType.EOF:
                return

    def next_token(self) -> MonkeyToken:
        """
        Produce the next token from the input.

        Once the input is exhausted this keeps returning EOF.

        Returns:
            The next MonkeyToken
        """
        self._skip_whitespace()

        ch = self._ch
        if ch == "":
            return MonkeyToken(MonkeyTokenType.EOF, "")

        # Identifier and number scans leave the cursor past the word, so they
        # return without the trailing advance.
        if self._is_letter(ch):
            literal = self._read_identifier()
            return MonkeyToken(lookup_ident(literal), literal)

        if self._is_digit(ch):
            return MonkeyToken(MonkeyTokenType.INT, self._read_number())

        two_chars = ch + self._peek_char()
        token_type = self._TWO_CHAR_TOKENS.get(two_chars)
        if token_type is not None:
            self._read_char()
            self._read_char()
            return MonkeyToken(token_type, two_chars)

        token_type = self._SINGLE_CHAR_TOKENS.get(ch)
        if token_type is None:
            self._logger.debug("illegal character %r at offset %d", ch, self._position)
            token_type = MonkeyTokenType.ILLEGAL

        self._read_char()
        return MonkeyToken(token_type, ch)

    def _read_char(self) -> None:
        """
        Advance the cursor by one character.
        """
        if self._read_position >= self._input_len:
            self._ch = ""

        else:
            self._ch = self._input[self._read_position]

        self._position = self._read_position
        self._read_position += 1

    def _peek_char(self) -> str:
        """
        Look at the next character without consuming it.

        Returns:
            The character at the read cursor, or "" at end of input
        """
        if self._read_position >= self._input_len:
            return ""

        return self._input[self._read_position]

    def _skip_whitespace(self) -> None:
        """
        Skip over spaces, tabs, newlines and carriage returns.
        """
        while self._ch in self._WHITESPACE_CHARS:
            self._read_char()

    def _read_identifier(self) -> str:
        """
        Read a letter followed by any run of letters and digits.

        Returns:
            The identifier text
        """
        start = self._position
        while self._is_letter(self._ch) or self._is_digit(self._ch):
            self._read_char()

        return self._input[start:self._position]

    def _read_number(self) -> str:
        """
        Read a maximal run of decimal digits.

        Returns:
            The digits exactly as they appear in the source
        """
        start = self._position
        while self._is_digit(self._ch):
            self._read_char()

        return self._input[start:self._position]

    def _is_letter(self, ch: str) -> bool:
        """
        Determines if a character is a letter.
        """
        return ch in self._letter_chars

    def _is_digit(self, ch: str) -> bool:
        """
        Determines if a character is a digit.
        """
        return ch in self._DIGIT_CHARS
