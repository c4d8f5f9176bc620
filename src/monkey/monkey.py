"""Main Monkey class for turning source into token lists."""

import logging
from typing import List

from monkey.monkey_error import MonkeyLexError
from monkey.monkey_lexer import MonkeyLexer
from monkey.monkey_token import MonkeyToken, MonkeyTokenType


class Monkey:
    """
    Convenience front end over `MonkeyLexer`.

    The lexer itself reports unrecognised characters as ILLEGAL tokens and
    leaves it to the consumer to decide what to do with them.  With
    `strict=True` this class makes that decision: the first ILLEGAL token
    raises a `MonkeyLexError`.
    """

    def __init__(self, extra_letters: str = "", strict: bool = False):
        """
        Initialize the tokenizer front end.

        Args:
            extra_letters: Additional characters to treat as letters in identifiers
            strict: Raise on the first ILLEGAL token instead of returning it
        """
        self.extra_letters = extra_letters
        self.strict = strict
        self._logger = logging.getLogger("Monkey")

    def tokenize(self, source: str) -> List[MonkeyToken]:
        """
        Tokenize a complete Monkey source string.

        Args:
            source: The source to tokenize

        Returns:
            Every token in the source, ending with a single EOF token

        Raises:
            MonkeyLexError: If the source is not a string, or in strict mode when
                an unrecognised character is found
        """
        lexer = MonkeyLexer(source, extra_letters=self.extra_letters)
        tokens: List[MonkeyToken] = []

        for token in lexer:
            if token.type is MonkeyTokenType.ILLEGAL and self.strict:
                # The lexer has already stepped past the offending character
                offset = lexer.position - 1
                raise MonkeyLexError(
                    message=f"Unexpected character: {token.literal!r}",
                    received=f"Character {token.literal!r} as token {len(tokens)}",
                    expected="Identifier, integer, operator or delimiter",
                    suggestion="Remove the character or use a supported operator",
                    example="let add = fn(x, y) { x + y; };",
                    position=offset,
                    character=token.literal
                )

            tokens.append(token)

        self._logger.debug("tokenized %d characters into %d tokens", len(source), len(tokens))
        return tokens
