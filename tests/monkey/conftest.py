"""Shared fixtures and utilities for Monkey lexer tests."""

import pytest
from typing import Callable, List, Tuple

from monkey import Monkey, MonkeyLexer, MonkeyToken, MonkeyTokenType


@pytest.fixture
def monkey():
    """Create a fresh non-strict Monkey instance for each test."""
    return Monkey()


@pytest.fixture
def strict_monkey():
    """Create a Monkey instance that rejects illegal characters."""
    return Monkey(strict=True)


@pytest.fixture
def lex() -> Callable[..., List[MonkeyToken]]:
    """Factory that drains a fresh lexer with next_token and returns every token up to EOF."""
    def _lex(source: str, extra_letters: str = "") -> List[MonkeyToken]:
        lexer = MonkeyLexer(source, extra_letters=extra_letters)
        tokens = []
        while True:
            token = lexer.next_token()
            tokens.append(token)
            if token.type is MonkeyTokenType.EOF:
                return tokens

    return _lex


class MonkeyTestHelpers:
    """Helper utilities for Monkey lexer testing."""

    @staticmethod
    def pairs(tokens: List[MonkeyToken]) -> List[Tuple[MonkeyTokenType, str]]:
        """Reduce tokens to (type, literal) pairs for compact comparisons."""
        return [(t.type, t.literal) for t in tokens]

    @staticmethod
    def assert_tokens(tokens: List[MonkeyToken], expected: List[Tuple[MonkeyTokenType, str]]) -> None:
        """Assert that a token stream matches expected (type, literal) pairs."""
        actual = MonkeyTestHelpers.pairs(tokens)
        assert actual == expected, f"Expected {expected!r}, got {actual!r}"


@pytest.fixture
def helpers():
    """Provide test helper utilities."""
    return MonkeyTestHelpers
