"""Exception classes for the Monkey lexer with detailed context."""

from typing import List, Optional


class MonkeyError(Exception):
    """Base exception for Monkey errors with detailed context information."""

    def __init__(
        self,
        message: str,
        context: Optional[str] = None,
        expected: Optional[str] = None,
        received: Optional[str] = None,
        suggestion: Optional[str] = None,
        example: Optional[str] = None,
        position: Optional[int] = None,
        character: Optional[str] = None
    ):
        """
        Initialize detailed error.

        Args:
            message: Core error description
            context: Additional context information
            expected: What was expected
            received: What was actually received
            suggestion: Suggestion for fixing the error
            example: Example of correct usage
            position: Character offset in the source where the error occurred
            character: The source character found at position
        """
        self.message = message
        self.context = context
        self.expected = expected
        self.received = received
        self.suggestion = suggestion
        self.example = example
        self.position = position
        self.character = character

        super().__init__(self._format_detailed_message())

    def _format_location(self) -> Optional[str]:
        """Describe where in the source the error is, if known."""
        if self.position is None:
            if self.character is None:
                return None

            return f"At: {self.character!r}"

        if self.character is None:
            return f"Position: {self.position}"

        return f"Position: {self.position} (at {self.character!r})"

    def _format_detailed_message(self) -> str:
        """Format the error message, one labelled line per detail present."""
        parts: List[str] = [f"Error: {self.message}"]

        location = self._format_location()
        if location is not None:
            parts.append(location)

        details = (
            ("Received", self.received),
            ("Expected", self.expected),
            ("Context", self.context),
            ("Suggestion", self.suggestion),
            ("Example", self.example),
        )
        parts.extend(f"{label}: {value}" for label, value in details if value)
        return "\n".join(parts)


class MonkeyLexError(MonkeyError):
    """Lexing errors with detailed context."""
