from __future__ import annotations

from calc.frontend.tokens import invalid

class CalcError(Exception):
    """Base class for everything that aborts an evaluation."""
    def __init__(self, message: str, expected=None, found=None) -> None:
        self.message = message
        self.expected = expected
        self.found = found
        super().__init__(message)

class ExpressionSyntaxError(CalcError):
    pass

class LexicalError(ExpressionSyntaxError):
    """An invalid character reached the parser as lookahead."""
    def __init__(self, char: str, expected=None) -> None:
        super().__init__(f"Invalid character {char!r}", expected, invalid(char))
        self.char = char

class TrailingInputError(ExpressionSyntaxError):
    pass

class NestingTooDeepError(CalcError):
    """Parentheses or unary minus nested deeper than the interpreter's stack allows."""
    pass

class DivisionByZeroError(CalcError, ZeroDivisionError):
    pass

class MalformedTreeError(CalcError):
    pass
