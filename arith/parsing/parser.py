"""Recursive descent evaluator for arithmetic expressions."""
import logging
import math
import operator
from typing import Callable, Dict, Tuple, Union

from arith.parsing.errors import (
    ExpectedNumberError,
    MismatchedParenthesesError,
    NestingTooDeepError,
    UnexpectedTokenError,
)
from arith.parsing.tokenizer import Token, Tokenizer, TokenType

logger = logging.getLogger(__name__)


def _divide(left: float, right: float) -> float:
    """IEEE 754 division: x/0 is a signed infinity and 0/0 is NaN."""
    if right == 0:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


_BINARY_OPS: Dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _divide,
}

# Loosest binding first; the level after the last one is a primary
PRECEDENCE_LEVELS: Tuple[Tuple[str, ...], ...] = (
    ("+", "-"),
    ("*", "/"),
)


class Parser:
    """
    Evaluates one expression while consuming its tokens left to right.

    Nothing is built between tokens and the result: every binary operator
    is folded into the running value as soon as its right operand is known.

    Examples:
        >>> Parser("2 + 3 * 4").parse()
        14.0
        >>> Parser("(2 + 3) * 4").parse()
        20.0
    """

    def __init__(self, source: Union[str, Tokenizer]):
        if isinstance(source, Tokenizer):
            self.tokenizer = source
        else:
            self.tokenizer = Tokenizer(source)
        # Buffers whatever the tokenizer has left from its cursor
        self.tokens = tuple(self.tokenizer)
        self._position = 0

    @classmethod
    def from_tokenizer(cls, tokenizer: Tokenizer) -> "Parser":
        """Build a parser over whatever tokens the tokenizer has left."""
        return cls(tokenizer)

    @property
    def position(self) -> int:
        return self._position

    def _peek(self) -> Token:
        if self._position >= len(self.tokens):
            return Token.end()
        return self.tokens[self._position]

    def _advance(self) -> Token:
        token = self._peek()
        if self._position < len(self.tokens):
            self._position += 1
        return token

    def parse(self) -> float:
        """
        Evaluate the expression.

        Tokens left over after a complete expression are ignored, so
        "2+3)" evaluates to 5.0.

        Returns:
            The value of the expression

        Raises:
            UnexpectedTokenError: if an operand is missing or misplaced
            MismatchedParenthesesError: if a '(' is never closed
            NestingTooDeepError: if parentheses nest past the interpreter's
                recursion limit
        """
        try:
            result = self._parse_level(0)
        except RecursionError:
            raise NestingTooDeepError() from None
        logger.debug(
            f"Evaluated {self.tokenizer.input!r} = {result} "
            f"({len(self.tokens) - self._position} tokens unconsumed)")
        return result

    def parse_number(self) -> float:
        """Consume one token that must be a number."""
        token = self._advance()
        if token.type == TokenType.NUMBER:
            return float(token.value)
        raise ExpectedNumberError(token.value)

    def _parse_level(self, level: int) -> float:
        if level >= len(PRECEDENCE_LEVELS):
            return self._parse_primary()

        symbols = PRECEDENCE_LEVELS[level]
        result = self._parse_level(level + 1)
        while self._peek().is_operator(*symbols):
            symbol = self._advance().value
            right = self._parse_level(level + 1)
            result = _BINARY_OPS[symbol](result, right)
        return result

    def _parse_primary(self) -> float:
        token = self._advance()
        if token.type == TokenType.NUMBER:
            return token.value
        if token.is_delimiter("("):
            result = self._parse_level(0)
            if not self._peek().is_delimiter(")"):
                raise MismatchedParenthesesError()
            self._advance()
            return result
        raise UnexpectedTokenError(token.value)


def make_parser(text: str) -> Parser:
    """Build a parser for text."""
    return Parser(text)
