"""Tokenizer for arithmetic expressions."""
import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple, Union

from arith.parsing.errors import UnknownTokenError

logger = logging.getLogger(__name__)

END_MARKER = "EOL"

# Whitespace is stripped before scanning, so "1 2" scans as "12"
_WHITESPACE_RE = re.compile(r"\s")
_TOKEN_RE = re.compile(r"[\d.]+|[+\-*/()]|EOL", re.ASCII)
_NUMBER_RE = re.compile(r"^\d+(\.\d+)?$", re.ASCII)

OPERATORS = frozenset("+-*/")
DELIMITERS = frozenset("()")


class TokenType(str, Enum):
    """Kinds of tokens produced by the tokenizer."""
    NUMBER = "NUMBER"
    OPERATOR = "OPERATOR"
    DELIMITER = "DELIMITER"
    END = "END"


@dataclass(frozen=True)
class Token:
    """A classified unit of input."""
    type: TokenType
    value: Union[float, str]

    @classmethod
    def end(cls) -> "Token":
        return cls(TokenType.END, END_MARKER)

    def is_operator(self, *symbols: str) -> bool:
        return self.type == TokenType.OPERATOR and self.value in symbols

    def is_delimiter(self, symbol: str) -> bool:
        return self.type == TokenType.DELIMITER and self.value == symbol


def _classify(text: str) -> Token:
    if text in OPERATORS:
        return Token(TokenType.OPERATOR, text)
    if text in DELIMITERS:
        return Token(TokenType.DELIMITER, text)
    if text == END_MARKER:
        return Token.end()
    if _NUMBER_RE.match(text):
        return Token(TokenType.NUMBER, float(text))
    raise UnknownTokenError(text)


class Tokenizer:
    """
    Scans an expression into tokens up front and hands them out one at a time.

    The scan happens eagerly in the constructor, so an unknown token raises
    before any token can be read. Reads share a single cursor: iterating
    twice resumes where the previous pass stopped unless reset() is called.

    Examples:
        >>> [t.value for t in Tokenizer("2 * (3+4)")]
        [2.0, '*', '(', 3.0, '+', 4.0, ')', 'EOL']
    """

    def __init__(self, text: str):
        self.input = text
        self._tokens = self.tokenize(text)
        self._position = 0

    @staticmethod
    def tokenize(text: str) -> Tuple[Token, ...]:
        """
        Scan text into a tuple of tokens terminated by an END token.

        Args:
            text: Expression to scan

        Returns:
            Tuple of tokens; the last one is always END

        Raises:
            UnknownTokenError: if any part of the text is not a token
        """
        stripped = _WHITESPACE_RE.sub("", text)
        tokens = []
        last_end = 0
        for match in _TOKEN_RE.finditer(stripped):
            if match.start() > last_end:
                raise UnknownTokenError(stripped[last_end:match.start()])
            tokens.append(_classify(match.group()))
            last_end = match.end()
        if last_end < len(stripped):
            raise UnknownTokenError(stripped[last_end:])

        tokens.append(Token.end())
        logger.debug(f"Tokenized {text!r} into {len(tokens)} tokens")
        return tuple(tokens)

    @property
    def tokens(self) -> Tuple[Token, ...]:
        return self._tokens

    @property
    def position(self) -> int:
        return self._position

    @property
    def exhausted(self) -> bool:
        return self._position >= len(self._tokens)

    def remaining(self) -> Tuple[Token, ...]:
        """Tokens not yet read, without advancing the cursor."""
        return self._tokens[self._position:]

    def next_token(self) -> Token:
        """Return the token at the cursor and advance; END once exhausted."""
        if self.exhausted:
            return Token.end()
        token = self._tokens[self._position]
        self._position += 1
        return token

    def reset(self):
        """Rewind the cursor to the first token."""
        self._position = 0

    def __iter__(self) -> Iterator[Token]:
        while not self.exhausted:
            yield self.next_token()

    def __len__(self) -> int:
        return len(self._tokens)

    def __repr__(self) -> str:
        return f"Tokenizer({self.input!r}, position={self._position})"


def make_tokenizer(text: str) -> Tokenizer:
    """Build a tokenizer for text."""
    return Tokenizer(text)
