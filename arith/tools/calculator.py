# arith/tools/calculator.py

import logging

from arith.parsing.parser import Parser

logger = logging.getLogger(__name__)


def calculate(expr: str) -> float:
    """
    Evaluate a basic arithmetic expression.
    Supports +, -, *, / and parentheses; whitespace is ignored.
    Division by zero gives inf or nan rather than raising.
    Examples:
        >>> calculate("2 + 3 * 4")
        14.0
        >>> calculate("(2 + 3) * 4")
        20.0

    Raises:
        ExpressionError: (a ValueError) if the expression is malformed
    """
    result = Parser(expr).parse()
    logger.debug(f"calculate({expr!r}) = {result}")
    return result
