"""Errors raised while tokenizing or evaluating an expression."""


class ExpressionError(ValueError):
    """Base class for every tokenize/parse failure."""


class UnknownTokenError(ExpressionError):
    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Unknown token: {text}")


class UnexpectedTokenError(ExpressionError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"Unexpected token: {value}")


class MismatchedParenthesesError(ExpressionError):
    def __init__(self):
        super().__init__("Mismatched parentheses")


class ExpectedNumberError(ExpressionError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"Expected a number, but got: {value}")


class NestingTooDeepError(ExpressionError):
    def __init__(self):
        super().__init__("Expression is nested too deeply to evaluate")
