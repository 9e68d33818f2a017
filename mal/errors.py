

class MalError(Exception):
    """ Base class for all mal errors"""
    kind = "MalError"


class ReadError(MalError):
    """ Raised when source text cannot be tokenized or parsed"""
    kind = "ReadError"

    def __init__(self, position: int, message: str):
        super().__init__(f"{message} at position {position}")
        self.position = position


class EvalError(MalError):
    """ Raised when an expression cannot be evaluated"""
    kind = "EvalError"


class UnboundSymbolError(EvalError):
    """ Raised when a symbol is used before it is bound"""

    def __init__(self, name: str):
        super().__init__(f"'{name}' not found")
        self.name = name


class ArityError(EvalError):
    """ Raised when the number of arguments passed to a function is incorrect"""


class MalTypeError(EvalError):
    """ Raised when the types of arguments passed to a function are incorrect"""


class NotCallableError(EvalError):
    """ Raised when a non-function value is applied"""


class SpecialFormError(EvalError):
    """ Raised when a special form does not have the expected shape"""
