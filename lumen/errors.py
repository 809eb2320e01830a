class LumenError(Exception):
    """ Base class for all Lumen errors; carries a human-readable reason."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class LumenSyntaxError(LumenError):
    """ Raised when the token stream does not form an expression"""


class LumenInvalidSymbol(LumenError):
    """ Raised when something other than a symbol is used as a binding name"""


class LumenUnboundSymbol(LumenError):
    """ Raised when a symbol is looked up before it is bound"""


class LumenArityError(LumenError):
    """ Raised when a form or function receives the wrong number of arguments"""


class LumenTypeError(LumenError):
    """ Raised when a value has the wrong type for the operation"""
