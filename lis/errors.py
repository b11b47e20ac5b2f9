

class LisError(Exception):
    """ Base class for all lis errors"""
    pass

class LisSyntaxError(LisError):
    """ Raised when the reader cannot build an expression from the tokens"""

class LisUnexpectedEOF(LisSyntaxError):
    """ Raised when the reader runs out of tokens in the middle of a form"""

class LisUnexpectedCloseParen(LisSyntaxError):
    """ Raised on a ')' with no matching '('"""

class LisUnboundVariable(LisError):
    """ Raised when a symbol is not bound anywhere in the environment chain"""

    def __init__(self, name: str, message: str | None = None):
        super().__init__(message or f"Unbound variable: {name}")
        self.name = name

class LisTypeError(LisError):
    """ Raised when a value of the wrong kind is used"""

class LisNotCallable(LisError):
    """ Raised when the head of an application is not a procedure"""

class LisArityError(LisError):
    """ Raised when the number of arguments passed to a procedure is incorrect"""
