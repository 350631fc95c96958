
class MonloxError(Exception):
    """ Base class for all Monlox host-level errors"""
    pass

class MonloxSyntaxError(MonloxError):
    """ Raised by the lexer or parser when source text cannot be read"""

    def __init__(self, message: str, line: int):
        super().__init__(f"line {line}: {message}")
        self.message = message
        self.line = line
