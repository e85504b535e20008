class DecodeError(ValueError):
    """
    Raised when delta text can't be turned into a Document.

    - kind: stable identifier for the failure, e.g. "missing_field"
    - field: name of the offending field, if any
    - index: position of the offending element in "ops", if any
    """
    kind = "decode_error"

    def __init__(self, message: str, field: str | None = None, index: int | None = None):
        super().__init__(message)
        self.message = message
        self.field = field
        self.index = index

    def __str__(self) -> str:
        if self.index is None:
            return self.message
        return f"ops[{self.index}]: {self.message}"


class InvalidSyntax(DecodeError):
    """Input is not well-formed JSON."""
    kind = "syntax_error"

    def __init__(self, message: str, lineno: int | None = None, colno: int | None = None):
        super().__init__(message)
        self.lineno = lineno
        self.colno = colno


class MissingField(DecodeError):
    kind = "missing_field"


class UnknownOperation(DecodeError):
    kind = "unknown_operation"


class AmbiguousOperation(DecodeError):
    kind = "ambiguous_operation"


class UnexpectedField(DecodeError):
    kind = "unexpected_field"


class TypeMismatch(DecodeError):
    kind = "type_mismatch"
