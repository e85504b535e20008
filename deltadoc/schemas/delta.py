from pydantic import BaseModel

from deltadoc.core.errors import DecodeError


class PlainTextOut(BaseModel):
    """Plain-text projection of a delta.

    - text: concatenated string inserts
    - ops: number of operations in the delta
    """
    text: str
    ops: int


class DecodeErrorOut(BaseModel):
    """Error detail sent back when a delta can't be decoded.

    - kind: failure identifier, e.g. "unknown_operation"
    - message: human readable description
    - field: offending field name, if any
    - index: offending element of "ops", if any
    """
    kind: str
    message: str
    field: str | None = None
    index: int | None = None

    @classmethod
    def from_error(cls, error: DecodeError) -> "DecodeErrorOut":
        return cls(kind=error.kind, message=str(error), field=error.field, index=error.index)
