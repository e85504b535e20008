from deltadoc.core.errors import (
    AmbiguousOperation,
    DecodeError,
    InvalidSyntax,
    MissingField,
    TypeMismatch,
    UnexpectedField,
    UnknownOperation,
)
from deltadoc.models import PAYLOAD_FIELDS, Document, Insert, Operation, OperationPayload
from deltadoc.utils.codec import decode, encode
from deltadoc.utils.text import plain_text

__all__ = [
    "AmbiguousOperation",
    "DecodeError",
    "Document",
    "Insert",
    "InvalidSyntax",
    "MissingField",
    "Operation",
    "OperationPayload",
    "PAYLOAD_FIELDS",
    "TypeMismatch",
    "UnexpectedField",
    "UnknownOperation",
    "decode",
    "encode",
    "plain_text",
]
