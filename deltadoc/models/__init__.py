from deltadoc.models.operation import (
    ATTRIBUTES_FIELD,
    PAYLOAD_FIELDS,
    Insert,
    Operation,
    OperationPayload,
    payload_field,
)
from deltadoc.models.document import Document

__all__ = [
    "ATTRIBUTES_FIELD",
    "PAYLOAD_FIELDS",
    "Document",
    "Insert",
    "Operation",
    "OperationPayload",
    "payload_field",
]
