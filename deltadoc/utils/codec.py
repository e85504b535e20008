import re
from typing import Any, Dict

from pydantic import ValidationError

from deltadoc.core.errors import (
    AmbiguousOperation,
    DecodeError,
    InvalidSyntax,
    MissingField,
    TypeMismatch,
    UnexpectedField,
    UnknownOperation,
)
from deltadoc.models.document import Document

# pydantic error type -> DecodeError kind
ERROR_KINDS: Dict[str, type] = {
    "json_invalid": InvalidSyntax,
    "finite_number": InvalidSyntax,
    "missing": MissingField,
    "missing_operation": MissingField,
    "unknown_operation": UnknownOperation,
    "ambiguous_operation": AmbiguousOperation,
    "extra_forbidden": UnexpectedField,
    "unexpected_field": UnexpectedField,
    "model_type": TypeMismatch,
    "model_attributes_type": TypeMismatch,
    "dict_type": TypeMismatch,
    "list_type": TypeMismatch,
    "tuple_type": TypeMismatch,
}

_POSITION = re.compile(r"line (\d+) column (\d+)")


def _to_decode_error(error: ValidationError) -> DecodeError:
    """Turn the first pydantic error into a DecodeError, keeping loc as field/index."""
    details: Dict[str, Any] = error.errors(include_url=False)[0]
    kind = ERROR_KINDS.get(details["type"], DecodeError)
    loc = details["loc"]
    ctx = details.get("ctx") or {}

    if kind is InvalidSyntax:
        position = _POSITION.search(str(ctx.get("error", "")))
        if position is None:
            return InvalidSyntax(details["msg"])
        return InvalidSyntax(details["msg"], lineno=int(position[1]), colno=int(position[2]))

    # loc looks like ("ops", 3, "attributes"); the field is the name after the index
    index = next((part for part in loc if isinstance(part, int)), None)
    names = loc[loc.index(index) + 1:] if index is not None else loc
    field = ctx.get("field") or next((part for part in reversed(names) if isinstance(part, str)), None)
    return kind(details["msg"], field=field, index=index)


def decode(raw: str | bytes) -> Document:
    """
    Decode delta JSON text into a Document.
    Raises a DecodeError subclass if the text is not a valid delta.
    """
    try:
        return Document.model_validate_json(raw)
    except ValidationError as e:
        raise _to_decode_error(e) from e


def encode(doc: Document) -> str:
    """Encode a Document as compact delta JSON."""
    return doc.model_dump_json()
