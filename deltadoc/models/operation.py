import math
from types import MappingProxyType
from typing import Annotated, Any, Dict, Mapping

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    JsonValue,
    PlainSerializer,
    ValidationInfo,
    model_serializer,
    model_validator,
)
from pydantic_core import PydanticCustomError, to_json


def freeze(value: Any) -> Any:
    """
    Return a read-only copy of a JSON value: objects become key-sorted
    MappingProxyType, arrays become tuples.
    """
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze(value[key]) for key in sorted(value)})
    if isinstance(value, (list, tuple)):
        return tuple(freeze(item) for item in value)
    if isinstance(value, float) and not math.isfinite(value):
        raise PydanticCustomError("finite_number", "Input should be a finite number")
    return value


def thaw(value: Any) -> Any:
    """Inverse of freeze, giving plain dicts and lists."""
    if isinstance(value, Mapping):
        return {key: thaw(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [thaw(item) for item in value]
    return value


def canonical(value: Any) -> bytes:
    # bool, int and float encode differently, so true != 1 != 1.0
    return to_json(thaw(value))


FrozenJson = Annotated[
    JsonValue, BeforeValidator(thaw), AfterValidator(freeze), PlainSerializer(thaw)
]
Attributes = Annotated[
    Dict[str, JsonValue], BeforeValidator(thaw), AfterValidator(freeze), PlainSerializer(thaw)
]


class Insert(BaseModel):
    """
    Insert payload. `value` is any JSON value: usually text, but embeds
    such as {"image": "x.png"} are inserted as objects.
    """
    model_config = ConfigDict(frozen=True)

    value: FrozenJson = None

    def __init__(self, value: Any = None, **data: Any):
        super().__init__(value=value, **data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Insert):
            return NotImplemented
        return type(self) is type(other) and canonical(self.value) == canonical(other.value)

    def __hash__(self) -> int:
        return hash((type(self), canonical(self.value)))


# Open union of payload kinds; add new variants here and in PAYLOAD_FIELDS.
OperationPayload = Insert

# Reserved element key -> payload class. Decode and encode both use this table.
PAYLOAD_FIELDS: Dict[str, type] = {
    "insert": Insert,
}

ATTRIBUTES_FIELD = "attributes"


def payload_field(payload: OperationPayload) -> str:
    """Return the reserved element key for a payload."""
    for name, kind in PAYLOAD_FIELDS.items():
        if type(payload) is kind:
            return name
    raise TypeError(f"Unknown payload kind: {type(payload).__name__}")


class Operation(BaseModel):
    """
    One delta operation.

    - payload: what the operation does (currently always an Insert)
    - attributes: formatting attached to the payload, e.g. {"bold": True}.
      Read-only, keys sorted; empty means no formatting.

    On the wire an operation is {"insert": <value>, "attributes": {...}}.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    payload: OperationPayload
    attributes: Attributes = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def from_wire(cls, data: Any, info: ValidationInfo) -> Any:
        # Only JSON input uses the wire shape, Python callers pass payload=...
        if info.mode != "json" or not isinstance(data, dict):
            return data

        kinds = [key for key in data if key in PAYLOAD_FIELDS]
        others = [key for key in data if key not in PAYLOAD_FIELDS and key != ATTRIBUTES_FIELD]
        if not kinds:
            if others:
                raise PydanticCustomError(
                    "unknown_operation", "unknown operation '{field}'", {"field": others[0]}
                )
            raise PydanticCustomError(
                "missing_operation", "missing operation field '{field}'", {"field": "insert"}
            )
        if len(kinds) > 1:
            raise PydanticCustomError(
                "ambiguous_operation",
                "operation has more than one kind: {kinds}",
                {"field": kinds[1], "kinds": ", ".join(kinds)},
            )
        if others:
            raise PydanticCustomError(
                "unexpected_field", "unexpected field '{field}'", {"field": others[0]}
            )

        name = kinds[0]
        element: Dict[str, Any] = {"payload": PAYLOAD_FIELDS[name](freeze(data[name]))}
        if ATTRIBUTES_FIELD in data:
            element[ATTRIBUTES_FIELD] = data[ATTRIBUTES_FIELD]
        return element

    @model_serializer
    def to_wire(self) -> Dict[str, Any]:
        element: Dict[str, Any] = {payload_field(self.payload): thaw(self.payload.value)}
        if self.attributes:
            element[ATTRIBUTES_FIELD] = thaw(self.attributes)
        return element

    @property
    def is_insert(self) -> bool:
        return type(self.payload) is Insert

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Operation):
            return NotImplemented
        return self.payload == other.payload and canonical(self.attributes) == canonical(other.attributes)

    def __hash__(self) -> int:
        return hash((self.payload, canonical(self.attributes)))
