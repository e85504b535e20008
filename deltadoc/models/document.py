from typing import Iterable, Tuple

from pydantic import BaseModel, ConfigDict

from deltadoc.models.operation import Operation


class Document(BaseModel):
    """An ordered, immutable sequence of operations: {"ops": [...]} on the wire."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    ops: Tuple[Operation, ...] = ()

    @classmethod
    def from_ops(cls, ops: Iterable[Operation]) -> "Document":
        return cls(ops=tuple(ops))

    def __len__(self) -> int:
        return len(self.ops)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return self.ops == other.ops

    def __hash__(self) -> int:
        return hash(self.ops)

    def plain_text(self) -> str:
        from deltadoc.utils.text import plain_text

        return plain_text(self)
