from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from deltadoc.models.document import Document


def plain_text(doc: "Document") -> str:
    """
    Concatenate the string inserts of `doc` in order.
    Embeds (non-string inserts) and other payload kinds contribute nothing.
    """
    return "".join(
        op.payload.value
        for op in doc.ops
        if op.is_insert and isinstance(op.payload.value, str)
    )
