from deltadoc import decode, plain_text
from deltadoc.models import Document, Insert, Operation


def test_plain_text(d1: str, d2: str):
    assert plain_text(decode(d1)) == "Hello\n\nLet's write some code!\n"
    # Same text, no formatting.
    assert plain_text(decode(d2)) == "Hello\n\nLet's write some code!\n"


def test_order():
    doc = decode('{"ops":[{"insert":"a"},{"insert":"b"}]}')
    assert plain_text(doc) == "ab"


def test_embed_ignored():
    doc = decode('{"ops":[{"insert":{"image":"x.png"}}]}')
    assert len(doc) == 1
    assert plain_text(doc) == ""


def test_non_string_inserts_skipped():
    doc = Document(ops=[
        Operation(payload=Insert("a")),
        Operation(payload=Insert(1)),
        Operation(payload=Insert(None)),
        Operation(payload=Insert(True)),
        Operation(payload=Insert(["x"])),
        Operation(payload=Insert("b"), attributes={"bold": True}),
    ])
    assert plain_text(doc) == "ab"


def test_empty():
    assert plain_text(Document()) == ""
    assert plain_text(decode('{"ops":[]}')) == ""
