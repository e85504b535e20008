import pytest

D1 = '''{
  "ops": [ { "insert": "Hello\\n\\nLet's write some code!\\n" } ]
}'''

D2 = '''{
  "ops": [
    {
      "attributes": {
        "bold": true
      },
      "insert": "Hello"
    },
    {
      "insert": "\\n\\nLet's write some "
    },
    {
      "attributes": {
        "italic": true
      },
      "insert": "code"
    },
    {
      "insert": "!\\n"
    }
  ]
}'''


@pytest.fixture
def d1() -> str:
    return D1


@pytest.fixture
def d2() -> str:
    return D2
