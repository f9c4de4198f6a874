# tests/unit/mdhelp_io/test_generics.py
# Unit tests for JSON read/write helpers

import pytest

from mdhelp.core.exceptions import JSONParsingError
from mdhelp.mdhelp_io.generics import read_json_safe, write_json_safe


# * Verify JSON round trip creates parent directories
def test_write_then_read(tmp_path):
    path = tmp_path / "a" / "b" / "data.json"
    write_json_safe({"style": "auto", "max_width": None}, path)

    assert read_json_safe(path) == {"style": "auto", "max_width": None}


# * Verify invalid JSON reports a numbered snippet pointing at the bad line
def test_invalid_json_snippet(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text('{\n  "style": "auto",\n  "max_width": ,\n}\n', encoding="utf-8")

    with pytest.raises(JSONParsingError) as exc_info:
        read_json_safe(path)

    message = str(exc_info.value)
    assert "Invalid JSON" in message
    assert ">>>   3:" in message


# * Verify non-object JSON is rejected
def test_non_object_rejected(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(JSONParsingError, match="Expected a JSON object"):
        read_json_safe(path)


# * Verify a missing file is reported as a parsing error
def test_missing_file(tmp_path):
    with pytest.raises(JSONParsingError, match="Error reading JSON"):
        read_json_safe(tmp_path / "missing.json")
