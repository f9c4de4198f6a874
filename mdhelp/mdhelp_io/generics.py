# mdhelp/mdhelp_io/generics.py
# Generic JSON & filesystem helpers used by the settings layer

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Union

from ..core.verbose import vlog_file_read, vlog_file_write


def ensure_parent(path: Union[Path, str]) -> None:
    # create parent directories for any file path
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)


# write JSON w/ UTF-8 encoding, creating parent dirs as needed
def write_json_safe(obj: dict[str, Any], path: Path) -> None:
    ensure_parent(path)
    content = json.dumps(obj, indent=2)
    path.write_text(content, encoding="utf-8")
    vlog_file_write(path, len(content))


# read JSON w/ UTF-8 encoding, return dict
def read_json_safe(path: Path) -> dict[str, Any]:
    from ..core.exceptions import JSONParsingError

    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise JSONParsingError(f"Error reading JSON from {path}: {e}") from e
    vlog_file_read(path, len(text))

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        # trimmed snippet of the offending JSON for the error message
        lines = text.split("\n")
        # JSONDecodeError uses 1-based line numbers
        line_num = e.lineno - 1
        snippet_start = max(0, line_num - 2)
        snippet_end = min(len(lines), line_num + 3)

        numbered_lines = []
        for i, line in enumerate(lines[snippet_start:snippet_end], start=snippet_start + 1):
            marker = ">>> " if i == e.lineno else "    "
            numbered_lines.append(f"{marker}{i:3}: {line}")

        snippet = "\n".join(numbered_lines)
        raise JSONParsingError(f"Invalid JSON in {path}:\n{snippet}\nError: {e.msg}") from e

    if not isinstance(data, dict):
        raise JSONParsingError(f"Expected a JSON object in {path}, got {type(data).__name__}")
    return data

