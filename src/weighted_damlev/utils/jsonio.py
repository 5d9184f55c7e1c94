from __future__ import annotations

"""JSON and JSONL reading and writing for pair files and results."""

import json
from pathlib import Path
from typing import Any, Iterable, Iterator, Tuple


class MalformedLineError(ValueError):
    """Raised when a JSONL line cannot be decoded."""


def iter_jsonl(path: Path) -> Iterator[Tuple[int, Any]]:
    """Yield ``(line_number, payload)`` for each non-blank line."""

    with path.open("r", encoding="utf-8") as handle:
        for line_number, line in enumerate(handle, start=1):
            line = line.strip()
            if not line:
                continue
            try:
                yield line_number, json.loads(line)
            except json.JSONDecodeError as exc:
                raise MalformedLineError(f"{path}:{line_number}: {exc.msg}") from exc


def write_jsonl(path: Path, rows: Iterable[Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        for row in rows:
            handle.write(json.dumps(row, ensure_ascii=False) + "\n")


def write_json(path: Path, payload: Any, *, indent: int = 2) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=indent, ensure_ascii=False)
        handle.write("\n")
