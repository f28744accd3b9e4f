from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

SourceMap = Dict[str, Dict[str, int]]


@dataclass(frozen=True)
class SourceLocation:
    file_path: Optional[Path] = None
    pointer: Optional[str] = None
    line: Optional[int] = None  # 1-based
    column: Optional[int] = None  # 1-based


def _parent_pointer(pointer: str) -> Optional[str]:
    if not pointer:
        return None
    return pointer.rsplit("/", 1)[0]


def lookup_source(
    source_map: Optional[SourceMap], pointer: Optional[str], file_path: Optional[Path] = None
) -> SourceLocation:
    """Locate ``pointer`` in a document.

    A pointer that is not in the map (for example a missing required key)
    resolves to its closest ancestor that is.
    """
    if pointer is None:
        return SourceLocation(file_path=file_path)
    if not source_map:
        return SourceLocation(file_path=file_path, pointer=pointer)

    candidate: Optional[str] = pointer
    while candidate is not None:
        entry = source_map.get(candidate)
        if entry:
            return SourceLocation(
                file_path=file_path,
                pointer=pointer,
                line=entry.get("line"),
                column=entry.get("column"),
            )
        candidate = _parent_pointer(candidate)

    return SourceLocation(file_path=file_path, pointer=pointer)


def format_source(loc: Optional[SourceLocation]) -> str:
    if not loc:
        return ""

    parts = []
    if loc.file_path is not None:
        if loc.line is not None and loc.column is not None:
            parts.append(f"source= {loc.file_path}:{loc.line}:{loc.column}")
        elif loc.line is not None:
            parts.append(f"source= {loc.file_path}:{loc.line}")
        else:
            parts.append(f"source= {loc.file_path}")

    if loc.pointer:
        parts.append(f"pointer= {loc.pointer}")

    if not parts:
        return ""

    return " (" + " ".join(parts) + ")"
