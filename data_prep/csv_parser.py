"""
Quote-aware CSV tokenizer.

Deliberately simpler than the csv module: a double quote only toggles the
in-quotes state and is never emitted, so `""` escapes are not supported.
Blank lines are dropped and every field is whitespace-trimmed.
"""

from __future__ import annotations

from typing import List

RawTable = List[List[str]]


def split_line(line: str, delimiter: str = ",") -> List[str]:
    fields: List[str] = []
    current: List[str] = []
    in_quotes = False

    for ch in line:
        if ch == '"':
            in_quotes = not in_quotes
        elif ch == delimiter and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(ch)

    fields.append("".join(current).strip())
    return fields


def parse_csv(text: str) -> RawTable:
    """Tokenize CSV text into rows of string fields. Never raises."""
    lines = [line for line in text.split("\n") if line.strip() != ""]
    return [split_line(line) for line in lines]
