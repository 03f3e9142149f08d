"""
File input boundary.

SelectedFile is the only thing the UI hands to the pipeline: a name, a size,
a MIME type and a way to fetch the bytes. Construct it where the file
arrives (Streamlit upload, path on disk, raw bytes in tests).
"""

from __future__ import annotations

import asyncio
import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Union

from core.errors import FileReadFailed


@dataclass(frozen=True)
class SelectedFile:
    name: str
    size: int
    mime_type: str
    reader: Callable[[], bytes]

    @classmethod
    def from_upload(cls, uploaded: Any) -> "SelectedFile":
        """Wrap a Streamlit UploadedFile (name / size / type / getvalue())."""
        return cls(
            name=uploaded.name,
            size=int(uploaded.size),
            mime_type=uploaded.type or "",
            reader=uploaded.getvalue,
        )

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "SelectedFile":
        p = Path(path)
        mime, _ = mimetypes.guess_type(p.name)
        return cls(
            name=p.name,
            size=p.stat().st_size,
            mime_type=mime or "",
            reader=p.read_bytes,
        )

    @classmethod
    def from_bytes(cls, name: str, data: bytes, *, mime_type: str = "text/csv") -> "SelectedFile":
        return cls(name=name, size=len(data), mime_type=mime_type, reader=lambda: data)


def decode_csv_bytes(data: bytes) -> str:
    """UTF-8 with the BOM stripped; undecodable bytes become U+FFFD."""
    return data.decode("utf-8-sig", errors="replace")


async def read_selected_file(selected: SelectedFile) -> str:
    """Materialize the whole file as text. Raises FileReadFailed on I/O errors."""
    try:
        data = await asyncio.to_thread(selected.reader)
    except OSError as exc:
        raise FileReadFailed(f"Could not read {selected.name!r}: {exc}") from exc
    return decode_csv_bytes(data)
