"""Result types returned by the canvas."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class RenderedImage:
    """An encoded image written by :meth:`shapegen.canvas.Canvas.render`.

    The file belongs to the caller; nothing deletes it automatically.
    """

    path: str
    width: int
    height: int
    mime_type: str

    def __fspath__(self) -> str:
        return self.path

    def exists(self) -> bool:
        return os.path.isfile(self.path)

    @property
    def size_bytes(self) -> int:
        return os.path.getsize(self.path)

    def unlink(self, missing_ok: bool = False) -> None:
        Path(self.path).unlink(missing_ok=missing_ok)
