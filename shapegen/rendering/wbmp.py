"""Pillow save plugin for WBMP (Wireless Bitmap, type 0).

Pillow reads and writes most common formats but has no WBMP writer. Importing
this module registers one under the ``"WBMP"`` format name.

Layout: a type byte (0), a fixed-header byte (0), width and height as
multi-byte integers, then one bit per pixel, rows padded to whole bytes,
most significant bit first, 1 = white.
"""

from __future__ import annotations

from typing import IO

from PIL import Image

MIME = "image/vnd.wap.wbmp"


def encode_multibyte(value: int) -> bytes:
    """Encode *value* as a WBMP multi-byte integer (7 bits per byte, big-endian)."""
    if value < 0:
        raise ValueError(f"Cannot encode negative value {value}")
    groups = [value & 0x7F]
    value >>= 7
    while value:
        groups.append(0x80 | (value & 0x7F))
        value >>= 7
    return bytes(reversed(groups))


def _save(im: Image.Image, fp: IO[bytes], filename: str | bytes) -> None:
    if im.mode != "1":
        raise OSError(f"cannot write mode {im.mode} as WBMP")
    fp.write(b"\x00\x00")
    fp.write(encode_multibyte(im.width))
    fp.write(encode_multibyte(im.height))
    # mode "1" raw packing already matches WBMP: MSB first, padded rows, 1 = white
    fp.write(im.tobytes("raw", "1"))


Image.register_save("WBMP", _save)
Image.register_extension("WBMP", ".wbmp")
Image.register_mime("WBMP", MIME)
