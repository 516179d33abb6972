"""An RGBA image held as 8-bit channels, with its Y axis zero at the top."""

from __future__ import annotations

import io
import struct
from dataclasses import dataclass
from typing import Optional, Union

from PIL import Image as PILImage

_CHANNELS = 4
_PACKED = struct.Struct("<I")

BytesLike = Union[bytes, bytearray, memoryview]


def _check_channel(name: str, value: int) -> None:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"channel {name} out of range 0..255: {value}")


def _check_dimension(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative: {value}")


@dataclass(frozen=True)
class Pixel:
    """One RGBA pixel; alpha defaults to opaque."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            _check_channel(name, getattr(self, name))

    def __bytes__(self) -> bytes:
        return bytes((self.r, self.g, self.b, self.a))

    def pack(self) -> int:
        """Return the pixel as a 32-bit value whose bytes, little-endian, are R, G, B, A."""
        return _PACKED.unpack(bytes(self))[0]

    @classmethod
    def from_packed(cls, pack_color: int) -> "Pixel":
        """Build a pixel from a value produced by ``pack``."""
        if not 0 <= pack_color <= 0xFFFFFFFF:
            raise ValueError(f"packed color out of 32-bit range: {pack_color}")
        return cls(*_PACKED.pack(pack_color))


_TRANSPARENT = Pixel(0, 0, 0, 0)


class Image:
    """A width by height grid of RGBA pixels stored row after row."""

    def __init__(self, width: int, height: int, pixel: Pixel) -> None:
        _check_dimension("width", width)
        _check_dimension("height", height)
        if width == 0 or height == 0:
            self._width = 0
            self._height = 0
            self._data = bytearray()
            return
        self._width = width
        self._height = height
        self._data = bytearray(bytes(pixel) * (width * height))

    @classmethod
    def from_data(cls, width: int, height: int, data: Optional[BytesLike]) -> "Image":
        """Copy ``width * height`` RGBA pixels from ``data``; None gives an empty image."""
        image = cls(0, 0, _TRANSPARENT)
        if data is None:
            return image
        _check_dimension("width", width)
        _check_dimension("height", height)
        size = width * height * _CHANNELS
        raw = bytes(data)
        if len(raw) < size:
            raise ValueError(f"need {size} bytes of pixel data, got {len(raw)}")
        image._width = width
        image._height = height
        image._data = bytearray(raw[:size])
        return image

    @classmethod
    def _decode(cls, source: Union[str, io.BytesIO]) -> "Image":
        try:
            with PILImage.open(source) as opened:
                rgba = opened.convert("RGBA")
        except (OSError, ValueError):
            return cls(0, 0, _TRANSPARENT)
        return cls.from_data(rgba.width, rgba.height, rgba.tobytes())

    @classmethod
    def from_file(cls, file_path: str) -> "Image":
        """Decode an image file; an unreadable file gives an empty image."""
        return cls._decode(file_path)

    @classmethod
    def from_memory(cls, data: Optional[BytesLike]) -> "Image":
        """Decode an encoded image held in memory; bad data gives an empty image."""
        if not data:
            return cls(0, 0, _TRANSPARENT)
        return cls._decode(io.BytesIO(bytes(data)))

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def pixel_size(self) -> tuple[int, int]:
        return self._width, self._height

    @property
    def bytes_data(self) -> bytes:
        """The RGBA bytes, row after row from the top."""
        return bytes(self._data)

    @property
    def pixels_data(self) -> list[int]:
        """Every pixel in packed form, row after row from the top."""
        return [value for (value,) in _PACKED.iter_unpack(self._data)]

    def _offset(self, x: int, y: int) -> Optional[int]:
        if not (0 <= x < self._width and 0 <= y < self._height):
            return None
        return (x + y * self._width) * _CHANNELS

    def get_pixel(self, x: int, y: int) -> Pixel:
        """Return the pixel at (x, y), or a transparent black one outside the image."""
        offset = self._offset(x, y)
        if offset is None:
            return _TRANSPARENT
        return Pixel(*self._data[offset:offset + _CHANNELS])

    def set_pixel(self, x: int, y: int, pixel: Pixel) -> None:
        """Set the pixel at (x, y); positions outside the image are ignored."""
        offset = self._offset(x, y)
        if offset is not None:
            self._data[offset:offset + _CHANNELS] = bytes(pixel)

    def vertical_flip(self) -> None:
        """Reverse the order of the rows."""
        if not self._data:
            return
        row = self._width * _CHANNELS
        rows = [self._data[start:start + row] for start in range(0, len(self._data), row)]
        self._data = bytearray(b"".join(reversed(rows)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Image):
            return NotImplemented
        return self.pixel_size == other.pixel_size and self._data == other._data

    def __repr__(self) -> str:
        return f"Image(width={self._width}, height={self._height})"