"""Decoding and encoding helpers for pixel buffers."""
from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from PIL import Image, UnidentifiedImageError

from .buffer import PixelBuffer
from .errors import InvalidArgument

BufferSource = Union[PixelBuffer, Image.Image, str, Path]


def load_buffer(path: Path | str) -> PixelBuffer:
    """Decode the image at ``path`` into an RGBA buffer."""

    try:
        with Image.open(path) as image:
            image.load()
            return PixelBuffer.from_image(image)
    except (OSError, UnidentifiedImageError) as exc:
        raise InvalidArgument(f"Unable to decode image {str(path)!r}: {exc}") from exc


def resolve_buffer(source: BufferSource, *, base_path: Optional[Path] = None) -> PixelBuffer:
    """Turn a buffer, Pillow image or image path into a :class:`PixelBuffer`."""

    if isinstance(source, PixelBuffer):
        return source
    if isinstance(source, Image.Image):
        return PixelBuffer.from_image(source)
    if isinstance(source, (str, Path)):
        path = Path(source)
        if base_path is not None and not path.is_absolute():
            path = base_path / path
        return load_buffer(path)
    raise InvalidArgument(f"Unsupported image source of type {type(source).__name__}")


def save_buffer(buffer: PixelBuffer, output_path: Path | str) -> Path:
    target = Path(output_path)
    target.parent.mkdir(parents=True, exist_ok=True)
    buffer.to_image().save(target)
    return target


__all__ = ["BufferSource", "load_buffer", "resolve_buffer", "save_buffer"]
