"""Texture assets. Pixels are never decoded; rendering is out of scope."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from tankarena.core.errors import AssetLoadError

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


@dataclass(frozen=True, slots=True)
class Image:
    name: str
    data: bytes

    @property
    def size_bytes(self) -> int:
        return len(self.data)


class ImageLoader:
    asset_type = Image

    def load(self, path: Path) -> Image:
        try:
            data = path.read_bytes()
        except OSError as exc:
            raise AssetLoadError(path, f"cannot read texture: {exc.strerror}") from exc
        if not data.startswith(PNG_SIGNATURE):
            raise AssetLoadError(path, "texture is not a PNG file")
        return Image(name=path.name, data=data)
