"""Image ingestion — media type validation, base64 encoding and preview handles."""
import base64
from dataclasses import dataclass
from typing import BinaryIO

from xray_assist.constants import (
    ALLOWED_MEDIA_TYPES,
    MSG_PREVIEW_RELEASED,
    MSG_READ_FAILED,
)
from xray_assist.errors import EncodingFailure, PreviewReleased, UnsupportedMediaType


@dataclass(frozen=True)
class SelectedImage:
    name: str
    media_type: str
    source: BinaryIO

    @classmethod
    def from_upload(cls, upload) -> "SelectedImage":
        """Wrap a Streamlit UploadedFile (a BytesIO with .name and .type)."""
        return cls(name=upload.name, media_type=upload.type or "", source=upload)

    def read(self) -> bytes:
        try:
            self.source.seek(0)
            return self.source.read()
        except (OSError, ValueError) as exc:
            raise EncodingFailure(MSG_READ_FAILED % (self.name, exc)) from exc


class PreviewHandle:
    """Revocable reference the page uses to show the selected image."""

    def __init__(self, image: SelectedImage) -> None:
        self._image: SelectedImage | None = image
        self._name = image.name

    @property
    def released(self) -> bool:
        return self._image is None

    def content(self) -> bytes:
        match self._image:
            case None:
                raise PreviewReleased(MSG_PREVIEW_RELEASED % self._name)
            case image:
                return image.read()

    def release(self) -> None:
        self._image = None


# ── pure helpers ──────────────────────────────────────────────────────────────


def normalize_media_type(media_type: str) -> str:
    return media_type.split(";", 1)[0].strip().lower()


def validate(image: SelectedImage) -> None:
    match normalize_media_type(image.media_type):
        case t if t in ALLOWED_MEDIA_TYPES:
            return
        case _:
            raise UnsupportedMediaType(image.media_type)


def encode(image: SelectedImage) -> str:
    data = image.read()
    return base64.standard_b64encode(data).decode("ascii")


def make_preview(image: SelectedImage) -> PreviewHandle:
    return PreviewHandle(image)
