"""
Request models for LinguaScribe
Media payloads are held fully in memory as base64 text
"""

import base64
import binascii
import mimetypes
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Union

from ..exceptions import ValidationError


DATA_URI_PATTERN = re.compile(
    r'^data:(?P<mime>[\w.+-]+/[\w.+-]+)(?:;[\w-]+=[\w.+-]+)*;base64,(?P<data>.+)$', re.DOTALL
)
MIME_PATTERN = re.compile(r'^[\w.+-]+/[\w.+-]+$')

# Not every platform's mimetypes table knows these
EXTRA_MEDIA_TYPES = {
    '.m4a': 'audio/mp4',
    '.aac': 'audio/aac',
    '.flac': 'audio/flac',
    '.opus': 'audio/ogg',
    '.weba': 'audio/webm',
    '.webm': 'video/webm',
    '.mkv': 'video/x-matroska',
}

READ_CHUNK_SIZE = 256 * 1024


def guess_media_type(file_path: Union[str, Path]) -> Optional[str]:
    """Guess the MIME type of a media file from its extension"""
    suffix = Path(file_path).suffix.lower()
    if suffix in EXTRA_MEDIA_TYPES:
        return EXTRA_MEDIA_TYPES[suffix]
    mime_type, _ = mimetypes.guess_type(str(file_path))
    return mime_type


def is_media_type(mime_type: Optional[str]) -> bool:
    """True for audio/* and video/* types"""
    return bool(mime_type) and mime_type.split('/', 1)[0] in ('audio', 'video')


@dataclass
class TextRequest:
    """Text submitted for improve/summarize/keywords"""
    text: str

    def __post_init__(self):
        if not isinstance(self.text, str) or not self.text.strip():
            raise ValidationError("Please enter some text to process.")


@dataclass
class MediaPayload:
    """Base64-encoded audio or video with its MIME type"""
    mime_type: str
    data: str
    filename: Optional[str] = None

    def __post_init__(self):
        if not self.mime_type or not MIME_PATTERN.match(self.mime_type):
            raise ValidationError(f"Invalid MIME type: {self.mime_type!r}")
        if not self.data:
            raise ValidationError("Media payload is empty")

    @property
    def is_audio(self) -> bool:
        return self.mime_type.startswith("audio/")

    @property
    def is_video(self) -> bool:
        return self.mime_type.startswith("video/")

    @property
    def size_bytes(self) -> int:
        """Decoded size, computed from the base64 length"""
        padding = self.data.count('=', -2)
        return (len(self.data) * 3) // 4 - padding

    def raw_bytes(self) -> bytes:
        """Decode the payload back to bytes"""
        try:
            return base64.b64decode(self.data, validate=True)
        except (binascii.Error, ValueError) as e:
            raise ValidationError(f"Media payload is not valid base64: {e}")

    def to_data_uri(self) -> str:
        """Format as data:<mimetype>;base64,<encoded_data>"""
        return f"data:{self.mime_type};base64,{self.data}"

    @classmethod
    def from_data_uri(cls, data_uri: str, filename: Optional[str] = None) -> 'MediaPayload':
        """Parse a base64 data URI; MIME parameters such as codecs=opus are dropped"""
        match = DATA_URI_PATTERN.match(data_uri.strip()) if data_uri else None
        if not match:
            raise ValidationError("Expected a data URI of the form 'data:<mimetype>;base64,<encoded_data>'")
        return cls(mime_type=match.group('mime'), data=match.group('data'), filename=filename)

    @classmethod
    def from_bytes(cls, raw: bytes, mime_type: str, filename: Optional[str] = None) -> 'MediaPayload':
        """Encode raw bytes"""
        return cls(
            mime_type=mime_type,
            data=base64.b64encode(raw).decode('utf-8'),
            filename=filename
        )

    @classmethod
    def from_file(
        cls,
        file_path: Union[str, Path],
        progress_callback: Optional[Callable[[int], None]] = None,
        max_bytes: Optional[int] = None
    ) -> 'MediaPayload':
        """
        Read an audio/video file fully into memory and base64-encode it

        Args:
            file_path: Path to the media file
            progress_callback: Called with the percentage read (0-100)
            max_bytes: Reject files larger than this

        Returns:
            MediaPayload for the file

        Raises:
            ValidationError: If the file is missing, empty, too large or not audio/video
        """
        path = Path(file_path).expanduser()
        if not path.exists() or not path.is_file():
            raise ValidationError(f"File not found: {path}")

        mime_type = guess_media_type(path)
        if not is_media_type(mime_type):
            raise ValidationError(f"Not an audio or video file: {path.name}")

        total = path.stat().st_size
        if total == 0:
            raise ValidationError(f"File is empty: {path.name}")
        if max_bytes is not None and total > max_bytes:
            raise ValidationError(
                f"File is too large: {path.name} ({total // (1024 * 1024)} MB, "
                f"limit {max_bytes // (1024 * 1024)} MB)"
            )

        chunks = []
        loaded = 0
        try:
            with open(path, 'rb') as media_file:
                while True:
                    chunk = media_file.read(READ_CHUNK_SIZE)
                    if not chunk:
                        break
                    chunks.append(chunk)
                    loaded += len(chunk)
                    if progress_callback:
                        progress_callback(min(100, round(loaded / total * 100)))
        except OSError as e:
            raise ValidationError(f"Failed to read the selected file: {e}")

        return cls.from_bytes(b"".join(chunks), mime_type, filename=path.name)
