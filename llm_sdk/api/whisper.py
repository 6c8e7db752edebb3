"""
Audio transcription and translation.

Both operations share one request shape and one multipart encoding; the
request type only decides the endpoint and whether a ``language`` hint is sent.
Translation always produces English, so it never carries a language part.
"""

from __future__ import annotations

import base64
from enum import Enum
from typing import Dict, Optional

from pydantic import Field, field_serializer, field_validator

from ..core.models import ApiModel, RequestBuilder
from ..core.transport import HttpRequest, join_url

AUDIO_TRANSCRIPTIONS_PATH = "/audio/transcriptions"
AUDIO_TRANSLATIONS_PATH = "/audio/translations"

AUDIO_FILE_NAME = "file"
AUDIO_MIME_TYPE = "audio/mp3"


class WhisperModel(str, Enum):
    WHISPER_1 = "whisper-1"

    @classmethod
    def default(cls) -> "WhisperModel":
        return cls.WHISPER_1


class WhisperResponseFormat(str, Enum):
    JSON = "json"
    TEXT = "text"
    SRT = "srt"
    VERBOSE_JSON = "verbose_json"
    VTT = "vtt"

    @classmethod
    def default(cls) -> "WhisperResponseFormat":
        return cls.JSON

    @property
    def is_json(self) -> bool:
        return self in (WhisperResponseFormat.JSON, WhisperResponseFormat.VERBOSE_JSON)


class WhisperRequestType(str, Enum):
    TRANSCRIPTION = "transcription"
    TRANSLATION = "translation"

    @classmethod
    def default(cls) -> "WhisperRequestType":
        return cls.TRANSCRIPTION


class WhisperRequest(ApiModel):
    # Raw audio: flac, mp3, mp4, mpeg, mpga, m4a, ogg, wav or webm.
    file: bytes = Field(repr=False)
    model: WhisperModel = Field(default_factory=WhisperModel.default)
    # ISO-639-1 language of the input audio. Ignored for translations.
    language: Optional[str] = None
    # Text to guide the model's style or continue a previous audio segment.
    prompt: Optional[str] = None
    response_format: WhisperResponseFormat = Field(default_factory=WhisperResponseFormat.default)
    # 0 to 1. At 0 the model raises the temperature itself until thresholds are hit.
    temperature: Optional[float] = None
    request_type: WhisperRequestType = Field(default_factory=WhisperRequestType.default, exclude=True)

    # JSON output carries the audio base64-encoded
    @field_serializer("file", when_used="json")
    def encode_file(self, value: bytes) -> str:
        return base64.b64encode(value).decode("ascii")

    @field_validator("file", mode="before")
    @classmethod
    def decode_file(cls, value):
        if isinstance(value, str):
            return base64.b64decode(value)
        return value

    @classmethod
    def transcription(cls, data: bytes) -> "WhisperRequest":
        return WhisperRequestBuilder(file=data, request_type=WhisperRequestType.TRANSCRIPTION).build()

    @classmethod
    def translation(cls, data: bytes) -> "WhisperRequest":
        return WhisperRequestBuilder(file=data, request_type=WhisperRequestType.TRANSLATION).build()

    @property
    def path(self) -> str:
        if self.request_type == WhisperRequestType.TRANSLATION:
            return AUDIO_TRANSLATIONS_PATH
        return AUDIO_TRANSCRIPTIONS_PATH

    def form_fields(self) -> Dict[str, str]:
        """Text parts of the multipart body. Unset values go out as empty strings."""
        fields = {
            "model": self.model.value,
            "response_format": self.response_format.value,
            "prompt": self.prompt or "",
            "temperature": "" if self.temperature is None else str(self.temperature),
        }
        if self.request_type == WhisperRequestType.TRANSCRIPTION:
            fields["language"] = self.language or ""
        return fields

    def into_request(self, base_url: str) -> HttpRequest:
        return HttpRequest(
            method="POST",
            url=join_url(base_url, self.path),
            data=self.form_fields(),
            files={"file": (AUDIO_FILE_NAME, self.file, AUDIO_MIME_TYPE)},
        )


class WhisperRequestBuilder(RequestBuilder):
    target = WhisperRequest


class WhisperResponse(ApiModel):
    text: str
