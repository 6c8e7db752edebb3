from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import Field

from ..core.models import ApiModel, RequestBuilder
from ..core.transport import HttpRequest, join_url

AUDIO_SPEECH_PATH = "/audio/speech"


class SpeechModel(str, Enum):
    TTS_1 = "tts-1"
    TTS_1_HD = "tts-1-hd"

    @classmethod
    def default(cls) -> "SpeechModel":
        return cls.TTS_1


class SpeechVoice(str, Enum):
    ALLOY = "alloy"
    ECHO = "echo"
    FABLE = "fable"
    ONYX = "onyx"
    NOVA = "nova"
    SHIMMER = "shimmer"

    @classmethod
    def default(cls) -> "SpeechVoice":
        return cls.ECHO


class SpeechResponseFormat(str, Enum):
    MP3 = "mp3"
    OPUS = "opus"
    AAC = "aac"
    FLAC = "flac"

    @classmethod
    def default(cls) -> "SpeechResponseFormat":
        return cls.MP3


class SpeechRequest(ApiModel):
    model: SpeechModel = Field(default_factory=SpeechModel.default)
    # The text to generate audio for, at most 4096 characters.
    input: str
    voice: SpeechVoice = Field(default_factory=SpeechVoice.default)
    response_format: SpeechResponseFormat = Field(default_factory=SpeechResponseFormat.default)
    # 0.25 to 4.0
    speed: Optional[float] = None

    @classmethod
    def new(cls, input: str) -> "SpeechRequest":
        return SpeechRequestBuilder(input=input).build()

    def into_request(self, base_url: str) -> HttpRequest:
        return HttpRequest(
            method="POST",
            url=join_url(base_url, AUDIO_SPEECH_PATH),
            json=self.to_dict(),
        )


class SpeechRequestBuilder(RequestBuilder):
    target = SpeechRequest
