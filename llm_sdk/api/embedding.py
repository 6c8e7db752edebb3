from __future__ import annotations

import base64
from enum import Enum
from typing import List, Optional, Sequence, Union

from pydantic import Field

from ..core.models import ApiModel, RequestBuilder
from ..core.transport import HttpRequest, join_url

EMBEDDINGS_PATH = "/embeddings"

# A single string or a batch of strings.
EmbeddingInput = Union[str, List[str]]


class EmbeddingModel(str, Enum):
    TEXT_EMBEDDING_ADA_002 = "text-embedding-ada-002"

    @classmethod
    def default(cls) -> "EmbeddingModel":
        return cls.TEXT_EMBEDDING_ADA_002


class EmbeddingEncodingFormat(str, Enum):
    FLOAT = "float"
    BASE64 = "base64"

    @classmethod
    def default(cls) -> "EmbeddingEncodingFormat":
        return cls.FLOAT


class EmbeddingRequest(ApiModel):
    input: EmbeddingInput
    model: EmbeddingModel = Field(default_factory=EmbeddingModel.default)
    encoding_format: Optional[EmbeddingEncodingFormat] = None
    user: Optional[str] = None

    @classmethod
    def new(cls, input: Union[str, Sequence[str]]) -> "EmbeddingRequest":
        if not isinstance(input, str):
            input = list(input)
        return EmbeddingRequestBuilder(input=input).build()

    def into_request(self, base_url: str) -> HttpRequest:
        return HttpRequest(
            method="POST",
            url=join_url(base_url, EMBEDDINGS_PATH),
            json=self.to_dict(),
        )


class EmbeddingRequestBuilder(RequestBuilder):
    target = EmbeddingRequest


class EmbeddingUsage(ApiModel):
    prompt_tokens: int
    total_tokens: int


class EmbeddingData(ApiModel):
    """One embedding vector, in the order of the request's inputs."""
    index: int = 0
    # floats, or a base64 string when encoding_format is base64
    embedding: Union[List[float], str]
    object: str

    @property
    def dimensions(self) -> int:
        if isinstance(self.embedding, str):
            # base64 of packed little-endian float32 values
            return len(base64.b64decode(self.embedding)) // 4
        return len(self.embedding)


class EmbeddingResponse(ApiModel):
    object: str
    data: List[EmbeddingData]
    model: str
    usage: EmbeddingUsage
