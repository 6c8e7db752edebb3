from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import Field

from ..core.models import ApiModel, RequestBuilder
from ..core.transport import HttpRequest, join_url

IMAGE_GENERATIONS_PATH = "/images/generations"


class ImageModel(str, Enum):
    DALL_E_3 = "dall-e-3"

    @classmethod
    def default(cls) -> "ImageModel":
        return cls.DALL_E_3


class ImageQuality(str, Enum):
    STANDARD = "standard"
    # finer details and greater consistency across the image
    HD = "hd"

    @classmethod
    def default(cls) -> "ImageQuality":
        return cls.STANDARD


class ImageResponseFormat(str, Enum):
    URL = "url"
    B64_JSON = "b64_json"

    @classmethod
    def default(cls) -> "ImageResponseFormat":
        return cls.URL


class ImageSize(str, Enum):
    LARGE = "1024x1024"
    LARGE_WIDE = "1792x1024"
    LARGE_TALL = "1024x1792"

    @classmethod
    def default(cls) -> "ImageSize":
        return cls.LARGE


class ImageStyle(str, Enum):
    # hyper-real and dramatic
    VIVID = "vivid"
    NATURAL = "natural"

    @classmethod
    def default(cls) -> "ImageStyle":
        return cls.VIVID


class CreateImageRequest(ApiModel):
    # A text description of the desired image(s), at most 4000 characters for dall-e-3.
    prompt: str
    model: ImageModel = Field(default_factory=ImageModel.default)
    # dall-e-3 only supports n=1
    n: Optional[int] = None
    quality: Optional[ImageQuality] = None
    response_format: Optional[ImageResponseFormat] = None
    size: Optional[ImageSize] = None
    style: Optional[ImageStyle] = None
    user: Optional[str] = None

    @classmethod
    def new(cls, prompt: str) -> "CreateImageRequest":
        return CreateImageRequestBuilder(prompt=prompt).build()

    def into_request(self, base_url: str) -> HttpRequest:
        return HttpRequest(
            method="POST",
            url=join_url(base_url, IMAGE_GENERATIONS_PATH),
            json=self.to_dict(),
        )


class CreateImageRequestBuilder(RequestBuilder):
    target = CreateImageRequest


class ImageObject(ApiModel):
    # set when response_format is b64_json
    b64_json: Optional[str] = None
    # set when response_format is url
    url: Optional[str] = None
    # the prompt actually used, if it was revised
    revised_prompt: Optional[str] = None


class CreateImageResponse(ApiModel):
    created: int
    data: List[ImageObject]
