import json

from llm_sdk import (
    CreateImageRequest,
    CreateImageRequestBuilder,
    CreateImageResponse,
    ImageModel,
    ImageQuality,
    ImageResponseFormat,
    ImageSize,
    ImageStyle,
)

from .conftest import BASE_URL, IMAGE_RESPONSE


def test_minimal_request_should_serialize():
    req = CreateImageRequest.new("draw a cute caterpillar")
    assert req.to_dict() == {"prompt": "draw a cute caterpillar", "model": "dall-e-3"}


def test_custom_request_should_serialize():
    req = (
        CreateImageRequestBuilder(prompt="draw a cute caterpillar")
        .style(ImageStyle.NATURAL)
        .quality(ImageQuality.HD)
        .size(ImageSize.LARGE_WIDE)
        .response_format(ImageResponseFormat.B64_JSON)
        .build()
    )

    assert req.to_dict() == {
        "prompt": "draw a cute caterpillar",
        "model": "dall-e-3",
        "style": "natural",
        "quality": "hd",
        "size": "1792x1024",
        "response_format": "b64_json",
    }


def test_into_request_should_target_generations():
    prepared = CreateImageRequest.new("a cat").into_request(BASE_URL)

    assert prepared.method == "POST"
    assert prepared.url == "https://api.test/v1/images/generations"
    assert prepared.json == {"prompt": "a cat", "model": "dall-e-3"}
    assert not prepared.is_multipart


def test_enum_defaults():
    assert ImageModel.default() == ImageModel.DALL_E_3
    assert ImageQuality.default() == ImageQuality.STANDARD
    assert ImageResponseFormat.default() == ImageResponseFormat.URL
    assert ImageSize.default() == ImageSize.LARGE
    assert ImageStyle.default() == ImageStyle.VIVID


def test_response_should_deserialize():
    res = CreateImageResponse.model_validate(IMAGE_RESPONSE)

    assert res.created == 1701273000
    assert len(res.data) == 1
    assert res.data[0].url == "https://images.test/chicken.png"
    assert res.data[0].b64_json is None
    assert res.data[0].revised_prompt == "A chicken pecking at a bowl of rice"


def test_request_should_round_trip_through_json():
    req = (
        CreateImageRequestBuilder(prompt="a lighthouse at dusk")
        .n(1)
        .quality(ImageQuality.HD)
        .response_format(ImageResponseFormat.URL)
        .size(ImageSize.LARGE_TALL)
        .style(ImageStyle.VIVID)
        .user("user-42")
        .build()
    )

    decoded = CreateImageRequest.model_validate(json.loads(req.to_json()))

    assert decoded == req
