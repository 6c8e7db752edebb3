import base64
import json
import struct

from llm_sdk import (
    EmbeddingData,
    EmbeddingEncodingFormat,
    EmbeddingModel,
    EmbeddingRequest,
    EmbeddingRequestBuilder,
    EmbeddingResponse,
)

from .conftest import BASE_URL, EMBEDDING_RESPONSE


def test_single_input_should_serialize():
    req = EmbeddingRequest.new("The food was delicious and the waiter...")

    assert req.to_dict() == {
        "input": "The food was delicious and the waiter...",
        "model": "text-embedding-ada-002",
    }


def test_batch_input_should_serialize_as_list():
    req = EmbeddingRequest.new(("first", "second"))

    assert req.to_dict() == {"input": ["first", "second"], "model": "text-embedding-ada-002"}


def test_custom_request_should_serialize():
    req = (
        EmbeddingRequestBuilder(input="hello")
        .encoding_format(EmbeddingEncodingFormat.BASE64)
        .user("user-42")
        .build()
    )

    assert req.to_dict() == {
        "input": "hello",
        "model": "text-embedding-ada-002",
        "encoding_format": "base64",
        "user": "user-42",
    }


def test_into_request_should_target_embeddings():
    prepared = EmbeddingRequest.new("hello").into_request(BASE_URL)
    assert prepared.url == "https://api.test/v1/embeddings"


def test_response_should_deserialize():
    res = EmbeddingResponse.model_validate(EMBEDDING_RESPONSE)

    assert res.object == "list"
    assert res.model == "text-embedding-ada-002-v2"
    assert [d.index for d in res.data] == [0, 1]
    assert res.data[0].embedding == [0.0023, -0.0093, 0.0158]
    assert res.usage.prompt_tokens == 8


def test_base64_embedding_should_deserialize():
    res = EmbeddingResponse.model_validate({
        "object": "list",
        "data": [{"object": "embedding", "index": 0, "embedding": "AAAAAA=="}],
        "model": "text-embedding-ada-002",
        "usage": {"prompt_tokens": 1, "total_tokens": 1},
    })

    assert res.data[0].embedding == "AAAAAA=="


def test_enum_defaults():
    assert EmbeddingModel.default() == EmbeddingModel.TEXT_EMBEDDING_ADA_002
    assert EmbeddingEncodingFormat.default() == EmbeddingEncodingFormat.FLOAT


def test_request_should_round_trip_through_json():
    req = (
        EmbeddingRequestBuilder(input=["first", "second"])
        .model(EmbeddingModel.TEXT_EMBEDDING_ADA_002)
        .encoding_format(EmbeddingEncodingFormat.FLOAT)
        .user("user-42")
        .build()
    )

    decoded = EmbeddingRequest.model_validate(json.loads(req.to_json()))

    assert decoded == req


def test_dimensions_of_float_and_base64_embeddings():
    floats = EmbeddingData(index=0, embedding=[0.1, 0.2, 0.3], object="embedding")
    packed = base64.b64encode(struct.pack("<3f", 0.1, 0.2, 0.3)).decode("ascii")
    encoded = EmbeddingData(index=0, embedding=packed, object="embedding")

    assert floats.dimensions == 3
    assert encoded.dimensions == 3
