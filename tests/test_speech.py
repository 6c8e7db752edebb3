import json

from llm_sdk import SpeechModel, SpeechRequest, SpeechRequestBuilder, SpeechResponseFormat, SpeechVoice

from .conftest import BASE_URL


def test_minimal_request_should_serialize():
    req = SpeechRequest.new("The quick brown fox jumped over the lazy dog.")

    assert req.to_dict() == {
        "model": "tts-1",
        "input": "The quick brown fox jumped over the lazy dog.",
        "voice": "echo",
        "response_format": "mp3",
    }


def test_custom_request_should_serialize():
    req = (
        SpeechRequestBuilder(input="Hello")
        .model(SpeechModel.TTS_1_HD)
        .voice(SpeechVoice.NOVA)
        .response_format(SpeechResponseFormat.FLAC)
        .speed(1.5)
        .build()
    )

    assert req.to_dict() == {
        "model": "tts-1-hd",
        "input": "Hello",
        "voice": "nova",
        "response_format": "flac",
        "speed": 1.5,
    }


def test_into_request_should_target_speech():
    prepared = SpeechRequest.new("Hello").into_request(BASE_URL + "/")

    assert prepared.url == "https://api.test/v1/audio/speech"
    assert prepared.json["input"] == "Hello"


def test_enum_defaults():
    assert SpeechModel.default() == SpeechModel.TTS_1
    assert SpeechVoice.default() == SpeechVoice.ECHO
    assert SpeechResponseFormat.default() == SpeechResponseFormat.MP3


def test_request_should_round_trip_through_json():
    req = (
        SpeechRequestBuilder(input="Good evening.")
        .model(SpeechModel.TTS_1_HD)
        .voice(SpeechVoice.SHIMMER)
        .response_format(SpeechResponseFormat.OPUS)
        .speed(0.75)
        .build()
    )

    decoded = SpeechRequest.model_validate(json.loads(req.to_json()))

    assert decoded == req
