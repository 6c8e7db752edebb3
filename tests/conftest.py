import json

import httpx
import pytest

from llm_sdk import Client

BASE_URL = "https://api.test/v1"

TOOL_CALL_COMPLETION = """{
  "id": "chatcmpl-8QNhLNrDqYIDpBZWpnhY4WpwDdxjJ",
  "object": "chat.completion",
  "created": 1701273000,
  "model": "gpt-3.5-turbo-1106",
  "system_fingerprint": "fp_eeff13170a",
  "choices": [
    {
      "index": 0,
      "message": {
        "role": "assistant",
        "content": null,
        "tool_calls": [
          {
            "id": "call_NAhJK3UXpaH2AxbCNTQRyxgy",
            "type": "function",
            "function": {
              "name": "get_weather",
              "arguments": "{\\n  \\"city\\": \\"Boston\\",\\n  \\"unit\\": \\"celsius\\"\\n}"
            }
          }
        ]
      },
      "logprobs": null,
      "finish_reason": "tool_calls"
    }
  ],
  "usage": {"prompt_tokens": 82, "completion_tokens": 18, "total_tokens": 100}
}"""

TOOL_CALL_ARGUMENTS = '{\n  "city": "Boston",\n  "unit": "celsius"\n}'

TEXT_COMPLETION = {
    "id": "chatcmpl-123",
    "object": "chat.completion",
    "created": 1701273000,
    "model": "gpt-3.5-turbo-1106",
    "choices": [
        {
            "index": 0,
            "message": {"role": "assistant", "content": "1 + 1 = 2"},
            "finish_reason": "stop",
        }
    ],
    "usage": {"prompt_tokens": 20, "completion_tokens": 7, "total_tokens": 27},
}

IMAGE_RESPONSE = {
    "created": 1701273000,
    "data": [
        {
            "url": "https://images.test/chicken.png",
            "revised_prompt": "A chicken pecking at a bowl of rice",
        }
    ],
}

EMBEDDING_RESPONSE = {
    "object": "list",
    "data": [
        {"object": "embedding", "index": 0, "embedding": [0.0023, -0.0093, 0.0158]},
        {"object": "embedding", "index": 1, "embedding": [0.0101, 0.0042, -0.0311]},
    ],
    "model": "text-embedding-ada-002-v2",
    "usage": {"prompt_tokens": 8, "total_tokens": 8},
}


class Recorder:
    """MockTransport handler that remembers every request it saw."""

    def __init__(self, handler):
        self.handler = handler
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> dict:
        return json.loads(self.last.content)


@pytest.fixture
def make_client():
    def factory(handler, token="sk-test"):
        recorder = Recorder(handler)
        http = httpx.AsyncClient(transport=httpx.MockTransport(recorder))
        return Client(base_url=BASE_URL, token=token, http_client=http), recorder

    return factory
