"""
Async client for the generative-AI HTTP API.

Every operation follows the same path: the request encodes itself into an
``HttpRequest``, the client adds the bearer token (when one is configured) and
the fixed timeout, sends it, turns any 4xx/5xx into an ``APIError`` carrying
the response body, and decodes the success body into the typed response.

Nothing is retried. Connection and timeout failures surface as the
``httpx`` exceptions that caused them.
"""

from typing import Optional, Type, TypeVar

import httpx
from pydantic import ValidationError

from ..api.chat_completion import ChatCompletionRequest, ChatCompletionResponse
from ..api.create_image import CreateImageRequest, CreateImageResponse
from ..api.embedding import EmbeddingRequest, EmbeddingResponse
from ..api.speech import SpeechRequest
from ..api.whisper import WhisperRequest, WhisperResponse
from ..config import DEFAULT_BASE_URL, Config
from ..utils.logger import get_logger
from .exceptions import ResponseDecodeError, error_for_status
from .models import ApiModel
from .transport import HttpRequest, IntoRequest

logger = get_logger(__name__)

# seconds, applied to every request
TIMEOUT = 30.0

ResponseT = TypeVar("ResponseT", bound=ApiModel)


class Client:
    """
    Main API client.

    Usage:
        async with Client(token="sk-...") as sdk:
            req = ChatCompletionRequest.new([new_user("Hello!")])
            res = await sdk.chat_completion(req)
            print(res.choices[0].message.content)

    The client owns one ``httpx.AsyncClient`` (and its connection pool) unless
    one is passed in, in which case closing it is left to the caller.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        token: str = "",
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.token = token or ""
        self._owns_http_client = http_client is None
        self._http = http_client or httpx.AsyncClient()

    @classmethod
    def from_config(cls, http_client: Optional[httpx.AsyncClient] = None) -> "Client":
        """Build a client from OPENAI_BASE_URL / OPENAI_API_KEY."""
        return cls(
            base_url=Config.get_base_url(),
            token=Config.get_api_key(),
            http_client=http_client,
        )

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    async def chat_completion(self, req: ChatCompletionRequest) -> ChatCompletionResponse:
        res = await self._send_and_log(req)
        return _decode(res, ChatCompletionResponse)

    async def create_image(self, req: CreateImageRequest) -> CreateImageResponse:
        res = await self._send_and_log(req)
        return _decode(res, CreateImageResponse)

    async def speech(self, req: SpeechRequest) -> bytes:
        """Returns the encoded audio as-is."""
        res = await self._send_and_log(req)
        return res.content

    async def whisper(self, req: WhisperRequest) -> WhisperResponse:
        """Transcribe or translate audio.

        JSON response formats are decoded; for text, srt and vtt the body is
        returned untouched as the response text.
        """
        is_json = req.response_format.is_json
        res = await self._send_and_log(req)
        if is_json:
            return _decode(res, WhisperResponse)
        return WhisperResponse(text=res.text)

    async def embedding(self, req: EmbeddingRequest) -> EmbeddingResponse:
        res = await self._send_and_log(req)
        return _decode(res, EmbeddingResponse)

    # -------------------------------------------------------------------------
    # Plumbing
    # -------------------------------------------------------------------------

    def prepare_request(self, req: IntoRequest) -> httpx.Request:
        prepared: HttpRequest = req.into_request(self.base_url)
        headers = dict(prepared.headers)
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        return self._http.build_request(
            prepared.method,
            prepared.url,
            json=prepared.json,
            data=prepared.data,
            files=prepared.files,
            headers=headers,
            timeout=TIMEOUT,
        )

    async def _send_and_log(self, req: IntoRequest) -> httpx.Response:
        request = self.prepare_request(req)
        logger.debug("%s %s", request.method, request.url)

        res = await self._http.send(request)
        if res.is_client_error or res.is_server_error:
            text = res.text
            logger.error("API failed: %s", text)
            raise error_for_status(res.status_code, text, response=res)

        return res

    async def aclose(self):
        if self._owns_http_client:
            await self._http.aclose()

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, *args):
        await self.aclose()

    def __repr__(self):
        return f"Client(base_url={self.base_url!r})"


def _decode(res: httpx.Response, model: Type[ResponseT]) -> ResponseT:
    try:
        return model.model_validate(res.json())
    except (ValueError, ValidationError) as e:
        raise ResponseDecodeError(f"Could not decode {model.__name__}: {e}") from e
