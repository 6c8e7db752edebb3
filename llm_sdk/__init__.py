"""
llm_sdk - typed async client for OpenAI-compatible generative-AI APIs.

    from llm_sdk import Client, ChatCompletionRequest, new_system, new_user

    async with Client(token="sk-...") as sdk:
        req = ChatCompletionRequest.new([new_system("Be brief."), new_user("Hi!")])
        res = await sdk.chat_completion(req)
"""

__version__ = "0.1.0"

from .api.chat_completion import (
    AssistantMessage,
    ChatCompleteUsage,
    ChatCompletionChoice,
    ChatCompletionMessage,
    ChatCompletionModel,
    ChatCompletionRequest,
    ChatCompletionRequestBuilder,
    ChatCompletionResponse,
    ChatResponseFormat,
    ChatResponseFormatObject,
    FinishReason,
    FunctionCall,
    FunctionChoice,
    FunctionInfo,
    SystemMessage,
    Tool,
    ToolCall,
    ToolChoice,
    ToolChoiceFunction,
    ToolChoiceMode,
    ToolMessage,
    ToolType,
    UserMessage,
    new_assistant,
    new_system,
    new_tool,
    new_user,
)
from .api.create_image import (
    CreateImageRequest,
    CreateImageRequestBuilder,
    CreateImageResponse,
    ImageModel,
    ImageObject,
    ImageQuality,
    ImageResponseFormat,
    ImageSize,
    ImageStyle,
)
from .api.embedding import (
    EmbeddingData,
    EmbeddingEncodingFormat,
    EmbeddingInput,
    EmbeddingModel,
    EmbeddingRequest,
    EmbeddingRequestBuilder,
    EmbeddingResponse,
    EmbeddingUsage,
)
from .api.speech import (
    SpeechModel,
    SpeechRequest,
    SpeechRequestBuilder,
    SpeechResponseFormat,
    SpeechVoice,
)
from .api.whisper import (
    WhisperModel,
    WhisperRequest,
    WhisperRequestBuilder,
    WhisperRequestType,
    WhisperResponse,
    WhisperResponseFormat,
)
from .config import Config
from .core.client import TIMEOUT, Client
from .core.exceptions import (
    APIError,
    AuthenticationError,
    BadRequestError,
    InternalServerError,
    LlmSdkError,
    MissingFieldError,
    NotFoundError,
    PermissionDeniedError,
    RateLimitError,
    ResponseDecodeError,
)
from .core.schema import to_schema
from .core.transport import HttpRequest

__all__ = [
    "__version__",
    # Client
    "Client",
    "Config",
    "TIMEOUT",
    "HttpRequest",
    "to_schema",
    # Chat
    "AssistantMessage",
    "ChatCompleteUsage",
    "ChatCompletionChoice",
    "ChatCompletionMessage",
    "ChatCompletionModel",
    "ChatCompletionRequest",
    "ChatCompletionRequestBuilder",
    "ChatCompletionResponse",
    "ChatResponseFormat",
    "ChatResponseFormatObject",
    "FinishReason",
    "FunctionCall",
    "FunctionChoice",
    "FunctionInfo",
    "SystemMessage",
    "Tool",
    "ToolCall",
    "ToolChoice",
    "ToolChoiceFunction",
    "ToolChoiceMode",
    "ToolMessage",
    "ToolType",
    "UserMessage",
    "new_assistant",
    "new_system",
    "new_tool",
    "new_user",
    # Images
    "CreateImageRequest",
    "CreateImageRequestBuilder",
    "CreateImageResponse",
    "ImageModel",
    "ImageObject",
    "ImageQuality",
    "ImageResponseFormat",
    "ImageSize",
    "ImageStyle",
    # Embeddings
    "EmbeddingData",
    "EmbeddingEncodingFormat",
    "EmbeddingInput",
    "EmbeddingModel",
    "EmbeddingRequest",
    "EmbeddingRequestBuilder",
    "EmbeddingResponse",
    "EmbeddingUsage",
    # Speech
    "SpeechModel",
    "SpeechRequest",
    "SpeechRequestBuilder",
    "SpeechResponseFormat",
    "SpeechVoice",
    # Whisper
    "WhisperModel",
    "WhisperRequest",
    "WhisperRequestBuilder",
    "WhisperRequestType",
    "WhisperResponse",
    "WhisperResponseFormat",
    # Exceptions
    "LlmSdkError",
    "MissingFieldError",
    "ResponseDecodeError",
    "APIError",
    "BadRequestError",
    "AuthenticationError",
    "PermissionDeniedError",
    "NotFoundError",
    "RateLimitError",
    "InternalServerError",
]
