"""
Chat completion request/response shapes.

A request carries a list of role-tagged messages and, optionally, the tools the
model may call. The response's choices carry assistant messages which may hold
tool calls instead of (or next to) text content.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, ClassVar, Dict, List, Literal, Optional, Sequence, Tuple, Union

from pydantic import Field, field_validator

from ..core.models import ApiModel, RequestBuilder
from ..core.schema import to_schema
from ..core.transport import HttpRequest, join_url

CHAT_COMPLETIONS_PATH = "/chat/completions"


# =============================================================================
# Enums
# =============================================================================

class ChatCompletionModel(str, Enum):
    GPT_3_5_TURBO_1106 = "gpt-3.5-turbo-1106"
    GPT_4_1106_PREVIEW = "gpt-4-1106-preview"
    GPT_4_VISION_PREVIEW = "gpt-4-vision-preview"

    @classmethod
    def default(cls) -> "ChatCompletionModel":
        return cls.GPT_3_5_TURBO_1106


class ChatResponseFormat(str, Enum):
    TEXT = "text"
    JSON = "json_object"

    @classmethod
    def default(cls) -> "ChatResponseFormat":
        return cls.JSON


class ToolType(str, Enum):
    FUNCTION = "function"

    @classmethod
    def default(cls) -> "ToolType":
        return cls.FUNCTION


class FinishReason(str, Enum):
    STOP = "stop"
    LENGTH = "length"
    CONTENT_FILTER = "content_filter"
    TOOL_CALLS = "tool_calls"

    @classmethod
    def default(cls) -> "FinishReason":
        return cls.STOP


class ToolChoiceMode(str, Enum):
    """The unit variants of a tool choice: never call a tool, or let the model decide."""
    NONE = "none"
    AUTO = "auto"

    @classmethod
    def default(cls) -> "ToolChoiceMode":
        return cls.NONE


# =============================================================================
# Tools
# =============================================================================

class FunctionInfo(ApiModel):
    """Describes a function the model may call."""
    description: str
    name: str
    # JSON-Schema of the function's arguments
    parameters: Dict[str, Any]


class Tool(ApiModel):
    type: ToolType = ToolType.FUNCTION
    function: FunctionInfo

    @classmethod
    def new_function(cls, name: str, description: str, args_type: Any) -> "Tool":
        """Create a function tool whose parameters are derived from ``args_type``."""
        return cls(
            function=FunctionInfo(
                description=description,
                name=name,
                parameters=to_schema(args_type),
            )
        )


class FunctionCall(ApiModel):
    name: str
    # JSON-encoded arguments, exactly as produced by the model
    arguments: str


class ToolCall(ApiModel):
    id: str
    type: ToolType = ToolType.FUNCTION
    function: FunctionCall


class FunctionChoice(ApiModel):
    type: ToolType = ToolType.FUNCTION
    name: str


class ToolChoiceFunction(ApiModel):
    """
    Forces the model to call the named function.

    The wire form carries only the function name, so this takes a name or an
    existing ``Tool`` (whose schema was already derived from the argument type).
    """
    function: FunctionChoice

    @classmethod
    def new(cls, name: str) -> "ToolChoiceFunction":
        return cls(function=FunctionChoice(name=name))

    @classmethod
    def for_tool(cls, tool: Tool) -> "ToolChoiceFunction":
        return cls.new(tool.function.name)


ToolChoice = Union[ToolChoiceMode, ToolChoiceFunction]


class ChatResponseFormatObject(ApiModel):
    type: ChatResponseFormat = Field(default_factory=ChatResponseFormat.default)


# =============================================================================
# Messages
# =============================================================================

def _empty_name_to_none(value: Optional[str]) -> Optional[str]:
    return value or None


class SystemMessage(ApiModel):
    role: Literal["system"] = "system"
    content: str
    name: Optional[str] = None

    normalize_name = field_validator("name", mode="before")(_empty_name_to_none)


class UserMessage(ApiModel):
    role: Literal["user"] = "user"
    content: str
    name: Optional[str] = None

    normalize_name = field_validator("name", mode="before")(_empty_name_to_none)


class AssistantMessage(ApiModel):
    omit_when_empty: ClassVar[Tuple[str, ...]] = ("tool_calls",)

    role: Literal["assistant"] = "assistant"
    content: Optional[str] = None
    name: Optional[str] = None
    tool_calls: List[ToolCall] = Field(default_factory=list)

    normalize_name = field_validator("name", mode="before")(_empty_name_to_none)


class ToolMessage(ApiModel):
    role: Literal["tool"] = "tool"
    content: str
    tool_call_id: str


ChatCompletionMessage = Annotated[
    Union[SystemMessage, UserMessage, AssistantMessage, ToolMessage],
    Field(discriminator="role"),
]


def new_system(content: str, name: str = "") -> SystemMessage:
    return SystemMessage(content=content, name=name)


def new_user(content: str, name: str = "") -> UserMessage:
    return UserMessage(content=content, name=name)


def new_assistant(content: Optional[str] = None, tool_calls: Sequence[ToolCall] = (), name: str = "") -> AssistantMessage:
    return AssistantMessage(content=content, tool_calls=list(tool_calls), name=name)


def new_tool(content: str, tool_call_id: str) -> ToolMessage:
    return ToolMessage(content=content, tool_call_id=tool_call_id)


# =============================================================================
# Request
# =============================================================================

class ChatCompletionRequest(ApiModel):
    omit_when_empty: ClassVar[Tuple[str, ...]] = ("tools",)

    messages: List[ChatCompletionMessage]
    model: ChatCompletionModel = Field(default_factory=ChatCompletionModel.default)
    # Number between -2.0 and 2.0. Positive values penalize tokens by their frequency so far.
    frequency_penalty: Optional[float] = None
    max_tokens: Optional[int] = None
    # How many choices to generate for each input message.
    n: Optional[int] = None
    presence_penalty: Optional[float] = None
    response_format: Optional[ChatResponseFormatObject] = None
    seed: Optional[int] = None
    stop: Optional[Union[str, List[str]]] = None
    stream: Optional[bool] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    tools: List[Tool] = Field(default_factory=list)
    tool_choice: Optional[ToolChoice] = None
    user: Optional[str] = None

    @classmethod
    def new(cls, messages: Sequence[Any], tools: Sequence[Tool] = ()) -> "ChatCompletionRequest":
        return ChatCompletionRequestBuilder(messages=list(messages), tools=list(tools)).build()

    def into_request(self, base_url: str) -> HttpRequest:
        return HttpRequest(
            method="POST",
            url=join_url(base_url, CHAT_COMPLETIONS_PATH),
            json=self.to_dict(),
        )


class ChatCompletionRequestBuilder(RequestBuilder):
    target = ChatCompletionRequest


# =============================================================================
# Response
# =============================================================================

class ChatCompletionChoice(ApiModel):
    finish_reason: FinishReason
    index: int
    message: AssistantMessage


class ChatCompleteUsage(ApiModel):
    completion_tokens: int
    prompt_tokens: int
    total_tokens: int


class ChatCompletionResponse(ApiModel):
    id: str
    choices: List[ChatCompletionChoice]
    created: int
    model: str
    system_fingerprint: Optional[str] = None
    object: str
    usage: Optional[ChatCompleteUsage] = None
