import json

import httpx
import pytest

from llm_sdk import AssistantMessage, BadRequestError, ChatCompletionModel, SystemMessage, UserMessage
from llm_sdk.ui.chat import ChatSession

from .conftest import TEXT_COMPLETION


@pytest.mark.asyncio
async def test_send_should_keep_history(make_client):
    client, recorder = make_client(lambda request: httpx.Response(200, json=TEXT_COMPLETION))
    session = ChatSession(client, system_prompt="Be brief.", temperature=0.1)

    assert await session.send("What is 1 + 1?") == "1 + 1 = 2"
    await session.send("And 2 + 2?")

    assert [type(m) for m in session.history] == [
        SystemMessage, UserMessage, AssistantMessage, UserMessage, AssistantMessage,
    ]
    sent = json.loads(recorder.last.content)
    assert sent["model"] == ChatCompletionModel.default().value
    assert sent["temperature"] == 0.1
    assert [m["role"] for m in sent["messages"]] == ["system", "user", "assistant", "user"]


@pytest.mark.asyncio
async def test_failed_turn_should_not_change_history(make_client):
    client, _ = make_client(lambda request: httpx.Response(400, text="bad request"))
    session = ChatSession(client, system_prompt="Be brief.")

    with pytest.raises(BadRequestError):
        await session.send("hello")

    assert len(session.history) == 1


@pytest.mark.asyncio
async def test_reset_should_keep_only_system_prompt(make_client):
    client, _ = make_client(lambda request: httpx.Response(200, json=TEXT_COMPLETION))
    with_system = ChatSession(client, system_prompt="Be brief.")
    without_system = ChatSession(client)

    await with_system.send("hi")
    await without_system.send("hi")
    with_system.reset()
    without_system.reset()

    assert [type(m) for m in with_system.history] == [SystemMessage]
    assert without_system.history == []
