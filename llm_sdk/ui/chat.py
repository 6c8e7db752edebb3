from typing import List, Optional

from ..api.chat_completion import (
    ChatCompletionModel,
    ChatCompletionRequestBuilder,
    new_assistant,
    new_system,
    new_user,
)
from ..core.client import Client


class ChatSession:
    """Keeps the message history of one conversation with the model."""

    def __init__(
        self,
        client: Client,
        model: ChatCompletionModel = ChatCompletionModel.default(),
        system_prompt: Optional[str] = None,
        temperature: Optional[float] = None,
    ):
        self.client = client
        self.model = model
        self.system_prompt = system_prompt
        self.temperature = temperature
        self.history: List = []
        self.reset()

    def reset(self):
        if self.system_prompt:
            self.history = [new_system(self.system_prompt)]
        else:
            self.history = []

    async def send(self, user_input: str) -> str:
        self.history.append(new_user(user_input))

        builder = ChatCompletionRequestBuilder(messages=list(self.history)).model(self.model)
        if self.temperature is not None:
            builder.temperature(self.temperature)

        try:
            res = await self.client.chat_completion(builder.build())
        except Exception:
            # keep the history consistent with what the model has seen
            self.history.pop()
            raise

        content = (res.choices[0].message.content or "") if res.choices else ""
        self.history.append(new_assistant(content))
        return content
