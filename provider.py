# provider.py
import logging
from dataclasses import dataclass
from typing import Tuple, Union

from google import genai
from google.genai import types

from persona import PERSONA_SEED, PersonaTurn, to_history
from settings import Settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProviderReply:
    text: str


@dataclass(frozen=True)
class ProviderFailure:
    cause: BaseException


ProviderResult = Union[ProviderReply, ProviderFailure]


class EmptyReplyError(RuntimeError):
    """The model answered without any text (blocked or empty candidates)."""


class GeminiChatProvider:
    """Sends one message through a fresh Gemini chat seeded with the persona.

    Shared by all requests; holds no per-request state.
    """

    def __init__(
        self,
        client: genai.Client,
        model_name: str,
        max_output_tokens: int,
        seed: Tuple[PersonaTurn, ...] = PERSONA_SEED,
    ) -> None:
        self._client = client
        self._model_name = model_name
        self._max_output_tokens = max_output_tokens
        self._seed = seed

    @classmethod
    def from_settings(cls, settings: Settings) -> "GeminiChatProvider":
        client = genai.Client(api_key=settings.GEMINI_API_KEY)
        return cls(client, settings.MODEL_NAME, settings.MAX_OUTPUT_TOKENS)

    def start_session(self):
        return self._client.aio.chats.create(
            model=self._model_name,
            history=to_history(self._seed),
            config=types.GenerateContentConfig(
                max_output_tokens=self._max_output_tokens,
            ),
        )

    async def send(self, message: str) -> ProviderResult:
        logger.debug("Starting chat session on %s", self._model_name)
        try:
            chat = self.start_session()
            response = await chat.send_message(message)
            text = response.text if hasattr(response, "text") else None
        except Exception as e:  # noqa: BLE001
            return ProviderFailure(e)

        if not text:
            return ProviderFailure(EmptyReplyError("Empty response from model"))
        return ProviderReply(text)
