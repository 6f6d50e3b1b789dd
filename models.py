# models.py
from typing import Optional

from pydantic import BaseModel, Field

MISSING_MESSAGE = "Nenhuma mensagem fornecida."
GENERIC_FAILURE = "Não consegui pensar em uma resposta agora."


class ChatRequest(BaseModel):
    message: Optional[str] = Field(None, description="User message")

    def has_message(self) -> bool:
        return bool(self.message and self.message.strip())


class ChatReply(BaseModel):
    reply: str


class ErrorReply(BaseModel):
    error: str
