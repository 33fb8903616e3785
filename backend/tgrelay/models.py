from pydantic import BaseModel, ConfigDict, Field

REQUIRED_FIELDS = ["message", "botId", "chatId"]


def missing_required(body: object) -> bool:
    """True when any required field is absent or falsy in the raw request body."""
    if not isinstance(body, dict):
        return True
    return not all(body.get(field) for field in REQUIRED_FIELDS)


class RelayMessageRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str | None = None
    bot_id: str | None = Field(default=None, alias="botId")
    chat_id: str | int | None = Field(default=None, alias="chatId")
    delay: float | None = None
    reply_to_message_id: str | int | None = Field(default=None, alias="replyToMessageId")


class RelayMessageResponse(BaseModel):
    success: bool
    timestamp: str


class RelayErrorResponse(BaseModel):
    error: str
    details: str | None = None
    required: list[str] | None = None
    timestamp: str | None = None
