"""Data models for the chat history.

Hides how a chat message is represented and validated. Messages are
immutable once built; the history only ever holds references to them.
"""

from uuid import uuid4

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class ChatMessage(BaseModel):
    """A single chat message as received from the network.

    Accepts both snake_case field names and the capitalized names used on
    the wire (``UUID``, ``Username``, ``Content``, ``Timestamp``).
    """

    model_config = ConfigDict(frozen=True)

    uuid: str = Field(
        default_factory=lambda: str(uuid4()),
        validation_alias=AliasChoices("uuid", "UUID"),
        description="Unique message identifier",
    )
    username: str = Field(
        validation_alias=AliasChoices("username", "Username"),
        description="Display name of the sender",
    )
    content: str = Field(
        default="",
        validation_alias=AliasChoices("content", "Content"),
        description="Raw message text, may contain newlines",
    )
    timestamp: int = Field(
        validation_alias=AliasChoices("timestamp", "Timestamp"),
        description="Send time used to order the history",
    )
