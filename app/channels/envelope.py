from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel


class InboundMessage(BaseModel):
    channel: str
    account_id: Optional[str]
    guild_id: Optional[str] = None
    sender_id: str
    chat_id: str
    # Set when chat_id is a thread: the channel the thread was opened in.
    parent_chat_id: Optional[str] = None
    thread_id: Optional[str] = None
    message_id: str
    text: Optional[str]
    timestamp: datetime
    raw: dict[str, Any] = {}

    @property
    def is_thread(self) -> bool:
        return self.thread_id is not None
