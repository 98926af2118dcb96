from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from app.channels.envelope import InboundMessage
from app.channels.plugins.discord.config import DiscordAccountConfig
from app.channels.plugins.discord.thread_config import (
    load_discord_account_config,
    resolve_discord_thread_config_for,
)
from app.config import get_settings
from app.core.session_key import build_session_key, resolve_thread_session_keys
from app.infra.logging_config import get_logger

logger = get_logger("routing")


class ThreadSessionRoute(BaseModel):
    session_key: str
    parent_session_key: Optional[str] = None
    isolate: bool
    inherit_messages: int
    is_thread: bool


class Router:
    """Deterministic routing: picks the session a message belongs to."""

    def __init__(
        self,
        account_config: DiscordAccountConfig | None = None,
        agent_id: str | None = None,
    ) -> None:
        if account_config is None:
            account_config = load_discord_account_config()
        self._account_config = account_config
        self._agent_id = agent_id or get_settings().agent_id

    def resolve_thread_session(self, msg: InboundMessage) -> ThreadSessionRoute:
        config = resolve_discord_thread_config_for(
            self._account_config,
            msg.guild_id,
            msg.parent_chat_id if msg.parent_chat_id is not None else msg.chat_id,
        )
        use_suffix = config.isolate and msg.is_thread
        base_key = build_session_key(msg, self._agent_id)
        resolution = resolve_thread_session_keys(
            base_key,
            thread_id=msg.thread_id,
            parent_session_key=base_key,
            use_suffix=use_suffix,
        )
        logger.debug(
            "Resolved session %s for message %s in chat %s (thread=%s, isolate=%s)",
            resolution.session_key,
            msg.message_id,
            msg.chat_id,
            msg.thread_id,
            config.isolate,
        )
        return ThreadSessionRoute(
            session_key=resolution.session_key,
            parent_session_key=resolution.parent_session_key,
            isolate=config.isolate,
            inherit_messages=config.inherit_messages if use_suffix else 0,
            is_thread=msg.is_thread,
        )
