"""Session key derivation for channel and thread conversations."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from app.channels.envelope import InboundMessage

DEFAULT_AGENT_ID = "main"
THREAD_SEGMENT = "thread"


class ThreadSessionResolution(BaseModel):
    session_key: str
    parent_session_key: Optional[str] = None


def build_agent_peer_session_key(
    agent_id: str,
    channel: str,
    peer_kind: str,
    peer_id: str,
) -> str:
    """agent:{agent_id}:{channel}:{peer_kind}:{peer_id}, e.g. agent:main:discord:channel:123."""
    agent = (agent_id or DEFAULT_AGENT_ID).strip().lower()
    return f"agent:{agent}:{channel.strip().lower()}:{peer_kind}:{peer_id}"


def build_session_key(msg: InboundMessage, agent_id: str = DEFAULT_AGENT_ID) -> str:
    """
    Build the base (non-thread) session key for an inbound message.

    Guild messages are keyed by channel; a message in a thread is keyed by the
    thread's parent channel. Direct messages are keyed by sender.
    """
    if msg.guild_id is None:
        return build_agent_peer_session_key(agent_id, msg.channel, "dm", msg.sender_id)
    peer_id = msg.parent_chat_id if msg.parent_chat_id is not None else msg.chat_id
    return build_agent_peer_session_key(agent_id, msg.channel, "channel", peer_id)


def resolve_thread_session_keys(
    base_session_key: str,
    thread_id: Optional[str] = None,
    parent_session_key: Optional[str] = None,
    use_suffix: bool = True,
) -> ThreadSessionResolution:
    """
    Pick the session key for a message that may belong to a thread.

    With use_suffix and a thread id the key becomes
    {base}:thread:{thread_id.lower()}; the same thread always maps to the same
    key, so an archived thread resumes its session when it is reopened.
    Without a thread id there is no parent session.
    """
    if thread_id is None:
        return ThreadSessionResolution(session_key=base_session_key)
    if not use_suffix:
        return ThreadSessionResolution(
            session_key=base_session_key, parent_session_key=parent_session_key
        )
    return ThreadSessionResolution(
        session_key=f"{base_session_key}:{THREAD_SEGMENT}:{thread_id.lower()}",
        parent_session_key=parent_session_key,
    )
