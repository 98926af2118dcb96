"""Discord account, guild and channel configuration documents."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _ConfigModel(BaseModel):
    # Accept both inheritMessages and inherit_messages in config files.
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ThreadConfig(_ConfigModel):
    """Fully resolved thread session behaviour."""

    isolate: bool
    inherit_messages: int = Field(ge=0)


class PartialThreadConfig(_ConfigModel):
    """Thread settings at one scope. None means unset at that scope."""

    isolate: Optional[bool] = None
    inherit_messages: Optional[int] = Field(default=None, ge=0)


class DiscordChannelConfig(_ConfigModel):
    thread: Optional[PartialThreadConfig] = None


class DiscordGuildConfig(_ConfigModel):
    thread_defaults: Optional[PartialThreadConfig] = None
    channels: dict[str, DiscordChannelConfig] = Field(default_factory=dict)


class DiscordAccountConfig(_ConfigModel):
    thread_defaults: Optional[PartialThreadConfig] = None
    guilds: dict[str, DiscordGuildConfig] = Field(default_factory=dict)
