"""
Thread session settings for Discord.

Each field resolves independently through channel > guild > account and
falls back to a hard default. An explicit False or 0 at any scope is a value,
not an unset field.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, TypeVar

from pydantic import ValidationError

from app.config import get_settings
from app.infra.logging_config import get_logger
from .config import (
    DiscordAccountConfig,
    DiscordChannelConfig,
    DiscordGuildConfig,
    PartialThreadConfig,
    ThreadConfig,
)

logger = get_logger("discord.thread_config")

DEFAULT_ISOLATE = True
DEFAULT_INHERIT_MESSAGES = 0

T = TypeVar("T")


def _first_set(values: list[Optional[T]], default: T) -> T:
    for value in values:
        if value is not None:
            return value
    return default


def resolve_discord_thread_config(
    channel_config: Optional[DiscordChannelConfig] = None,
    guild_config: Optional[DiscordGuildConfig] = None,
    account_config: Optional[DiscordAccountConfig] = None,
) -> ThreadConfig:
    """Merge the three scopes into a complete ThreadConfig."""
    scopes: list[PartialThreadConfig] = [
        scope
        for scope in (
            channel_config.thread if channel_config is not None else None,
            guild_config.thread_defaults if guild_config is not None else None,
            account_config.thread_defaults if account_config is not None else None,
        )
        if scope is not None
    ]
    return ThreadConfig(
        isolate=_first_set([s.isolate for s in scopes], DEFAULT_ISOLATE),
        inherit_messages=_first_set(
            [s.inherit_messages for s in scopes], DEFAULT_INHERIT_MESSAGES
        ),
    )


def resolve_discord_thread_config_for(
    account_config: Optional[DiscordAccountConfig],
    guild_id: Optional[str],
    channel_id: Optional[str],
) -> ThreadConfig:
    """
    Look up the guild and channel entries for a message and resolve them.

    For a message inside a thread, pass the parent channel id; threads take
    their settings from the channel they were opened in.
    """
    guild_config = None
    channel_config = None
    if account_config is not None and guild_id is not None:
        guild_config = account_config.guilds.get(guild_id)
    if guild_config is not None and channel_id is not None:
        channel_config = guild_config.channels.get(channel_id)
    return resolve_discord_thread_config(channel_config, guild_config, account_config)


def load_discord_account_config(path: Optional[str | Path] = None) -> DiscordAccountConfig:
    """
    Load the Discord account config document (JSON).

    Falls back to DISCORD_CONFIG_PATH; with neither set, returns an empty
    config so every lookup resolves to the defaults.
    """
    path = path or get_settings().discord_config_path
    if not path:
        return DiscordAccountConfig()
    config_file = Path(path)
    try:
        return DiscordAccountConfig.model_validate_json(
            config_file.read_text(encoding="utf-8")
        )
    except FileNotFoundError:
        logger.error("Discord config file not found: %s", config_file)
        raise
    except ValidationError as e:
        logger.error("Invalid Discord config in %s: %s", config_file, e)
        raise
