"""Builders de notificação para webhooks de chat."""

from .discord import DiscordPayloadBuilder
from .slack import SlackPayloadBuilder

__all__ = ["DiscordPayloadBuilder", "SlackPayloadBuilder"]
