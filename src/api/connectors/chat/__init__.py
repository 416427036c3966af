"""Conector de chat — canais de notificação por webhook."""

from .webhook_client import ChatWebhookChannel, create_chat_channels

__all__ = ["ChatWebhookChannel", "create_chat_channels"]
