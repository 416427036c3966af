"""Builder para embed de notificação no Discord."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from api.payload_builders.chat.common import (
    CONFIRMED_LABEL,
    NOT_AVAILABLE,
    NOTIFICATION_TITLE,
    source_label,
    upstream_subscriber,
)

if TYPE_CHECKING:
    from app.domain import SubscriberEvent, SyncResult

# Discord blurple
EMBED_COLOR = 0x5865F2


class DiscordPayloadBuilder:
    """Builder do payload ``{"embeds": [...]}`` do webhook Discord."""

    def build(self, event: SubscriberEvent, sync_result: SyncResult) -> dict[str, Any]:
        subscriber = upstream_subscriber(sync_result)
        fields: list[dict[str, Any]] = [
            {"name": "Email", "value": event.email, "inline": True},
            {"name": "Status", "value": CONFIRMED_LABEL, "inline": True},
            {
                "name": "Ref Code",
                "value": subscriber.get("ref_code") or NOT_AVAILABLE,
                "inline": True,
            },
            {"name": "Source", "value": source_label(event.metadata), "inline": True},
            {
                "name": "SparkLoop UUID",
                "value": subscriber.get("uuid") or NOT_AVAILABLE,
                "inline": True,
            },
        ]
        if subscriber.get("name"):
            fields.insert(0, {"name": "Name", "value": subscriber["name"], "inline": True})

        embed = {
            "title": NOTIFICATION_TITLE,
            "color": EMBED_COLOR,
            "fields": fields,
            "timestamp": datetime.now(UTC).isoformat(),
            "footer": {"text": "SparkLoop Integration"},
        }
        return {"embeds": [embed]}
