"""Builder para mensagem Block Kit no Slack."""

from __future__ import annotations

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


def _mrkdwn(label: str, value: str) -> dict[str, str]:
    return {"type": "mrkdwn", "text": f"*{label}:*\n{value}"}


class SlackPayloadBuilder:
    """Builder do payload de incoming webhook do Slack."""

    def build(self, event: SubscriberEvent, sync_result: SyncResult) -> dict[str, Any]:
        subscriber = upstream_subscriber(sync_result)
        fields = [
            _mrkdwn("Email", event.email),
            _mrkdwn("Status", CONFIRMED_LABEL),
            _mrkdwn("Ref Code", subscriber.get("ref_code") or NOT_AVAILABLE),
            _mrkdwn("Source", source_label(event.metadata)),
        ]
        if subscriber.get("name"):
            fields.insert(0, _mrkdwn("Name", subscriber["name"]))

        return {
            "text": NOTIFICATION_TITLE,
            "blocks": [
                {
                    "type": "header",
                    "text": {"type": "plain_text", "text": NOTIFICATION_TITLE},
                },
                {"type": "section", "fields": fields},
            ],
        }
