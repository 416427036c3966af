"""Testes dos builders de notificação (Discord embed e Slack blocks)."""

from __future__ import annotations

from api.payload_builders.chat import DiscordPayloadBuilder, SlackPayloadBuilder
from api.payload_builders.chat.common import source_label
from app.domain import SubscriberEvent

FULL_RESULT = {"subscriber": {"uuid": "sl-1", "ref_code": "REF9", "name": "Ana"}}


def _event(metadata: dict | None = None) -> SubscriberEvent:
    return SubscriberEvent.create("ana@example.com", "confirmed", metadata or {})


class TestDiscordPayloadBuilder:
    def test_embed_fields_with_name_first(self) -> None:
        payload = DiscordPayloadBuilder().build(_event({"source": "ghost-webhook"}), FULL_RESULT)

        embed = payload["embeds"][0]
        assert embed["title"] == "🎉 New SparkLoop Subscriber!"
        assert embed["color"] == 0x5865F2
        assert embed["footer"] == {"text": "SparkLoop Integration"}
        names = [field["name"] for field in embed["fields"]]
        assert names == ["Name", "Email", "Status", "Ref Code", "Source", "SparkLoop UUID"]
        values = {field["name"]: field["value"] for field in embed["fields"]}
        assert values["Email"] == "ana@example.com"
        assert values["Status"] == "✅ Confirmed"
        assert values["Ref Code"] == "REF9"
        assert values["Source"] == "ghost-webhook"

    def test_missing_subscriber_uses_placeholders(self) -> None:
        payload = DiscordPayloadBuilder().build(_event(), {})

        fields = {field["name"]: field["value"] for field in payload["embeds"][0]["fields"]}
        assert "Name" not in fields
        assert fields["Ref Code"] == "N/A"
        assert fields["SparkLoop UUID"] == "N/A"
        assert fields["Source"] == "Unknown"


class TestSlackPayloadBuilder:
    def test_header_and_section(self) -> None:
        payload = SlackPayloadBuilder().build(_event({"ghost_event": "member.added"}), FULL_RESULT)

        assert payload["text"] == "🎉 New SparkLoop Subscriber!"
        header, section = payload["blocks"]
        assert header["type"] == "header"
        texts = [field["text"] for field in section["fields"]]
        assert texts[0] == "*Name:*\nAna"
        assert "*Email:*\nana@example.com" in texts
        assert "*Source:*\nmember.added" in texts

    def test_without_name(self) -> None:
        payload = SlackPayloadBuilder().build(_event(), {"subscriber": {"ref_code": "R"}})
        texts = [field["text"] for field in payload["blocks"][1]["fields"]]
        assert len(texts) == 4
        assert "*Ref Code:*\nR" in texts


def test_source_label_precedence() -> None:
    assert source_label({"source": "s", "ghost_event": "e"}) == "s"
    assert source_label({"ghost_event": "e"}) == "e"
    assert source_label({}) == "Unknown"
