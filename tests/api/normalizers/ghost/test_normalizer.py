"""Testes do normalizer Ghost (classificação, status e metadata)."""

from __future__ import annotations

import pytest

from api.normalizers.ghost import (
    MISSING_EMAIL_MESSAGE,
    DirectShape,
    WebhookShape,
    build_webhook_metadata,
    classify_payload,
    derive_webhook_status,
    normalize,
)
from app.domain import SubscriberStatus
from utils.errors import ValidationError

EVENT_HEADER = "x-ghost-event"


def _webhook(member: dict, *, nested: bool = True) -> dict:
    return {"member": {"current": member}} if nested else {"member": member}


class TestClassifyPayload:
    """Detecção de formato."""

    def test_member_under_current(self) -> None:
        shape = classify_payload(_webhook({"email": "a@b.com"}), "member.added")
        assert isinstance(shape, WebhookShape)
        assert shape.email == "a@b.com"
        assert shape.event_type == "member.added"

    def test_member_without_current(self) -> None:
        shape = classify_payload(_webhook({"email": "a@b.com"}, nested=False))
        assert isinstance(shape, WebhookShape)

    def test_direct_shape_defaults_status(self) -> None:
        shape = classify_payload({"email": "a@b.com", "name": "Ana"})
        assert isinstance(shape, DirectShape)
        assert shape.status == "confirmed"
        assert shape.extras == {"name": "Ana"}

    def test_direct_shape_null_status_defaults(self) -> None:
        shape = classify_payload({"email": "a@b.com", "status": None})
        assert shape.status == "confirmed"

    def test_member_without_email_falls_back_to_top_level(self) -> None:
        shape = classify_payload({"member": {"current": {}}, "email": "a@b.com"})
        assert isinstance(shape, DirectShape)

    @pytest.mark.parametrize("body", [{}, {"member": {}}, {"status": "confirmed"}, [], "x", None])
    def test_missing_email(self, body: object) -> None:
        with pytest.raises(ValidationError, match="Missing email") as exc_info:
            classify_payload(body)
        assert exc_info.value.message == MISSING_EMAIL_MESSAGE


class TestDeriveWebhookStatus:
    """Regras de status para webhooks, na ordem."""

    @pytest.mark.parametrize("lifecycle", ["free", "paid", "comped"])
    def test_active_states_confirmed(self, lifecycle: str) -> None:
        assert derive_webhook_status({"status": lifecycle}, None) is SubscriberStatus.CONFIRMED

    def test_cancelled_state_unsubscribed(self) -> None:
        assert derive_webhook_status({"status": "cancelled"}, None) is SubscriberStatus.UNSUBSCRIBED

    def test_deleted_flag_unsubscribed(self) -> None:
        assert derive_webhook_status({"deleted": True}, None) is SubscriberStatus.UNSUBSCRIBED

    def test_unknown_state_defaults_to_confirmed(self) -> None:
        assert derive_webhook_status({"status": "weird"}, None) is SubscriberStatus.CONFIRMED

    @pytest.mark.parametrize("event", ["member.deleted", "member.unsubscribed"])
    @pytest.mark.parametrize("lifecycle", ["free", "paid", "comped", "cancelled", None])
    def test_removal_event_always_unsubscribed(self, event: str, lifecycle: str | None) -> None:
        member = {"status": lifecycle, "subscribed": True}
        assert derive_webhook_status(member, event) is SubscriberStatus.UNSUBSCRIBED

    @pytest.mark.parametrize("event", ["member.added", "member.updated"])
    def test_upsert_with_subscribed_false(self, event: str) -> None:
        member = {"status": "free", "subscribed": False}
        assert derive_webhook_status(member, event) is SubscriberStatus.UNSUBSCRIBED

    def test_upsert_confirms_active_member(self) -> None:
        member = {"status": "paid", "subscribed": True}
        assert derive_webhook_status(member, "member.updated") is SubscriberStatus.CONFIRMED

    def test_upsert_keeps_cancelled_member_unsubscribed(self) -> None:
        member = {"status": "cancelled"}
        assert derive_webhook_status(member, "member.updated") is SubscriberStatus.UNSUBSCRIBED

    def test_subscribed_none_is_not_false(self) -> None:
        member = {"status": "free", "subscribed": None}
        assert derive_webhook_status(member, "member.added") is SubscriberStatus.CONFIRMED


class TestBuildWebhookMetadata:
    def test_contains_fixed_keys(self) -> None:
        member = {
            "name": "Ana",
            "status": "free",
            "subscribed": True,
            "uuid": "uuid-1",
            "id": "id-1",
        }
        assert build_webhook_metadata(member, "member.added") == {
            "name": "Ana",
            "ghost_status": "free",
            "ghost_event": "member.added",
            "subscribed": True,
            "source": "ghost-webhook",
            "ghost_uuid": "uuid-1",
            "ghost_id": "id-1",
        }


class TestNormalize:
    """Fluxo completo com headers."""

    def test_webhook_event_header_is_case_insensitive(self) -> None:
        event = normalize(
            _webhook({"email": "a@b.com", "status": "free"}),
            {"X-Ghost-Event": "member.deleted"},
        )
        assert event.status is SubscriberStatus.UNSUBSCRIBED
        assert event.source == "webhook"
        assert event.metadata["ghost_event"] == "member.deleted"

    def test_cancelled_member_updated_scenario(self) -> None:
        event = normalize(
            _webhook({"email": "a@b.com", "status": "cancelled"}),
            {EVENT_HEADER: "member.updated"},
        )
        assert event.status is SubscriberStatus.UNSUBSCRIBED

    def test_direct_call_echoes_input(self) -> None:
        event = normalize({"email": "a@b.com", "status": "bounced", "ref": "x"}, {})
        assert event.email == "a@b.com"
        assert event.status is SubscriberStatus.BOUNCED
        assert dict(event.metadata) == {"ref": "x"}
        assert event.source == "direct"

    def test_direct_call_without_status_is_confirmed(self) -> None:
        assert normalize({"email": "a@b.com"}, {}).status is SubscriberStatus.CONFIRMED

    def test_invalid_status(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            normalize({"email": "a@b.com", "status": "active"}, {})
        assert exc_info.value.message == (
            "Invalid status. Must be one of: confirmed, unconfirmed, unsubscribed, bounced"
        )

    @pytest.mark.parametrize("email", ["plainaddress", "a@b", "a b@c.com", "a@b c.com", 42])
    def test_invalid_email(self, email: object) -> None:
        with pytest.raises(ValidationError, match="Invalid email format"):
            normalize({"email": email}, {})

    def test_invalid_webhook_email(self) -> None:
        with pytest.raises(ValidationError, match="Invalid email format"):
            normalize(_webhook({"email": "nope"}), {EVENT_HEADER: "member.added"})
