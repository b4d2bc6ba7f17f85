"""Messaging service handle: publish messages to live servers of a universe."""

from __future__ import annotations

from ..config import MAX_MESSAGE_BYTES, MAX_TOPIC_LENGTH
from ..connectors.messaging.endpoints import REGISTRY
from ..core.exceptions import ValidationError
from ..utils.validation import must_be_string
from .base import ServiceHandle


def check_topic(topic: str) -> None:
    must_be_string("Topic", topic)
    if not topic:
        raise ValidationError("Topic cannot be empty")
    if len(topic) > MAX_TOPIC_LENGTH:
        raise ValidationError(f"Topic cannot be longer than {MAX_TOPIC_LENGTH} characters")
    if "/" in topic or any(not ch.isprintable() for ch in topic):
        raise ValidationError("Topic contains disallowed characters")


class MessagingService(ServiceHandle):
    registry = REGISTRY

    async def publish(self, topic: str, message: str) -> None:
        """Publish ``message`` to every server subscribed to ``topic``."""
        check_topic(topic)
        must_be_string("Message", message)
        if len(message.encode("utf-8")) > MAX_MESSAGE_BYTES:
            raise ValidationError(f"Message cannot be larger than {MAX_MESSAGE_BYTES} bytes")
        await self._fetch("publish", self._params(topic=topic, message=message))
