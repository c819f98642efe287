from __future__ import annotations

import asyncio
import logging

from stream_client.config import CLIENT_CONFIG, endpoint_from_config, load_config, policy_from_config
from stream_client.core import ConnectionSupervisor
from stream_shared.protocol.events import (
    ConversationEvent,
    DeleteEvent,
    Event,
    HeartbeatEvent,
    NotificationEvent,
    UpdateEvent,
)

logger = logging.getLogger("stream_client")


def describe(event: Event) -> str:
    """One-line summary of an event for the console."""
    match event:
        case HeartbeatEvent():
            return "heartbeat"
        case UpdateEvent(status=status):
            return f"update {status.id} by @{status.account.acct}"
        case NotificationEvent(notification=notification):
            return f"notification {notification.id} ({notification.type}) from @{notification.account.acct}"
        case ConversationEvent(conversation=conversation):
            return f"conversation {conversation.id} unread={conversation.unread}"
        case DeleteEvent(id=status_id):
            return f"delete {status_id}"
    return repr(event)


def print_event(event: Event) -> None:
    if isinstance(event, HeartbeatEvent):
        logger.debug(describe(event))
        return
    logger.info(describe(event))


async def run_client() -> None:
    load_config()
    logging.basicConfig(level=CLIENT_CONFIG["log_level"], format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    supervisor = ConnectionSupervisor(
        endpoint_from_config(CLIENT_CONFIG),
        retry_policy=policy_from_config(CLIENT_CONFIG),
        read_timeout=CLIENT_CONFIG["read_timeout"],
    )
    await supervisor.listen(print_event)


def main() -> None:
    try:
        asyncio.run(run_client())
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
