import json
import logging

import redis

from langbridge.core.config import settings

logger = logging.getLogger(__name__)


def get_redis_client():
    return redis.Redis(
        host=settings.REDIS_HOST,
        port=settings.REDIS_PORT,
        db=settings.REDIS_DB,
        socket_connect_timeout=settings.REDIS_SOCKET_TIMEOUT,
        socket_timeout=settings.REDIS_SOCKET_TIMEOUT,
        decode_responses=True,
    )


def send_new_notification(client, title, description):
    json_description = json.dumps(description)
    client.publish(title, json_description)


class RedisNotifier:
    """Publishes friend request events on a pub/sub channel.

    Events go out after the transaction has committed, so a Redis failure is
    logged and dropped rather than failing the request.
    """

    def __init__(self, client, channel=None):
        self._client = client
        self._channel = channel or settings.NOTIFICATION_CHANNEL

    def publish(self, event: str, request: dict) -> None:
        payload = {
            "event": event,
            "requestId": str(request["_id"]),
            "sender": str(request["sender"]),
            "recipient": str(request["recipient"]),
        }
        try:
            send_new_notification(self._client, self._channel, payload)
        except redis.RedisError as e:
            logger.warning(
                "Could not publish %s: %s", event, e, extra={"channel": self._channel}
            )
