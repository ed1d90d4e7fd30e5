from __future__ import annotations

import logging
from typing import Callable

from sm_scaffold.handler import ScaffoldHandler
from sm_scaffold.models import FetchReport

LOGGER = logging.getLogger(__name__)

POST_UPDATE_CMD = "post-update-cmd"

HookCallback = Callable[[ScaffoldHandler, str], FetchReport]


def _post_cmd(handler: ScaffoldHandler, event: str) -> FetchReport:
    return handler.on_post_cmd_event(event)


SUBSCRIBED_EVENTS: dict[str, HookCallback] = {
    POST_UPDATE_CMD: _post_cmd,
}


def is_subscribed(event: str) -> bool:
    return event in SUBSCRIBED_EVENTS


def dispatch(event: str, handler: ScaffoldHandler) -> FetchReport | None:
    callback = SUBSCRIBED_EVENTS.get(event)
    if callback is None:
        LOGGER.debug("no scaffold hook registered for event %s", event)
        return None
    return callback(handler, event)
