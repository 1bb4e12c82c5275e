from datetime import datetime
from typing import Callable, Dict, List, NamedTuple

__all__ = ['FILTERS_CHANGED', 'TRANSACTIONS_CHANGED', 'OPTIONS_CHANGED', 'Event', 'EventBus']

FILTERS_CHANGED = "FILTERS_CHANGED"
TRANSACTIONS_CHANGED = "TRANSACTIONS_CHANGED"
OPTIONS_CHANGED = "OPTIONS_CHANGED"


class Event(NamedTuple):
    name: str
    ts: str
    payload: dict


class EventBus:
    """Synchronous publish/subscribe; handlers run in subscription order."""

    def __init__(self):
        self._subscribers: Dict[str, List[Callable[[Event, dict], dict]]] = {}

    def subscribe(self, name: str, handler: Callable[[Event, dict], dict]) -> None:
        self._subscribers.setdefault(name, []).append(handler)

    def publish(self, name: str, payload: dict) -> List[dict]:
        handlers = self._subscribers.get(name)
        if not handlers:
            return []
        event = Event(name=name, ts=datetime.now().isoformat(), payload=payload)
        return [handler(event, payload) for handler in list(handlers)]

    def unsubscribe(self, name: str, handler: Callable[[Event, dict], dict]) -> None:
        handlers = self._subscribers.get(name, [])
        if handler in handlers:
            handlers.remove(handler)
