"""Interfaces to the event store and option store, with in-memory versions."""

from typing import Any, Iterable, Protocol

from .models import Event


class EventStore(Protocol):
    def get_event(self, event_id: int) -> Event | None: ...
    
    def all_events(self) -> Iterable[Event]: ...


class OptionStore(Protocol):
    def get(self, name: str, default: Any = None) -> Any: ...
    
    def set(self, name: str, value: Any) -> None: ...
    
    def delete(self, name: str) -> None: ...


class InMemoryEventStore:
    def __init__(self, events: Iterable[Event] = ()):
        self._events = {event.id: event for event in events}
    
    def add(self, event: Event) -> None:
        self._events[event.id] = event
    
    def get_event(self, event_id: int) -> Event | None:
        return self._events.get(event_id)
    
    def all_events(self) -> Iterable[Event]:
        return list(self._events.values())


class InMemoryOptionStore:
    def __init__(self, options: dict[str, Any] | None = None):
        self._options = dict(options or {})
    
    def get(self, name: str, default: Any = None) -> Any:
        return self._options.get(name, default)
    
    def set(self, name: str, value: Any) -> None:
        self._options[name] = value
    
    def delete(self, name: str) -> None:
        self._options.pop(name, None)
