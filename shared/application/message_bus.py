"""
Message Bus

Routes commands to exactly one handler and committed domain events to
any number of subscribers.

There is no module-level instance: ``config.bootstrap`` builds one bus
per process (tests build their own) and registers the handlers on it.
"""

from typing import Any, Callable
import logging

from shared.domain.base import DomainEvent
from shared.domain.exceptions import DomainError

logger = logging.getLogger(__name__)

CommandHandler = Callable[[Any], Any]
EventHandler = Callable[[DomainEvent], None]


class MessageBus:
    """
    Commands: one handler per command type; its result goes back to the caller
    Events: every subscriber of the event type is called, in registration order
    """

    def __init__(self):
        self._command_handlers: dict[type, CommandHandler] = {}
        self._subscribers: dict[type[DomainEvent], list[EventHandler]] = {}

    def register_command_handler(self, command_type: type, handler: CommandHandler):
        """Raises ValueError if ``command_type`` already has a handler"""
        if command_type in self._command_handlers:
            raise ValueError(f"{command_type.__name__} already has a handler")
        self._command_handlers[command_type] = handler
        logger.debug(f"{command_type.__name__} -> {getattr(handler, '__qualname__', handler)}")

    def register_event_handler(self, event_type: type[DomainEvent], handler: EventHandler):
        self._subscribers.setdefault(event_type, []).append(handler)

    def handle_command(self, command: Any) -> Any:
        """
        Run the handler registered for ``command``

        Domain errors are re-raised unchanged so callers can map them;
        anything else is logged as a failure first.
        """
        name = type(command).__name__
        handler = self._command_handlers.get(type(command))
        if handler is None:
            raise ValueError(f"No handler registered for {name}")

        logger.info(f"Handling {name}")
        try:
            return handler(command)
        except DomainError as e:
            logger.info(f"{name} rejected: {e.kind} ({e.message})")
            raise
        except Exception:
            logger.exception(f"{name} failed")
            raise

    def publish_events(self, events: list[DomainEvent]):
        """
        Deliver committed events

        A failing subscriber is logged and skipped; the remaining
        subscribers and events are still delivered.
        """
        for event in events:
            subscribers = self._subscribers.get(type(event), [])
            if not subscribers:
                logger.debug(f"No subscribers for {type(event).__name__}")
                continue

            for subscriber in subscribers:
                try:
                    subscriber(event)
                except Exception:
                    logger.exception(
                        f"Subscriber {getattr(subscriber, '__qualname__', subscriber)} "
                        f"failed on {type(event).__name__} {event.event_id}"
                    )
