"""
Message bus for the patient lookup service.

Each message is dispatched to exactly one handler, wrapped by an ordered
list of middleware. A middleware is a callable ``(message, next_)`` that
either calls ``next_(message)`` to continue or returns/raises to stop the
pipeline early.
"""
from __future__ import annotations

import logging
from functools import partial
from typing import Any, Callable, Dict, List, Mapping, Sequence, Type

from patient_lookup.service_layer.validators import ValidationError

logger = logging.getLogger(__name__)

Handler = Callable[[Any], Any]
Middleware = Callable[[Any, Handler], Any]


class MessageBus:
    """Routes messages to their handler through the middleware chain."""

    def __init__(
        self,
        handlers: Mapping[Type, Handler],
        middleware: Sequence[Middleware] = (),
    ):
        self.handlers: Dict[Type, Handler] = dict(handlers)
        self.middleware: List[Middleware] = list(middleware)

    def handle(self, message: Any) -> Any:
        """Run the message through the middleware and its handler."""
        message_type = type(message)
        if message_type not in self.handlers:
            raise ValueError(f"No handler registered for {message_type.__name__}")

        pipeline = self.handlers[message_type]
        # first middleware in the list runs outermost
        for middleware in reversed(self.middleware):
            pipeline = partial(middleware, next_=pipeline)
        return pipeline(message)


def logging_middleware(message: Any, next_: Handler) -> Any:
    """Log every dispatched message; errors are logged and re-raised."""
    message_name = type(message).__name__
    logger.debug(f"handling {message_name}: {message}")
    try:
        return next_(message)
    except ValidationError:
        raise
    except Exception:
        logger.exception("Exception handling %s", message)
        raise


def validation_middleware(validators: Mapping[Type, Sequence[Any]]) -> Middleware:
    """
    Build a middleware that runs the validators registered for a message type.

    All violations from all validators are collected; if there are any the
    pipeline stops with ValidationError and the handler is never called.
    """

    def validate(message: Any, next_: Handler) -> Any:
        message_name = type(message).__name__
        message_validators = validators.get(type(message), ())

        if not message_validators:
            logger.debug(f"No validators found for {message_name}")
            return next_(message)

        logger.info(f"Validating request: {message_name}")
        violations = [
            violation
            for validator in message_validators
            for violation in validator.validate(message)
        ]

        if violations:
            logger.warning(
                f"Validation failed for {message_name}. Errors: {[v.message for v in violations]}"
            )
            raise ValidationError(message_name, violations)

        logger.info(f"Validation passed for {message_name}")
        return next_(message)

    return validate
