"""Startup validation for handler authorization declarations."""

import logging

from trustee_portal.domain.shared.authorization.gate import Public
from trustee_portal.domain.shared.authorization.policy import Policy
from trustee_portal.domain.shared.command import CommandHandler
from trustee_portal.domain.shared.error import ConfigurationError
from trustee_portal.domain.shared.query import QueryHandler

logger = logging.getLogger(__name__)


def _get_dto_type(handler_cls: type) -> type | None:
    """Extract the Command/Query type from a handler's generic bases."""
    from typing import get_args, get_origin

    for base in getattr(handler_cls, "__orig_bases__", []):
        origin = get_origin(base)
        if origin is None:
            continue
        name = getattr(origin, "__name__", "")
        if name in ("CommandHandler", "QueryHandler"):
            args = get_args(base)
            if args and isinstance(args[0], type):
                return args[0]
    return None


def _all_subclasses(cls: type) -> list[type]:
    """Handler classes defined in this package, including indirect subclasses."""
    found: list[type] = []
    for sub in cls.__subclasses__():
        if sub.__module__.startswith("trustee_portal."):
            found.append(sub)
        found.extend(_all_subclasses(sub))
    return found


def _check_command_handler(handler_cls: type) -> None:
    dto_cls = _get_dto_type(handler_cls)
    if dto_cls is not None and getattr(dto_cls, "__public__", False):
        return
    if not isinstance(getattr(handler_cls, "__auth__", None), Policy):
        raise ConfigurationError(
            f"Handler {handler_cls.__name__} has no __auth__ declaration "
            f"and its command is not __public__"
        )


def _check_query_handler(handler_cls: type) -> None:
    if not isinstance(getattr(handler_cls, "__auth__", None), (Public, Policy)):
        raise ConfigurationError(f"Handler {handler_cls.__name__} has no __auth__ declaration")


def validate_all_handlers() -> None:
    """Scan all registered CommandHandler and QueryHandler subclasses.

    Raises ConfigurationError listing all handlers missing __auth__ declarations.
    """
    violations: list[str] = []

    for handler_cls in _all_subclasses(CommandHandler):
        try:
            _check_command_handler(handler_cls)
        except ConfigurationError as e:
            violations.append(str(e))

    for handler_cls in _all_subclasses(QueryHandler):
        try:
            _check_query_handler(handler_cls)
        except ConfigurationError as e:
            violations.append(str(e))

    if violations:
        raise ConfigurationError(
            f"Authorization validation failed for {len(violations)} handler(s):\n"
            + "\n".join(f"  - {v}" for v in violations)
        )

    logger.info("Authorization startup validation passed for all handlers")
