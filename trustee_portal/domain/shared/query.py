"""Query and QueryHandler base classes with authorization gate."""

from __future__ import annotations

from abc import ABCMeta, abstractmethod
from collections.abc import Callable, Coroutine
from dataclasses import dataclass
from functools import wraps
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar, dataclass_transform

from pydantic import BaseModel

if TYPE_CHECKING:
    from trustee_portal.domain.shared.authorization.gate import Public
    from trustee_portal.domain.shared.authorization.policy import Policy


class Query(BaseModel): ...


class Result(BaseModel): ...


C = TypeVar("C", bound=Query)
R = TypeVar("R", bound=Result)

# Unbound async handler method: (self, query) -> Coroutine -> Result
_HandlerMethod = Callable[..., Coroutine[Any, Any, Any]]


def _wrap_query_run_with_auth(cls: type, original_run: _HandlerMethod) -> _HandlerMethod:
    """Wrap the run() method with __auth__ gate evaluation."""

    @wraps(original_run)
    async def auth_wrapped_run(self: Any, query: Any) -> Any:
        from trustee_portal.domain.shared.authorization.gate import Public, authorize
        from trustee_portal.domain.shared.authorization.policy import Policy
        from trustee_portal.domain.shared.error import ConfigurationError

        auth_gate = getattr(type(self), "__auth__", None)

        if isinstance(auth_gate, Public):
            return await original_run(self, query)

        if isinstance(auth_gate, Policy):
            authorize(getattr(self, "identity", None), auth_gate, target=type(self).__name__)
            return await original_run(self, query)

        raise ConfigurationError(f"Handler {type(self).__name__} has no __auth__ declaration")

    return auth_wrapped_run


@dataclass_transform()
class _QueryHandlerMeta(ABCMeta):
    """Metaclass that combines ABC with auto-dataclass and __auth__ gate for subclasses."""

    def __new__(mcs, name: str, bases: tuple[type, ...], namespace: dict[str, Any]):
        cls = super().__new__(mcs, name, bases, namespace)
        if any(isinstance(b, mcs) for b in bases):
            cls = dataclass(cls)

            original_run = cls.__dict__.get("run")
            if original_run is not None:
                cls.run = _wrap_query_run_with_auth(cls, original_run)

        return cls


class QueryHandler(Generic[C, R], metaclass=_QueryHandlerMeta):
    """Base class for query handlers. Subclasses are automatically dataclasses.

    Declare __auth__ as public() or a Policy:
        class MyHandler(QueryHandler[MyQuery, MyResult]):
            __auth__ = requires_permission(Permission.USER_VIEW)
            identity: Identity
    """

    __auth__: ClassVar[Public | Policy]

    @abstractmethod
    async def run(self, query: C) -> R: ...
