from dishka import AsyncContainer, Provider, from_context, make_async_container

from trustee_portal.config import Config
from trustee_portal.domain.auth.util.di import AuthProvider
from trustee_portal.domain.membership.util.di import MembershipProvider
from trustee_portal.infrastructure.persistence import PersistenceProvider
from trustee_portal.util.di.scope import Scope


class ConfigProvider(Provider):
    config = from_context(provides=Config, scope=Scope.APP)


def create_container(config: Config | None = None, *extra: Provider) -> AsyncContainer:
    """Build the application container.

    ``extra`` providers are appended last, so they override earlier bindings.
    """
    # Pydantic Settings populates from env vars at runtime
    config = config or Config()  # type: ignore[call-arg]

    return make_async_container(
        ConfigProvider(),
        PersistenceProvider(),
        AuthProvider(),
        MembershipProvider(),
        *extra,
        context={Config: config},
        scopes=Scope,  # type: ignore[arg-type]  # Custom scope class
    )
