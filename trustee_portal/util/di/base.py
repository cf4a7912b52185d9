from dishka import Provider as DishkaProvider

from trustee_portal.util.di.scope import Scope


class Provider(DishkaProvider):
    """Base provider; anything not given an explicit scope lives for one unit of work."""

    scope = Scope.UOW
