"""Value objects for the auth and membership domains."""

from uuid import UUID, uuid4

from pydantic import RootModel


class UserId(RootModel[UUID]):
    """Unique identifier for a User."""

    @classmethod
    def generate(cls) -> "UserId":
        return cls(uuid4())

    def __str__(self) -> str:
        return str(self.root)

    def __hash__(self) -> int:
        return hash(self.root)


class OrganizationId(RootModel[UUID]):
    """Unique identifier for an Organization (the tenant)."""

    @classmethod
    def generate(cls) -> "OrganizationId":
        return cls(uuid4())

    def __str__(self) -> str:
        return str(self.root)

    def __hash__(self) -> int:
        return hash(self.root)


class MembershipId(RootModel[UUID]):
    """Unique identifier for an organization Membership."""

    @classmethod
    def generate(cls) -> "MembershipId":
        return cls(uuid4())

    def __str__(self) -> str:
        return str(self.root)

    def __hash__(self) -> int:
        return hash(self.root)


class InvitationId(RootModel[UUID]):
    """Unique identifier for an Invitation."""

    @classmethod
    def generate(cls) -> "InvitationId":
        return cls(uuid4())

    def __str__(self) -> str:
        return str(self.root)

    def __hash__(self) -> int:
        return hash(self.root)


class AuditEntryId(RootModel[UUID]):
    """Unique identifier for an AuditEntry."""

    @classmethod
    def generate(cls) -> "AuditEntryId":
        return cls(uuid4())

    def __str__(self) -> str:
        return str(self.root)

    def __hash__(self) -> int:
        return hash(self.root)
