"""HTTP tests for the role and membership routes, run against an in-process app."""

from collections.abc import AsyncIterator
from dataclasses import dataclass
from uuid import uuid4

import pytest
import pytest_asyncio
from dishka import AsyncContainer
from httpx import ASGITransport, AsyncClient

from trustee_portal.application.api.rest.app import create_app
from trustee_portal.application.di import create_container
from trustee_portal.config import Config
from trustee_portal.domain.auth.model.role import Role
from trustee_portal.domain.auth.model.value import OrganizationId, UserId
from trustee_portal.domain.auth.service.token import TokenService
from trustee_portal.domain.membership.model import Membership
from trustee_portal.domain.membership.port import AuditLogRepository, MembershipRepository


@dataclass
class Harness:
    client: AsyncClient
    container: AsyncContainer
    tokens: TokenService
    org: OrganizationId

    async def add_member(self, role: Role, org: OrganizationId | None = None) -> Membership:
        user_id = UserId.generate()
        member = Membership.create(org or self.org, user_id, f"{user_id}@example.org", role)
        repo = await self.container.get(MembershipRepository)
        await repo.save(member)
        return member

    def auth(self, member: Membership) -> dict[str, str]:
        token = self.tokens.create_access_token(
            member.user_id, organization_id=member.organization_id
        )
        return {"Authorization": f"Bearer {token}"}

    def super_admin_auth(self) -> dict[str, str]:
        token = self.tokens.create_access_token(UserId.generate(), is_super_admin=True)
        return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def harness() -> AsyncIterator[Harness]:
    config = Config(invitations={"expire_days": 7, "max_members": 10})
    container = create_container(config)
    app = create_app(config, container=container)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield Harness(
            client=client,
            container=container,
            tokens=TokenService(_config=config.auth.jwt),
            org=OrganizationId.generate(),
        )
    await container.close()


class TestRoleCatalog:
    @pytest.mark.asyncio
    async def test_public_catalog(self, harness: Harness) -> None:
        response = await harness.client.get("/api/v1/roles")

        assert response.status_code == 200
        roles = response.json()["roles"]
        assert [r["role"] for r in roles] == [r.value for r in Role]
        treasurer = next(r for r in roles if r["role"] == "treasurer")
        assert treasurer["level"] == 65
        assert treasurer["display_name"] == "Treasurer"
        assert "billing:manage" in treasurer["permissions"]

    @pytest.mark.asyncio
    async def test_assignable_roles_for_chair(self, harness: Harness) -> None:
        chair = await harness.add_member(Role.CHAIR)

        response = await harness.client.get(
            f"/api/v1/organizations/{harness.org}/roles/assignable", headers=harness.auth(chair)
        )

        assert response.status_code == 200
        body = response.json()
        assert body["role"] == "chair"
        invitable = [r["role"] for r in body["invitable"]]
        assert invitable[0] == "vice_chair"
        assert "chair" not in invitable

    @pytest.mark.asyncio
    async def test_assignable_roles_requires_invite_or_assign(self, harness: Harness) -> None:
        trustee = await harness.add_member(Role.TRUSTEE)

        response = await harness.client.get(
            f"/api/v1/organizations/{harness.org}/roles/assignable", headers=harness.auth(trustee)
        )

        assert response.status_code == 403
        assert response.json()["error"]["code"] == "INSUFFICIENT_PERMISSIONS"

    @pytest.mark.asyncio
    async def test_assignable_roles_for_another_organization(self, harness: Harness) -> None:
        owner = await harness.add_member(Role.OWNER)

        response = await harness.client.get(
            f"/api/v1/organizations/{uuid4()}/roles/assignable", headers=harness.auth(owner)
        )

        assert response.status_code == 403
        assert response.json()["error"]["code"] == "ORG_MEMBERSHIP_REQUIRED"


class TestAuthentication:
    @pytest.mark.asyncio
    async def test_missing_token_is_401(self, harness: Harness) -> None:
        response = await harness.client.post(
            f"/api/v1/organizations/{harness.org}/invitations",
            json={"email": "x@example.org", "role": "trustee"},
        )

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"
        assert response.json() == {
            "success": False,
            "error": {"code": "UNAUTHORIZED", "message": "Authentication required"},
        }

    @pytest.mark.asyncio
    async def test_garbage_token_is_401(self, harness: Harness) -> None:
        response = await harness.client.delete(
            f"/api/v1/organizations/{harness.org}/members/{uuid4()}",
            headers={"Authorization": "Bearer nonsense"},
        )
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_non_member_is_403(self, harness: Harness) -> None:
        outsider = await harness.add_member(Role.OWNER, org=OrganizationId.generate())
        headers = {
            "Authorization": "Bearer "
            + harness.tokens.create_access_token(outsider.user_id, organization_id=harness.org)
        }

        response = await harness.client.post(
            f"/api/v1/organizations/{harness.org}/invitations",
            json={"email": "x@example.org", "role": "trustee"},
            headers=headers,
        )

        assert response.status_code == 403
        assert response.json()["error"]["code"] == "ORG_MEMBERSHIP_REQUIRED"


class TestInvitations:
    @pytest.mark.asyncio
    async def test_invite_and_cancel(self, harness: Harness) -> None:
        secretary = await harness.add_member(Role.SECRETARY)

        created = await harness.client.post(
            f"/api/v1/organizations/{harness.org}/invitations",
            json={"email": "New@Example.org", "role": "volunteer", "department": "Events"},
            headers=harness.auth(secretary),
        )

        assert created.status_code == 201
        invitation = created.json()
        assert invitation["email"] == "new@example.org"
        assert invitation["role"] == "volunteer"

        cancelled = await harness.client.delete(
            f"/api/v1/organizations/{harness.org}/invitations/{invitation['id']}",
            headers=harness.auth(secretary),
        )
        assert cancelled.status_code == 200
        assert cancelled.json()["id"] == invitation["id"]

    @pytest.mark.asyncio
    async def test_duplicate_invitation_is_409(self, harness: Harness) -> None:
        owner = await harness.add_member(Role.OWNER)
        body = {"email": "twice@example.org", "role": "trustee"}
        url = f"/api/v1/organizations/{harness.org}/invitations"

        await harness.client.post(url, json=body, headers=harness.auth(owner))
        response = await harness.client.post(url, json=body, headers=harness.auth(owner))

        assert response.status_code == 409
        assert response.json()["error"]["code"] == "INVITATION_PENDING"

    @pytest.mark.asyncio
    async def test_treasurer_cannot_invite(self, harness: Harness) -> None:
        treasurer = await harness.add_member(Role.TREASURER)

        response = await harness.client.post(
            f"/api/v1/organizations/{harness.org}/invitations",
            json={"email": "x@example.org", "role": "viewer"},
            headers=harness.auth(treasurer),
        )

        assert response.status_code == 403
        assert response.json()["error"] == {
            "code": "INSUFFICIENT_PERMISSIONS",
            "message": "Required permissions: user:invite",
        }

    @pytest.mark.asyncio
    async def test_unknown_role_is_rejected_by_validation(self, harness: Harness) -> None:
        owner = await harness.add_member(Role.OWNER)

        response = await harness.client.post(
            f"/api/v1/organizations/{harness.org}/invitations",
            json={"email": "x@example.org", "role": "janitor"},
            headers=harness.auth(owner),
        )

        assert response.status_code == 422
        body = response.json()
        assert body["success"] is False
        assert body["error"]["code"] == "VALIDATION_ERROR"
        assert body["error"]["message"] == "Validation failed"
        assert body["error"]["details"]["errors"][0]["loc"] == ["body", "role"]

    @pytest.mark.asyncio
    async def test_malformed_email_is_rejected_by_validation(self, harness: Harness) -> None:
        owner = await harness.add_member(Role.OWNER)

        response = await harness.client.post(
            f"/api/v1/organizations/{harness.org}/invitations",
            json={"email": "not-an-email", "role": "trustee"},
            headers=harness.auth(owner),
        )

        assert response.status_code == 422
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"
        assert response.json()["error"]["details"]["errors"][0]["loc"] == ["body", "email"]


class TestMemberChanges:
    @pytest.mark.asyncio
    async def test_change_role(self, harness: Harness) -> None:
        owner = await harness.add_member(Role.OWNER)
        trustee = await harness.add_member(Role.TRUSTEE)

        response = await harness.client.put(
            f"/api/v1/organizations/{harness.org}/members/{trustee.id}/role",
            json={"role": "vice_chair"},
            headers=harness.auth(owner),
        )

        assert response.status_code == 200
        assert response.json()["previous_role"] == "trustee"
        assert response.json()["role"] == "vice_chair"

        audit = await harness.container.get(AuditLogRepository)
        [entry] = await audit.list_for_organization(harness.org)
        assert entry.details["new_role"] == "vice_chair"

    @pytest.mark.asyncio
    async def test_change_own_role_is_422(self, harness: Harness) -> None:
        admin = await harness.add_member(Role.ADMIN)

        response = await harness.client.put(
            f"/api/v1/organizations/{harness.org}/members/{admin.id}/role",
            json={"role": "viewer"},
            headers=harness.auth(admin),
        )

        assert response.status_code == 422
        assert response.json()["error"]["code"] == "CANNOT_MODIFY_SELF"

    @pytest.mark.asyncio
    async def test_invalid_transition_is_403(self, harness: Harness) -> None:
        admin = await harness.add_member(Role.ADMIN)
        chair = await harness.add_member(Role.CHAIR)

        response = await harness.client.put(
            f"/api/v1/organizations/{harness.org}/members/{chair.id}/role",
            json={"role": "admin"},
            headers=harness.auth(admin),
        )

        assert response.status_code == 403
        assert response.json()["error"] == {
            "code": "INVALID_ROLE_TRANSITION",
            "message": "Insufficient permissions to assign this role",
        }

    @pytest.mark.asyncio
    async def test_remove_member(self, harness: Harness) -> None:
        owner = await harness.add_member(Role.OWNER)
        viewer = await harness.add_member(Role.VIEWER)

        response = await harness.client.delete(
            f"/api/v1/organizations/{harness.org}/members/{viewer.id}",
            headers=harness.auth(owner),
        )

        assert response.status_code == 200
        assert response.json()["is_active"] is False

        again = await harness.client.delete(
            f"/api/v1/organizations/{harness.org}/members/{viewer.id}",
            headers=harness.auth(owner),
        )
        assert again.status_code == 404

    @pytest.mark.asyncio
    async def test_super_admin_acts_in_any_organization(self, harness: Harness) -> None:
        admin = await harness.add_member(Role.ADMIN)

        response = await harness.client.put(
            f"/api/v1/organizations/{harness.org}/members/{admin.id}/role",
            json={"role": "owner"},
            headers=harness.super_admin_auth(),
        )

        assert response.status_code == 200
        assert response.json()["role"] == "owner"

    @pytest.mark.asyncio
    async def test_health(self, harness: Harness) -> None:
        response = await harness.client.get("/api/v1/health")
        assert response.status_code == 200


class TestMemberList:
    @pytest.mark.asyncio
    async def test_trustee_lists_members_and_pending_invitations(self, harness: Harness) -> None:
        owner = await harness.add_member(Role.OWNER)
        trustee = await harness.add_member(Role.TRUSTEE)
        await harness.client.post(
            f"/api/v1/organizations/{harness.org}/invitations",
            json={"email": "pending@example.org", "role": "viewer"},
            headers=harness.auth(owner),
        )
        await harness.add_member(Role.OWNER, org=OrganizationId.generate())

        response = await harness.client.get(
            f"/api/v1/organizations/{harness.org}/members", headers=harness.auth(trustee)
        )

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 2
        assert body["page"] == 1
        assert body["limit"] == 20
        assert {m["id"] for m in body["members"]} == {str(owner.id), str(trustee.id)}
        [invitation] = body["pending_invitations"]
        assert invitation["email"] == "pending@example.org"
        assert invitation["invited_by"] == str(owner.user_id)

    @pytest.mark.asyncio
    async def test_status_filter_and_paging(self, harness: Harness) -> None:
        owner = await harness.add_member(Role.OWNER)
        viewer = await harness.add_member(Role.VIEWER)
        await harness.add_member(Role.TRUSTEE)
        await harness.client.delete(
            f"/api/v1/organizations/{harness.org}/members/{viewer.id}",
            headers=harness.auth(owner),
        )
        url = f"/api/v1/organizations/{harness.org}/members"

        inactive = await harness.client.get(
            url, params={"status": "inactive"}, headers=harness.auth(owner)
        )
        paged = await harness.client.get(
            url, params={"status": "all", "limit": 1, "page": 2}, headers=harness.auth(owner)
        )

        assert [m["id"] for m in inactive.json()["members"]] == [str(viewer.id)]
        assert inactive.json()["members"][0]["is_active"] is False
        assert paged.json()["total"] == 3
        assert len(paged.json()["members"]) == 1

    @pytest.mark.asyncio
    async def test_limit_above_maximum_is_422(self, harness: Harness) -> None:
        owner = await harness.add_member(Role.OWNER)

        response = await harness.client.get(
            f"/api/v1/organizations/{harness.org}/members",
            params={"limit": 101},
            headers=harness.auth(owner),
        )

        assert response.status_code == 422
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    async def test_volunteer_cannot_list_members(self, harness: Harness) -> None:
        volunteer = await harness.add_member(Role.VOLUNTEER)

        response = await harness.client.get(
            f"/api/v1/organizations/{harness.org}/members", headers=harness.auth(volunteer)
        )

        assert response.status_code == 403
        assert response.json()["error"] == {
            "code": "INSUFFICIENT_PERMISSIONS",
            "message": "Required permissions: user:view",
        }

    @pytest.mark.asyncio
    async def test_members_of_another_organization(self, harness: Harness) -> None:
        owner = await harness.add_member(Role.OWNER)

        response = await harness.client.get(
            f"/api/v1/organizations/{uuid4()}/members", headers=harness.auth(owner)
        )

        assert response.status_code == 403
        assert response.json()["error"]["code"] == "ORG_MEMBERSHIP_REQUIRED"


class TestAuditLog:
    @pytest.mark.asyncio
    async def test_owner_reads_log_and_resource_history(self, harness: Harness) -> None:
        owner = await harness.add_member(Role.OWNER)
        trustee = await harness.add_member(Role.TRUSTEE)
        await harness.client.put(
            f"/api/v1/organizations/{harness.org}/members/{trustee.id}/role",
            json={"role": "vice_chair"},
            headers=harness.auth(owner),
        )
        await harness.client.post(
            f"/api/v1/organizations/{harness.org}/invitations",
            json={"email": "later@example.org", "role": "viewer"},
            headers=harness.auth(owner),
        )

        log = await harness.client.get(
            f"/api/v1/audit/organizations/{harness.org}/logs", headers=harness.auth(owner)
        )
        changes = await harness.client.get(
            f"/api/v1/audit/organizations/{harness.org}/logs",
            params={"action": "role_change"},
            headers=harness.auth(owner),
        )
        history = await harness.client.get(
            f"/api/v1/audit/organizations/{harness.org}"
            f"/resources/organization_member/{trustee.id}/history",
            headers=harness.auth(owner),
        )

        assert log.status_code == 200
        assert log.json()["total"] == 2
        assert [e["action"] for e in log.json()["items"]] == ["invite", "role_change"]
        [change] = changes.json()["items"]
        assert change["user_id"] == str(owner.user_id)
        assert change["details"]["new_role"] == "vice_chair"
        assert history.status_code == 200
        assert [e["id"] for e in history.json()["items"]] == [change["id"]]

    @pytest.mark.asyncio
    async def test_trustee_cannot_read_audit_log(self, harness: Harness) -> None:
        trustee = await harness.add_member(Role.TRUSTEE)

        log = await harness.client.get(
            f"/api/v1/audit/organizations/{harness.org}/logs", headers=harness.auth(trustee)
        )
        history = await harness.client.get(
            f"/api/v1/audit/organizations/{harness.org}"
            f"/resources/organization_member/{trustee.id}/history",
            headers=harness.auth(trustee),
        )

        assert log.status_code == 403
        assert log.json()["error"]["code"] == "INSUFFICIENT_PERMISSIONS"
        assert history.status_code == 403
        assert history.json()["error"]["code"] == "INSUFFICIENT_PERMISSIONS"

    @pytest.mark.asyncio
    async def test_audit_log_of_another_organization(self, harness: Harness) -> None:
        owner = await harness.add_member(Role.OWNER)
        other_org = uuid4()

        log = await harness.client.get(
            f"/api/v1/audit/organizations/{other_org}/logs", headers=harness.auth(owner)
        )
        history = await harness.client.get(
            f"/api/v1/audit/organizations/{other_org}/resources/invitation/{uuid4()}/history",
            headers=harness.auth(owner),
        )

        assert log.status_code == 403
        assert log.json()["error"]["code"] == "ORG_MEMBERSHIP_REQUIRED"
        assert history.status_code == 403
        assert history.json()["error"]["code"] == "ORG_MEMBERSHIP_REQUIRED"

    @pytest.mark.asyncio
    async def test_super_admin_reads_any_audit_log(self, harness: Harness) -> None:
        response = await harness.client.get(
            f"/api/v1/audit/organizations/{harness.org}/logs", headers=harness.super_admin_auth()
        )

        assert response.status_code == 200
        assert response.json() == {"items": [], "total": 0, "page": 1, "limit": 20}
