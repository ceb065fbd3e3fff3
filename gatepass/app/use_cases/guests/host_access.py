"""
Host resolution shared by the guest use cases.
"""

from typing import Optional, Tuple

from gatepass.libs.result import Error
from gatepass.app.services.tenant_directory import TenantDirectory
from gatepass.domain.entities import Guest, Member, PrincipalRole
from gatepass.domain.principal import Principal


async def resolve_host(
    directory: TenantDirectory, principal: Principal, host_member_id: str
) -> Tuple[Optional[Member], Optional[Error]]:
    """
    Resolve the host member inside the caller's organization.

    Members act only for themselves; guards and admins for any member of
    their organization.
    """
    host = await directory.find_member(principal.organization_id, host_member_id)
    if host is None:
        if await directory.locate_member(host_member_id) is not None:
            return None, Error("UNAUTHORIZED", "Host member does not belong to your organization")
        return None, Error("OWNER_NOT_FOUND", "Host member not found")

    if principal.role == PrincipalRole.member and principal.id != host.id:
        return None, Error("UNAUTHORIZED", "Members can only manage their own guests")

    if not host.is_active:
        return None, Error("UNAUTHORIZED", "Host member is inactive")

    return host, None


def check_guest_access(principal: Principal, guest: Guest) -> Optional[Error]:
    """Members see only the guests they host; guards and admins see their organization's"""
    if principal.role == PrincipalRole.member and principal.id != guest.host_member_id:
        return Error("UNAUTHORIZED", "Members can only manage their own guests")
    return None
