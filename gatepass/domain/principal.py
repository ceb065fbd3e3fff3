from dataclasses import dataclass

from .entities.enums import PrincipalRole


@dataclass(frozen=True)
class Principal:
    """Authenticated caller handed to every use case.

    organization_id comes from the identity provider and is the only tenant
    binding the service trusts.
    """

    id: str
    organization_id: str
    role: PrincipalRole
    name: str = ""

    @property
    def is_staff(self) -> bool:
        return self.role in (PrincipalRole.guard, PrincipalRole.admin)
