"""
The authenticated caller, passed explicitly into services
"""
from dataclasses import dataclass, field
from typing import FrozenSet

from recruitment.models.user import RoleName


@dataclass(frozen=True)
class Principal:
    user_id: int
    username: str
    roles: FrozenSet[str] = field(default_factory=frozenset)

    def has_role(self, *roles: RoleName | str) -> bool:
        wanted = {RoleName(r).value for r in roles}
        return bool(wanted & self.roles)

    @classmethod
    def from_user(cls, user) -> "Principal":
        return cls(user_id=user.id, username=user.username, roles=frozenset(user.roles))
