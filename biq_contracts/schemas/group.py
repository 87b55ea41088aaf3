from typing import List, Optional

from biq_contracts.schemas.base import WireModel
from biq_contracts.schemas.device import Device, GroupId, UserId


class Group(WireModel):
    """A user owned, named collection of devices.

    Equality and hashing use ``id`` only, as for ``Device``.
    """

    id: GroupId
    owner_id: UserId
    name: str
    # Filled only when the query joined the group's devices.
    devices: Optional[List[Device]] = None

    def __eq__(self, other) -> bool:
        if isinstance(other, Group):
            return self.id == other.id
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.id)
