import uuid
from typing import List, Optional

from biq_contracts.schemas.base import WireModel
from biq_contracts.schemas.flags import DeviceFlags

UserId = uuid.UUID
GroupId = uuid.UUID
# Device ids are assigned by the hardware side; treat them as opaque.
DeviceURN = str


class GroupMembership(WireModel):
    group_id: GroupId
    device_id: DeviceURN

    @property
    def key(self) -> tuple:
        return self.group_id, self.device_id


class AccessPermission(WireModel):
    # The owner's own access is implied and never stored as a row.
    user_id: UserId
    device_id: DeviceURN
    # Unclear whether the service still reads this.
    flags: Optional[int] = None

    @property
    def key(self) -> tuple:
        return self.user_id, self.device_id


class Device(WireModel):
    """A reporting device.

    ``owner_id`` is None for an unowned device, which is a normal state. The two
    list fields are only filled by queries that join them in; absent means "not
    requested", not "none exist".

    Two devices are equal when their ids are equal, whatever the other fields
    hold. A stale copy therefore compares equal to a fresh one.
    """

    id: DeviceURN
    name: str
    owner_id: Optional[UserId] = None
    flags: Optional[DeviceFlags] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    group_memberships: Optional[List[GroupMembership]] = None
    access_permissions: Optional[List[AccessPermission]] = None

    @property
    def device_flags(self) -> DeviceFlags:
        if self.flags is None:
            return DeviceFlags(0)
        return self.flags

    @property
    def is_owned(self) -> bool:
        return self.owner_id is not None

    @property
    def is_locked(self) -> bool:
        return self.device_flags.locked

    def __eq__(self, other) -> bool:
        if isinstance(other, Device):
            return self.id == other.id
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.id)
