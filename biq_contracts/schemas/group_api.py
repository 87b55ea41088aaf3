from typing import Optional

from biq_contracts.schemas.base import WireModel
from biq_contracts.schemas.device import DeviceURN, GroupId


class CreateRequest(WireModel):
    name: str


class DeleteRequest(WireModel):
    group_id: GroupId


class UpdateRequest(WireModel):
    # only the name for now, None leaves it as is
    group_id: GroupId
    name: Optional[str] = None


class ListDevicesRequest(WireModel):
    group_id: GroupId


class AddDeviceRequest(WireModel):
    group_id: GroupId
    device_id: DeviceURN
