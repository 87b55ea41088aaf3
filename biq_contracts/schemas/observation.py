from datetime import datetime, timezone
from enum import IntEnum
from typing import Optional

from pydantic import AliasChoices, Field

from biq_contracts.schemas.base import WireModel
from biq_contracts.schemas.device import DeviceURN


class ObservationElement(IntEnum):
    DEVICE_ID = 0
    FIRMWARE_VERSION = 1
    BATTERY_LEVEL = 2
    CHARGING = 3
    TEMPERATURE = 4
    LIGHT_LEVEL = 5
    RELATIVE_HUMIDITY = 6
    RELATIVE_TEMPERATURE = 7
    ACCELERATION = 8  # x, y and z together


class Observation(WireModel):
    # obstime is float milliseconds since the epoch. temp is always raw celsius.
    id: int
    # The store still calls this column bixid.
    device_id: DeviceURN = Field(
        validation_alias=AliasChoices("bixid", "deviceId", "device_id"),
        serialization_alias="bixid",
    )
    obstime: float
    charging: int
    firmware: str
    wifi_firmware: Optional[str] = None
    battery: float
    temp: float
    light: int
    humidity: int
    # The acceleration axes are due to change; do not build on them.
    accelx: int
    accely: int
    accelz: int

    @property
    def obs_time_seconds(self) -> float:
        return self.obstime / 1000

    @property
    def observed_at(self) -> datetime:
        return datetime.fromtimestamp(self.obs_time_seconds, timezone.utc)

    @property
    def is_charging(self) -> bool:
        return self.charging != 0
