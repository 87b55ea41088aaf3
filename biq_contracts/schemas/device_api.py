import uuid
from datetime import timedelta
from enum import Enum, IntEnum
from typing import List, Optional

from biq_contracts.schemas.base import WireModel
from biq_contracts.schemas.device import Device, DeviceURN
from biq_contracts.schemas.flags import DeviceFlags, LimitFlags
from biq_contracts.schemas.limit import LimitType
from biq_contracts.schemas.observation import Observation


class GenericDeviceRequest(WireModel):
    device_id: DeviceURN


RegisterRequest = GenericDeviceRequest
LimitsRequest = GenericDeviceRequest


class ShareRequest(WireModel):
    # A locked device needs a single-use token issued by its owner.
    device_id: DeviceURN
    token: Optional[uuid.UUID] = None


class ShareTokenRequest(WireModel):
    device_id: DeviceURN


class ShareTokenResponse(WireModel):
    token: uuid.UUID

    @classmethod
    def issue(cls) -> "ShareTokenResponse":
        return cls(token=uuid.uuid4())


class UpdateRequest(WireModel):
    # None leaves a field unchanged. Only LOCKED is settable, capability bits are ignored.
    device_id: DeviceURN
    name: Optional[str] = None
    flags: Optional[DeviceFlags] = None

    @property
    def device_flags(self) -> Optional[DeviceFlags]:
        return self.flags


class DeviceLimit(WireModel):
    limit_type: LimitType
    limit_value: Optional[float] = None
    limit_value_string: Optional[str] = None
    limit_flag: Optional[LimitFlags] = None

    @property
    def is_deletion(self) -> bool:
        """True when neither value is given, which asks for the limit to be removed."""
        return self.limit_value is None and self.limit_value_string is None


class UpdateLimitsRequest(WireModel):
    device_id: DeviceURN
    limits: List[DeviceLimit]

    def deletions(self) -> List[DeviceLimit]:
        return [limit for limit in self.limits if limit.is_deletion]

    def changes(self) -> List[DeviceLimit]:
        return [limit for limit in self.limits if not limit.is_deletion]


# All limits of one device, same shape as the update.
DeviceLimitsResponse = UpdateLimitsRequest


class ListDevicesResponseItem(WireModel):
    device: Device
    # None for a device that never reported
    last_observation: Optional[Observation] = None
    # owner excluded; passed through as given, negative values included
    share_count: Optional[int] = None
    limits: Optional[List[DeviceLimit]] = None


class AggregationBucket(str, Enum):
    HOUR = "hour"
    DAY = "day"
    MONTH = "month"


class ObsRequest(WireModel):
    # interval travels as its rank; an unknown rank is kept and requested_interval is None.
    class Interval(IntEnum):
        ALL = 0  # everything, unaveraged. Debug only.
        LIVE = 1
        DAY = 2
        MONTH = 3
        YEAR = 4

        @property
        def window(self) -> Optional[timedelta]:
            return _WINDOWS[self]

        @property
        def bucket(self) -> Optional[AggregationBucket]:
            return _BUCKETS[self]

    device_id: DeviceURN
    interval: int

    @property
    def requested_interval(self) -> Optional["ObsRequest.Interval"]:
        try:
            return ObsRequest.Interval(self.interval)
        except ValueError:
            return None


_WINDOWS = {
    ObsRequest.Interval.ALL: None,
    ObsRequest.Interval.LIVE: timedelta(hours=12),
    ObsRequest.Interval.DAY: timedelta(hours=24),
    ObsRequest.Interval.MONTH: timedelta(days=30),
    ObsRequest.Interval.YEAR: timedelta(days=365),
}

# LIVE is raw readings, ALL is everything.
_BUCKETS = {
    ObsRequest.Interval.ALL: None,
    ObsRequest.Interval.LIVE: None,
    ObsRequest.Interval.DAY: AggregationBucket.HOUR,
    ObsRequest.Interval.MONTH: AggregationBucket.DAY,
    ObsRequest.Interval.YEAR: AggregationBucket.MONTH,
}
