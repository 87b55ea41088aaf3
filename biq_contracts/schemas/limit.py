import uuid
from typing import Any, Optional

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from biq_contracts.schemas.base import WireModel, raw_int_schema
from biq_contracts.schemas.flags import LimitFlags


_NAMES = (
    "tempHigh",
    "tempLow",
    "movementLevel",
    "batteryLevel",
    "notifications",
    "tempScale",
    "colour",
    "interval",
    "reportFormat",
    "reportBufferCapacity",
    "lightLevel",
    "humidityLevel",
)


class LimitType:
    """A kind of setting or threshold on a device, carried as a single byte.

    The set of named codes grows over time. A code this version does not know
    still decodes and re-encodes unchanged; ``is_known`` is False for it and
    callers branching on the type should treat it as not applicable.
    """

    __slots__ = ("_code",)

    TEMP_HIGH: "LimitType"
    TEMP_LOW: "LimitType"
    MOVEMENT_LEVEL: "LimitType"
    BATTERY_LEVEL: "LimitType"
    NOTIFICATIONS: "LimitType"
    TEMP_SCALE: "LimitType"
    # Colour of the device in the app and, for the owner, of its LED while reporting.
    COLOUR: "LimitType"
    INTERVAL: "LimitType"
    # Switching the device to JSON reports is not functional yet.
    REPORT_FORMAT: "LimitType"
    # How much data the device holds while it cannot connect.
    REPORT_BUFFER_CAPACITY: "LimitType"
    LIGHT_LEVEL: "LimitType"
    HUMIDITY_LEVEL: "LimitType"

    def __init__(self, code: int):
        code = int(code)
        if code < 0 or code > 0xFF:
            raise ValueError(f"limit type must fit in a byte: {code}")
        object.__setattr__(self, "_code", code)

    def __setattr__(self, name, value):
        raise AttributeError("LimitType is immutable")

    @property
    def code(self) -> int:
        return self._code

    @property
    def name(self) -> Optional[str]:
        if self._code < len(_NAMES):
            return _NAMES[self._code]
        return None

    @property
    def is_known(self) -> bool:
        return self._code < len(_NAMES)

    @classmethod
    def known(cls) -> list["LimitType"]:
        return [cls(code) for code in range(len(_NAMES))]

    def __int__(self) -> int:
        return self._code

    __index__ = __int__

    def __eq__(self, other) -> bool:
        if isinstance(other, LimitType):
            return self._code == other._code
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._code)

    def __repr__(self) -> str:
        return f"LimitType({self.name or self._code})"

    def __reduce__(self):
        return LimitType, (self._code,)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return raw_int_schema(cls, 0xFF, cls)


LimitType.TEMP_HIGH = LimitType(0)
LimitType.TEMP_LOW = LimitType(1)
LimitType.MOVEMENT_LEVEL = LimitType(2)
LimitType.BATTERY_LEVEL = LimitType(3)
LimitType.NOTIFICATIONS = LimitType(4)
LimitType.TEMP_SCALE = LimitType(5)
LimitType.COLOUR = LimitType(6)
LimitType.INTERVAL = LimitType(7)
LimitType.REPORT_FORMAT = LimitType(8)
LimitType.REPORT_BUFFER_CAPACITY = LimitType(9)
LimitType.LIGHT_LEVEL = LimitType(10)
LimitType.HUMIDITY_LEVEL = LimitType(11)


class Limit(WireModel):
    # Which of limit_value or limit_value_string matters depends on the type; the
    # service decides. limit_value is 0 when the string is the meaningful one.
    user_id: uuid.UUID
    device_id: str
    limit_type: LimitType
    limit_value: float = 0.0
    limit_value_string: Optional[str] = None
    limit_flag: Optional[LimitFlags] = None

    @property
    def flag(self) -> LimitFlags:
        if self.limit_flag is None:
            return LimitFlags.NONE
        return self.limit_flag

    @property
    def key(self) -> tuple:
        return self.user_id, self.device_id, self.limit_type


class PushLimit(WireModel):
    # Device scoped: only some owner limits are queued for the next check-in.
    device_id: str
    limit_type: LimitType
    limit_value: float = 0.0
    limit_value_string: Optional[str] = None

    @property
    def key(self) -> tuple:
        return self.device_id, self.limit_type
