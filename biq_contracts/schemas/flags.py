from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from biq_contracts.schemas.base import raw_int_schema


class BitFlags:
    """An immutable set of single-bit flags over a raw unsigned integer.

    Bits without a name are kept as they are: a newer device or service may set
    bits this version does not know about, and they must survive a decode and
    re-encode untouched.
    """

    __slots__ = ("_raw",)

    MAX_VALUE = 0xFF

    def __init__(self, raw: int = 0):
        raw = int(raw)
        if raw < 0 or raw > self.MAX_VALUE:
            raise ValueError(f"{type(self).__name__} out of range: {raw}")
        object.__setattr__(self, "_raw", raw)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def raw(self) -> int:
        return self._raw

    def test(self, bit: "BitFlags | int") -> bool:
        mask = int(bit)
        return mask != 0 and self._raw & mask == mask

    def set(self, bit: "BitFlags | int"):
        return type(self)(self._raw | int(bit))

    def clear(self, bit: "BitFlags | int"):
        return type(self)(self._raw & ~int(bit))

    def __contains__(self, bit) -> bool:
        return self.test(bit)

    def __or__(self, other):
        if not isinstance(other, (BitFlags, int)):
            return NotImplemented
        return type(self)(self._raw | int(other))

    __ror__ = __or__

    def __and__(self, other):
        if not isinstance(other, (BitFlags, int)):
            return NotImplemented
        return type(self)(self._raw & int(other))

    __rand__ = __and__

    def __bool__(self) -> bool:
        return self._raw != 0

    def __int__(self) -> int:
        return self._raw

    __index__ = __int__

    def __eq__(self, other) -> bool:
        if isinstance(other, type(self)):
            return self._raw == other._raw
        return NotImplemented

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._raw))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._raw:#x})"

    def __reduce__(self):
        return type(self), (self._raw,)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return raw_int_schema(cls, cls.MAX_VALUE, cls)


class DeviceFlags(BitFlags):
    # Only LOCKED is user controlled; capability bits come from the firmware.
    __slots__ = ()

    MAX_VALUE = 2 ** 63 - 1

    LOCKED: "DeviceFlags"
    TEMPERATURE_CAPABLE: "DeviceFlags"
    MOVEMENT_CAPABLE: "DeviceFlags"
    LIGHT_CAPABLE: "DeviceFlags"

    @property
    def locked(self) -> bool:
        return self.test(DeviceFlags.LOCKED)

    @property
    def capabilities(self) -> "DeviceFlags":
        return self & CAPABILITY_MASK


DeviceFlags.LOCKED = DeviceFlags(1 << 0)
DeviceFlags.TEMPERATURE_CAPABLE = DeviceFlags(1 << 2)
DeviceFlags.MOVEMENT_CAPABLE = DeviceFlags(1 << 3)
DeviceFlags.LIGHT_CAPABLE = DeviceFlags(1 << 4)

CAPABILITY_MASK = (
    DeviceFlags.TEMPERATURE_CAPABLE | DeviceFlags.MOVEMENT_CAPABLE | DeviceFlags.LIGHT_CAPABLE
)


class LimitFlags(BitFlags):
    __slots__ = ()

    NONE: "LimitFlags"
    OWNER_SHARED: "LimitFlags"

    @property
    def owner_shared(self) -> bool:
        return self.test(LimitFlags.OWNER_SHARED)


LimitFlags.NONE = LimitFlags(0)
# Set by the owner and returned in the standard limits fetch. Owned devices only.
LimitFlags.OWNER_SHARED = LimitFlags(1 << 0)
