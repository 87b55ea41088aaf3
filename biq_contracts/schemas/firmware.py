from enum import IntEnum
from typing import Iterable, List, Optional

from biq_contracts.core.errors import FirmwareChainError
from biq_contracts.schemas.base import WireModel


class FirmwareType(IntEnum):
    PRIMARY = 0  # main MCU
    RADIO = 1  # wifi MCU


class Firmware(WireModel):
    version: str
    type: int
    supersedes: Optional[str] = None
    obsoleted_by: Optional[str] = None

    @property
    def firmware_type(self) -> Optional[FirmwareType]:
        try:
            return FirmwareType(self.type)
        except ValueError:
            return None

    @property
    def is_current(self) -> bool:
        return self.obsoleted_by is None


def firmware_chain(records: Iterable[Firmware], start: str) -> List[Firmware]:
    """Follow ``obsoleted_by`` from ``start`` to the newest version of the same type.

    The walk stops at a version with no successor, or whose successor is not in
    ``records`` or belongs to another firmware type. Raises FirmwareChainError if
    a version is reached twice.
    """
    by_version = {record.version: record for record in records}
    current = by_version.get(start)
    if current is None:
        return []

    chain = [current]
    seen = {current.version}
    while current.obsoleted_by is not None:
        following = by_version.get(current.obsoleted_by)
        if following is None or following.type != current.type:
            break
        if following.version in seen:
            raise FirmwareChainError(
                following.version,
                [record.version for record in chain] + [following.version],
            )
        chain.append(following)
        seen.add(following.version)
        current = following
    return chain
