from sqlalchemy import Column, Integer, String

from biq_contracts.models.base import Base


class Firmware(Base):
    __tablename__ = "device_firmware"

    version = Column(String(32), primary_key=True)
    type = Column(Integer, nullable=False, default=0)
    supersedes = Column(String(32), nullable=True)
    obsoleted_by = Column(String(32), nullable=True)
