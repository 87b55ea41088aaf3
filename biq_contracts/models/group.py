from sqlalchemy import Column, String, Uuid

from biq_contracts.models.base import Base


class DeviceGroup(Base):
    __tablename__ = "device_groups"

    id = Column(Uuid, primary_key=True)
    owner_id = Column(Uuid, nullable=False, index=True)
    name = Column(String(100), nullable=False)
