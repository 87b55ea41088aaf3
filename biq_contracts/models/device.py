from sqlalchemy import BigInteger, Column, Float, ForeignKey, Integer, String, Uuid

from biq_contracts.models.base import Base


class Device(Base):
    __tablename__ = "devices"

    id = Column(String(64), primary_key=True)
    name = Column(String(100), nullable=False, default="")
    owner_id = Column(Uuid, nullable=True, index=True)
    flags = Column(BigInteger, nullable=True)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)


class GroupMembership(Base):
    __tablename__ = "device_group_memberships"

    group_id = Column(Uuid, ForeignKey("device_groups.id"), primary_key=True)
    device_id = Column(String(64), ForeignKey("devices.id"), primary_key=True)


class AccessPermission(Base):
    __tablename__ = "device_access_permissions"

    user_id = Column(Uuid, primary_key=True)
    device_id = Column(String(64), ForeignKey("devices.id"), primary_key=True)
    flags = Column(Integer, nullable=True)
