from sqlalchemy import Column, Float, ForeignKey, SmallInteger, String, Uuid

from biq_contracts.models.base import Base


class Limit(Base):
    __tablename__ = "device_limits"

    user_id = Column(Uuid, primary_key=True)
    device_id = Column(String(64), ForeignKey("devices.id"), primary_key=True)
    limit_type = Column(SmallInteger, primary_key=True, autoincrement=False)
    limit_value = Column(Float, nullable=False, default=0.0)
    limit_value_string = Column(String(255), nullable=True)
    limit_flag = Column(SmallInteger, nullable=True)


class PushLimit(Base):
    __tablename__ = "device_push_limits"

    device_id = Column(String(64), ForeignKey("devices.id"), primary_key=True)
    limit_type = Column(SmallInteger, primary_key=True, autoincrement=False)
    limit_value = Column(Float, nullable=False, default=0.0)
    limit_value_string = Column(String(255), nullable=True)
