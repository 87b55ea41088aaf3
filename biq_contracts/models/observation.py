from sqlalchemy import BigInteger, Column, Float, Integer, String

from biq_contracts.models.base import Base


class Observation(Base):
    __tablename__ = "observations"

    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)
    bixid = Column(String(64), nullable=False, index=True)
    # milliseconds since epoch
    obstime = Column(Float, nullable=False, index=True)
    charging = Column(Integer, nullable=False, default=0)
    firmware = Column(String(32), nullable=False)
    wifi_firmware = Column(String(32), nullable=True)
    battery = Column(Float, nullable=False)
    temp = Column(Float, nullable=False)
    light = Column(Integer, nullable=False)
    humidity = Column(Integer, nullable=False)
    accelx = Column(Integer, nullable=False, default=0)
    accely = Column(Integer, nullable=False, default=0)
    accelz = Column(Integer, nullable=False, default=0)
