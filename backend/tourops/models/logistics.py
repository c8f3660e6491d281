import enum

from sqlalchemy import Column, String, Integer, Float, Boolean, Date, DateTime, Text, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from tourops.database import Base, new_id


class LogisticsType(str, enum.Enum):
    AIRPORT_TRANSFER = "airport-transfer"
    SUPPORT_VEHICLE = "support-vehicle"
    HOTEL_CLIENT = "hotel-client"
    HOTEL_STAFF = "hotel-staff"
    LUNCH = "lunch"
    THIRD_PARTY = "third-party"
    EXTRA_COST = "extra-cost"


# These types describe a free-form item instead of a directory entity
ITEM_ONLY_TYPES = {LogisticsType.LUNCH.value, LogisticsType.EXTRA_COST.value}


class EntityType(str, enum.Enum):
    VEHICLE = "vehicle"
    HOTEL = "hotel"
    THIRD_PARTY = "third-party"
    LOCATION = "location"


class VehicleType(str, enum.Enum):
    CAR_4X4 = "car4x4"
    BOAT = "boat"
    QUADBIKE = "quadbike"
    CAR_SEDAN = "carSedan"
    OTHER = "outro"


class Logistics(Base):
    """
    A cost/resource line item of a route.

    entity_id is a polymorphic reference whose table depends on
    entity_type, so it carries no foreign key.
    """
    __tablename__ = "route_logistics"

    id = Column(String(36), primary_key=True, default=new_id)
    route_id = Column(
        String(36),
        ForeignKey("routes.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    segment_id = Column(
        String(36),
        ForeignKey("route_segments.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )

    logistics_type = Column(String(50), nullable=False, index=True)
    entity_id = Column(String(36), nullable=True)
    entity_type = Column(String(50), nullable=False)
    item_name = Column(String(255), nullable=True)

    quantity = Column(Integer, default=1)
    cost = Column(Float, default=0)
    date = Column(Date, nullable=True)

    driver_pilot_name = Column(String(255), nullable=True)
    is_own_vehicle = Column(Boolean, default=False)
    vehicle_type = Column(String(50), nullable=True)
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    route = relationship("Route", back_populates="logistics")
    segment = relationship("Segment")
