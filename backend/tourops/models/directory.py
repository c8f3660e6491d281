"""
Reference tables owned by the flat CRUD side of the system.

The route planner only reads these: they back foreign keys and the
display names shown next to ids in planner responses.
"""
import enum

from sqlalchemy import Column, String, DateTime, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from tourops.database import Base, new_id


class VehicleOwner(str, enum.Enum):
    COMPANY = "company"
    THIRD_PARTY = "third-party"
    HOTEL = "hotel"


class Client(Base):
    __tablename__ = "clients"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(255), nullable=False)
    created_at = Column(DateTime, server_default=func.now())


class Staff(Base):
    __tablename__ = "staff"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(255), nullable=False)
    created_at = Column(DateTime, server_default=func.now())


class Hotel(Base):
    __tablename__ = "hotels"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(255), nullable=False)
    created_at = Column(DateTime, server_default=func.now())


class Location(Base):
    __tablename__ = "locations"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(255), nullable=False)
    created_at = Column(DateTime, server_default=func.now())


class ThirdParty(Base):
    __tablename__ = "third_parties"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(255), nullable=False)
    created_at = Column(DateTime, server_default=func.now())


class Vehicle(Base):
    __tablename__ = "vehicles"

    id = Column(String(36), primary_key=True, default=new_id)
    type = Column(String(50), nullable=False)  # car4x4, boat, quadbike, carSedan, outro
    vehicle_owner = Column(String(50), nullable=False, default=VehicleOwner.COMPANY.value)
    hotel_id = Column(String(36), ForeignKey("hotels.id", ondelete="SET NULL"), nullable=True)
    third_party_id = Column(String(36), ForeignKey("third_parties.id", ondelete="SET NULL"), nullable=True)
    created_at = Column(DateTime, server_default=func.now())

    hotel = relationship("Hotel")
    third_party = relationship("ThirdParty")

    @property
    def owner_label(self) -> str:
        if self.vehicle_owner == VehicleOwner.COMPANY.value:
            return "Company"
        if self.vehicle_owner == VehicleOwner.HOTEL.value:
            return self.hotel.name if self.hotel else "Hotel"
        return self.third_party.name if self.third_party else "Third Party"

    @property
    def display_name(self) -> str:
        return f"{self.type} - {self.owner_label}"


class Account(Base):
    __tablename__ = "accounts"

    id = Column(String(36), primary_key=True, default=new_id)
    account_holder_name = Column(String(255), nullable=False)
    created_at = Column(DateTime, server_default=func.now())
