"""Inter-location movements of a route with their vehicles and riders."""
from typing import Optional

from sqlalchemy import (
    Column, String, Integer, Float, Boolean, Date, DateTime, Text, ForeignKey,
    CheckConstraint, UniqueConstraint,
)
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from tourops.database import Base, new_id


class Transfer(Base):
    __tablename__ = "route_transfers"
    __table_args__ = (
        CheckConstraint("from_location_id != to_location_id", name="ck_transfer_distinct_locations"),
    )

    id = Column(String(36), primary_key=True, default=new_id)
    route_id = Column(
        String(36),
        ForeignKey("routes.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    transfer_date = Column(Date, nullable=False, index=True)
    from_location_id = Column(String(36), ForeignKey("locations.id", ondelete="RESTRICT"), nullable=False)
    to_location_id = Column(String(36), ForeignKey("locations.id", ondelete="RESTRICT"), nullable=False)

    # Σ cost × quantity of the vehicles, kept current by TransferPlanner
    total_cost = Column(Float, default=0)
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    route = relationship("Route", back_populates="transfers")
    from_location = relationship("Location", foreign_keys=[from_location_id])
    to_location = relationship("Location", foreign_keys=[to_location_id])
    vehicles = relationship(
        "TransferVehicle",
        back_populates="transfer",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    participants = relationship(
        "TransferParticipant",
        back_populates="transfer",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    @property
    def from_location_name(self) -> Optional[str]:
        return self.from_location.name if self.from_location else None

    @property
    def to_location_name(self) -> Optional[str]:
        return self.to_location.name if self.to_location else None

    def __repr__(self) -> str:
        return f"<Transfer {self.id}: {self.from_location_id}->{self.to_location_id} on {self.transfer_date}>"


class TransferVehicle(Base):
    __tablename__ = "route_transfer_vehicles"

    id = Column(String(36), primary_key=True, default=new_id)
    transfer_id = Column(
        String(36),
        ForeignKey("route_transfers.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    vehicle_id = Column(String(36), ForeignKey("vehicles.id", ondelete="RESTRICT"), nullable=False, index=True)
    driver_pilot_name = Column(String(255), nullable=True)
    quantity = Column(Integer, default=1)
    cost = Column(Float, default=0)
    is_own_vehicle = Column(Boolean, default=False)
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    transfer = relationship("Transfer", back_populates="vehicles")
    vehicle = relationship("Vehicle")

    @property
    def vehicle_name(self) -> Optional[str]:
        return self.vehicle.display_name if self.vehicle else None

    @property
    def vehicle_type(self) -> Optional[str]:
        return self.vehicle.type if self.vehicle else None

    @property
    def hotel_name(self) -> Optional[str]:
        if self.vehicle and self.vehicle.hotel:
            return self.vehicle.hotel.name
        return None

    @property
    def third_party_name(self) -> Optional[str]:
        if self.vehicle and self.vehicle.third_party:
            return self.vehicle.third_party.name
        return None


class TransferParticipant(Base):
    __tablename__ = "route_transfer_participants"
    __table_args__ = (
        UniqueConstraint("transfer_id", "participant_id", name="uq_transfer_participant"),
    )

    id = Column(String(36), primary_key=True, default=new_id)
    transfer_id = Column(
        String(36),
        ForeignKey("route_transfers.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    participant_id = Column(
        String(36),
        ForeignKey("route_participants.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at = Column(DateTime, server_default=func.now())

    transfer = relationship("Transfer", back_populates="participants")
    participant = relationship("Participant", back_populates="transfer_links")

    @property
    def participant_name(self) -> str:
        return self.participant.display_name if self.participant else "Staff"

    @property
    def participant_role(self) -> Optional[str]:
        return self.participant.role if self.participant else None
