"""Hotel bookings attached to a segment, their rooms and room occupants."""
import enum
from typing import Optional

from sqlalchemy import Column, String, Integer, Float, Boolean, DateTime, Text, ForeignKey, UniqueConstraint
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from tourops.database import Base, new_id


class ClientType(str, enum.Enum):
    CLIENT = "client"
    STAFF = "staff"


class RoomType(str, enum.Enum):
    SINGLE = "single"
    DOUBLE = "double"
    TWIN = "twin"
    TRIPLE = "triple"


class Accommodation(Base):
    __tablename__ = "route_segment_accommodations"

    id = Column(String(36), primary_key=True, default=new_id)
    segment_id = Column(
        String(36),
        ForeignKey("route_segments.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    hotel_id = Column(String(36), ForeignKey("hotels.id", ondelete="RESTRICT"), nullable=False, index=True)
    client_type = Column(String(20), nullable=False)
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    segment = relationship("Segment", back_populates="accommodations")
    hotel = relationship("Hotel")
    rooms = relationship(
        "Room",
        back_populates="accommodation",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    @property
    def hotel_name(self) -> Optional[str]:
        return self.hotel.name if self.hotel else None


class Room(Base):
    __tablename__ = "route_segment_accommodation_rooms"

    id = Column(String(36), primary_key=True, default=new_id)
    accommodation_id = Column(
        String(36),
        ForeignKey("route_segment_accommodations.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    room_type = Column(String(20), nullable=False)
    room_number = Column(String(100), nullable=True)
    capacity = Column(Integer, nullable=True)
    cost_per_night = Column(Float, default=0)
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    accommodation = relationship("Accommodation", back_populates="rooms")
    participants = relationship(
        "RoomParticipant",
        back_populates="room",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class RoomParticipant(Base):
    __tablename__ = "route_segment_accommodation_room_participants"
    __table_args__ = (
        UniqueConstraint("room_id", "participant_id", name="uq_room_participant"),
    )

    id = Column(String(36), primary_key=True, default=new_id)
    room_id = Column(
        String(36),
        ForeignKey("route_segment_accommodation_rooms.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    participant_id = Column(
        String(36),
        ForeignKey("route_participants.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    is_couple = Column(Boolean, default=False)
    created_at = Column(DateTime, server_default=func.now())

    room = relationship("Room", back_populates="participants")
    participant = relationship("Participant", back_populates="room_links")

    @property
    def participant_name(self) -> str:
        return self.participant.display_name if self.participant else "Staff"

    @property
    def participant_role(self) -> Optional[str]:
        return self.participant.role if self.participant else None
