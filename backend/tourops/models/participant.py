import enum
from typing import Optional

from sqlalchemy import Column, String, Boolean, DateTime, Text, ForeignKey, CheckConstraint
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from tourops.database import Base, new_id


class ParticipantRole(str, enum.Enum):
    CLIENT = "client"
    GUIDE_CAPTAIN = "guide-captain"
    GUIDE_TAIL = "guide-tail"
    STAFF = "staff"


class Participant(Base):
    """
    Route roster entry: either a client or a staff member, never both.

    Segment, room and transfer assignments reference this row and are
    removed with it.
    """
    __tablename__ = "route_participants"
    __table_args__ = (
        CheckConstraint(
            "(client_id IS NOT NULL AND guide_id IS NULL) OR (client_id IS NULL AND guide_id IS NOT NULL)",
            name="ck_participant_client_xor_guide",
        ),
    )

    id = Column(String(36), primary_key=True, default=new_id)
    route_id = Column(
        String(36),
        ForeignKey("routes.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    client_id = Column(String(36), ForeignKey("clients.id", ondelete="CASCADE"), nullable=True, index=True)
    guide_id = Column(String(36), ForeignKey("staff.id", ondelete="CASCADE"), nullable=True, index=True)
    role = Column(String(50), nullable=False)
    is_optional = Column(Boolean, default=False)
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    route = relationship("Route", back_populates="participants")
    client = relationship("Client")
    guide = relationship("Staff")

    segment_links = relationship(
        "SegmentParticipant",
        back_populates="participant",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    room_links = relationship(
        "RoomParticipant",
        back_populates="participant",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    transfer_links = relationship(
        "TransferParticipant",
        back_populates="participant",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    @property
    def client_name(self) -> Optional[str]:
        return self.client.name if self.client else None

    @property
    def guide_name(self) -> Optional[str]:
        return self.guide.name if self.guide else None

    @property
    def display_name(self) -> str:
        return self.client_name or self.guide_name or "Staff"
