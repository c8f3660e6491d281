"""Day segments of a route and the rows hanging off them."""
from typing import Optional

from sqlalchemy import Column, String, Integer, Float, Date, DateTime, Text, ForeignKey, UniqueConstraint
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from tourops.database import Base, new_id


class Segment(Base):
    """
    One day-leg of a route.

    segment_order is caller-managed and not unique.
    segment_date is derived from the route's start date and day_number
    whenever the route has a start date.
    """
    __tablename__ = "route_segments"

    id = Column(String(36), primary_key=True, default=new_id)
    route_id = Column(
        String(36),
        ForeignKey("routes.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    day_number = Column(Integer, nullable=False)
    segment_date = Column(Date, nullable=True, index=True)

    from_location_id = Column(String(36), ForeignKey("locations.id", ondelete="SET NULL"), nullable=True)
    to_location_id = Column(String(36), ForeignKey("locations.id", ondelete="SET NULL"), nullable=True)

    distance = Column(Float, default=0)
    segment_order = Column(Integer, nullable=False)
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    route = relationship("Route", back_populates="segments")
    from_location = relationship("Location", foreign_keys=[from_location_id])
    to_location = relationship("Location", foreign_keys=[to_location_id])
    stops = relationship(
        "SegmentStop",
        back_populates="segment",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="SegmentStop.stop_order",
    )
    accommodations = relationship(
        "Accommodation",
        back_populates="segment",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    participant_links = relationship(
        "SegmentParticipant",
        back_populates="segment",
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
        return f"<Segment {self.id}: route={self.route_id} day={self.day_number} order={self.segment_order}>"


class SegmentStop(Base):
    __tablename__ = "route_segment_stops"

    id = Column(String(36), primary_key=True, default=new_id)
    segment_id = Column(
        String(36),
        ForeignKey("route_segments.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    location_id = Column(String(36), ForeignKey("locations.id", ondelete="RESTRICT"), nullable=False)
    stop_order = Column(Integer, nullable=False, default=1)
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    segment = relationship("Segment", back_populates="stops")
    location = relationship("Location")

    @property
    def location_name(self) -> Optional[str]:
        return self.location.name if self.location else None


class SegmentParticipant(Base):
    """Join row: a route participant taking part in one specific segment."""
    __tablename__ = "route_segment_participants"
    __table_args__ = (
        UniqueConstraint("segment_id", "participant_id", name="uq_segment_participant"),
    )

    id = Column(String(36), primary_key=True, default=new_id)
    segment_id = Column(
        String(36),
        ForeignKey("route_segments.id", ondelete="CASCADE"),
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

    segment = relationship("Segment", back_populates="participant_links")
    participant = relationship("Participant", back_populates="segment_links")
