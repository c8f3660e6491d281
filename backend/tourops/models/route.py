import enum

from sqlalchemy import Column, String, Integer, Float, Date, DateTime, Text
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from tourops.database import Base, new_id


class RouteStatus(str, enum.Enum):
    DRAFT = "draft"
    CONFIRMED = "confirmed"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Route(Base):
    """
    A planned multi-day trip and the root of everything the planner owns.

    end_date, duration, total_distance and estimated_cost are recomputed
    from segments and logistics (see services.route_totals) whenever those
    change or the route itself is updated. Callers may set them directly
    only while the route has no segments or logistics to derive them from.
    """
    __tablename__ = "routes"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)

    start_date = Column(Date, nullable=True, index=True)
    end_date = Column(Date, nullable=True)
    duration = Column(Integer, nullable=True)

    status = Column(String(50), nullable=False, default=RouteStatus.DRAFT.value, index=True)

    total_distance = Column(Float, default=0)
    estimated_cost = Column(Float, default=0)
    actual_cost = Column(Float, default=0)
    currency = Column(String(10), default="BRL")

    notes = Column(Text, nullable=True)

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    segments = relationship(
        "Segment",
        back_populates="route",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    logistics = relationship(
        "Logistics",
        back_populates="route",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    participants = relationship(
        "Participant",
        back_populates="route",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    transfers = relationship(
        "Transfer",
        back_populates="route",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    transactions = relationship(
        "RouteTransaction",
        back_populates="route",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Route {self.id}: {self.name} ({self.status})>"
