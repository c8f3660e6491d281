from datetime import date, datetime
from typing import Optional

from tourops.models.route import RouteStatus
from tourops.schemas.base import CamelModel


class RouteBase(CamelModel):
    name: Optional[str] = None
    description: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    duration: Optional[int] = None
    status: Optional[RouteStatus] = None
    total_distance: Optional[float] = None
    estimated_cost: Optional[float] = None
    actual_cost: Optional[float] = None
    currency: Optional[str] = None
    notes: Optional[str] = None


class RouteCreate(RouteBase):
    pass


class RouteUpdate(RouteBase):
    """Full replacement: omitted fields fall back to their create defaults."""


class RouteDuplicate(CamelModel):
    name: Optional[str] = None


class RouteResponse(CamelModel):
    id: str
    name: str
    description: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    duration: Optional[int] = None
    status: str
    total_distance: Optional[float] = None
    estimated_cost: Optional[float] = None
    actual_cost: Optional[float] = None
    currency: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
