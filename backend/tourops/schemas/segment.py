from datetime import date, datetime
from typing import Optional

from pydantic import Field

from tourops.schemas.base import CamelModel


class SegmentCreate(CamelModel):
    day_number: Optional[int] = Field(default=None, ge=1)
    from_location_id: Optional[str] = None
    to_location_id: Optional[str] = None
    distance: Optional[float] = Field(default=None, ge=0)
    segment_order: Optional[int] = None
    notes: Optional[str] = None


class SegmentUpdate(SegmentCreate):
    segment_date: Optional[date] = None


class SegmentOrderItem(CamelModel):
    id: str
    segment_order: int


class SegmentReorder(CamelModel):
    segment_orders: list[SegmentOrderItem]


class StopCreate(CamelModel):
    location_id: Optional[str] = None
    stop_order: Optional[int] = None
    notes: Optional[str] = None


class StopOrderItem(CamelModel):
    id: str
    stop_order: int


class StopReorder(CamelModel):
    stop_orders: list[StopOrderItem]


class StopResponse(CamelModel):
    id: str
    segment_id: str
    location_id: str
    stop_order: int
    notes: Optional[str] = None
    location_name: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class SegmentResponse(CamelModel):
    id: str
    route_id: str
    day_number: int
    segment_date: Optional[date] = None
    from_location_id: Optional[str] = None
    to_location_id: Optional[str] = None
    from_location_name: Optional[str] = None
    to_location_name: Optional[str] = None
    distance: Optional[float] = None
    segment_order: int
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    stops: list[StopResponse] = []
