import datetime as dt
from typing import Optional

from pydantic import Field

from tourops.models.logistics import LogisticsType, EntityType, VehicleType
from tourops.schemas.base import CamelModel


class LogisticsCreate(CamelModel):
    segment_id: Optional[str] = None
    logistics_type: Optional[LogisticsType] = None
    entity_id: Optional[str] = None
    entity_type: Optional[EntityType] = None
    item_name: Optional[str] = None
    quantity: Optional[int] = Field(default=None, ge=0)
    cost: Optional[float] = Field(default=None, ge=0)
    date: Optional[dt.date] = None
    driver_pilot_name: Optional[str] = None
    is_own_vehicle: bool = False
    vehicle_type: Optional[VehicleType] = None
    notes: Optional[str] = None


class LogisticsUpdate(LogisticsCreate):
    pass


class LogisticsResponse(CamelModel):
    id: str
    route_id: str
    segment_id: Optional[str] = None
    logistics_type: str
    entity_id: Optional[str] = None
    entity_type: str
    entity_name: Optional[str] = None
    item_name: Optional[str] = None
    quantity: Optional[int] = None
    cost: Optional[float] = None
    date: Optional[dt.date] = None
    driver_pilot_name: Optional[str] = None
    is_own_vehicle: bool = False
    vehicle_type: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None
