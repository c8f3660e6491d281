from datetime import date, datetime
from typing import Optional

from pydantic import Field

from tourops.schemas.base import CamelModel


class TransferVehicleCreate(CamelModel):
    vehicle_id: Optional[str] = None
    driver_pilot_name: Optional[str] = None
    quantity: Optional[int] = Field(default=None, ge=0)
    cost: Optional[float] = Field(default=None, ge=0)
    is_own_vehicle: bool = False
    notes: Optional[str] = None


class TransferCreate(CamelModel):
    transfer_date: Optional[date] = None
    from_location_id: Optional[str] = None
    to_location_id: Optional[str] = None
    notes: Optional[str] = None
    vehicles: Optional[list[TransferVehicleCreate]] = None
    participants: Optional[list[Optional[str]]] = None


class TransferUpdate(TransferCreate):
    pass


class TransferParticipantAdd(CamelModel):
    participant_id: Optional[str] = None


class TransferVehicleResponse(CamelModel):
    id: str
    transfer_id: str
    vehicle_id: str
    vehicle_name: Optional[str] = None
    vehicle_type: Optional[str] = None
    hotel_name: Optional[str] = None
    third_party_name: Optional[str] = None
    driver_pilot_name: Optional[str] = None
    quantity: Optional[int] = None
    cost: Optional[float] = None
    is_own_vehicle: bool = False
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class TransferParticipantResponse(CamelModel):
    id: str
    transfer_id: str
    participant_id: str
    participant_name: Optional[str] = None
    participant_role: Optional[str] = None
    created_at: Optional[datetime] = None


class TransferResponse(CamelModel):
    id: str
    route_id: str
    transfer_date: date
    from_location_id: str
    to_location_id: str
    from_location_name: Optional[str] = None
    to_location_name: Optional[str] = None
    total_cost: float = 0
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    vehicles: list[TransferVehicleResponse] = []
    participants: list[TransferParticipantResponse] = []
