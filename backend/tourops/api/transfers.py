from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from tourops.database import get_db
from tourops.schemas import (
    MessageResponse,
    TransferCreate,
    TransferParticipantAdd,
    TransferParticipantResponse,
    TransferResponse,
    TransferUpdate,
    TransferVehicleCreate,
    TransferVehicleResponse,
)
from tourops.services import TransferPlanner

router = APIRouter()


@router.get("/{route_id}/transfers", response_model=List[TransferResponse])
async def list_transfers(route_id: str, db: Session = Depends(get_db)):
    return TransferPlanner(db).list_transfers(route_id)


@router.post("/{route_id}/transfers", response_model=TransferResponse, status_code=201)
async def create_transfer(route_id: str, transfer: TransferCreate, db: Session = Depends(get_db)):
    return TransferPlanner(db).create_transfer(route_id, transfer)


@router.get("/{route_id}/transfers/{transfer_id}", response_model=TransferResponse)
async def get_transfer(route_id: str, transfer_id: str, db: Session = Depends(get_db)):
    return TransferPlanner(db).get_transfer(route_id, transfer_id)


@router.put("/{route_id}/transfers/{transfer_id}", response_model=TransferResponse)
async def update_transfer(
    route_id: str,
    transfer_id: str,
    transfer: TransferUpdate,
    db: Session = Depends(get_db)
):
    return TransferPlanner(db).update_transfer(route_id, transfer_id, transfer)


@router.delete("/{route_id}/transfers/{transfer_id}", response_model=MessageResponse)
async def delete_transfer(route_id: str, transfer_id: str, db: Session = Depends(get_db)):
    TransferPlanner(db).delete_transfer(route_id, transfer_id)
    return MessageResponse(message="Transfer deleted")


@router.post(
    "/{route_id}/transfers/{transfer_id}/vehicles",
    response_model=TransferVehicleResponse,
    status_code=201,
)
async def add_transfer_vehicle(
    route_id: str,
    transfer_id: str,
    vehicle: TransferVehicleCreate,
    db: Session = Depends(get_db)
):
    return TransferPlanner(db).add_vehicle(route_id, transfer_id, vehicle)


@router.delete("/{route_id}/transfers/{transfer_id}/vehicles/{vehicle_id}", response_model=MessageResponse)
async def remove_transfer_vehicle(
    route_id: str,
    transfer_id: str,
    vehicle_id: str,
    db: Session = Depends(get_db)
):
    TransferPlanner(db).remove_vehicle(route_id, transfer_id, vehicle_id)
    return MessageResponse(message="Vehicle removed from transfer")


@router.post(
    "/{route_id}/transfers/{transfer_id}/participants",
    response_model=TransferParticipantResponse,
    status_code=201,
)
async def add_transfer_participant(
    route_id: str,
    transfer_id: str,
    body: TransferParticipantAdd,
    db: Session = Depends(get_db)
):
    return TransferPlanner(db).add_participant(route_id, transfer_id, body.participant_id)


@router.delete(
    "/{route_id}/transfers/{transfer_id}/participants/{transfer_participant_id}",
    response_model=MessageResponse,
)
async def remove_transfer_participant(
    route_id: str,
    transfer_id: str,
    transfer_participant_id: str,
    db: Session = Depends(get_db)
):
    TransferPlanner(db).remove_participant(route_id, transfer_id, transfer_participant_id)
    return MessageResponse(message="Participant removed from transfer")
