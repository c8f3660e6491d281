from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from tourops.database import get_db
from tourops.schemas import LogisticsCreate, LogisticsResponse, LogisticsUpdate, MessageResponse
from tourops.services import LogisticsLedger

router = APIRouter()


@router.get("/{route_id}/logistics", response_model=List[LogisticsResponse])
async def list_logistics(route_id: str, db: Session = Depends(get_db)):
    return LogisticsLedger(db).list_logistics(route_id)


@router.post("/{route_id}/logistics", response_model=LogisticsResponse, status_code=201)
async def create_logistics(route_id: str, item: LogisticsCreate, db: Session = Depends(get_db)):
    return LogisticsLedger(db).create_logistics(route_id, item)


@router.put("/{route_id}/logistics/{logistics_id}", response_model=LogisticsResponse)
async def update_logistics(
    route_id: str,
    logistics_id: str,
    item: LogisticsUpdate,
    db: Session = Depends(get_db)
):
    return LogisticsLedger(db).update_logistics(route_id, logistics_id, item)


@router.delete("/{route_id}/logistics/{logistics_id}", response_model=MessageResponse)
async def delete_logistics(route_id: str, logistics_id: str, db: Session = Depends(get_db)):
    LogisticsLedger(db).delete_logistics(route_id, logistics_id)
    return MessageResponse(message="Logistics deleted")
