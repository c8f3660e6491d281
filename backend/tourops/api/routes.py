from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from tourops.database import get_db
from tourops.models import RouteStatus
from tourops.schemas import (
    MessageResponse,
    RouteAggregateResponse,
    RouteCreate,
    RouteDuplicate,
    RouteResponse,
    RouteUpdate,
)
from tourops.services import RouteAssembler

router = APIRouter()


@router.get("", response_model=List[RouteResponse])
async def list_routes(
    status: Optional[RouteStatus] = None,
    start_date: Optional[date] = Query(None, alias="startDate"),
    end_date: Optional[date] = Query(None, alias="endDate"),
    db: Session = Depends(get_db)
):
    return RouteAssembler(db).list_routes(
        status=status.value if status else None,
        start_date=start_date,
        end_date=end_date,
    )


@router.post("", response_model=RouteResponse, status_code=201)
async def create_route(route: RouteCreate, db: Session = Depends(get_db)):
    return RouteAssembler(db).create_route(route)


@router.get("/{route_id}", response_model=RouteAggregateResponse)
async def get_route(route_id: str, db: Session = Depends(get_db)):
    """Route with its segments, logistics, participants and transactions."""
    return RouteAssembler(db).get_route(route_id)


@router.put("/{route_id}", response_model=RouteResponse)
async def update_route(route_id: str, route: RouteUpdate, db: Session = Depends(get_db)):
    return RouteAssembler(db).update_route(route_id, route)


@router.delete("/{route_id}", response_model=MessageResponse)
async def delete_route(route_id: str, db: Session = Depends(get_db)):
    RouteAssembler(db).delete_route(route_id)
    return MessageResponse(message="Route deleted")


@router.post("/{route_id}/duplicate", response_model=RouteResponse, status_code=201)
async def duplicate_route(
    route_id: str,
    body: Optional[RouteDuplicate] = None,
    db: Session = Depends(get_db)
):
    return RouteAssembler(db).duplicate_route(route_id, name=body.name if body else None)
