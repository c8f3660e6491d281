from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from tourops.database import get_db
from tourops.schemas import TransactionCreate, TransactionResponse
from tourops.services import TransactionLedger

router = APIRouter()


@router.get("/{route_id}/transactions", response_model=List[TransactionResponse])
async def list_transactions(route_id: str, db: Session = Depends(get_db)):
    return TransactionLedger(db).list_transactions(route_id)


@router.post("/{route_id}/transactions", response_model=TransactionResponse, status_code=201)
async def create_transaction(route_id: str, transaction: TransactionCreate, db: Session = Depends(get_db)):
    return TransactionLedger(db).create_transaction(route_id, transaction)
