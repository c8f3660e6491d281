from datetime import date, datetime
from typing import Optional

from tourops.models.transaction import TransactionType
from tourops.schemas.base import CamelModel


class TransactionCreate(CamelModel):
    transaction_date: Optional[date] = None
    amount: Optional[float] = None
    currency: Optional[str] = None
    payment_method: Optional[str] = None
    type: Optional[TransactionType] = None
    description: Optional[str] = None
    from_account_id: Optional[str] = None
    to_account_id: Optional[str] = None


class TransactionResponse(CamelModel):
    id: str
    route_id: str
    transaction_date: date
    amount: float
    currency: Optional[str] = None
    payment_method: Optional[str] = None
    type: str
    description: Optional[str] = None
    from_account_id: Optional[str] = None
    to_account_id: Optional[str] = None
    from_account_name: Optional[str] = None
    to_account_name: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
