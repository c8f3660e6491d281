"""Payment, expense and refund records of a route."""
import logging

from sqlalchemy.orm import Session

from tourops.config import get_settings
from tourops.database import atomic
from tourops.models import RouteTransaction
from tourops.schemas.transaction import TransactionCreate, TransactionResponse
from tourops.services.errors import ValidationError
from tourops.services.lookups import require_route

logger = logging.getLogger(__name__)


class TransactionLedger:

    def __init__(self, db: Session):
        self.db = db

    def list_transactions(self, route_id: str) -> list[TransactionResponse]:
        require_route(self.db, route_id)
        transactions = self.db.query(RouteTransaction).filter(
            RouteTransaction.route_id == route_id
        ).order_by(
            RouteTransaction.transaction_date.desc(),
            RouteTransaction.created_at.desc(),
        ).all()
        return [TransactionResponse.model_validate(t) for t in transactions]

    def create_transaction(self, route_id: str, data: TransactionCreate) -> TransactionResponse:
        if not data.transaction_date or data.amount is None or not data.type:
            raise ValidationError("Transaction date, amount and type are required")
        if data.amount == 0:
            raise ValidationError("Amount must be non-zero")

        with atomic(self.db):
            require_route(self.db, route_id)
            transaction = RouteTransaction(
                route_id=route_id,
                transaction_date=data.transaction_date,
                amount=data.amount,
                currency=data.currency or get_settings().default_currency,
                payment_method=data.payment_method,
                type=data.type,
                description=data.description,
                from_account_id=data.from_account_id or None,
                to_account_id=data.to_account_id or None,
            )
            self.db.add(transaction)

        logger.info(f"Route {route_id}: recorded {transaction.type} of {transaction.amount} {transaction.currency}")
        return TransactionResponse.model_validate(transaction)
