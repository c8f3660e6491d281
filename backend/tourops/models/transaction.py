import enum
from typing import Optional

from sqlalchemy import Column, String, Float, Date, DateTime, Text, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from tourops.database import Base, new_id


class TransactionType(str, enum.Enum):
    PAYMENT = "payment"
    EXPENSE = "expense"
    REFUND = "refund"


class RouteTransaction(Base):
    __tablename__ = "route_transactions"

    id = Column(String(36), primary_key=True, default=new_id)
    route_id = Column(
        String(36),
        ForeignKey("routes.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    transaction_date = Column(Date, nullable=False, index=True)
    amount = Column(Float, nullable=False)
    currency = Column(String(10), default="BRL")
    payment_method = Column(String(50), nullable=True)
    type = Column(String(50), nullable=False)
    description = Column(Text, nullable=True)

    from_account_id = Column(String(36), ForeignKey("accounts.id", ondelete="SET NULL"), nullable=True)
    to_account_id = Column(String(36), ForeignKey("accounts.id", ondelete="SET NULL"), nullable=True)

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    route = relationship("Route", back_populates="transactions")
    from_account = relationship("Account", foreign_keys=[from_account_id])
    to_account = relationship("Account", foreign_keys=[to_account_id])

    @property
    def from_account_name(self) -> Optional[str]:
        return self.from_account.account_holder_name if self.from_account else None

    @property
    def to_account_name(self) -> Optional[str]:
        return self.to_account.account_holder_name if self.to_account else None
