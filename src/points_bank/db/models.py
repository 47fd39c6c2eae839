# points_bank/db/models.py
from datetime import datetime, timezone

from sqlalchemy import BigInteger, CheckConstraint, Column, ForeignKey, Integer, String, TIMESTAMP
from sqlalchemy.orm import relationship

from points_bank.db.session import Base

TRANSFER_TYPE = "transfer"

STATUS_COMPLETED = "completed"
# Declared for the audit trail; the transfer path only ever writes "completed".
STATUS_PENDING = "pending"
STATUS_FAILED = "failed"


def utcnow() -> datetime:
    """Naive UTC timestamp, matching the TIMESTAMP columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Account(Base):
    __tablename__ = "accounts"
    __table_args__ = (CheckConstraint("points >= 0", name="ck_accounts_points_non_negative"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), unique=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    first_name = Column(String(100), nullable=False, default="")
    last_name = Column(String(100), nullable=False, default="")
    phone = Column(String(32), nullable=False, default="")
    birthday = Column(String(10), nullable=False, default="")  # YYYY-MM-DD
    member_id = Column(String(50), unique=True, nullable=False, index=True)
    member_tier = Column(String(20), nullable=False, default="Gold")
    points = Column(BigInteger, nullable=False, default=0)
    created_at = Column(TIMESTAMP, nullable=False, default=utcnow)
    updated_at = Column(TIMESTAMP, nullable=False, default=utcnow, onupdate=utcnow)

    @property
    def display_name(self) -> str:
        return f"{self.first_name or ''} {self.last_name or ''}".strip()


class TransferRecord(Base):
    __tablename__ = "transactions"
    __table_args__ = (
        CheckConstraint("amount > 0", name="ck_transactions_amount_positive"),
        CheckConstraint("from_account_id <> to_account_id", name="ck_transactions_distinct_parties"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    from_account_id = Column(Integer, ForeignKey("accounts.id"), nullable=False, index=True)
    to_account_id = Column(Integer, ForeignKey("accounts.id"), nullable=False, index=True)
    amount = Column(BigInteger, nullable=False)
    type = Column(String(20), nullable=False, default=TRANSFER_TYPE)
    status = Column(String(20), nullable=False, default=STATUS_COMPLETED)
    description = Column(String(255), nullable=False, default="")
    created_at = Column(TIMESTAMP, nullable=False, default=utcnow)
    updated_at = Column(TIMESTAMP, nullable=False, default=utcnow)

    from_account = relationship(Account, foreign_keys=[from_account_id], lazy="raise")
    to_account = relationship(Account, foreign_keys=[to_account_id], lazy="raise")
