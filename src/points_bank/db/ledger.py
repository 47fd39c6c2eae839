# points_bank/db/ledger.py
from typing import List

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from .models import TransferRecord


class Ledger:
    """
    Append-only log of completed transfers.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def append(self, record: TransferRecord) -> int:
        if record.amount is None or record.amount <= 0:
            raise ValueError("ledger amount must be positive")
        if record.from_account_id == record.to_account_id:
            raise ValueError("ledger record needs two distinct accounts")
        self.session.add(record)
        await self.session.flush()
        return record.id

    async def list_for_account(self, account_id: int, limit: int = 10) -> List[TransferRecord]:
        """
        Records sent or received by account_id, newest first with both parties loaded.
        """
        stmt = (
            select(TransferRecord)
            .options(
                joinedload(TransferRecord.from_account),
                joinedload(TransferRecord.to_account),
            )
            .where(
                or_(
                    TransferRecord.from_account_id == account_id,
                    TransferRecord.to_account_id == account_id,
                )
            )
            .order_by(TransferRecord.created_at.desc(), TransferRecord.id.desc())
            .limit(limit)
        )
        res = await self.session.execute(stmt)
        return list(res.scalars().all())
