# points_bank/db/accounts.py
from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from points_bank.errors import DuplicateError, NotFound
from points_bank.logging_config import get_logger

from .models import Account, utcnow

logger = get_logger("points_bank.db.accounts")


class AccountStore:
    """
    Data access for member accounts.

    Works on the session it is given, so every call joins whatever unit of
    work the caller has open.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, account_id: int, for_update: bool = False) -> Optional[Account]:
        stmt = select(Account).where(Account.id == account_id)
        if for_update:
            stmt = stmt.with_for_update()
        res = await self.session.execute(stmt)
        return res.scalars().first()

    async def get_by_member_id(self, member_id: str, for_update: bool = False) -> Optional[Account]:
        stmt = select(Account).where(Account.member_id == member_id)
        if for_update:
            stmt = stmt.with_for_update()
        res = await self.session.execute(stmt)
        return res.scalars().first()

    async def get_by_email(self, email: str) -> Optional[Account]:
        res = await self.session.execute(select(Account).where(Account.email == email))
        return res.scalars().first()

    async def create(self, account: Account) -> Account:
        """
        Insert a new account; raises DuplicateError naming the colliding field.
        """
        if await self.get_by_email(account.email) is not None:
            raise DuplicateError("email")
        if await self.get_by_member_id(account.member_id) is not None:
            raise DuplicateError("member_id")

        self.session.add(account)
        try:
            await self.session.flush()
        except IntegrityError as e:
            # lost a race with a concurrent registration
            field = "email" if "email" in str(e.orig) else "member_id"
            logger.warning("Unique constraint hit on create field=%s: %s", field, e.orig)
            raise DuplicateError(field) from e
        return account

    async def balance_of(self, account_id: int) -> int:
        res = await self.session.execute(select(Account.points).where(Account.id == account_id))
        points = res.scalar_one_or_none()
        if points is None:
            raise NotFound()
        return int(points)

    async def set_balance(self, account_id: int, new_balance: int) -> None:
        if isinstance(new_balance, bool) or not isinstance(new_balance, int) or new_balance < 0:
            raise ValueError(f"balance must be a non-negative integer, got {new_balance!r}")
        res = await self.session.execute(
            update(Account)
            .where(Account.id == account_id)
            .values(points=new_balance, updated_at=utcnow())
            .execution_options(synchronize_session=False)
        )
        if res.rowcount != 1:
            raise NotFound()

    async def debit(self, account_id: int, amount: int) -> bool:
        """
        Subtract amount only if the stored balance covers it.

        Returns False when no row qualified (balance too low at write time).
        """
        res = await self.session.execute(
            update(Account)
            .where(Account.id == account_id, Account.points >= amount)
            .values(points=Account.points - amount, updated_at=utcnow())
            .execution_options(synchronize_session=False)
        )
        return res.rowcount == 1

    async def credit(self, account_id: int, amount: int) -> bool:
        res = await self.session.execute(
            update(Account)
            .where(Account.id == account_id)
            .values(points=Account.points + amount, updated_at=utcnow())
            .execution_options(synchronize_session=False)
        )
        return res.rowcount == 1
