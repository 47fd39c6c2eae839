"""
Point transfers between members.

A transfer is validated, then applied as one unit of work: debit sender,
credit recipient, append the ledger record, commit. Any failure inside the
unit rolls all of it back.
"""

from dataclasses import dataclass

from sqlalchemy.exc import SQLAlchemyError

from points_bank.db.accounts import AccountStore
from points_bank.db.ledger import Ledger
from points_bank.db.models import Account, STATUS_COMPLETED, TRANSFER_TYPE, TransferRecord, utcnow
from points_bank.db.session import claim_writer
from points_bank.errors import (
    InsufficientFunds,
    InvalidRequest,
    NotFound,
    PointsError,
    RecipientNotFound,
    SelfTransfer,
    TransferFailed,
)
from points_bank.logging_config import get_logger

logger = get_logger("points_bank.services.transfer")


@dataclass(frozen=True)
class RecipientSummary:
    member_id: str
    first_name: str
    last_name: str


@dataclass(frozen=True)
class TransferResult:
    transaction_id: int
    remaining_points: int
    transferred_amount: int
    recipient: RecipientSummary


def _is_positive_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


class TransferService:
    """
    Moves points from the calling account to another member.
    """

    def __init__(self, session_factory):
        self.session_factory = session_factory

    async def transfer(self, caller: Account, recipient_member_id: str, amount: int) -> TransferResult:
        member_id = recipient_member_id.strip() if isinstance(recipient_member_id, str) else ""
        if not member_id or not _is_positive_int(amount):
            raise InvalidRequest()

        if member_id == caller.member_id:
            logger.warning("Transfer rejected - self transfer member_id=%s", member_id)
            raise SelfTransfer()

        logger.info("Transfer request from=%s to=%s amount=%s", caller.member_id, member_id, amount)

        try:
            async with self.session_factory() as session:
                async with session.begin():
                    await claim_writer(session)
                    result = await self._apply(session, caller, member_id, amount)
        except PointsError as e:
            logger.warning(
                "Transfer rejected from=%s to=%s amount=%s reason=%s",
                caller.member_id,
                member_id,
                amount,
                e.code,
            )
            raise
        except SQLAlchemyError as e:
            logger.exception("Transfer failed (DB error) from=%s to=%s: %s", caller.member_id, member_id, e)
            raise TransferFailed() from e

        logger.info(
            "Transfer success txn_id=%s from=%s to=%s amount=%s remaining=%s",
            result.transaction_id,
            caller.member_id,
            member_id,
            amount,
            result.remaining_points,
        )
        return result

    async def _apply(self, session, caller: Account, member_id: str, amount: int) -> TransferResult:
        accounts = AccountStore(session)
        ledger = Ledger(session)

        sender = await accounts.get_by_id(caller.id, for_update=True)
        if sender is None:
            raise NotFound()
        if sender.points < amount:
            raise InsufficientFunds()

        recipient = await accounts.get_by_member_id(member_id, for_update=True)
        if recipient is None:
            raise RecipientNotFound()

        # Conditional debit: a concurrent transfer may have spent the funds
        # between the read above and this write.
        if not await accounts.debit(sender.id, amount):
            raise InsufficientFunds()
        if not await accounts.credit(recipient.id, amount):
            raise TransferFailed("failed to add points")

        now = utcnow()
        record_id = await ledger.append(
            TransferRecord(
                from_account_id=sender.id,
                to_account_id=recipient.id,
                amount=amount,
                type=TRANSFER_TYPE,
                status=STATUS_COMPLETED,
                description=f"Transfer to {recipient.first_name} {recipient.last_name}",
                created_at=now,
                updated_at=now,
            )
        )

        remaining = await accounts.balance_of(sender.id)
        return TransferResult(
            transaction_id=record_id,
            remaining_points=remaining,
            transferred_amount=amount,
            recipient=RecipientSummary(
                member_id=recipient.member_id,
                first_name=recipient.first_name,
                last_name=recipient.last_name,
            ),
        )
