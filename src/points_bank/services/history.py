"""
Recent-transfer view relative to one member.
"""

from dataclasses import asdict, dataclass
from typing import Any, AsyncIterator, Dict

from points_bank.db.ledger import Ledger
from points_bank.db.models import Account, TransferRecord

DEFAULT_LIMIT = 10

SENT = "sent"
RECEIVED = "received"


@dataclass(frozen=True)
class HistoryEntry:
    id: int
    contact_name: str
    contact_member_id: str
    amount: int
    type: str
    status: str
    date: str
    time: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def entry_for(account_id: int, record: TransferRecord) -> HistoryEntry:
    """
    Express record from the point of view of account_id.
    """
    if record.from_account_id == account_id:
        contact = record.to_account
        amount = -record.amount
        direction = SENT
    else:
        contact = record.from_account
        amount = record.amount
        direction = RECEIVED

    return HistoryEntry(
        id=record.id,
        contact_name=f"{contact.first_name} {contact.last_name}",
        contact_member_id=contact.member_id,
        amount=int(amount),
        type=direction,
        status=record.status,
        date=record.created_at.strftime("%Y-%m-%d"),
        time=record.created_at.strftime("%H:%M"),
    )


class HistoryReader:
    def __init__(self, session_factory):
        self.session_factory = session_factory

    async def recent_for(self, account: Account, limit: int = DEFAULT_LIMIT) -> AsyncIterator[HistoryEntry]:
        """
        Yield up to limit entries for account, newest first.
        """
        if limit <= 0:
            return
        async with self.session_factory() as session:
            records = await Ledger(session).list_for_account(account.id, limit)
        for record in records:
            yield entry_for(account.id, record)
