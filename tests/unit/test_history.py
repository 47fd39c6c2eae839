from __future__ import annotations

from datetime import datetime

import pytest

from points_bank.db.models import Account, TransferRecord
from points_bank.services.history import HistoryReader, entry_for
from points_bank.services.transfer import TransferService


async def _collect(reader: HistoryReader, account, limit=10):
    return [entry async for entry in reader.recent_for(account, limit)]


@pytest.mark.asyncio
async def test_history_signs_amounts_by_direction(session_factory, sender, recipient):
    transfers = TransferService(session_factory)
    await transfers.transfer(sender, "LBK002345", 1000)
    await transfers.transfer(recipient, "LBK001234", 250)

    reader = HistoryReader(session_factory)
    sender_view = await _collect(reader, sender)
    recipient_view = await _collect(reader, recipient)

    assert [(e.amount, e.type) for e in sender_view] == [(250, "received"), (-1000, "sent")]
    assert [(e.amount, e.type) for e in recipient_view] == [(-250, "sent"), (1000, "received")]

    latest = sender_view[0]
    assert latest.contact_name == "Suay Ngam"
    assert latest.contact_member_id == "LBK002345"
    assert latest.status == "completed"


@pytest.mark.asyncio
async def test_history_scenario_after_single_transfer(session_factory, sender, recipient):
    await TransferService(session_factory).transfer(sender, "LBK002345", 1000)

    entries = await _collect(HistoryReader(session_factory), sender, 10)

    assert len(entries) == 1
    assert entries[0].amount == -1000
    assert entries[0].type == "sent"


@pytest.mark.asyncio
@pytest.mark.parametrize("limit, expected", [(10, 4), (3, 3), (1, 1), (0, 0)])
async def test_history_capped_at_limit_newest_first(session_factory, sender, recipient, limit, expected):
    transfers = TransferService(session_factory)
    ids = []
    for amount in (10, 20, 30, 40):
        ids.append((await transfers.transfer(sender, "LBK002345", amount)).transaction_id)

    entries = await _collect(HistoryReader(session_factory), sender, limit)

    assert len(entries) == expected
    assert [e.id for e in entries] == list(reversed(ids))[:expected]
    assert [e.amount for e in entries] == [-40, -30, -20, -10][:expected]


@pytest.mark.asyncio
async def test_history_is_empty_without_transfers(session_factory, sender):
    assert await _collect(HistoryReader(session_factory), sender) == []


@pytest.mark.asyncio
async def test_each_call_returns_a_fresh_sequence(session_factory, sender, recipient):
    await TransferService(session_factory).transfer(sender, "LBK002345", 5)
    reader = HistoryReader(session_factory)

    first = await _collect(reader, sender)
    second = await _collect(reader, sender)

    assert first == second
    assert len(first) == 1


def test_entry_splits_date_and_time():
    me = Account(id=1, first_name="Somchai", last_name="Jaidee", member_id="LBK001234")
    them = Account(id=2, first_name="Suay", last_name="Ngam", member_id="LBK002345")
    record = TransferRecord(
        id=7,
        from_account_id=2,
        to_account_id=1,
        amount=300,
        status="completed",
        created_at=datetime(2024, 1, 5, 14, 7, 59),
    )
    record.from_account = them
    record.to_account = me

    entry = entry_for(1, record)

    assert entry.to_dict() == {
        "id": 7,
        "contact_name": "Suay Ngam",
        "contact_member_id": "LBK002345",
        "amount": 300,
        "type": "received",
        "status": "completed",
        "date": "2024-01-05",
        "time": "14:07",
    }
