from .history import HistoryEntry, HistoryReader
from .lookup import AccountLookup, PublicProfile
from .members import MemberService
from .transfer import RecipientSummary, TransferResult, TransferService

__all__ = [
    "AccountLookup",
    "HistoryEntry",
    "HistoryReader",
    "MemberService",
    "PublicProfile",
    "RecipientSummary",
    "TransferResult",
    "TransferService",
]
