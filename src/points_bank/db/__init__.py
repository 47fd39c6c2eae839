from .accounts import AccountStore
from .ledger import Ledger
from .models import Account, TransferRecord
from .session import Base, build_engine, build_session_factory, claim_writer, create_schema

__all__ = [
    "Account",
    "AccountStore",
    "Base",
    "Ledger",
    "TransferRecord",
    "build_engine",
    "build_session_factory",
    "claim_writer",
    "create_schema",
]
