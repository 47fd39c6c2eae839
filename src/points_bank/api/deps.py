from typing import Optional

from fastapi import Depends, Header, Request

from points_bank.auth import parse_bearer
from points_bank.config import Settings
from points_bank.db.models import Account
from points_bank.services import AccountLookup, HistoryReader, MemberService, TransferService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_session_factory(request: Request):
    """
    Session factory built by create_app(); each service opens its own sessions.
    """
    return request.app.state.session_factory


def get_member_service(
    session_factory=Depends(get_session_factory),
    settings: Settings = Depends(get_settings),
) -> MemberService:
    return MemberService(session_factory, settings)


def get_transfer_service(session_factory=Depends(get_session_factory)) -> TransferService:
    return TransferService(session_factory)


def get_history_reader(session_factory=Depends(get_session_factory)) -> HistoryReader:
    return HistoryReader(session_factory)


def get_account_lookup(session_factory=Depends(get_session_factory)) -> AccountLookup:
    return AccountLookup(session_factory)


async def get_current_account(
    authorization: Optional[str] = Header(None),
    members: MemberService = Depends(get_member_service),
) -> Account:
    """
    Resolve the bearer token into a verified Account (raises Unauthenticated).
    """
    token = parse_bearer(authorization)
    return await members.resolve_token(token)
