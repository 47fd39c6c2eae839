from fastapi import APIRouter, Depends, Query

from points_bank.db.models import Account
from points_bank.errors import InvalidRequest, SelfLookup
from points_bank.logging_config import get_logger
from points_bank.services import AccountLookup, HistoryReader, TransferService
from points_bank.services.history import DEFAULT_LIMIT
from .deps import get_account_lookup, get_current_account, get_history_reader, get_transfer_service
from .schemas import ErrorOut, PublicProfileOut, RecentTransactionsOut, TransferIn, TransferOut
from .serializers import serialize_transfer

logger = get_logger("points_bank.api.transfers")

router = APIRouter(tags=["transfers"])

MAX_HISTORY_LIMIT = 50


@router.post(
    "/transfer",
    response_model=TransferOut,
    responses={
        400: {"model": ErrorOut, "description": "Bad request"},
        401: {"model": ErrorOut, "description": "Unauthorized"},
        404: {"model": ErrorOut, "description": "Recipient not found"},
        500: {"model": ErrorOut, "description": "Transfer failed"},
    },
)
async def transfer_points(
    payload: TransferIn,
    account: Account = Depends(get_current_account),
    transfers: TransferService = Depends(get_transfer_service),
):
    """
    Transfer points from the authenticated member to another member.
    """
    result = await transfers.transfer(account, payload.to_member_id, payload.amount)
    return serialize_transfer(result)


@router.get(
    "/transactions/recent",
    response_model=RecentTransactionsOut,
    responses={401: {"model": ErrorOut, "description": "Unauthorized"}},
)
async def recent_transactions(
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_HISTORY_LIMIT),
    account: Account = Depends(get_current_account),
    history: HistoryReader = Depends(get_history_reader),
):
    """
    Most recent transfers sent or received by the authenticated member.
    """
    entries = [entry.to_dict() async for entry in history.recent_for(account, limit)]
    return {"transactions": entries}


@router.get(
    "/search/user",
    response_model=PublicProfileOut,
    responses={
        400: {"model": ErrorOut, "description": "Bad request"},
        401: {"model": ErrorOut, "description": "Unauthorized"},
        404: {"model": ErrorOut, "description": "User not found"},
    },
)
async def search_user(
    member_id: str = Query("", description="LBK Member ID to search for"),
    account: Account = Depends(get_current_account),
    lookup: AccountLookup = Depends(get_account_lookup),
):
    """
    Public profile of another member, used to confirm a transfer recipient.
    """
    member_id = member_id.strip()
    if not member_id:
        raise InvalidRequest("member_id query parameter required")
    if member_id == account.member_id:
        # own balance is available through /me, not through search
        raise SelfLookup()

    logger.info("Member search by=%s member_id=%s", account.member_id, member_id)
    profile = await lookup.find_public(member_id)
    return profile.to_dict()
