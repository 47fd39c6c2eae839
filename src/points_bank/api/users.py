from fastapi import APIRouter, Depends

from points_bank.db.models import Account
from points_bank.logging_config import get_logger
from points_bank.services import MemberService
from .deps import get_current_account, get_member_service
from .schemas import ErrorOut, LoginIn, LoginOut, ProfileOut, RegisterIn, RegisterOut
from .serializers import serialize_profile

logger = get_logger("points_bank.api.users")

router = APIRouter(tags=["users"])


@router.post(
    "/register",
    response_model=RegisterOut,
    status_code=201,
    responses={400: {"model": ErrorOut, "description": "Bad request"}},
)
async def register(payload: RegisterIn, members: MemberService = Depends(get_member_service)):
    """
    Register a member; new accounts start with the default points and tier.
    """
    account = await members.register(
        email=payload.email,
        password=payload.password,
        member_id=payload.member_id,
        first_name=payload.first_name,
        last_name=payload.last_name,
        phone=payload.phone,
        birthday=payload.birthday,
    )
    return RegisterOut(id=account.id, email=account.email, member_id=account.member_id)


@router.post(
    "/login",
    response_model=LoginOut,
    responses={401: {"model": ErrorOut, "description": "Invalid credentials"}},
)
async def login(payload: LoginIn, members: MemberService = Depends(get_member_service)):
    """
    Exchange email + password for a bearer token.
    """
    token = await members.login(payload.email, payload.password)
    return LoginOut(token=token)


@router.get(
    "/me",
    response_model=ProfileOut,
    responses={401: {"model": ErrorOut, "description": "Unauthorized"}},
)
async def me(account: Account = Depends(get_current_account)):
    """
    Profile of the authenticated member (without the password hash).
    """
    return serialize_profile(account)
