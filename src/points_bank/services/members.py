"""
Member registration, login and identity resolution.

These sit around the points core: they create accounts with the starting
balance and turn credentials or bearer tokens into a verified Account.
"""

from typing import Optional

from points_bank.auth import check_password, hash_password, issue_token, verify_token
from points_bank.config import Settings
from points_bank.db.accounts import AccountStore
from points_bank.db.models import Account
from points_bank.db.session import claim_writer
from points_bank.errors import InvalidRequest, Unauthenticated
from points_bank.logging_config import get_logger

logger = get_logger("points_bank.services.members")


class MemberService:
    def __init__(self, session_factory, settings: Settings):
        self.session_factory = session_factory
        self.settings = settings

    async def register(
        self,
        email: str,
        password: str,
        member_id: str,
        first_name: str = "",
        last_name: str = "",
        phone: str = "",
        birthday: str = "",
    ) -> Account:
        """
        Create an account with the configured starting points and tier.

        Raises InvalidRequest when a required field is blank and DuplicateError
        when the email or member_id is already taken.
        """
        email = (email or "").strip()
        member_id = (member_id or "").strip()
        if not email or not password or not member_id:
            raise InvalidRequest("email, password and member_id required")

        logger.info("Registering member email=%s member_id=%s", email, member_id)
        account = Account(
            email=email,
            password_hash=hash_password(password, self.settings.bcrypt_rounds),
            first_name=first_name or "",
            last_name=last_name or "",
            phone=phone or "",
            birthday=birthday or "",
            member_id=member_id,
            member_tier=self.settings.default_tier,
            points=self.settings.default_points,
        )
        async with self.session_factory() as session:
            async with session.begin():
                await claim_writer(session)
                await AccountStore(session).create(account)

        logger.info("Registered member id=%s member_id=%s points=%s", account.id, account.member_id, account.points)
        return account

    async def login(self, email: str, password: str) -> str:
        """
        Check credentials and return a signed bearer token.
        """
        async with self.session_factory() as session:
            account = await AccountStore(session).get_by_email((email or "").strip())

        if account is None or not check_password(password or "", account.password_hash):
            logger.warning("Login failed email=%s", email)
            raise Unauthenticated("invalid credentials")

        logger.info("Login successful id=%s member_id=%s", account.id, account.member_id)
        return issue_token(account.id, self.settings.jwt_secret, self.settings.jwt_ttl_hours)

    async def resolve_token(self, token: Optional[str]) -> Account:
        """
        Verify a bearer token and load the account it names.
        """
        account_id = verify_token(token or "", self.settings.jwt_secret)
        async with self.session_factory() as session:
            account = await AccountStore(session).get_by_id(account_id)
        if account is None:
            raise Unauthenticated("user not found")
        return account
