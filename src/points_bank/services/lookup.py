from dataclasses import asdict, dataclass
from typing import Any, Dict

from points_bank.db.accounts import AccountStore
from points_bank.errors import NotFound
from points_bank.logging_config import get_logger

logger = get_logger("points_bank.services.lookup")


@dataclass(frozen=True)
class PublicProfile:
    member_id: str
    first_name: str
    last_name: str
    member_tier: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class AccountLookup:
    """
    Read-only member search that never exposes balance or login identity.
    """

    def __init__(self, session_factory):
        self.session_factory = session_factory

    async def find_public(self, member_id: str) -> PublicProfile:
        async with self.session_factory() as session:
            account = await AccountStore(session).get_by_member_id(member_id)
        if account is None:
            logger.info("Member lookup miss member_id=%s", member_id)
            raise NotFound()
        return PublicProfile(
            member_id=account.member_id,
            first_name=account.first_name,
            last_name=account.last_name,
            member_tier=account.member_tier,
        )
