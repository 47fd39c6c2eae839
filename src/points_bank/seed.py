"""
Idempotent seeding of demo members.

    python -m points_bank.seed
"""

import asyncio

from points_bank.config import Settings, get_settings
from points_bank.db.accounts import AccountStore
from points_bank.db.session import build_engine, build_session_factory, create_schema
from points_bank.logging_config import get_logger, setup_logging
from points_bank.services.members import MemberService

logger = get_logger("points_bank.seed")

DEMO_PASSWORD = "password123"

DEMO_MEMBERS = [
    {
        "email": "test@example.com",
        "first_name": "สมชาย",
        "last_name": "ใจดี",
        "phone": "081-234-5678",
        "birthday": "1990-01-01",
        "member_id": "LBK001234",
    },
    {
        "email": "test2@example.com",
        "first_name": "นางสาว",
        "last_name": "สวยงาม",
        "phone": "081-234-5679",
        "birthday": "1992-05-15",
        "member_id": "LBK002345",
    },
]


async def seed_demo(session_factory, settings: Settings) -> int:
    """
    Register any demo member that does not exist yet. Returns how many were created.
    """
    members = MemberService(session_factory, settings)
    created = 0
    for m in DEMO_MEMBERS:
        async with session_factory() as session:
            store = AccountStore(session)
            exists = await store.get_by_member_id(m["member_id"]) or await store.get_by_email(m["email"])
        if exists:
            continue
        await members.register(password=DEMO_PASSWORD, **m)
        created += 1

    logger.info("Demo seed complete; created=%s members", created)
    return created


async def _main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_dir)
    engine = build_engine(settings.database_url, echo=settings.db_echo)
    try:
        await create_schema(engine)
        created = await seed_demo(build_session_factory(engine), settings)
    finally:
        await engine.dispose()
    print(f"seeded_members_created={created}")


if __name__ == "__main__":
    asyncio.run(_main())
