"""
Grant the admin role to an auth-provider user.
Run once per administrator: python -m showcase.grant_admin <user-uuid>
"""

import argparse
import asyncio
import uuid

from showcase.config import get_settings
from showcase.core.domain_types import Role, UserId
from showcase.infrastructure import database
from showcase.infrastructure.observability import setup_logging
from showcase.services.role_check import grant_role


async def grant_admin(user_id: UserId) -> None:
    settings = get_settings()
    database.init_db(settings.database_url)
    try:
        async with database.db_manager.session() as db:
            await grant_role(db, user_id, Role.ADMIN)
    finally:
        await database.close_db()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Grant the admin role to a user id.")
    parser.add_argument("user_id", type=uuid.UUID)
    args = parser.parse_args(argv)
    setup_logging(get_settings().log_level, "text")
    asyncio.run(grant_admin(UserId(args.user_id)))
    print(f"✓ {args.user_id} is now admin")


if __name__ == "__main__":
    main()
