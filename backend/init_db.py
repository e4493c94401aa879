"""
Database initialization script
Creates the tables and optionally seeds a few demo users through the normal
service path, so hues are allocated exactly as they would be in production.
"""
import argparse
import logging

from hueprint.database import create_all, get_session_factory
from hueprint.user.schemas import UserCreateRequest
from hueprint.user.service import UserService

logger = logging.getLogger("hueprint.init_db")

DEMO_USERS: list[dict] = [
    {"name": "John Smith", "email": "john@example.com"},
    {"name": "Jane Doe", "email": "jane@example.com"},
    {"name": "田中太郎", "email": "tanaka@example.com"},
    {"name": None, "email": "ops-bot@example.com"},
]


def main() -> None:
    parser = argparse.ArgumentParser(description="Create Hueprint tables")
    parser.add_argument("--seed", action="store_true", help="insert demo users")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    create_all()
    logger.info("tables_created")

    if not args.seed:
        return

    db = get_session_factory()()
    try:
        service = UserService(db)
        for item in DEMO_USERS:
            user = service.create(UserCreateRequest(**item))
            logger.info("seeded email=%s hue=%s initials=%s", user.email, user.avatar_hue, user.initials)
    finally:
        db.close()


if __name__ == "__main__":
    main()
