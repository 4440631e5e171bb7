"""Create an AssetTrack admin user.

Usage: python create_superuser.py --email admin@company.com [--password ...] [--name "System Admin"]
"""
import argparse
import asyncio
import getpass

from app.core.security import get_password_hash
from app.db.session import async_session_maker
from app.repositories.user_repository import UserRepository


async def create_superuser(email: str, password: str, full_name: str) -> None:
    async with async_session_maker() as db:
        repo = UserRepository(db)
        try:
            print(f"Checking for user {email}...")
            if await repo.get_by_email(email) is not None:
                print("User already exists.")
                return

            print(f"Creating admin user {email}...")
            user_id = await repo.insert({
                "email": email,
                "full_name": full_name,
                "password_hash": get_password_hash(password),
                "role_id": "Admin",
            })
            await db.commit()
            print(f"Superuser created successfully (user_id={user_id})")
        except Exception as e:
            await db.rollback()
            print(f"Error: {e}")
            raise


def main() -> None:
    parser = argparse.ArgumentParser(description="Create an AssetTrack admin user")
    parser.add_argument("--email", required=True)
    parser.add_argument("--password", help="prompted for when omitted")
    parser.add_argument("--name", default="System Admin")
    args = parser.parse_args()

    password = args.password or getpass.getpass("Password: ")
    asyncio.run(create_superuser(args.email, password, args.name))


if __name__ == "__main__":
    main()
