#!/usr/bin/env python3
"""
Script to seed the default volunteer accounts.

Creates one admin, one foster and one interviewer. Accounts whose email
already exists are left untouched, so the script is safe to run twice.

Usage:
  python scripts/seed_volunteers.py [--password secret123] [--domain example.com]
"""

import asyncio
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.config.settings import get_settings
from src.domain.models.volunteer import Volunteer
from src.domain.value_objects.role import Role
from src.infrastructure.auth.password import PasswordHasher
from src.infrastructure.db.session import (
    SQLAlchemyUnitOfWork,
    create_engine,
    create_session_factory,
)

DEFAULT_VOLUNTEERS = (
    ("Admin", "User", "admin", Role.ADMIN),
    ("Foster", "User", "foster", Role.FOSTER),
    ("Interviewer", "User", "interviewer", Role.INTERVIEWER),
)


async def seed(password: str, domain: str) -> None:
    settings = get_settings()
    engine = create_engine(settings.database_url)
    session_factory = create_session_factory(engine)
    password_hasher = PasswordHasher()

    try:
        async with SQLAlchemyUnitOfWork(session_factory) as uow:
            for first_name, last_name, local_part, role in DEFAULT_VOLUNTEERS:
                email = f"{local_part}@{domain}"
                if await uow.volunteers.get_by_email(email):
                    print(f"ℹ️  {email} already exists, skipping")
                    continue
                volunteer = await uow.volunteers.add(
                    Volunteer.create(
                        first_name=first_name,
                        last_name=last_name,
                        email=email,
                        hashed_password=password_hasher.hash(password),
                        role=role,
                    )
                )
                print(f"✨ Created {role.value}: {email} (ID: {volunteer.id})")
            await uow.commit()
    finally:
        await engine.dispose()


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Seed the default SFP volunteer accounts")
    parser.add_argument("--password", default="password123", help="Password for every account")
    parser.add_argument("--domain", default="example.com", help="Email domain for the accounts")
    args = parser.parse_args()

    if len(args.password) < 8:
        print("❌ Error: password must be at least 8 characters")
        sys.exit(1)

    print("=" * 60)
    print("🐾 Volunteer seeder - SFP Portal")
    print("=" * 60)

    asyncio.run(seed(args.password, args.domain))

    print("\n" + "=" * 60)
    print("✨ Process completed")
    print("=" * 60)
