#!/usr/bin/env python3
"""
Seed script: loads profiles, translations and lists of values from a JSON fixture file.
Run: python scripts/seed.py path/to/fixtures.json

Accounts themselves live with the auth provider; this only mirrors their profiles.
"""

import asyncio
import json
import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from uuid import uuid4

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from ideahub.config import settings
from ideahub.models import ListOfValue, Profile, Translation


async def seed(fixture_path: Path):
    fixtures = json.loads(fixture_path.read_text(encoding="utf-8"))
    engine = create_async_engine(settings.database_url)
    async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    now = datetime.now(timezone.utc)

    async with async_session() as session:
        for p in fixtures.get("profiles", []):
            existing = await session.get(Profile, p["id"])
            if existing:
                print(f"Profile {p['email']} already exists, skipping.")
                continue
            session.add(
                Profile(
                    id=p["id"],
                    email=p["email"],
                    full_name=p.get("full_name"),
                    role=p.get("role", "submitter"),
                    department=p.get("department"),
                    is_active=True,
                    email_confirmed=True,
                    created_at=now,
                    updated_at=now,
                )
            )

        for t in fixtures.get("translations", []):
            result = await session.execute(
                select(Translation).where(
                    Translation.interface_name == t["interface_name"],
                    Translation.position_key == t["position_key"],
                )
            )
            row = result.scalar_one_or_none()
            if row:
                row.english_text = t["english_text"]
                row.arabic_text = t["arabic_text"]
            else:
                session.add(Translation(id=str(uuid4()), **t))

        for v in fixtures.get("list_of_values", []):
            result = await session.execute(
                select(ListOfValue).where(
                    ListOfValue.list_key == v["list_key"],
                    ListOfValue.value_key == v["value_key"],
                )
            )
            if result.scalar_one_or_none() is None:
                session.add(ListOfValue(is_active=True, **v))

        await session.commit()

    await engine.dispose()
    print("Seed complete!")


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("Usage: python scripts/seed.py path/to/fixtures.json")
        sys.exit(1)
    asyncio.run(seed(Path(sys.argv[1])))
