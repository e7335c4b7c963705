"""
Create tables and seed the standard products plus demo profiles.
Run: python -m scripts.seed_catalog  (from backend/)
"""

import asyncio

from underwriting.catalog.seed import seed_products
from underwriting.db.models import Base
from underwriting.db.session import build_engine, build_sessionmaker
from underwriting.repositories.products import save_product
from underwriting.repositories.profiles import create_profile, get_profile


SEED_PROFILES = [
    {
        "profile_id": "agent-001",
        "full_name": "Agente Demo",
        "email": "agente@example.com",
        "role": "agent",
    },
    {
        "profile_id": "client-001",
        "full_name": "Cliente Demo",
        "email": "cliente@example.com",
        "role": "client",
    },
]


async def seed():
    """Insert seed products and profiles."""
    engine = build_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    sessionmaker = build_sessionmaker(engine)
    async with sessionmaker() as session:
        for config in seed_products():
            product = await save_product(session, config)
            print(f"  Saved product: {product.id} ({product.family})")
        for data in SEED_PROFILES:
            if await get_profile(session, data["profile_id"]) is None:
                profile = await create_profile(session, **data)
                print(f"  Created profile: {profile.email} ({profile.role})")
        await session.commit()

    await engine.dispose()
    print("Seed complete.")


if __name__ == "__main__":
    asyncio.run(seed())
