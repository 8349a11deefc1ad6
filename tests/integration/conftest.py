"""Seeding fixtures shared by the integration tests."""

import pytest
import pytest_asyncio

from streetcode.infrastructure.persistence.models import (
    Art as ArtModel,
    Fact as FactModel,
    Image as ImageModel,
    StreetcodeArt as StreetcodeArtModel,
    StreetcodeContent as StreetcodeModel,
)


async def create_streetcode_in_db(session, streetcode_id, title=None):
    """Insert a streetcode row (FK target for facts and arts)."""
    session.add(
        StreetcodeModel(
            id=streetcode_id,
            index=streetcode_id,
            title=title or f"Streetcode {streetcode_id}",
        )
    )
    await session.commit()
    return streetcode_id


async def create_facts_in_db(session, streetcode_id, fact_ids):
    """Insert facts numbered 1..N in the given id order."""
    for number, fact_id in enumerate(fact_ids, start=1):
        session.add(
            FactModel(
                id=fact_id,
                title=f"Fact {fact_id}",
                fact_content=f"Content of fact {fact_id}",
                number=number,
                streetcode_id=streetcode_id,
            )
        )
    await session.commit()


async def create_image_in_db(session, image_id, blob_name=None):
    session.add(
        ImageModel(
            id=image_id,
            blob_name=blob_name or f"image-{image_id}.png",
            mime_type="image/png",
            title=f"Image {image_id}",
            alt=f"Alt {image_id}",
        )
    )
    await session.commit()
    return image_id


async def create_art_in_db(session, art_id, image_id, links=()):
    """Insert an art and its streetcode links given as (streetcode_id, index)."""
    session.add(
        ArtModel(
            id=art_id,
            title=f"Art {art_id}",
            description=f"Description of art {art_id}",
            image_id=image_id,
        )
    )
    await session.flush()
    for streetcode_id, index in links:
        session.add(
            StreetcodeArtModel(art_id=art_id, streetcode_id=streetcode_id, index=index)
        )
    await session.commit()
    return art_id


async def fetch_numbers(database, streetcode_id):
    """Read {fact_id: number} for a streetcode in a fresh session."""
    from sqlalchemy import select

    async with database.get_session() as session:
        result = await session.execute(
            select(FactModel.id, FactModel.number).where(
                FactModel.streetcode_id == streetcode_id
            )
        )
        return dict(result.all())


async def seed_facts(database):
    """Streetcode 7 with facts 10, 11, 12 and streetcode 8 with fact 20."""
    async with database.get_session() as session:
        await create_streetcode_in_db(session, 7)
        await create_streetcode_in_db(session, 8)
        await create_facts_in_db(session, 7, [10, 11, 12])
        await create_facts_in_db(session, 8, [20])
    return database


@pytest_asyncio.fixture
async def seeded_facts(test_database):
    return await seed_facts(test_database)


@pytest_asyncio.fixture
async def seeded_file_facts(tmp_path):
    """Same facts as seeded_facts, stored in a SQLite file.

    File databases give every session its own connection, so concurrent
    requests run in separate transactions.
    """
    from streetcode.infrastructure.persistence.database import Database

    db = Database(database_url=f"sqlite+aiosqlite:///{tmp_path / 'streetcode.db'}")
    await db.create_all()
    yield await seed_facts(db)
    await db.close()


@pytest_asyncio.fixture
async def seeded_arts(test_database):
    """Streetcode 7 with arts 3 (index 2) and 4 (index 1); art 5 is unattached."""
    async with test_database.get_session() as session:
        await create_streetcode_in_db(session, 7)
        await create_image_in_db(session, 1)
        await create_image_in_db(session, 2)
        await create_art_in_db(session, 3, image_id=1, links=[(7, 2)])
        await create_art_in_db(session, 4, image_id=2, links=[(7, 1)])
        await create_art_in_db(session, 5, image_id=2)
    return test_database


@pytest.fixture
def fact_numbers():
    """Provide the {fact_id: number} reader."""
    return fetch_numbers
