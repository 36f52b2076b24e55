from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from blackslope.core.settings import settings

"""
DB Session.

Rôle (fonctionnel) :
- Engine SQLAlchemy async partagé par l’API (asyncpg en prod, aiosqlite possible en local).
- `get_db()` : dépendance FastAPI, une AsyncSession par requête, fermée en fin de requête.
- `dispose_engine()` : libère le pool de connexions à l’arrêt de l’application.

Notes :
- expire_on_commit=False : les entités restent lisibles après commit (mapping vers le domaine).
- pool_pre_ping=True : une connexion morte du pool est remplacée avant usage.
"""

engine = create_async_engine(settings.DATABASE_URL, echo=False, pool_pre_ping=True)

AsyncSessionLocal = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def get_db() -> AsyncIterator[AsyncSession]:
    async with AsyncSessionLocal() as session:
        yield session


async def dispose_engine() -> None:
    await engine.dispose()
