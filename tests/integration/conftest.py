import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
import src.domain  # noqa: F401  registers the tasks table


@pytest_asyncio.fixture
async def engine(tmp_path):
    # A fresh SQLite file per test keeps autoincrement IDs and data isolated
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'tasks.db'}", echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


def _build_app(engine):
    from src.api.app import create_app
    from config import ApplicationConfig
    from src.depends import get_unit_of_work

    app = create_app(ApplicationConfig)

    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    # Override to create a new session per request
    async def override_get_unit_of_work():
        async with Session() as session:
            yield SqlAlchemyUnitOfWork(session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    return app


@pytest_asyncio.fixture
async def client(engine):
    app = _build_app(engine)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


class BrokenUnitOfWork:
    """Unit of work whose store is unreachable"""

    async def __aenter__(self):
        raise RuntimeError("database unavailable")

    async def __aexit__(self, *args):
        pass

    async def commit(self):
        pass

    async def rollback(self):
        pass


@pytest_asyncio.fixture
async def broken_client(engine):
    from src.depends import get_unit_of_work

    app = _build_app(engine)

    async def override_get_unit_of_work():
        yield BrokenUnitOfWork()

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

    # The catch-all handler answers with a 500 and Starlette re-raises afterwards
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
