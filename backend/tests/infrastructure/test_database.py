"""Database session manager — rollback and DatabaseError mapping on a file-backed SQLite store."""

import pytest
from sqlalchemy import text

from student_records.core.errors import DatabaseError
from student_records.infrastructure.database import DatabaseSessionManager
from student_records.models.student import Student


@pytest.fixture
async def manager(tmp_path):
    mgr = DatabaseSessionManager(f"sqlite+aiosqlite:///{tmp_path / 'students.db'}")
    await mgr.create_schema()
    yield mgr
    await mgr.close()


async def test_failed_query_maps_to_database_error(manager):
    with pytest.raises(DatabaseError) as exc_info:
        async with manager.session() as db:
            await db.execute(text("SELECT * FROM no_such_table"))
    assert exc_info.value.operation == "query"
    assert exc_info.value.message == "Database query failed: OperationalError"


async def test_constraint_violation_maps_to_commit_error(manager):
    with pytest.raises(DatabaseError) as exc_info:
        async with manager.session() as db:
            db.add(Student(full_name="Ana Perez", email="ana@x.com", active=True))
            db.add(Student(full_name="Ana Lima", email="ana@x.com", active=True))
            await db.commit()
    assert exc_info.value.operation == "commit"

    async with manager.session() as db:
        rows = (await db.execute(text("SELECT COUNT(*) FROM students"))).scalar_one()
    assert rows == 0


async def test_health_check(manager):
    assert await manager.health_check() is True
