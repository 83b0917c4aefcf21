"""Student Service — business rules against an in-memory repository.

Invariants:
    - create forces active=True and lets the store assign ids
    - duplicate email → DuplicateEmailError, store untouched
    - unknown id → NotFoundError for get_by_id and deactivate
    - deactivate is idempotent and persists through update
"""

from datetime import date

import pytest

from student_records.core.domain_types import StudentId
from student_records.core.errors import ConflictError, NotFoundError
from student_records.schemas.student import StudentRequestData


def _request(full_name="Ana Perez", email="ana@x.com", birth_date=None):
    return StudentRequestData(
        full_name=full_name, email=email, birth_date=birth_date,
    )


async def test_create_returns_active_projection_with_new_id(service):
    created = await service.create(_request())
    assert created.id == 1
    assert created.full_name == "Ana Perez"
    assert created.email == "ana@x.com"
    assert created.birth_date is None
    assert created.active is True


async def test_create_assigns_distinct_ids(service):
    ids = {
        (await service.create(_request(email=f"s{i}@x.com"))).id
        for i in range(5)
    }
    assert len(ids) == 5


async def test_create_performs_one_insert(service, fake_repository):
    await service.create(_request())
    assert fake_repository.inserts == 1
    assert fake_repository.updates == 0


async def test_create_duplicate_email_conflicts(service, fake_repository):
    await service.create(_request())
    with pytest.raises(ConflictError, match="Email is already registered"):
        await service.create(_request(full_name="Someone Else"))
    assert fake_repository.inserts == 1
    matches = [s for s in fake_repository.rows.values() if s.email == "ana@x.com"]
    assert len(matches) == 1


async def test_email_uniqueness_is_case_sensitive(service):
    await service.create(_request(email="ana@x.com"))
    other = await service.create(_request(email="ANA@x.com"))
    assert other.id == 2


async def test_get_by_id_returns_stored_fields(service):
    created = await service.create(_request(birth_date=date(2001, 4, 23)))
    fetched = await service.get_by_id(StudentId(created.id))
    assert fetched == created
    assert fetched.birth_date == date(2001, 4, 23)


async def test_get_by_id_unknown_raises_not_found(service):
    with pytest.raises(NotFoundError) as exc_info:
        await service.get_by_id(StudentId(999))
    assert exc_info.value.context.student_id == 999


async def test_list_all_empty(service):
    assert await service.list_all() == []


async def test_list_all_returns_insertion_order(service):
    for name, email in [("Ana A", "a@x.com"), ("Ben B", "b@x.com"), ("Cid C", "c@x.com")]:
        await service.create(_request(full_name=name, email=email))
    listed = await service.list_all()
    assert [s.email for s in listed] == ["a@x.com", "b@x.com", "c@x.com"]


async def test_deactivate_sets_inactive_and_persists(service, fake_repository):
    created = await service.create(_request())
    result = await service.deactivate(StudentId(created.id))
    assert result.active is False
    assert fake_repository.updates == 1
    assert (await service.get_by_id(StudentId(created.id))).active is False


async def test_deactivate_twice_is_idempotent(service, fake_repository):
    created = await service.create(_request())
    await service.deactivate(StudentId(created.id))
    again = await service.deactivate(StudentId(created.id))
    assert again.active is False
    assert fake_repository.updates == 2


async def test_deactivate_unknown_raises_not_found(service, fake_repository):
    with pytest.raises(NotFoundError):
        await service.deactivate(StudentId(42))
    assert fake_repository.updates == 0


async def test_get_by_email(service):
    created = await service.create(_request())
    assert await service.get_by_email("ana@x.com") == created


async def test_get_by_email_unknown_raises_not_found(service):
    with pytest.raises(NotFoundError):
        await service.get_by_email("nobody@x.com")


async def test_list_active_excludes_deactivated(service):
    first = await service.create(_request(email="a@x.com"))
    await service.create(_request(email="b@x.com"))
    await service.deactivate(StudentId(first.id))
    active = await service.list_active()
    assert [s.email for s in active] == ["b@x.com"]


async def test_count_includes_inactive(service):
    first = await service.create(_request(email="a@x.com"))
    await service.create(_request(email="b@x.com"))
    await service.deactivate(StudentId(first.id))
    assert await service.count() == 2
