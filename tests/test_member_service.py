import pytest
from sqlalchemy import func, select

from gym_admin.core.errors import NotFoundError, ValidationError
from gym_admin.models import Enrollment
from gym_admin.schemas import GymClassCreate, MemberCreate, MemberUpdate, TrainerCreate
from gym_admin.services import gym_class_service, member_service, trainer_service


@pytest.fixture
async def classes(db):
    return [
        await gym_class_service.create_class(db, GymClassCreate(class_name=name))
        for name in ("Yoga", "Spinning", "Boxing")
    ]


@pytest.fixture
async def trainer(db):
    return await trainer_service.create_trainer(db, TrainerCreate(name="Alice"))


async def _enrollment_count(db, member_id):
    result = await db.execute(
        select(func.count()).select_from(Enrollment).where(Enrollment.member_id == member_id)
    )
    return result.scalar_one()


async def test_create_member_then_get_returns_enrollments(db, classes, trainer):
    class_ids = [classes[2].id, classes[0].id]
    created = await member_service.create_member(
        db,
        MemberCreate(
            full_name="Bob", email="bob@x.com", phone="222",
            trainer_id=trainer.id, class_ids=class_ids,
        ),
    )

    detail = await member_service.get_member(db, created.id)
    assert detail.member.full_name == "Bob"
    assert detail.member.trainer_id == trainer.id
    assert set(detail.member.class_ids) == set(class_ids)
    assert detail.trainer.name == "Alice"
    assert sorted(c.class_name for c in detail.classes) == ["Boxing", "Yoga"]


async def test_create_member_without_trainer_or_classes(db):
    created = await member_service.create_member(db, MemberCreate(full_name="Solo"))
    detail = await member_service.get_member(db, created.id)
    assert detail.member.trainer_id is None
    assert detail.member.class_ids == []
    assert detail.trainer is None
    assert detail.classes == []


async def test_create_member_requires_full_name(db):
    with pytest.raises(ValidationError) as exc_info:
        await member_service.create_member(db, MemberCreate(full_name=" "))
    assert "full_name" in exc_info.value.errors


async def test_create_member_with_unknown_trainer(db):
    with pytest.raises(ValidationError) as exc_info:
        await member_service.create_member(db, MemberCreate(full_name="Bob", trainer_id=99))
    assert "trainer_id" in exc_info.value.errors
    assert await member_service.count_members(db) == 0


async def test_create_member_with_unknown_class(db, classes):
    with pytest.raises(ValidationError) as exc_info:
        await member_service.create_member(
            db, MemberCreate(full_name="Bob", class_ids=[classes[0].id, 999])
        )
    assert "999" in exc_info.value.errors["class_ids"]
    assert await member_service.count_members(db) == 0
    assert await member_service.count_enrollments(db) == 0


async def test_duplicate_class_ids_are_rejected(db, classes):
    with pytest.raises(ValidationError) as exc_info:
        await member_service.create_member(
            db, MemberCreate(full_name="Bob", class_ids=[classes[0].id, classes[0].id])
        )
    assert "class_ids" in exc_info.value.errors
    assert await member_service.count_members(db) == 0
    assert await member_service.count_enrollments(db) == 0


async def test_update_member_replaces_enrollment_set(db, classes, trainer):
    created = await member_service.create_member(
        db, MemberCreate(full_name="Bob", class_ids=[classes[0].id, classes[1].id])
    )

    updated = await member_service.update_member(
        db,
        created.id,
        MemberUpdate(
            full_name="Robert", email="rob@x.com", trainer_id=trainer.id,
            class_ids=[classes[1].id, classes[2].id],
        ),
    )
    assert updated.class_ids == [classes[1].id, classes[2].id]

    detail = await member_service.get_member(db, created.id)
    assert detail.member.full_name == "Robert"
    assert detail.member.email == "rob@x.com"
    assert detail.member.trainer_id == trainer.id
    assert detail.member.class_ids == [classes[1].id, classes[2].id]
    assert await _enrollment_count(db, created.id) == 2


async def test_update_member_with_empty_class_ids_clears_enrollments(db, classes):
    created = await member_service.create_member(
        db, MemberCreate(full_name="Bob", class_ids=[c.id for c in classes])
    )

    await member_service.update_member(db, created.id, MemberUpdate(full_name="Bob", class_ids=[]))

    detail = await member_service.get_member(db, created.id)
    assert detail.member.class_ids == []
    assert await _enrollment_count(db, created.id) == 0


async def test_update_member_can_clear_trainer(db, trainer):
    created = await member_service.create_member(
        db, MemberCreate(full_name="Bob", trainer_id=trainer.id)
    )
    await member_service.update_member(db, created.id, MemberUpdate(full_name="Bob"))
    detail = await member_service.get_member(db, created.id)
    assert detail.member.trainer_id is None


async def test_invalid_update_leaves_member_untouched(db, classes):
    created = await member_service.create_member(
        db, MemberCreate(full_name="Bob", class_ids=[classes[0].id])
    )

    with pytest.raises(ValidationError):
        await member_service.update_member(
            db, created.id, MemberUpdate(full_name="Robert", class_ids=[classes[1].id, 404])
        )

    detail = await member_service.get_member(db, created.id)
    assert detail.member.full_name == "Bob"
    assert detail.member.class_ids == [classes[0].id]


async def test_update_missing_member(db):
    with pytest.raises(NotFoundError):
        await member_service.update_member(db, 7, MemberUpdate(full_name="Ghost"))


async def test_delete_member_cascades_enrollments_only(db, classes):
    created = await member_service.create_member(
        db, MemberCreate(full_name="Bob", class_ids=[classes[0].id, classes[1].id])
    )
    other = await member_service.create_member(
        db, MemberCreate(full_name="Carl", class_ids=[classes[0].id])
    )

    await member_service.delete_member(db, created.id)

    assert await _enrollment_count(db, created.id) == 0
    assert await _enrollment_count(db, other.id) == 1
    assert len(await gym_class_service.list_classes(db)) == 3


async def test_delete_member_twice_reports_not_found(db):
    created = await member_service.create_member(db, MemberCreate(full_name="Bob"))
    await member_service.delete_member(db, created.id)

    with pytest.raises(NotFoundError):
        await member_service.delete_member(db, created.id)

    # The session is still usable afterwards
    assert await member_service.count_members(db) == 0


async def test_list_members_resolves_trainer_and_classes(db, classes, trainer):
    await member_service.create_member(
        db, MemberCreate(full_name="Bob Stone", trainer_id=trainer.id, class_ids=[classes[0].id])
    )
    await member_service.create_member(db, MemberCreate(full_name="Ann Bobbins"))
    await member_service.create_member(db, MemberCreate(full_name="Zed"))

    members = await member_service.list_members(db)
    assert [m.member.full_name for m in members] == ["Bob Stone", "Ann Bobbins", "Zed"]
    assert members[0].trainer.id == trainer.id
    assert [c.class_name for c in members[0].classes] == ["Yoga"]
    assert members[1].trainer is None

    found = await member_service.list_members(db, "bob")
    assert [m.member.full_name for m in found] == ["Bob Stone", "Ann Bobbins"]


async def test_end_to_end_scenario(db):
    alice = await trainer_service.create_trainer(
        db, TrainerCreate(name="Alice", email="a@x.com", phone="111")
    )
    yoga = await gym_class_service.create_class(db, GymClassCreate(class_name="Yoga"))
    bob = await member_service.create_member(
        db, MemberCreate(full_name="Bob", trainer_id=alice.id, class_ids=[yoga.id])
    )

    detail = await member_service.get_member(db, bob.id)
    assert detail.member.trainer_id == alice.id
    assert detail.member.class_ids == [yoga.id]

    await gym_class_service.delete_class(db, yoga.id)

    detail = await member_service.get_member(db, bob.id)
    assert detail.member.class_ids == []
    assert detail.member.trainer_id == alice.id
