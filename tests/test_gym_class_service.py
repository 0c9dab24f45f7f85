import pytest

from gym_admin.core.errors import NotFoundError, ValidationError
from gym_admin.schemas import GymClassCreate, GymClassUpdate, MemberCreate
from gym_admin.services import gym_class_service, member_service


async def test_create_and_list_classes(db):
    yoga = await gym_class_service.create_class(db, GymClassCreate(class_name=" Yoga "))
    box = await gym_class_service.create_class(db, GymClassCreate(class_name="Boxing"))

    classes = await gym_class_service.list_classes(db)
    assert [(c.id, c.class_name) for c in classes] == [(yoga.id, "Yoga"), (box.id, "Boxing")]


async def test_create_class_requires_name(db):
    with pytest.raises(ValidationError) as exc_info:
        await gym_class_service.create_class(db, GymClassCreate(class_name=""))
    assert "class_name" in exc_info.value.errors


async def test_class_name_length_limit(db):
    with pytest.raises(ValidationError):
        await gym_class_service.create_class(db, GymClassCreate(class_name="x" * 201))


async def test_update_class(db):
    yoga = await gym_class_service.create_class(db, GymClassCreate(class_name="Yoga"))
    updated = await gym_class_service.update_class(db, yoga.id, GymClassUpdate(class_name="Hot Yoga"))
    assert updated.class_name == "Hot Yoga"
    assert (await gym_class_service.get_class(db, yoga.id)).gym_class.class_name == "Hot Yoga"


async def test_update_class_validation_and_missing(db):
    yoga = await gym_class_service.create_class(db, GymClassCreate(class_name="Yoga"))
    with pytest.raises(ValidationError):
        await gym_class_service.update_class(db, yoga.id, GymClassUpdate(class_name="  "))
    with pytest.raises(NotFoundError):
        await gym_class_service.update_class(db, 999, GymClassUpdate(class_name="Pilates"))


async def test_get_class_lists_enrolled_members(db):
    yoga = await gym_class_service.create_class(db, GymClassCreate(class_name="Yoga"))
    box = await gym_class_service.create_class(db, GymClassCreate(class_name="Boxing"))
    bob = await member_service.create_member(db, MemberCreate(full_name="Bob", class_ids=[yoga.id]))
    await member_service.create_member(db, MemberCreate(full_name="Carl", class_ids=[box.id]))

    detail = await gym_class_service.get_class(db, yoga.id)
    assert [m.id for m in detail.members] == [bob.id]
    assert detail.members[0].class_ids == [yoga.id]


async def test_delete_class_removes_exactly_its_enrollments(db):
    yoga = await gym_class_service.create_class(db, GymClassCreate(class_name="Yoga"))
    box = await gym_class_service.create_class(db, GymClassCreate(class_name="Boxing"))
    members = [
        await member_service.create_member(
            db, MemberCreate(full_name=f"Member {i}", class_ids=[yoga.id, box.id])
        )
        for i in range(3)
    ]
    assert await member_service.count_enrollments(db) == 6

    await gym_class_service.delete_class(db, yoga.id)

    assert await member_service.count_enrollments(db) == 3
    assert await member_service.count_members(db) == 3
    for member in members:
        detail = await member_service.get_member(db, member.id)
        assert detail.member.class_ids == [box.id]


async def test_delete_missing_class(db):
    with pytest.raises(NotFoundError):
        await gym_class_service.delete_class(db, 5)
