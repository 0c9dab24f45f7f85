"""Member operations, including the member's enrollment set."""

import logging
from collections import Counter
from typing import Dict, Iterable, List, Optional

from sqlalchemy import delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from gym_admin.core.errors import NotFoundError, ValidationError
from gym_admin.models import Enrollment, GymClass, Member, Trainer
from gym_admin.schemas import (
    GymClassResponse,
    MemberCreate,
    MemberDetail,
    MemberResponse,
    MemberUpdate,
    TrainerResponse,
)
from gym_admin.services.common import (
    clean_email,
    clean_phone,
    clean_required,
    search_pattern,
    write_transaction,
)

logger = logging.getLogger(__name__)


async def _class_ids_by_member(db: AsyncSession, member_ids: Iterable[int]) -> Dict[int, List[int]]:
    ids = list(member_ids)
    class_ids: Dict[int, List[int]] = {member_id: [] for member_id in ids}
    if not ids:
        return class_ids
    result = await db.execute(
        select(Enrollment.member_id, Enrollment.class_id)
        .where(Enrollment.member_id.in_(ids))
        .order_by(Enrollment.member_id, Enrollment.class_id)
    )
    for member_id, class_id in result.all():
        class_ids[member_id].append(class_id)
    return class_ids


def _to_response(member: Member, class_ids: List[int]) -> MemberResponse:
    return MemberResponse(
        id=member.id,
        full_name=member.full_name,
        email=member.email,
        phone=member.phone,
        trainer_id=member.trainer_id,
        class_ids=class_ids,
    )


async def _responses(db: AsyncSession, members: List[Member]) -> List[MemberResponse]:
    class_ids = await _class_ids_by_member(db, (m.id for m in members))
    return [_to_response(m, class_ids[m.id]) for m in members]


async def _details(db: AsyncSession, members: List[Member]) -> List[MemberDetail]:
    """Resolve trainers and classes for a batch of members with one query each."""
    responses = await _responses(db, members)

    trainer_ids = {m.trainer_id for m in responses if m.trainer_id is not None}
    trainers: Dict[int, TrainerResponse] = {}
    if trainer_ids:
        result = await db.execute(select(Trainer).where(Trainer.id.in_(trainer_ids)))
        trainers = {t.id: TrainerResponse.model_validate(t) for t in result.scalars().all()}

    all_class_ids = {cid for m in responses for cid in m.class_ids}
    classes: Dict[int, GymClassResponse] = {}
    if all_class_ids:
        result = await db.execute(select(GymClass).where(GymClass.id.in_(all_class_ids)))
        classes = {c.id: GymClassResponse.model_validate(c) for c in result.scalars().all()}

    return [
        MemberDetail(
            member=m,
            trainer=trainers.get(m.trainer_id) if m.trainer_id is not None else None,
            classes=[classes[cid] for cid in m.class_ids if cid in classes],
        )
        for m in responses
    ]


async def _load(db: AsyncSession, member_id: int) -> Member:
    member = await db.get(Member, member_id)
    if member is None:
        raise NotFoundError("Member", member_id)
    return member


async def _clean(db: AsyncSession, data: MemberCreate) -> Dict[str, object]:
    """Validate a member command against the current trainers and classes."""
    errors: Dict[str, str] = {}
    values: Dict[str, object] = {
        "full_name": clean_required(data.full_name, "full_name", errors),
        "email": clean_email(data.email, errors),
        "phone": clean_phone(data.phone, errors),
        "trainer_id": data.trainer_id,
    }

    if data.trainer_id is not None:
        trainer = await db.get(Trainer, data.trainer_id)
        if trainer is None:
            errors["trainer_id"] = f"Trainer {data.trainer_id} does not exist."

    duplicates = sorted(cid for cid, n in Counter(data.class_ids).items() if n > 1)
    if duplicates:
        errors["class_ids"] = f"Duplicate class ids: {', '.join(map(str, duplicates))}."
    elif data.class_ids:
        result = await db.execute(
            select(GymClass.id).where(GymClass.id.in_(data.class_ids))
        )
        missing = sorted(set(data.class_ids) - set(result.scalars().all()))
        if missing:
            errors["class_ids"] = f"Unknown class ids: {', '.join(map(str, missing))}."

    if errors:
        raise ValidationError(errors)
    return values


async def _insert_enrollments(db: AsyncSession, member_id: int, class_ids: List[int]) -> None:
    if not class_ids:
        return
    await db.execute(
        insert(Enrollment),
        [{"member_id": member_id, "class_id": cid} for cid in class_ids],
    )


async def list_members(db: AsyncSession, search: Optional[str] = None) -> List[MemberDetail]:
    """Get members ordered by id with trainer and classes resolved.

    ``search`` is a case-insensitive substring of the full name.
    """
    query = select(Member).order_by(Member.id)
    pattern = search_pattern(search)
    if pattern is not None:
        query = query.where(Member.full_name.ilike(pattern, escape="\\"))
    result = await db.execute(query)
    return await _details(db, list(result.scalars().all()))


async def list_members_by_trainer(db: AsyncSession, trainer_id: int) -> List[MemberResponse]:
    result = await db.execute(
        select(Member).where(Member.trainer_id == trainer_id).order_by(Member.id)
    )
    return await _responses(db, list(result.scalars().all()))


async def list_members_in_class(db: AsyncSession, class_id: int) -> List[MemberResponse]:
    result = await db.execute(
        select(Member)
        .join(Enrollment, Enrollment.member_id == Member.id)
        .where(Enrollment.class_id == class_id)
        .order_by(Member.id)
    )
    return await _responses(db, list(result.scalars().all()))


async def get_member(db: AsyncSession, member_id: int) -> MemberDetail:
    """Get member by ID with trainer and enrolled classes."""
    member = await _load(db, member_id)
    details = await _details(db, [member])
    return details[0]


async def create_member(db: AsyncSession, data: MemberCreate) -> MemberResponse:
    """Create member and one enrollment row per class id."""
    values = await _clean(db, data)
    member = Member(**values)
    async with write_transaction(db, "create member"):
        db.add(member)
        await db.flush()
        await _insert_enrollments(db, member.id, data.class_ids)
    logger.info(
        f"Created member {member.full_name} (ID: {member.id}) "
        f"with {len(data.class_ids)} enrollment(s)"
    )
    return _to_response(member, sorted(data.class_ids))


async def update_member(db: AsyncSession, member_id: int, data: MemberUpdate) -> MemberResponse:
    """Replace a member's fields and its whole enrollment set in one transaction."""
    member = await _load(db, member_id)
    values = await _clean(db, data)
    async with write_transaction(db, "update member"):
        for field, value in values.items():
            setattr(member, field, value)
        await db.execute(delete(Enrollment).where(Enrollment.member_id == member_id))
        await _insert_enrollments(db, member_id, data.class_ids)
    logger.info(
        f"Updated member {member.full_name} (ID: {member.id}), "
        f"enrollments now {sorted(data.class_ids)}"
    )
    return _to_response(member, sorted(data.class_ids))


async def delete_member(db: AsyncSession, member_id: int) -> None:
    """Delete member together with its enrollment rows."""
    member = await _load(db, member_id)
    member_name = member.full_name
    async with write_transaction(db, "delete member"):
        await db.execute(delete(Enrollment).where(Enrollment.member_id == member_id))
        await db.delete(member)
    logger.info(f"Deleted member {member_name} (ID: {member_id})")


async def count_members(db: AsyncSession) -> int:
    result = await db.execute(select(func.count()).select_from(Member))
    return result.scalar_one()


async def count_enrollments(db: AsyncSession) -> int:
    result = await db.execute(select(func.count()).select_from(Enrollment))
    return result.scalar_one()
