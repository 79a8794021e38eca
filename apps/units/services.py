"""Unit catalogue use cases."""

from __future__ import annotations

import logging
from decimal import Decimal

from shared.application.uow import DjangoUnitOfWork
from shared.domain.exceptions import NotFoundError

from apps.users.models import User

from .events import UnitCreated
from .models import Unit

logger = logging.getLogger(__name__)


def create_unit(
    *,
    number_of_rooms: int,
    accommodation_type: str,
    floor: int,
    base_cost: Decimal,
    owner_id: int,
    description: str = "",
) -> Unit:
    """Create a unit. Audits UNIT_CREATED and invalidates the availability count after commit."""

    with DjangoUnitOfWork() as uow:
        if not User.objects.filter(pk=owner_id).exists():
            raise NotFoundError(f"User not found with id: {owner_id}")

        unit = Unit.objects.create(
            number_of_rooms=number_of_rooms,
            accommodation_type=accommodation_type,
            floor=floor,
            base_cost=base_cost,
            description=description or "",
            owner_id=owner_id,
        )
        uow.add_event(UnitCreated(unit_id=unit.pk, owner_id=owner_id))

    logger.info(f"Unit created: id={unit.pk}, owner={owner_id}, base_cost={base_cost}")
    return unit


def get_unit(unit_id: int) -> Unit:
    try:
        return Unit.objects.get(pk=unit_id)
    except Unit.DoesNotExist as exc:
        raise NotFoundError(f"Unit not found with id: {unit_id}") from exc
