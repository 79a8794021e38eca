"""User registration and lookup."""

from __future__ import annotations

import logging

from django.db import IntegrityError, transaction  # type: ignore

from shared.domain.exceptions import InvalidArgumentError, NotFoundError

from .models import User

logger = logging.getLogger(__name__)


def create_user(username: str, email: str) -> User:
    """Create a user; duplicate username or email is an invalid argument."""

    if User.objects.filter(username=username).exists():
        raise InvalidArgumentError(f"Username already exists: {username}")
    if User.objects.filter(email__iexact=email).exists():
        raise InvalidArgumentError(f"Email already exists: {email}")

    try:
        with transaction.atomic():
            user = User.objects.create(username=username, email=email)
    except IntegrityError as exc:
        # Lost a race against a concurrent registration
        raise InvalidArgumentError("Username or email already exists") from exc

    logger.info(f"User created: id={user.pk}, username={username}")
    return user


def get_user(user_id: int) -> User:
    try:
        return User.objects.get(pk=user_id)
    except User.DoesNotExist as exc:
        raise NotFoundError(f"User not found with id: {user_id}") from exc


def get_user_by_username(username: str) -> User:
    try:
        return User.objects.get(username=username)
    except User.DoesNotExist as exc:
        raise NotFoundError(f"User not found with username: {username}") from exc
