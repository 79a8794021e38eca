"""Serializers for the users app."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import User


class UserSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ["id", "username", "email", "created_at"]
        read_only_fields = ["id", "created_at"]


class CreateUserSerializer(serializers.Serializer):
    """Uniqueness is checked by the service so the error shape matches other domain errors."""

    username = serializers.CharField(min_length=3, max_length=50)
    email = serializers.EmailField(max_length=100)
