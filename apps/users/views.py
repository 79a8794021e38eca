"""User API views."""

from __future__ import annotations

from rest_framework import mixins, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from . import services
from .models import User
from .serializers import CreateUserSerializer, UserSerializer


class UserViewSet(
    mixins.ListModelMixin,
    viewsets.GenericViewSet,
):
    """Users: create, list, get by id and get by username."""

    serializer_class = UserSerializer
    queryset = User.objects.all()
    lookup_value_regex = r"\d+"

    def create(self, request):
        serializer = CreateUserSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = services.create_user(**serializer.validated_data)
        return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)

    def retrieve(self, request, pk=None):
        return Response(UserSerializer(services.get_user(pk)).data)

    @action(detail=False, methods=["get"], url_path=r"username/(?P<username>[^/.]+)")
    def by_username(self, request, username=None):
        return Response(UserSerializer(services.get_user_by_username(username)).data)
