"""Integration tests for user endpoints."""

from __future__ import annotations

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.users.models import User


class UserAPITests(APITestCase):

    def setUp(self) -> None:
        self.list_url = reverse("user-list")

    def test_create_user(self) -> None:
        response = self.client.post(
            self.list_url, {"username": "alice", "email": "alice@example.com"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["username"], "alice")
        self.assertTrue(User.objects.filter(username="alice").exists())

    def test_duplicate_username_is_400(self) -> None:
        User.objects.create(username="alice", email="alice@example.com")

        response = self.client.post(
            self.list_url, {"username": "alice", "email": "other@example.com"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("Username already exists", response.data["message"])

    def test_duplicate_email_is_400(self) -> None:
        User.objects.create(username="alice", email="alice@example.com")

        response = self.client.post(
            self.list_url, {"username": "alicia", "email": "ALICE@example.com"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(User.objects.count(), 1)

    def test_invalid_payload_is_400(self) -> None:
        response = self.client.post(self.list_url, {"username": "al", "email": "nope"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("username", response.data)
        self.assertIn("email", response.data)

    def test_get_user(self) -> None:
        user = User.objects.create(username="bob", email="bob@example.com")

        response = self.client.get(reverse("user-detail", args=[user.pk]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["email"], "bob@example.com")

    def test_get_unknown_user_is_404(self) -> None:
        response = self.client.get(reverse("user-detail", args=[9999]))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_get_by_username(self) -> None:
        user = User.objects.create(username="carol", email="carol@example.com")

        response = self.client.get(reverse("user-by-username", kwargs={"username": "carol"}))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["id"], user.pk)
        missing = self.client.get(reverse("user-by-username", kwargs={"username": "nobody"}))
        self.assertEqual(missing.status_code, status.HTTP_404_NOT_FOUND)

    def test_list_users_is_paginated(self) -> None:
        for n in range(3):
            User.objects.create(username=f"user{n}", email=f"user{n}@example.com")

        response = self.client.get(self.list_url, {"size": 2})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["count"], 3)
        self.assertEqual(len(response.data["results"]), 2)
