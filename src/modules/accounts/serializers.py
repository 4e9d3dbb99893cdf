"""Account DRF serializers (output only; input goes through DTOs)."""

from __future__ import annotations

from rest_framework import serializers

from modules.accounts.models import User


class UserSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ["id", "name", "email", "role", "created_at"]
        read_only_fields = fields


class CreatorSerializer(serializers.ModelSerializer):
    """Compact user reference embedded in other resources."""

    class Meta:
        model = User
        fields = ["id", "name", "email"]
        read_only_fields = fields
