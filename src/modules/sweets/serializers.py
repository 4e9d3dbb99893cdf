"""Sweet DRF serializers (output only; input goes through DTOs)."""

from __future__ import annotations

from rest_framework import serializers

from modules.accounts.serializers import CreatorSerializer
from modules.sweets.models import Sweet


class SweetSerializer(serializers.ModelSerializer):
    created_by = CreatorSerializer(read_only=True)

    class Meta:
        model = Sweet
        fields = [
            "id",
            "name",
            "category",
            "price",
            "quantity",
            "description",
            "image",
            "created_by",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
