from rest_framework import serializers

from .models import Tender


class TenderSerializer(serializers.ModelSerializer):
    """Schéma d'un appel d'offres ; les chaînes sont conservées telles quelles."""

    site_visits = serializers.CharField(
        required=False,
        allow_null=True,
        allow_blank=True,
        default=None,
        trim_whitespace=False,
    )

    class Meta:
        model = Tender
        fields = (
            "id",
            "tender_number",
            "description",
            "closing_date",
            "site_visits",
            "created_at",
            "updated_at",
        )
        read_only_fields = ("id", "created_at", "updated_at")
        extra_kwargs = {
            "tender_number": {"trim_whitespace": False},
            "description": {"trim_whitespace": False},
        }
