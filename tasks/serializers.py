"""
Sérialiseurs pour l'application des tâches.

Le sérialiseur sert de schéma de requête : il valide le corps JSON d'un POST
ou d'un PUT avant tout accès à la base, et produit la représentation JSON
renvoyée par l'API.
"""

from rest_framework import serializers

from .models import Task


class TaskSerializer(serializers.ModelSerializer):
    """Expose une tâche ; `status` est optionnel et vaut "PENDING" par défaut."""

    status = serializers.ChoiceField(
        choices=Task.STATUS_CHOICES,
        required=False,
        default=Task.STATUS_PENDING,
    )

    class Meta:
        model = Task
        fields = (
            "id",
            "description",
            "assigned_to",
            "due_date",
            "status",
            "created_at",
            "updated_at",
        )
        read_only_fields = ("id", "created_at", "updated_at")
        # les chaînes sont enregistrées sans retirer les espaces
        extra_kwargs = {
            "description": {"trim_whitespace": False},
            "assigned_to": {"trim_whitespace": False},
        }
