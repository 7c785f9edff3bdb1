"""
Modèles pour les tâches.

Ce module définit le modèle Task utilisé par l'API. Une Task représente
un travail confié à une personne, avec une date d'échéance et un statut.

Les valeurs de statut proposées sont : "PENDING", "SENT", "COMPLETED".
La colonne elle-même accepte n'importe quelle chaîne ; le contrôle est fait
par le sérialiseur de l'API.
"""

from django.db import models
from django.utils import timezone


class Task(models.Model):
    """Modèle Task.

    Champs :
        - description (str) : Travail à réaliser.
        - assigned_to (str) : Personne en charge (texte libre).
        - due_date (date) : Date d'échéance.
        - status (str) : "PENDING" par défaut.
        - created_at / updated_at (datetime) : renseignés par le `RecordStore`.
    """

    STATUS_PENDING = "PENDING"
    STATUS_SENT = "SENT"
    STATUS_COMPLETED = "COMPLETED"
    STATUS_CHOICES = [
        (STATUS_PENDING, "Pending"),
        (STATUS_SENT, "Sent"),
        (STATUS_COMPLETED, "Completed"),
    ]

    description = models.TextField()
    assigned_to = models.CharField(max_length=255)
    due_date = models.DateField()
    status = models.CharField(max_length=20, default=STATUS_PENDING)
    created_at = models.DateTimeField(default=timezone.now, editable=False)
    updated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "tasks"
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return f"{self.description} - {self.assigned_to} [{self.status}]"
