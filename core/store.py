"""Accès aux tables des ressources.

Un `RecordStore` enveloppe un modèle et n'émet qu'une seule requête
d'écriture par opération (INSERT, UPDATE ... WHERE id, DELETE ... WHERE id),
en autocommit. Les horodatages viennent d'une horloge injectable pour que
les tests puissent contrôler l'ordre de création.
"""
import logging

from django.core.exceptions import ValidationError
from django.utils import timezone

logger = logging.getLogger(__name__)


class RecordStore:
    def __init__(self, model, clock=None):
        self.model = model
        self.clock = clock or timezone.now

    def __repr__(self):
        return f"RecordStore({self.model.__name__})"

    def _lookup(self, pk):
        """Queryset pour `pk` ; un identifiant illisible lève DoesNotExist."""
        try:
            return self.model.objects.filter(pk=pk)
        except (TypeError, ValueError, ValidationError):
            raise self.model.DoesNotExist(f"Invalid identifier: {pk!r}")

    def list(self):
        return list(self.model.objects.order_by("-created_at", "-id"))

    def get(self, pk):
        record = self._lookup(pk).first()
        if record is None:
            raise self.model.DoesNotExist(f"No {self.model.__name__} with id {pk!r}")
        return record

    def create(self, **fields):
        now = self.clock()
        record = self.model.objects.create(created_at=now, updated_at=now, **fields)
        logger.debug("Created %s %s", self.model.__name__, record.pk)
        return record

    def replace(self, pk, **fields):
        """Réécrit tous les champs modifiables d'une ligne (la dernière écriture gagne)."""
        queryset = self._lookup(pk)
        if not queryset.update(updated_at=self.clock(), **fields):
            raise self.model.DoesNotExist(f"No {self.model.__name__} with id {pk!r}")
        logger.debug("Updated %s %s", self.model.__name__, pk)
        return self.get(pk)

    def delete(self, pk):
        """Supprime une ligne et retourne son identifiant."""
        record = self.get(pk)
        deleted, _ = self._lookup(record.pk).delete()
        if not deleted:
            raise self.model.DoesNotExist(f"No {self.model.__name__} with id {pk!r}")
        logger.debug("Deleted %s %s", self.model.__name__, record.pk)
        return record.pk
