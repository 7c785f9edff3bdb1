"""Traduction des noms de champs entre les lignes de l'API et les enregistrements client.

L'API utilise les noms de colonnes snake_case (`tender_number`), le code client
des enregistrements camelCase (`tenderNumber`). Un `RecordTransformer` par
ressource porte la table de correspondance.
"""
from __future__ import annotations

from typing import Any, Dict, Mapping, Tuple

SERVER_FIELDS = ("id", "created_at", "updated_at")


class RecordTransformer:
    def __init__(self, fields: Mapping[str, str], server_fields: Tuple[str, ...] = SERVER_FIELDS):
        self.fields = dict(fields)
        self.server_fields = tuple(server_fields)
        self.writable = {
            wire: client for wire, client in self.fields.items() if wire not in self.server_fields
        }

    def to_client(self, row: Mapping[str, Any]) -> Dict[str, Any]:
        """Ligne de l'API vers enregistrement client ; une colonne absente devient None."""
        return {client: row.get(wire) for wire, client in self.fields.items()}

    def to_wire(self, record: Mapping[str, Any]) -> Dict[str, Any]:
        """Enregistrement client vers corps d'écriture, sans les champs gérés par le serveur.

        Les champs absents de `record` sont omis : le serveur applique alors
        ses valeurs par défaut (par exemple le statut d'une tâche).
        """
        return {wire: record[client] for wire, client in self.writable.items() if client in record}


TENDER_TRANSFORMER = RecordTransformer(
    {
        "id": "id",
        "tender_number": "tenderNumber",
        "description": "description",
        "closing_date": "closingDate",
        "site_visits": "siteVisits",
        "created_at": "createdAt",
        "updated_at": "updatedAt",
    }
)

TASK_TRANSFORMER = RecordTransformer(
    {
        "id": "id",
        "description": "description",
        "assigned_to": "assignedTo",
        "due_date": "dueDate",
        "status": "status",
        "created_at": "createdAt",
        "updated_at": "updatedAt",
    }
)


def transform_tender(row: Mapping[str, Any]) -> Dict[str, Any]:
    return TENDER_TRANSFORMER.to_client(row)


def transform_task(row: Mapping[str, Any]) -> Dict[str, Any]:
    return TASK_TRANSFORMER.to_client(row)
