"""Client HTTP des endpoints appels d'offres et tâches.

Chaque `ResourceAPI` reprend les quatre opérations du serveur (plus la
lecture d'un enregistrement) et renvoie des enregistrements camelCase
construits par le transformateur de la ressource.
"""
from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Mapping, Optional

import requests

from tenders.site_visits import toggle_site_visit

from .transform import TASK_TRANSFORMER, TENDER_TRANSFORMER, RecordTransformer

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8000/api"
DEFAULT_TIMEOUT = 10


class APIError(RuntimeError):
    """Levée quand l'API répond avec un statut hors 2xx."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


def default_base_url() -> str:
    return os.getenv("TENDERDESK_API_URL", DEFAULT_BASE_URL)


class ResourceAPI:
    def __init__(
        self,
        resource: str,
        transformer: RecordTransformer,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.resource = resource
        self.transformer = transformer
        self.base_url = (base_url or default_base_url()).rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _url(self, record_id: Any = None) -> str:
        if record_id is None:
            return f"{self.base_url}/{self.resource}"
        return f"{self.base_url}/{self.resource}/{record_id}"

    def _request(self, method: str, url: str, body: Optional[Mapping[str, Any]] = None):
        response = self.session.request(
            method,
            url,
            json=body,
            headers={"Content-Type": "application/json"},
            timeout=self.timeout,
        )
        if not response.ok:
            try:
                message = response.json().get("error") or "API request failed"
            except ValueError:
                message = "API request failed"
            logger.warning("%s %s failed (%s): %s", method, url, response.status_code, message)
            raise APIError(message, status_code=response.status_code)
        return response.json()

    def get_all(self) -> List[Dict[str, Any]]:
        rows = self._request("GET", self._url())
        return [self.transformer.to_client(row) for row in rows]

    def get(self, record_id: Any) -> Dict[str, Any]:
        return self.transformer.to_client(self._request("GET", self._url(record_id)))

    def create(self, record: Mapping[str, Any]) -> Dict[str, Any]:
        row = self._request("POST", self._url(), self.transformer.to_wire(record))
        return self.transformer.to_client(row)

    def update(self, record_id: Any, record: Mapping[str, Any]) -> Dict[str, Any]:
        row = self._request("PUT", self._url(record_id), self.transformer.to_wire(record))
        return self.transformer.to_client(row)

    def delete(self, record_id: Any) -> Dict[str, Any]:
        return self._request("DELETE", self._url(record_id))


class TenderAPI(ResourceAPI):
    def __init__(self, **kwargs):
        super().__init__("tenders", TENDER_TRANSFORMER, **kwargs)

    def toggle_site_visit(self, tender: Mapping[str, Any], index: int) -> Dict[str, Any]:
        """Marque une visite comme faite (ou non) puis enregistre tout l'appel d'offres."""
        updated = dict(tender, siteVisits=toggle_site_visit(tender.get("siteVisits"), index))
        return self.update(tender["id"], updated)


class TaskAPI(ResourceAPI):
    def __init__(self, **kwargs):
        super().__init__("tasks", TASK_TRANSFORMER, **kwargs)

    def set_status(self, task: Mapping[str, Any], status: str) -> Dict[str, Any]:
        return self.update(task["id"], dict(task, status=status))
