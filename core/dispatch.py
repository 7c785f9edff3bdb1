"""Répartiteur commun des endpoints de ressources.

`ResourceViewSet` traduit une requête HTTP en une seule opération du store
et met en forme la réponse JSON. Les sous-classes déclarent seulement le
sérialiseur (schéma de requête), le store et un libellé utilisé dans les
messages.

    - list     : GET    /<resource>       -> 200, les plus récents d'abord
    - retrieve : GET    /<resource>/<id>  -> 200 | 404
    - create   : POST   /<resource>       -> 201 | 400
    - update   : PUT    /<resource>/<id>  -> 200 | 400 | 404
    - destroy  : DELETE /<resource>/<id>  -> 200 | 400 | 404
    - OPTIONS sur les deux chemins        -> 200, corps vide
"""
import logging

from rest_framework import status, viewsets
from rest_framework.response import Response

from core.exceptions import MissingRecordId, RecordNotFound

logger = logging.getLogger(__name__)


class ResourceViewSet(viewsets.ViewSet):
    serializer_class = None
    store = None
    label = "Record"

    def options(self, request, *args, **kwargs):
        # Preflight: pas de corps, pas d'accès au stockage
        return Response(status=status.HTTP_200_OK)

    def get_serializer(self, *args, **kwargs):
        return self.serializer_class(*args, **kwargs)

    def not_found(self):
        return RecordNotFound(f"{self.label} not found")

    def list(self, request):
        records = self.store.list()
        return Response(self.get_serializer(records, many=True).data)

    def retrieve(self, request, pk=None):
        try:
            record = self.store.get(pk)
        except self.store.model.DoesNotExist:
            raise self.not_found()
        return Response(self.get_serializer(record).data)

    def create(self, request):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        record = self.store.create(**serializer.validated_data)
        logger.info("%s %s created", self.label, record.pk)
        return Response(self.get_serializer(record).data, status=status.HTTP_201_CREATED)

    def update(self, request, pk=None):
        if not pk:
            raise MissingRecordId("ID is required for update")
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            record = self.store.replace(pk, **serializer.validated_data)
        except self.store.model.DoesNotExist:
            raise self.not_found()
        logger.info("%s %s updated", self.label, record.pk)
        return Response(self.get_serializer(record).data)

    def destroy(self, request, pk=None):
        if not pk:
            raise MissingRecordId("ID is required for delete")
        try:
            deleted_id = self.store.delete(pk)
        except self.store.model.DoesNotExist:
            raise self.not_found()
        logger.info("%s %s deleted", self.label, deleted_id)
        return Response({"message": f"{self.label} deleted successfully", "id": deleted_id})
