import logging

from rest_framework import status
from rest_framework.exceptions import (
    APIException,
    MethodNotAllowed,
    NotFound,
    ParseError,
    UnsupportedMediaType,
    ValidationError,
)
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


class RecordNotFound(APIException):
    """Levée quand aucune ligne ne correspond à l'identifiant demandé."""

    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Record not found"
    default_code = "not_found"


class MissingRecordId(APIException):
    """Levée quand une modification ou suppression vise la collection."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "ID is required"
    default_code = "id_required"


def _error_message(exc):
    if isinstance(exc, MethodNotAllowed):
        return "Method not allowed"
    if isinstance(exc, (ParseError, UnsupportedMediaType)):
        return "Invalid JSON body"
    if isinstance(exc, ValidationError):
        return "Invalid request body"
    if isinstance(exc, NotFound) and not isinstance(exc, RecordNotFound):
        return "Not found"
    return str(exc.detail)


def api_exception_handler(exc, context):
    """Rend chaque erreur sous la forme `{"error": <message>}`.

    Les erreurs d'API connues gardent leur code HTTP ; un corps illisible
    donne toujours 400. Toute autre exception est journalisée puis ramenée
    à un 500 générique : aucune erreur ne sort de la vue sans réponse.
    """
    response = exception_handler(exc, context)
    if response is None:
        view = context.get("view")
        logger.exception("Unhandled error in %s", view.__class__.__name__ if view else "view")
        return Response(
            {"error": INTERNAL_ERROR_MESSAGE},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    payload = {"error": _error_message(exc)}
    if isinstance(exc, ValidationError):
        payload["details"] = response.data
    if isinstance(exc, UnsupportedMediaType):
        response.status_code = status.HTTP_400_BAD_REQUEST
    response.data = payload
    return response
