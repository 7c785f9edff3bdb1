import logging

from django.conf import settings
from django.http import JsonResponse
from django.utils.timezone import now

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware:
    """Middleware minimal de mesure de durée.

    - Mesure le temps d'une requête, ajoute les headers `X-Request-Duration-ms` et
      `X-Process-Time` à la réponse.
    - Écrit une ligne de log au niveau INFO au format :
        [metrics] timestamp:<iso> method:<METHOD> path:<PATH> status:<STATUS> duration_ms:<MS>
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        start = now()
        method = request.method
        path = request.get_full_path()

        response = self.get_response(request)

        duration_seconds = (now() - start).total_seconds()
        duration_ms = int(duration_seconds * 1000)
        status = getattr(response, "status_code", "unknown")

        response["X-Request-Duration-ms"] = str(duration_ms)
        response["X-Process-Time"] = f"{duration_seconds:.6f}"

        logger.info(
            f"[metrics] timestamp:{now().isoformat()} method:{method} path:{path} status:{status} duration_ms:{duration_ms}"
        )
        return response


class DatabaseConfigurationMiddleware:
    """Refuse chaque requête tant que la base n'est pas configurée.

    - `DATABASE_URL` absente : 500 "Database configuration error".
    - `DATABASE_URL` illisible (`settings.DATABASE_CONFIG_ERROR`) : 500
      "Database connection error".

    La réponse ne porte que l'origine CORS et le Content-Type, sans passer
    par les vues ni par `CorsHeadersMiddleware`.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def _error(self, message):
        response = JsonResponse({"error": message}, status=500)
        response["Access-Control-Allow-Origin"] = "*"
        return response

    def __call__(self, request):
        if not getattr(settings, "DATABASE_URL", None):
            logger.error("DATABASE_URL is not set")
            return self._error("Database configuration error")
        config_error = getattr(settings, "DATABASE_CONFIG_ERROR", None)
        if config_error:
            logger.error(config_error)
            return self._error("Database connection error")
        return self.get_response(request)


class CorsHeadersMiddleware:
    """Ajoute les en-têtes CORS permissifs (`settings.CORS_HEADERS`) à chaque réponse."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        response = self.get_response(request)
        for header, value in settings.CORS_HEADERS.items():
            response[header] = value
        # DRF retire le Content-Type des réponses vides (preflight)
        response.setdefault("Content-Type", "application/json")
        return response
