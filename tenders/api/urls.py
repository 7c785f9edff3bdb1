from core.routes import resource_routes
from tenders.api.views import TenderViewSet

urlpatterns = resource_routes("tenders", TenderViewSet, basename="tender")
