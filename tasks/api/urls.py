from core.routes import resource_routes
from tasks.api.views import TaskViewSet

urlpatterns = resource_routes("tasks", TaskViewSet, basename="task")
