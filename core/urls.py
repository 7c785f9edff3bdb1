from django.urls import include, path

urlpatterns = [
    path("api/", include("tenders.api.urls")),
    path("api/", include("tasks.api.urls")),
]

handler404 = "core.views.not_found"
handler500 = "core.views.server_error"
