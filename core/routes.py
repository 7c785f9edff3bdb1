from django.urls import re_path

COLLECTION_ACTIONS = {
    "get": "list",
    "post": "create",
    # sans identifiant : réponse 400 "ID is required"
    "put": "update",
    "delete": "destroy",
}

ITEM_ACTIONS = {
    "get": "retrieve",
    "put": "update",
    "delete": "destroy",
}


def resource_routes(resource, viewset, basename, store=None):
    """Table de routes explicite pour une ressource.

    `<resource>` est l'endpoint de collection et `<resource>/<pk>` celui d'un
    élément ; la barre oblique finale est facultative. Un verbe absent des
    tables répond 405. `store` remplace le store par défaut du viewset.
    """
    initkwargs = {"basename": basename}
    if store is not None:
        initkwargs["store"] = store

    collection = viewset.as_view(dict(COLLECTION_ACTIONS), detail=False, **initkwargs)
    item = viewset.as_view(dict(ITEM_ACTIONS), detail=True, **initkwargs)
    return [
        re_path(rf"^{resource}/?$", collection, name=f"{basename}-list"),
        re_path(rf"^{resource}/(?P<pk>[^/]+)/?$", item, name=f"{basename}-detail"),
    ]
