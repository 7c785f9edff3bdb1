from core.dispatch import ResourceViewSet
from core.store import RecordStore
from tasks.models import Task
from tasks.serializers import TaskSerializer


class TaskViewSet(ResourceViewSet):
    """CRUD sur les tâches.

    - list : GET /tasks -> toutes les tâches, les plus récentes d'abord
    - create : POST /tasks -> création (statut "PENDING" par défaut)
    - update : PUT /tasks/{id} -> remplacement complet des champs modifiables
    - destroy : DELETE /tasks/{id} -> suppression
    """

    serializer_class = TaskSerializer
    store = RecordStore(Task)
    label = "Task"
