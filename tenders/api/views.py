from core.dispatch import ResourceViewSet
from core.store import RecordStore
from tenders.models import Tender
from tenders.serializers import TenderSerializer


class TenderViewSet(ResourceViewSet):
    """CRUD sur les appels d'offres (`/tenders`, `/tenders/{id}`)."""

    serializer_class = TenderSerializer
    store = RecordStore(Tender)
    label = "Tender"
