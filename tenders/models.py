from django.db import models
from django.utils import timezone


class Tender(models.Model):
    """Appel d'offres avec sa date de clôture et ses visites de site.

    `site_visits` garde l'encodage plat : entrées séparées par `;`, chacune
    éventuellement précédée du marqueur de visite faite (voir
    `tenders.site_visits`).
    """

    tender_number = models.CharField(max_length=100)
    description = models.TextField()
    closing_date = models.DateField()
    site_visits = models.TextField(null=True, blank=True)
    created_at = models.DateTimeField(default=timezone.now, editable=False)
    updated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "tenders"
        ordering = ["-created_at", "-id"]

    def __str__(self) -> str:
        return self.tender_number
