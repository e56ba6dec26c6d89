"""
Warehouse slot models.
"""
from django.db import models
from apps.core.models import BaseModel


class Position(BaseModel):
    """
    Storage position (slot) that holds at most one pallet.

    is_occupied is true iff exactly one pallet references this position; the
    owning pallet is reachable through the reverse accessor `pallet`.
    """
    name = models.CharField(max_length=50, unique=True, verbose_name='儲位名稱')
    level = models.IntegerField(default=0, verbose_name='層')
    is_occupied = models.BooleanField(default=False, verbose_name='已佔用')

    class Meta:
        db_table = 'positions'
        verbose_name = '儲位'
        verbose_name_plural = '儲位'
        ordering = ['name']
        indexes = [
            models.Index(fields=['is_occupied'], name='position_occupied_idx'),
        ]

    def __str__(self):
        return self.name
