from django.db import models


class StoredValue(models.Model):
    """
    Key/value record mirroring the client's local storage.
    Values are raw strings; JSON decoding happens on read (see api/storage.py).
    """
    key = models.CharField(max_length=255, unique=True, help_text="Storage key, e.g. 'dukaan-users'")
    value = models.TextField(blank=True, default='')
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['key']
        verbose_name = 'Stored value'
        verbose_name_plural = 'Stored values'

    def __str__(self):
        return f"{self.key} ({len(self.value)} chars)"
