from django.conf import settings
from django.db import models


class PanelSession(models.Model):
    """
    An operator's working copy of the admin panel.
    Keyed by user so bearer-token clients keep their state between requests.
    """
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='panel_session'
    )
    state = models.JSONField(default=dict, blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = 'Panel session'
        verbose_name_plural = 'Panel sessions'

    def __str__(self):
        return f"Panel session for {self.user}"
