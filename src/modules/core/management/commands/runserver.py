from django.conf import settings
from django.core.management.commands.runserver import Command as RunserverCommand


class Command(RunserverCommand):
    """``runserver`` listening on ``settings.PORT`` (3000 unless configured)."""

    default_port = str(settings.PORT)
