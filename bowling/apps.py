from django.apps import AppConfig


class BowlingConfig(AppConfig):
    name = 'bowling'
    verbose_name = 'Ten-pin bowling'
