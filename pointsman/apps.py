from django.apps import AppConfig


class PointsmanConfig(AppConfig):
    name = "pointsman"
    verbose_name = "Pointsman - Loyalty Customer Directory"
