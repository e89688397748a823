from django.apps import AppConfig


class SellersConfig(AppConfig):
    name = "modules.sellers"
    label = "sellers"
