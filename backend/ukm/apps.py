from django.apps import AppConfig

class UkmConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'ukm'
    verbose_name = 'UKM'
