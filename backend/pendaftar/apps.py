from django.apps import AppConfig

class PendaftarConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'pendaftar'
    verbose_name = 'Pendaftar'
