from django.apps import AppConfig


class SharedConfig(AppConfig):
    name = 'shared'
    default_auto_field = 'django.db.models.BigAutoField'

    def ready(self):
        # Models of every app are loaded by now; wire the core once per process
        from config.bootstrap import bootstrap

        self.core = bootstrap()
