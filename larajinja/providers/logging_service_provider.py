"""
Logging Service Provider
Configures the package logger from the ``logging`` config section
"""
from larajinja.logging import LoggerConfig, ROOT_LOGGER
from larajinja.service_provider import ServiceProvider


class LoggingServiceProvider(ServiceProvider):
    """
    Logging service provider - sets up the larajinja logger

    Example config:
        'logging': {
            'environment': 'development',
            'format': 'json',
            'file': 'storage/logs/views.log',
        }
    """

    def register(self):
        """Register logging services"""
        settings = self.app.config.get('logging')
        if not settings:
            # Leave logging to the host application
            return False

        logger = LoggerConfig.setup_logger(
            settings.get('name', ROOT_LOGGER),
            level=settings.get('level'),
            format_type=settings.get('format'),
            environment=settings.get('environment', 'production'),
            file_path=settings.get('file'),
            max_bytes=settings.get('max_bytes'),
            backup_count=settings.get('backup_count'),
            propagate=settings.get('propagate', False)
        )
        self.app.singleton('logger', logger)
