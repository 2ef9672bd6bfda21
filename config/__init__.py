"""
Process configuration.

The embedding application builds ``Settings`` once at startup via
``config.settings.get_settings()`` and calls
``config.log_setup.configure_logging(settings.debug)`` before serving.
"""
