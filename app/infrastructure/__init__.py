"""Infrastructure modules for the site translation engine.

Centralized infrastructure components:
- configuration: Settings management (settings, I18nSettings)
- logging: Structured logging (get_module_logger, configure_logging)
- operations: Operation results and status codes
- i18n: Internationalization engine
"""
