"""
Default Values
All hardcoded values should be defined here and accessed via Config.get()
This file contains sensible defaults that can be overridden by the application configuration
"""

# ============================================================================
# MODULE DEFAULTS
# ============================================================================

# Configuration section owned by this package
MODULE_NAME = 'larajinja'

# Suffix appended by the stack loader and required by the map loader
DEFAULT_TEMPLATE_SUFFIX = 'j2'

# Priority of the Jinja rendering strategy inside the view
DEFAULT_STRATEGY_PRIORITY = 100

# ============================================================================
# CONTAINER KEYS
# ============================================================================

SERVICE_CONFIG = 'config'
SERVICE_VIEW = 'view'
SERVICE_VIEW_HELPER_MANAGER = 'view_helper_manager'
SERVICE_MAP_LOADER = 'larajinja.loader.map'
SERVICE_STACK_LOADER = 'larajinja.loader.stack'
SERVICE_LOADER_CHAIN = 'larajinja.loader_chain'
SERVICE_ENVIRONMENT = 'larajinja.environment'
SERVICE_RESOLVER = 'larajinja.resolver'
SERVICE_RENDERER = 'larajinja.renderer'
SERVICE_STRATEGY = 'larajinja.strategy'
SERVICE_HELPER_MANAGER = 'larajinja.helper_manager'

# ============================================================================
# LOGGING DEFAULTS
# ============================================================================

DEFAULT_LOG_MAX_BYTES = 10 * 1024 * 1024  # 10MB
DEFAULT_LOG_BACKUP_COUNT = 5
DEFAULT_LOG_FORMAT = 'text'
