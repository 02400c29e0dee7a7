# Core components: config, logging
from .config import quiz_settings
from .logging_config import setup_logging
