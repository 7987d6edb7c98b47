"""Restaurant menu administration core: weekly highlights and discounts."""

from menu_admin.config.settings import settings
from menu_admin.core.logger import setup_logger

setup_logger(settings)
