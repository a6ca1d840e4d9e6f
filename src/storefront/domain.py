"""Storefront bounded context — accounts, catalog, carts and orders.

Configuration is read from ``domain.toml`` next to this file; ``PROTEAN_ENV``
selects the overlay (``production`` switches persistence to PostgreSQL).
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
storefront = Domain(name="storefront")
