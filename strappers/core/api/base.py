"""
Controller base class picked up by ``config.api``.
"""


class BaseAPI:
    """Subclasses decorated with ``@api_controller`` are registered on the API."""
