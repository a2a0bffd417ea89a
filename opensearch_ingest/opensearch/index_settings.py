import logging
from typing import Any

from .abstract_classes import ABCClient
from .transport_errors import translate_errors

logger = logging.getLogger(__name__)

REFRESH_DISABLED = "-1"
DEFAULT_REFRESH_INTERVAL = "1s"


class IndexSettingsController:
    """Toggle the near-real-time refresh of an index.

    Refresh is switched off while a bulk load runs so segments are not
    reopened after every page, and switched back on afterward so searches see
    the loaded documents. Both calls are idempotent settings updates and can
    be issued at any time.
    """

    def __init__(self, client: ABCClient, refresh_interval: str = DEFAULT_REFRESH_INTERVAL):
        """
        Args:
            client (ABCClient): Provider of the OpenSearch client.
            refresh_interval (str): Interval restored by ``enable_refresh``.
        """
        self._client = client
        self.refresh_interval = refresh_interval

    def disable_refresh(self, index: str) -> Any:
        """Set ``refresh_interval`` to ``-1`` and return the server acknowledgment."""
        return self._put_refresh_interval(index, REFRESH_DISABLED)

    def enable_refresh(self, index: str) -> Any:
        """Restore ``refresh_interval`` and return the server acknowledgment."""
        return self._put_refresh_interval(index, self.refresh_interval)

    def _put_refresh_interval(self, index: str, value: str) -> Any:
        logger.info("Setting refresh_interval=%s on index %s", value, index)
        body = {"index": {"refresh_interval": value}}
        os_client = self._client.get_client()
        with translate_errors("put_settings"):
            return os_client.indices.put_settings(index=index, body=body)
