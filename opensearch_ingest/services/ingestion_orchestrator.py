import logging
from enum import Enum
from typing import Any, Optional

from opensearch_ingest.dtos.load_progress import IngestionReport, LoadResult
from opensearch_ingest.errors import IngestionError, StateTransitionError
from opensearch_ingest.opensearch.index_settings import IndexSettingsController
from opensearch_ingest.services.bulk_loader import BulkLoader, validate_load_arguments

logger = logging.getLogger(__name__)


class IngestionState(str, Enum):
    IDLE = "idle"
    REFRESH_DISABLING = "refresh_disabling"
    LOADING = "loading"
    REFRESH_ENABLING = "refresh_enabling"
    DONE = "done"
    FAILED = "failed"


class IngestionOrchestrator:
    """Run a bulk load with index refresh disabled around it.

    The run moves through ``IDLE -> REFRESH_DISABLING -> LOADING ->
    REFRESH_ENABLING -> DONE``, ending in ``FAILED`` from any working state.
    Disabling refresh acts as the acquire step and re-enabling it as the
    release step: once loading has started, refresh is re-enabled exactly
    once on every exit path, whether the load succeeded, raised, or was
    interrupted.
    """

    def __init__(
        self,
        settings_controller: IndexSettingsController,
        bulk_loader: BulkLoader,
        toggle_refresh: bool = True,
    ):
        """
        Args:
            settings_controller (IndexSettingsController): Toggles refresh.
            bulk_loader (BulkLoader): Loads the documents; its index is the
                one whose refresh setting is toggled.
            toggle_refresh (bool): Disable refresh for the duration of the
                load. Turning this off skips both settings requests.
        """
        self.settings_controller = settings_controller
        self.bulk_loader = bulk_loader
        self.toggle_refresh = toggle_refresh
        self.state = IngestionState.IDLE

    @property
    def index_name(self) -> str:
        return self.bulk_loader.index_name

    def run(self, total_count: int, page_size: int) -> IngestionReport:
        """Load ``total_count`` documents in pages of ``page_size``.

        Returns:
            IngestionReport: Load result and both settings acknowledgments.

        Raises:
            ConfigurationError: Invalid arguments; nothing was sent.
            IngestionError: Disabling refresh or the load failed. If
                re-enabling refresh failed as well, that error is attached as
                ``cleanup_error``.
            StateTransitionError: The load succeeded but refresh could not be
                re-enabled.
        """
        self.state = IngestionState.IDLE
        try:
            validate_load_arguments(total_count, page_size)
        except IngestionError:
            self._transition(IngestionState.FAILED)
            raise

        disable_ack = self._disable_refresh()

        self._transition(IngestionState.LOADING)
        load_error: Optional[BaseException] = None
        enable_error: Optional[StateTransitionError] = None
        enable_ack: Any = None
        try:
            load_result: LoadResult = self.bulk_loader.load(total_count, page_size)
        except BaseException as exc:
            load_error = exc
            raise
        finally:
            self._transition(IngestionState.REFRESH_ENABLING)
            enable_ack, enable_error = self._enable_refresh()
            if load_error is not None:
                self._transition(IngestionState.FAILED)
                if enable_error is not None and isinstance(load_error, IngestionError):
                    load_error.cleanup_error = enable_error

        if enable_error is not None:
            self._transition(IngestionState.FAILED)
            raise enable_error

        self._transition(IngestionState.DONE)
        return IngestionReport(
            index_name=self.index_name,
            load_result=load_result,
            disable_acknowledgment=disable_ack,
            enable_acknowledgment=enable_ack,
        )

    def _disable_refresh(self) -> Any:
        self._transition(IngestionState.REFRESH_DISABLING)
        if not self.toggle_refresh:
            return None
        try:
            return self.settings_controller.disable_refresh(self.index_name)
        except IngestionError as exc:
            logger.error("Could not disable refresh, load not attempted: %s", exc)
            self._transition(IngestionState.FAILED)
            raise

    def _enable_refresh(self) -> tuple[Any, Optional[StateTransitionError]]:
        """Re-enable refresh, returning the failure instead of raising it."""
        if not self.toggle_refresh:
            return None, None
        try:
            return self.settings_controller.enable_refresh(self.index_name), None
        except IngestionError as exc:
            error = StateTransitionError(self.index_name, exc)
            logger.error("%s", error)
            return None, error

    def _transition(self, state: IngestionState) -> None:
        logger.info("Ingestion %s: %s -> %s", self.index_name, self.state.value, state.value)
        self.state = state
