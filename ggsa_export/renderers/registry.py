"""Registry of available timesheet export formats."""

import logging
from typing import Dict, List, Optional, Protocol, Sequence

from ggsa_export.models.query import TimesheetQuery
from ggsa_export.models.timesheet import TimesheetEntry
from ggsa_export.renderers.response import ExportResponse

logger = logging.getLogger(__name__)


class TimesheetExporter(Protocol):
    """Interface every timesheet export renderer implements."""

    @property
    def id(self) -> str:
        ...

    @property
    def name(self) -> str:
        ...

    def render(
        self, entries: Sequence[TimesheetEntry], query: TimesheetQuery
    ) -> ExportResponse:
        ...


class ExportRendererRegistry:
    """Keeps export renderers by format id, in registration order.

    Example:
        >>> registry = ExportRendererRegistry()
        >>> registry.add(renderer)
        >>> registry.get("ggsa").name
        'GGSA'
    """

    def __init__(self, renderers: Optional[Sequence[TimesheetExporter]] = None):
        self._renderers: Dict[str, TimesheetExporter] = {}
        for renderer in renderers or []:
            self.add(renderer)

    def add(self, renderer: TimesheetExporter) -> None:
        """Register a renderer.

        Raises:
            ValueError: If a renderer with the same id is already registered
        """
        if renderer.id in self._renderers:
            raise ValueError(f"Export format '{renderer.id}' is already registered")
        self._renderers[renderer.id] = renderer
        logger.debug(f"Registered export format '{renderer.id}' ({renderer.name})")

    def get(self, renderer_id: str) -> Optional[TimesheetExporter]:
        return self._renderers.get(renderer_id)

    def list(self) -> List[TimesheetExporter]:
        return list(self._renderers.values())

    def __contains__(self, renderer_id: str) -> bool:
        return renderer_id in self._renderers

    def __len__(self) -> int:
        return len(self._renderers)
