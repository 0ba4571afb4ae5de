"""Tests for the export renderer registry and its factory."""

import datetime as dt
from unittest.mock import MagicMock

import pytest

from ggsa_export.config import ExportSettings
from ggsa_export.events import EventDispatcher, TimesheetMetaDisplayEvent
from ggsa_export.models import MetaField, TimesheetQuery
from ggsa_export.renderers import ExportRendererRegistry, GgsaHtmlRenderer
from ggsa_export.renderers.factory import create_registry


def fake_renderer(renderer_id: str, name: str = "Fake"):
    renderer = MagicMock()
    renderer.id = renderer_id
    renderer.name = name
    return renderer


class TestExportRendererRegistry:
    """Test registration and lookup."""

    def test_empty(self):
        registry = ExportRendererRegistry()

        assert len(registry) == 0
        assert registry.list() == []
        assert registry.get("ggsa") is None

    def test_add_and_get(self):
        csv = fake_renderer("csv", "CSV")
        registry = ExportRendererRegistry()

        registry.add(csv)

        assert "csv" in registry
        assert registry.get("csv") is csv

    def test_registration_order(self):
        first, second = fake_renderer("b"), fake_renderer("a")

        registry = ExportRendererRegistry([first, second])

        assert registry.list() == [first, second]

    def test_duplicate_id(self):
        registry = ExportRendererRegistry([fake_renderer("ggsa")])

        with pytest.raises(ValueError, match="already registered"):
            registry.add(fake_renderer("ggsa"))
        assert len(registry) == 1


class TestCreateRegistry:
    """Test the bundled renderer wiring."""

    @pytest.fixture
    def settings(self):
        return ExportSettings(
            _env_file=None, ENVIRONMENT="testing", GGSA_DEFAULT_CURRENCY="chf"
        )

    def test_ggsa_renderer_registered(self, settings):
        registry = create_registry(settings=settings)

        renderer = registry.get("ggsa")
        assert isinstance(renderer, GgsaHtmlRenderer)
        assert renderer.config.default_currency == "CHF"
        assert len(registry) == 1

    def test_recorded_timesheets_feed_budgets(self, settings, make_entry):
        recorded = [make_entry(begin=dt.datetime(2024, 3, 1, 9), duration=3600)]
        registry = create_registry(recorded, settings=settings)

        context = registry.get("ggsa").build_context(
            [make_entry()], TimesheetQuery(end=dt.datetime(2024, 3, 31))
        )

        assert context["budgets"][20].time_left == 32400

    def test_dispatcher_subscribers_are_used(self, settings, make_entry):
        dispatcher = EventDispatcher()
        dispatcher.subscribe(
            TimesheetMetaDisplayEvent,
            lambda event: event.add_field(MetaField(name="ticket", label="Ticket")),
        )
        registry = create_registry(settings=settings, dispatcher=dispatcher)

        content = registry.get("ggsa").render([make_entry()], TimesheetQuery()).content

        assert "Ticket" in content
