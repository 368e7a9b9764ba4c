"""Tests for the template renderer facade."""

import logging
import xml.etree.ElementTree as ET

import pytest
from jinja2 import DictLoader, UndefinedError

from xml_template_adapter import NodeTemplateRenderer, render_string
from xml_template_adapter.adapters import NodeAdapter
from xml_template_adapter.shared import AdapterConfig, RenderConfig, WrappingError
from xml_template_adapter.tree import XMLElement, element_from_etree

ORDER_XML = """
<order id="o-17">
  <line sku="a1" qty="3">widget</line>
  <line sku="b2" qty="1">gadget</line>
  <customer>Ada</customer>
</order>
"""


@pytest.fixture
def order() -> XMLElement:
    return element_from_etree(ET.fromstring(ORDER_XML))


class TestNodeTemplateRenderer:
    """Test suite for NodeTemplateRenderer."""

    def test_render_string_wraps_elements(self, order: XMLElement) -> None:
        """Test XMLElement context values are adapted before rendering."""
        renderer = NodeTemplateRenderer()

        output = renderer.render_string(
            "Order {{ order['@id'] }} for {{ order.customer }}:\n"
            "{% for line in order.line %}\n"
            "- {{ line['@qty'] }} x {{ line }} ({{ line['@sku'] }})\n"
            "{% endfor %}",
            order=order,
        )

        assert output == (
            "Order o-17 for Ada:\n"
            "- 3 x widget (a1)\n"
            "- 1 x gadget (b2)\n"
        )

    def test_wrap_context_passes_other_values_through(self, order: XMLElement) -> None:
        """Test only XMLElement values are wrapped."""
        renderer = NodeTemplateRenderer()

        context = renderer.wrap_context({"order": order, "count": 2, "missing": None})

        assert isinstance(context["order"], NodeAdapter)
        assert context["order"].element is order
        assert context["count"] == 2
        assert context["missing"] is None

    def test_render_by_template_name(self, order: XMLElement) -> None:
        """Test rendering templates resolved through a loader."""
        renderer = NodeTemplateRenderer(
            loader=DictLoader({"summary.txt": "{{ order.line|length }} lines"})
        )

        assert renderer.render("summary.txt", order=order) == "2 lines"

    def test_render_logs_start_and_completion(
        self, order: XMLElement, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test render passes are logged with the correlation id."""
        renderer = NodeTemplateRenderer(RenderConfig(correlation_id="render-42"))

        with caplog.at_level(logging.INFO):
            renderer.render_string("{{ order['@id'] }}", order=order)

        messages = [record.getMessage() for record in caplog.records]
        assert "Starting template render" in messages
        assert "Template render completed" in messages
        assert all(
            record.correlation_id == "render-42"
            for record in caplog.records
            if record.name == "xml_template_adapter.rendering.renderer"
        )

    def test_template_errors_are_logged_and_reraised(
        self, order: XMLElement, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test strict undefined failures propagate after being logged."""
        renderer = NodeTemplateRenderer(RenderConfig.strict())

        with caplog.at_level(logging.ERROR):
            with pytest.raises(UndefinedError):
                renderer.render_string("{{ order['@missing'] }}", order=order)

        assert "Template render failed" in caplog.text

    def test_expression_errors_are_logged_and_reraised(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test arbitrary exceptions from template code are logged before propagating."""
        renderer = NodeTemplateRenderer(RenderConfig(correlation_id="render-div"))

        with caplog.at_level(logging.DEBUG):
            with pytest.raises(ZeroDivisionError):
                renderer.render_string("{{ 1 // 0 }}")

        failures = [
            record for record in caplog.records
            if record.levelno == logging.ERROR
        ]
        assert [record.getMessage() for record in failures] == ["Template render failed"]
        assert failures[0].exc_info is not None
        assert failures[0].correlation_id == "render-div"

    def test_logger_level_is_left_to_the_application(self) -> None:
        """Test constructing and using a renderer does not change logger levels."""
        logger = logging.getLogger("xml_template_adapter.rendering.renderer")
        previous = logger.level
        logger.setLevel(logging.WARNING)
        try:
            render_string("x", config=RenderConfig(logging_level="DEBUG"))

            assert logger.level == logging.WARNING
        finally:
            logger.setLevel(previous)

    def test_logging_level_filters_renderer_records(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test records below the configured level are not emitted."""
        renderer = NodeTemplateRenderer(RenderConfig(logging_level="WARNING"))

        with caplog.at_level(logging.DEBUG):
            assert renderer.render_string("x") == "x"

        assert not [
            record for record in caplog.records
            if record.name == "xml_template_adapter.rendering.renderer"
        ]

    def test_wrapping_errors_propagate(self, order: XMLElement) -> None:
        """Test adapter failures are not swallowed by the renderer."""
        def failing_factory(value: str) -> str:
            raise RuntimeError("no scalar support")

        config = RenderConfig(adapter=AdapterConfig(scalar_factory=failing_factory))
        renderer = NodeTemplateRenderer(config)

        with pytest.raises(WrappingError):
            renderer.render_string("{{ order['@id'][0] }}", order=order)

    def test_html_preset_escapes_output(self) -> None:
        """Test the html preset escapes text and attribute values."""
        element = XMLElement(tag="p", attributes={"class": 'a"b'}, text="<script>")

        output = NodeTemplateRenderer(RenderConfig.html()).render_string(
            '<p class="{{ p["@class"] }}">{{ p }}</p>', p=element
        )

        assert output == '<p class="a&#34;b">&lt;script&gt;</p>'


class TestRenderStringFunction:
    """Test the module-level convenience function."""

    def test_item_scenario(self) -> None:
        """Test rendering the single item scenario."""
        item = XMLElement(tag="item", attributes={"qty": "3"}, text="widget")

        output = render_string(
            "{{ item['@qty'] }}x {{ item }} [{{ item.sub|length }}]"
            "{{ item['@missing'] is defined }}",
            item=item,
        )

        assert output == "3x widget [0]False"

    def test_non_element_values(self) -> None:
        """Test plain values render unchanged."""
        assert render_string("{{ a }}-{{ b }}", a=1, b="two") == "1-two"
