# tests/infra/test_renderers.py
import io
import json

import pytest

from propreport.core.report import OutputSink
from propreport.infra.diagnostics import CollectingDiagnostics, DiagnosticEvent
from propreport.infra.renderers import (
    RULE,
    JsonReportRenderer,
    TextReportRenderer,
    create_renderer,
)


def render(renderer, pairs):
    renderer.start()
    for name, value in pairs:
        renderer.add_property(name, value)
    renderer.complete()


def test_text_lines():
    out = io.StringIO()

    render(TextReportRenderer(out), [("a", "x"), ("b", "1")])

    assert out.getvalue() == "a: x\nb: 1\n"


def test_text_header():
    out = io.StringIO()

    render(TextReportRenderer(out, header="Root project 'demo'"), [("a", "x")])

    assert out.getvalue() == f"\n{RULE}\nRoot project 'demo'\n{RULE}\n\na: x\n"


def test_json_object():
    out = io.StringIO()

    render(JsonReportRenderer(out), [("a", "x"), ("properties", "{...}")])

    assert json.loads(out.getvalue()) == {"a": "x", "properties": "{...}"}


def test_renderers_are_output_sinks():
    assert isinstance(TextReportRenderer(), OutputSink)
    assert isinstance(JsonReportRenderer(), OutputSink)


def test_create_renderer():
    assert isinstance(create_renderer("text"), TextReportRenderer)
    assert isinstance(create_renderer("json"), JsonReportRenderer)
    assert create_renderer("text", title="T").header == "T"
    with pytest.raises(ValueError):
        create_renderer("xml")


def test_collecting_diagnostics_forwards(caplog):
    import logging

    logger = logging.getLogger("tests.collecting")
    diagnostics = CollectingDiagnostics(forward_to=logger)
    cause = ValueError("x")

    with caplog.at_level(logging.WARNING, logger="tests.collecting"):
        diagnostics.warning("property '%s' of '%s'", "a", "Weird", exc_info=cause)

    assert diagnostics.events == [
        DiagnosticEvent(template="property '%s' of '%s'", args=("a", "Weird"), cause=cause)
    ]
    assert diagnostics.events[0].message == "property 'a' of 'Weird'"
    assert len(diagnostics) == 1
    assert caplog.records[0].getMessage() == "property 'a' of 'Weird'"
