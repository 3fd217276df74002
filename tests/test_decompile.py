"""Unit tests for whole-script decompilation."""

import logging

import pytest

from fm_steps.decompile import decompile_xml
from fm_steps.errors import MalformedInput


SNIPPET = """<fmxmlsnippet type="FMObjectList">
<Step id="89" name="# (Kommentar)" enable="True">
    <ParameterValues membercount="1">
        <Parameter type="Comment"><Comment value="Aufräumen"></Comment></Parameter>
    </ParameterValues>
</Step>
<Step id="86" name="Fehleraufzeichnung setzen" enable="True">
    <ParameterValues membercount="1">
        <Parameter type="Boolean"><Boolean id="131072" value="True"></Boolean></Parameter>
    </ParameterValues>
</Step>
<Step id="68" name="Wenn" enable="True"></Step>
<Step id="71" name="Schleife (Anfang)" enable="True"></Step>
<Step id="182" name="Tabelle leeren" enable="False">
    <ParameterValues membercount="2">
        <Parameter type="Boolean"><Boolean type="Mit Dialog" id="128" value="False"></Boolean></Parameter>
        <Parameter type="List"><List name="&lt;Tabelle nicht vorhanden&gt;" value="1"></List></Parameter>
    </ParameterValues>
</Step>
<Step id="73" name="Schleife (Ende)" enable="True"></Step>
<Step id="69" name="Sonst" enable="True"></Step>
<Step id="79" name="Fenster fixieren" enable="True"></Step>
<Step id="70" name="Ende (wenn)" enable="True"></Step>
</fmxmlsnippet>
"""


def test_decompile_snippet():
    """Each step becomes one line, indented by block depth."""
    assert decompile_xml(SNIPPET).split('\n') == [
        "# Aufräumen",
        "Fehleraufzeichnung setzen [ ON ]",
        "Wenn",
        "    Schleife (Anfang)",
        "        // Tabelle leeren [ Mit Dialog: OFF ; <Tabelle nicht vorhanden> ]",
        "    Schleife (Ende)",
        "Sonst",
        "    Fenster fixieren",
        "Ende (wenn)",
    ]


def test_empty_comment_produces_no_line():
    xml = """<fmxmlsnippet type="FMObjectList">
    <Step id="89" name="# (Kommentar)" enable="True"></Step>
    <Step id="79" name="Fenster fixieren" enable="True"></Step>
    </fmxmlsnippet>"""
    assert decompile_xml(xml) == "Fenster fixieren"


def test_malformed_step_is_skipped(caplog):
    xml = """<fmxmlsnippet type="FMObjectList">
    <Step id="79" enable="True"></Step>
    <Step id="79" name="Fenster fixieren" enable="True"></Step>
    </fmxmlsnippet>"""
    with caplog.at_level(logging.WARNING, logger='fm_steps.decompile'):
        assert decompile_xml(xml) == "Fenster fixieren"
    assert "Skipping step id=79" in caplog.text


def test_single_step_document():
    assert decompile_xml('<Step id="79" name="Fenster fixieren" enable="True"/>') == "Fenster fixieren"


def test_unbalanced_end_does_not_indent_negative():
    xml = """<fmxmlsnippet type="FMObjectList">
    <Step id="70" name="Ende (wenn)" enable="True"></Step>
    <Step id="79" name="Fenster fixieren" enable="True"></Step>
    </fmxmlsnippet>"""
    assert decompile_xml(xml) == "Ende (wenn)\nFenster fixieren"


def test_invalid_document_raises():
    with pytest.raises(MalformedInput):
        decompile_xml("<fmxmlsnippet><Step></fmxmlsnippet>")
