# tests/agents/test_parsing.py
"""Tests for JSON extraction from agent replies."""

import pytest

from perfume_logistics.agents.parsing import extract_json, strip_code_fence


def test_strip_code_fence():
    assert strip_code_fence('```json\n{"a": 1}\n```') == '{"a": 1}'
    assert strip_code_fence('  {"a": 1}  ') == '{"a": 1}'


def test_extract_plain_json():
    assert extract_json('{"total_critical": 2}') == {"total_critical": 2}


def test_extract_fenced_json():
    assert extract_json('```json\n{"summary": "ok"}\n```') == {"summary": "ok"}


def test_extract_json_embedded_in_prose():
    text = 'Here is the report:\n{"total_info": 1, "order_alerts": []}\nLet me know.'

    assert extract_json(text) == {"total_info": 1, "order_alerts": []}


def test_extract_json_without_object_raises():
    with pytest.raises(ValueError):
        extract_json("No issues found today.")


def test_extract_broken_json_raises():
    with pytest.raises(ValueError):
        extract_json("This is not valid JSON {broken")
