"""Tests for loading event definitions."""

import json

import pytest

from event_notifier.loader import load_event, load_recipients

from conftest import FIXTURES


class TestLoadEvent:
    def test_json(self):
        event = load_event(FIXTURES / "event-basic.json")
        assert event["eventRequestType"] == "POST"
        assert len(event["eventData"]) == 2

    def test_yaml(self):
        event = load_event(FIXTURES / "event-basic.yaml")
        assert event["eventRequestType"] == "put"
        assert event["eventRequestData"] == "Hello {{ name }}"
        assert event["eventData"] == [{"name": "Ann"}, {"name": "Bo"}]

    def test_missing_file(self):
        with pytest.raises(FileNotFoundError):
            load_event("/nonexistent/event.json")

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "event.json"
        path.write_text(json.dumps(["a", "b"]))
        with pytest.raises(ValueError):
            load_event(path)


class TestLoadRecipients:
    def test_list(self):
        recipients = load_recipients(FIXTURES / "recipients.json")
        assert recipients[0]["user"]["name"] == "Cy"

    def test_not_a_list(self, tmp_path):
        path = tmp_path / "data.yaml"
        path.write_text("name: Ann\n")
        with pytest.raises(ValueError):
            load_recipients(path)
