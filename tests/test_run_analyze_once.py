from __future__ import annotations

import json

import pytest
import requests

from comment_analyzer import run_analyze_once
from comment_analyzer.client import AttributeAnalysisClient


class _CannedSession(requests.Session):
    def __init__(self, status: int, body: str):
        super().__init__()
        self.status = status
        self.body = body
        self.sent: list[dict] = []

    def post(self, url, data=None, json=None, **kwargs):  # type: ignore[override]
        self.sent.append({"url": url, "data": data, **kwargs})
        resp = requests.Response()
        resp.status_code = self.status
        resp.url = url
        resp._content = self.body.encode("utf-8")
        return resp


@pytest.fixture
def session(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PERSPECTIVE_API_KEY", "abc")
    monkeypatch.setenv("PERSPECTIVE_REQUESTED_ATTRIBUTES", "TOXICITY,SPAM")

    fake = _CannedSession(
        200,
        json.dumps(
            {
                "attributeScores": {
                    "TOXICITY": {"summaryScore": {"value": 0.25, "type": "PROBABILITY"}},
                    "SPAM": {"summaryScore": {"value": 0.5, "type": "PROBABILITY"}},
                }
            }
        ),
    )
    monkeypatch.setattr(
        AttributeAnalysisClient,
        "from_settings",
        classmethod(lambda cls, s, session=None: cls.from_config(s.to_client_config(), session=fake)),
    )
    return fake


def test_main_prints_scores(session, capsys):
    assert run_analyze_once.main(["hello", "world"]) == 0

    out = json.loads(capsys.readouterr().out)
    assert out == {"SPAM": 0.5, "TOXICITY": 0.25}
    sent = json.loads(session.sent[0]["data"].decode("utf-8"))
    assert sent["comment"]["text"] == "hello world"


def test_main_reports_analysis_error(session, capsys):
    session.status = 403
    assert run_analyze_once.main(["hello"]) == 1
    assert capsys.readouterr().out == ""


def test_main_requires_api_key(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("PERSPECTIVE_API_KEY", raising=False)
    assert run_analyze_once.main(["hello"]) == 2
