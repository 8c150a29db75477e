"""Tests for the manual command-line client."""

from __future__ import annotations

from typing import Any

import pytest

import translate_client


class FakeResponse:
    def __init__(self, payload: Any = None, text: str = "") -> None:
        self._payload = payload
        self.text = text

    def raise_for_status(self) -> None:
        return None

    def json(self) -> Any:
        return self._payload


def test_translate_posts_text_and_target_lang(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, Any] = {}

    def fake_post(url: str, json: dict[str, Any], timeout: int) -> FakeResponse:
        captured["url"] = url
        captured["json"] = json
        return FakeResponse({"translated": "Bonjour"})

    monkeypatch.setattr(translate_client, "TRANSLATOR_URL", "http://translator.test")
    monkeypatch.setattr(translate_client.requests, "post", fake_post)

    assert translate_client.translate("hello", "fr") == {"translated": "Bonjour"}
    assert captured == {"url": "http://translator.test/translate", "json": {"text": "hello", "targetLang": "fr"}}


def test_main_prints_translation_and_fallback_note(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setattr(translate_client.requests, "get", lambda url, timeout: FakeResponse(text="alive"))
    monkeypatch.setattr(
        translate_client.requests,
        "post",
        lambda url, json, timeout: FakeResponse({"translated": "[FR] hello", "error": "fallback"}),
    )

    translate_client.main(["hello", "fr"])

    output = capsys.readouterr().out
    assert "Server: alive" in output
    assert "Translation: [FR] hello" in output
    assert "Fallback used: fallback" in output
