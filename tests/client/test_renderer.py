"""
Test suite for conversation renderers.

System role: Verification of the rendering boundary
"""

import logging

from learning_check.client.renderer import BrowserRenderer, NullRenderer


def test_null_renderer_tracks_current_url():
    renderer = NullRenderer()

    renderer.open("https://x")
    assert renderer.current_url == "https://x"

    renderer.close()
    assert renderer.current_url is None
    assert renderer.opened == ["https://x"]
    assert renderer.closed == 1


def test_browser_renderer_opens_new_window(monkeypatch):
    calls = []
    monkeypatch.setattr(
        "learning_check.client.renderer.webbrowser.open",
        lambda url, new=0: calls.append((url, new)) or True,
    )

    BrowserRenderer().open("https://x")
    BrowserRenderer(new_window=False).open("https://y")

    assert calls == [("https://x", 1), ("https://y", 2)]


def test_browser_renderer_warns_without_browser(monkeypatch, caplog):
    monkeypatch.setattr(
        "learning_check.client.renderer.webbrowser.open", lambda url, new=0: False
    )

    with caplog.at_level(logging.WARNING, logger="learning_check.client.renderer"):
        BrowserRenderer().open("https://x")

    assert "No browser available" in caplog.text
