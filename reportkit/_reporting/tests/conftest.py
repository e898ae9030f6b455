import webbrowser
from urllib.error import HTTPError
from urllib.request import urlopen

import pytest


class FakeBrowser:
    """Replaces ``webbrowser.open`` with requests made from the test process.

    The browser fetches each of ``paths`` in turn, substituted for
    ``index.html`` in the URL it is asked to open. Error responses are
    recorded in ``errors``, except for the last path where they are raised.
    """

    def __init__(self, paths):
        self.paths = paths
        self.urls = []
        self.errors = []
        self.content = None

    def __call__(self, url):
        self.urls.append(url)
        for i, path in enumerate(self.paths):
            try:
                with urlopen(url.replace("index.html", path)) as f:
                    self.content = f.read()
            except HTTPError as e:
                if i == len(self.paths) - 1:
                    raise
                self.errors.append(e.code)


def _install_browser(monkeypatch, paths):
    browser = FakeBrowser(paths)
    monkeypatch.setattr(webbrowser, "open", browser)
    return browser


@pytest.fixture
def browser_mock(monkeypatch):
    return _install_browser(monkeypatch, ["index.html"])


@pytest.fixture
def browser_mock_no_request(monkeypatch):
    return _install_browser(monkeypatch, [])


@pytest.fixture
def browser_mock_bad_request(monkeypatch):
    return _install_browser(monkeypatch, ["table.html"])


@pytest.fixture
def browser_mock_bad_then_good_request(monkeypatch):
    return _install_browser(monkeypatch, ["favicon.ico", "index.html"])
