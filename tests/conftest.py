import pytest


@pytest.fixture
def fake_get(monkeypatch):
    """Route ``requests.get`` to a canned response and record the calls."""
    calls = []

    def install(response):
        def _get(url, **kwargs):
            calls.append({"url": url, **kwargs})
            if isinstance(response, Exception):
                raise response
            return response

        monkeypatch.setattr("requests.get", _get)
        return calls

    return install
