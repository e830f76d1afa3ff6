import requests
import responses
from requests.adapters import BaseAdapter

from mapsapi.transport import (
    USER_AGENT,
    UserAgentAdapter,
    apply_user_agent,
    user_agent,
)


class _RecordingAdapter(BaseAdapter):
    def __init__(self):
        super().__init__()
        self.sent = []
        self.closed = False

    def send(self, request, **kwargs):
        self.sent.append(request)
        response = requests.Response()
        response.status_code = 204
        response.request = request
        return response

    def close(self):
        self.closed = True


def _prepared(headers=None):
    return requests.Request("GET", "https://maps.example.com/x", headers=headers).prepare()


def test_user_agent_without_existing():
    assert user_agent("") == USER_AGENT
    assert user_agent(None) == USER_AGENT


def test_user_agent_appends():
    assert user_agent("curl/8") == f"curl/8;{USER_AGENT}"


def test_apply_user_agent_leaves_original_untouched():
    original = _prepared({"User-Agent": "curl/8", "X-Other": "1"})
    clone = apply_user_agent(original)
    assert clone.headers["User-Agent"] == f"curl/8;{USER_AGENT}"
    assert clone.headers["X-Other"] == "1"
    assert original.headers["User-Agent"] == "curl/8"


def test_apply_user_agent_sets_when_missing():
    clone = apply_user_agent(_prepared())
    assert clone.headers["User-Agent"] == USER_AGENT


def test_adapter_sends_through_base():
    base = _RecordingAdapter()
    adapter = UserAgentAdapter(base)
    response = adapter.send(_prepared({"User-Agent": "app/1"}))
    assert response.status_code == 204
    assert base.sent[0].headers["User-Agent"] == f"app/1;{USER_AGENT}"


def test_base_is_not_a_user_agent_adapter():
    base = _RecordingAdapter()
    adapter = UserAgentAdapter(UserAgentAdapter(base))
    assert adapter.base is base
    adapter.send(_prepared())
    assert base.sent[0].headers["User-Agent"] == USER_AGENT


def test_default_adapter_has_no_base():
    adapter = UserAgentAdapter()
    assert adapter.base is None


def test_close_closes_base():
    base = _RecordingAdapter()
    UserAgentAdapter(base).close()
    assert base.closed is True


def test_session_with_adapter_tags_requests():
    session = requests.Session()
    session.mount("https://", UserAgentAdapter())
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, "https://maps.example.com/api", body="ok")
        resp = session.get("https://maps.example.com/api")
        assert resp.text == "ok"
        sent = rsps.calls[0].request.headers["User-Agent"]
    assert sent.endswith(f";{USER_AGENT}")
    assert sent.startswith("python-requests/")