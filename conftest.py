import pytest
import requests

from devices import wemo_switch


GET_REPLY = """<s:Envelope xmlns:s="http://schemas.xmlsoap.org/soap/envelope/" s:encodingStyle="http://schemas.xmlsoap.org/soap/encoding/">
  <s:Body>
    <u:GetBinaryStateResponse xmlns:u="urn:Belkin:service:basicevent:1">
      <BinaryState>%d</BinaryState>
    </u:GetBinaryStateResponse>
  </s:Body>
</s:Envelope>
"""


class FakeResponse:
    def __init__(self, body=b"", status_code=200, read_error=None):
        self._body = body
        self.status_code = status_code
        self.read_error = read_error
        self.closed = False

    @property
    def content(self):
        if self.read_error is not None:
            raise self.read_error
        return self._body

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.closed = True


class FakeDevice:
    """Stands in for requests.post; records each call and answers like a WeMo."""

    def __init__(self, state=0):
        self.state = state
        self.calls = []
        self.responses = []
        self.error = None
        self.read_error = None
        self.status_code = 200
        self.body = None

    def __call__(self, url, data=None, headers=None, timeout=None):
        self.calls.append({"url": url, "data": data, "headers": headers, "timeout": timeout})
        if self.error is not None:
            raise self.error

        action = headers["SOAPACTION"]
        if action.endswith('#SetBinaryState"'):
            self.state = 1 if b"<BinaryState>1</BinaryState>" in data else 0
        body = self.body if self.body is not None else (GET_REPLY % self.state).encode("utf-8")
        resp = FakeResponse(body, self.status_code, self.read_error)
        self.responses.append(resp)
        return resp

    @property
    def actions(self):
        return [c["headers"]["SOAPACTION"].split("#")[1].rstrip('"') for c in self.calls]


@pytest.fixture
def device(monkeypatch):
    fake = FakeDevice()
    monkeypatch.setattr(wemo_switch.requests, "post", fake)
    return fake


@pytest.fixture
def connection_refused():
    return requests.exceptions.ConnectionError("connection refused")


@pytest.fixture
def device_reply():
    """Render a GetBinaryState reply body for the given state."""
    def render(state):
        return (GET_REPLY % state).encode("utf-8")
    return render
