"""SOAP envelopes and reply parsing for the WeMo basicevent service.

Replies are scanned with a regex, not parsed as XML: only the first
<BinaryState>0|1</BinaryState> in the payload is read, whatever surrounds it.
"""

import re

import config
from state import BinaryState

_BINARY_STATE_RE = re.compile(r"<BinaryState>(0|1)</BinaryState>")

_ENVELOPE = """<?xml version="1.0" encoding="utf-8"?>
<s:Envelope xmlns:s="{envelope_ns}" s:encodingStyle="{encoding_ns}">
  <s:Body>
    {body}
  </s:Body>
</s:Envelope>"""


class ProtocolError(Exception):
    """The device answered, but not with a readable BinaryState.

    The raw reply is kept on .body; the message quotes a truncated copy.
    """

    def __init__(self, message, body=b""):
        self.body = body
        text = _decode(body)
        if len(text) > config.ERROR_BODY_LIMIT:
            text = text[:config.ERROR_BODY_LIMIT] + "..."
        super().__init__(f"{message}: {text}")


def _decode(body) -> str:
    if isinstance(body, bytes):
        return body.decode("utf-8", errors="replace")
    return body


def _envelope(body: str) -> str:
    return _ENVELOPE.format(
        envelope_ns=config.SOAP_ENVELOPE_NS,
        encoding_ns=config.SOAP_ENCODING_NS,
        body=body,
    )


def build_get_state_envelope() -> str:
    """Return the GetBinaryState request body."""
    return _envelope(
        f'<u:{config.GET_BINARY_STATE} xmlns:u="{config.SERVICE_URN}">'
        f"</u:{config.GET_BINARY_STATE}>"
    )


def build_set_state_envelope(state) -> str:
    """Return the SetBinaryState request body for state (BinaryState, 0/1 or bool)."""
    state = BinaryState(int(state))
    return _envelope(
        f'<u:{config.SET_BINARY_STATE} xmlns:u="{config.SERVICE_URN}">'
        f"<BinaryState>{state.digit}</BinaryState>"
        f"</u:{config.SET_BINARY_STATE}>"
    )


def parse_binary_state(body) -> BinaryState:
    """Extract the first BinaryState from a device reply. Raises ProtocolError."""
    match = _BINARY_STATE_RE.search(_decode(body))
    if match is None:
        raise ProtocolError("unexpected response", body)

    try:
        return BinaryState.from_digit(match.group(1))
    except ValueError as e:
        raise ProtocolError(f"invalid BinaryState {match.group(1)!r}", body) from e
