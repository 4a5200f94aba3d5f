"""Belkin WeMo switch: on/off control over the UPnP basicevent service.

Each call is one SOAP POST to http://<host>/upnp/control/basicevent1.
There is no compare-and-set on the device, so toggle() is a read followed by a
write and can act on a stale state if something else flips the switch in between.
set_state() does not read the state back after writing it.
"""

import os
import logging

import requests

import config
from state import BinaryState
from devices.wemo_soap import (
    build_get_state_envelope,
    build_set_state_envelope,
    parse_binary_state,
)

log = logging.getLogger(__name__)


class TransportError(Exception):
    """The request could not be delivered or the reply could not be read."""


class WemoSwitch:
    """Controls a WeMo switch via its local SOAP API."""

    def __init__(self, host, name="wemo", timeout=config.HTTP_TIMEOUT):
        self._host = host or ""
        self.name = name
        self.timeout = timeout

    @property
    def host(self):
        return self._host

    @property
    def control_url(self):
        return f"http://{self._host}{config.CONTROL_PATH}"

    def send(self, action: str, body: str) -> bytes:
        """POST a SOAP body for action and return the raw reply. Raises TransportError.

        Non-2xx replies are returned as-is; the device reports SOAP faults in the body.
        """
        if action not in config.ACTIONS:
            raise ValueError(f"unsupported action: {action}")
        if not self._host:
            raise TransportError(f"{self.name}: no host configured (set {config.WEMO_HOST_ENV})")

        headers = {
            "SOAPACTION": f'"{config.SERVICE_URN}#{action}"',
            "Content-type": "text/xml",
        }
        log.debug("%s: %s -> %s", self.name, action, self.control_url)
        try:
            with requests.post(
                self.control_url,
                data=body.encode("utf-8"),
                headers=headers,
                timeout=self.timeout,
            ) as resp:
                content = resp.content
                if not 200 <= resp.status_code < 300:
                    log.warning("%s: %s returned HTTP %d", self.name, action, resp.status_code)
        except requests.RequestException as e:
            raise TransportError(f"{self.name}: {action} failed: {e}") from e

        return content

    def get_state(self) -> BinaryState:
        """Read the current switch state. Raises TransportError or ProtocolError."""
        reply = self.send(config.GET_BINARY_STATE, build_get_state_envelope())
        state = parse_binary_state(reply)
        log.debug("%s: state is %s", self.name, state)
        return state

    def set_state(self, state):
        """Switch to state. The device's reply is not checked."""
        state = BinaryState(int(state))
        self.send(config.SET_BINARY_STATE, build_set_state_envelope(state))
        log.info("%s: turned %s", self.name, str(state).upper())

    def is_on(self) -> bool:
        return self.get_state() is BinaryState.ON

    def toggle(self) -> BinaryState:
        """Flip the switch. Returns the state that was requested."""
        target = BinaryState.OFF if self.get_state() is BinaryState.ON else BinaryState.ON
        self.set_state(target)
        return target

    def turn_on(self):
        self.set_state(BinaryState.ON)

    def turn_off(self):
        self.set_state(BinaryState.OFF)

    def read(self) -> dict:
        """Return current switch state as {"on": bool}. Raises on failure."""
        return {"on": self.is_on()}


def from_env(name="wemo", timeout=config.HTTP_TIMEOUT) -> WemoSwitch:
    """Build a switch from WEMO_HOST. An unset variable surfaces as TransportError on first use."""
    return WemoSwitch(os.getenv(config.WEMO_HOST_ENV, ""), name=name, timeout=timeout)
