"""Configuration for the WeMo switch controller.

Protocol constants for the Belkin basicevent service, HTTP timeouts, and CLI exit codes.
The device address lives in .env (WEMO_HOST), not here.
"""

# ---------------------------------------------------------------------------
# Device address
# ---------------------------------------------------------------------------
WEMO_HOST_ENV = "WEMO_HOST"             # host or host:port, e.g. 192.168.2.110:49153

# ---------------------------------------------------------------------------
# UPnP basicevent service
# ---------------------------------------------------------------------------
CONTROL_PATH = "/upnp/control/basicevent1"
SERVICE_URN = "urn:Belkin:service:basicevent:1"
SOAP_ENVELOPE_NS = "http://schemas.xmlsoap.org/soap/envelope/"
SOAP_ENCODING_NS = "http://schemas.xmlsoap.org/soap/encoding/"

GET_BINARY_STATE = "GetBinaryState"
SET_BINARY_STATE = "SetBinaryState"
ACTIONS = (GET_BINARY_STATE, SET_BINARY_STATE)

# ---------------------------------------------------------------------------
# HTTP
# ---------------------------------------------------------------------------
HTTP_CONNECT_TIMEOUT = 5     # seconds
HTTP_READ_TIMEOUT = 10       # seconds
HTTP_TIMEOUT = (HTTP_CONNECT_TIMEOUT, HTTP_READ_TIMEOUT)

# Characters of a bad response body quoted in ProtocolError messages
ERROR_BODY_LIMIT = 500

# ---------------------------------------------------------------------------
# CLI exit codes
# ---------------------------------------------------------------------------
EXIT_OK = 0
EXIT_CONFIG_ERROR = 2        # same code argparse uses for usage errors
EXIT_TRANSPORT_ERROR = 3     # device unreachable
EXIT_PROTOCOL_ERROR = 4      # device replied with something we can't read
