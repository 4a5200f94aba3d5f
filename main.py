"""WeMo switch command line.

Usage:
    python3 main.py status
    python3 main.py on|off|toggle
    python3 main.py --host 192.168.2.110:49153 status

The host comes from --host or WEMO_HOST (in the environment or .env).
Exit codes: 0 ok, 2 not configured, 3 device unreachable, 4 unexpected reply.
"""

import argparse
import logging
import sys

from dotenv import load_dotenv

import config
from devices.wemo_soap import ProtocolError
from devices.wemo_switch import TransportError, WemoSwitch, from_env

log = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Control a WeMo switch")
    parser.add_argument("--host", help=f"host[:port] of the switch (default: ${config.WEMO_HOST_ENV})")
    parser.add_argument("--timeout", type=float, metavar="SECONDS",
                        help="HTTP timeout (default: %d connect / %d read)"
                        % (config.HTTP_CONNECT_TIMEOUT, config.HTTP_READ_TIMEOUT))
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("command", choices=["status", "on", "off", "toggle"])
    return parser.parse_args(argv)


def run(switch, command):
    """Execute command against switch and return the text to print."""
    if command == "status":
        return str(switch.get_state())
    if command == "on":
        switch.turn_on()
        return "on"
    if command == "off":
        switch.turn_off()
        return "off"
    return str(switch.toggle())


def main(argv=None):
    load_dotenv()
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    timeout = args.timeout if args.timeout is not None else config.HTTP_TIMEOUT
    if args.host:
        switch = WemoSwitch(args.host, timeout=timeout)
    else:
        switch = from_env(timeout=timeout)

    if not switch.host:
        log.error("No switch configured: pass --host or set %s in .env", config.WEMO_HOST_ENV)
        return config.EXIT_CONFIG_ERROR

    try:
        print(run(switch, args.command))
    except TransportError as e:
        log.error("Device unreachable: %s", e)
        return config.EXIT_TRANSPORT_ERROR
    except ProtocolError as e:
        log.error("Unexpected reply from device: %s", e)
        return config.EXIT_PROTOCOL_ERROR

    return config.EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
