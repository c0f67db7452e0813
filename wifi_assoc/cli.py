"""Command-line interface for wifi-assoc.

Flags take the form ``-key value``; the help flags are the only boolean
ones and are checked before anything else is parsed.  The password for
``associate`` is the first positional argument.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .actions import associate, scan
from .client import WirelessClient
from .config import load_config, merge_with_cli
from .constants import (
    _ACTION_ASSOCIATE, _ACTION_SCAN, _ACTIONS, _HELP_FLAGS, _LOG_LEVEL_DEFAULT,
)
from .errors import UsageError, WifiAssocError
from .output import print_err
from .utils import _basename


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting."""

    def error(self, message):
        raise UsageError(message)


def _usage() -> str:
    process = _basename(sys.argv[0] if sys.argv else None) or "wifi-assoc"
    return (f"Usage: {process} [-h|--help] -action scan|associate [-bssid bssid]"
            " [-interface name] [-ssid name] [-config file] [-log-level level]"
            " [password]")


def _print_usage():
    print_err(_usage())


def _wants_help(argv: List[str]) -> bool:
    return any(arg in _HELP_FLAGS for arg in argv)


def _build_parser() -> argparse.ArgumentParser:
    p = _ArgumentParser(prog="wifi-assoc", add_help=False, allow_abbrev=False)
    p.add_argument("-action", default=None, metavar="ACTION",
                   help="scan (default) or associate")
    p.add_argument("-bssid", default=None, metavar="BSSID",
                   help="BSSID to associate with, exactly as scan reports it")
    p.add_argument("-interface", default=None, metavar="IFACE",
                   help="Wireless interface to use (default: first found)")
    p.add_argument("-ssid", default=None, metavar="SSID",
                   help="Only scan for networks with this SSID")
    p.add_argument("-config", default=None, metavar="FILE",
                   help="Configuration file (TOML or JSON)")
    p.add_argument("-log-level", dest="log_level", default=None,
                   metavar="LEVEL", help="Logging level (default: WARNING)")
    p.add_argument("password", nargs="?", default=None,
                   help="Network password for associate (omit for open networks)")
    p.set_defaults(timeout=None)
    return p


def _configure_logging(level_name: Optional[str]):
    name = (level_name or _LOG_LEVEL_DEFAULT).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise UsageError(f"Unknown log level: {level_name}")
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _check_types(args):
    """Reject option values of the wrong type, which only a config file can supply."""
    for key in ("interface", "ssid", "log_level"):
        value = getattr(args, key)
        if value is not None and not isinstance(value, str):
            raise UsageError(f"Invalid {key} value: {value!r} (expected a string)")
    timeout = args.timeout
    if timeout is not None and (isinstance(timeout, bool)
                                or not isinstance(timeout, (int, float))):
        raise UsageError(f"Invalid timeout value: {timeout!r} (expected seconds)")


def parse_args(argv: List[str]) -> argparse.Namespace:
    """Parse and validate ``argv``, merging any config file.  Raises UsageError."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.config:
        cfg = load_config(args.config)
        if cfg:
            merge_with_cli(args, cfg, vars(parser.parse_args([])))

    _check_types(args)

    if args.action is None:
        args.action = _ACTION_SCAN
    if args.action not in _ACTIONS:
        raise UsageError(f"Unrecognized action: {args.action}")
    if args.action == _ACTION_ASSOCIATE and args.bssid is None:
        raise UsageError("The 'associate' action requires supplying a -bssid value")
    return args


def main(argv: Optional[List[str]] = None) -> int:
    """Run one action and return the process exit status."""
    if argv is None:
        argv = sys.argv[1:]

    if _wants_help(argv):
        _print_usage()
        return 0

    try:
        args = parse_args(argv)
        _configure_logging(args.log_level)
    except UsageError as e:
        print_err(str(e))
        _print_usage()
        return 1

    client = WirelessClient(timeout=args.timeout)
    try:
        interface = client.interface(args.interface)
        if args.action == _ACTION_SCAN:
            scan(client, interface, ssid=args.ssid)
        else:
            associate(interface, args.bssid, password=args.password)
    except WifiAssocError as e:
        print_err(f"Error: {e}")
        return 1
    return 0


def run():
    sys.exit(main())
