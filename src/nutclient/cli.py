"""Command line interface for nutclient"""

import argparse
import logging
import signal
import sys
from typing import List, Optional

from dotenv import load_dotenv

from .client import NutClient
from .config import NutConfig
from .errors import NutError
from .monitor import StatusMonitor

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nutclient", description="Query a Network UPS Tools server"
    )
    parser.add_argument("--host", help="NUT server host (NUT_HOST)")
    parser.add_argument("--port", type=int, help="NUT server port (NUT_PORT)")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable DEBUG logging output"
    )

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("list", help="List the UPS devices")

    vars_parser = commands.add_parser("vars", help="Print all variables of a UPS")
    vars_parser.add_argument("ups", nargs="?", help="UPS name (NUT_UPS_NAME)")

    get_parser = commands.add_parser("get", help="Print one variable of a UPS")
    get_parser.add_argument("ups")
    get_parser.add_argument("variable")

    cmd_parser = commands.add_parser("commands", help="List the instant commands")
    cmd_parser.add_argument("ups", nargs="?", help="UPS name (NUT_UPS_NAME)")

    monitor_parser = commands.add_parser("monitor", help="Watch the UPS status")
    monitor_parser.add_argument("ups", nargs="?", help="UPS name (NUT_UPS_NAME)")
    return parser


def _ups_name(args, config: NutConfig) -> str:
    name = args.ups or config.ups_name
    if not name:
        raise NutError("UPS name not configured (NUT_UPS_NAME)")
    return name


def run_monitor(client: NutClient, ups_name: str, config: NutConfig) -> int:
    if not client.has_device(ups_name):
        raise NutError(
            f"UPS not found: {ups_name} in {client.get_device_names()}"
        )

    monitor = StatusMonitor(
        client,
        ups_name,
        config.normal_statuses,
        check_interval=config.check_interval,
        max_error_limits=config.max_check_error_limits,
    )
    signal.signal(signal.SIGINT, monitor.signal_handler)
    signal.signal(signal.SIGTERM, monitor.signal_handler)
    logger.info("Signal handlers registered for SIGINT and SIGTERM.")

    monitor.start()
    monitor.wait()
    return 1 if monitor.failed else 0


def run(args, config: NutConfig) -> int:
    with NutClient(host=args.host, port=args.port) as client:
        if args.command == "list":
            for device in client.get_devices():
                print(f"{device.name}: {device.get_description()}")

        elif args.command == "vars":
            device = client.get_device(_ups_name(args, config))
            for name, value in device.get_variable_values().items():
                print(f"{name}: {value}")

        elif args.command == "get":
            variable = client.get_device(args.ups).get_variable(args.variable)
            print(variable.get_value())

        elif args.command == "commands":
            for command in client.get_device(_ups_name(args, config)).get_commands():
                print(command.name)

        elif args.command == "monitor":
            return run_monitor(client, _ups_name(args, config), config)

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for nutclient"""
    # Load environment variables from .env file
    load_dotenv()

    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] (%(funcName)s): %(message)s",
    )

    try:
        config = NutConfig.from_env()
        return run(args, config)
    except NutError as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
