# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

"""Sample program showing how a connection sample reads its command line.

It declares the usual MQTT, proxy and logging commands, resolves them and prints
the resulting connection settings. Missing required commands are reported here,
at the entry point, which then exits with the error's exit code.
"""

import sys

from collections.abc import Sequence
from typing import Any

from .commands import CommandLineError, CommandLineUtils, FatalCommandLineError
from .config import Config
from .util.logging import getLogger


PROGRAM_NAME = "cmdline-sample"


def build_command_line(config: Config) -> CommandLineUtils:
    cmd = CommandLineUtils(config.command_line)
    cmd.register_program_name(PROGRAM_NAME)
    cmd.add_common_mqtt_commands()
    cmd.add_common_proxy_commands()
    cmd.add_logging_commands()
    cmd.register_command("client_id", "<str>", "Client id to use for the connection (optional, default='test-client').")
    cmd.register_command("help", "", "Prints this message")
    return cmd


def resolve_settings(cmd: CommandLineUtils) -> dict[str, str]:
    settings = {
        "endpoint": cmd.get_command_required("endpoint"),
        "cert": cmd.get_command_required("cert", "A client certificate is needed for mutual TLS."),
        "key": cmd.get_command_required("key", "A private key is needed for mutual TLS."),
        "ca_file": cmd.get_command_or_default("ca_file", ""),
        "client_id": cmd.get_command_or_default("client_id", "test-client"),
    }

    if cmd.has_command("proxy_host"):
        settings["proxy_host"] = cmd.get_command("proxy_host")
        settings["proxy_port"] = cmd.get_command_or_default("proxy_port", "8080")

    return settings


def main(argv: Sequence[str] | None = None, config: Config | dict[str, Any] | None = None) -> int:
    if config is None:
        config = Config()
    elif not isinstance(config, Config):
        config = Config.model_validate(config)

    cmd = build_command_line(config)
    cmd.send_arguments(argv)

    if cmd.has_command("help"):
        cmd.print_help()
        return 0

    try:
        cmd.start_logging_from_commands(config.logging)
    except ValueError as err:
        print(f"invalid logging options: {err}", file=sys.stderr)  # noqa: T201 as logging is not configured
        return 2

    log = getLogger(PROGRAM_NAME)

    try:
        settings = resolve_settings(cmd)
    except FatalCommandLineError as err:
        print(err, file=sys.stderr)  # noqa: T201 as this is the fatal exit message
        cmd.print_help()
        return err.exit_code
    except CommandLineError as err:
        log.error("%s", err)
        print(err, file=sys.stderr)  # noqa: T201 as the console handler may be disabled
        return 2

    log.info("Connecting to %s with client id %s", settings["endpoint"], settings["client_id"])
    for name, value in settings.items():
        print(f"{name}: {value}")  # noqa: T201 as this is the sample's output
    return 0


def run() -> None:
    sys.exit(main())
