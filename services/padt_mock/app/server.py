"""PADT Mock — command-line entry point.

Runs the FastAPI app under uvicorn. On SIGINT/SIGTERM the health flag is
cleared before connections are drained, so ``/healthz`` answers 503 for the
whole shutdown window.

Usage:
    padt-mock --listen-addr :5000 --file padt_response_file.xml --debug
"""

from __future__ import annotations

import argparse
import signal
import socket
import sys
from collections.abc import Sequence
from types import FrameType

import structlog
import uvicorn
from pydantic import ValidationError

from app.core.config import PadtMockSettings
from app.main import create_app

from shared.health import HealthState

log = structlog.get_logger()


class GracefulServer(uvicorn.Server):
    """uvicorn server that marks the service unhealthy when told to exit."""

    def __init__(self, config: uvicorn.Config, health_state: HealthState) -> None:
        super().__init__(config)
        self.health_state = health_state

    async def startup(self, sockets: list[socket.socket] | None = None) -> None:
        await super().startup(sockets=sockets)
        # uvicorn exits the process when binding fails, before this point
        if self.started:
            log.info(
                "padt_mock ready to handle requests",
                host=self.config.host,
                port=self.config.port,
            )

    def handle_exit(self, sig: int, frame: FrameType | None) -> None:
        if not self.should_exit:
            log.info("padt_mock received shutdown signal", signal=signal.Signals(sig).name)
        self.health_state.mark_unhealthy()
        super().handle_exit(sig, frame)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="padt-mock",
        description="Mock of the PADT endpoint serving a templated XML file.",
    )
    parser.add_argument(
        "--listen-addr",
        dest="listen_addr",
        default=None,
        help="server listen address (default :5000)",
    )
    parser.add_argument(
        "--file",
        dest="response_file",
        default=None,
        help="the file to read (default padt_response_file.xml)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=None,
        help="include logging of request details",
    )
    return parser


def load_settings(argv: Sequence[str] | None = None) -> PadtMockSettings:
    """Environment settings with any CLI flags given layered on top."""
    parser = build_parser()
    args = parser.parse_args(argv)
    overrides = {k: v for k, v in vars(args).items() if v is not None}
    try:
        return PadtMockSettings(**overrides)
    except ValidationError as exc:
        parser.error(str(exc))


def build_server(settings: PadtMockSettings) -> GracefulServer:
    health_state = HealthState()
    application = create_app(settings, health_state=health_state)

    config = uvicorn.Config(
        application,
        host=settings.host,
        port=settings.port,
        lifespan="on",
        log_config=None,
        access_log=False,
        timeout_keep_alive=int(settings.idle_timeout),
        timeout_graceful_shutdown=int(settings.shutdown_timeout),
    )
    return GracefulServer(config, health_state)


def main(argv: Sequence[str] | None = None) -> int:
    settings = load_settings(argv)
    server = build_server(settings)

    log.info("padt_mock serving file", response_file=str(settings.response_file))
    server.run()
    log.info("padt_mock stopped")
    return 0


if __name__ == "__main__":
    sys.exit(main())
