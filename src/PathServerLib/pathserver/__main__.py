"""
Entry point: python -m pathserver
"""
import argparse
import logging

from dotenv import load_dotenv
load_dotenv()

from .server import config
from .server.tcp_server import run


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="pathserver",
        description="Shortest path server for binary graph frames"
    )
    parser.add_argument("--host", default=config.HOST, help="listen address")
    parser.add_argument("--port", type=int, default=config.PORT, help="listen port")
    parser.add_argument(
        "--read-timeout",
        type=float,
        default=config.READ_TIMEOUT,
        help="per-connection read timeout, seconds"
    )
    parser.add_argument(
        "--frame-timeout",
        type=float,
        default=config.FRAME_TIMEOUT,
        help="deadline for reading a whole request frame, seconds (0 disables)"
    )
    parser.add_argument(
        "--max-edges",
        type=int,
        default=config.MAX_EDGES,
        help="largest accepted edge count"
    )
    parser.add_argument(
        "--nul-terminator",
        action="store_true",
        default=config.NUL_TERMINATOR,
        help="append a NUL byte to every response"
    )
    parser.add_argument("--log-level", default=config.LOG_LEVEL, help="logging level")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    # Configure logging
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format=config.LOG_FORMAT
    )

    run(
        args.host,
        args.port,
        read_timeout=args.read_timeout,
        max_edges=args.max_edges,
        nul_terminated=args.nul_terminator,
        frame_timeout=args.frame_timeout
    )


if __name__ == "__main__":
    main()
