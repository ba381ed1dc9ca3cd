from __future__ import annotations

import argparse

from propgraph.settings import settings


def _configure_logging() -> None:
    import logging

    level = (settings.log_level or "INFO").upper()
    logging.basicConfig(level=level, format=settings.log_format)


def cmd_version() -> int:
    from propgraph import __version__

    print(__version__)
    return 0


def cmd_demo(args: argparse.Namespace) -> int:
    _configure_logging()
    from propgraph.demo import build_movie_graph, run_demo

    uppercase = False if args.lowercase_labels else None
    run_demo(build_movie_graph(), uppercase=uppercase)
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="propgraph")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("version").set_defaults(func=lambda _a: cmd_version())

    demo = sub.add_parser("demo", help="Build the sample movie graph and print a few traversals")
    demo.add_argument("--lowercase-labels", action="store_true", help="Print edge labels as stored")
    demo.set_defaults(func=cmd_demo)

    return p


def app(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    rc = args.func(args)
    raise SystemExit(rc)


if __name__ == "__main__":
    app()
