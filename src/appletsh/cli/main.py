#!/usr/bin/env python3
# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

import argparse
import sys

import argcomplete
from argcomplete.completers import FilesCompleter

from .. import __version__
from ..lib.core.dispatcher import Dispatcher
from ..lib.core.errors import AppletError
from .commands import builtin_tasks


def build_dispatcher(name: str = "appletsh") -> Dispatcher:
    """Return a dispatcher with every built-in applet registered."""
    cli = Dispatcher(name, help="Busybox-style shell of small applets")
    for task in builtin_tasks():
        cli.add_task(task)
    return cli


def _read_script(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    try:
        with open(path, encoding="utf-8") as f:
            return f.read()
    except OSError as e:
        raise SystemExit(f"Cannot read {path}: {e.strerror or e}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="appletsh",
        description="appletsh – run applets in batch or in an interactive prompt",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  appletsh                          (interactive; Tab completes, Ctrl-C clears)\n"
            "  appletsh -c 'echo hi; echo --color green there'\n"
            "  appletsh -f script.txt            (one command per line, ';' separates)\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"appletsh {__version__}")
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "-c",
        "--command",
        metavar="LINES",
        help="Run LINES (newline or ';' separated) and exit",
    )
    _a = source.add_argument(
        "-f",
        "--file",
        metavar="PATH",
        help="Run the lines of PATH ('-' for stdin) and exit",
    )
    _a.completer = FilesCompleter()  # type: ignore[attr-defined]

    argcomplete.autocomplete(parser)
    args = parser.parse_args(argv)

    cli = build_dispatcher()
    try:
        if args.command is not None:
            cli.run_batch(args.command)
        elif args.file is not None:
            cli.run_batch(_read_script(args.file))
        else:
            cli.run_interactive()
    except AppletError as e:
        raise SystemExit(str(e))


if __name__ == "__main__":
    main()
