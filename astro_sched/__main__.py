"""CLI entrypoint for the interactive daily schedule."""

from __future__ import annotations

import argparse
from dataclasses import replace

from astro_sched.shell.config import LOG_LEVELS, load_shell_config
from astro_sched.shell.host import ShellHost, available_notifiers


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the astronaut daily schedule console")
    parser.add_argument("--env-file", default=".env", help="Path to env file")
    parser.add_argument(
        "--notifier",
        action="append",
        help=f"Conflict notifier to register; repeatable ({', '.join(available_notifiers())})",
    )
    parser.add_argument(
        "--bell",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Ring the terminal bell on conflict notifications",
    )
    parser.add_argument("--log-level", help="Level for the logging notifier (e.g. INFO, DEBUG)")
    parser.add_argument("--title", help="Menu banner title")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    config = load_shell_config(args.env_file)

    if args.notifier:
        config = replace(config, notifiers=tuple(name.strip().lower() for name in args.notifier))
    if args.bell is not None:
        config = replace(config, enable_bell=args.bell)
    if args.log_level:
        level = args.log_level.strip().upper()
        if level not in LOG_LEVELS:
            raise SystemExit(f"Unknown log level: {args.log_level!r}")
        config = replace(config, log_level=level)
    if args.title:
        config = replace(config, title=args.title)

    try:
        host = ShellHost(config)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc
    try:
        host.start()
    except KeyboardInterrupt:
        pass
    finally:
        host.stop()


if __name__ == "__main__":
    main()
