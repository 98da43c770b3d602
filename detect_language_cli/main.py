import logging
import sys
from typing import BinaryIO, List, Optional

LOG = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def main(argv: Optional[List[str]] = None, stdin: Optional[BinaryIO] = None, stdout: Optional[BinaryIO] = None) -> int:
    # pylint: disable=import-outside-toplevel
    from argparse import Namespace

    from detect_language_cli.args import build_parser, parse_explicit_args
    from detect_language_cli.config_file import flatten_config, load_config_file, merge_args
    from detect_language_cli.configure import configure_logging
    from detect_language_cli.env import default_config_path, load_env_file
    from detect_language_cli.run_single import run_detection

    parser = build_parser(prog="detect-language")
    base_defaults: Namespace = parser.parse_args([])
    user_args = parser.parse_args(argv)
    explicit_args = parse_explicit_args(argv, prog=parser.prog)

    configure_logging(user_args.verbose, stream=sys.stderr)

    try:
        # load the values from the .env file, if present
        load_env_file()

        config_path = user_args.config or default_config_path()
        config_overrides = {}
        if config_path:
            LOG.info("Loading defaults from %s", config_path)
            config_overrides = flatten_config(load_config_file(config_path))
        args = merge_args(base_defaults, config_overrides, explicit_args)

        count = run_detection(
            args=args,
            stdin=stdin if stdin is not None else sys.stdin.buffer,
            stdout=stdout if stdout is not None else sys.stdout.buffer,
        )
    except Exception as exc:  # pylint: disable=broad-exception-caught
        LOG.debug("Language detection failed", exc_info=True)
        print(f"{parser.prog}: error: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    LOG.info("Detection complete: %d language(s) written", count)
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
