#!/usr/bin/env python3
"""pathdsl CLI - parse, normalize and join paths from the command line."""
import argparse
import logging
import sys


def setup_logging(log_level: str):
    """Configure logging for the CLI."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def load_cli_config(args):
    """
    Build the path config from --config, the environment and --sep.

    Returns:
        PathConfig, or None if the configuration is invalid (the error is logged)
    """
    from pathdsl.config import PathConfig, load_config

    logger = logging.getLogger(__name__)

    try:
        if args.config:
            with open(args.config) as f:
                config = load_config(f.read())
        else:
            config = load_config()

        if args.sep is not None:
            config = PathConfig(separator=args.sep)
    except (ValueError, OSError) as e:
        logger.error(f"Invalid configuration: {e}")
        return None
    return config


def emit(result, config, args) -> int:
    """Print a path result, returning the process exit code."""
    logger = logging.getLogger(__name__)

    if result.is_failure():
        logger.error(f"{args.command} failed: {result.error}")
        return 1

    output_sep = args.output_sep if args.output_sep is not None else config.separator
    print(result.get().to_string(output_sep))
    return 0


def cmd_parse(args) -> int:
    """Parse and normalize a single path."""
    setup_logging(args.log_level)
    config = load_cli_config(args)
    if config is None:
        return 1
    return emit(config.parse(args.path), config, args)


def cmd_join(args) -> int:
    """Join several paths left to right."""
    setup_logging(args.log_level)
    config = load_cli_config(args)
    if config is None:
        return 1
    return emit(config.join(*args.paths), config, args)


def add_separator_arguments(parser):
    parser.add_argument(
        '--sep',
        help='Separator used to parse input paths (default: from config, then "/")'
    )
    parser.add_argument(
        '--output-sep',
        help='Separator used to print the result (default: same as --sep)'
    )


def build_parser():
    parser = argparse.ArgumentParser(
        prog='pathdsl',
        description='pathdsl - Parse, normalize and join paths',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Normalize a path
  %(prog)s parse /one/./two////../three

  # Join paths
  %(prog)s join /a/b/c .. ../d g

  # Convert separators
  %(prog)s parse 'a\\b\\c' --sep '\\' --output-sep /
"""
    )

    # Global options
    parser.add_argument(
        '--log-level',
        default='WARNING',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help='Set the logging level (default: WARNING)'
    )
    parser.add_argument(
        '--config',
        help='YAML file with path settings (default: PATHDSL_SEPARATOR from the environment)'
    )

    # Create subparsers for commands
    subparsers = parser.add_subparsers(
        dest='command',
        help='Available commands',
        required=True
    )

    # Parse command
    parse_parser = subparsers.add_parser(
        'parse',
        help='Parse and normalize a path',
        description='Parse a path and print its normalized form'
    )
    parse_parser.add_argument('path', help='Path to normalize')
    add_separator_arguments(parse_parser)
    parse_parser.set_defaults(func=cmd_parse)

    # Join command
    join_parser = subparsers.add_parser(
        'join',
        help='Join paths',
        description='Join paths left to right; only the first may be absolute'
    )
    join_parser.add_argument('paths', nargs='*', help='Paths to join')
    add_separator_arguments(join_parser)
    join_parser.set_defaults(func=cmd_join)

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()

    # Parse arguments
    args = parser.parse_args(argv)

    # Execute the command
    return args.func(args)


if __name__ == '__main__':
    sys.exit(main())
