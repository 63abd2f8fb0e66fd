#!/usr/bin/env python3
"""
streaks - Track daily habit streaks from the command line.
"""

import argparse
import logging
import sys

from streaks import __version__
from streaks.core.config import load_config, get_default_config_path, resolve_state_path
from streaks.core.exceptions import StreaksError
from streaks.core.storage import StateFile
from streaks.commands import (
    DisplayCommand,
    UpdateCommand,
    HitCommand,
    AddCommand,
    RemoveCommand,
    RenameCommand
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="streaks",
        description="Track daily habit streaks",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  streaks add reading gym        # Start tracking two streaks
  streaks hit reading            # Record today's reading
  streaks update                 # Mark streaks pending/expired for today
  streaks display                # Show all streaks
  streaks rename gym workout     # Rename a streak, keeping its progress
        """
    )

    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument(
        '--config',
        help=f'Path to configuration file (default: {get_default_config_path()})',
        default=None
    )
    parser.add_argument(
        '--state-file',
        help='Path to the streak state file (overrides the config)',
        default=None
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Verbose output'
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    subparsers.add_parser(
        'display',
        help='Output a list of streaks with information about their state'
    )
    subparsers.add_parser(
        'update',
        help='Check the date and update pending/expired state of streaks'
    )

    hit_parser = subparsers.add_parser('hit', help='Hit streaks with the given names')
    hit_parser.add_argument('names', nargs='+', metavar='NAME')

    add_parser = subparsers.add_parser('add', help='Start tracking new streaks with the given names')
    add_parser.add_argument('names', nargs='+', metavar='NAME')

    remove_parser = subparsers.add_parser('remove', help='Stop tracking the streaks with the given names')
    remove_parser.add_argument('names', nargs='+', metavar='NAME')

    rename_parser = subparsers.add_parser('rename', help='Change the name of an existing streak')
    rename_parser.add_argument('old', metavar='NAME')
    rename_parser.add_argument('new', metavar='NEW_NAME')

    return parser


COMMANDS = {
    'display': DisplayCommand,
    'update': UpdateCommand,
    'hit': HitCommand,
    'add': AddCommand,
    'remove': RemoveCommand,
    'rename': RenameCommand,
}


def main(argv=None):
    """Main entry point for streaks."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Configure logging if verbose mode is enabled
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

    # Show help if no command specified
    if not args.command:
        parser.print_help()
        return 1

    try:
        config = load_config(args.config)
        state_path = resolve_state_path(config, args.state_file)

        if args.verbose:
            print(f"Using state file: {state_path}")

        cmd = COMMANDS[args.command](config, StateFile(state_path), verbose=args.verbose)

        if args.command in ('hit', 'add', 'remove'):
            success = cmd.run(args.names)
        elif args.command == 'rename':
            success = cmd.run(args.old, args.new)
        else:
            success = cmd.run()

        return 0 if success else 1

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        return 130
    except StreaksError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        if not args.verbose:
            print("Re-run with --verbose for more detail.", file=sys.stderr)
        else:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == '__main__':
    sys.exit(main())
