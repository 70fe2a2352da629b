"""Launcher and command line interface to git-foldiff"""
import argparse
import sys

from . import app
from . import core
from . import version


COMMANDS = ('open', 'refs', 'version')


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    # argparse does not allow us to assign a default subparser, so
    # "open" is injected unless a command was specified.  This lets
    # "git foldiff <ref>" work without naming the command.
    argv = list(argv)
    if not argv or argv[0] not in COMMANDS:
        argv.insert(0, 'open')
    args = parse_args(argv)
    return args.func(args)


def parse_args(argv):
    parser = argparse.ArgumentParser(prog='git-foldiff')
    subparser = parser.add_subparsers(title='valid commands')
    add_open_command(subparser)
    add_refs_command(subparser)
    add_version_command(subparser)
    return parser.parse_args(argv)


def add_command(parent, name, description, func):
    """Add a "git foldiff" command with common arguments"""
    parser = parent.add_parser(str(name), help=description)
    parser.set_defaults(func=func)
    app.add_common_arguments(parser)
    return parser


def add_open_command(subparser):
    """Add the "git foldiff open" command, which is also the default"""
    parser = add_command(subparser, 'open', 'open the diff view', cmd_open)
    parser.add_argument(
        'ref',
        metavar='<ref>',
        nargs='?',
        default=None,
        help='compare against <ref>; uncommitted changes when omitted',
    )
    parser.add_argument(
        '--expanded',
        default=False,
        action='store_true',
        help='start with all files expanded',
    )
    parser.add_argument(
        '--branch',
        metavar='<branch>',
        default=None,
        help='comparison target used when toggling modes',
    )


def add_refs_command(subparser):
    """Add the "git foldiff refs" command used for shell completion"""
    parser = add_command(subparser, 'refs', 'list candidate refs', cmd_refs)
    parser.add_argument(
        'prefix', metavar='<prefix>', nargs='?', default='', help='ref prefix'
    )


def add_version_command(subparser):
    """Add the "git foldiff version" command"""
    parser = add_command(subparser, 'version', 'print the version', cmd_version)
    parser.add_argument(
        '--builtin',
        action='store_true',
        default=False,
        help='print the builtin fallback version',
    )
    parser.add_argument(
        '--brief',
        action='store_true',
        default=False,
        help='print the version number only',
    )


# entry points
def cmd_open(args):
    """The "git foldiff" entry point"""
    from .widgets.diffview import DiffWindow  # pylint: disable=import-outside-toplevel

    context = app.application_init(args)
    view = DiffWindow(context, context.config)
    if not view.controller.open(args.ref):
        return core.EXIT_FAILURE
    return app.application_start(context, view)


def cmd_refs(args):
    app.process_args(args)
    context = app.new_context(args)
    for ref in context.diff_source.candidate_refs(args.prefix):
        core.print_stdout(ref)
    return core.EXIT_SUCCESS


def cmd_version(args):
    version.print_version(builtin=args.builtin, brief=args.brief)
    return core.EXIT_SUCCESS
