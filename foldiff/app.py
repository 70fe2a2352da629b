"""Provides the main() routine and ApplicationContext"""
import argparse
import os
import signal
import sys

from qtpy import QtCore
from qtpy import QtWidgets

from . import core
from . import git
from . import gitcfg
from . import gitcmds
from . import i18n
from . import session
from . import version
from .i18n import N_
from .models import prefs
from .widgets import standard


def setup_environment():
    """Set environment variables to control git's behavior"""
    # Allow Ctrl-C to exit
    signal.signal(signal.SIGINT, signal.SIG_DFL)
    # We don't ever want a pager
    os.environ['GIT_PAGER'] = ''


class FoldiffApplication:
    """The main foldiff application

    FoldiffApplication handles i18n of user-visible data
    """

    def __init__(self, context, argv, locale=None):
        i18n.install(locale)
        standard.install()

        self.context = context
        self._app = FoldiffQApplication(context, list(argv))
        self._app.setApplicationName('foldiff')

    def activeWindow(self):
        """QApplication::activeWindow() pass-through"""
        return self._app.activeWindow()

    def start(self):
        """Wrap exec_() and start the application"""
        return self._app.exec_()


class FoldiffQApplication(QtWidgets.QApplication):
    """QApplication implementation for handling custom events"""

    def __init__(self, context, argv):
        super().__init__(argv)
        self.context = context

    def event(self, e):
        """Respond to focus events for the foldiff.refreshonfocus feature"""
        if e.type() == QtCore.QEvent.ApplicationActivate:
            view = self.context.view
            if view is not None:
                session.do(view.controller.focus_in)
        return super().event(e)


def process_args(args):
    """Process and verify command-line arguments"""
    if args.version:
        # Accept 'git foldiff --version' or 'git foldiff version'
        version.print_version()
        sys.exit(core.EXIT_SUCCESS)

    if not args.repo:
        args.repo = core.getcwd()

    # Bail out if --repo is not a directory
    repo = core.realpath(core.decode(args.repo))
    if not core.isdir(repo):
        errmsg = (
            N_(
                'fatal: "%s" is not a directory.  '
                'Please specify a correct --repo <path>.'
            )
            % repo
        )
        core.print_stderr(errmsg)
        sys.exit(core.EXIT_USAGE)
    args.repo = repo


def new_config(context, args):
    """Read the configuration; command-line options win over git config"""
    overrides = {
        'default_branch': getattr(args, 'branch', None),
        'default_expanded': getattr(args, 'expanded', None) or None,
    }
    return prefs.Config.from_cfg(context.cfg, **overrides)


def new_context(args):
    """Create top-level ApplicationContext objects"""
    context = ApplicationContext(args)
    context.git = git.create(worktree=args.repo)
    context.cfg = gitcfg.create(context)
    context.diff_source = gitcmds.DiffSource(context)
    context.config = new_config(context, args)
    return context


def application_init(args):
    """Parses the command-line arguments and creates the application"""
    setup_environment()
    process_args(args)
    context = new_context(args)
    context.app = FoldiffApplication(context, sys.argv, locale=args.locale)
    return context


def application_start(context, view):
    """Show the GUI and start the main event loop"""
    context.set_view(view)
    view.show()
    if sys.platform == 'darwin':
        view.raise_()
    return context.app.start()


def add_common_arguments(parser):
    """Add command arguments to the ArgumentParser"""
    # We also accept 'git foldiff version'
    parser.add_argument(
        '--version', default=False, action='store_true', help='print version number'
    )

    # Specifies a git repository to open
    parser.add_argument(
        '-r',
        '--repo',
        metavar='<repo>',
        help='open the specified git repository',
    )

    # Override the locale used for translations
    parser.add_argument(
        '--locale', metavar='<locale>', default=None, help=argparse.SUPPRESS
    )


class ApplicationContext:
    """Context for performing git queries and hosting the view"""

    def __init__(self, args):
        self.args = args
        self.app = None  # FoldiffApplication
        self.git = None  # git.Git
        self.cfg = None  # gitcfg.GitConfig
        self.config = None  # prefs.Config
        self.diff_source = None  # gitcmds.DiffSource
        self.view = None  # QWidget

    def set_view(self, view):
        self.view = view
