"""The session controller drives loading, rendering and navigation"""
from . import render
from . import utils
from .errors import InvalidRefError
from .errors import NotARepositoryError
from .errors import UsageError
from .i18n import N_
from .interaction import Interaction
from .models import changes
from .models.linemap import LineMap
from .models.prefs import Config


def do(func, *args, **kwargs):
    """Run a host-triggered operation and report any errors"""
    try:
        return func(*args, **kwargs)
    except UsageError as e:
        Interaction.critical(e.title, message=e.message)
    except Exception as e:  # pylint: disable=broad-except
        msg, details = utils.format_exception(e)
        if hasattr(func, '__name__'):
            msg = f'{func.__name__} exception:\n{msg}'
        Interaction.critical(N_('Error'), message=msg, details=details)
    return None


class Surface:
    """The host view that displays renderings and owns the cursor"""

    def display(self, rendering):
        raise NotImplementedError()

    def cursor_line(self):
        """Return the 1-based display line under the cursor"""
        raise NotImplementedError()

    def set_cursor_line(self, line):
        raise NotImplementedError()

    def open_file(self, path, line):
        raise NotImplementedError()

    def show_help(self, lines):
        raise NotImplementedError()

    def close(self):
        raise NotImplementedError()


class Session:
    """The state of an open view"""

    def __init__(self, ref=None):
        self.ref = ref
        self.files = []
        self.line_map = LineMap()
        self.rendering = None


def help_lines(keymaps):
    """Return the help text for the configured key bindings"""
    entries = (
        (keymaps.goto_file, N_('Go to file/line')),
        (keymaps.toggle, N_('Toggle expand/collapse')),
        (keymaps.toggle_mode, N_('Toggle mode (uncommitted/branch)')),
        (keymaps.refresh, N_('Refresh')),
        (keymaps.close, N_('Close foldiff')),
        (keymaps.help, N_('Show this help')),
    )
    lines = [' ' + N_('foldiff keys'), '']
    for key, description in entries:
        lines.append(f'  {key}  {description}')
    lines.extend(['', ' ' + N_('Press any key to close')])
    return lines


class Controller:
    """Owns the Session and mutates it in response to user actions

    diff_source answers the change_stats(), change_status(), file_diff(),
    resolve_ref(), repository_root() and candidate_refs() queries.
    surface is the host view.  highlighter is optional; without it no
    syntax highlights are produced.

    """

    def __init__(self, diff_source, surface, config=None, highlighter=None):
        self.diff_source = diff_source
        self.surface = surface
        self.config = config or Config()
        self.highlighter = highlighter
        self.syntax_cache = render.SyntaxCache()
        self.session = None

    def is_open(self):
        return self.session is not None

    @property
    def ref(self):
        if self.session is None:
            return None
        return self.session.ref

    @property
    def files(self):
        if self.session is None:
            return []
        return self.session.files

    @property
    def rendering(self):
        if self.session is None:
            return None
        return self.session.rendering

    def validate(self, ref):
        """Raise a UsageError when the view cannot be opened for ref"""
        if not self.diff_source.repository_root():
            raise NotARepositoryError(
                N_('Not a repository'), N_('Not in a git repository')
            )
        if ref and not self.diff_source.resolve_ref(ref):
            raise InvalidRefError(
                N_('Invalid ref'), N_('Invalid git ref: %s') % ref
            )

    def open(self, ref=None):
        """Open the view for ref, or for uncommitted changes when ref is None

        Returns False when the view could not be opened.  Errors are
        reported to the user and the current state is left as-is.

        """
        ref = ref or None
        try:
            self.validate(ref)
        except UsageError as e:
            Interaction.critical(e.title, message=e.message)
            return False

        if self.session is not None:
            if self.session.ref == ref:
                self.surface.display(self.session.rendering)
                return True
            self.session = None
            self.syntax_cache.clear()

        Interaction.log('foldiff: opening %s' % (ref or 'uncommitted changes'))
        self.session = Session(ref)
        self.refresh()
        self.surface.set_cursor_line(1)
        return True

    def _render(self):
        """Render the session and hand the result to the surface"""
        session = self.session
        rendering = render.render(session.files, session.ref, self.config)
        render.apply_syntax(
            rendering, session.files, self.highlighter, self.syntax_cache
        )
        session.rendering = rendering
        session.line_map = rendering.line_map
        self.surface.display(rendering)
        return rendering

    def _load_expanded_hunks(self):
        session = self.session
        for changed_file in session.files:
            if changed_file.expanded and not changed_file.hunks:
                changes.load_hunks(self.diff_source, session.ref, changed_file)

    def refresh(self):
        """Reload the change set and restore expansion and the cursor"""
        session = self.session
        if session is None:
            return None
        cursor_line = None
        if session.rendering is not None:
            cursor_line = self.surface.cursor_line()

        default_expanded = self.config.default_expanded
        files = changes.load(self.diff_source, session.ref, default_expanded)
        session.files = changes.reconcile(session.files, files, default_expanded)
        self._load_expanded_hunks()
        rendering = self._render()

        if cursor_line is not None:
            line = utils.clamp(cursor_line, 1, rendering.line_count())
            self.surface.set_cursor_line(line)
        return rendering

    def _display_line(self, display_line):
        if display_line is None:
            display_line = self.surface.cursor_line()
        return display_line

    def toggle_expand(self, display_line=None):
        """Expand or collapse the file under the cursor"""
        session = self.session
        if session is None:
            return False
        ref = session.line_map.get(self._display_line(display_line))
        if ref is None:
            return False

        changed_file = session.files[ref.file_index]
        changed_file.expanded = not changed_file.expanded
        if changed_file.expanded and not changed_file.hunks:
            changes.load_hunks(self.diff_source, session.ref, changed_file)
        rendering = self._render()

        header_line = rendering.line_map.file_header_line(ref.file_index)
        if header_line is not None:
            self.surface.set_cursor_line(header_line)
        return True

    def toggle_mode(self):
        """Switch between uncommitted changes and the default branch"""
        session = self.session
        if session is None:
            return None
        if session.ref:
            session.ref = None
        else:
            session.ref = self.config.default_branch
        changes.clear_hunks(session.files)
        self.syntax_cache.clear()
        return self.refresh()

    def location(self, display_line=None):
        """Return the source Location under the cursor, or None"""
        session = self.session
        if session is None:
            return None
        display_line = self._display_line(display_line)
        return session.line_map.resolve(session.files, display_line, ref=session.ref)

    def goto(self, display_line=None):
        """Open the source file at the line under the cursor"""
        location = self.location(display_line)
        if location is None:
            return None
        root = self.diff_source.repository_root()
        path = utils.worktree_path(root, location.path)
        self.surface.open_file(path, location.line_number)
        return location

    def close(self):
        """Discard the session and close the view"""
        if self.session is None:
            return
        self.session = None
        self.syntax_cache.clear()
        self.surface.close()

    def show_help(self):
        lines = help_lines(self.config.keymaps)
        self.surface.show_help(lines)
        return lines

    def candidate_refs(self, prefix=''):
        """Return branch and tag names that start with prefix"""
        return self.diff_source.candidate_refs(prefix)

    def focus_in(self):
        """Re-sync the view when it regains focus"""
        if self.session is not None and self.config.refresh_on_focus:
            return self.refresh()
        return None
