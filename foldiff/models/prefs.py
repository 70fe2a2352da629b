"""foldiff preferences

Settings are read from git-config and can be overridden field-by-field,
e.g. from the command line.

"""
from .. import core

DEFAULT_BRANCH = 'foldiff.defaultbranch'
DEFAULT_EXPANDED = 'foldiff.defaultexpanded'
EDITOR = 'foldiff.editor'
FONTDIFF = 'foldiff.fontdiff'
REFRESH_ON_FOCUS = 'foldiff.refreshonfocus'
ICON_PREFIX = 'foldiff.icon.'
KEY_PREFIX = 'foldiff.key.'


class Defaults:
    """Read-only class for holding defaults that get overridden"""

    default_branch = 'main'
    default_expanded = False
    editor = 'gvim'
    font = ''
    refresh_on_focus = True

    icon_collapsed = '▸'
    icon_expanded = '▾'
    icon_added = '+'
    icon_deleted = '-'
    icon_modified = '~'

    key_goto_file = 'Return'
    key_toggle = 'Tab'
    key_close = 'Q'
    key_refresh = 'R'
    key_toggle_mode = 'M'
    key_help = '?'


def fallback_editor():
    """Return the editor from the environment, or the default editor

    GIT_VISUAL and VISUAL are consulted before GIT_EDITOR and EDITOR.

    """
    editor_variables = (
        'GIT_VISUAL',
        'VISUAL',
        'GIT_EDITOR',
        'EDITOR',
    )
    for env in editor_variables:
        env_editor = core.getenv(env)
        if env_editor:
            return env_editor
    return Defaults.editor


class _Fields:
    """A set of named settings that can be overridden one field at a time"""

    # (field, git-config variable name, default) tuples
    FIELDS = ()
    PREFIX = ''

    def __init__(self, values=None, **kwargs):
        for name, _, default in self.FIELDS:
            setattr(self, name, default)
        self.update(values, **kwargs)

    @classmethod
    def names(cls):
        return [name for name, _, _ in cls.FIELDS]

    def update(self, values=None, **kwargs):
        """Override individual fields; unknown names are rejected"""
        overrides = dict(values or {})
        overrides.update(kwargs)
        names = self.names()
        for name, value in overrides.items():
            if name not in names:
                raise TypeError(
                    '%s has no setting named %r' % (type(self).__name__, name)
                )
            if value is not None:
                setattr(self, name, value)
        return self

    def read(self, cfg):
        """Override fields with the values found in git config"""
        for name, variable, _ in self.FIELDS:
            value = cfg.get(self.PREFIX + variable)
            if value is not None:
                setattr(self, name, str(value))
        return self

    def as_dict(self):
        return {name: getattr(self, name) for name in self.names()}

    def __eq__(self, other):
        return type(self) is type(other) and self.as_dict() == other.as_dict()

    def __repr__(self):
        return '%s(%r)' % (type(self).__name__, self.as_dict())


class Icons(_Fields):
    """Icons used for file headers"""

    PREFIX = ICON_PREFIX
    FIELDS = (
        ('collapsed', 'collapsed', Defaults.icon_collapsed),
        ('expanded', 'expanded', Defaults.icon_expanded),
        ('added', 'added', Defaults.icon_added),
        ('deleted', 'deleted', Defaults.icon_deleted),
        ('modified', 'modified', Defaults.icon_modified),
    )


class Keymaps(_Fields):
    """Key sequences, in QKeySequence string form, for the view's actions"""

    PREFIX = KEY_PREFIX
    FIELDS = (
        ('goto_file', 'gotofile', Defaults.key_goto_file),
        ('toggle', 'toggle', Defaults.key_toggle),
        ('close', 'close', Defaults.key_close),
        ('refresh', 'refresh', Defaults.key_refresh),
        ('toggle_mode', 'togglemode', Defaults.key_toggle_mode),
        ('help', 'help', Defaults.key_help),
    )


class Config:
    """Explicit foldiff configuration

    default_branch: the comparison target used by toggle_mode().
    default_expanded: whether newly listed files start expanded.
    refresh_on_focus: refresh the change set when the view regains focus.
    font: the diff font as a QFont string, empty for the system monospace font.
    editor: the command used to open files, see fallback_editor().
    icons: an Icons instance.
    keymaps: a Keymaps instance.

    """

    SETTINGS = (
        'default_branch',
        'default_expanded',
        'editor',
        'refresh_on_focus',
        'font',
    )

    def __init__(self, icons=None, keymaps=None, **kwargs):
        self.default_branch = Defaults.default_branch
        self.default_expanded = Defaults.default_expanded
        self.editor = fallback_editor()
        self.refresh_on_focus = Defaults.refresh_on_focus
        self.font = Defaults.font
        self.icons = Icons()
        self.keymaps = Keymaps()
        self.update(icons=icons, keymaps=keymaps, **kwargs)

    def update(self, icons=None, keymaps=None, **kwargs):
        """Merge overrides into the current values, one field at a time"""
        for name, value in kwargs.items():
            if name not in self.SETTINGS:
                raise TypeError('Config has no setting named %r' % name)
            if value is not None:
                setattr(self, name, value)
        if icons:
            self.icons.update(icons)
        if keymaps:
            self.keymaps.update(keymaps)
        return self

    @classmethod
    def from_cfg(cls, cfg, **overrides):
        """Build a Config from git config values plus explicit overrides"""
        config = cls()
        config.default_branch = str(
            cfg.get(DEFAULT_BRANCH, default=Defaults.default_branch)
        )
        config.default_expanded = bool(
            cfg.get(DEFAULT_EXPANDED, default=Defaults.default_expanded)
        )
        config.refresh_on_focus = bool(
            cfg.get(REFRESH_ON_FOCUS, default=Defaults.refresh_on_focus)
        )
        config.font = str(cfg.get(FONTDIFF, default=Defaults.font))
        config.editor = str(cfg.get(EDITOR, default=fallback_editor()))
        config.icons.read(cfg)
        config.keymaps.read(cfg)
        return config.update(**overrides)
