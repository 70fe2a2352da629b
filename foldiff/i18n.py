"""i18n and l10n support for foldiff"""
import locale
import os

import polib


I18N_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'i18n')


class NullTranslation:
    """This is a pass-through object that does nothing"""

    def gettext(self, value):
        return value


class State:
    """The application-wide current translation state"""

    translation = NullTranslation()

    @classmethod
    def reset(cls):
        cls.translation = NullTranslation()

    @classmethod
    def update(cls, lang, directory=None):
        cls.translation = Translation(lang, directory=directory)

    @classmethod
    def gettext(cls, value):
        """Return a translated value"""
        return cls.translation.gettext(value)


class Translation:
    def __init__(self, lang, directory=None):
        self.lang = lang
        self.messages = {}
        self.filename = get_filename_for_locale(lang, directory=directory)
        if self.filename:
            self.load()

    def load(self):
        """Read the .po file content into memory"""
        po = polib.pofile(self.filename, encoding='utf-8')
        messages = self.messages
        for entry in po.translated_entries():
            messages[entry.msgid] = entry.msgstr

    def gettext(self, value):
        return self.messages.get(value, value)


def gettext(value):
    """Translate a string"""
    return State.gettext(value)


def N_(value):
    """Marker function for translated values

    N_("Some string value") is used to mark strings for translation.
    """
    return gettext(value)


def get_filename_for_locale(name, directory=None):
    """Return the .po file for the specified locale"""
    # "foo_BAR.UTF-8" is truncated to "foo_BAR", then "foo" is tried.
    if not name:
        name = locale.getlocale()[0]
    if not name:
        return None
    if directory is None:
        directory = I18N_DIR

    name = name.split('.', 1)[0]
    filename = os.path.join(directory, '%s.po' % name)
    if os.path.exists(filename):
        return filename

    short_name = name.split('_', 1)[0]
    filename = os.path.join(directory, '%s.po' % short_name)
    if os.path.exists(filename):
        return filename
    return None


def install(lang, directory=None):
    State.update(lang, directory=directory)


def uninstall():
    State.reset()
