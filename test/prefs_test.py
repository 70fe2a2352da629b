"""Tests for foldiff configuration"""
# pylint: disable=redefined-outer-name
import pytest

from foldiff.models import prefs

from . import helper
from .helper import app_context
from .helper import patch


# These assertions make flake8 happy. It considers them unused imports otherwise.
assert app_context is not None


def test_defaults():
    config = prefs.Config()
    assert config.default_branch == 'main'
    assert config.default_expanded is False
    assert config.refresh_on_focus is True
    assert config.font == ''
    assert config.icons.collapsed == '▸'
    assert config.icons.expanded == '▾'
    assert config.icons.as_dict() == {
        'collapsed': '▸',
        'expanded': '▾',
        'added': '+',
        'deleted': '-',
        'modified': '~',
    }
    assert config.keymaps.as_dict() == {
        'goto_file': 'Return',
        'toggle': 'Tab',
        'close': 'Q',
        'refresh': 'R',
        'toggle_mode': 'M',
        'help': '?',
    }


def test_field_by_field_override():
    config = prefs.Config(
        default_branch='develop', icons={'collapsed': '>'}, keymaps={'help': 'H'}
    )
    assert config.default_branch == 'develop'
    assert config.icons.collapsed == '>'
    # untouched fields keep their defaults
    assert config.icons.expanded == '▾'
    assert config.keymaps.help == 'H'
    assert config.keymaps.toggle == 'Tab'


def test_none_does_not_override():
    config = prefs.Config(default_branch=None, default_expanded=None)
    assert config.default_branch == 'main'
    assert config.default_expanded is False


def test_unknown_settings_are_rejected():
    with pytest.raises(TypeError):
        prefs.Config(colour='red')
    with pytest.raises(TypeError):
        prefs.Config(icons={'folder': 'F'})
    with pytest.raises(TypeError):
        prefs.Keymaps(quit='x')


def test_fallback_editor():
    env = {'GIT_VISUAL': '', 'VISUAL': 'code', 'GIT_EDITOR': '', 'EDITOR': 'vim'}
    with patch('foldiff.core.getenv', side_effect=lambda name, *_: env.get(name)):
        assert prefs.fallback_editor() == 'code'
    with patch('foldiff.core.getenv', return_value=None):
        assert prefs.fallback_editor() == 'gvim'


def test_from_cfg(app_context):
    helper.run_git('config', 'foldiff.defaultBranch', 'develop')
    helper.run_git('config', 'foldiff.defaultExpanded', 'true')
    helper.run_git('config', 'foldiff.refreshOnFocus', 'false')
    helper.run_git('config', 'foldiff.editor', 'nano')
    helper.run_git('config', 'foldiff.icon.collapsed', '+')
    helper.run_git('config', 'foldiff.key.toggle', 'Space')
    config = prefs.Config.from_cfg(app_context.cfg)
    assert config.default_branch == 'develop'
    assert config.default_expanded is True
    assert config.refresh_on_focus is False
    assert config.editor == 'nano'
    assert config.icons.collapsed == '+'
    assert config.keymaps.toggle == 'Space'


def test_from_cfg_overrides_win(app_context):
    helper.run_git('config', 'foldiff.defaultBranch', 'develop')
    config = prefs.Config.from_cfg(
        app_context.cfg, default_branch='trunk', default_expanded=None
    )
    assert config.default_branch == 'trunk'
    assert config.default_expanded is False


def test_equality():
    assert prefs.Icons() == prefs.Icons()
    assert prefs.Icons(collapsed='>') != prefs.Icons()
