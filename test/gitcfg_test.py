"""Test the foldiff.gitcfg module."""
# pylint: disable=redefined-outer-name
from foldiff import gitcfg

from . import helper
from .helper import Mock
from .helper import app_context


# These assertions make flake8 happy. It considers them unused imports otherwise.
assert app_context is not None


def test_string(app_context):
    """Test string values in get()."""
    helper.run_git('config', 'test.value', 'test')
    assert app_context.cfg.get('test.value') == 'test'


def test_int(app_context):
    """Test int values in get()."""
    helper.run_git('config', 'test.int', '42')
    assert app_context.cfg.get('test.int') == 42


def test_true(app_context):
    helper.run_git('config', 'test.bool', 'true')
    assert app_context.cfg.get('test.bool') is True


def test_false(app_context):
    helper.run_git('config', 'test.bool', 'false')
    assert app_context.cfg.get('test.bool') is False


def test_default(app_context):
    assert app_context.cfg.get('foldiff.missing', default='fallback') == 'fallback'


def test_case_insensitive_keys(app_context):
    helper.run_git('config', 'foldiff.defaultBranch', 'develop')
    assert app_context.cfg.get('foldiff.defaultbranch') == 'develop'
    assert app_context.cfg.get('FOLDIFF.DEFAULTBRANCH') == 'develop'


def test_values_are_cached(app_context):
    helper.run_git('config', 'test.value', 'before')
    assert app_context.cfg.get('test.value') == 'before'
    helper.run_git('config', 'test.value', 'after')
    assert app_context.cfg.get('test.value') == 'before'
    assert app_context.cfg.get('test.value', cached=False) == 'after'


def test_read_config_from_null_list():
    records = 'a.b\n1\0c.d\0e.f\nno\0\0'
    assert list(gitcfg._read_config_from_null_list(records)) == [
        ('a.b', 1),
        ('c.d', True),
        ('e.f', False),
    ]


def test_failed_config_command_is_empty():
    context = Mock()
    context.git.config.return_value = (1, '', 'fatal')
    cfg = gitcfg.create(context)
    assert cfg.get('foldiff.defaultbranch', default='main') == 'main'
