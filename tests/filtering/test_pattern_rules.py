"""Unit tests for gitignore-style PatternExclusionRules."""

import pytest

from treecreator.filtering.base_rules import BaseExclusionRules
from treecreator.filtering.pattern_rules import PatternExclusionRules


@pytest.fixture
def ignore_file(tmp_path):
    path = tmp_path / ".gitignore"
    path.write_text("# build output\n*.pyc\nbuild/\n!keep.pyc\n")
    return path


def test_is_exclusion_rule():
    assert isinstance(PatternExclusionRules(), BaseExclusionRules)


def test_empty_rules_exclude_nothing():
    rules = PatternExclusionRules()
    assert not rules.has_rules()
    assert not rules.exclude("anything.txt")


@pytest.mark.parametrize(
    "path,expected",
    [
        ("module.pyc", True),
        ("pkg/module.pyc", True),
        ("keep.pyc", False),
        ("module.py", False),
        ("build/", True),
        ("src/build/", True),
        ("build/output.txt", True),
        ("builder/", False),
    ],
)
def test_load_rules_from_file(ignore_file, path, expected):
    rules = PatternExclusionRules(ignore_file)
    assert rules.has_rules()
    assert rules.exclude(path) is expected


def test_load_rules_from_multiple_files(ignore_file, tmp_path):
    second = tmp_path / "extra.ignore"
    second.write_text("*.log\n")
    rules = PatternExclusionRules([ignore_file, second])
    assert rules.exclude("debug.log")
    assert rules.exclude("a.pyc")


def test_missing_rules_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        PatternExclusionRules(tmp_path / "missing.ignore")


def test_add_rule_order_matters():
    rules = PatternExclusionRules()
    rules.add_rule("!important.log")
    rules.add_rule("*.log")
    # The later pattern re-excludes the file
    assert rules.exclude("important.log")

    rules = PatternExclusionRules()
    rules.add_rule("*.log")
    rules.add_rule("!important.log")
    assert not rules.exclude("important.log")


def test_comment_only_rules_are_not_rules(tmp_path):
    path = tmp_path / "comments.ignore"
    path.write_text("# nothing here\n\n")
    assert not PatternExclusionRules(path).has_rules()


def test_base_rules_optional_capabilities():
    class AlwaysExclude(BaseExclusionRules):
        def exclude(self, path):
            return True

    rules = AlwaysExclude()
    assert rules.has_rules()
    with pytest.raises(NotImplementedError):
        rules.load_rules("rules.txt")
    with pytest.raises(NotImplementedError):
        rules.add_rule("*.tmp")
