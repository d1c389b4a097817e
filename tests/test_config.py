"""Tests du chargement des options de règles (YAML)."""

import pytest

from splendor.config import load_rule_options
from splendor.engine.rules import RuleOptions


def test_defaults_when_file_is_empty(tmp_path):
    path = tmp_path / "rules.yaml"
    path.write_text("")

    assert load_rule_options(path) == RuleOptions()


def test_rules_section(tmp_path):
    path = tmp_path / "rules.yaml"
    path.write_text("rules:\n  enforce_token_limit: true\n  gold_is_wildcard: true\n")

    options = load_rule_options(path)

    assert options.enforce_token_limit
    assert options.gold_is_wildcard
    assert not options.enforce_reserve_limit


def test_top_level_options(tmp_path):
    path = tmp_path / "rules.yaml"
    path.write_text("enforce_reserve_limit: true\n")

    assert load_rule_options(str(path)) == RuleOptions(enforce_reserve_limit=True)


@pytest.mark.parametrize(
    "content, message",
    [
        ("rules:\n  max_tokens: 12\n", "Unknown rule options"),
        ("rules:\n  enforce_token_limit: 'yes please'\n", "must be a boolean"),
        ("- enforce_token_limit\n", "must contain a mapping"),
        ("rules: [1, 2]\n", "must be a mapping"),
    ],
)
def test_invalid_files(tmp_path, content, message):
    path = tmp_path / "rules.yaml"
    path.write_text(content)

    with pytest.raises(ValueError, match=message):
        load_rule_options(path)
