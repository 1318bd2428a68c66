"""
CLI tests: `rbscope scopes` and `rbscope list`, run in-process.
"""

from __future__ import annotations

import json

import pytest

from rbscope.cli import main

from file_utils import write


def run(capsys, *argv: str):
    rc = main(list(argv))
    out, err = capsys.readouterr()
    return rc, out, err


def test_scopes_report_for_directory(rbproj, monkeypatch, capsys):
    monkeypatch.chdir(rbproj)
    rc, out, _ = run(capsys, "scopes", "spec", "--target", "target")
    assert rc == 0

    data = json.loads(out)
    assert data["target"] == "target"
    files = {f["path"].rsplit("/", 1)[-1]: f for f in data["files"]}
    assert set(files) == {"foo_spec.rb", "helpers.rb"}

    (match,) = files["foo_spec.rb"]["matches"]
    assert match == {
        "line": 3,
        "column": 4,
        "text": "target",
        "scopes": ["example_group", "example"],
        "in_generated_instance": True,
    }

    (match,) = files["helpers.rb"]["matches"]
    assert match["scopes"] == ["module", "def"]
    assert match["in_generated_instance"] is False
    assert files["helpers.rb"]["has_syntax_errors"] is False


def test_scopes_uses_project_config(tmp_path, monkeypatch, capsys):
    write(tmp_path / ".rbscope.yaml", "test_groups: [feature_group]\n")
    write(tmp_path / "a_spec.rb", "feature_group 'x' do\n  target\nend\n")
    monkeypatch.chdir(tmp_path)

    rc, out, _ = run(capsys, "scopes", "a_spec.rb", "--target", "target")
    assert rc == 0
    (match,) = json.loads(out)["files"][0]["matches"]
    assert match["scopes"] == ["example_group"]


def test_scopes_explicit_config(tmp_path, monkeypatch, capsys):
    cfg = write(tmp_path / "conf" / "dsl.yaml", "hooks: [given_once]\n")
    write(tmp_path / "a_spec.rb", "describe 'x' do\n  given_once { target }\nend\n")
    monkeypatch.chdir(tmp_path)

    rc, out, _ = run(capsys, "scopes", "a_spec.rb", "--target", "target", "--config", str(cfg))
    assert rc == 0
    (match,) = json.loads(out)["files"][0]["matches"]
    assert match["scopes"] == ["example_group", "hook"]


def test_scopes_flags_syntax_errors(tmp_path, monkeypatch, capsys):
    write(tmp_path / "broken_spec.rb", "describe 'x' do\n  it { target\n")
    monkeypatch.chdir(tmp_path)

    rc, out, _ = run(capsys, "scopes", "broken_spec.rb", "--target", "target")
    assert rc == 0
    assert json.loads(out)["files"][0]["has_syntax_errors"] is True


def test_missing_path_exits_2(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    rc, out, err = run(capsys, "scopes", "absent_spec.rb", "--target", "target")
    assert rc == 2
    assert out == ""
    assert "absent_spec.rb" in err


def test_bad_config_exits_2(tmp_path, monkeypatch, capsys):
    write(tmp_path / ".rbscope.yaml", "bogus: 1\n")
    monkeypatch.chdir(tmp_path)
    rc, _, err = run(capsys, "list", "kinds")
    assert rc == 2
    assert "bogus" in err


def test_list_kinds(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    rc, out, _ = run(capsys, "list", "kinds")
    assert rc == 0
    assert json.loads(out)["kinds"] == [
        "class", "module", "def", "example_group", "example", "hook",
        "rspec_configure", "configure_hook", "block",
    ]


def test_list_entry_points(tmp_path, monkeypatch, capsys):
    write(tmp_path / ".rbscope.yaml", "test_cases: [its_scenario]\n")
    monkeypatch.chdir(tmp_path)
    rc, out, _ = run(capsys, "list", "entry-points")
    assert rc == 0
    entry_points = json.loads(out)["entry_points"]
    assert "its_scenario" in entry_points["test_cases"]
    assert "describe" in entry_points["test_groups"]
    assert entry_points["configure_method"] == "configure"
    assert entry_points["framework_constants"] == ["RSpec"]


def test_target_is_required(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["scopes", "a.rb"])
    assert exc.value.code == 2
