"""Tests for the command-line front end."""

import pytest
from typer.testing import CliRunner

from objectstore import __version__
from objectstore.cli.commands import app, execute_line
from objectstore.store import Repository

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config loader at an empty temp directory."""
    monkeypatch.setattr(
        "objectstore.config.loader.get_config_path",
        lambda: tmp_path / "config.json",
    )


@pytest.fixture
def repo():
    return Repository()


class TestExecuteLine:
    """Test the command grammar."""
    
    def test_add_and_commit(self, repo):
        assert execute_line(repo, 'add README "hello world"').payload == "hello world"
        result = execute_line(repo, "commit first commit")
        
        assert result.success
        assert result.payload.message == "first commit"
        assert repo.get("README").payload == "hello world"
    
    def test_blank_and_comment_lines(self, repo):
        assert execute_line(repo, "") is None
        assert execute_line(repo, "   # just a note") is None
    
    def test_branch_commands(self, repo):
        assert execute_line(repo, "branch -c dev").success
        assert execute_line(repo, "branch -s dev").success
        assert execute_line(repo, "branch").message == "* dev\n  master"
        assert not execute_line(repo, "branch -d dev").success
        execute_line(repo, "branch -s master")
        assert execute_line(repo, "branch -d dev").success
    
    def test_bad_branch_option(self, repo):
        assert not execute_line(repo, "branch -x dev").success
        assert not execute_line(repo, "branch dev").success
    
    def test_remove_get_head_log(self, repo):
        execute_line(repo, "add f1 A")
        execute_line(repo, "commit c1")
        
        assert execute_line(repo, "head").message == "c1"
        assert execute_line(repo, "log").success
        assert execute_line(repo, "rm f1").payload == "A"
        execute_line(repo, "commit c2")
        assert not execute_line(repo, "get f1").success
    
    def test_checkout(self, repo):
        execute_line(repo, "add f1 A")
        first = execute_line(repo, "commit c1").payload
        execute_line(repo, "add f2 B")
        execute_line(repo, "commit c2")
        
        assert execute_line(repo, f"checkout {first.hash}").success
        assert len(repo.branch().current_branch) == 1
    
    def test_unknown_command(self, repo):
        result = execute_line(repo, "push origin master")
        
        assert not result.success
        assert "push origin master" in result.message
    
    def test_unbalanced_quotes(self, repo):
        assert not execute_line(repo, 'add f1 "oops').success


class TestRunCommand:
    """Test running scripts."""
    
    def test_successful_script(self, tmp_path):
        script = tmp_path / "script.txt"
        script.write_text(
            "# setup\n"
            "add f1 A\n"
            "commit first\n"
            "get f1\n",
            encoding="utf-8",
        )
        result = runner.invoke(app, ["run", str(script)])
        
        assert result.exit_code == 0
        assert "Added f1 to stage." in result.output
        assert "Found object f1." in result.output
    
    def test_failure_exits_non_zero(self, tmp_path):
        script = tmp_path / "script.txt"
        script.write_text("commit nothing\nadd f1 A\n", encoding="utf-8")
        result = runner.invoke(app, ["run", str(script)])
        
        assert result.exit_code == 1
        assert "Nothing to commit" in result.output
        assert "Added f1" not in result.output
    
    def test_keep_going(self, tmp_path):
        script = tmp_path / "script.txt"
        script.write_text("commit nothing\nadd f1 A\n", encoding="utf-8")
        result = runner.invoke(app, ["run", str(script), "--keep-going"])
        
        assert result.exit_code == 1
        assert "Added f1 to stage." in result.output


def test_version():
    result = runner.invoke(app, ["--version"])
    
    assert result.exit_code == 0
    assert __version__ in result.output


def test_status():
    result = runner.invoke(app, ["status"])
    
    assert result.exit_code == 0
    assert "default_branch" in result.output


def test_shell_session():
    result = runner.invoke(app, ["shell"], input="add f1 A\ncommit first\nget f1\nexit\n")
    
    assert result.exit_code == 0
    assert "Found object f1." in result.output


def test_onboard_writes_default_config(tmp_path):
    result = runner.invoke(app, ["onboard"])
    
    assert result.exit_code == 0
    assert (tmp_path / "config.json").exists()


def test_onboard_asks_before_overwriting(tmp_path):
    config_file = tmp_path / "config.json"
    config_file.write_text("{}", encoding="utf-8")
    
    declined = runner.invoke(app, ["onboard"], input="n\n")
    assert declined.exit_code == 0
    assert config_file.read_text(encoding="utf-8") == "{}"
    
    accepted = runner.invoke(app, ["onboard"], input="y\n")
    assert accepted.exit_code == 0
    assert "defaultBranch" in config_file.read_text(encoding="utf-8")
