"""
End-to-end tests for the gitfluff command line.

Run with:
    pytest tests/test_cli.py -v
"""

import io
import os

import pytest

from gitfluff.cli.main import EXIT_ERROR, EXIT_OK, EXIT_VIOLATIONS, main
from gitfluff.git import GitError, locate_git_dir

AI_MESSAGE = (
    "feat: add login\n\n"
    "\U0001F916 Generated with Claude\n"
    "Co-Authored-By: Claude <noreply@anthropic.com>\n"
)


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run every command from an empty directory."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv('FORCE_COLOR', raising=False)
    return tmp_path


@pytest.fixture
def message_file(workdir):
    """Return a function that writes COMMIT_EDITMSG and returns its path."""
    def _write(text: str):
        path = workdir / "COMMIT_EDITMSG"
        path.write_text(text, encoding='utf-8', newline='')
        return path
    return _write


def read(path):
    with open(path, encoding='utf-8', newline='') as f:
        return f.read()


# ---------------------------------------------------------------------------
# lint
# ---------------------------------------------------------------------------

class TestLint:

    def test_clean_message_is_silent(self, message_file, capsys):
        path = message_file("feat: add login\n")
        assert main(["lint", "--from-file", str(path)]) == EXIT_OK
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_positional_commit_file(self, message_file):
        path = message_file("feat: add login\n")
        assert main(["lint", str(path)]) == EXIT_OK

    def test_ai_attribution_reported(self, message_file, capsys):
        path = message_file(AI_MESSAGE)
        assert main(["lint", "--from-file", str(path)]) == EXIT_VIOLATIONS
        err = capsys.readouterr().err
        assert "Remove AI co-author attribution lines" in err
        assert "Remove AI generation notices from commit messages" in err
        assert "cleanup available: Remove Claude Code attribution block" in err
        assert read(path) == AI_MESSAGE

    def test_write_removes_ai_attribution(self, message_file, capsys):
        path = message_file(AI_MESSAGE)
        assert main(["lint", "--from-file", str(path), "--write"]) == EXIT_OK
        assert read(path) == "feat: add login\n"
        captured = capsys.readouterr()
        assert "applied cleanup: Remove Claude Code attribution block" in captured.err
        assert captured.out == ""

    def test_exit_nonzero_on_rewrite(self, message_file, capsys):
        path = message_file("feat: demo  \n")
        args = ["lint", "--from-file", str(path), "--write", "--exit-nonzero-on-rewrite"]
        assert main(args) == EXIT_VIOLATIONS
        assert read(path) == "feat: demo\n"
        assert "re-run the commit" in capsys.readouterr().err

    def test_unchanged_write_is_ok(self, message_file):
        path = message_file("feat: demo\n")
        args = ["lint", "--from-file", str(path), "--write", "--exit-nonzero-on-rewrite"]
        assert main(args) == EXIT_OK

    def test_literal_message_written_to_stdout(self, workdir, capsys):
        assert main(["lint", "--message", "feat: demo   ", "--write"]) == EXIT_OK
        assert capsys.readouterr().out == "feat: demo"

    def test_stdin(self, workdir, monkeypatch):
        monkeypatch.setattr('sys.stdin', io.StringIO("feat: Add Login\n"))
        assert main(["lint", "--stdin"]) == EXIT_VIOLATIONS

    def test_crlf_file_is_normalized_on_write(self, message_file):
        path = message_file("feat: add login\r\n\r\nExplain why\r\n")
        assert main(["lint", str(path), "--write"]) == EXIT_OK
        assert read(path) == "feat: add login\n\nExplain why\n"

    @pytest.mark.parametrize("text, expected", [
        ("Fix login button alignment\n", EXIT_OK),
        ("fix: add body\n\nextra details\n", EXIT_VIOLATIONS),
        ("123 not a letter\n", EXIT_VIOLATIONS),
    ])
    def test_simple_preset(self, message_file, text, expected):
        path = message_file(text)
        assert main(["lint", str(path), "--preset", "simple"]) == expected

    @pytest.mark.parametrize("text, expected", [
        ("feat: add login\n", EXIT_VIOLATIONS),
        ("feat: add login\n\nExplain rationale\n", EXIT_OK),
    ])
    def test_body_preset(self, message_file, text, expected):
        path = message_file(text)
        assert main(["lint", str(path), "--preset", "conventional-body"]) == expected

    def test_require_body_from_config(self, message_file, workdir, capsys):
        (workdir / ".gitfluff.toml").write_text("[rules]\nrequire_body = true\n", encoding='utf-8')
        path = message_file("feat: add login\n")
        assert main(["lint", str(path)]) == EXIT_VIOLATIONS
        assert "must include a body" in capsys.readouterr().err

    def test_custom_pattern_and_exclude(self, message_file, capsys):
        path = message_file("JIRA-12: WIP checkout\n")
        args = ["lint", str(path), "--msg-pattern", "^JIRA-[0-9]+: ", "--exclude", "(?i)wip:WIP commits disallowed"]
        assert main(args) == EXIT_VIOLATIONS
        err = capsys.readouterr().err
        assert "WIP commits disallowed" in err
        assert "must match pattern" not in err

    def test_cleanup_flag(self, message_file):
        path = message_file("feat: add thing [skip ci]\n")
        assert main(["lint", str(path), "--cleanup", r" \[skip ci\]->", "--write"]) == EXIT_OK
        assert read(path) == "feat: add thing\n"

    def test_separation_warning_does_not_fail(self, message_file, capsys):
        path = message_file("feat: add login\nbody text\n")
        assert main(["lint", str(path), "--color", "never"]) == EXIT_OK
        assert "gitfluff: warning: Commit message body must be separated" in capsys.readouterr().err

    def test_separation_error_fails(self, message_file):
        path = message_file("feat: add login\nbody text\n")
        assert main(["lint", str(path), "--separation", "error"]) == EXIT_VIOLATIONS

    def test_separation_fixed_by_write(self, message_file):
        path = message_file("feat: add login\nbody text\n")
        assert main(["lint", str(path), "--separation", "error", "--write"]) == EXIT_OK
        assert read(path) == "feat: add login\n\nbody text\n"

    def test_no_autofix(self, message_file):
        path = message_file("feat: add login\nbody text\n")
        args = ["lint", str(path), "--separation", "error", "--write", "--no-autofix"]
        assert main(args) == EXIT_VIOLATIONS
        assert read(path) == "feat: add login\nbody text\n"

    def test_verbose(self, message_file, capsys):
        path = message_file("feat: add login\n")
        assert main(["lint", str(path), "--verbose", "--color", "never"]) == EXIT_OK
        err = capsys.readouterr().err
        assert "gitfluff: debug: preset: conventional" in err
        assert "config: none" in err

    def test_merge_in_progress_skips(self, message_file, workdir):
        (workdir / ".git").mkdir()
        (workdir / ".git" / "MERGE_HEAD").write_text("abc123\n", encoding='utf-8')
        path = message_file("")
        assert main(["lint", str(path)]) == EXIT_OK

    def test_empty_message_fails(self, message_file, capsys):
        path = message_file("")
        assert main(["lint", str(path)]) == EXIT_VIOLATIONS
        assert "header must not be empty" in capsys.readouterr().err


class TestLintErrors:

    @pytest.mark.parametrize("args, text", [
        (["lint", "--message", "feat: x", "--preset", "nope"], "unknown preset `nope`"),
        (["lint", "--message", "feat: x", "--exclude", "("], "invalid exclude regex"),
        (["lint", "--message", "feat: x", "--cleanup", "no-arrow"], "find->replace"),
        (["lint", "--message", "feat: x", "--cleanup-replacement", "y"], "require --cleanup-pattern"),
        (["lint"], "no commit message source provided"),
        (["lint", "missing-file"], "failed to read commit message"),
    ])
    def test_exit_code_two(self, workdir, capsys, args, text):
        assert main(args) == EXIT_ERROR
        err = capsys.readouterr().err
        assert "gitfluff:" in err
        assert text in err

    def test_file_and_message_conflict(self, message_file, capsys):
        path = message_file("feat: x\n")
        assert main(["lint", str(path), "--message", "feat: y"]) == EXIT_ERROR
        assert "only one of" in capsys.readouterr().err

    def test_bad_config(self, workdir, capsys):
        (workdir / ".gitfluff.toml").write_text("preset = [\n", encoding='utf-8')
        assert main(["lint", "--message", "feat: x"]) == EXIT_ERROR
        err = capsys.readouterr().err
        assert "invalid config" in err
        assert "caused by:" in err

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["--version"])
        assert excinfo.value.code == 0
        assert "gitfluff" in capsys.readouterr().out


# ---------------------------------------------------------------------------
# hook install
# ---------------------------------------------------------------------------

class TestHookInstall:

    @pytest.fixture
    def repo(self, workdir):
        (workdir / ".git").mkdir()
        return workdir

    def test_installs_executable_hook(self, repo, capsys):
        assert main(["hook", "install", "commit-msg"]) == EXIT_OK
        hook = repo / ".git" / "hooks" / "commit-msg"
        assert hook.read_text(encoding='utf-8') == '#!/bin/sh\nexec gitfluff lint --from-file "$1"\n'
        assert os.access(hook, os.X_OK)
        assert "Installed commit-msg hook" in capsys.readouterr().out

    def test_write_flag(self, repo):
        assert main(["hook", "install", "commit-msg", "--write"]) == EXIT_OK
        hook = repo / ".git" / "hooks" / "commit-msg"
        assert hook.read_text(encoding='utf-8').endswith('"$1" --write\n')

    def test_refuses_to_overwrite(self, repo, capsys):
        hooks = repo / ".git" / "hooks"
        hooks.mkdir()
        (hooks / "commit-msg").write_text("#!/bin/sh\necho mine\n", encoding='utf-8')
        assert main(["hook", "install", "commit-msg"]) == EXIT_ERROR
        assert "use --force" in capsys.readouterr().err
        assert "echo mine" in (hooks / "commit-msg").read_text(encoding='utf-8')

        assert main(["hook", "install", "commit-msg", "--force"]) == EXIT_OK
        assert "gitfluff lint" in (hooks / "commit-msg").read_text(encoding='utf-8')

    def test_from_subdirectory(self, repo, monkeypatch):
        nested = repo / "src" / "pkg"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)
        assert main(["hook", "install", "commit-msg"]) == EXIT_OK
        assert (repo / ".git" / "hooks" / "commit-msg").exists()

    def test_worktree_gitdir_file(self, workdir):
        real = workdir / "main.git"
        real.mkdir()
        checkout = workdir / "checkout"
        checkout.mkdir()
        (checkout / ".git").write_text("gitdir: ../main.git\n", encoding='utf-8')
        assert locate_git_dir(checkout) == real.resolve()

    def test_bad_gitdir_file(self, workdir):
        (workdir / ".git").write_text("not a pointer\n", encoding='utf-8')
        with pytest.raises(GitError):
            locate_git_dir(workdir)

    def test_unknown_hook_kind(self, repo):
        with pytest.raises(SystemExit):
            main(["hook", "install", "pre-push"])
