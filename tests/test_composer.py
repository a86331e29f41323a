"""Tests for the commit composition flow."""

import io
from unittest.mock import MagicMock

import pytest

from convcom.composer import CommitComposer
from convcom.config import Config
from convcom.git import GitCommitter
from convcom.ui.keys import DOWN, ENTER, ESCAPE, FORCE_QUIT

CONFIG = Config(types=["feat", "fix"], scopes=["api"])


def _composer(console, reader, message="") -> CommitComposer:
    return CommitComposer(CONFIG, console=console, reader=reader, stream=io.StringIO(message))


class TestCompose:
    def test_feature_with_scope(self, console, make_reader):
        # feat / api / no
        reader = make_reader(ENTER, DOWN, ENTER, ENTER)
        composer = _composer(console, reader, "add health endpoint\n")

        choices = composer.compose()

        assert choices is not None
        assert choices.header == "feat(api): add health endpoint"

    def test_breaking_fix_without_scope(self, console, make_reader):
        # fix / none / yes
        reader = make_reader(DOWN, ENTER, ENTER, DOWN, ENTER)
        composer = _composer(console, reader, "drop legacy field\n")

        choices = composer.compose()

        assert choices is not None
        assert choices.header == "fix!: drop legacy field"

    def test_message_is_trimmed(self, console, make_reader):
        composer = _composer(console, make_reader(ENTER, ENTER, ENTER), "   spaced out \t\n")
        assert composer.compose().message == "spaced out"

    @pytest.mark.parametrize("escape_at", [0, 1, 2])
    def test_escape_in_any_menu_cancels(self, console, make_reader, escape_at):
        events = [ENTER] * escape_at + [ESCAPE]
        composer = _composer(console, make_reader(*events), "never read\n")

        assert composer.compose() is None

    def test_eof_at_message_cancels(self, console, make_reader):
        composer = _composer(console, make_reader(ENTER, ENTER, ENTER), "")
        # Ctrl+D at the prompt
        composer._console.input = MagicMock(side_effect=EOFError)

        assert composer.compose() is None

    def test_scope_menu_starts_with_none(self, console, make_reader):
        composer = _composer(console, make_reader(ENTER, ENTER, ENTER), "msg\n")
        choices = composer.compose()
        assert choices.scope == ""
        assert "none" in console.file.getvalue()

    def test_preview_redrawn_after_each_step(self, console, make_reader):
        composer = _composer(console, make_reader(ENTER, DOWN, ENTER, ENTER), "add it\n")
        composer.compose()
        output = console.file.getvalue()

        # initial render plus one per answered step
        assert output.count("Conventional Commit") == 5
        assert "* feat: " in output
        assert "* feat(api): " in output
        assert "* feat(api): add it" in output


class TestConfirm:
    def test_yes(self, console, make_reader):
        assert _composer(console, make_reader(DOWN, ENTER)).confirm() is True

    def test_no(self, console, make_reader):
        assert _composer(console, make_reader(ENTER)).confirm() is False

    def test_escape_means_no(self, console, make_reader):
        assert _composer(console, make_reader(ESCAPE)).confirm() is False

    def test_prompt(self, console, make_reader):
        _composer(console, make_reader(ENTER)).confirm()
        assert "Push?" in console.file.getvalue()


class TestRun:
    @pytest.fixture
    def committer(self):
        return MagicMock(spec=GitCommitter)

    def test_confirmed_commit_is_executed(self, console, make_reader, committer):
        reader = make_reader(ENTER, DOWN, ENTER, ENTER, DOWN, ENTER)
        composer = _composer(console, reader, "add health endpoint\n")

        result = composer.run(committer, dry_run=True)

        assert result is not None
        committer.commit.assert_called_once_with("feat(api): add health endpoint", dry_run=True)
        committer.push.assert_not_called()

    def test_declined_commit_not_executed(self, console, make_reader, committer):
        reader = make_reader(ENTER, ENTER, ENTER, ENTER)
        composer = _composer(console, reader, "msg\n")

        assert composer.run(committer) is None
        committer.commit.assert_not_called()

    def test_cancelled_commit_not_executed(self, console, make_reader, committer):
        composer = _composer(console, make_reader(ENTER, ESCAPE), "msg\n")

        assert composer.run(committer) is None
        committer.commit.assert_not_called()
        assert "Commit cancelled." in console.file.getvalue()

    def test_force_quit_stops_before_commit(self, console, make_reader, committer):
        reader = make_reader(ENTER, FORCE_QUIT, ENTER, ENTER, DOWN, ENTER)
        composer = _composer(console, reader, "msg\n")

        with pytest.raises(SystemExit):
            composer.run(committer)

        committer.commit.assert_not_called()
        assert reader.events == [ENTER, ENTER, DOWN, ENTER]

    def test_force_quit_at_confirmation(self, console, make_reader, committer):
        reader = make_reader(ENTER, ENTER, ENTER, FORCE_QUIT)
        composer = _composer(console, reader, "msg\n")

        with pytest.raises(SystemExit):
            composer.run(committer)

        committer.commit.assert_not_called()

    def test_push_after_commit(self, console, make_reader, committer):
        reader = make_reader(ENTER, ENTER, ENTER, DOWN, ENTER)
        composer = _composer(console, reader, "msg\n")

        composer.run(committer, push=True)

        committer.commit.assert_called_once_with("feat: msg", dry_run=False)
        committer.push.assert_called_once_with()

    def test_no_push_on_dry_run(self, console, make_reader, committer):
        reader = make_reader(ENTER, ENTER, ENTER, DOWN, ENTER)
        composer = _composer(console, reader, "msg\n")

        composer.run(committer, dry_run=True, push=True)

        committer.push.assert_not_called()
