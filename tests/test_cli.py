"""Tests for pinmark.cli module."""

import os

import pytest
from typer.testing import CliRunner

from pinmark import __version__
from pinmark.cli import app
from pinmark.user_config import get_pinned_ref, set_pinned_ref


runner = CliRunner()


@pytest.fixture
def source_file(temp_dir):
    path = temp_dir / "app.py"
    path.write_text("".join(f"line {i}\n" for i in range(1, 13)))
    return path


class TestRootCommand:
    """Tests for root options."""

    def test_version(self):
        """Test --version prints the version."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output


class TestAnnotateCommand:
    """Tests for pinmark annotate command."""

    def test_prints_gutter(self, fake_git, sample_diff, source_file):
        """Test the annotated output and summary."""
        fake_git["diff"] = sample_diff

        result = runner.invoke(app, ["annotate", str(source_file), "--no-color"])

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0] == "📌 Pin Reference"
        assert "▌  3 │ line 3" in lines
        assert "▌  6 │ line 6" in lines
        assert "▼ 11 │ line 11" in lines
        assert "   1 │ line 1" in lines
        assert "1 modified, 2 added, 1 removed" in result.output

    def test_uses_saved_pin(self, fake_git, temp_dir, source_file):
        """Test that the saved pin is the comparison target."""
        set_pinned_ref(temp_dir, "origin/main")

        result = runner.invoke(app, ["annotate", str(source_file)])

        assert result.exit_code == 0
        assert "📌 origin/main" in result.output
        assert fake_git["calls"][-1][2] == "origin/main"

    def test_option_like_saved_pin_falls_back_to_head(self, fake_git, temp_dir, source_file):
        """Test that a config pin that looks like a git option is never passed to git."""
        set_pinned_ref(temp_dir, f"--output={temp_dir / 'victim.txt'}")

        result = runner.invoke(app, ["annotate", str(source_file), "--no-color"])

        assert result.exit_code == 0
        assert "📌 Pin Reference" in result.output
        diff_calls = [call for call in fake_git["calls"] if call[0] == "diff"]
        assert diff_calls == [["diff", "-U0", "HEAD", "--", str(source_file.resolve())]]
        assert not (temp_dir / "victim.txt").exists()

    def test_ref_option(self, fake_git, temp_dir, source_file):
        """Test a one-off --ref that is not saved."""
        fake_git["valid_refs"].add("v1.0")

        result = runner.invoke(app, ["annotate", str(source_file), "--ref", "v1.0"])

        assert result.exit_code == 0
        assert fake_git["calls"][-1][2] == "v1.0"
        assert get_pinned_ref(temp_dir) is None

    def test_invalid_ref_option(self, fake_git, source_file):
        """Test that an invalid --ref is an error."""
        result = runner.invoke(app, ["annotate", str(source_file), "--ref", "nope"])

        assert result.exit_code == 1
        assert "Invalid git reference: nope" in result.output

    def test_not_a_repository(self, fake_git, source_file):
        """Test running outside a repository."""
        fake_git["root"] = None

        result = runner.invoke(app, ["annotate", str(source_file)])

        assert result.exit_code == 1
        assert "error" in result.output.lower()

    def test_untracked_file_has_no_markers(self, fake_git, source_file):
        """Test that a failing diff shows the file without markers."""
        fake_git["diff"] = None

        result = runner.invoke(app, ["annotate", str(source_file), "--no-color"])

        assert result.exit_code == 0
        assert "0 modified, 0 added, 0 removed" in result.output

    def test_invalid_style_config(self, fake_git, temp_dir, source_file):
        """Test that a bad style in the config is reported."""
        config_dir = temp_dir / ".pinmark"
        config_dir.mkdir()
        (config_dir / "config.yaml").write_text("styles:\n  added:\n    color: plaid\n")

        result = runner.invoke(app, ["annotate", str(source_file)])

        assert result.exit_code == 1
        assert "Invalid style" in result.output


class TestPinCommands:
    """Tests for pin, unpin and status commands."""

    def test_pin_valid(self, fake_git, temp_dir):
        """Test pinning a valid reference."""
        fake_git["valid_refs"].add("main")

        result = runner.invoke(app, ["pin", "main"])

        assert result.exit_code == 0
        assert "Reference pinned: main" in result.output
        assert get_pinned_ref(temp_dir) == "main"

    def test_pin_invalid(self, fake_git, temp_dir):
        """Test pinning an unknown reference."""
        set_pinned_ref(temp_dir, "main")

        result = runner.invoke(app, ["pin", "nope"])

        assert result.exit_code == 1
        assert "Invalid git reference: nope" in result.output
        assert get_pinned_ref(temp_dir) == "main"

    def test_pin_blank(self, fake_git):
        """Test that a blank reference is rejected."""
        result = runner.invoke(app, ["pin", "  "])

        assert result.exit_code == 1
        assert fake_git["calls"] == []

    def test_unpin(self, fake_git, temp_dir):
        """Test clearing a pin."""
        set_pinned_ref(temp_dir, "main")

        result = runner.invoke(app, ["unpin"])

        assert result.exit_code == 0
        assert "Now comparing against HEAD" in result.output
        assert get_pinned_ref(temp_dir) is None

    def test_unpin_when_unpinned(self, fake_git):
        """Test clearing when nothing is pinned."""
        result = runner.invoke(app, ["unpin"])

        assert result.exit_code == 0
        assert "No reference pinned" in result.output

    def test_status(self, fake_git, temp_dir):
        """Test the status output."""
        set_pinned_ref(temp_dir, "a1b2c3d4e5f60718")

        result = runner.invoke(app, ["status"])

        assert result.exit_code == 0
        assert "📌 a1b2c3d" in result.output
        assert "Comparing against: a1b2c3d4e5f60718" in result.output


class TestToggleCommand:
    """Tests for pinmark toggle command."""

    def test_pin_when_unpinned(self, fake_git, temp_dir, source_file):
        """Test pinning through the prompt and re-annotating."""
        fake_git["valid_refs"].add("HEAD~2")
        fake_git["diff"] = "@@ -1 +1 @@\n"

        result = runner.invoke(app, ["toggle", str(source_file)], input="HEAD~2\n")

        assert result.exit_code == 0
        assert "Reference pinned: HEAD~2" in result.output
        assert get_pinned_ref(temp_dir) == "HEAD~2"
        assert fake_git["calls"][-1][2] == "HEAD~2"
        assert "1 modified, 0 added, 0 removed" in result.output

    def test_clear_when_pinned(self, fake_git, temp_dir):
        """Test choosing clear from the menu."""
        set_pinned_ref(temp_dir, "main")

        result = runner.invoke(app, ["toggle"], input="2\n")

        assert result.exit_code == 0
        assert "Pinned reference cleared" in result.output
        assert get_pinned_ref(temp_dir) is None

    def test_dismissed(self, fake_git, temp_dir):
        """Test that an empty answer changes nothing."""
        set_pinned_ref(temp_dir, "main")

        result = runner.invoke(app, ["toggle"], input="\n")

        assert result.exit_code == 0
        assert get_pinned_ref(temp_dir) == "main"
        assert "📌 main" in result.output


class TestWatchCommand:
    """Tests for pinmark watch command."""

    def test_initial_annotation_then_interrupt(self, fake_git, sample_diff, source_file, mocker):
        """Test that watch annotates once and stops on Ctrl+C."""
        fake_git["diff"] = sample_diff
        mocker.patch("time.sleep", side_effect=KeyboardInterrupt)

        result = runner.invoke(app, ["watch", str(source_file), "--no-color"])

        assert result.exit_code == 0
        assert "1 modified, 2 added, 1 removed" in result.output

    def test_reannotates_after_save(self, fake_git, source_file, mocker):
        """Test that a changed mtime triggers a new annotation."""
        fake_git["diff"] = ""

        def save_file(_interval):
            if save_file.calls:
                raise KeyboardInterrupt
            save_file.calls += 1
            source_file.write_text("new\n" + source_file.read_text())
            stat = source_file.stat()
            os.utime(source_file, (stat.st_atime, stat.st_mtime + 5))
            fake_git["diff"] = "@@ -0,0 +1 @@\n"

        save_file.calls = 0
        mocker.patch("time.sleep", side_effect=save_file)

        result = runner.invoke(app, ["watch", str(source_file), "--no-color"])

        assert result.exit_code == 0
        assert "0 modified, 0 added, 0 removed" in result.output
        assert "0 modified, 1 added, 0 removed" in result.output
        assert "   1 │ new" not in result.output
        assert "▌  1 │ new" in result.output
