"""Shared test fixtures and configuration."""

import subprocess
import tempfile
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from pinmark.host.base import Document, RedrawSurface, StatusIndicator, UserInteraction


class ListDocument(Document):
    """In-memory document for tests."""

    def __init__(self, lines, path="/repo/file.py", identity=None):
        self.lines = list(lines)
        self._path = path
        self._identity = identity or path

    @property
    def identity(self):
        return self._identity

    @property
    def path(self):
        return self._path

    def line_count(self):
        return len(self.lines)

    def line_text(self, index):
        return self.lines[index]


class RecordingSurface(RedrawSurface):
    """Records every clear/apply call in order."""

    def __init__(self):
        self.calls = []
        self.current = {}

    def apply_ranges(self, kind, ranges):
        self.calls.append(("apply", kind, list(ranges)))
        self.current[kind] = list(ranges)

    def clear_ranges(self, kind):
        self.calls.append(("clear", kind))
        self.current[kind] = []


class ScriptedInteraction(UserInteraction):
    """Replays scripted answers and records notifications."""

    def __init__(self, choices=None, answers=None):
        self.choices = list(choices or [])
        self.answers = list(answers or [])
        self.prompts = []
        self.infos = []
        self.errors = []

    def choose(self, options, placeholder=""):
        self.prompts.append(("choose", options, placeholder))
        return self.choices.pop(0) if self.choices else None

    def prompt(self, message, placeholder="", value=None):
        self.prompts.append(("prompt", message, value))
        return self.answers.pop(0) if self.answers else None

    def show_info(self, message):
        self.infos.append(message)

    def show_error(self, message):
        self.errors.append(message)


class RecordingIndicator(StatusIndicator):
    def __init__(self):
        self.updates = []

    def update(self, text, tooltip):
        self.updates.append((text, tooltip))


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_repo_root(temp_dir):
    """Create a mock git repository root directory."""
    git_dir = temp_dir / ".git"
    git_dir.mkdir()
    return temp_dir


@pytest.fixture
def make_document():
    """Factory for in-memory documents."""
    return ListDocument


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def interaction():
    return ScriptedInteraction()


@pytest.fixture
def make_interaction():
    """Factory for interactions with scripted choices and answers."""
    return ScriptedInteraction


@pytest.fixture
def indicator():
    return RecordingIndicator()


@pytest.fixture
def sample_diff():
    """git diff -U0 output touching every change category."""
    return """diff --git a/src/app.py b/src/app.py
index 1234567..abcdefg 100644
--- a/src/app.py
+++ b/src/app.py
@@ -3 +3 @@ def main():
-    print("old")
+    print("new")
@@ -5,0 +6,2 @@ def main():
+    log("one")
+    log("two")
@@ -10,2 +11,0 @@ def helper():
-    pass
-    return None
"""


@pytest.fixture
def fake_git(mocker, temp_dir):
    """Patch subprocess.run with a scripted git.

    Returns a dict to configure: ``diff`` (text or None to fail),
    ``valid_refs`` (set of refs rev-parse accepts), ``root`` (repo root
    or None for "not a repository").
    """
    state = {"diff": "", "valid_refs": {"HEAD"}, "root": temp_dir, "calls": []}

    def run(cmd, **kwargs):
        args = cmd[1:]
        state["calls"].append(args)
        result = MagicMock()
        result.returncode = 0
        result.stdout = ""
        if args[:2] == ["rev-parse", "--show-toplevel"]:
            if state["root"] is None:
                raise subprocess.CalledProcessError(128, cmd, stderr="not a git repository")
            result.stdout = f"{state['root']}\n"
        elif args[:2] == ["rev-parse", "--verify"]:
            ref = args[-1][: -len("^{object}")]
            if ref not in state["valid_refs"]:
                raise subprocess.CalledProcessError(1, cmd, stderr="")
        elif args[0] == "diff":
            if state["diff"] is None:
                raise subprocess.CalledProcessError(128, cmd, stderr="bad revision")
            result.stdout = state["diff"]
        return result

    mocker.patch("subprocess.run", side_effect=run)
    return state
