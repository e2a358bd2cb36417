"""
pytest configuration and fixtures for placesort tests.
"""

import io
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List

import pytest

from placesort.rendering import ImageRenderer


@dataclass
class CliResult:
    """Result from running CLI command."""
    exit_code: int
    output: str
    error: str


class RecordingRenderer(ImageRenderer):
    """Renderer that remembers which files were shown instead of drawing them."""

    name = "recording"

    def __init__(self, console=None):
        super().__init__(console)
        self.rendered: List[Path] = []

    def render(self, file_path: Path) -> None:
        self.rendered.append(file_path)

    def draw(self, file_path: Path) -> None:
        self.rendered.append(file_path)


class ScriptedInput:
    """Replacement for Console.input that replays canned answers."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts: List[str] = []

    def __call__(self, prompt="", **kwargs):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


@pytest.fixture
def test_config_path(tmp_path):
    """Test-specific config path; history logs land next to it."""
    config_root = tmp_path / "placesort_config"
    config_root.mkdir()
    return config_root / "config.yml"


@pytest.fixture
def create_test_files(tmp_path):
    """Helper to create test files with specific properties."""

    def create_files(file_specs: List[dict], directory: str = "photos") -> Path:
        """Create test files based on specifications.

        Args:
            file_specs: List of dicts with keys:
                - name: filename
                - content: file content (optional)
                - mtime: modification time as datetime (optional)
            directory: name of the directory under tmp_path

        Returns:
            Path to directory containing created files
        """
        test_dir = tmp_path / directory
        test_dir.mkdir(exist_ok=True)

        for spec in file_specs:
            file_path = test_dir / spec['name']

            if spec.get('dir'):
                file_path.mkdir(parents=True, exist_ok=True)
                continue

            # Write content
            content = spec.get('content', b'test file content')
            if isinstance(content, str):
                file_path.write_text(content)
            else:
                file_path.write_bytes(content)

            # Set modification time if specified
            if 'mtime' in spec:
                mtime = spec['mtime'].timestamp()
                os.utime(file_path, (mtime, mtime))

        return test_dir

    return create_files


@pytest.fixture
def recording_renderer():
    return RecordingRenderer()


@pytest.fixture
def cli_runner(monkeypatch, test_config_path, recording_renderer):
    """Run the CLI inside a directory with scripted answers and a recording renderer."""

    def run_cli(directory: Path, answers: List[str], *args, config_path=None):
        """Run placesort CLI in `directory`.

        Args:
            directory: Working directory to organize
            answers: Lines fed to the console prompts, in order
            *args: Command line arguments
            config_path: Optional config path (defaults to the test config)

        Returns:
            CliResult with exit_code, output, and error
        """
        from placesort.cli import main
        from placesort.constants import get_console

        monkeypatch.chdir(directory)
        monkeypatch.setattr(
            "placesort.session.create_renderer",
            lambda name, console, chafa_args=(): recording_renderer,
        )

        console = get_console()
        scripted = ScriptedInput(answers)
        monkeypatch.setattr(console, "input", scripted)

        # Capture stdout/stderr
        old_stdout = sys.stdout
        old_stderr = sys.stderr
        stdout = io.StringIO()
        stderr = io.StringIO()

        # Store original argv
        old_argv = sys.argv

        try:
            sys.stdout = stdout
            sys.stderr = stderr
            sys.argv = ['placesort'] + [str(a) for a in args]

            exit_code = main(config_path=config_path or test_config_path)

            return CliResult(
                exit_code=exit_code,
                output=stdout.getvalue(),
                error=stderr.getvalue()
            )
        except SystemExit as e:
            return CliResult(
                exit_code=e.code if e.code is not None else 0,
                output=stdout.getvalue(),
                error=stderr.getvalue()
            )
        finally:
            sys.stdout = old_stdout
            sys.stderr = old_stderr
            sys.argv = old_argv

    return run_cli


@pytest.fixture
def assert_file_structure():
    """Helper to assert expected file structure."""

    def check_structure(base_path: Path, expected_structure: dict):
        """Assert that directory has expected structure.

        Args:
            base_path: Root directory to check
            expected_structure: Dict describing expected structure
                e.g., {"01-01-2024_Paris": ["a.jpg", "b.jpg"]}
        """
        for name, value in expected_structure.items():
            item_path = base_path / name
            assert item_path.exists(), f"Expected {item_path} to exist"
            assert item_path.is_dir(), f"Expected {item_path} to be a directory"
            actual_files = sorted(f.name for f in item_path.iterdir() if f.is_file())
            assert actual_files == sorted(value), \
                f"Expected files {sorted(value)} in {item_path}, got {actual_files}"

    return check_structure
