"""Unit tests for the command-line scripts."""

import importlib.util
from pathlib import Path

import pytest
from typer.testing import CliRunner

from quire.utils.resume_store import ResumeStore

SCRIPTS_DIR = Path(__file__).resolve().parents[2] / "scripts"

runner = CliRunner()


def load_script(name: str):
    spec = importlib.util.spec_from_file_location(name, SCRIPTS_DIR / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def generate_script(monkeypatch):
    module = load_script("generate_resume")

    def no_provider():
        raise AssertionError("provider created before options were validated")

    monkeypatch.setattr(module, "ResumeGenerator", no_provider)
    return module


@pytest.fixture
def store(tmp_path, monkeypatch):
    path = tmp_path / "resumes.csv"
    monkeypatch.setattr("quire.utils.resume_store.RESUME_STORE", path)
    return ResumeStore(path)


@pytest.mark.unit
class TestGenerateOptions:
    """Option validation happens before any LLM request."""

    def test_unknown_template_fails_early(self, generate_script):
        result = runner.invoke(
            generate_script.app, ["generate", "--name", "Jane Doe", "--template", "fancy"]
        )

        assert result.exit_code == 1
        assert "Unknown template" in result.output

    def test_unknown_tone_fails_early(self, generate_script, tmp_path):
        source = tmp_path / "resume.txt"
        source.write_text("Jane Doe\nEngineer\n", encoding="utf-8")

        result = runner.invoke(generate_script.app, ["enhance", str(source), "--tone", "loud"])

        assert result.exit_code == 1
        assert "Invalid tone" in result.output


@pytest.mark.unit
class TestManageResumes:
    """Store management commands."""

    def test_update_content_and_title(self, store, tmp_path):
        record = store.save("Jane Doe", "## Jane Doe\nold")
        edited = tmp_path / "edited.md"
        edited.write_text("## Jane Doe\nnew", encoding="utf-8")

        result = runner.invoke(
            load_script("manage_resumes").app,
            ["update", record.resume_id, "--content", str(edited), "--title", "Jane Doe - Backend"],
        )

        assert result.exit_code == 0, result.output
        updated = store.get(record.resume_id)
        assert updated.content == "## Jane Doe\nnew"
        assert updated.title == "Jane Doe - Backend"

    def test_update_requires_a_change(self, store):
        record = store.save("Jane Doe", "text")

        result = runner.invoke(load_script("manage_resumes").app, ["update", record.resume_id])

        assert result.exit_code == 1
        assert store.get(record.resume_id) == record

    def test_update_unknown_id(self, store):
        result = runner.invoke(
            load_script("manage_resumes").app, ["update", "missing", "--title", "New"]
        )
        assert result.exit_code == 1

    def test_list_shows_titles(self, store):
        store.save("First", "one")
        store.save("Second", "two")

        result = runner.invoke(load_script("manage_resumes").app, ["list"])

        assert result.exit_code == 0
        assert "2 saved resumes" in result.output
        assert "First" in result.output and "Second" in result.output
