"""
Tests for the specification reader.
"""

import pytest

from dictanote.core.spec_reader import SpecReader, validate_spec_path
from dictanote.utils.exceptions import InvalidSpecPathError


@pytest.fixture
def specs_dir(tmp_path):
    """Create specs/001-voice-dictation/spec.md."""
    spec_dir = tmp_path / "specs" / "001-voice-dictation"
    spec_dir.mkdir(parents=True)
    (spec_dir / "spec.md").write_text("# Voice Dictation\n\n## 3.1 Storage\nUse SQLite.\n")
    return tmp_path / "specs"


@pytest.mark.unit
class TestSpecReader:
    """Test reading spec documents."""

    async def test_read_existing_spec(self, specs_dir):
        """Test existing spec is read with metadata."""
        reader = SpecReader(specs_dir)

        spec = await reader.read_spec("001-voice-dictation")

        assert spec.exists is True
        assert spec.path == "001-voice-dictation"
        assert spec.file_name == "spec.md"
        assert "## 3.1 Storage" in spec.content
        assert spec.last_modified is not None and spec.last_modified > 0

    async def test_missing_spec_degrades(self, specs_dir):
        """Test missing spec yields exists=False instead of raising."""
        reader = SpecReader(specs_dir)

        spec = await reader.read_spec("002-missing")

        assert spec.exists is False
        assert spec.content == ""
        assert spec.path == "002-missing"

    async def test_missing_specs_dir_degrades(self, tmp_path):
        """Test a missing specs directory also degrades."""
        reader = SpecReader(tmp_path / "nowhere")

        assert (await reader.read_spec("001")).exists is False

    async def test_custom_file_name(self, specs_dir):
        """Test reading a different file name."""
        (specs_dir / "001-voice-dictation" / "plan.md").write_text("plan")
        reader = SpecReader(specs_dir, file_name="plan.md")

        spec = await reader.read_spec("001-voice-dictation")

        assert spec.content == "plan"
        assert spec.file_name == "plan.md"

    @pytest.mark.parametrize("path", ["../secrets", "a/../../b", "/etc", "\\windows"])
    async def test_traversal_rejected(self, specs_dir, path):
        """Test unsafe paths raise instead of degrading."""
        reader = SpecReader(specs_dir)

        with pytest.raises(InvalidSpecPathError, match="path traversal not allowed"):
            await reader.read_spec(path)


class TestValidateSpecPath:
    """Test path validation."""

    @pytest.mark.parametrize("path", ["001-voice", "nested/folder", "v1.2"])
    def test_valid_paths(self, path):
        """Test safe relative paths pass."""
        validate_spec_path(path)
