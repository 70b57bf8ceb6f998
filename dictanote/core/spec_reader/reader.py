"""
Specification document reader.

Reads `<specs_dir>/<path>/spec.md` for context-aware analysis. Path
validation failures raise; every read failure degrades to `exists=False`.
"""

import asyncio
from pathlib import Path

from dictanote.models.spec_file import SpecFile
from dictanote.utils.exceptions import InvalidSpecPathError
from dictanote.utils.logger import get_logger

logger = get_logger(__name__)


def validate_spec_path(spec_path: str) -> None:
    """
    Reject parent-directory traversal and absolute paths.

    Args:
        spec_path: Path relative to the specs directory

    Raises:
        InvalidSpecPathError: If the path is unsafe
    """
    if ".." in spec_path or spec_path.startswith(("/", "\\")):
        raise InvalidSpecPathError(
            "Invalid spec path: path traversal not allowed",
            context={"spec_path": spec_path},
        )


class SpecReader:
    """Reads spec documents from a fixed directory."""

    def __init__(self, specs_dir: str | Path = "specs", file_name: str = "spec.md"):
        """
        Args:
            specs_dir: Root directory holding one folder per spec
            file_name: Document file name inside each folder
        """
        self.specs_dir = Path(specs_dir)
        self.file_name = file_name

    async def read_spec(self, spec_path: str) -> SpecFile:
        """
        Read a spec document.

        Args:
            spec_path: Folder relative to specs_dir (e.g. "001-voice-dictation")

        Returns:
            SpecFile with exists=True and content, or exists=False on any read failure

        Raises:
            InvalidSpecPathError: If spec_path is unsafe
        """
        validate_spec_path(spec_path)

        full_path = self.specs_dir / spec_path / self.file_name
        try:
            content, mtime_ns = await asyncio.to_thread(self._read, full_path)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Failed to read spec file {}: {}", full_path, e)
            return SpecFile(path=spec_path, file_name=self.file_name, content="", exists=False)

        return SpecFile(
            path=spec_path,
            file_name=self.file_name,
            content=content,
            exists=True,
            last_modified=mtime_ns // 1_000_000,
        )

    @staticmethod
    def _read(full_path: Path) -> tuple[str, int]:
        content = full_path.read_text(encoding="utf-8")
        return content, full_path.stat().st_mtime_ns
