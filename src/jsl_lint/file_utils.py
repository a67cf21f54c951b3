"""File operation utilities."""
from pathlib import Path

from jsl_lint.logging_config import get_logger

logger = get_logger(__name__)


def write_new_file(data: bytes, target_path: Path) -> None:
    """Create a file that must not already exist and write it in one go.

    If the write fails after creation, the partial file is removed so that a
    failed call never leaves anything behind.

    Args:
        data: Encoded file content
        target_path: Path of the file to create

    Raises:
        FileExistsError: If ``target_path`` already exists
        OSError: If the file cannot be created or written
    """
    f = target_path.open("xb")
    try:
        with f:
            f.write(data)
    except Exception:
        # Remove the partially written file
        target_path.unlink(missing_ok=True)
        raise


def remove_file(path: Path) -> bool:
    """Delete a file, logging instead of raising on failure.

    Args:
        path: File to delete

    Returns:
        True if the file no longer exists, False if deletion failed
    """
    try:
        path.unlink(missing_ok=True)
    except OSError as e:
        logger.warning(f"Could not remove temporary file {path}: {e}")
        return False
    return True
