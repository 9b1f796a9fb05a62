"""Utilities for managing temporary downloads and output folders"""

import shutil
from pathlib import Path

# Colored logging for differentiation
from ..utils.log_utils import log_debug, log_warning


class CleanupManager:
    """Context manager owning a scratch directory for one replay run"""

    def __init__(self, temp_dir):
        """Create the scratch directory

        Args:
            temp_dir: Path to temporary directory
        """
        self.temp_dir = Path(temp_dir)
        self.temp_files = []
        self.temp_dir.mkdir(parents=True, exist_ok=True)

    def temp_path(self, filename):
        """Reserve a file name inside the scratch directory; it is deleted on exit."""
        path = self.temp_dir / filename
        self.temp_files.append(path)
        return path

    def cleanup(self):
        """Delete reserved files, then the scratch directory itself."""
        for temp_file in self.temp_files:
            try:
                temp_file.unlink(missing_ok=True)
            except OSError as e:
                log_warning(f"Could not delete {temp_file}: {e}")
        self.temp_files = []

        try:
            shutil.rmtree(self.temp_dir, ignore_errors=False)
        except FileNotFoundError:
            pass
        except OSError as e:
            log_warning(f"Could not delete temp directory {self.temp_dir}: {e}")
        else:
            log_debug(f"Removed temp directory {self.temp_dir}")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.cleanup()
        return False


def ensure_output_dir(output_path):
    """Ensure the directory of an output file exists

    Args:
        output_path: Path to output file

    Returns:
        Path: The output path
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    return output_path
