"""
Loading of ``.env`` files into the process environment.
"""

from pathlib import Path
from typing import Iterable, Optional

from dotenv import load_dotenv


def load_env(candidates: Optional[Iterable[Path]] = None, override: bool = False) -> Optional[Path]:
    """
    Load the first existing ``.env`` file into ``os.environ``.

    Args:
        candidates: Files to try in order (default: project root, then the
            current directory)
        override: If True, values from the file replace variables already set

    Returns:
        The file that was loaded, or None when no candidate exists
    """
    if candidates is None:
        repo_root = Path(__file__).resolve().parents[2]
        candidates = [repo_root / ".env", Path.cwd() / ".env"]
    for path in candidates:
        if path.is_file():
            load_dotenv(dotenv_path=path, override=override)
            return path
    return None
