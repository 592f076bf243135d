from pathlib import Path
from typing import Optional
import logging

logger = logging.getLogger(__name__)

def export_directory(configured: Optional[str] = None) -> str:
    """Return the base directory for relative export paths."""
    if configured:
        return str(Path(configured).expanduser())
    return str(Path.cwd())

def resolve_export_path(path: str, base_dir: Optional[str] = None) -> Path:
    """Resolve an export target taken literally; absolute paths are returned unchanged."""
    target = Path(path)
    if target.is_absolute():
        return target
    return Path(export_directory(base_dir)) / target

def write_text(path: Path, text: str) -> None:
    """Overwrite path with text (UTF-8). Raises OSError or ValueError on failure."""
    logger.debug("Writing %d characters to %s", len(text), path)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)
