"""
Writes generated files to disk.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from .output import OutputFile

logger = logging.getLogger(__name__)


def output_path(file: OutputFile, output_dir: Path) -> Path:
    """Absolute location of a generated file below the output directory."""
    return (output_dir / file.relative_path / file.file_name).resolve()


def write_output_files(files: Iterable[OutputFile], output_dir: Path) -> list[Path]:
    """
    Write generated files below `output_dir`, creating folders as needed.

    Returns:
        Paths of the written files, in input order
    """
    written: list[Path] = []
    for file in files:
        target = output_path(file, output_dir)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(file.content, encoding="utf-8")
        logger.info(f"Wrote {target}")
        written.append(target)
    return written
