from __future__ import annotations

from pathlib import Path

DEFAULT_SUFFIX = "_telegram"
OUTPUT_EXTENSION = ".mp4"


def derive_output_path(input_path: Path, *, suffix: str = DEFAULT_SUFFIX) -> Path:
    """Return ``<parent>/<stem><suffix>.mp4`` for ``input_path``.

    Pure: the result depends only on the input name, never on the filesystem.
    """
    input_path = Path(input_path)
    return input_path.with_name(f"{input_path.stem}{suffix}{OUTPUT_EXTENSION}")
