from .fs__shared_util import ensure_directory, file_size, run, which

__all__ = [
    "ensure_directory",
    "file_size",
    "run",
    "which",
]
