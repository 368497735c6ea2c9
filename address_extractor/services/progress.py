from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

from tqdm import tqdm
from tqdm.std import tqdm as TqdmType

"""Per-file progress bar for batch runs (tqdm, TTY only).

When stdout is not a terminal (CI, pipes, captured test output) the
tracker still counts files and addresses but draws nothing.
"""

__all__ = [
    "ProgressTracker",
    "is_tty_enabled",
]


def is_tty_enabled() -> bool:
    return sys.stdout.isatty()


class ProgressTracker:
    """Counts processed export files and mirrors the counts on a tqdm bar.

    Postfix shows ok/failed files and the running address total.
    """

    def __init__(self, total_files: int, *, description: str = "Extracting addresses") -> None:
        self.total_files = total_files
        self.description = description
        self.current_file = 0
        self.succeeded = 0
        self.failed = 0
        self.addresses = 0

        self.enabled = is_tty_enabled()
        self.pbar: TqdmType[Any] | None = None
        if self.enabled:
            self.pbar = tqdm(
                total=total_files,
                desc=description,
                unit="file",
                leave=True,
                dynamic_ncols=True,
                ascii=True,
            )

    def start_file(self, file_path: Path) -> None:
        self.current_file += 1
        if self.pbar is not None:
            self.pbar.set_description(
                f"{self.description} [{self.current_file}/{self.total_files}] {file_path.name}"
            )

    def finish_file(self, success: bool, addresses: int = 0) -> None:
        if success:
            self.succeeded += 1
        else:
            self.failed += 1
        self.addresses += addresses

        if self.pbar is not None:
            self.pbar.update(1)
            self.pbar.set_description(self.description)
            self.pbar.set_postfix(ok=self.succeeded, failed=self.failed, addresses=self.addresses)

    def close(self) -> None:
        if self.pbar is not None:
            self.pbar.close()
            self.pbar = None

    def __enter__(self) -> ProgressTracker:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
