"""CSV export functionality for the guard patrol simulation."""

import csv
from pathlib import Path
from typing import Dict, Iterable, List, Optional

TRAJECTORY_FIELDS = ['step', 'x', 'y', 'direction']
OBSTACLE_FIELDS = ['x', 'y']


class CSVWriter:
    """
    Exports rows to CSV format incrementally.

    Trajectory format:
        step,x,y,direction
        0,4,6,north
        ...
    """

    def __init__(self, output_path: Path,
                 fieldnames: Optional[List[str]] = None):
        self.output_path = Path(output_path)
        self.fieldnames = fieldnames or TRAJECTORY_FIELDS
        self.file: Optional[object] = None
        self.writer: Optional[csv.DictWriter] = None
        self._is_open = False

    def open(self) -> None:
        """Initialize file and write header."""
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        self.file = open(self.output_path, 'w', newline='')
        self.writer = csv.DictWriter(self.file, fieldnames=self.fieldnames)
        self.writer.writeheader()
        self._is_open = True

    def append(self, rows: Iterable[Dict]) -> None:
        """Write a batch of rows."""
        if not self._is_open:
            self.open()
        for row in rows:
            self.writer.writerow(row)
        self.file.flush()

    def close(self) -> None:
        """Close file handle."""
        if self.file:
            self.file.close()
            self.file = None
            self.writer = None
            self._is_open = False

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
