"""Tab-separated mismatch table.

Columns are padded as well as tab-separated so the output lines up in a
terminal and still splits cleanly on tabs.
"""

from __future__ import annotations

import sys
from typing import TextIO

from inat_genbank_names.schemas import MismatchRecord

HEADER = ("iNat #", "Genbank Name", "iNaturalist Name")
ROW_FORMAT = "{:<15}\t{:<30}\t{:<30}"


def format_row(*columns: object) -> str:
    return ROW_FORMAT.format(*(str(c) for c in columns))


class MismatchTable:
    """Writes the header before the first row only, then one line per mismatch."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream or sys.stdout
        self.rows_written = 0

    def write(self, mismatch: MismatchRecord) -> None:
        if self.rows_written == 0:
            print(format_row(*HEADER), file=self.stream)
        print(
            format_row(
                mismatch.id,
                mismatch.accession_display_name,
                mismatch.comparison_display_name,
            ),
            file=self.stream,
            flush=True,
        )
        self.rows_written += 1
