"""Output renderers.

- mismatch_table.py - streaming tab-separated mismatch rows on stdout
"""

from inat_genbank_names.renderers.mismatch_table import MismatchTable, format_row

__all__ = ["MismatchTable", "format_row"]
