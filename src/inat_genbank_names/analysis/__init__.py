"""Cross-datasource analysis.

- reconcile.py - iNaturalist vs GenBank name comparison for one specimen
"""

from inat_genbank_names.analysis.reconcile import reconcile

__all__ = ["reconcile"]
