"""
Prefect flows.

Flows:
- reconcile: fetch iNaturalist + GenBank names for a list of observations
  and report mismatches

Usage (local):
    python -m inat_genbank_names.flows.reconcile observations.txt

The CLI (``inat-genbank-names``) runs the same pipeline without Prefect.
"""
