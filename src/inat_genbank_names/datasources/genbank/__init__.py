"""GenBank accession data source (NCBI Entrez via Biopython).

Public API:
  - client: GenBankClient (rate-limited efetch + GenBank parsing)
  - accession: classification_chain, resolve_accession
"""

from inat_genbank_names.datasources.genbank.accession import (
    classification_chain,
    resolve_accession,
)
from inat_genbank_names.datasources.genbank.client import GenBankClient

__all__ = [
    "GenBankClient",
    "classification_chain",
    "resolve_accession",
]
