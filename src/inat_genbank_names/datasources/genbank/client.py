"""
NCBI Entrez client for GenBank nucleotide records.

NCBI asks every caller to identify itself with an email address; an API key
raises the allowance from 3 to 10 requests/second. The shared rate limiter
keeps us well under either.
"""

from __future__ import annotations

from Bio import Entrez, SeqIO
from Bio.SeqRecord import SeqRecord

from inat_genbank_names.services.ratelimit import RateLimiter

DATABASE = "nucleotide"
RETTYPE = "gb"
RETMODE = "text"


class GenBankClient:
    """Rate-limited ``efetch`` of single GenBank records."""

    def __init__(
        self,
        limiter: RateLimiter,
        *,
        email: str | None = None,
        api_key: str | None = None,
    ) -> None:
        self.limiter = limiter
        if email:
            Entrez.email = email
        if api_key:
            Entrez.api_key = api_key

    def fetch_record(self, accession: str) -> SeqRecord:
        """Fetch and parse one GenBank flat-file record.

        Raises:
            urllib.error.HTTPError: NCBI rejected the request (400 for unknown ids).
            urllib.error.URLError: NCBI could not be reached.
            ValueError: The response held no parseable record.
        """
        self.limiter.acquire()
        handle = Entrez.efetch(db=DATABASE, id=accession, rettype=RETTYPE, retmode=RETMODE)
        try:
            return SeqIO.read(handle, "genbank")
        finally:
            handle.close()
