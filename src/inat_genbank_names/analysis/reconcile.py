"""Compare an observation's iNaturalist name with its GenBank name.

Decision order for one specimen:

1. No usable accession id → diagnostic, nothing reported.
2. GenBank lookup failed → diagnostic, nothing reported.
3. Comparison target: provisional name if set, else consensus name.
4. Exception list (keyed on the *consensus* name) → suppressed.
5. Normalize both sides; with a genus-only consensus name, ``cf`` and what
   follows is dropped from the GenBank name as well.
6. Report a mismatch if they differ.
"""

from __future__ import annotations

import logging

from inat_genbank_names.exception_list import ExceptionRegistry
from inat_genbank_names.names import (
    is_genus_only,
    normalize,
    provisional_display_name,
)
from inat_genbank_names.schemas import MismatchRecord, SpecimenRecord

logger = logging.getLogger(__name__)


def reconcile(record: SpecimenRecord, exceptions: ExceptionRegistry) -> MismatchRecord | None:
    """
    Decide whether one specimen's names disagree.

    Args:
        record: Fully fetched specimen.
        exceptions: Curated suppressions.

    Returns:
        A MismatchRecord carrying display names, or None when the names
        agree, the specimen is excepted, or it could not be checked.
    """
    obs_id = record.id

    if not record.has_valid_accession:
        logger.error(
            "iNaturalist observation # %d does not have a valid Genbank Accession Number "
            "observation field",
            obs_id,
        )
        return None

    if record.accession_error is not None or not record.accession_name:
        reason = record.accession_error or "no classification returned"
        logger.warning(
            "Failed to retrieve GenBank name for accession %s (observation %d): %s",
            record.accession_id,
            obs_id,
            reason,
        )
        return None

    consensus = record.consensus_name
    accession_name = record.accession_name
    using_provisional = bool(record.provisional_name)
    target = record.provisional_name if using_provisional else consensus

    logger.debug("Observation %d has a consensus name of '%s' on iNaturalist", obs_id, consensus)
    logger.debug(
        "The Genbank number is %s and the species on Genbank is '%s'",
        record.accession_id,
        accession_name,
    )
    if using_provisional:
        logger.debug("Provisional species name on iNaturalist is '%s'", record.provisional_name)

    if exceptions.is_excepted(obs_id, consensus):
        logger.debug(
            "Exception list activated for observation %d - '%s' is different from '%s'",
            obs_id,
            accession_name,
            consensus,
        )
        return None

    genus_only = is_genus_only(consensus)
    normalized_target = normalize(target)
    normalized_accession = normalize(accession_name, cut_cf_tail=genus_only)
    if genus_only and normalized_accession != normalize(accession_name):
        logger.debug(
            "Removing cf. and everything after it in the Genbank name because the "
            "iNaturalist name is at genus level."
        )

    logger.debug(
        "Comparing %s name '%s' with Genbank name '%s'",
        "provisional" if using_provisional else "iNaturalist consensus",
        normalized_target,
        normalized_accession,
    )
    if normalized_target == normalized_accession:
        return None

    if using_provisional:
        display = provisional_display_name(target, normalized_target)
    else:
        display = target

    return MismatchRecord(
        id=obs_id,
        accession_display_name=accession_name,
        comparison_display_name=display,
    )
