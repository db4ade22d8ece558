"""Generic facet organizer for categories without a dedicated builder.

Specification names are sorted into broad keyword buckets. Specifications
that fit no bucket are left out of the filter panel.
"""

import logging
from typing import Dict, Iterable, List, Optional, Set

from facets.config import FALLBACK_BUCKETS
from facets.models import FilterGroup, FilterOption, Specification
from facets.normalize import clean_value, fold_text

__all__ = [
    "classify_spec_name",
    "organize",
]

logger = logging.getLogger(__name__)


def classify_spec_name(name: str) -> Optional[Dict[str, object]]:
    """Return the first bucket whose keyword occurs in a specification name."""
    lower = (name or "").lower()
    for bucket in FALLBACK_BUCKETS:
        if any(keyword in lower for keyword in bucket["keywords"]):
            return bucket
    return None


def organize(specs: Iterable[Specification]) -> List[FilterGroup]:
    """Group specifications into facet buckets.

    Args:
        specs: Specifications with their observed values

    Returns:
        Manufacturer bucket first, then the remaining buckets alphabetically
        by title. Options within a bucket are alphabetical and option ids
        ("<spec name>=<value>") are unique across all buckets.
    """
    buckets: Dict[str, Dict[str, object]] = {}
    options: Dict[str, List[FilterOption]] = {}
    seen_ids: Set[str] = set()

    for spec in specs:
        bucket = classify_spec_name(spec.name)
        if bucket is None:
            logger.debug("No facet bucket for specification %r", spec.name)
            continue
        bucket_type = str(bucket["type"])
        buckets.setdefault(bucket_type, bucket)
        bucket_options = options.setdefault(bucket_type, [])
        for raw in spec.values:
            value = clean_value(raw)
            if not value:
                continue
            option_id = f"{spec.name}={value}"
            if option_id in seen_ids:
                continue
            seen_ids.add(option_id)
            bucket_options.append(FilterOption(id=option_id, name=value))

    groups = []
    for bucket_type, bucket in buckets.items():
        bucket_options = options[bucket_type]
        if not bucket_options:
            continue
        groups.append(
            FilterGroup(
                title=str(bucket["title"]),
                type=bucket_type,
                options=sorted(bucket_options, key=lambda opt: (fold_text(opt.name), opt.id)),
                title_translation_key=f"categoryPage.filterGroups.{bucket_type}",
            )
        )

    groups.sort(key=lambda group: (group.type != "manufacturer", fold_text(group.title)))
    return groups
