"""Specification extraction.

Turns free-form product specification dictionaries (and typed product
details) into candidate facet values keyed by canonical facet name.
"""

from dataclasses import dataclass, fields
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Set, Tuple

from facets.config import get_detail_fields, get_spec_aliases
from facets.models import Product, ProductDetail, Specification
from facets.normalize import clean_value, normalize_key, title_from_key, to_snake_case

__all__ = [
    "SpecRule",
    "GENERIC_SPEC_RULES",
    "match_rule",
    "canonical_key",
    "detail_items",
    "extract",
    "facet_title",
    "lookup_spec_values",
    "lookup_detail_values",
    "product_values",
    "derive_specifications",
]

Translate = Callable[[str], Optional[str]]


@dataclass(frozen=True)
class SpecRule:
    """Maps lower-cased specification keys to a canonical facet.

    A rule matches when the key equals one of ``exact``, or when it contains
    any of ``any_of`` (if given), all of ``all_of`` (if given) and none of
    ``none_of``. Values also land in every facet listed in ``also``.
    """

    facet: str
    any_of: Tuple[str, ...] = ()
    all_of: Tuple[str, ...] = ()
    none_of: Tuple[str, ...] = ()
    exact: Tuple[str, ...] = ()
    also: Tuple[str, ...] = ()

    def matches(self, key: str) -> bool:
        if key in self.exact:
            return True
        if not self.any_of and not self.all_of:
            return False
        if self.any_of and not any(p in key for p in self.any_of):
            return False
        if not all(p in key for p in self.all_of):
            return False
        return not any(p in key for p in self.none_of)

    @property
    def targets(self) -> Tuple[str, ...]:
        return (self.facet,) + self.also


# Order matters: the first matching rule wins.
GENERIC_SPEC_RULES: Tuple[SpecRule, ...] = (
    SpecRule("manufacturer", any_of=("brand", "manufacturer", "vendor"), exact=("make", "company")),
    SpecRule("memory_type", all_of=("memory", "type")),
    SpecRule("memory_type", all_of=("ram", "type")),
    SpecRule("socket", any_of=("socket",)),
    SpecRule("cores", any_of=("core",), none_of=("clock", "score")),
    SpecRule("threads", any_of=("thread",), none_of=("multi",)),
    SpecRule("boost_clock", any_of=("boost", "turbo")),
    SpecRule("fan_speed", any_of=("rpm",), exact=("fan speed",)),
    SpecRule("fan_size", all_of=("fan", "size")),
    SpecRule("fan_size", all_of=("fan", "diameter")),
    SpecRule("refresh_rate", any_of=("refresh",)),
    SpecRule("frequency", any_of=("clock", "frequency", "mhz", "ghz")),
    SpecRule("cache", any_of=("cache",)),
    SpecRule("tdp", any_of=("tdp", "thermal design", "power")),
    SpecRule("vram", any_of=("vram", "video memory")),
    SpecRule("memory", any_of=("memory", "ram")),
    SpecRule("chipset", any_of=("chipset",)),
    SpecRule("form_factor", all_of=("form", "factor"), exact=("form",)),
    SpecRule("wifi", any_of=("wifi", "wi-fi", "wlan")),
    SpecRule("capacity", any_of=("capacity", "volume")),
    SpecRule("interface", any_of=("interface",)),
    SpecRule("wattage", any_of=("watt",), exact=("w",)),
    SpecRule("efficiency", any_of=("efficiency", "80+", "80 plus")),
    SpecRule("modularity", any_of=("modular",)),
    SpecRule("radiator_size", any_of=("radiator", "rad size")),
    SpecRule("color", any_of=("color", "colour")),
    SpecRule("material", any_of=("material",)),
    SpecRule("side_panel", any_of=("side panel", "window")),
    SpecRule("resolution", any_of=("resolution",)),
    SpecRule("panel_type", any_of=("panel",)),
    SpecRule("response_time", all_of=("response",)),
    SpecRule("connectivity", any_of=("connect", "bluetooth", "wireless")),
    SpecRule("rgb", any_of=("rgb", "lighting", "backlight")),
    SpecRule("dpi", any_of=("dpi",)),
    SpecRule("weight", any_of=("weight",)),
    SpecRule("size", any_of=("size", "dimension")),
)


def match_rule(key: str, rules: Sequence[SpecRule] = GENERIC_SPEC_RULES) -> Optional[SpecRule]:
    """Return the first rule matching a specification key, if any."""
    key_lower = str(key).lower().strip()
    for rule in rules:
        if rule.matches(key_lower):
            return rule
    return None


def canonical_key(key: str, rules: Sequence[SpecRule] = GENERIC_SPEC_RULES) -> str:
    """Canonical facet for a key; keys no rule claims keep their snake_case name."""
    rule = match_rule(key, rules)
    return rule.facet if rule else to_snake_case(key)


def detail_items(detail: Optional[ProductDetail]) -> List[Tuple[str, str]]:
    """Non-empty typed detail attributes as (spaced key, value) pairs."""
    if detail is None:
        return []
    items = []
    for f in fields(detail):
        value = clean_value(getattr(detail, f.name))
        if value is not None:
            items.append((f.name.replace("_", " "), value))
    return items


def extract(
    products: Iterable[Product],
    rules: Sequence[SpecRule] = GENERIC_SPEC_RULES,
) -> Dict[str, Set[str]]:
    """Collect candidate facet values across products.

    Typed detail attributes are read before the free-form specifications, so
    they appear first in the extracted facet order.

    Args:
        products: Products to examine
        rules: Ordered key rules deciding each value's facet

    Returns:
        Mapping of canonical facet key to the set of observed values
    """
    facets: Dict[str, Set[str]] = {}
    for product in products:
        pairs = detail_items(product.detail) + list(product.specifications.items())
        for key, raw in pairs:
            value = clean_value(raw)
            if not value:
                continue
            rule = match_rule(key, rules)
            targets = rule.targets if rule else (to_snake_case(key),)
            for facet in targets:
                if facet:
                    facets.setdefault(facet, set()).add(value)
    return facets


def facet_title(
    key: str,
    t: Optional[Translate] = None,
    translation_key: Optional[str] = None,
    default: Optional[str] = None,
) -> str:
    """Display title for a facet, translated when a translation exists."""
    fallback = default or title_from_key(key)
    if t is None or not translation_key:
        return fallback
    translated = t(translation_key)
    if not translated or translated == translation_key:
        return fallback
    return translated


def lookup_spec_values(product: Product, canonical: str) -> List[str]:
    """Values stored under any registered spelling of a canonical key.

    Keys are compared in normalized form, so "Memory Type", "memoryType" and
    "memory_type" resolve identically.
    """
    wanted = {normalize_key(alias) for alias in get_spec_aliases(canonical)}
    values = []
    for key, raw in product.specifications.items():
        if normalize_key(key) not in wanted:
            continue
        value = clean_value(raw)
        if value and value not in values:
            values.append(value)
    return values


def lookup_detail_values(product: Product, canonical: str) -> List[str]:
    detail = product.detail
    if detail is None:
        return []
    values = []
    for name in get_detail_fields(canonical):
        value = clean_value(detail.get(name))
        if value and value not in values:
            values.append(value)
    return values


def product_values(product: Product, canonical: str) -> List[str]:
    """Typed detail values for a facet, else its specification values."""
    return lookup_detail_values(product, canonical) or lookup_spec_values(product, canonical)


def derive_specifications(
    products: Iterable[Product],
    rules: Sequence[SpecRule] = GENERIC_SPEC_RULES,
) -> List[Specification]:
    """Build Specification entries from products when none were supplied."""
    specs = []
    for key, values in extract(products, rules).items():
        specs.append(
            Specification(
                id=key,
                name=key,
                display_name=facet_title(key),
                values=sorted(values, key=str.casefold),
            )
        )
    return specs
