"""Shared machinery for the category facet builders.

A builder is a layout (which facets to show, in which order, how to sort
their options) plus a collector that reads one product and reports facet
values through an ``OptionSink``. ``CategoryFacets`` runs the collector over
every product and assembles the resulting ``FilterGroup`` list.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Callable, Dict, FrozenSet, Iterable, List, Optional, Sequence, Tuple

from facets.brands import extract_brand_options
from facets.models import FilterGroup, FilterOption, Product
from facets.normalize import bool_token, clean_value, first_number, fold_text, format_number
from facets.specs import SpecRule, facet_title, match_rule

__all__ = [
    "Translate",
    "FacetSpec",
    "OptionSink",
    "Collector",
    "spec_items",
    "Formatter",
    "collect_by_rules",
    "with_unit",
    "counted",
    "format_capacity",
    "CategoryFacets",
    "translation_key_for",
    "order_values",
    "capacity_in_gb",
    "manufacturer_group",
]

logger = logging.getLogger(__name__)

Translate = Callable[[str], Optional[str]]

TRANSLATION_PREFIX = "categoryPage.filterGroups."

_CAPACITY_RE = re.compile(r"(\d+(?:[.,]\d+)?)\s*(tb|gb|mb)", re.IGNORECASE)


def translation_key_for(facet_type: str) -> str:
    """Title translation key for a facet type (noise_cancellation -> ...noiseCancellation)."""
    head, *rest = facet_type.split("_")
    return TRANSLATION_PREFIX + head + "".join(part.capitalize() for part in rest)


@dataclass(frozen=True)
class FacetSpec:
    """How one facet group is titled and ordered.

    ``order`` is one of "text", "numeric", "capacity", "boolean" or
    "insertion". Boolean facets collapse their values to "true"/"false" and
    display ``true_label``/``false_label``; ``label_keys`` are optional
    translation keys for those two labels.
    """

    type: str
    title: str
    order: str = "text"
    translation_key: Optional[str] = None
    true_label: str = "Yes"
    false_label: str = "No"
    label_keys: Tuple[str, ...] = ()

    @property
    def title_key(self) -> str:
        return self.translation_key or translation_key_for(self.type)

    @property
    def is_boolean(self) -> bool:
        return self.order == "boolean"


class OptionSink:
    """Receives facet values from a collector, deduplicated per facet.

    Values added with ``typed=True`` come from a product's typed detail and
    suppress that facet's specification values for the same product.
    """

    def __init__(self, layout: Sequence[FacetSpec]):
        self._specs = {spec.type: spec for spec in layout}
        self._values: Dict[str, Dict[str, str]] = {spec.type: {} for spec in layout}
        self._typed: set = set()
        self._seen: set = set()

    def begin_product(self) -> None:
        self._typed = set()
        self._seen = set()

    def add(self, facet: str, value, label: Optional[str] = None, typed: bool = False) -> None:
        """Record a value for a facet; blank values are ignored.

        Args:
            facet: Facet type declared in the builder layout
            value: Raw value (coerced to a trimmed string)
            label: Display name; defaults to the value itself
            typed: Whether the value comes from the typed product detail
        """
        spec = self._specs.get(facet)
        if spec is None:
            raise KeyError(f"Facet {facet!r} is not part of this layout")
        if not typed and facet in self._typed:
            return
        if spec.is_boolean:
            text = bool_token(value)
            label = text
        else:
            text = clean_value(value)
        if not text:
            return
        if typed:
            self._typed.add(facet)
        self._seen.add(facet)
        self._values[facet].setdefault(text, clean_value(label) or text)

    def add_all(self, facet: str, values: Iterable, typed: bool = False) -> None:
        for value in values:
            self.add(facet, value, typed=typed)

    def accepts(self, facet: str) -> bool:
        return facet in self._specs

    def seen(self, facet: str) -> bool:
        """Whether the current product already supplied a value for a facet."""
        return facet in self._seen

    def has(self, facet: str) -> bool:
        return bool(self._values.get(facet))

    def values(self, facet: str) -> Dict[str, str]:
        return dict(self._values.get(facet, {}))


Collector = Callable[[Product, OptionSink], None]


def spec_items(product: Product) -> List[Tuple[str, str]]:
    """(lower-cased key, trimmed value) pairs with blank values dropped."""
    items = []
    for key, raw in product.specifications.items():
        value = clean_value(raw)
        if value:
            items.append((str(key).lower().strip(), value))
    return items


# A formatter turns a raw value into (value, label), or None to skip it
Formatter = Callable[[str], Optional[Tuple[str, Optional[str]]]]


def collect_by_rules(
    product: Product,
    sink: OptionSink,
    rules: Sequence[SpecRule],
    formatters: Optional[Dict[str, Formatter]] = None,
) -> None:
    """Route a product's specification values into a layout through ordered rules.

    Rule targets the layout does not declare are ignored.
    """
    formatters = formatters or {}
    for key, value in spec_items(product):
        rule = match_rule(key, rules)
        if rule is None:
            continue
        for facet in rule.targets:
            if not sink.accepts(facet):
                continue
            formatter = formatters.get(facet)
            if formatter is None:
                sink.add(facet, value)
                continue
            formatted = formatter(value)
            if formatted is not None:
                sink.add(facet, formatted[0], formatted[1])


def with_unit(unit: str, pattern: str = r"(\d+(?:\.\d+)?)") -> Formatter:
    """Formatter keeping the first number and appending a unit ("65 watts" -> "65W")."""
    number_re = re.compile(pattern)

    def format_value(value: str) -> Optional[Tuple[str, Optional[str]]]:
        match = number_re.search(value)
        if not match:
            return value, None
        text = f"{match.group(1)}{unit}"
        return text, text

    return format_value


def counted(suffix: str) -> Formatter:
    """Formatter for counts: "8 cores" -> ("8", "8 Cores")."""

    def format_value(value: str) -> Optional[Tuple[str, Optional[str]]]:
        match = re.search(r"\d+", value)
        if not match:
            return None
        return match.group(), f"{match.group()} {suffix}"

    return format_value


def format_capacity(value: str) -> str:
    """Uniform capacity text: "32 gb" -> "32GB", "2 TB" -> "2TB", "16" -> "16GB"."""
    match = _CAPACITY_RE.search(value)
    if match:
        return f"{match.group(1).replace(',', '.')}{match.group(2).upper()}"
    number = first_number(value)
    if number:
        return f"{format_number(number)}GB"
    return value


def capacity_in_gb(value: str) -> float:
    match = _CAPACITY_RE.search(value)
    if not match:
        return first_number(value)
    number = float(match.group(1).replace(",", "."))
    unit = match.group(2).lower()
    if unit == "tb":
        return number * 1024
    if unit == "mb":
        return number / 1024
    return number


def order_values(values: Dict[str, str], order: str) -> List[Tuple[str, str]]:
    """Sort (value, label) pairs for display.

    Numeric orders sort by the first embedded number, with ties broken
    lexicographically; values without digits count as 0.
    """
    items = list(values.items())
    if order == "insertion":
        return items
    if order == "boolean":
        return sorted(items, key=lambda item: 0 if item[0] == "true" else 1)
    if order == "numeric":
        return sorted(items, key=lambda item: (first_number(item[0]), fold_text(item[0])))
    if order == "capacity":
        return sorted(items, key=lambda item: (capacity_in_gb(item[0]), fold_text(item[0])))
    return sorted(items, key=lambda item: (fold_text(item[1]), item[1]))


def _label(spec: FacetSpec, value: str, label: str, t: Optional[Translate]) -> str:
    if not spec.is_boolean:
        return label
    index = 0 if value == "true" else 1
    default = spec.true_label if index == 0 else spec.false_label
    if t is not None and len(spec.label_keys) == 2:
        translated = t(spec.label_keys[index])
        if translated and translated != spec.label_keys[index]:
            return translated
    return default


def manufacturer_group(
    products: Sequence[Product],
    t: Optional[Translate] = None,
    title: str = "Manufacturer",
) -> Optional[FilterGroup]:
    """The brand facet shared by every builder, or None when no brand resolved."""
    brands = extract_brand_options(products)
    if not brands:
        return None
    translation_key = translation_key_for("manufacturer")
    ordered = sorted(brands.items(), key=lambda item: (fold_text(item[1]), item[1]))
    return FilterGroup(
        title=facet_title("manufacturer", t, translation_key, default=title),
        type="manufacturer",
        options=[FilterOption(id=f"manufacturer={value}", name=name) for value, name in ordered],
        title_translation_key=translation_key,
    )


@dataclass(frozen=True)
class CategoryFacets:
    """A category's facet layout and the collector that feeds it."""

    name: str
    layout: Tuple[FacetSpec, ...]
    collect: Collector
    brand_title: str = "Manufacturer"
    boolean_types: FrozenSet[str] = field(init=False, default=frozenset())

    def __post_init__(self):
        object.__setattr__(
            self,
            "boolean_types",
            frozenset(spec.type for spec in self.layout if spec.is_boolean),
        )

    def _collect_into(self, product: Product, sink: OptionSink, log: logging.Logger) -> None:
        sink.begin_product()
        try:
            self.collect(product, sink)
        except Exception as e:
            log.warning(
                "Skipping product %s while building %s facets: %s",
                product.id,
                self.name,
                e,
            )

    def build(
        self,
        products: Sequence[Product],
        t: Optional[Translate] = None,
        log: Optional[logging.Logger] = None,
    ) -> List[FilterGroup]:
        """Build the ordered facet groups for a product list.

        Args:
            products: Products on the category page
            t: Optional translation function for titles and boolean labels
            log: Logger for per-product failures (default: module logger)

        Returns:
            Manufacturer group (if any brand resolved) followed by every
            non-empty facet in layout order
        """
        log = log or logger
        sink = OptionSink(self.layout)
        for product in products:
            self._collect_into(product, sink, log)

        groups: List[FilterGroup] = []
        brand_group = manufacturer_group(products, t, title=self.brand_title)
        if brand_group is not None:
            groups.append(brand_group)

        for spec in self.layout:
            values = sink.values(spec.type)
            if not values:
                continue
            options = [
                FilterOption(id=f"{spec.type}={value}", name=_label(spec, value, label, t))
                for value, label in order_values(values, spec.order)
            ]
            groups.append(
                FilterGroup(
                    title=facet_title(spec.type, t, spec.title_key, default=spec.title),
                    type=spec.type,
                    options=options,
                    title_translation_key=spec.title_key,
                )
            )

        log.debug("Built %d %s facet groups from %d products", len(groups), self.name, len(products))
        return groups

    def derive(self, product: Product) -> Dict[str, FrozenSet[str]]:
        """Facet values this builder would derive for a single product."""
        sink = OptionSink(self.layout)
        self._collect_into(product, sink, logger)
        derived = {}
        for spec in self.layout:
            values = sink.values(spec.type)
            if values:
                derived[spec.type] = frozenset(values)
        return derived
