"""Facet builders for PC components.

Each builder reads the typed product detail first, then specification
values, and finally falls back to patterns in the product name (and
description) for facets the product did not otherwise supply.
"""

import re
from typing import List, Optional, Sequence

from facets.facet_groups import (
    CategoryFacets,
    FacetSpec,
    OptionSink,
    Translate,
    collect_by_rules,
    counted,
    format_capacity,
    spec_items,
    with_unit,
)
from facets.models import (
    CaseDetail,
    CoolingDetail,
    CpuDetail,
    FilterGroup,
    GpuDetail,
    MotherboardDetail,
    Product,
    PsuDetail,
    RamDetail,
    StorageDetail,
)
from facets.normalize import first_number, format_number, search_text
from facets.specs import GENERIC_SPEC_RULES, SpecRule

__all__ = [
    "cpu_series_label",
    "CPU_FACETS",
    "GPU_FACETS",
    "GPU_SPEC_RULES",
    "MOTHERBOARD_FACETS",
    "RAM_FACETS",
    "STORAGE_FACETS",
    "PSU_FACETS",
    "CASE_FACETS",
    "COOLING_FACETS",
    "build_cpu_facets",
    "build_gpu_facets",
    "build_motherboard_facets",
    "build_ram_facets",
    "build_storage_facets",
    "build_psu_facets",
    "build_case_facets",
    "build_cooling_facets",
]


def _count(value) -> Optional[str]:
    number = first_number(value)
    return format_number(number) if number > 0 else None


def _texts(product: Product) -> Sequence[str]:
    return (product.name, product.description)


# =============================================================================
# CPU
# =============================================================================

_RYZEN_RE = re.compile(r"ryzen\s*([3579])\b|\br([3579])\b")
_CORE_RE = re.compile(r"\bi-?([3579])\b")
_CORES_RE = re.compile(r"(\d+)[ -]?core", re.IGNORECASE)
_THREADS_RE = re.compile(r"(\d+)[ -]?thread", re.IGNORECASE)
_GHZ_RE = re.compile(r"(\d+(?:\.\d+)?)\s*ghz", re.IGNORECASE)


def cpu_series_label(text: str) -> Optional[str]:
    """Product line named in a CPU name or series ("Ryzen 5 5600X" -> "Ryzen 5")."""
    lower = (text or "").lower()
    match = _RYZEN_RE.search(lower)
    if match:
        return f"Ryzen {match.group(1) or match.group(2)}"
    if "threadripper" in lower:
        return "Threadripper"
    if "athlon" in lower:
        return "Athlon"
    match = _CORE_RE.search(lower)
    if match:
        return f"Core i{match.group(1)}"
    for line in ("pentium", "celeron", "xeon"):
        if line in lower:
            return line.capitalize()
    return None


CPU_LAYOUT = (
    FacetSpec("cpu_series", "Series", translation_key="categoryPage.filterGroups.series"),
    FacetSpec("socket", "Socket"),
    FacetSpec("cores", "Cores", order="numeric"),
    FacetSpec("threads", "Threads", order="numeric"),
    FacetSpec("frequency", "Base Clock", order="numeric"),
    FacetSpec("tdp", "TDP", order="numeric"),
    FacetSpec(
        "integrated_gpu",
        "Integrated Graphics",
        order="boolean",
        label_keys=("common.yes", "common.no"),
    ),
)


def _collect_cpu(product: Product, sink: OptionSink) -> None:
    detail = product.detail
    if isinstance(detail, CpuDetail):
        if detail.series:
            sink.add("cpu_series", cpu_series_label(detail.series) or detail.series, typed=True)
        sink.add("socket", detail.socket, typed=True)
        cores = _count(detail.cores)
        if cores:
            sink.add("cores", cores, f"{cores} Cores", typed=True)
        if detail.frequency:
            sink.add("frequency", f"{format_number(first_number(detail.frequency))} GHz", typed=True)
        sink.add("integrated_gpu", detail.integrated_gpu, typed=True)

    for key, value in spec_items(product):
        if "socket" in key:
            sink.add("socket", value)
        elif "core" in key and "clock" not in key:
            cores = _count(value)
            if cores:
                sink.add("cores", cores, f"{cores} Cores")
        elif "thread" in key and "multi" not in key:
            threads = _count(value)
            if threads:
                sink.add("threads", threads, f"{threads} Threads")
        elif "tdp" in key or ("power" in key and "watt" in key):
            watts = _count(value)
            sink.add("tdp", f"{watts}W" if watts else value)
        elif "series" in key or "family" in key:
            sink.add("cpu_series", cpu_series_label(value) or value)
        elif "integrated" in key or "igpu" in key:
            sink.add("integrated_gpu", value)
        elif ("clock" in key or "frequency" in key) and not any(
            word in key for word in ("boost", "turbo", "max")
        ):
            ghz = _GHZ_RE.search(value)
            sink.add("frequency", f"{ghz.group(1)} GHz" if ghz else value)

    if not sink.seen("cpu_series"):
        sink.add("cpu_series", cpu_series_label(product.name))
    if not sink.seen("cores"):
        match = search_text(_CORES_RE, *_texts(product))
        if match:
            sink.add("cores", match.group(1), f"{match.group(1)} Cores")
    if not sink.seen("threads"):
        match = search_text(_THREADS_RE, *_texts(product))
        if match:
            sink.add("threads", match.group(1), f"{match.group(1)} Threads")


CPU_FACETS = CategoryFacets("cpu", CPU_LAYOUT, _collect_cpu)


def build_cpu_facets(products: Sequence[Product], t: Optional[Translate] = None) -> List[FilterGroup]:
    """CPU facets. ``t`` also localizes the integrated graphics Yes/No labels."""
    return CPU_FACETS.build(products, t)


# =============================================================================
# GPU
# =============================================================================

_GPU_MODEL_PATTERNS = (
    (re.compile(r"(rtx\s*\d{4})\s*(ti|super)?", re.IGNORECASE), "RTX"),
    (re.compile(r"(gtx\s*\d{3,4})\s*(ti|super)?", re.IGNORECASE), "GTX"),
    (re.compile(r"(rx\s*\d{3,4})\s*(xt|xtx)?", re.IGNORECASE), "RX"),
    (re.compile(r"(arc\s*[ab]\d{3})", re.IGNORECASE), "Arc"),
)
_GB_RE = re.compile(r"(\d+)\s*gb", re.IGNORECASE)

# Memory keys feed both the generic memory facet and VRAM
GPU_SPEC_RULES = (
    SpecRule("memory_type", all_of=("memory", "type")),
    SpecRule("memory", any_of=("memory", "vram"), none_of=("clock", "bus", "speed"), also=("vram",)),
    SpecRule(
        "gpu_model",
        any_of=("model", "chip", "gpu"),
        none_of=("manufacturer", "brand", "vendor", "clock"),
    ),
) + GENERIC_SPEC_RULES

GPU_LAYOUT = (
    FacetSpec("gpu_series", "Series", translation_key="categoryPage.filterGroups.series"),
    FacetSpec("gpu_model", "GPU Model"),
    FacetSpec("vram", "Video Memory (VRAM)", order="capacity"),
    FacetSpec("memory_type", "Memory Type"),
)


def _gpu_model(text: str):
    for pattern, series in _GPU_MODEL_PATTERNS:
        match = pattern.search(text or "")
        if match:
            suffix = match.group(2) if pattern.groups > 1 else None
            model = re.sub(r"\s+", " ", match.group(1)).upper()
            if suffix:
                model = f"{model} {suffix.upper()}"
            return model, series
    return None


def _collect_gpu(product: Product, sink: OptionSink) -> None:
    detail = product.detail
    if isinstance(detail, GpuDetail):
        vram = _count(detail.video_memory_capacity)
        if vram:
            sink.add("vram", f"{vram}GB", typed=True)
        sink.add("memory_type", detail.memory_type, typed=True)
        if detail.chip_type:
            sink.add("gpu_model", detail.chip_type, typed=True)
            found = _gpu_model(detail.chip_type)
            if found:
                sink.add("gpu_series", found[1], f"{found[1]} Series", typed=True)

    collect_by_rules(
        product,
        sink,
        GPU_SPEC_RULES,
        {"vram": lambda value: (format_capacity(value), None)},
    )

    found = _gpu_model(product.name)
    if found:
        model, series = found
        if not sink.seen("gpu_model"):
            sink.add("gpu_model", model)
        sink.add("gpu_series", series, f"{series} Series")
    if not sink.seen("vram"):
        match = search_text(_GB_RE, *_texts(product))
        if match:
            sink.add("vram", f"{match.group(1)}GB")


GPU_FACETS = CategoryFacets("gpu", GPU_LAYOUT, _collect_gpu)


def build_gpu_facets(products: Sequence[Product], t: Optional[Translate] = None) -> List[FilterGroup]:
    return GPU_FACETS.build(products, t)


# =============================================================================
# Motherboard
# =============================================================================

_CHIPSET_RE = re.compile(r"\b([abhqxzw]\d{3}[em]?)\b", re.IGNORECASE)
_DDR_RE = re.compile(r"\b(ddr\d)\b", re.IGNORECASE)
_BOARD_FORM_FACTORS = (
    (("e-atx", "eatx", "extended atx"), "E-ATX"),
    (("micro-atx", "micro atx", "matx", "m-atx", "uatx"), "Micro-ATX"),
    (("mini-itx", "mini itx", "itx"), "Mini-ITX"),
    (("atx",), "ATX"),
)


def board_form_factor(text: str) -> Optional[str]:
    lower = (text or "").lower()
    for needles, label in _BOARD_FORM_FACTORS:
        if any(needle in lower for needle in needles):
            return label
    return None


MOTHERBOARD_RULES = (
    SpecRule("memory_type", all_of=("memory", "type")),
    SpecRule("memory_type", all_of=("ram", "type")),
    SpecRule("socket", any_of=("socket",)),
    SpecRule("chipset", any_of=("chipset",), none_of=("manufacturer",)),
    SpecRule("form_factor", all_of=("form", "factor"), exact=("form", "size")),
    SpecRule("wifi", any_of=("wifi", "wi-fi", "wlan", "wireless")),
)

MOTHERBOARD_LAYOUT = (
    FacetSpec("socket", "Socket"),
    FacetSpec("chipset", "Chipset"),
    FacetSpec("form_factor", "Form Factor"),
    FacetSpec("memory_type", "Memory Type"),
    FacetSpec("wifi", "WiFi", order="boolean"),
)


def _collect_motherboard(product: Product, sink: OptionSink) -> None:
    detail = product.detail
    if isinstance(detail, MotherboardDetail):
        sink.add("socket", detail.socket, typed=True)
        sink.add("memory_type", detail.memory_type_supported, typed=True)
        sink.add("wifi", detail.wifi_bluetooth, typed=True)

    collect_by_rules(
        product,
        sink,
        MOTHERBOARD_RULES,
        {
            "chipset": lambda value: (value.upper(), None),
            "form_factor": lambda value: (board_form_factor(value) or value, None),
        },
    )

    if not sink.seen("chipset"):
        match = search_text(_CHIPSET_RE, product.name)
        if match:
            sink.add("chipset", match.group(1).upper())
    if not sink.seen("form_factor"):
        sink.add("form_factor", board_form_factor(product.name))
    if not sink.seen("memory_type"):
        match = search_text(_DDR_RE, *_texts(product))
        if match:
            sink.add("memory_type", match.group(1).upper())
    if not sink.seen("wifi") and re.search(r"wi-?fi", product.name, re.IGNORECASE):
        sink.add("wifi", "yes")


MOTHERBOARD_FACETS = CategoryFacets("motherboard", MOTHERBOARD_LAYOUT, _collect_motherboard)


def build_motherboard_facets(
    products: Sequence[Product], t: Optional[Translate] = None
) -> List[FilterGroup]:
    return MOTHERBOARD_FACETS.build(products, t)


# =============================================================================
# RAM
# =============================================================================

_KIT_RE = re.compile(r"(\d+)\s*x\s*(\d+)\s*gb", re.IGNORECASE)
_MHZ_RE = re.compile(r"(\d{3,5})\s*(?:mhz|mt/s)", re.IGNORECASE)
_DDR_SPEED_RE = re.compile(r"ddr\d-(\d{4})", re.IGNORECASE)
_CL_RE = re.compile(r"\bc(?:l|as)\s?-?(\d{2})\b", re.IGNORECASE)

RAM_RULES = (
    SpecRule("memory_type", all_of=("type",)),
    SpecRule("capacity", any_of=("capacity", "size")),
    SpecRule("speed", any_of=("speed", "frequency", "mhz")),
    SpecRule("modules", any_of=("module", "sticks", "kit")),
    SpecRule("timing", any_of=("timing", "latency", "cas"), exact=("cl",)),
)

RAM_LAYOUT = (
    FacetSpec("capacity", "Capacity", order="capacity"),
    FacetSpec("memory_type", "Memory Type"),
    FacetSpec("speed", "Speed", order="numeric"),
    FacetSpec("modules", "Number of Modules", order="numeric"),
    FacetSpec("timing", "CL Timing", order="numeric"),
)


def _memory_type(value: str) -> Optional[tuple]:
    match = _DDR_RE.search(value)
    if match:
        return match.group(1).upper(), None
    return None


def _collect_ram(product: Product, sink: OptionSink) -> None:
    detail = product.detail
    if isinstance(detail, RamDetail):
        modules = _count(detail.module_count)
        if modules:
            sink.add("modules", modules, f"{modules} Modules", typed=True)
        sink.add("memory_type", detail.memory_type, typed=True)
        speed = _count(detail.max_frequency)
        if speed:
            sink.add("speed", f"{speed}MHz", typed=True)

    collect_by_rules(
        product,
        sink,
        RAM_RULES,
        {
            "memory_type": _memory_type,
            "capacity": lambda value: (format_capacity(value), None),
            "speed": with_unit("MHz", r"(\d{3,5})"),
            "modules": counted("Modules"),
            "timing": lambda value: (f"CL{_count(value)}", None) if _count(value) else None,
        },
    )

    kit = search_text(_KIT_RE, product.name)
    if not sink.seen("capacity"):
        if kit:
            total = int(kit.group(1)) * int(kit.group(2))
            sink.add("capacity", f"{total}GB")
        else:
            match = search_text(_GB_RE, product.name)
            if match:
                sink.add("capacity", f"{match.group(1)}GB")
    if not sink.seen("modules") and kit:
        sink.add("modules", kit.group(1), f"{kit.group(1)} Modules")
    if not sink.seen("speed"):
        match = search_text(_MHZ_RE, *_texts(product)) or search_text(_DDR_SPEED_RE, product.name)
        if match:
            sink.add("speed", f"{match.group(1)}MHz")
    if not sink.seen("memory_type"):
        match = search_text(_DDR_RE, product.name)
        if match:
            sink.add("memory_type", match.group(1).upper())
    if not sink.seen("timing"):
        match = search_text(_CL_RE, *_texts(product))
        if match:
            sink.add("timing", f"CL{match.group(1)}")


RAM_FACETS = CategoryFacets("ram", RAM_LAYOUT, _collect_ram)


def build_ram_facets(products: Sequence[Product], t: Optional[Translate] = None) -> List[FilterGroup]:
    return RAM_FACETS.build(products, t)


# =============================================================================
# Storage
# =============================================================================

_CAPACITY_TEXT_RE = re.compile(r"(\d+(?:\.\d+)?)\s*(tb|gb)\b", re.IGNORECASE)

STORAGE_RULES = (
    SpecRule("form_factor", all_of=("form", "factor"), exact=("form",)),
    SpecRule("storage_type", any_of=("type",)),
    SpecRule("capacity", any_of=("capacity", "size", "volume")),
    SpecRule("interface", any_of=("interface", "connection")),
)

STORAGE_LAYOUT = (
    FacetSpec("storage_type", "Type"),
    FacetSpec("capacity", "Capacity", order="capacity"),
    FacetSpec("form_factor", "Form Factor"),
    FacetSpec("interface", "Interface"),
)


def storage_type(text: str) -> Optional[str]:
    lower = (text or "").lower()
    if "nvme" in lower:
        return "NVMe SSD"
    if "ssd" in lower or "solid state" in lower:
        return "SATA SSD" if "sata" in lower else "SSD"
    if "hdd" in lower or "hard" in lower:
        return "HDD"
    return None


def drive_form_factor(text: str) -> Optional[str]:
    lower = (text or "").lower()
    if '2.5"' in lower or "2.5in" in lower or "2.5 in" in lower or "2.5-inch" in lower:
        return '2.5"'
    if '3.5"' in lower or "3.5in" in lower or "3.5 in" in lower or "3.5-inch" in lower:
        return '3.5"'
    if "m.2" in lower or "m2" in lower:
        return "M.2"
    return None


def drive_interface(text: str) -> Optional[str]:
    lower = (text or "").lower()
    if "sata" in lower:
        return "SATA"
    if any(word in lower for word in ("pcie", "pci-e", "pci express", "nvme")):
        return "PCIe"
    if "usb" in lower:
        return "USB"
    return None


def _collect_storage(product: Product, sink: OptionSink) -> None:
    detail = product.detail
    if isinstance(detail, StorageDetail):
        volume = _count(detail.volume)
        if volume:
            sink.add("capacity", format_capacity(f"{volume}GB"), typed=True)
        if detail.nvme:
            sink.add("storage_type", "NVMe SSD", typed=True)
        elif detail.type:
            sink.add("storage_type", storage_type(detail.type) or detail.type, typed=True)
        if detail.size:
            sink.add("form_factor", drive_form_factor(detail.size) or detail.size, typed=True)

    collect_by_rules(
        product,
        sink,
        STORAGE_RULES,
        {
            "storage_type": lambda value: (storage_type(value) or value, None),
            "capacity": lambda value: (format_capacity(value), None),
            "form_factor": lambda value: (drive_form_factor(value) or value, None),
            "interface": lambda value: (drive_interface(value) or value, None),
        },
    )

    if not sink.seen("capacity"):
        match = search_text(_CAPACITY_TEXT_RE, product.name)
        if match:
            sink.add("capacity", f"{match.group(1)}{match.group(2).upper()}")
    if not sink.seen("storage_type"):
        sink.add("storage_type", storage_type(product.name))
    if not sink.seen("form_factor"):
        sink.add("form_factor", drive_form_factor(product.name))
    if not sink.seen("interface"):
        sink.add("interface", drive_interface(product.name))


STORAGE_FACETS = CategoryFacets("storage", STORAGE_LAYOUT, _collect_storage)


def build_storage_facets(
    products: Sequence[Product], t: Optional[Translate] = None
) -> List[FilterGroup]:
    return STORAGE_FACETS.build(products, t)


# =============================================================================
# Power supply
# =============================================================================

_WATT_RE = re.compile(r"(\d{3,4})\s*w\b", re.IGNORECASE)
_EFFICIENCY_TIERS = ("titanium", "platinum", "gold", "silver", "bronze", "white")

PSU_RULES = (
    SpecRule("efficiency", any_of=("efficiency", "80+", "80 plus", "certification")),
    SpecRule("modularity", any_of=("modular",)),
    SpecRule("wattage", any_of=("wattage", "watt", "power"), exact=("w",)),
)

PSU_LAYOUT = (
    FacetSpec("wattage", "Wattage", order="numeric"),
    FacetSpec("efficiency", "Efficiency"),
    FacetSpec("modularity", "Modularity"),
)


def efficiency_rating(text: str, require_marker: bool = True) -> Optional[str]:
    """Normalized 80 PLUS rating ("80 PLUS Gold" -> "80+ Gold"), or None."""
    lower = (text or "").lower()
    has_marker = any(marker in lower for marker in ("80+", "80 plus", "80 +", "80plus"))
    if require_marker and not has_marker:
        return None
    for tier in _EFFICIENCY_TIERS:
        if tier in lower:
            return f"80+ {tier.capitalize()}"
    return "80+ Standard" if has_marker else None


def modularity(text: str) -> Optional[tuple]:
    lower = (text or "").lower().strip()
    if "semi" in lower:
        return "Semi", "Semi Modular"
    if "non" in lower or "not modular" in lower or lower in ("no", "false"):
        return "No", "Non-Modular"
    if "full" in lower or lower in ("yes", "true"):
        return "Full", "Fully Modular"
    return None


def _collect_psu(product: Product, sink: OptionSink) -> None:
    detail = product.detail
    if isinstance(detail, PsuDetail):
        watts = _count(detail.power)
        if watts:
            sink.add("wattage", f"{watts}W", typed=True)

    collect_by_rules(
        product,
        sink,
        PSU_RULES,
        {
            "wattage": with_unit("W", r"(\d+)"),
            "efficiency": lambda value: (efficiency_rating(value, require_marker=False) or value, None),
            "modularity": lambda value: modularity(value) or (value, None),
        },
    )

    name = product.name
    if not sink.seen("wattage"):
        match = search_text(_WATT_RE, *_texts(product))
        if match:
            sink.add("wattage", f"{match.group(1)}W")
    if not sink.seen("efficiency"):
        sink.add("efficiency", efficiency_rating(name))
    if not sink.seen("modularity") and "modular" in name.lower():
        found = modularity(name)
        if found:
            sink.add("modularity", found[0], found[1])


PSU_FACETS = CategoryFacets("psu", PSU_LAYOUT, _collect_psu)


def build_psu_facets(products: Sequence[Product], t: Optional[Translate] = None) -> List[FilterGroup]:
    return PSU_FACETS.build(products, t)


# =============================================================================
# Case
# =============================================================================

_CASE_FORM_FACTORS = (
    (("full tower", "full-tower"), "Full Tower"),
    (("mid tower", "mid-tower", "midi tower"), "Mid Tower"),
    (("mini tower", "mini-tower"), "Mini Tower"),
    (("small form factor", "sff"), "SFF"),
)

CASE_RULES = (
    SpecRule("form_factor", all_of=("form", "factor"), exact=("size", "form")),
    SpecRule("form_factor", any_of=("case type", "tower")),
    SpecRule("color", any_of=("color", "colour")),
    SpecRule("material", any_of=("material",)),
    SpecRule("side_panel", any_of=("side panel", "window", "glass")),
)

CASE_LAYOUT = (
    FacetSpec("form_factor", "Form Factor"),
    FacetSpec("color", "Color"),
    FacetSpec("material", "Material"),
    FacetSpec("side_panel", "Side Panel", order="boolean", true_label="Windowed", false_label="Solid"),
)


def case_form_factor(text: str) -> Optional[str]:
    lower = (text or "").lower()
    for needles, label in _CASE_FORM_FACTORS:
        if any(needle in lower for needle in needles):
            return label
    return None


def side_panel(value: str) -> Optional[tuple]:
    """Windowed side panels count as true, solid ones as false."""
    lower = value.lower()
    if any(word in lower for word in ("glass", "window", "acrylic", "mesh window")):
        return "true", None
    if any(word in lower for word in ("solid", "steel panel")):
        return "false", None
    return value, None


def _collect_case(product: Product, sink: OptionSink) -> None:
    detail = product.detail
    if isinstance(detail, CaseDetail):
        sink.add("color", detail.color, typed=True)
        sink.add("material", detail.material, typed=True)

    collect_by_rules(
        product,
        sink,
        CASE_RULES,
        {
            "form_factor": lambda value: (case_form_factor(value) or value, None),
            "side_panel": side_panel,
        },
    )

    if not sink.seen("form_factor"):
        sink.add("form_factor", case_form_factor(product.name))
    if not sink.seen("side_panel") and re.search(r"tempered glass|window", product.name, re.IGNORECASE):
        sink.add("side_panel", "true")


CASE_FACETS = CategoryFacets("case", CASE_LAYOUT, _collect_case)


def build_case_facets(products: Sequence[Product], t: Optional[Translate] = None) -> List[FilterGroup]:
    return CASE_FACETS.build(products, t)


# =============================================================================
# Cooling
# =============================================================================

_RADIATOR_RE = re.compile(r"\b(\d{3})\s*mm\b", re.IGNORECASE)
_FAN_MM_RE = re.compile(r"\b(\d{2,3})\s*mm\b", re.IGNORECASE)
_TDP_NAME_RE = re.compile(r"(\d+)\s*w\s*tdp", re.IGNORECASE)
_SOCKET_TOKEN_RE = re.compile(r"^(AM\d|LGA\s?\d{3,4}|TR\d|sTRX\d|FM\d)$", re.IGNORECASE)
_NAMED_SOCKETS = ("am4", "am5", "lga1700", "lga1851", "lga1200", "lga1151", "tr4")

COOLING_RULES = (
    SpecRule("radiator_size", any_of=("radiator", "rad size")),
    SpecRule("fan_size", all_of=("fan",), any_of=("size", "diameter")),
    SpecRule("fan_speed", any_of=("rpm", "fan speed")),
    SpecRule("pwm", any_of=("pwm",)),
    SpecRule("tdp", any_of=("tdp", "thermal design power")),
    SpecRule("socket", any_of=("socket", "compatibility")),
    SpecRule("cooling_type", any_of=("type", "cooling")),
)

COOLING_LAYOUT = (
    FacetSpec("cooling_type", "Cooling Type"),
    FacetSpec("radiator_size", "Radiator Size", order="numeric"),
    FacetSpec("socket", "Socket Compatibility"),
    FacetSpec("tdp", "TDP Rating", order="numeric"),
    FacetSpec("fan_size", "Fan Size", order="numeric"),
    FacetSpec("fan_speed", "Fan Speed", order="numeric"),
    FacetSpec("pwm", "PWM", order="boolean"),
)


def cooling_type(text: str) -> Optional[tuple]:
    lower = (text or "").lower()
    if any(word in lower for word in ("liquid", "water", "aio")):
        return "Liquid", "Liquid Cooling"
    if "air" in lower or "tower" in lower:
        return "Air", "Air Cooling"
    return None


def socket_tokens(value: str) -> List[str]:
    """Split "AM4/AM5, LGA1700" into recognised socket names."""
    tokens = []
    for part in re.split(r"[,/;|]", value):
        token = part.strip()
        if _SOCKET_TOKEN_RE.match(token):
            tokens.append(token.upper().replace(" ", ""))
    return tokens


def _collect_cooling(product: Product, sink: OptionSink) -> None:
    detail = product.detail
    if isinstance(detail, CoolingDetail):
        if detail.socket:
            sink.add_all("socket", socket_tokens(detail.socket) or [detail.socket], typed=True)
        fan = _count(detail.fan_diameter)
        if fan:
            sink.add("fan_size", f"{fan}mm", typed=True)
        speed = _count(detail.fan_speed)
        if speed:
            sink.add("fan_speed", f"{speed} RPM", typed=True)

    for key, value in spec_items(product):
        if "socket" in key or "compatibility" in key:
            sink.add_all("socket", socket_tokens(value))
    collect_by_rules(
        product,
        sink,
        COOLING_RULES,
        {
            "cooling_type": lambda value: cooling_type(value) or (value.title(), None),
            "radiator_size": with_unit("mm", r"(\d{2,3})"),
            "fan_size": with_unit("mm", r"(\d{2,3})"),
            "fan_speed": with_unit(" RPM", r"(\d+)"),
            "tdp": with_unit("W", r"(\d+)"),
            "socket": lambda value: None,
        },
    )

    name = product.name.lower()
    if not sink.seen("cooling_type"):
        found = cooling_type(name)
        if found:
            sink.add("cooling_type", found[0], found[1])
    if not sink.seen("radiator_size") and any(w in name for w in ("liquid", "water", "aio")):
        match = search_text(_RADIATOR_RE, product.name, product.description)
        if match:
            sink.add("radiator_size", f"{match.group(1)}mm")
    if not sink.seen("tdp"):
        match = search_text(_TDP_NAME_RE, *_texts(product))
        if match:
            sink.add("tdp", f"{match.group(1)}W")
    if not sink.seen("socket"):
        for socket in _NAMED_SOCKETS:
            if socket in name:
                sink.add("socket", socket.upper())
    if not sink.seen("fan_size") and not sink.seen("radiator_size"):
        match = search_text(_FAN_MM_RE, product.name)
        if match and int(match.group(1)) <= 200:
            sink.add("fan_size", f"{match.group(1)}mm")


COOLING_FACETS = CategoryFacets("cooling", COOLING_LAYOUT, _collect_cooling)


def build_cooling_facets(
    products: Sequence[Product], t: Optional[Translate] = None
) -> List[FilterGroup]:
    return COOLING_FACETS.build(products, t)
