"""Configuration and constants for the facet engine."""

import os
from typing import Dict, List, Tuple

__all__ = [
    "LOG_LEVEL",
    "LOG_DIR",
    "DEFAULT_SORT",
    "SORT_KEYS",
    "SPEC_KEY_ALIASES",
    "DETAIL_FIELD_ALIASES",
    "BRAND_SPEC_KEYS",
    "CPU_SERIES_EXCLUDED_BRANDS",
    "AMD_SERIES_MARKERS",
    "INTEL_SERIES_MARKERS",
    "KNOWN_BRANDS",
    "PERIPHERAL_DETAIL_FACETS",
    "BOOLEAN_FACETS",
    "TRUE_TOKENS",
    "FALSE_TOKENS",
    "FALLBACK_BUCKETS",
    "get_spec_aliases",
    "get_detail_fields",
]

# Logging (disabled unless setup_logging() is called)
LOG_LEVEL = os.getenv("FACETS_LOG_LEVEL", "INFO").upper()
LOG_DIR = os.getenv("FACETS_LOG_DIR", "")

# Sorting
DEFAULT_SORT = os.getenv("FACETS_DEFAULT_SORT", "price-asc")
SORT_KEYS: Tuple[str, ...] = (
    "price-asc",
    "price-desc",
    "name-asc",
    "name-desc",
    "rating-desc",
    "stock-desc",
)


# =============================================================================
# Alias tables
# =============================================================================
# Specification keys arrive in many spellings ("Memory Type", "memoryType",
# "memory_type"). Keys are compared in normalized form (see
# normalize.normalize_key), so each list only needs the distinct words.
# Adding a spelling here is enough to make it visible to lookups and filters.

SPEC_KEY_ALIASES: Dict[str, List[str]] = {
    "manufacturer": ["manufacturer", "brand", "make", "vendor", "company"],
    "socket": ["socket", "cpu socket", "socket type"],
    "cores": ["cores", "core count", "number of cores"],
    "threads": ["threads", "thread count"],
    "frequency": ["base clock", "frequency", "clock speed", "base frequency"],
    "boost_clock": ["boost clock", "max turbo frequency", "boost frequency"],
    "cache": ["cache", "l3 cache"],
    "tdp": ["tdp", "thermal design power"],
    "integrated_gpu": ["integrated graphics", "integrated gpu", "igpu"],
    "vram": ["vram", "memory size", "video memory"],
    "memory_type": ["memory type", "ram type", "memory standard"],
    "chipset": ["chipset"],
    "form_factor": ["form factor", "form-factor", "size class"],
    "wifi": ["wifi", "wi-fi", "wireless lan", "wireless"],
    "capacity": ["capacity", "size"],
    "speed": ["speed", "frequency"],
    "modules": ["modules", "module count", "sticks"],
    "timing": ["timing", "cas latency", "latency"],
    "interface": ["interface", "connection"],
    "wattage": ["wattage", "power", "output power"],
    "efficiency": ["efficiency", "80 plus", "80+"],
    "modularity": ["modular", "modularity"],
    "radiator_size": ["radiator", "radiator size", "rad size"],
    "fan_size": ["fan size", "fan diameter"],
    "fan_speed": ["fan speed", "rpm"],
    "pwm": ["pwm"],
    "color": ["color", "colour"],
    "material": ["material"],
    "side_panel": ["side panel", "window", "side window"],
    "switch_type": ["switch type", "switches", "switch"],
    "layout": ["layout"],
    "connection": ["connection", "connectivity", "connection type"],
    "connectivity": ["connectivity", "connection", "wireless", "bluetooth"],
    "platform": ["platform", "compatibility"],
    "rgb": ["rgb", "lighting", "backlight", "backlighting"],
    "vibration": ["vibration", "haptic"],
    "programmable": ["programmable", "customizable"],
    "numpad": ["numpad", "numeric keypad"],
    "dpi": ["dpi", "sensitivity"],
    "resolution": ["resolution"],
    "refresh_rate": ["refresh rate", "refresh"],
    "response_time": ["response time"],
    "panel_type": ["panel type", "panel", "display type"],
    "size": ["size", "screen size", "display size"],
    "pressure": ["pressure levels", "pressure", "sensitivity"],
    "os": ["os", "operating system", "platform"],
    "pen": ["pen support", "stylus", "digital pen"],
    "touch": ["touch", "touchscreen", "multi touch"],
    "type": ["type", "sub type", "category"],
}

# Typed detail attributes that carry a facet. Facet keys not listed here are
# looked up under their own name.
DETAIL_FIELD_ALIASES: Dict[str, List[str]] = {
    "vram": ["video_memory_capacity"],
    "gpu_model": ["chip_type"],
    "memory_type": ["memory_type", "memory_type_supported"],
    "wattage": ["power"],
    "capacity": ["volume"],
    "speed": ["max_frequency"],
    "modules": ["module_count"],
    "fan_size": ["fan_diameter"],
    "wifi": ["wifi_bluetooth"],
    "storage_type": ["type"],
    "cooling_type": [],
    "form_factor": ["form"],
    "noise_cancellation": ["noise_cancelling"],
    "connectivity": ["connection", "connections"],
    "interface": ["interface"],
    "focus": ["autofocus"],
    "power": ["total_wattage"],
    "panel_type": ["panel_type"],
    "refresh_rate": ["refresh_rate"],
    "size": ["size", "dimensions"],
}


def get_spec_aliases(canonical: str) -> List[str]:
    """Return the spelling variants registered for a canonical facet key."""
    aliases = SPEC_KEY_ALIASES.get(canonical, [])
    if canonical.replace("_", " ") in aliases:
        return list(aliases)
    return [canonical.replace("_", " ")] + list(aliases)


def get_detail_fields(canonical: str) -> List[str]:
    """Return typed detail attribute names that carry a canonical facet."""
    return DETAIL_FIELD_ALIASES.get(canonical, [canonical])


# =============================================================================
# Brand inference
# =============================================================================

BRAND_SPEC_KEYS: Tuple[str, ...] = (
    "brand",
    "manufacturer",
    "make",
    "company",
    "vendor",
    "chipset_manufacturer",
    "gpu_manufacturer",
    "memory_manufacturer",
)

# Product-line names that are sometimes captured as brands
CPU_SERIES_EXCLUDED_BRANDS: Tuple[str, ...] = (
    "ryzen",
    "core",
    "athlon",
    "fx",
    "pentium",
    "celeron",
    "xeon",
)

AMD_SERIES_MARKERS: Tuple[str, ...] = ("ryzen", "athlon", "fx", "threadripper")
INTEL_SERIES_MARKERS: Tuple[str, ...] = ("core", "pentium", "celeron", "xeon")

# Name-substring fallback, checked in order
KNOWN_BRANDS: Tuple[str, ...] = (
    "ASUS",
    "MSI",
    "Gigabyte",
    "ASRock",
    "EVGA",
    "Corsair",
    "Seasonic",
    "Cooler Master",
    "NZXT",
    "Fractal Design",
    "Lian Li",
    "Thermaltake",
    "be quiet!",
    "Noctua",
    "Arctic",
    "Samsung",
    "Crucial",
    "Western Digital",
    "Seagate",
    "Kingston",
    "G.Skill",
    "Team",
    "NVIDIA",
    "AMD",
    "Intel",
    "Sapphire",
    "XFX",
    "PowerColor",
    "Zotac",
    "Palit",
    "Phanteks",
    "Silverstone",
    "Antec",
    "DeepCool",
    "Scythe",
    "Zalman",
)


# =============================================================================
# Facet value handling
# =============================================================================

# Read straight from a peripheral detail when one is attached
PERIPHERAL_DETAIL_FACETS: Tuple[str, ...] = (
    "connection",
    "platform",
    "layout",
    "rgb",
    "vibration",
    "programmable",
)

BOOLEAN_FACETS: Tuple[str, ...] = (
    "integrated_gpu",
    "wifi",
    "pwm",
    "side_panel",
    "rgb",
    "numpad",
    "vibration",
    "programmable",
    "pen",
    "touch",
    "hdr",
    "curved",
    "stand",
    "bluetooth",
)

TRUE_TOKENS: Tuple[str, ...] = (
    "yes",
    "y",
    "true",
    "1",
    "on",
    "supported",
    "available",
    "included",
    "built-in",
    "integrated",
)
FALSE_TOKENS: Tuple[str, ...] = (
    "no",
    "n",
    "false",
    "0",
    "off",
    "none",
    "not supported",
    "unsupported",
    "not available",
    "not included",
)


# =============================================================================
# Generic fallback buckets
# =============================================================================
# Ordered: the first bucket whose keyword occurs in a spec name wins.

FALLBACK_BUCKETS: List[Dict[str, object]] = [
    {
        "type": "manufacturer",
        "title": "Manufacturer",
        "keywords": ["brand", "manufacturer", "make", "vendor"],
    },
    {
        "type": "performance",
        "title": "Performance",
        "keywords": [
            "speed", "clock", "frequency", "core", "thread", "boost",
            "tdp", "wattage", "power", "rpm", "latency",
        ],
    },
    {
        "type": "memory",
        "title": "Memory",
        "keywords": ["memory", "ram", "vram", "capacity", "cache", "storage"],
    },
    {
        "type": "display",
        "title": "Display",
        "keywords": ["resolution", "refresh", "panel", "screen", "display", "hdr"],
    },
    {
        "type": "connectivity",
        "title": "Connectivity",
        "keywords": [
            "connection", "connectivity", "interface", "port", "usb",
            "wireless", "bluetooth", "wifi", "socket",
        ],
    },
    {
        "type": "physical",
        "title": "Physical",
        "keywords": [
            "dimension", "weight", "color", "colour", "material", "form",
            "height", "width", "length", "size",
        ],
    },
    {
        "type": "features",
        "title": "Features",
        "keywords": ["rgb", "lighting", "led", "noise", "support", "feature", "modular"],
    },
]
