"""Product category registry and classifier.

Each category maps URL slugs and category-name patterns to the facet builder
that runs on its pages. Registry order is classifier precedence: the first
category whose slug or name matches wins, so only one builder runs per page.
"""

from typing import Any, Dict, List, Optional

from facets.component_facets import (
    CASE_FACETS,
    COOLING_FACETS,
    CPU_FACETS,
    GPU_FACETS,
    MOTHERBOARD_FACETS,
    PSU_FACETS,
    RAM_FACETS,
    STORAGE_FACETS,
)
from facets.facet_groups import CategoryFacets
from facets.peripheral_facets import (
    CAMERA_FACETS,
    GAMEPAD_FACETS,
    HEADPHONES_FACETS,
    KEYBOARD_FACETS,
    MICROPHONE_FACETS,
    MONITOR_FACETS,
    MOUSE_FACETS,
    MOUSE_PAD_FACETS,
    SPEAKER_FACETS,
    TABLET_FACETS,
)

__all__ = [
    "CATEGORY_REGISTRY",
    "get_category_config",
    "get_all_category_names",
    "matches_category",
    "classify_category",
    "get_category_facets",
]


# =============================================================================
# Category Definitions
# =============================================================================
# Each category defines:
#   - display_name: Human-readable name
#   - slugs: URL slugs that select the category exactly
#   - name_patterns: Substrings of the lower-cased category name
#   - exclude_patterns: Substrings that veto a name match
#   - facets: The CategoryFacets builder for the category's pages

CATEGORY_REGISTRY: Dict[str, Dict[str, Any]] = {
    "gpu": {
        "display_name": "Graphics Cards",
        "slugs": ["graphics-cards", "gpu", "gpus", "video-cards"],
        "name_patterns": ["gpu", "graphics", "video card"],
        "exclude_patterns": ["tablet"],
        "facets": GPU_FACETS,
    },
    "keyboard": {
        "display_name": "Keyboards",
        "slugs": ["keyboards", "keyboard"],
        "name_patterns": ["keyboard"],
        "exclude_patterns": [],
        "facets": KEYBOARD_FACETS,
    },
    "mouse": {
        "display_name": "Mice",
        "slugs": ["mice", "mouse", "mouses"],
        "name_patterns": ["mouse", "mice"],
        "exclude_patterns": ["pad", "mat"],
        "facets": MOUSE_FACETS,
    },
    "mouse_pad": {
        "display_name": "Mouse Pads",
        "slugs": ["mouse-pads", "mousepads", "mouse-pad", "mousepad"],
        "name_patterns": ["mouse pad", "mousepad", "mouse mat"],
        "exclude_patterns": [],
        "facets": MOUSE_PAD_FACETS,
    },
    "headphones": {
        "display_name": "Headphones",
        "slugs": ["headphones", "headsets", "headset"],
        "name_patterns": ["headphone", "headset", "earbud"],
        "exclude_patterns": [],
        "facets": HEADPHONES_FACETS,
    },
    "monitor": {
        "display_name": "Monitors",
        "slugs": ["monitors", "monitor", "displays"],
        "name_patterns": ["monitor", "display"],
        "exclude_patterns": [],
        "facets": MONITOR_FACETS,
    },
    "microphone": {
        "display_name": "Microphones",
        "slugs": ["microphones", "microphone", "mics"],
        "name_patterns": ["microphone", "mic"],
        "exclude_patterns": [],
        "facets": MICROPHONE_FACETS,
    },
    "camera": {
        "display_name": "Cameras",
        "slugs": ["cameras", "camera", "webcams", "webcam"],
        "name_patterns": ["camera", "webcam"],
        "exclude_patterns": [],
        "facets": CAMERA_FACETS,
    },
    "speaker": {
        "display_name": "Speakers",
        "slugs": ["speakers", "speaker"],
        "name_patterns": ["speaker"],
        "exclude_patterns": [],
        "facets": SPEAKER_FACETS,
    },
    "gamepad": {
        "display_name": "Gamepads",
        "slugs": ["gamepads", "gamepad", "controllers"],
        "name_patterns": ["gamepad", "controller", "joystick"],
        "exclude_patterns": [],
        "facets": GAMEPAD_FACETS,
    },
    "cpu": {
        "display_name": "Processors",
        "slugs": ["processors", "cpu", "cpus"],
        "name_patterns": ["cpu", "processor"],
        "exclude_patterns": ["cool"],
        "facets": CPU_FACETS,
    },
    "motherboard": {
        "display_name": "Motherboards",
        "slugs": ["motherboards", "motherboard", "mainboards"],
        "name_patterns": ["motherboard", "mainboard"],
        "exclude_patterns": [],
        "facets": MOTHERBOARD_FACETS,
    },
    "ram": {
        "display_name": "Memory",
        "slugs": ["memory", "ram"],
        "name_patterns": ["ram", "memory"],
        "exclude_patterns": [],
        "facets": RAM_FACETS,
    },
    "storage": {
        "display_name": "Storage",
        "slugs": ["storage", "ssd", "hdd", "drives"],
        "name_patterns": ["storage", "ssd", "hdd", "drive"],
        "exclude_patterns": [],
        "facets": STORAGE_FACETS,
    },
    "psu": {
        "display_name": "Power Supplies",
        "slugs": ["power-supplies", "psu", "psus"],
        "name_patterns": ["power supply", "psu"],
        "exclude_patterns": [],
        "facets": PSU_FACETS,
    },
    "case": {
        "display_name": "Cases",
        "slugs": ["cases", "case", "pc-cases"],
        "name_patterns": ["case", "chassis"],
        "exclude_patterns": [],
        "facets": CASE_FACETS,
    },
    "cooling": {
        "display_name": "Cooling",
        "slugs": ["cooling", "coolers", "cpu-coolers", "cooler"],
        "name_patterns": ["cool", "fan"],
        "exclude_patterns": [],
        "facets": COOLING_FACETS,
    },
    "tablet": {
        "display_name": "Graphics Tablets",
        "slugs": ["tablets", "tablet", "graphics-tablets"],
        "name_patterns": ["tablet"],
        "exclude_patterns": [],
        "facets": TABLET_FACETS,
    },
}


# =============================================================================
# Helper Functions
# =============================================================================


def get_category_config(category: str) -> Optional[Dict[str, Any]]:
    """Get configuration for a specific category.

    Args:
        category: Category key (e.g., "gpu", "mouse_pad").

    Returns:
        Category configuration dict or None if not found.
    """
    return CATEGORY_REGISTRY.get(category)


def get_all_category_names() -> List[str]:
    """Category keys in classifier precedence order."""
    return list(CATEGORY_REGISTRY.keys())


def matches_category(config: Dict[str, Any], slug: str = "", name: str = "") -> bool:
    """Whether a slug or category name selects a registry entry.

    Slugs match exactly (case-insensitive). Names match when they contain a
    name pattern and none of the exclude patterns.
    """
    slug_lower = (slug or "").strip().lower()
    if slug_lower and slug_lower in config["slugs"]:
        return True
    name_lower = (name or "").strip().lower()
    if not name_lower:
        return False
    if any(pattern in name_lower for pattern in config.get("exclude_patterns", [])):
        return False
    return any(pattern in name_lower for pattern in config["name_patterns"])


def classify_category(slug: str = "", name: str = "") -> Optional[str]:
    """Return the key of the first category matching a slug or name.

    Args:
        slug: URL slug of the category page.
        name: Human-readable category name.

    Returns:
        Category key, or None when no builder applies.
    """
    for key, config in CATEGORY_REGISTRY.items():
        if matches_category(config, slug, name):
            return key
    return None


def get_category_facets(slug: str = "", name: str = "") -> Optional[CategoryFacets]:
    """The facet builder for a category page, if one matches."""
    key = classify_category(slug, name)
    if key is None:
        return None
    return CATEGORY_REGISTRY[key]["facets"]
