"""Facet builders for peripherals.

Most peripherals only carry free-form specifications, so their builders are
mostly rule tables. Gamepads, keyboards and tablets read well-known keys
through the alias table instead.
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
    with_unit,
)
from facets.models import (
    CameraDetail,
    FilterGroup,
    GamepadDetail,
    HeadphonesDetail,
    KeyboardDetail,
    MicrophoneDetail,
    MonitorDetail,
    MouseDetail,
    MousePadDetail,
    Product,
    SpeakerDetail,
)
from facets.normalize import first_number, format_number, search_text
from facets.specs import SpecRule, lookup_spec_values

__all__ = [
    "KEYBOARD_FACETS",
    "MOUSE_FACETS",
    "MOUSE_PAD_FACETS",
    "HEADPHONES_FACETS",
    "MONITOR_FACETS",
    "MICROPHONE_FACETS",
    "CAMERA_FACETS",
    "SPEAKER_FACETS",
    "GAMEPAD_FACETS",
    "TABLET_FACETS",
    "build_keyboard_facets",
    "build_mouse_facets",
    "build_mouse_pad_facets",
    "build_headphones_facets",
    "build_monitor_facets",
    "build_microphone_facets",
    "build_camera_facets",
    "build_speaker_facets",
    "build_gamepad_facets",
    "build_tablet_facets",
]


def _number_text(value) -> Optional[str]:
    number = first_number(value)
    return format_number(number) if number > 0 else None


def _add_aliased(product: Product, sink: OptionSink, facet: str, canonical: Optional[str] = None) -> None:
    """Add every specification value stored under an alias of ``canonical``."""
    sink.add_all(facet, lookup_spec_values(product, canonical or facet))


# =============================================================================
# Keyboard
# =============================================================================

_SWITCH_RE = re.compile(
    r"\b(cherry mx|gateron|kailh)\s+(red|blue|brown|black|silver|yellow|green|clear)\b",
    re.IGNORECASE,
)
_SWITCH_MAKERS = {"cherry mx": "Cherry MX", "gateron": "Gateron", "kailh": "Kailh"}
_SWITCH_KINDS = ("optical", "membrane", "mechanical")

KEYBOARD_LAYOUT = (
    FacetSpec("switch_type", "Switch Type"),
    FacetSpec("layout", "Layout"),
    FacetSpec("form_factor", "Form Factor"),
    FacetSpec("connection", "Connection"),
    FacetSpec("rgb", "RGB Lighting", order="boolean", true_label="RGB Lighting", false_label="No RGB"),
    FacetSpec("numpad", "Numpad", order="boolean"),
)

_KEYBOARD_SIZES = (
    (("full size", "full-size", "100%"), "Full Size"),
    (("tkl", "tenkeyless", "80%"), "TKL"),
    (("75%",), "75%"),
    (("65%",), "65%"),
    (("60%",), "60%"),
)


def keyboard_size(text: str) -> Optional[str]:
    lower = (text or "").lower()
    for needles, label in _KEYBOARD_SIZES:
        if any(needle in lower for needle in needles):
            return label
    return None


def _collect_keyboard(product: Product, sink: OptionSink) -> None:
    detail = product.detail
    if isinstance(detail, KeyboardDetail):
        sink.add("switch_type", detail.switch_type, typed=True)
        sink.add("layout", detail.layout, typed=True)
        sink.add("form_factor", detail.form, typed=True)
        sink.add("connection", detail.connection, typed=True)
        sink.add("rgb", detail.rgb, typed=True)
        sink.add("numpad", detail.numpad, typed=True)

    _add_aliased(product, sink, "switch_type")
    _add_aliased(product, sink, "layout")
    for value in lookup_spec_values(product, "form_factor"):
        sink.add("form_factor", keyboard_size(value) or value)
    _add_aliased(product, sink, "connection")
    _add_aliased(product, sink, "rgb")
    _add_aliased(product, sink, "numpad")

    name = product.name
    if not sink.seen("switch_type"):
        match = search_text(_SWITCH_RE, name)
        if match:
            maker = _SWITCH_MAKERS[re.sub(r"\s+", " ", match.group(1).lower())]
            sink.add("switch_type", f"{maker} {match.group(2).title()}")
        else:
            for kind in _SWITCH_KINDS:
                if kind in name.lower():
                    sink.add("switch_type", kind.title())
                    break
    if not sink.seen("form_factor"):
        size = keyboard_size(name)
        sink.add("form_factor", size)
        if size in ("TKL", "75%", "65%", "60%") and not sink.seen("numpad"):
            sink.add("numpad", "no")
    if not sink.seen("connection"):
        lower = name.lower()
        if "wireless" in lower or "bluetooth" in lower:
            sink.add("connection", "Wireless")
    if not sink.seen("rgb") and "rgb" in name.lower():
        sink.add("rgb", "yes")


KEYBOARD_FACETS = CategoryFacets("keyboard", KEYBOARD_LAYOUT, _collect_keyboard)


def build_keyboard_facets(
    products: Sequence[Product], t: Optional[Translate] = None
) -> List[FilterGroup]:
    return KEYBOARD_FACETS.build(products, t)


# =============================================================================
# Mouse
# =============================================================================

MOUSE_RULES = (
    SpecRule("dpi", any_of=("dpi", "sensitivity")),
    SpecRule("sensor", any_of=("sensor", "tracking")),
    SpecRule("buttons", any_of=("button",)),
    SpecRule("connectivity", any_of=("connectivity", "connection", "wireless", "bluetooth")),
    SpecRule("weight", any_of=("weight",)),
    SpecRule("design", any_of=("ergonomic", "shape", "design", "grip")),
)

MOUSE_LAYOUT = (
    FacetSpec("dpi", "DPI", order="numeric"),
    FacetSpec("sensor", "Sensor Type"),
    FacetSpec("buttons", "Buttons", order="numeric"),
    FacetSpec("connectivity", "Connectivity"),
    FacetSpec("weight", "Weight", order="numeric"),
    FacetSpec("design", "Design"),
)


def _collect_mouse(product: Product, sink: OptionSink) -> None:
    detail = product.detail
    if isinstance(detail, MouseDetail):
        dpi = _number_text(detail.dpi)
        if dpi:
            sink.add("dpi", dpi, f"{dpi} DPI", typed=True)
        sink.add("sensor", detail.sensor, typed=True)
        buttons = _number_text(detail.buttons)
        if buttons:
            sink.add("buttons", buttons, typed=True)
        sink.add("connectivity", detail.connection, typed=True)
        weight = _number_text(detail.weight)
        if weight:
            sink.add("weight", f"{weight}g", typed=True)
        sink.add("design", detail.category, typed=True)

    collect_by_rules(product, sink, MOUSE_RULES, {"dpi": counted("DPI")})

    if not sink.seen("dpi"):
        match = search_text(re.compile(r"(\d{3,5})\s*dpi", re.IGNORECASE), product.name, product.description)
        if match:
            sink.add("dpi", match.group(1), f"{match.group(1)} DPI")
    if not sink.seen("connectivity"):
        lower = product.name.lower()
        if "wireless" in lower:
            sink.add("connectivity", "Wireless")
        elif "wired" in lower:
            sink.add("connectivity", "Wired")


MOUSE_FACETS = CategoryFacets("mouse", MOUSE_LAYOUT, _collect_mouse)


def build_mouse_facets(products: Sequence[Product], t: Optional[Translate] = None) -> List[FilterGroup]:
    return MOUSE_FACETS.build(products, t)


# =============================================================================
# Mouse pad
# =============================================================================

MOUSE_PAD_RULES = (
    SpecRule("rgb", any_of=("rgb", "lighting", "led")),
    SpecRule("thickness", any_of=("thick",)),
    SpecRule("size", any_of=("size", "dimension", "width", "height")),
    SpecRule("material", any_of=("material", "fabric", "cloth", "rubber")),
    SpecRule("surface", any_of=("surface", "texture", "finish")),
    SpecRule("thickness", any_of=("mm",)),
)

MOUSE_PAD_LAYOUT = (
    FacetSpec("size", "Size"),
    FacetSpec("material", "Material"),
    FacetSpec("surface", "Surface Type"),
    FacetSpec("thickness", "Thickness", order="numeric"),
    FacetSpec("rgb", "RGB Lighting", order="boolean", true_label="RGB Lighting", false_label="No RGB"),
)


def _collect_mouse_pad(product: Product, sink: OptionSink) -> None:
    detail = product.detail
    if isinstance(detail, MousePadDetail):
        sink.add("size", detail.dimensions, typed=True)
        sink.add("material", detail.material, typed=True)
        sink.add("surface", detail.surface, typed=True)
        thickness = _number_text(detail.thickness)
        if thickness:
            sink.add("thickness", f"{thickness}mm", typed=True)
        sink.add("rgb", detail.rgb, typed=True)

    collect_by_rules(product, sink, MOUSE_PAD_RULES, {"thickness": with_unit("mm")})

    lower = product.name.lower()
    if not sink.seen("size"):
        for size in ("xxl", "xl", "extended", "large", "medium", "small"):
            if re.search(rf"\b{size}\b", lower):
                sink.add("size", size.upper() if size.startswith("x") else size.title())
                break
    if not sink.seen("rgb") and "rgb" in lower:
        sink.add("rgb", "yes")


MOUSE_PAD_FACETS = CategoryFacets("mouse_pad", MOUSE_PAD_LAYOUT, _collect_mouse_pad, brand_title="Brands")


def build_mouse_pad_facets(
    products: Sequence[Product], t: Optional[Translate] = None
) -> List[FilterGroup]:
    return MOUSE_PAD_FACETS.build(products, t)


# =============================================================================
# Headphones
# =============================================================================

HEADPHONES_RULES = (
    SpecRule("noise_cancellation", any_of=("noise", "anc", "cancellation")),
    SpecRule("surround", any_of=("surround", "spatial", "7.1", "5.1")),
    SpecRule("microphone", any_of=("microphone", "mic")),
    SpecRule("connectivity", any_of=("connectivity", "connection", "wireless", "bluetooth")),
    SpecRule("type", any_of=("type", "driver", "sound")),
)

HEADPHONES_LAYOUT = (
    FacetSpec("type", "Type"),
    FacetSpec("connectivity", "Connectivity"),
    FacetSpec("microphone", "Microphone", order="boolean"),
    FacetSpec("noise_cancellation", "Noise Cancellation", order="boolean"),
    FacetSpec("surround", "Surround Sound"),
)


def _collect_headphones(product: Product, sink: OptionSink) -> None:
    detail = product.detail
    if isinstance(detail, HeadphonesDetail):
        sink.add("type", detail.type, typed=True)
        sink.add("connectivity", detail.connection, typed=True)
        sink.add("microphone", detail.microphone, typed=True)
        sink.add("noise_cancellation", detail.noise_cancelling, typed=True)

    collect_by_rules(product, sink, HEADPHONES_RULES)

    lower = product.name.lower()
    if not sink.seen("type"):
        for needle, label in (("in-ear", "In-Ear"), ("earbuds", "In-Ear"), ("on-ear", "On-Ear"), ("over-ear", "Over-Ear")):
            if needle in lower:
                sink.add("type", label)
                break
    if not sink.seen("connectivity") and ("wireless" in lower or "bluetooth" in lower):
        sink.add("connectivity", "Wireless")
    if not sink.seen("surround"):
        match = re.search(r"\b([57]\.1)\b", lower)
        if match:
            sink.add("surround", match.group(1))


HEADPHONES_FACETS = CategoryFacets("headphones", HEADPHONES_LAYOUT, _collect_headphones)


def build_headphones_facets(
    products: Sequence[Product], t: Optional[Translate] = None
) -> List[FilterGroup]:
    return HEADPHONES_FACETS.build(products, t)


# =============================================================================
# Monitor
# =============================================================================

_INCH_RE = re.compile(r"(\d{2}(?:\.\d)?)\s*(?:\"|''|inch|in\b|”)", re.IGNORECASE)
_HZ_RE = re.compile(r"(\d{2,3})\s*hz", re.IGNORECASE)
_RESOLUTIONS = (
    (("3840x2160", "3840 x 2160", "4k", "uhd"), "3840x2160"),
    (("3440x1440", "3440 x 1440", "uwqhd"), "3440x1440"),
    (("2560x1440", "2560 x 1440", "1440p", "qhd", "wqhd"), "2560x1440"),
    (("1920x1080", "1920 x 1080", "1080p", "full hd", "fhd"), "1920x1080"),
)
_PANELS = ("ips", "va", "tn", "oled")

MONITOR_RULES = (
    SpecRule("resolution", any_of=("resolution",)),
    SpecRule("refresh_rate", any_of=("refresh", "hz")),
    SpecRule("panel_type", any_of=("panel", "display type", "matrix")),
    SpecRule("size", any_of=("size", "inch", "diagonal")),
    SpecRule("hdr", any_of=("hdr", "high dynamic range")),
    SpecRule("sync_tech", any_of=("sync", "g-sync", "freesync", "adaptive")),
    SpecRule("response_time", all_of=("response",)),
)

MONITOR_LAYOUT = (
    FacetSpec("resolution", "Resolution"),
    FacetSpec("refresh_rate", "Refresh Rate", order="numeric"),
    FacetSpec("panel_type", "Panel Type"),
    FacetSpec("size", "Size", order="numeric"),
    FacetSpec("response_time", "Response Time", order="numeric"),
    FacetSpec("hdr", "HDR", order="boolean"),
    FacetSpec("sync_tech", "Sync Technology"),
)


def monitor_resolution(text: str) -> Optional[str]:
    lower = (text or "").lower()
    for needles, label in _RESOLUTIONS:
        if any(needle in lower for needle in needles):
            return label
    return None


def _hdr_value(value: str):
    # "HDR10" and "DisplayHDR 400" mean supported
    lower = value.lower()
    if "hdr" in lower:
        return "true", None
    return value, None


def _collect_monitor(product: Product, sink: OptionSink) -> None:
    detail = product.detail
    if isinstance(detail, MonitorDetail):
        sink.add("resolution", monitor_resolution(detail.resolution or "") or detail.resolution, typed=True)
        refresh = _number_text(detail.refresh_rate)
        if refresh:
            sink.add("refresh_rate", f"{refresh}Hz", typed=True)
        if detail.panel_type:
            sink.add("panel_type", detail.panel_type.upper(), typed=True)
        size = _number_text(detail.size)
        if size:
            sink.add("size", f'{size}"', typed=True)
        response = _number_text(detail.response_time)
        if response:
            sink.add("response_time", f"{response}ms", typed=True)
        sink.add("hdr", detail.hdr, typed=True)

    collect_by_rules(
        product,
        sink,
        MONITOR_RULES,
        {
            "resolution": lambda value: (monitor_resolution(value) or value, None),
            "refresh_rate": with_unit("Hz", r"(\d+)"),
            "size": with_unit('"', r"(\d+(?:\.\d+)?)"),
            "response_time": with_unit("ms"),
            "hdr": _hdr_value,
        },
    )

    name = product.name
    if not sink.seen("resolution"):
        sink.add("resolution", monitor_resolution(name))
    if not sink.seen("refresh_rate"):
        match = search_text(_HZ_RE, name, product.description)
        if match:
            sink.add("refresh_rate", f"{match.group(1)}Hz")
    if not sink.seen("size"):
        match = search_text(_INCH_RE, name)
        if match:
            sink.add("size", f'{match.group(1)}"')
    if not sink.seen("panel_type"):
        for panel in _PANELS:
            if re.search(rf"\b{panel}\b", name, re.IGNORECASE):
                sink.add("panel_type", panel.upper())
                break


MONITOR_FACETS = CategoryFacets("monitor", MONITOR_LAYOUT, _collect_monitor)


def build_monitor_facets(
    products: Sequence[Product], t: Optional[Translate] = None
) -> List[FilterGroup]:
    return MONITOR_FACETS.build(products, t)


# =============================================================================
# Microphone
# =============================================================================

MICROPHONE_RULES = (
    SpecRule("pattern", any_of=("pattern", "pickup", "directional", "cardioid", "polar")),
    SpecRule("connection", any_of=("connection", "interface", "usb", "xlr")),
    SpecRule("type", any_of=("type", "condenser", "dynamic")),
)

MICROPHONE_LAYOUT = (
    FacetSpec("type", "Type"),
    FacetSpec("pattern", "Pickup Pattern"),
    FacetSpec("connection", "Connection"),
)


def _collect_microphone(product: Product, sink: OptionSink) -> None:
    detail = product.detail
    if isinstance(detail, MicrophoneDetail):
        sink.add("type", detail.type, typed=True)
        sink.add("pattern", detail.pattern, typed=True)
        sink.add("connection", detail.interface, typed=True)

    collect_by_rules(product, sink, MICROPHONE_RULES)

    lower = product.name.lower()
    if not sink.seen("type"):
        for kind in ("condenser", "dynamic", "ribbon"):
            if kind in lower:
                sink.add("type", kind.title())
                break
    if not sink.seen("connection"):
        if "xlr" in lower and "usb" in lower:
            sink.add("connection", "USB/XLR")
        elif "xlr" in lower:
            sink.add("connection", "XLR")
        elif "usb" in lower:
            sink.add("connection", "USB")


MICROPHONE_FACETS = CategoryFacets("microphone", MICROPHONE_LAYOUT, _collect_microphone)


def build_microphone_facets(
    products: Sequence[Product], t: Optional[Translate] = None
) -> List[FilterGroup]:
    return MICROPHONE_FACETS.build(products, t)


# =============================================================================
# Camera
# =============================================================================

_CAMERA_RESOLUTION_RE = re.compile(r"\b(4k|2160p|1440p|1080p|720p)\b", re.IGNORECASE)
_FPS_RE = re.compile(r"(\d{2,3})\s*fps", re.IGNORECASE)

CAMERA_RULES = (
    SpecRule("resolution", any_of=("resolution", "video quality", "pixel")),
    SpecRule("fps", any_of=("fps", "frame")),
    SpecRule("connection", any_of=("connection", "interface", "usb", "wireless")),
    SpecRule("focus", any_of=("focus",)),
    SpecRule("fov", any_of=("fov", "field of view", "angle")),
    SpecRule("microphone", any_of=("microphone", "mic", "audio")),
)

CAMERA_LAYOUT = (
    FacetSpec("resolution", "Resolution"),
    FacetSpec("fps", "Frame Rate", order="numeric"),
    FacetSpec("connection", "Connection"),
    FacetSpec("focus", "Focus Type"),
    FacetSpec("fov", "Field of View", order="numeric"),
    FacetSpec("microphone", "Microphone", order="boolean", true_label="Built-in", false_label="None"),
)


def _focus_value(value: str):
    lower = value.lower()
    if "auto" in lower:
        return "Auto", "Autofocus"
    if "fixed" in lower:
        return "Fixed", "Fixed Focus"
    if "manual" in lower:
        return "Manual", "Manual Focus"
    if lower in ("yes", "true"):
        return "Auto", "Autofocus"
    if lower in ("no", "false"):
        return "Fixed", "Fixed Focus"
    return value, None


def _collect_camera(product: Product, sink: OptionSink) -> None:
    detail = product.detail
    if isinstance(detail, CameraDetail):
        sink.add("resolution", detail.resolution, typed=True)
        fps = _number_text(detail.fps)
        if fps:
            sink.add("fps", f"{fps} fps", typed=True)
        fov = _number_text(detail.fov)
        if fov:
            sink.add("fov", f"{fov}°", typed=True)
        sink.add("microphone", detail.microphone, typed=True)
        sink.add("connection", detail.connection, typed=True)
        if detail.autofocus is not None:
            focus = _focus_value("auto" if detail.autofocus else "fixed")
            sink.add("focus", focus[0], focus[1], typed=True)

    collect_by_rules(
        product,
        sink,
        CAMERA_RULES,
        {
            "fps": with_unit(" fps", r"(\d+)"),
            "fov": with_unit("°", r"(\d+)"),
            "focus": _focus_value,
        },
    )

    if not sink.seen("resolution"):
        match = search_text(_CAMERA_RESOLUTION_RE, product.name, product.description)
        if match:
            sink.add("resolution", match.group(1).upper() if match.group(1).lower() == "4k" else match.group(1))
    if not sink.seen("fps"):
        match = search_text(_FPS_RE, product.name, product.description)
        if match:
            sink.add("fps", f"{match.group(1)} fps")


CAMERA_FACETS = CategoryFacets("camera", CAMERA_LAYOUT, _collect_camera)


def build_camera_facets(products: Sequence[Product], t: Optional[Translate] = None) -> List[FilterGroup]:
    return CAMERA_FACETS.build(products, t)


# =============================================================================
# Speakers
# =============================================================================

_CHANNELS_RE = re.compile(r"\b([257]\.[01])\b")

SPEAKER_RULES = (
    SpecRule("rgb", any_of=("rgb", "lighting", "led")),
    SpecRule("channels", any_of=("channel", "2.0", "2.1", "5.1", "7.1")),
    SpecRule("frequency", any_of=("frequency", "hz", "response")),
    SpecRule("power", any_of=("power", "watt", "rms")),
    SpecRule("connectivity", any_of=("connectivity", "connection", "bluetooth", "wireless", "usb", "aux")),
    SpecRule("type", any_of=("type", "configuration", "bookshelf", "tower")),
)

SPEAKER_LAYOUT = (
    FacetSpec("type", "Speaker Type"),
    FacetSpec("power", "Power", order="numeric"),
    FacetSpec("connectivity", "Connectivity"),
    FacetSpec("channels", "Channels", order="numeric"),
    FacetSpec("frequency", "Frequency Response"),
    FacetSpec("rgb", "RGB Lighting", order="boolean", true_label="RGB Lighting", false_label="No RGB"),
)


def _collect_speaker(product: Product, sink: OptionSink) -> None:
    detail = product.detail
    if isinstance(detail, SpeakerDetail):
        sink.add("type", detail.type, typed=True)
        power = _number_text(detail.total_wattage)
        if power:
            sink.add("power", f"{power}W", typed=True)
        sink.add("connectivity", detail.connections, typed=True)
        sink.add("frequency", detail.frequency, typed=True)

    collect_by_rules(product, sink, SPEAKER_RULES, {"power": with_unit("W", r"(\d+)")})

    if not sink.seen("channels"):
        match = search_text(_CHANNELS_RE, product.name)
        if match:
            sink.add("channels", match.group(1))
    if not sink.seen("power"):
        match = search_text(re.compile(r"(\d+)\s*w\b", re.IGNORECASE), product.name)
        if match:
            sink.add("power", f"{match.group(1)}W")


SPEAKER_FACETS = CategoryFacets("speaker", SPEAKER_LAYOUT, _collect_speaker)


def build_speaker_facets(
    products: Sequence[Product], t: Optional[Translate] = None
) -> List[FilterGroup]:
    return SPEAKER_FACETS.build(products, t)


# =============================================================================
# Gamepad
# =============================================================================

GAMEPAD_LAYOUT = (
    FacetSpec("connection", "Connection"),
    FacetSpec("platform", "Platform"),
    FacetSpec("layout", "Layout"),
    FacetSpec("rgb", "RGB Lighting", order="boolean", true_label="RGB Lighting", false_label="No RGB"),
    FacetSpec(
        "vibration",
        "Vibration",
        order="boolean",
        true_label="Vibration Support",
        false_label="No Vibration",
    ),
    FacetSpec(
        "programmable",
        "Programmable",
        order="boolean",
        true_label="Programmable",
        false_label="Not Programmable",
    ),
)


def _collect_gamepad(product: Product, sink: OptionSink) -> None:
    detail = product.detail
    if isinstance(detail, GamepadDetail):
        for facet in ("connection", "platform", "layout", "rgb", "vibration", "programmable"):
            sink.add(facet, detail.get(facet), typed=True)

    for facet in ("connection", "platform", "rgb", "vibration", "programmable"):
        _add_aliased(product, sink, facet)
    # Gamepads describe their layout under "type" as often as "layout"
    sink.add_all("layout", lookup_spec_values(product, "layout") or lookup_spec_values(product, "type"))


GAMEPAD_FACETS = CategoryFacets("gamepad", GAMEPAD_LAYOUT, _collect_gamepad, brand_title="Brand")


def build_gamepad_facets(
    products: Sequence[Product], t: Optional[Translate] = None
) -> List[FilterGroup]:
    return GAMEPAD_FACETS.build(products, t)


# =============================================================================
# Tablet
# =============================================================================

TABLET_LAYOUT = (
    FacetSpec("type", "Type"),
    FacetSpec("size", "Screen Size", order="numeric"),
    FacetSpec("pressure", "Pressure Sensitivity", order="numeric"),
    FacetSpec("connectivity", "Connectivity"),
    FacetSpec("os", "Operating System"),
    FacetSpec("pen", "Pen Support", order="boolean"),
    FacetSpec("touch", "Touch Support", order="boolean"),
)


def _collect_tablet(product: Product, sink: OptionSink) -> None:
    _add_aliased(product, sink, "type")
    _add_aliased(product, sink, "size")
    for value in lookup_spec_values(product, "pressure"):
        levels = _number_text(value)
        if levels:
            sink.add("pressure", levels, f"{levels} Levels")
    _add_aliased(product, sink, "connectivity")
    _add_aliased(product, sink, "os")
    _add_aliased(product, sink, "pen")
    _add_aliased(product, sink, "touch")

    if not sink.seen("size"):
        match = search_text(_INCH_RE, product.name)
        if match:
            sink.add("size", f'{match.group(1)}"')


TABLET_FACETS = CategoryFacets("tablet", TABLET_LAYOUT, _collect_tablet, brand_title="Brand")


def build_tablet_facets(products: Sequence[Product], t: Optional[Translate] = None) -> List[FilterGroup]:
    return TABLET_FACETS.build(products, t)
