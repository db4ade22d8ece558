"""Data models for catalog products and filter facets."""

from dataclasses import dataclass, field, fields
from typing import Any, ClassVar, Dict, List, Optional, Type

from facets.normalize import to_snake_case

__all__ = [
    "ProductDetail",
    "CpuDetail",
    "GpuDetail",
    "MotherboardDetail",
    "RamDetail",
    "StorageDetail",
    "PsuDetail",
    "CoolingDetail",
    "CaseDetail",
    "KeyboardDetail",
    "MouseDetail",
    "MicrophoneDetail",
    "CameraDetail",
    "MonitorDetail",
    "HeadphonesDetail",
    "SpeakerDetail",
    "GamepadDetail",
    "MousePadDetail",
    "DETAIL_TYPES",
    "PERIPHERAL_KINDS",
    "parse_detail",
    "Product",
    "FilterOption",
    "FilterGroup",
    "Specification",
    "PriceRange",
    "Category",
    "CatalogPayload",
]


# =============================================================================
# Typed product details
# =============================================================================
# A product carries at most one detail object. The variant is identified by
# its ``kind`` tag rather than by probing optional attributes.


@dataclass(frozen=True)
class ProductDetail:
    kind: ClassVar[str] = ""
    brand: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProductDetail":
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in data.items():
            name = to_snake_case(key)
            if name in known:
                values[name] = value
        return cls(**values)

    def get(self, name: str) -> Any:
        """Return a detail attribute, or None when this variant lacks it."""
        return getattr(self, name, None)

    def has_field(self, name: str) -> bool:
        return name in {f.name for f in fields(self)}


@dataclass(frozen=True)
class CpuDetail(ProductDetail):
    kind: ClassVar[str] = "cpu"
    series: Optional[str] = None
    cores: Optional[int] = None
    multithreading: Optional[bool] = None
    socket: Optional[str] = None
    frequency: Optional[float] = None
    max_ram_capacity: Optional[int] = None
    max_ram_frequency: Optional[int] = None
    integrated_gpu: Optional[bool] = None


@dataclass(frozen=True)
class GpuDetail(ProductDetail):
    kind: ClassVar[str] = "gpu"
    video_memory_capacity: Optional[int] = None
    memory_type: Optional[str] = None
    fan_count: Optional[int] = None
    chip_type: Optional[str] = None
    has_dvi: Optional[bool] = None
    has_vga: Optional[bool] = None
    has_display_port: Optional[bool] = None
    has_hdmi: Optional[bool] = None


@dataclass(frozen=True)
class MotherboardDetail(ProductDetail):
    kind: ClassVar[str] = "motherboard"
    socket: Optional[str] = None
    memory_slots: Optional[int] = None
    processor_support: Optional[str] = None
    memory_type_supported: Optional[str] = None
    max_ram_capacity: Optional[int] = None
    max_memory_frequency: Optional[int] = None
    max_video_cards: Optional[int] = None
    sata_ports: Optional[int] = None
    m2_slots: Optional[int] = None
    sli_crossfire_support: Optional[bool] = None
    wifi_bluetooth: Optional[bool] = None
    nvme_support: Optional[bool] = None


@dataclass(frozen=True)
class RamDetail(ProductDetail):
    kind: ClassVar[str] = "ram"
    module_count: Optional[int] = None
    memory_type: Optional[str] = None
    max_frequency: Optional[int] = None
    backlighting: Optional[bool] = None
    voltage: Optional[float] = None


@dataclass(frozen=True)
class StorageDetail(ProductDetail):
    kind: ClassVar[str] = "storage"
    volume: Optional[int] = None
    type: Optional[str] = None
    nvme: Optional[bool] = None
    size: Optional[str] = None
    compatibility: Optional[str] = None
    write_speed: Optional[int] = None
    read_speed: Optional[int] = None


@dataclass(frozen=True)
class PsuDetail(ProductDetail):
    kind: ClassVar[str] = "psu"
    power: Optional[int] = None
    sata_connections: Optional[int] = None
    pci_e_connections: Optional[int] = None
    pfc: Optional[bool] = None
    has_fan: Optional[bool] = None
    molex_pata_connections: Optional[int] = None


@dataclass(frozen=True)
class CoolingDetail(ProductDetail):
    kind: ClassVar[str] = "cooling"
    socket: Optional[str] = None
    fan_diameter: Optional[int] = None
    fan_speed: Optional[int] = None


@dataclass(frozen=True)
class CaseDetail(ProductDetail):
    kind: ClassVar[str] = "case"
    power_supply_included: Optional[bool] = None
    color: Optional[str] = None
    material: Optional[str] = None
    audio_in: Optional[bool] = None
    audio_out: Optional[bool] = None
    usb2: Optional[int] = None
    usb3: Optional[int] = None
    usb32: Optional[int] = None
    usb_type_c: Optional[int] = None
    slots525: Optional[int] = None
    slots35: Optional[int] = None
    slots25: Optional[int] = None
    water_cooling_support: Optional[bool] = None


@dataclass(frozen=True)
class KeyboardDetail(ProductDetail):
    kind: ClassVar[str] = "keyboard"
    switch_type: Optional[str] = None
    layout: Optional[str] = None
    form: Optional[str] = None
    connection: Optional[str] = None
    rgb: Optional[bool] = None
    numpad: Optional[bool] = None


@dataclass(frozen=True)
class MouseDetail(ProductDetail):
    kind: ClassVar[str] = "mouse"
    color: Optional[str] = None
    category: Optional[str] = None
    dpi: Optional[int] = None
    buttons: Optional[int] = None
    connection: Optional[str] = None
    rgb: Optional[bool] = None
    weight: Optional[float] = None
    sensor: Optional[str] = None
    battery_type: Optional[str] = None
    battery_life: Optional[int] = None


@dataclass(frozen=True)
class MicrophoneDetail(ProductDetail):
    kind: ClassVar[str] = "microphone"
    type: Optional[str] = None
    pattern: Optional[str] = None
    frequency: Optional[float] = None
    sensitivity: Optional[float] = None
    interface: Optional[str] = None
    stand: Optional[bool] = None


@dataclass(frozen=True)
class CameraDetail(ProductDetail):
    kind: ClassVar[str] = "camera"
    resolution: Optional[str] = None
    fps: Optional[int] = None
    fov: Optional[int] = None
    microphone: Optional[bool] = None
    autofocus: Optional[bool] = None
    connection: Optional[str] = None


@dataclass(frozen=True)
class MonitorDetail(ProductDetail):
    kind: ClassVar[str] = "monitor"
    size: Optional[float] = None
    resolution: Optional[str] = None
    refresh_rate: Optional[int] = None
    panel_type: Optional[str] = None
    response_time: Optional[float] = None
    brightness: Optional[int] = None
    hdr: Optional[bool] = None
    ports: Optional[str] = None
    speakers: Optional[bool] = None
    curved: Optional[bool] = None


@dataclass(frozen=True)
class HeadphonesDetail(ProductDetail):
    kind: ClassVar[str] = "headphones"
    type: Optional[str] = None
    connection: Optional[str] = None
    microphone: Optional[bool] = None
    impedance: Optional[int] = None
    frequency: Optional[str] = None
    weight: Optional[float] = None
    noise_cancelling: Optional[bool] = None
    rgb: Optional[bool] = None


@dataclass(frozen=True)
class SpeakerDetail(ProductDetail):
    kind: ClassVar[str] = "speaker"
    type: Optional[str] = None
    total_wattage: Optional[int] = None
    frequency: Optional[str] = None
    connections: Optional[str] = None
    bluetooth: Optional[bool] = None
    remote: Optional[bool] = None


@dataclass(frozen=True)
class GamepadDetail(ProductDetail):
    kind: ClassVar[str] = "gamepad"
    connection: Optional[str] = None
    platform: Optional[str] = None
    layout: Optional[str] = None
    vibration: Optional[bool] = None
    rgb: Optional[bool] = None
    battery_life: Optional[int] = None
    programmable: Optional[bool] = None


@dataclass(frozen=True)
class MousePadDetail(ProductDetail):
    kind: ClassVar[str] = "mouse_pad"
    dimensions: Optional[str] = None
    thickness: Optional[float] = None
    material: Optional[str] = None
    rgb: Optional[bool] = None
    surface: Optional[str] = None


# Payload attribute name -> detail variant, probed in this order
DETAIL_TYPES: Dict[str, Type[ProductDetail]] = {
    "cpu": CpuDetail,
    "gpu": GpuDetail,
    "motherboard": MotherboardDetail,
    "ram": RamDetail,
    "storage": StorageDetail,
    "psu": PsuDetail,
    "cooling": CoolingDetail,
    "caseModel": CaseDetail,
    "keyboard": KeyboardDetail,
    "mouse": MouseDetail,
    "microphone": MicrophoneDetail,
    "camera": CameraDetail,
    "monitor": MonitorDetail,
    "headphones": HeadphonesDetail,
    "speakers": SpeakerDetail,
    "gamepad": GamepadDetail,
    "mousePad": MousePadDetail,
}

PERIPHERAL_KINDS = frozenset(
    {
        "keyboard",
        "mouse",
        "microphone",
        "camera",
        "monitor",
        "headphones",
        "speaker",
        "gamepad",
        "mouse_pad",
    }
)


def parse_detail(data: Dict[str, Any]) -> Optional[ProductDetail]:
    """Build the typed detail attached to a raw product dict, if any."""
    for key, detail_type in DETAIL_TYPES.items():
        raw = data.get(key)
        if isinstance(raw, dict):
            return detail_type.from_dict(raw)
    return None


# =============================================================================
# Products
# =============================================================================


def _as_float(value: Any, default: float = 0.0) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def _as_optional_float(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _parse_specifications(raw: Any) -> Dict[str, str]:
    """Keep only usable key/value pairs; anything else becomes an empty map."""
    if not isinstance(raw, dict):
        return {}
    specs: Dict[str, str] = {}
    for key, value in raw.items():
        if value is None:
            continue
        specs[str(key)] = value if isinstance(value, str) else str(value)
    return specs


def _component_names(raw: Any) -> List[str]:
    names: List[str] = []
    if not isinstance(raw, list):
        return names
    for item in raw:
        if isinstance(item, dict):
            name = item.get("name") or (item.get("component") or {}).get("name")
            if name:
                names.append(str(name))
        elif item:
            names.append(str(item))
    return names


@dataclass(frozen=True)
class Product:
    """A catalog product as supplied by the product API.

    Products are read-only: the engine never mutates them, it only returns
    new lists.
    """

    id: str
    name: str
    price: float
    description: str = ""
    discount_price: Optional[float] = None
    stock: int = 0
    image_url: Optional[str] = None
    category_id: str = ""
    category_name: str = ""
    specifications: Dict[str, str] = field(default_factory=dict)
    brand: Optional[str] = None
    manufacturer: Optional[str] = None
    sku: str = ""
    rating: Optional[float] = None
    rating_count: Optional[int] = None
    component_names: List[str] = field(default_factory=list)
    detail: Optional[ProductDetail] = None

    @property
    def effective_price(self) -> float:
        return self.discount_price if self.discount_price is not None else self.price

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Product":
        """Build a product from the API's camelCase JSON shape."""
        stock = data.get("stock")
        rating_count = data.get("ratingCount")
        return cls(
            id=str(data.get("id", "")),
            name=str(data.get("name") or ""),
            price=_as_float(data.get("price")),
            description=str(data.get("description") or ""),
            discount_price=_as_optional_float(data.get("discountPrice")),
            stock=int(_as_float(stock)) if stock is not None else 0,
            image_url=data.get("imageUrl"),
            category_id=str(data.get("categoryId") or ""),
            category_name=str(data.get("categoryName") or ""),
            specifications=_parse_specifications(data.get("specifications")),
            brand=data.get("brand") or None,
            manufacturer=data.get("manufacturer") or None,
            sku=str(data.get("sku") or ""),
            rating=_as_optional_float(data.get("rating")),
            rating_count=int(rating_count) if isinstance(rating_count, (int, float)) else None,
            component_names=_component_names(data.get("components")),
            detail=parse_detail(data),
        )

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": self.price,
            "discountPrice": self.discount_price,
            "stock": self.stock,
            "imageUrl": self.image_url,
            "categoryId": self.category_id,
            "categoryName": self.category_name,
            "specifications": dict(self.specifications),
            "brand": self.brand,
            "manufacturer": self.manufacturer,
            "sku": self.sku,
            "rating": self.rating,
            "ratingCount": self.rating_count,
        }
        if self.component_names:
            result["components"] = [{"name": name} for name in self.component_names]
        if self.detail is not None:
            key = next(k for k, v in DETAIL_TYPES.items() if v is type(self.detail))
            result[key] = {
                f.name: getattr(self.detail, f.name) for f in fields(self.detail)
            }
        return result


# =============================================================================
# Facets
# =============================================================================


@dataclass(frozen=True)
class FilterOption:
    """One selectable facet value. ``id`` is "<facetKey>=<rawValue>"."""

    id: str
    name: str
    translation_key: Optional[str] = None

    @property
    def key(self) -> str:
        return self.id.split("=", 1)[0]

    @property
    def value(self) -> str:
        parts = self.id.split("=", 1)
        return parts[1] if len(parts) > 1 else parts[0]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FilterOption":
        return cls(
            id=str(data.get("id", "")),
            name=str(data.get("name", "")),
            translation_key=data.get("translationKey"),
        )

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"id": self.id, "name": self.name}
        if self.translation_key:
            result["translationKey"] = self.translation_key
        return result


@dataclass(frozen=True)
class FilterGroup:
    title: str
    type: str
    options: List[FilterOption] = field(default_factory=list)
    title_translation_key: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FilterGroup":
        return cls(
            title=str(data.get("title", "")),
            type=str(data.get("type", "")),
            options=[
                FilterOption.from_dict(opt)
                for opt in data.get("options") or []
                if isinstance(opt, dict)
            ],
            title_translation_key=data.get("titleTranslationKey"),
        )

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "title": self.title,
            "type": self.type,
            "options": [opt.to_dict() for opt in self.options],
        }
        if self.title_translation_key:
            result["titleTranslationKey"] = self.title_translation_key
        return result


@dataclass(frozen=True)
class Specification:
    """A named spec with its observed values, as listed by the product API."""

    name: str
    values: List[str] = field(default_factory=list)
    id: str = ""
    display_name: str = ""
    multi_select: bool = True

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Specification":
        name = str(data.get("name", ""))
        return cls(
            name=name,
            values=[str(v) for v in data.get("values") or [] if v is not None],
            id=str(data.get("id") or name),
            display_name=str(data.get("displayName") or name),
            multi_select=bool(data.get("multiSelect", True)),
        )


@dataclass(frozen=True)
class PriceRange:
    """Inclusive price bounds."""

    min: float
    max: float

    def contains(self, price: float) -> bool:
        return self.min <= price <= self.max

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PriceRange":
        return cls(min=_as_float(data.get("min")), max=_as_float(data.get("max")))

    def to_dict(self) -> Dict[str, float]:
        return {"min": self.min, "max": self.max}


@dataclass(frozen=True)
class Category:
    slug: str
    name: str


@dataclass(frozen=True)
class CatalogPayload:
    """The product API response for one category page."""

    components: List[Product] = field(default_factory=list)
    specifications: Optional[List[Specification]] = None
    filter_groups: Optional[List[FilterGroup]] = None
    categories: List[Category] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CatalogPayload":
        components = data.get("components")
        specifications = data.get("specifications")
        filter_groups = data.get("filterGroups")
        return cls(
            components=[
                Product.from_dict(item)
                for item in components or []
                if isinstance(item, dict)
            ],
            specifications=[
                Specification.from_dict(item)
                for item in specifications
                if isinstance(item, dict)
            ]
            if isinstance(specifications, list)
            else None,
            filter_groups=[
                FilterGroup.from_dict(item)
                for item in filter_groups
                if isinstance(item, dict)
            ]
            if isinstance(filter_groups, list)
            else None,
            categories=[
                Category(slug=str(item.get("slug", "")), name=str(item.get("name", "")))
                for item in data.get("categories") or []
                if isinstance(item, dict)
            ],
        )
