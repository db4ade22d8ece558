"""Tests for the category facet builders and their shared machinery."""

import logging

import pytest

from facets.component_facets import (
    CPU_FACETS,
    build_case_facets,
    build_cooling_facets,
    build_cpu_facets,
    build_gpu_facets,
    build_motherboard_facets,
    build_psu_facets,
    build_ram_facets,
    build_storage_facets,
    cpu_series_label,
)
from facets.facet_groups import (
    CategoryFacets,
    FacetSpec,
    OptionSink,
    format_capacity,
    order_values,
    translation_key_for,
)
from facets.peripheral_facets import (
    build_camera_facets,
    build_gamepad_facets,
    build_headphones_facets,
    build_keyboard_facets,
    build_monitor_facets,
    build_mouse_facets,
    build_mouse_pad_facets,
)


def groups_by_type(groups):
    return {group.type: group for group in groups}


def option_names(group):
    return [option.name for option in group.options]


def option_ids(group):
    return [option.id for option in group.options]


class TestOptionSink:
    """Test value collection for one builder layout."""

    def test_unknown_facet_raises(self):
        sink = OptionSink((FacetSpec("socket", "Socket"),))

        with pytest.raises(KeyError):
            sink.add("cores", "8")

    def test_typed_values_suppress_later_spec_values(self):
        sink = OptionSink((FacetSpec("socket", "Socket"),))
        sink.begin_product()
        sink.add("socket", "AM5", typed=True)
        sink.add("socket", "Socket AM5")

        assert sink.values("socket") == {"AM5": "AM5"}

    def test_boolean_synonyms_collapse(self):
        sink = OptionSink((FacetSpec("pwm", "PWM", order="boolean"),))
        for value in ("Yes", "supported", "1", "No", "not supported"):
            sink.begin_product()
            sink.add("pwm", value)

        assert set(sink.values("pwm")) == {"true", "false"}

    def test_blank_values_ignored(self):
        sink = OptionSink((FacetSpec("color", "Color"),))
        sink.add("color", "  ")
        sink.add("color", None)

        assert not sink.has("color")


class TestOrdering:
    """Test option ordering rules."""

    def test_numeric_order_uses_first_number(self):
        values = {"3.5 GHz": "3.5 GHz", "10 GHz": "10 GHz", "2.9 GHz": "2.9 GHz", "n/a": "n/a"}

        ordered = [value for value, _ in order_values(values, "numeric")]

        assert ordered == ["n/a", "2.9 GHz", "3.5 GHz", "10 GHz"]

    def test_capacity_order_understands_units(self):
        values = {"1TB": "1TB", "512GB": "512GB", "2TB": "2TB"}

        assert [value for value, _ in order_values(values, "capacity")] == ["512GB", "1TB", "2TB"]

    def test_boolean_order_true_first(self):
        values = {"false": "No", "true": "Yes"}

        assert [value for value, _ in order_values(values, "boolean")] == ["true", "false"]

    def test_text_order_is_alphabetical_by_label(self):
        values = {"b": "beta", "a": "Alpha", "c": "Ćma"}

        assert [label for _, label in order_values(values, "text")] == ["Alpha", "beta", "Ćma"]

    def test_format_capacity(self):
        assert format_capacity("32 gb") == "32GB"
        assert format_capacity("2 TB") == "2TB"
        assert format_capacity("16") == "16GB"


def test_translation_key_for_uses_camel_case():
    assert translation_key_for("noise_cancellation") == "categoryPage.filterGroups.noiseCancellation"
    assert translation_key_for("socket") == "categoryPage.filterGroups.socket"


class TestCategoryFacets:
    """Test group assembly shared by every builder."""

    def test_manufacturer_group_first_and_empty_groups_omitted(self, cpu_payload):
        groups = build_cpu_facets(cpu_payload.components)

        assert groups[0].type == "manufacturer"
        assert option_ids(groups[0]) == ["manufacturer=AMD", "manufacturer=Intel"]
        assert all(group.options for group in groups)
        assert "threads" not in groups_by_type(groups)

    def test_option_ids_are_unique_in_every_group(self, cpu_payload):
        for group in build_cpu_facets(cpu_payload.components):
            ids = option_ids(group)
            assert len(ids) == len(set(ids)), group.type

    def test_building_twice_gives_equal_groups(self, cpu_payload):
        assert build_cpu_facets(cpu_payload.components) == build_cpu_facets(cpu_payload.components)

    def test_collector_errors_skip_the_product(self, product_factory, caplog):
        def collect(product, sink):
            if product.id == "bad":
                raise ValueError("broken")
            sink.add("color", product.specifications.get("Color"))

        facets = CategoryFacets("test", (FacetSpec("color", "Color"),), collect)
        products = [
            product_factory(id="bad", name="X", specifications={"Color": "Red"}),
            product_factory(id="ok", name="Y", specifications={"Color": "Blue"}),
        ]

        with caplog.at_level(logging.WARNING):
            groups = facets.build(products)

        assert option_ids(groups_by_type(groups)["color"]) == ["color=Blue"]
        assert "Skipping product bad" in caplog.text

    def test_derive_returns_per_product_values(self, product_factory):
        product = product_factory(name="AMD Ryzen 9 7950X 16-Core Processor")

        derived = CPU_FACETS.derive(product)

        assert derived["cpu_series"] == frozenset({"Ryzen 9"})
        assert derived["cores"] == frozenset({"16"})


class TestCpuBuilder:
    """Test the CPU builder."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("AMD Ryzen 5 5600X", "Ryzen 5"),
            ("Intel Core i7-14700K", "Core i7"),
            ("Intel Celeron G6900", "Celeron"),
            ("AMD Athlon 3000G", "Athlon"),
            ("Mystery Chip", None),
        ],
    )
    def test_series_label(self, text, expected):
        assert cpu_series_label(text) == expected

    def test_facets(self, cpu_payload):
        groups = groups_by_type(build_cpu_facets(cpu_payload.components))

        assert option_names(groups["cpu_series"]) == ["Core i7", "Ryzen 5", "Ryzen 7"]
        assert option_ids(groups["socket"]) == ["socket=AM5", "socket=LGA1700"]
        assert option_names(groups["cores"]) == ["6 Cores", "8 Cores", "20 Cores"]
        assert option_ids(groups["tdp"]) == ["tdp=105W", "tdp=120W", "tdp=125W"]
        assert groups["cpu_series"].title_translation_key == "categoryPage.filterGroups.series"

    def test_integrated_graphics_labels_default_to_english(self, cpu_payload):
        group = groups_by_type(build_cpu_facets(cpu_payload.components))["integrated_gpu"]

        assert [(o.id, o.name) for o in group.options] == [
            ("integrated_gpu=true", "Yes"),
            ("integrated_gpu=false", "No"),
        ]

    def test_translation_function_localizes_labels_and_titles(self, cpu_payload):
        translations = {
            "common.yes": "Ja",
            "common.no": "Nein",
            "categoryPage.filterGroups.socket": "Sockel",
        }

        groups = groups_by_type(build_cpu_facets(cpu_payload.components, translations.get))

        assert option_names(groups["integrated_gpu"]) == ["Ja", "Nein"]
        assert groups["socket"].title == "Sockel"
        assert groups["cores"].title == "Cores"


class TestComponentBuilders:
    """Test the remaining PC component builders."""

    def test_gpu_memory_feeds_vram(self, product_factory):
        products = [
            product_factory(id="1", name="MSI GeForce RTX 4070 Ti", specifications={"Memory": "12 GB", "Memory Type": "GDDR6X"}),
            product_factory(id="2", name="Sapphire Pulse RX 7800 XT 16GB"),
        ]

        groups = groups_by_type(build_gpu_facets(products))

        assert option_ids(groups["vram"]) == ["vram=12GB", "vram=16GB"]
        assert option_names(groups["gpu_model"]) == ["RTX 4070 TI", "RX 7800 XT"]
        assert option_names(groups["gpu_series"]) == ["RTX Series", "RX Series"]
        assert option_ids(groups["memory_type"]) == ["memory_type=GDDR6X"]

    def test_motherboard_name_fallbacks(self, product_factory):
        products = [
            product_factory(id="1", name="ASUS ROG Strix B650E-F Gaming WiFi ATX DDR5", specifications={"Socket": "AM5"}),
            product_factory(id="2", name="MSI PRO Z790-P Micro-ATX", specifications={"WiFi": "No"}),
        ]

        groups = groups_by_type(build_motherboard_facets(products))

        assert option_names(groups["chipset"]) == ["B650E", "Z790"]
        assert option_names(groups["form_factor"]) == ["ATX", "Micro-ATX"]
        assert option_ids(groups["memory_type"]) == ["memory_type=DDR5"]
        assert option_ids(groups["wifi"]) == ["wifi=true", "wifi=false"]

    def test_ram_kit_capacity_from_name(self, product_factory):
        products = [
            product_factory(id="1", name="Corsair Vengeance 2x16GB DDR5-6000 CL30"),
            product_factory(id="2", name="Kingston Fury 8GB DDR4 3200MHz", specifications={"CAS Latency": "16"}),
        ]

        groups = groups_by_type(build_ram_facets(products))

        assert option_ids(groups["capacity"]) == ["capacity=8GB", "capacity=32GB"]
        assert option_ids(groups["speed"]) == ["speed=3200MHz", "speed=6000MHz"]
        assert option_names(groups["modules"]) == ["2 Modules"]
        assert option_ids(groups["timing"]) == ["timing=CL16", "timing=CL30"]
        assert option_ids(groups["memory_type"]) == ["memory_type=DDR4", "memory_type=DDR5"]

    def test_storage_types(self, product_factory):
        products = [
            product_factory(id="1", name="Samsung 990 Pro 2TB NVMe M.2"),
            product_factory(id="2", name="Crucial MX500 1TB SATA SSD 2.5\""),
        ]

        groups = groups_by_type(build_storage_facets(products))

        assert option_ids(groups["capacity"]) == ["capacity=1TB", "capacity=2TB"]
        assert option_names(groups["storage_type"]) == ["NVMe SSD", "SATA SSD"]
        assert option_names(groups["interface"]) == ["PCIe", "SATA"]

    def test_psu_efficiency_and_modularity(self, product_factory):
        products = [
            product_factory(id="1", name="Corsair RM850x 850W 80 PLUS Gold Fully Modular"),
            product_factory(id="2", name="be quiet! System Power 10 550W", specifications={"Efficiency": "80 Plus Bronze", "Modular": "No"}),
        ]

        groups = groups_by_type(build_psu_facets(products))

        assert option_ids(groups["wattage"]) == ["wattage=550W", "wattage=850W"]
        assert option_names(groups["efficiency"]) == ["80+ Bronze", "80+ Gold"]
        assert option_names(groups["modularity"]) == ["Fully Modular", "Non-Modular"]

    def test_case_side_panel_labels(self, product_factory):
        products = [
            product_factory(id="1", name="NZXT H5 Flow Mid Tower Tempered Glass", specifications={"Color": "Black"}),
            product_factory(id="2", name="Fractal Pop Silent", specifications={"Side Panel": "Solid steel panel"}),
        ]

        groups = groups_by_type(build_case_facets(products))

        assert option_names(groups["side_panel"]) == ["Windowed", "Solid"]
        assert option_names(groups["form_factor"]) == ["Mid Tower"]

    def test_cooling_radiator_from_name(self, product_factory):
        products = [
            product_factory(id="1", name="Arctic Liquid Freezer III 240mm AIO"),
            product_factory(id="2", name="Noctua NH-U12S 120mm Air Cooler", specifications={"Socket": "AM5/LGA1700", "PWM": "Yes"}),
        ]

        groups = groups_by_type(build_cooling_facets(products))

        assert option_ids(groups["radiator_size"]) == ["radiator_size=240mm"]
        assert option_ids(groups["fan_size"]) == ["fan_size=120mm"]
        assert option_names(groups["cooling_type"]) == ["Air Cooling", "Liquid Cooling"]
        assert option_ids(groups["socket"]) == ["socket=AM5", "socket=LGA1700"]
        assert option_ids(groups["pwm"]) == ["pwm=true"]


class TestPeripheralBuilders:
    """Test the peripheral builders."""

    def test_keyboard(self, product_factory):
        products = [
            product_factory(id="1", name="Keychron K2 Wireless 75% Gateron Brown RGB"),
            product_factory(
                id="2",
                name="Logitech G915",
                keyboard={"switchType": "GL Tactile", "connection": "Wired", "rgb": True, "numpad": True},
            ),
        ]

        groups = groups_by_type(build_keyboard_facets(products))

        assert option_names(groups["switch_type"]) == ["Gateron Brown", "GL Tactile"]
        assert option_names(groups["connection"]) == ["Wired", "Wireless"]
        assert option_names(groups["rgb"]) == ["RGB Lighting"]
        assert option_ids(groups["numpad"]) == ["numpad=true", "numpad=false"]

    def test_mouse_dpi_from_spec(self, product_factory):
        products = [product_factory(id="1", name="Razer Viper Wireless", specifications={"DPI": "30000 dpi"})]

        groups = groups_by_type(build_mouse_facets(products))

        assert [(o.id, o.name) for o in groups["dpi"].options] == [("dpi=30000", "30000 DPI")]
        assert option_names(groups["connectivity"]) == ["Wireless"]

    def test_mouse_pad_brand_title(self, product_factory):
        groups = build_mouse_pad_facets([product_factory(name="SteelSeries QcK XXL", brand="SteelSeries")])

        assert groups[0].title == "Brands"
        assert option_names(groups_by_type(groups)["size"]) == ["XXL"]

    def test_headphones(self, product_factory):
        products = [
            product_factory(id="1", name="HyperX Cloud II 7.1 Over-Ear", specifications={"Microphone": "Yes"}),
            product_factory(id="2", name="Sony WH-1000XM5 Wireless", headphones={"type": "Over-Ear", "noiseCancelling": True}),
        ]

        groups = groups_by_type(build_headphones_facets(products))

        assert option_names(groups["type"]) == ["Over-Ear"]
        assert option_ids(groups["microphone"]) == ["microphone=true"]
        assert option_ids(groups["noise_cancellation"]) == ["noise_cancellation=true"]
        assert option_names(groups["surround"]) == ["7.1"]
        assert groups["noise_cancellation"].title_translation_key == "categoryPage.filterGroups.noiseCancellation"

    def test_monitor_numeric_sizes(self, product_factory):
        products = [
            product_factory(id="1", name='LG UltraGear 27" 1440p 165Hz IPS'),
            product_factory(id="2", name='Dell S2421 24" Full HD 75Hz VA'),
            product_factory(id="3", name="Samsung Odyssey G9", monitor={"size": 49, "refreshRate": 240, "panelType": "va"}),
        ]

        groups = groups_by_type(build_monitor_facets(products))

        assert option_names(groups["size"]) == ['24"', '27"', '49"']
        assert option_names(groups["refresh_rate"]) == ["75Hz", "165Hz", "240Hz"]
        assert option_names(groups["resolution"]) == ["1920x1080", "2560x1440"]
        assert option_names(groups["panel_type"]) == ["IPS", "VA"]

    def test_camera_microphone_labels(self, product_factory):
        products = [
            product_factory(id="1", name="Logitech C920 1080p 30fps", camera={"microphone": True, "autofocus": True}),
            product_factory(id="2", name="Generic 720p Webcam", specifications={"Microphone": "No"}),
        ]

        groups = groups_by_type(build_camera_facets(products))

        assert option_names(groups["microphone"]) == ["Built-in", "None"]
        assert option_names(groups["focus"]) == ["Autofocus"]
        assert option_names(groups["resolution"]) == ["1080p", "720p"]

    def test_gamepad_layout_falls_back_to_type(self, product_factory):
        products = [
            product_factory(id="1", name="8BitDo Pro 2", brand="8BitDo", specifications={"Type": "Nintendo", "Vibration": "Yes"}),
            product_factory(
                id="2",
                name="Xbox Wireless Controller",
                brand="Microsoft",
                gamepad={"connection": "Bluetooth", "platform": "Xbox", "layout": "Xbox", "vibration": True, "programmable": False},
            ),
        ]

        groups = build_gamepad_facets(products)
        by_type = groups_by_type(groups)

        assert groups[0].title == "Brand"
        assert option_names(by_type["layout"]) == ["Nintendo", "Xbox"]
        assert option_names(by_type["vibration"]) == ["Vibration Support"]
        assert option_names(by_type["programmable"]) == ["Not Programmable"]
        assert option_names(by_type["platform"]) == ["Xbox"]
