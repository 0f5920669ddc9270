"""Unit tests for canirun.compare.{platform,hardware,engine}."""

import pytest

from canirun.compare.engine import (
    compare_numeric,
    compare_specs,
    compare_specs_with_scores,
    cpu_display,
    promote_tiers,
    ram_display,
)
from canirun.compare.hardware import (
    compare_cpu,
    compare_gpu,
    has_cpu_model,
    is_capability_only,
    requirement_alternatives,
)
from canirun.compare.platform import compare_os
from canirun.compare.verdict import compute_verdict
from canirun.config.benchmarks import HardwareCatalog
from canirun.models import GameRequirements, UserSpecs
from canirun.processing.requirements import parse_requirements


# ============================================================================
# RAM / storage
# ============================================================================
class TestCompareNumeric:
    @pytest.mark.parametrize("user,req,expected", [
        (16, "8 GB", "pass"),
        (4, "8 GB", "fail"),
        (None, "8 GB", "info"),
        (8, "8 GB RAM", "pass"),
        (2, "2048 MB", "pass"),
        (500, "1 TB", "fail"),
        (8, "plenty", "info"),
    ])
    def test_examples(self, user, req, expected):
        assert compare_numeric(user, req) == expected

    @pytest.mark.parametrize("user", [None, 0, 4, 64])
    def test_empty_requirement_passes(self, user):
        assert compare_numeric(user, "") == "pass"


# ============================================================================
# OS
# ============================================================================
class TestCompareOs:
    @pytest.mark.parametrize("user,req,expected", [
        ("Windows 11", "Windows 10 64-bit", "pass"),
        ("Windows 11 Home", "Windows® 10 64-bit", "pass"),
        ("Windows 7", "Windows 10", "fail"),
        ("Windows 10", "Windows 7/8/10", "pass"),
        ("macOS 14.2", "macOS 13 or later", "pass"),
        ("macOS 12.6", "macOS 13 or later", "fail"),
        ("Ubuntu 22.04", "Windows 10, SteamOS, Ubuntu 20.04", "pass"),
    ])
    def test_same_platform(self, catalog, user, req, expected):
        assert compare_os(user, req, catalog) == expected

    def test_cross_platform_is_warn_not_fail(self, catalog):
        assert compare_os("macOS 14.2", "Windows 10 64-bit", catalog) == "warn"
        assert compare_os("Ubuntu 22.04", "Windows 10", catalog) == "warn"

    def test_different_distributions_not_ordered(self, catalog):
        assert compare_os("Fedora 40", "Ubuntu 22.04", catalog) == "pass"

    def test_unresolvable_requirement_is_lenient(self, catalog):
        assert compare_os("Windows 11", "Windows Server 2019", catalog) == "pass"

    @pytest.mark.parametrize("req", ["Any 64-bit OS", "64-bit", "any"])
    def test_vague_requirement_passes(self, catalog, req):
        assert compare_os("Windows 11", req, catalog) == "pass"

    def test_requirement_without_platform_is_info(self, catalog):
        assert compare_os("Windows 11", "TBD", catalog) == "info"

    def test_empty_requirement_passes(self, catalog):
        assert compare_os("", "", catalog) == "pass"

    @pytest.mark.parametrize("user", ["", None, "   "])
    def test_missing_user_is_info(self, catalog, user):
        assert compare_os(user, "Windows 10", catalog) == "info"

    def test_unknown_user_platform_is_info(self, catalog):
        assert compare_os("FreeBSD 13", "Windows 10", catalog) == "info"


# ============================================================================
# CPU
# ============================================================================
FAMILY_CATALOG = HardwareCatalog(
    cpu={
        "Intel Core i5-2400": 9,
        "Intel Core i5-8400": 30,
        "Intel Core i5-12400": 45,
        "AMD Ryzen 5 1600": 21,
        "AMD Ryzen 5 3600": 33,
    },
    gpu={"NVIDIA GeForce GTX 970": 22},
)


class TestCompareCpu:
    def test_empty_requirement_passes(self, catalog):
        assert compare_cpu(UserSpecs(), "", catalog).status == "pass"

    def test_no_user_data_is_info(self, catalog):
        assert compare_cpu(UserSpecs(), "Intel Core i5-4460", catalog).status == "info"

    def test_model_pass_prefers_same_vendor(self, catalog):
        user = UserSpecs(cpu="AMD Ryzen 5 5600X")
        check = compare_cpu(user, "Intel Core i5-4460 or AMD FX-6300", catalog)
        assert check.status == "pass"
        assert check.req_score == catalog.cpu["AMD FX-6300"]
        assert check.user_score == catalog.cpu["AMD Ryzen 5 5600X"]

    def test_model_fail(self, catalog):
        check = compare_cpu(UserSpecs(cpu="Intel Core i5-2500K"), "AMD Ryzen 5 3600", catalog)
        assert check.status == "fail"
        assert check.req_score == 33

    def test_any_alternative_pass_wins(self, catalog):
        user = UserSpecs(cpu="AMD Ryzen 5 3600")
        check = compare_cpu(user, "Intel Core i9-13900K or 2.0 GHz Dual Core", catalog)
        assert check.status == "pass"

    def test_family_average(self):
        # i5 members average (9 + 30 + 45) / 3 = 28
        assert compare_cpu(UserSpecs(cpu="AMD Ryzen 5 3600"), "Intel Core i5", FAMILY_CATALOG).status == "pass"
        assert compare_cpu(UserSpecs(cpu="AMD Ryzen 5 1600"), "Intel Core i5", FAMILY_CATALOG).status == "fail"

    def test_qualified_family_uses_minimum(self):
        check = compare_cpu(UserSpecs(cpu="AMD Ryzen 5 1600"), "Intel Core i5 or better", FAMILY_CATALOG)
        assert check.status == "pass"
        assert check.req_score == 9

    def test_catalog_cpu_beats_generic_ask(self, catalog):
        user = UserSpecs(cpu="AMD Ryzen 5 3600")
        assert compare_cpu(user, "Dual Core 2.0 GHz", catalog).status == "pass"

    @pytest.mark.parametrize("cores,speed,expected", [
        (4, 3.0, "pass"),
        (2, 3.0, "warn"),
        (2, 1.5, "fail"),
        (4, 2.3, "pass"),   # within 10% of 2.5
        (4, 2.2, "warn"),
    ])
    def test_spec_only(self, catalog, cores, speed, expected):
        user = UserSpecs(cpu_cores=cores, cpu_speed_ghz=speed)
        assert compare_cpu(user, "2.5 GHz Quad Core", catalog).status == expected

    def test_spec_only_single_dimension_decides(self, catalog):
        user = UserSpecs(cpu_speed_ghz=2.0)
        assert compare_cpu(user, "2.5 GHz Quad Core", catalog).status == "fail"

    def test_spec_only_nothing_comparable_is_info(self, catalog):
        user = UserSpecs(cpu_cores=8)
        assert compare_cpu(user, "2.5 GHz", catalog).status == "info"

    def test_monotonic_in_score(self, catalog):
        req = "Intel Core i7-8700K"
        weak = compare_cpu(UserSpecs(cpu="Intel Core i5-2500K"), req, catalog).status
        strong = compare_cpu(UserSpecs(cpu="AMD Ryzen 9 5950X"), req, catalog).status
        assert weak == "fail"
        assert strong == "pass"

    @pytest.mark.parametrize("text,expected", [
        ("Intel Core i5-4460", True),
        ("AMD FX-6300", True),
        ("Apple M1", True),
        ("Intel Core i5", False),
        ("2.5 GHz Quad Core", False),
        ("Dual Core 3000 MHz", False),
    ])
    def test_has_cpu_model(self, text, expected):
        assert has_cpu_model(text) is expected


# ============================================================================
# GPU
# ============================================================================
class TestCompareGpu:
    def test_lowest_alternative_is_the_bar(self, catalog):
        check = compare_gpu("NVIDIA GeForce GTX 970", "NVIDIA GeForce GTX 1070 or AMD Radeon RX 570", catalog)
        assert check.status == "pass"
        assert check.req_score == catalog.gpu["AMD Radeon RX 570"]

    def test_fail(self, catalog):
        assert compare_gpu("NVIDIA GeForce GTX 750 Ti", "NVIDIA GeForce GTX 970", catalog).status == "fail"

    def test_lspci_user_string(self, catalog):
        user = "01:00.0 VGA compatible controller: NVIDIA Corporation GA104 [GeForce RTX 3070] (rev a1)"
        check = compare_gpu(user, "NVIDIA GeForce GTX 1060 3GB", catalog)
        assert check.status == "pass"
        assert check.user_score == catalog.gpu["NVIDIA GeForce RTX 3070"]

    def test_unbranded_codename(self, catalog):
        check = compare_gpu("NVIDIA Corporation TU106", "NVIDIA GeForce GTX 970", catalog)
        assert check.status == "pass"

    @pytest.mark.parametrize("user", ["AMD Radeon(TM) Vega 10 Graphics", "AMD Radeon Vega 10 Graphics"])
    def test_vega_apu_stays_integrated(self, catalog, user):
        check = compare_gpu(user, "NVIDIA GeForce GTX 960", catalog)
        assert check.status == "fail"
        assert check.user_score <= catalog.gpu["AMD Radeon Vega 8 Graphics"]

    def test_capability_only_with_known_gpu(self, catalog):
        assert compare_gpu("NVIDIA GeForce RTX 3060", "DirectX 11 compatible, 2 GB VRAM", catalog).status == "pass"

    def test_capability_only_with_unknown_gpu(self, catalog):
        assert compare_gpu("Mystery Graphics", "OpenGL 4.5", catalog).status == "info"

    def test_unmatched_requirement_is_info(self, catalog):
        assert compare_gpu("NVIDIA GeForce RTX 3060", "2 GB dedicated video memory", catalog).status == "info"

    def test_empty_requirement_passes(self, catalog):
        assert compare_gpu("", "", catalog).status == "pass"

    def test_missing_user_is_info(self, catalog):
        assert compare_gpu("", "NVIDIA GeForce GTX 970", catalog).status == "info"

    @pytest.mark.parametrize("text,expected", [
        ("DirectX 11 compatible, 2 GB VRAM", True),
        ("OpenGL 3.3", True),
        ("Shader Model 5.0", True),
        ("NVIDIA GeForce GTX 970 (DirectX 12)", False),
        ("2 GB VRAM", False),
    ])
    def test_capability_detection(self, text, expected):
        assert is_capability_only(text) is expected

    def test_spaced_slash_separates_alternatives(self):
        assert requirement_alternatives("GTX 970 / RX 470 or Arc A380") == ["GTX 970", "RX 470", "Arc A380"]
        assert requirement_alternatives("Radeon RX 470/570") == ["Radeon RX 470/570"]


# ============================================================================
# Engine
# ============================================================================
class TestPromotion:
    @pytest.mark.parametrize("tiers,expected", [
        (("info", "pass"), ("pass", "pass")),
        (("pass", "info"), ("pass", "pass")),
        (("info", "fail"), ("info", "fail")),
        (("fail", "info"), ("fail", "info")),
        (("warn", "pass"), ("warn", "pass")),
        (("info", "info"), ("info", "info")),
    ])
    def test_promote(self, tiers, expected):
        assert promote_tiers(*tiers) == expected

    def test_unpublished_pass_promotes_nothing(self):
        assert promote_tiers("info", "pass", True, False) == ("info", "pass")
        assert promote_tiers("pass", "info", False, True) == ("pass", "info")


class TestDisplayValues:
    @pytest.mark.parametrize("specs,expected", [
        (UserSpecs(cpu="Intel Core i5-8400", cpu_cores=6), "Intel Core i5-8400 (6 cores)"),
        (UserSpecs(cpu="Intel Core i5-8400"), "Intel Core i5-8400"),
        (UserSpecs(cpu_cores=4), "4 cores detected"),
        (UserSpecs(), "Unknown"),
    ])
    def test_cpu(self, specs, expected):
        assert cpu_display(specs) == expected

    def test_ram(self):
        assert ram_display(UserSpecs(ram_gb=16.0)) == "16 GB"
        assert ram_display(UserSpecs(ram_gb=8, ram_approximate=True)) == "8 GB (approx.)"
        assert ram_display(UserSpecs()) == "Unknown"


class TestCompareSpecs:
    def test_five_rows_in_order(self, catalog, gaming_user):
        items = compare_specs(gaming_user, None, None, catalog)
        assert [i.label for i in items] == [
            "Operating System", "Processor", "Graphics", "Memory (RAM)", "Storage",
        ]
        assert all(i.min_value == "—" and i.rec_value == "—" for i in items)
        assert all(i.min_status == "pass" and i.rec_status == "pass" for i in items)

    def test_full_requirements(self, catalog, gaming_user, steam_min_html, steam_rec_html):
        parsed = parse_requirements(steam_min_html, steam_rec_html)
        result = compare_specs_with_scores(gaming_user, parsed.minimum, parsed.recommended, catalog)
        statuses = {i.label: (i.min_status, i.rec_status) for i in result.items}
        assert all(s == ("pass", "pass") for s in statuses.values()), statuses

        scores = result.scores
        assert scores.user_gpu_score == catalog.gpu["NVIDIA GeForce RTX 3070"]
        assert scores.min_gpu_score == catalog.gpu["NVIDIA GeForce GTX 960"]
        assert scores.rec_gpu_score == catalog.gpu["NVIDIA GeForce GTX 1070"]
        assert scores.user_cpu_score == catalog.cpu["AMD Ryzen 7 5800X"]
        assert scores.min_cpu_score == catalog.cpu["AMD FX-6300"]
        assert scores.rec_cpu_score == catalog.cpu["AMD Ryzen 5 3600"]

    def test_budget_machine(self, catalog, budget_user, steam_min_html, steam_rec_html):
        parsed = parse_requirements(steam_min_html, steam_rec_html)
        items = {i.label: i for i in compare_specs(budget_user, parsed.minimum, parsed.recommended, catalog)}
        assert items["Graphics"].min_status == "fail"
        assert items["Processor"].rec_status == "fail"
        assert items["Memory (RAM)"].min_status == "pass"
        assert items["Memory (RAM)"].rec_status == "fail"

    def test_missing_user_data_is_info(self, catalog):
        req = GameRequirements(os="Windows 10", cpu="Intel Core i5-4460", gpu="GTX 970", ram="8 GB", storage="50 GB")
        items = compare_specs(UserSpecs(), req, req, catalog)
        assert all((i.min_status, i.rec_status) == ("info", "info") for i in items)
        assert all(i.user_value == "Unknown" for i in items)

    def test_info_not_promoted_next_to_empty_tier(self, catalog):
        req = GameRequirements(ram="8 GB")
        item = compare_specs(UserSpecs(), req, None, catalog)[3]
        assert (item.min_status, item.rec_status) == ("info", "pass")

    def test_unreadable_tier_not_promoted_next_to_empty_tier(self, catalog):
        item = compare_specs(UserSpecs(ram_gb=16), GameRequirements(ram="lots of memory"), None, catalog)[3]
        assert (item.min_status, item.rec_status) == ("info", "pass")

    def test_unreadable_tier_promoted_next_to_passing_tier(self, catalog):
        item = compare_specs(
            UserSpecs(ram_gb=16), GameRequirements(ram="lots of memory"), GameRequirements(ram="8 GB"), catalog,
        )[3]
        assert (item.min_status, item.rec_status) == ("pass", "pass")

    def test_empty_machine_with_minimum_only_is_unknown(self, catalog):
        req = GameRequirements(
            os="Windows 10", cpu="Intel Core i5-4460", gpu="NVIDIA GeForce GTX 960",
            ram="8 GB RAM", storage="50 GB",
        )
        items = compare_specs(UserSpecs(), req, None, catalog)
        assert all(i.min_status == "info" for i in items)
        assert compute_verdict(items).verdict == "unknown"
