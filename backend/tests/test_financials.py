"""
Tests for the Financial Aggregator.
"""
from datetime import date

import pytest

from confirmation_engine.constants import AssetCountry, LiabilityType
from confirmation_engine.services.rules import (
    age_at_death,
    compute_confirmation_total,
    compute_country_totals,
    compute_estate_totals,
    compute_liability_totals,
    compute_net_value,
    is_death_date_valid,
    is_excepted_estate,
    is_small_estate,
    should_skip_boxes_17_to_20,
    validate_totals,
)

from conftest import BASE_DECEASED, make_asset, make_case, make_liability


@pytest.fixture
def mixed_assets():
    return [
        make_asset(country=AssetCountry.SCOTLAND, deceased_share_value=100_000, full_value=200_000, joint_ownership=True),
        make_asset(country=AssetCountry.ENGLAND_WALES, deceased_share_value=20_000, full_value=20_000),
        make_asset(country=AssetCountry.NORTHERN_IRELAND, deceased_share_value=5_000, full_value=5_000),
        make_asset(country=AssetCountry.ELSEWHERE, deceased_share_value=50_000, full_value=50_000),
    ]


class TestConfirmationTotal:
    """Only UK assets count towards confirmation."""

    def test_excludes_elsewhere(self, mixed_assets):
        assert compute_confirmation_total(mixed_assets) == 125_000

    def test_uses_deceased_share_not_full_value(self):
        assets = [make_asset(full_value=300_000, deceased_share_value=150_000, joint_ownership=True)]
        assert compute_confirmation_total(assets) == 150_000

    def test_empty(self):
        assert compute_confirmation_total([]) == 0

    def test_country_totals_include_elsewhere(self, mixed_assets):
        totals = compute_country_totals(mixed_assets)
        assert totals[AssetCountry.SCOTLAND] == 100_000
        assert totals[AssetCountry.ENGLAND_WALES] == 20_000
        assert totals[AssetCountry.NORTHERN_IRELAND] == 5_000
        assert totals[AssetCountry.ELSEWHERE] == 50_000

    def test_country_totals_always_have_every_country(self):
        assert compute_country_totals([]) == {country: 0 for country in AssetCountry}


class TestLiabilities:

    def test_buckets(self):
        liabilities = [
            make_liability(LiabilityType.FUNERAL, 4_000),
            make_liability(LiabilityType.MORTGAGE, 50_000),
            make_liability(LiabilityType.OTHER_DEBT, 1_000),
            make_liability(LiabilityType.OTHER_DEBT, 500),
        ]
        totals = compute_liability_totals(liabilities)
        assert (totals.funeral, totals.mortgage, totals.other_debt) == (4_000, 50_000, 1_500)
        assert totals.total == 55_500

    def test_net_value(self):
        liabilities = [make_liability(LiabilityType.FUNERAL, 4_000), make_liability(LiabilityType.OTHER_DEBT, 1_000)]
        assert compute_net_value(100_000, liabilities) == 95_000

    def test_net_value_can_go_negative(self):
        """The aggregator reports; validate_totals is what objects."""
        assert compute_net_value(1_000, [make_liability(LiabilityType.MORTGAGE, 5_000)]) == -4_000

    def test_unmapped_type_raises(self):
        liability = make_liability(LiabilityType.FUNERAL, 100)
        object.__setattr__(liability, "liability_type", "gambling_debt")
        with pytest.raises(ValueError, match="Unmapped liability type"):
            compute_liability_totals([liability])


class TestThresholds:

    @pytest.mark.parametrize("gross,expected", [
        (325_000, True),
        (325_001, False),
        (0, True),
    ])
    def test_excepted_estate(self, gross, expected):
        assert is_excepted_estate(gross, claiming_transferable_nrb=False) is expected

    def test_transferable_nrb_doubles_the_limit(self):
        assert is_excepted_estate(650_000, claiming_transferable_nrb=True)
        assert not is_excepted_estate(650_001, claiming_transferable_nrb=True)

    def test_small_estate(self):
        assert is_small_estate(36_000)
        assert not is_small_estate(36_001)

    def test_skip_boxes_17_to_20(self):
        assert should_skip_boxes_17_to_20(True)
        assert not should_skip_boxes_17_to_20(False)

    def test_death_date(self):
        assert is_death_date_valid(date(2022, 1, 1))
        assert not is_death_date_valid(date(2021, 12, 31))

    def test_age_at_death(self):
        # Born 12 May 1940, died 15 August 2023
        assert age_at_death(BASE_DECEASED) == 83


class TestEstateTotals:

    def test_one_total_everywhere(self, mixed_assets):
        case = make_case(assets=mixed_assets, liabilities=[make_liability(LiabilityType.FUNERAL, 5_000)])
        totals = compute_estate_totals(case)
        assert totals.confirmation_total == 125_000
        assert totals.gross_value == 125_000
        assert totals.net_value == 120_000
        assert totals.is_excepted

    def test_validate_totals_ok(self, mixed_assets):
        assert validate_totals(make_case(assets=mixed_assets)) == []

    def test_validate_totals_negative_net(self):
        case = make_case(
            assets=[make_asset(deceased_share_value=1_000, full_value=1_000)],
            liabilities=[make_liability(LiabilityType.OTHER_DEBT, 2_000)],
        )
        errors = validate_totals(case)
        assert len(errors) == 1
        assert errors[0].startswith("Net value of estate cannot be negative.")
