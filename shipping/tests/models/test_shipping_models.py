"""Store / ShippingPolicy / ShippingZone 모델 테스트"""

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import IntegrityError

import pytest

from shipping.domain import CoverageMode, StoreLocation, ZoneKey
from shipping.tests.factories import (
    ShippingPolicyFactory,
    ShippingZoneFactory,
    StoreFactory,
    TestConstants,
)


@pytest.mark.django_db
class TestStore:
    def test_get_location(self):
        store = StoreFactory(region="Arequipa", city="")

        assert store.get_location() == StoreLocation(region="Arequipa", country="PE", city=None)

    def test_blank_region_becomes_none(self):
        store = StoreFactory(region="")

        assert store.get_location().region is None

    def test_str(self):
        store = StoreFactory(name="Tienda", subdomain="tienda")

        assert str(store) == "Tienda (tienda)"


@pytest.mark.django_db
class TestShippingPolicyToDomain:
    """모델 → 불변 도메인 값 변환"""

    def test_zone_rows_sorted_into_allow_lists(self):
        # Arrange
        policy = ShippingPolicyFactory.zones(
            regions=["Lima"],
            provinces=[("Cusco", "Cusco")],
            districts=[("Arequipa", "Arequipa", "Cayma")],
        )

        # Act
        value = policy.to_domain()

        # Assert
        assert value.mode == CoverageMode.ZONES
        assert value.allowed_zones == frozenset({"Lima"})
        assert value.allowed_provinces == frozenset({ZoneKey("Cusco", "Cusco")})
        assert value.allowed_districts == frozenset({ZoneKey("Arequipa", "Arequipa", "Cayma")})
        assert value.local_cost == TestConstants.LOCAL_COST
        assert value.national_cost == TestConstants.NATIONAL_COST
        assert value.cost is None

    def test_defaults(self):
        policy = ShippingPolicyFactory(enabled=False, cost=None)

        value = policy.to_domain()

        assert value.enabled is False
        assert value.mode == CoverageMode.NATIONWIDE
        assert value.free_above is None
        assert value.pickup_enabled is True
        assert value.delivery_enabled is True

    def test_negative_cost_fails_validation(self):
        policy = ShippingPolicyFactory.build(store=StoreFactory(), cost=Decimal("-1"))

        with pytest.raises(ValidationError) as exc_info:
            policy.full_clean()

        assert "cost" in exc_info.value.message_dict


@pytest.mark.django_db
class TestShippingZone:
    def test_zone_key(self):
        zone = ShippingZoneFactory(region="Lima", province="Callao")

        assert zone.zone_key == ZoneKey("Lima", "Callao")
        assert str(zone) == "Lima|Callao"

    def test_district_without_province_is_invalid(self):
        zone = ShippingZoneFactory.build(
            policy=ShippingPolicyFactory.zones(),
            region="Lima",
            district="Miraflores",
        )

        with pytest.raises(ValidationError) as exc_info:
            zone.full_clean()

        assert "province" in exc_info.value.message_dict

    def test_duplicate_zone_is_rejected(self):
        policy = ShippingPolicyFactory.zones(regions=["Lima"])

        with pytest.raises(IntegrityError):
            ShippingZoneFactory(policy=policy, region="Lima")
