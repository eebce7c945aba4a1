"""ShippingPolicyService 테스트 (DB/캐시)"""

from decimal import Decimal

import pytest

from shipping.domain import CoverageMode, ZoneKey
from shipping.models import ShippingPolicy, ShippingZone
from shipping.services import ShippingPolicyService, ShippingServiceError
from shipping.tests.factories import ShippingPolicyFactory, ShippingZoneFactory, StoreFactory


@pytest.mark.django_db
class TestLoad:
    """스토어 배송 설정 조회"""

    def test_load_store_with_policy(self, zones_store):
        # Act
        context = ShippingPolicyService.load("zonestore")

        # Assert
        assert context.store_id == zones_store.pk
        assert context.currency == "PEN"
        assert context.location.region == "Lima"
        assert context.policy.mode == CoverageMode.ZONES
        assert context.policy.allowed_zones == frozenset({"Lima", "Arequipa"})
        assert context.policy.allowed_provinces == frozenset({ZoneKey("Cusco", "Cusco")})

    def test_load_store_without_policy(self):
        """정책이 없는 스토어는 policy=None"""
        StoreFactory(subdomain="nopolicy")

        context = ShippingPolicyService.load("nopolicy")

        assert context.policy is None

    def test_unknown_store(self):
        with pytest.raises(ShippingServiceError) as exc_info:
            ShippingPolicyService.load("missing")

        assert exc_info.value.code == "STORE_NOT_FOUND"
        assert exc_info.value.details == {"subdomain": "missing"}

    def test_inactive_store_is_not_found(self):
        StoreFactory.inactive(subdomain="closed")

        with pytest.raises(ShippingServiceError) as exc_info:
            ShippingPolicyService.load("closed")

        assert exc_info.value.code == "STORE_NOT_FOUND"


@pytest.mark.django_db
class TestCacheInvalidation:
    """캐시 및 시그널 무효화"""

    def test_load_is_cached(self, store, locmem_cache, django_assert_num_queries):
        # Arrange
        ShippingPolicyService.load("mystore")

        # Act & Assert - 두 번째 조회는 DB를 사용하지 않음
        with django_assert_num_queries(0):
            context = ShippingPolicyService.load("mystore")

        assert context.policy.cost == Decimal("10.00")

    def test_policy_update_invalidates_cache(self, store, locmem_cache):
        # Arrange
        ShippingPolicyService.load("mystore")

        # Act
        policy = store.shipping_policy
        policy.cost = Decimal("12.00")
        policy.save()

        # Assert
        assert locmem_cache.get(ShippingPolicyService.cache_key("mystore")) is None
        assert ShippingPolicyService.load("mystore").policy.cost == Decimal("12.00")

    def test_zone_change_invalidates_cache(self, zones_store, locmem_cache):
        ShippingPolicyService.load("zonestore")

        ShippingZoneFactory(policy=zones_store.shipping_policy, region="Tacna")

        assert "Tacna" in ShippingPolicyService.load("zonestore").policy.allowed_zones

    def test_store_deactivation_invalidates_cache(self, store, locmem_cache):
        ShippingPolicyService.load("mystore")

        store.is_active = False
        store.save()

        with pytest.raises(ShippingServiceError):
            ShippingPolicyService.load("mystore")

    def test_subdomain_rename_invalidates_previous_key(self, store, locmem_cache):
        ShippingPolicyService.load("mystore")

        store.subdomain = "renamed"
        store.save()

        assert locmem_cache.get(ShippingPolicyService.cache_key("mystore")) is None

    def test_store_deletion_invalidates_cache(self, zones_store, locmem_cache):
        ShippingPolicyService.load("zonestore")

        zones_store.delete()

        assert locmem_cache.get(ShippingPolicyService.cache_key("zonestore")) is None


@pytest.mark.django_db
class TestImportConfig:
    """설정 문서 가져오기"""

    def test_import_creates_policy_and_zones(self):
        # Arrange
        store = StoreFactory(subdomain="imported")
        config = {
            "enabled": True,
            "coverageMode": "zones",
            "localCost": 5,
            "nationalCost": "15.50",
            "freeAbove": 200,
            "allowedZones": ["Lima"],
            "allowedProvinces": ["Cusco|Cusco"],
            "allowedDistricts": ["Arequipa|Arequipa|Cayma"],
            "pickupEnabled": False,
        }

        # Act
        policy = ShippingPolicyService.import_config(store, config)

        # Assert
        assert policy.coverage_mode == "zones"
        assert policy.national_cost == Decimal("15.50")
        assert policy.pickup_enabled is False
        assert policy.delivery_enabled is True
        assert sorted(str(zone) for zone in policy.zones.all()) == [
            "Arequipa|Arequipa|Cayma",
            "Cusco|Cusco",
            "Lima",
        ]

    def test_import_replaces_existing_zones(self):
        store = StoreFactory(subdomain="replace")
        ShippingPolicyFactory.zones(store=store, regions=["Lima", "Tacna"])

        ShippingPolicyService.import_config(
            store, {"enabled": True, "coverageMode": "zones", "allowedZones": ["Puno"]}
        )

        assert ShippingPolicy.objects.filter(store=store).count() == 1
        assert list(ShippingZone.objects.filter(policy__store=store).values_list("region", flat=True)) == ["Puno"]

    def test_import_without_mode_defaults_to_nationwide(self):
        store = StoreFactory(subdomain="defaults")

        policy = ShippingPolicyService.import_config(store, {"cost": 7})

        assert policy.enabled is False
        assert policy.coverage_mode == CoverageMode.NATIONWIDE
        assert policy.cost == Decimal("7")

    def test_import_rejects_negative_cost(self):
        store = StoreFactory(subdomain="negative")

        with pytest.raises(ValueError):
            ShippingPolicyService.import_config(store, {"cost": -1})

        assert not ShippingPolicy.objects.filter(store=store).exists()

    def test_import_invalidates_cache(self, locmem_cache):
        store = StoreFactory(subdomain="cached")
        ShippingPolicyService.load("cached")

        ShippingPolicyService.import_config(store, {"enabled": True, "cost": 3})

        assert ShippingPolicyService.load("cached").policy.cost == Decimal("3")
