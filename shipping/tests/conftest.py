import logging

from django.conf import settings

import pytest
from rest_framework.test import APIClient

from shipping.domain import Address, ShippingPolicy, StoreLocation
from shipping.tests.factories import ShippingPolicyFactory, StoreFactory, TestConstants

# ==========================================
# 1. 전역 설정 (Session Scope)
# ==========================================


@pytest.fixture(scope="session", autouse=True)
def setup_throttle_for_tests():
    """
    테스트 환경에서 throttle rates를 매우 높게 설정

    Session scope: 전체 테스트 세션에서 한 번만 실행
    autouse: 자동으로 모든 테스트에 적용
    """
    settings.REST_FRAMEWORK["DEFAULT_THROTTLE_RATES"] = {
        "shipping_quote": "100000/min",
        "geo_lookup": "100000/min",
    }


@pytest.fixture(scope="session", autouse=True)
def setup_logging_for_tests():
    """
    테스트 환경에서 로그 propagation 활성화

    caplog가 로그를 캡처할 수 있도록 propagate=True로 설정
    """
    for logger_name in [
        "shipping.services",
        "shipping.services.policy_service",
        "shipping.views",
    ]:
        logging.getLogger(logger_name).propagate = True


@pytest.fixture
def locmem_cache(settings):
    """
    실제 캐시 동작이 필요한 테스트용 (기본 테스트 설정은 DummyCache)
    """
    from django.core.cache import cache

    settings.CACHES = {
        "default": {
            "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
            "LOCATION": "shipping-tests",
        }
    }
    cache.clear()
    yield cache
    cache.clear()


# ==========================================
# 2. API 클라이언트 Fixture
# ==========================================


@pytest.fixture
def api_client():
    """
    DRF APIClient 인스턴스

    Function scope: 매 테스트마다 새로운 클라이언트 생성
    """
    return APIClient()


# ==========================================
# 3. 도메인 값 Fixture
# ==========================================


@pytest.fixture
def lima_store_location():
    """Lima 소재 스토어"""
    return StoreLocation(region=TestConstants.STORE_REGION)


@pytest.fixture
def zones_policy():
    """
    지정 지역 배송 정책

    - 허용 지역: Lima
    - 지역 배송비 5 / 타 지역 배송비 15
    """
    return ShippingPolicy(
        enabled=True,
        coverage_mode="zones",
        local_cost=TestConstants.LOCAL_COST,
        national_cost=TestConstants.NATIONAL_COST,
        allowed_zones={"Lima"},
    )


@pytest.fixture
def lima_address():
    return Address(region="Lima")


# ==========================================
# 4. 스토어(Store) Fixture
# ==========================================


@pytest.fixture
def store(db):
    """
    배송 정책이 있는 기본 스토어

    - subdomain: mystore
    - 소재지: Lima
    - 정책: 전국 배송, 기본 배송비 10, 100 이상 무료배송
    """
    store = StoreFactory(subdomain="mystore", name="My Store")
    ShippingPolicyFactory(store=store, free_above=TestConstants.FREE_ABOVE)
    return store


@pytest.fixture
def zones_store(db):
    """
    지정 지역 배송 스토어 (Lima 소재)

    - 허용: Lima 전체, Arequipa, Cusco|Cusco
    """
    store = StoreFactory(subdomain="zonestore", name="Zone Store")
    ShippingPolicyFactory.zones(
        store=store,
        regions=["Lima", "Arequipa"],
        provinces=[("Cusco", "Cusco")],
    )
    return store
