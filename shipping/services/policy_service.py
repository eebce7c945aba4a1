"""
스토어 배송 정책 로딩 서비스

스토어프론트 요청마다 DB에서 정책과 허용 지역을 읽지 않도록
불변 값(StoreShippingContext)으로 변환해 캐시에 보관합니다.

사용 예시:
    context = ShippingPolicyService.load("mystore")
    ZoneCoverageService.is_zone_allowed(context.policy, context.location, address)

캐시 무효화:
    Store / ShippingPolicy / ShippingZone 변경 시 signals.py에서
    ShippingPolicyService.invalidate()를 호출합니다.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from django.conf import settings
from django.core.cache import cache
from django.db import transaction

from ..domain import ShippingPolicy as ShippingPolicyValue
from ..domain import StoreLocation
from ..models import ShippingPolicy, ShippingZone, Store
from .base import ShippingServiceError, log_service_call

logger = logging.getLogger(__name__)

CACHE_KEY_PREFIX = "shipping:policy:"


@dataclass(frozen=True)
class StoreShippingContext:
    """체크아웃 세션 동안 고정되는 스토어 배송 설정"""

    store_id: int
    subdomain: str
    name: str
    currency: str
    location: StoreLocation
    policy: Optional[ShippingPolicyValue] = None


class ShippingPolicyService:
    """스토어 배송 정책 조회/캐시/가져오기"""

    @staticmethod
    def cache_key(subdomain: str) -> str:
        return f"{CACHE_KEY_PREFIX}{subdomain}"

    @classmethod
    @log_service_call
    def load(cls, subdomain: str) -> StoreShippingContext:
        """
        서브도메인으로 스토어 배송 설정 조회 (캐시 우선)

        Raises:
            ShippingServiceError: STORE_NOT_FOUND
        """
        key = cls.cache_key(subdomain)
        context = cache.get(key)
        if context is not None:
            return context

        store = (
            Store.objects.filter(subdomain=subdomain, is_active=True)
            .select_related("shipping_policy")
            .first()
        )
        if store is None:
            raise ShippingServiceError(
                "스토어를 찾을 수 없습니다.",
                code="STORE_NOT_FOUND",
                details={"subdomain": subdomain},
            )

        context = cls.build_context(store)
        cache.set(key, context, settings.SHIPPING_POLICY_CACHE_TIMEOUT)
        return context

    @staticmethod
    def build_context(store: Store) -> StoreShippingContext:
        """Store 모델에서 불변 컨텍스트 생성 (정책이 없으면 policy=None)"""
        try:
            policy_model = store.shipping_policy
        except ShippingPolicy.DoesNotExist:
            policy = None
        else:
            policy = policy_model.to_domain()

        return StoreShippingContext(
            store_id=store.pk,
            subdomain=store.subdomain,
            name=store.name,
            currency=store.currency,
            location=store.get_location(),
            policy=policy,
        )

    @classmethod
    def invalidate(cls, subdomain: str) -> None:
        cache.delete(cls.cache_key(subdomain))
        logger.debug("배송 정책 캐시 삭제 | subdomain=%s", subdomain)

    @classmethod
    @log_service_call
    def import_config(cls, store: Store, config: Mapping[str, Any]) -> ShippingPolicy:
        """
        설정 문서로 스토어 배송 정책과 허용 지역을 통째로 교체

        Args:
            store: 대상 스토어
            config: camelCase 배송 설정 (ShippingPolicy.from_config 형식)

        Returns:
            ShippingPolicy: 저장된 정책 모델

        Raises:
            ValueError: 금액/지역 키 형식 오류
        """
        value = ShippingPolicyValue.from_config(config)

        with transaction.atomic():
            policy, created = ShippingPolicy.objects.update_or_create(
                store=store,
                defaults={
                    "enabled": value.enabled,
                    "coverage_mode": value.mode,
                    "cost": value.cost,
                    "local_cost": value.local_cost,
                    "national_cost": value.national_cost,
                    "free_above": value.free_above,
                    "pickup_enabled": value.pickup_enabled,
                    "delivery_enabled": value.delivery_enabled,
                },
            )

            policy.zones.all().delete()
            zones = [ShippingZone(policy=policy, region=region) for region in sorted(value.allowed_zones)]
            zones += [
                ShippingZone(
                    policy=policy,
                    region=key.region,
                    province=key.province or "",
                    district=key.district or "",
                )
                for key in sorted(value.allowed_provinces | value.allowed_districts, key=str)
            ]
            ShippingZone.objects.bulk_create(zones)

        # bulk_create는 post_save 시그널을 보내지 않으므로 직접 무효화
        cls.invalidate(store.subdomain)

        logger.info(
            "배송 정책 가져오기 완료 | store=%s, created=%s, mode=%s, zones=%d",
            store.subdomain,
            created,
            value.mode,
            len(zones),
        )
        return policy
