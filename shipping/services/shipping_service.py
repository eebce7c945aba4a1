"""배송 서비스 레이어"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, TypedDict, Union

from ..domain import Address, CoverageMode, DeliveryMethod, ShippingPolicy, StoreLocation
from .base import ShippingServiceError, log_service_call
from .coverage_service import ZoneCoverageService

logger = logging.getLogger(__name__)

Money = Union[Decimal, int, str]

ZERO = Decimal("0")
PERCENT_QUANTUM = Decimal("0.01")


class FreeShippingProgress(TypedDict):
    """무료배송 진행률"""

    threshold: Decimal
    remaining: Decimal
    progress_percent: Decimal
    unlocked: bool


class ShippingQuote(TypedDict):
    """배송비 견적 결과"""

    delivery_method: str
    subtotal: Decimal
    shipping_fee: Decimal
    is_free_shipping: bool
    is_zone_allowed: bool
    order_total: Decimal
    free_shipping_progress: Optional[FreeShippingProgress]


def _as_decimal(value: Money) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))


def _first_set(*values: Optional[Decimal]) -> Decimal:
    """앞에서부터 설정된(None이 아닌) 첫 금액, 없으면 0"""
    for value in values:
        if value is not None:
            return value
    return ZERO


class ShippingService:
    """배송비 계산 및 체크아웃 배송 관련 비즈니스 로직"""

    @classmethod
    def resolve_shipping_cost(
        cls,
        policy: Optional[ShippingPolicy],
        store_location: Optional[StoreLocation],
        subtotal: Money,
        address: Optional[Address] = None,
    ) -> Decimal:
        """
        배송비 계산

        순서:
        1. 정책이 없거나 비활성 → 0
        2. 무료배송 기준 금액 이상 → 0 (모든 모드 공통, 모드별 계산보다 우선)
        3. 커버리지 모드별 배송비 (미설정 금액은 cost → 0 순으로 대체)

        Args:
            policy: 스토어 배송 정책
            store_location: 스토어 소재지
            subtotal: 상품 소계 (배송비 제외)
            address: 배송지 (region만 사용)

        Returns:
            Decimal: 배송비
        """
        if policy is None or not policy.enabled:
            return ZERO

        if policy.free_above is not None and _as_decimal(subtotal) >= policy.free_above:
            return ZERO

        mode = policy.mode

        if mode == CoverageMode.NATIONWIDE:
            return _first_set(policy.cost)

        if mode == CoverageMode.ZONES:
            region = address.region if address else None
            store_region = store_location.region if store_location else None
            if region and region == store_region:
                return _first_set(policy.local_cost, policy.cost)
            # 타 지역 또는 아직 지역 미선택
            return _first_set(policy.national_cost, policy.cost)

        if mode == CoverageMode.LOCAL:
            return _first_set(policy.local_cost, policy.cost)

        return _first_set(policy.cost)

    @classmethod
    def available_delivery_methods(cls, policy: Optional[ShippingPolicy]) -> list[DeliveryMethod]:
        """
        스토어가 허용하는 수령 방법 목록

        둘 다 꺼져 있으면 배송만 제공합니다.
        """
        if policy is None:
            return [DeliveryMethod.PICKUP, DeliveryMethod.DELIVERY]

        methods = []
        if policy.pickup_enabled:
            methods.append(DeliveryMethod.PICKUP)
        if policy.delivery_enabled or not methods:
            methods.append(DeliveryMethod.DELIVERY)
        return methods

    @classmethod
    def default_delivery_method(
        cls,
        policy: Optional[ShippingPolicy],
        requested: Optional[str] = None,
    ) -> DeliveryMethod:
        """요청한 방법이 가능하면 그대로, 아니면 픽업 → 배송 순으로 기본값 선택"""
        methods = cls.available_delivery_methods(policy)
        if requested in methods:
            return DeliveryMethod(requested)
        return methods[0]

    @classmethod
    def free_shipping_progress(
        cls,
        policy: Optional[ShippingPolicy],
        subtotal: Money,
    ) -> Optional[FreeShippingProgress]:
        """
        무료배송까지 남은 금액과 진행률

        배송이 비활성이거나 양수 기준 금액이 없으면 None
        """
        if policy is None or not policy.enabled:
            return None

        threshold = policy.free_above
        if threshold is None or threshold <= 0:
            return None

        subtotal = _as_decimal(subtotal)
        remaining = max(threshold - subtotal, ZERO)
        percent = min(Decimal("100"), subtotal / threshold * 100)

        return {
            "threshold": threshold,
            "remaining": remaining,
            "progress_percent": max(percent, ZERO).quantize(PERCENT_QUANTUM, rounding=ROUND_HALF_UP),
            "unlocked": remaining == ZERO,
        }

    @classmethod
    @log_service_call
    def quote(
        cls,
        policy: Optional[ShippingPolicy],
        store_location: Optional[StoreLocation],
        subtotal: Money,
        address: Optional[Address] = None,
        delivery_method: str = DeliveryMethod.DELIVERY,
        final: bool = False,
    ) -> ShippingQuote:
        """
        체크아웃 배송비 견적

        Args:
            policy: 스토어 배송 정책
            store_location: 스토어 소재지
            subtotal: 상품 소계
            address: 배송지
            delivery_method: "pickup" 또는 "delivery"
            final: True면 주문 확정용 최종 검증 수행

        Returns:
            ShippingQuote: 배송비, 무료배송 여부, 배송 가능 여부, 주문 총액 등

        Raises:
            ShippingServiceError: INVALID_SUBTOTAL, DELIVERY_METHOD_UNAVAILABLE,
                (final=True) ADDRESS_INCOMPLETE, ZONE_NOT_ALLOWED
        """
        subtotal = _as_decimal(subtotal)
        if subtotal < 0:
            raise ShippingServiceError(
                "소계는 0 이상이어야 합니다.",
                code="INVALID_SUBTOTAL",
                details={"subtotal": str(subtotal)},
            )

        methods = cls.available_delivery_methods(policy)
        if delivery_method not in methods:
            raise ShippingServiceError(
                "이 스토어에서 지원하지 않는 수령 방법입니다.",
                code="DELIVERY_METHOD_UNAVAILABLE",
                details={
                    "delivery_method": str(delivery_method),
                    "available": [str(method) for method in methods],
                },
            )

        progress = cls.free_shipping_progress(policy, subtotal)

        # 매장 픽업: 배송비와 지역 제한 없음
        if delivery_method == DeliveryMethod.PICKUP:
            return {
                "delivery_method": DeliveryMethod.PICKUP.value,
                "subtotal": subtotal,
                "shipping_fee": ZERO,
                "is_free_shipping": False,
                "is_zone_allowed": True,
                "order_total": subtotal,
                "free_shipping_progress": progress,
            }

        if final:
            ZoneCoverageService.validate_checkout_address(policy, store_location, address)

        is_allowed = ZoneCoverageService.is_zone_allowed(policy, store_location, address)
        shipping_fee = cls.resolve_shipping_cost(policy, store_location, subtotal, address)
        is_free_shipping = bool(
            policy is not None
            and policy.enabled
            and policy.free_above is not None
            and subtotal >= policy.free_above
        )

        logger.debug(
            "배송비 견적 | mode=%s, region=%s, subtotal=%s, fee=%s, allowed=%s",
            policy.mode if policy else None,
            address.region if address else None,
            subtotal,
            shipping_fee,
            is_allowed,
        )

        return {
            "delivery_method": DeliveryMethod.DELIVERY.value,
            "subtotal": subtotal,
            "shipping_fee": shipping_fee,
            "is_free_shipping": is_free_shipping,
            "is_zone_allowed": is_allowed,
            "order_total": subtotal + shipping_fee,
            "free_shipping_progress": progress,
        }
