"""배송 가능 지역(커버리지) 판별 서비스"""

from __future__ import annotations

import logging
from typing import Optional

from ..domain import Address, CoverageMode, ShippingPolicy, StoreLocation, ZoneKey
from .base import ShippingServiceError, log_service_call

logger = logging.getLogger(__name__)


class ZoneCoverageService:
    """
    배송지가 스토어의 배송 가능 지역 안에 있는지 판별

    is_zone_allowed는 체크아웃 화면의 주소 선택 단계에서 호출되는 판별 함수이므로
    예외를 던지지 않고, 설정이 없거나 알 수 없는 모드면 허용(fail open)합니다.
    주문 확정 직전에는 validate_checkout_address로 엄격하게 검증합니다.
    """

    # 지역 선택이 필수인 모드
    RESTRICTED_MODES = (CoverageMode.ZONES, CoverageMode.LOCAL)

    @classmethod
    def is_zone_allowed(
        cls,
        policy: Optional[ShippingPolicy],
        store_location: Optional[StoreLocation],
        address: Optional[Address] = None,
    ) -> bool:
        """
        배송 가능 지역 여부

        Args:
            policy: 스토어 배송 정책 (None이면 제한 없음)
            store_location: 스토어 소재지 (local 모드 비교용)
            address: 배송지 (일부만 선택되어 있어도 됨)

        Returns:
            bool: 배송 가능 여부
        """
        if policy is None:
            return True

        address = address or Address()
        mode = policy.mode

        if mode == CoverageMode.ZONES:
            return cls._is_in_allowed_zones(policy, address)

        if mode == CoverageMode.LOCAL:
            # 아직 지역을 고르지 않았으면 화면을 막지 않음
            if not address.region:
                return True
            store_region = store_location.region if store_location else None
            return address.region == store_region

        # nationwide 및 알 수 없는 모드
        return True

    @staticmethod
    def _is_in_allowed_zones(policy: ShippingPolicy, address: Address) -> bool:
        """zones 모드: 상위 단계부터 확인하고 처음 일치하는 단계에서 종료"""
        region = address.region
        if not region:
            return True

        if region in policy.allowed_zones:
            return True

        if address.province:
            if ZoneKey(region, address.province) in policy.allowed_provinces:
                return True

            if address.district:
                if ZoneKey(region, address.province, address.district) in policy.allowed_districts:
                    return True

        return False

    @classmethod
    @log_service_call
    def validate_checkout_address(
        cls,
        policy: Optional[ShippingPolicy],
        store_location: Optional[StoreLocation],
        address: Optional[Address] = None,
    ) -> None:
        """
        주문 확정 시 배송지 최종 검증

        is_zone_allowed는 지역 미선택 상태를 허용하므로,
        zones/local 모드에서는 여기서 지역 선택 여부까지 확인합니다.

        Raises:
            ShippingServiceError: ADDRESS_INCOMPLETE, ZONE_NOT_ALLOWED
        """
        if policy is None or policy.mode not in cls.RESTRICTED_MODES:
            return

        address = address or Address()
        if not address.region:
            raise ShippingServiceError(
                "배송 지역을 선택해주세요.",
                code="ADDRESS_INCOMPLETE",
                details={"coverage_mode": str(policy.mode)},
            )

        if not cls.is_zone_allowed(policy, store_location, address):
            logger.info(
                "배송 불가 지역 | mode=%s, region=%s, province=%s, district=%s",
                policy.mode,
                address.region,
                address.province,
                address.district,
            )
            raise ShippingServiceError(
                "선택하신 지역은 배송이 불가능합니다.",
                code="ZONE_NOT_ALLOWED",
                details={
                    "region": address.region,
                    "province": address.province,
                    "district": address.district,
                },
            )
