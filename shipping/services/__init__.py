"""
배송 비즈니스 로직 서비스 패키지

- ZoneCoverageService: 배송 가능 지역 판별 / 최종 검증
- ShippingService: 배송비 계산, 수령 방법, 무료배송 진행률, 견적
- ShippingPolicyService: 스토어 배송 정책 로딩(캐시), 설정 가져오기
"""

from .base import ServiceError, ShippingServiceError, log_service_call
from .coverage_service import ZoneCoverageService
from .policy_service import ShippingPolicyService, StoreShippingContext
from .shipping_service import FreeShippingProgress, ShippingQuote, ShippingService

__all__ = [
    # Base
    "ServiceError",
    "ShippingServiceError",
    "log_service_call",
    # Services
    "ZoneCoverageService",
    "ShippingService",
    "ShippingPolicyService",
    "StoreShippingContext",
    "FreeShippingProgress",
    "ShippingQuote",
]
