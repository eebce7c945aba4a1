"""
shipping/serializers/__init__.py

Serializer 모듈의 진입점입니다.

사용 예시:
    from shipping.serializers import AddressSerializer, ShippingQuoteRequestSerializer
"""

from .shipping_serializers import (
    AddressSerializer,
    CoverageResponseSerializer,
    FreeShippingProgressSerializer,
    LocalitiesResponseSerializer,
    ShippingErrorResponseSerializer,
    ShippingPolicySerializer,
    ShippingQuoteRequestSerializer,
    ShippingQuoteResponseSerializer,
    StoreSummarySerializer,
    ZoneKeySerializer,
)

__all__ = [
    "AddressSerializer",
    "CoverageResponseSerializer",
    "FreeShippingProgressSerializer",
    "LocalitiesResponseSerializer",
    "ShippingErrorResponseSerializer",
    "ShippingPolicySerializer",
    "ShippingQuoteRequestSerializer",
    "ShippingQuoteResponseSerializer",
    "StoreSummarySerializer",
    "ZoneKeySerializer",
]
