from __future__ import annotations

import logging

from drf_spectacular.utils import OpenApiExample, extend_schema
from rest_framework import permissions, status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from shipping.domain import CoverageMode
from shipping.serializers import (
    AddressSerializer,
    CoverageResponseSerializer,
    ShippingErrorResponseSerializer,
    ShippingPolicySerializer,
    ShippingQuoteRequestSerializer,
    ShippingQuoteResponseSerializer,
)
from shipping.services import ShippingService, ShippingServiceError, ZoneCoverageService
from shipping.throttles import ShippingQuoteRateThrottle

from .mixins import StoreShippingContextMixin, service_error_response

logger = logging.getLogger(__name__)


class ShippingPolicyView(StoreShippingContextMixin, APIView):
    """
    스토어 배송 정책 조회 API

    체크아웃 화면이 수령 방법 선택지, 배송비 안내, 지역 선택 목록을
    구성할 때 사용합니다.
    """

    permission_classes = [permissions.AllowAny]
    throttle_classes = [ShippingQuoteRateThrottle]

    @extend_schema(
        responses={200: ShippingPolicySerializer, 404: ShippingErrorResponseSerializer},
        summary="배송 정책 조회",
        tags=["Shipping"],
    )
    def get(self, request: Request, subdomain: str) -> Response:
        context, error_response = self.load_store_context(subdomain)
        if error_response:
            return error_response

        policy = context.policy
        data = {
            "store": {
                "name": context.name,
                "subdomain": context.subdomain,
                "currency": context.currency,
                "country": context.location.country,
                "region": context.location.region,
            },
            "enabled": bool(policy and policy.enabled),
            "coverage_mode": str(policy.mode) if policy else CoverageMode.NATIONWIDE.value,
            "cost": policy.cost if policy else None,
            "local_cost": policy.local_cost if policy else None,
            "national_cost": policy.national_cost if policy else None,
            "free_above": policy.free_above if policy else None,
            "allowed_zones": sorted(policy.allowed_zones) if policy else [],
            "allowed_provinces": sorted(policy.allowed_provinces, key=str) if policy else [],
            "allowed_districts": sorted(policy.allowed_districts, key=str) if policy else [],
            "delivery_methods": [str(method) for method in ShippingService.available_delivery_methods(policy)],
        }
        return Response(ShippingPolicySerializer(data).data)


class ShippingCoverageView(StoreShippingContextMixin, APIView):
    """
    배송 가능 지역 확인 API

    주소 선택 단계마다 호출합니다.
    지역을 아직 고르지 않은 상태는 배송 가능으로 응답합니다.
    """

    permission_classes = [permissions.AllowAny]
    throttle_classes = [ShippingQuoteRateThrottle]

    @extend_schema(
        request=AddressSerializer,
        responses={
            200: CoverageResponseSerializer,
            400: ShippingErrorResponseSerializer,
            404: ShippingErrorResponseSerializer,
        },
        summary="배송 가능 지역 확인",
        examples=[
            OpenApiExample(
                "주/도 단위 선택",
                value={"region": "Lima", "province": "Callao"},
                request_only=True,
            ),
        ],
        tags=["Shipping"],
    )
    def post(self, request: Request, subdomain: str) -> Response:
        context, error_response = self.load_store_context(subdomain)
        if error_response:
            return error_response

        serializer = AddressSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        address = AddressSerializer.to_address(serializer.validated_data)
        allowed = ZoneCoverageService.is_zone_allowed(context.policy, context.location, address)
        return Response({"is_zone_allowed": allowed})


class ShippingQuoteView(StoreShippingContextMixin, APIView):
    """
    배송비 견적 API

    소계와 배송지로 배송비와 주문 총액을 계산합니다.
    주문 확정 직전에는 final=true로 호출하여 배송지를 최종 검증합니다.
    """

    permission_classes = [permissions.AllowAny]
    throttle_classes = [ShippingQuoteRateThrottle]

    @extend_schema(
        request=ShippingQuoteRequestSerializer,
        responses={
            200: ShippingQuoteResponseSerializer,
            400: ShippingErrorResponseSerializer,
            404: ShippingErrorResponseSerializer,
        },
        summary="배송비 견적",
        description="""
배송비, 무료배송 여부, 배송 가능 여부, 주문 총액을 반환합니다.

**요청 본문:**
```json
{
    "subtotal": "120.00",
    "delivery_method": "delivery",
    "address": {"region": "Lima", "province": "Lima", "district": "Miraflores"},
    "final": false
}
```

**에러 코드 (400):**
- `DELIVERY_METHOD_UNAVAILABLE`: 스토어가 지원하지 않는 수령 방법
- `ADDRESS_INCOMPLETE`: final=true인데 지역 미선택 (zones/local 모드)
- `ZONE_NOT_ALLOWED`: final=true인데 배송 불가 지역
        """,
        tags=["Shipping"],
    )
    def post(self, request: Request, subdomain: str) -> Response:
        context, error_response = self.load_store_context(subdomain)
        if error_response:
            return error_response

        serializer = ShippingQuoteRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        data = serializer.validated_data
        try:
            quote = ShippingService.quote(
                context.policy,
                context.location,
                data["subtotal"],
                address=AddressSerializer.to_address(data.get("address")),
                delivery_method=data["delivery_method"],
                final=data["final"],
            )
        except ShippingServiceError as e:
            return service_error_response(e)

        return Response(ShippingQuoteResponseSerializer({**quote, "currency": context.currency}).data)
