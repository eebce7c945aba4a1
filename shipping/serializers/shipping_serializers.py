from __future__ import annotations

from decimal import Decimal
from typing import Any

from rest_framework import serializers

from ..domain import Address, DeliveryMethod


def _money(**kwargs: Any) -> serializers.DecimalField:
    return serializers.DecimalField(max_digits=12, decimal_places=2, **kwargs)


class AddressSerializer(serializers.Serializer):
    """
    배송지 입력 Serializer

    단계적 선택을 지원하므로 모든 필드가 선택사항이지만,
    하위 단계는 상위 단계가 있어야 지정할 수 있습니다.
    """

    region = serializers.CharField(
        max_length=100, required=False, allow_blank=True, allow_null=True, help_text="지역"
    )
    province = serializers.CharField(
        max_length=100, required=False, allow_blank=True, allow_null=True, help_text="주/도 또는 도시"
    )
    district = serializers.CharField(
        max_length=100, required=False, allow_blank=True, allow_null=True, help_text="구/동"
    )

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:
        if attrs.get("district") and not attrs.get("province"):
            raise serializers.ValidationError({"province": "구/동을 선택하려면 주/도가 필요합니다."})
        if attrs.get("province") and not attrs.get("region"):
            raise serializers.ValidationError({"region": "주/도를 선택하려면 지역이 필요합니다."})
        return attrs

    @staticmethod
    def to_address(data: dict[str, Any] | None) -> Address:
        """검증된 데이터를 Address 값 객체로 변환"""
        data = data or {}
        return Address(
            region=data.get("region"),
            province=data.get("province"),
            district=data.get("district"),
        )


class CoverageResponseSerializer(serializers.Serializer):
    """배송 가능 여부 응답"""

    is_zone_allowed = serializers.BooleanField()


class ShippingQuoteRequestSerializer(serializers.Serializer):
    """배송비 견적 요청"""

    subtotal = _money(min_value=Decimal("0"), help_text="상품 소계 (배송비 제외)")
    delivery_method = serializers.ChoiceField(
        choices=DeliveryMethod.choices,
        default=DeliveryMethod.DELIVERY,
        help_text="수령 방법",
    )
    address = AddressSerializer(required=False, allow_null=True, help_text="배송지")
    final = serializers.BooleanField(
        default=False,
        help_text="주문 확정 직전 호출 시 true (지역 미선택/배송 불가 지역이면 400)",
    )


class FreeShippingProgressSerializer(serializers.Serializer):
    """무료배송 진행률"""

    threshold = _money()
    remaining = _money()
    progress_percent = serializers.DecimalField(max_digits=5, decimal_places=2)
    unlocked = serializers.BooleanField()


class ShippingQuoteResponseSerializer(serializers.Serializer):
    """배송비 견적 응답"""

    delivery_method = serializers.CharField()
    subtotal = _money()
    shipping_fee = _money()
    is_free_shipping = serializers.BooleanField()
    is_zone_allowed = serializers.BooleanField()
    order_total = _money(help_text="소계 + 배송비 (결제 금액)")
    free_shipping_progress = FreeShippingProgressSerializer(allow_null=True)
    currency = serializers.CharField()


class ZoneKeySerializer(serializers.Serializer):
    """허용 지역 키"""

    region = serializers.CharField()
    province = serializers.CharField(allow_null=True)
    district = serializers.CharField(allow_null=True)


class StoreSummarySerializer(serializers.Serializer):
    name = serializers.CharField()
    subdomain = serializers.CharField()
    currency = serializers.CharField()
    country = serializers.CharField()
    region = serializers.CharField(allow_null=True)


class ShippingPolicySerializer(serializers.Serializer):
    """스토어 배송 정책 조회 응답"""

    store = StoreSummarySerializer()
    enabled = serializers.BooleanField()
    coverage_mode = serializers.CharField()
    cost = _money(allow_null=True)
    local_cost = _money(allow_null=True)
    national_cost = _money(allow_null=True)
    free_above = _money(allow_null=True)
    allowed_zones = serializers.ListField(child=serializers.CharField())
    allowed_provinces = ZoneKeySerializer(many=True)
    allowed_districts = ZoneKeySerializer(many=True)
    delivery_methods = serializers.ListField(child=serializers.CharField())


class LocalitiesResponseSerializer(serializers.Serializer):
    """지리 참조 데이터 조회 응답"""

    country = serializers.CharField()
    region = serializers.CharField(allow_null=True)
    locality = serializers.CharField(allow_null=True)
    region_label = serializers.CharField()
    items = serializers.ListField(child=serializers.CharField())


class ShippingErrorResponseSerializer(serializers.Serializer):
    """배송 에러 응답"""

    error = serializers.CharField()
    code = serializers.CharField()
    details = serializers.DictField(required=False)
