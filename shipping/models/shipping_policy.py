from __future__ import annotations

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models

from ..domain import CoverageMode, ShippingPolicy as ShippingPolicyValue, ZoneKey


def _money_field(verbose_name: str, help_text: str) -> models.DecimalField:
    """선택 입력 금액 필드 (비워두면 상위 금액으로 대체)"""
    return models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal("0"))],
        verbose_name=verbose_name,
        help_text=help_text,
    )


class ShippingPolicy(models.Model):
    """
    스토어 배송 정책

    - 스토어당 하나
    - 허용 지역은 ShippingZone 행으로 관리
    - 계산 로직은 to_domain()으로 변환한 불변 값으로 수행
    """

    store = models.OneToOneField(
        "shipping.Store",
        on_delete=models.CASCADE,
        related_name="shipping_policy",
        verbose_name="스토어",
    )

    enabled = models.BooleanField(default=False, verbose_name="배송비 사용")

    coverage_mode = models.CharField(
        max_length=20,
        choices=CoverageMode.choices,
        default=CoverageMode.NATIONWIDE,
        verbose_name="배송 범위",
    )

    cost = _money_field("기본 배송비", "다른 배송비가 비어 있을 때 모든 모드에 적용")
    local_cost = _money_field("지역 배송비", "스토어와 같은 지역(zones) 또는 local 모드 배송비")
    national_cost = _money_field("타 지역 배송비", "zones 모드에서 스토어와 다른 허용 지역 배송비")
    free_above = _money_field("무료배송 기준 금액", "소계가 이 금액 이상이면 배송비 0")

    pickup_enabled = models.BooleanField(default=True, verbose_name="매장 픽업 가능")
    delivery_enabled = models.BooleanField(default=True, verbose_name="배송 가능")

    created_at = models.DateTimeField(auto_now_add=True, verbose_name="생성일시")
    updated_at = models.DateTimeField(auto_now=True, verbose_name="수정일시")

    class Meta:
        db_table = "shipping_policies"
        verbose_name = "배송 정책"
        verbose_name_plural = "배송 정책 목록"

    def __str__(self) -> str:
        return f"{self.store.name} - {self.get_coverage_mode_display()}"

    def to_domain(self) -> ShippingPolicyValue:
        """
        불변 도메인 값으로 변환

        ShippingZone 행은 채워진 단계에 따라 세 허용 목록으로 나뉩니다.
        """
        zones: set[str] = set()
        provinces: set[ZoneKey] = set()
        districts: set[ZoneKey] = set()

        for zone in self.zones.all():
            key = zone.zone_key
            if key.level == 1:
                zones.add(key.region)
            elif key.level == 2:
                provinces.add(key)
            else:
                districts.add(key)

        return ShippingPolicyValue(
            enabled=self.enabled,
            coverage_mode=self.coverage_mode or None,
            cost=self.cost,
            local_cost=self.local_cost,
            national_cost=self.national_cost,
            free_above=self.free_above,
            allowed_zones=frozenset(zones),
            allowed_provinces=frozenset(provinces),
            allowed_districts=frozenset(districts),
            pickup_enabled=self.pickup_enabled,
            delivery_enabled=self.delivery_enabled,
        )


class ShippingZone(models.Model):
    """
    배송 허용 지역 (zones 모드)

    - region만: 지역 전체 허용
    - region + province: 해당 주/도만 허용
    - region + province + district: 해당 구/동만 허용
    """

    policy = models.ForeignKey(
        ShippingPolicy,
        on_delete=models.CASCADE,
        related_name="zones",
        verbose_name="배송 정책",
    )

    region = models.CharField(max_length=100, verbose_name="지역")
    province = models.CharField(max_length=100, blank=True, default="", verbose_name="주/도")
    district = models.CharField(max_length=100, blank=True, default="", verbose_name="구/동")

    class Meta:
        db_table = "shipping_zones"
        verbose_name = "배송 허용 지역"
        verbose_name_plural = "배송 허용 지역 목록"
        ordering = ["region", "province", "district"]
        constraints = [
            models.UniqueConstraint(
                fields=["policy", "region", "province", "district"],
                name="unique_shipping_zone_per_policy",
            ),
        ]

    def __str__(self) -> str:
        return str(self.zone_key)

    @property
    def zone_key(self) -> ZoneKey:
        return ZoneKey(self.region, self.province or None, self.district or None)

    def clean(self) -> None:
        """구/동은 주/도가 있어야 지정 가능"""
        super().clean()
        if self.district and not self.province:
            raise ValidationError({"province": "구/동을 지정하려면 주/도를 먼저 선택해야 합니다."})
