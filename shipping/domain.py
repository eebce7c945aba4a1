"""배송 도메인 값 객체

스토어 설정에서 읽어 온 배송 정책과 체크아웃 화면에서 선택된 주소를
불변(frozen) 데이터클래스로 표현합니다.

- ShippingPolicy: 커버리지 모드, 모드별 배송비, 무료배송 기준, 허용 지역 목록
- StoreLocation: 스토어 소재지 (지역 일치 비교용)
- Address: 배송지 (지역 → 주/도 → 구/동, 단계적으로 선택됨)
- ZoneKey: 허용 목록용 구조화된 복합 키

주의:
    이 모듈은 Django 모델을 import 하지 않습니다.
    (앱 로딩 전에도 서비스 레이어에서 안전하게 사용 가능)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping, Optional

from django.db import models

# 레거시 설정 문서에서 사용하는 복합 키 구분자 ("Lima|Callao")
ZONE_KEY_SEPARATOR = "|"


class CoverageMode(models.TextChoices):
    """배송 커버리지 모드"""

    NATIONWIDE = "nationwide", "전국 배송"
    ZONES = "zones", "지정 지역 배송"
    LOCAL = "local", "스토어 소재 지역만"


class DeliveryMethod(models.TextChoices):
    """수령 방법"""

    PICKUP = "pickup", "매장 픽업"
    DELIVERY = "delivery", "배송"


def _clean(value: Optional[str]) -> Optional[str]:
    """빈 문자열은 미선택(None)으로 취급"""
    return value or None


@dataclass(frozen=True)
class ZoneKey:
    """
    허용 목록 복합 키

    region만 있으면 지역 단위, province까지 있으면 주/도 단위,
    district까지 있으면 구/동 단위 키입니다.
    """

    region: str
    province: Optional[str] = None
    district: Optional[str] = None

    @classmethod
    def parse(cls, text: str) -> ZoneKey:
        """
        파이프(|)로 연결된 레거시 키 파싱

        Args:
            text: "지역", "지역|주", "지역|주|구" 형식 문자열

        Returns:
            ZoneKey

        Raises:
            ValueError: 빈 문자열이거나 단계가 3개를 초과하는 경우
        """
        parts = [part.strip() for part in text.split(ZONE_KEY_SEPARATOR)]
        if not parts[0] or len(parts) > 3 or any(not part for part in parts):
            raise ValueError(f"올바르지 않은 지역 키입니다: {text!r}")
        return cls(*parts)

    @property
    def level(self) -> int:
        """계층 단계 (1: 지역, 2: 주/도, 3: 구/동)"""
        if self.district:
            return 3
        if self.province:
            return 2
        return 1

    def __str__(self) -> str:
        return ZONE_KEY_SEPARATOR.join(part for part in (self.region, self.province, self.district) if part)


@dataclass(frozen=True)
class StoreLocation:
    """스토어 소재지"""

    region: Optional[str] = None
    country: str = "PE"
    city: Optional[str] = None


@dataclass(frozen=True)
class Address:
    """
    배송지 주소

    체크아웃 화면에서 단계적으로 선택되므로 모든 필드가 선택사항입니다.
    """

    region: Optional[str] = None
    province: Optional[str] = None
    district: Optional[str] = None

    def __post_init__(self) -> None:
        # frozen 데이터클래스이므로 object.__setattr__ 사용
        object.__setattr__(self, "region", _clean(self.region))
        object.__setattr__(self, "province", _clean(self.province))
        object.__setattr__(self, "district", _clean(self.district))

    @property
    def is_empty(self) -> bool:
        return self.region is None and self.province is None and self.district is None


def _to_money(value: Any, field_name: str) -> Optional[Decimal]:
    """설정 문서의 금액 값을 Decimal로 변환 (None 유지, 음수 거부)"""
    if value is None or value == "":
        return None
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValueError(f"'{field_name}' 금액 형식이 올바르지 않습니다: {value!r}")
    if amount < 0:
        raise ValueError(f"'{field_name}' 금액은 0 이상이어야 합니다: {value!r}")
    return amount


def _to_keys(values: Any, level: int, field_name: str) -> frozenset[ZoneKey]:
    keys = set()
    for value in values or []:
        if isinstance(value, ZoneKey):
            key = value
        elif isinstance(value, (tuple, list)):
            key = ZoneKey(*value)
        else:
            key = ZoneKey.parse(str(value))
        if key.level != level:
            raise ValueError(f"'{field_name}' 항목의 단계가 올바르지 않습니다: {value!r}")
        keys.add(key)
    return frozenset(keys)


@dataclass(frozen=True)
class ShippingPolicy:
    """
    스토어 배송 정책 (읽기 전용)

    Attributes:
        enabled: False면 배송비는 항상 0
        coverage_mode: 커버리지 모드 원본 값 (None이면 nationwide)
        cost: 모든 모드의 기본 배송비
        local_cost: 스토어와 같은 지역 배송비 (zones) / 지역 배송비 (local)
        national_cost: 허용된 타 지역 배송비 (zones)
        free_above: 무료배송 기준 금액 (소계가 이 금액 이상이면 0, 0은 미설정)
        allowed_zones: 허용 지역
        allowed_provinces: 허용 주/도 (region, province)
        allowed_districts: 허용 구/동 (region, province, district)
        pickup_enabled: 매장 픽업 가능 여부
        delivery_enabled: 배송 가능 여부
    """

    enabled: bool = False
    coverage_mode: Optional[str] = None
    cost: Optional[Decimal] = None
    local_cost: Optional[Decimal] = None
    national_cost: Optional[Decimal] = None
    free_above: Optional[Decimal] = None
    allowed_zones: frozenset[str] = field(default_factory=frozenset)
    allowed_provinces: frozenset[ZoneKey] = field(default_factory=frozenset)
    allowed_districts: frozenset[ZoneKey] = field(default_factory=frozenset)
    pickup_enabled: bool = True
    delivery_enabled: bool = True

    def __post_init__(self) -> None:
        # 금액은 Decimal로 통일하고 음수는 거부
        for name in ("cost", "local_cost", "national_cost", "free_above"):
            object.__setattr__(self, name, _to_money(getattr(self, name), name))
        # 무료배송 기준 0은 미설정과 동일
        if self.free_above == 0:
            object.__setattr__(self, "free_above", None)

        # 리스트/집합 어느 쪽으로 넘겨도 불변 집합으로 고정
        object.__setattr__(self, "allowed_zones", frozenset(self.allowed_zones))
        object.__setattr__(
            self, "allowed_provinces", _to_keys(self.allowed_provinces, 2, "allowed_provinces")
        )
        object.__setattr__(
            self, "allowed_districts", _to_keys(self.allowed_districts, 3, "allowed_districts")
        )

    @property
    def mode(self) -> str:
        """실제 적용할 커버리지 모드 (미설정 시 nationwide)"""
        return self.coverage_mode or CoverageMode.NATIONWIDE

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> ShippingPolicy:
        """
        스토어 설정 문서(camelCase)로부터 정책 생성

        사용 예시:
            policy = ShippingPolicy.from_config({
                "enabled": True,
                "coverageMode": "zones",
                "localCost": 5,
                "allowedProvinces": ["Lima|Callao"],
            })

        Raises:
            ValueError: 금액이 음수이거나 지역 키 형식이 잘못된 경우
        """
        return cls(
            enabled=bool(config.get("enabled", False)),
            coverage_mode=config.get("coverageMode") or None,
            cost=_to_money(config.get("cost"), "cost"),
            local_cost=_to_money(config.get("localCost"), "localCost"),
            national_cost=_to_money(config.get("nationalCost"), "nationalCost"),
            free_above=_to_money(config.get("freeAbove"), "freeAbove"),
            allowed_zones=frozenset(config.get("allowedZones") or []),
            allowed_provinces=_to_keys(config.get("allowedProvinces"), 2, "allowedProvinces"),
            allowed_districts=_to_keys(config.get("allowedDistricts"), 3, "allowedDistricts"),
            pickup_enabled=config.get("pickupEnabled") is not False,
            delivery_enabled=config.get("deliveryEnabled") is not False,
        )
