from __future__ import annotations

from django.db import models

from ..domain import StoreLocation


class Store(models.Model):
    """
    스토어(테넌트) 정보

    - 서브도메인으로 스토어프론트를 식별
    - 소재지(region)는 배송비 계산 시 지역 일치 비교에 사용
    """

    name = models.CharField(max_length=100, verbose_name="스토어명")

    subdomain = models.SlugField(
        max_length=63,
        unique=True,
        verbose_name="서브도메인",
        help_text="mystore.example.com 의 mystore 부분",
    )

    currency = models.CharField(
        max_length=3,
        default="PEN",
        verbose_name="통화",
        help_text="ISO 4217 통화 코드 (PEN, MXN, USD 등)",
    )

    # 소재지
    country = models.CharField(
        max_length=2,
        default="PE",
        verbose_name="국가",
        help_text="ISO 3166-1 alpha-2 국가 코드",
    )
    region = models.CharField(
        max_length=100,
        blank=True,
        default="",
        verbose_name="지역",
        help_text="Departamento / Estado / Provincia 등 최상위 행정구역",
    )
    city = models.CharField(max_length=100, blank=True, default="", verbose_name="도시")
    address = models.CharField(max_length=255, blank=True, default="", verbose_name="주소")

    is_active = models.BooleanField(default=True, db_index=True, verbose_name="운영 여부")

    created_at = models.DateTimeField(auto_now_add=True, verbose_name="생성일시")
    updated_at = models.DateTimeField(auto_now=True, verbose_name="수정일시")

    class Meta:
        db_table = "shipping_stores"
        verbose_name = "스토어"
        verbose_name_plural = "스토어 목록"
        ordering = ["name"]

    def __str__(self) -> str:
        return f"{self.name} ({self.subdomain})"

    def get_location(self) -> StoreLocation:
        """배송 계산용 소재지 값 객체"""
        return StoreLocation(
            region=self.region or None,
            country=self.country,
            city=self.city or None,
        )
