"""
스토어프론트 공개 API Rate Limiting 클래스

배송 견적/조회 엔드포인트는 인증 없이 호출되므로 IP 기준으로 제한합니다.
비율은 settings의 REST_FRAMEWORK["DEFAULT_THROTTLE_RATES"]에서 scope별로 설정합니다.
"""

from rest_framework.throttling import AnonRateThrottle


class ShippingQuoteRateThrottle(AnonRateThrottle):
    """
    배송 정책/커버리지/견적 엔드포인트 속도 제한

    주소를 바꿀 때마다 호출되므로 비교적 넉넉하게 설정합니다.

    적용 대상: ShippingPolicyView, ShippingCoverageView, ShippingQuoteView
    """

    scope = "shipping_quote"


class GeoLookupRateThrottle(AnonRateThrottle):
    """
    지리 참조 데이터 조회 속도 제한

    적용 대상: LocalitiesView
    """

    scope = "geo_lookup"
