"""View mixins for common functionality"""

from __future__ import annotations

import logging
from typing import Optional

from rest_framework import status
from rest_framework.response import Response

from shipping.services import ShippingPolicyService, ShippingServiceError, StoreShippingContext

logger = logging.getLogger(__name__)


def service_error_response(error: ShippingServiceError, http_status: int = status.HTTP_400_BAD_REQUEST) -> Response:
    """ShippingServiceError를 표준 에러 응답으로 변환"""
    return Response(
        {
            "error": error.message,
            "code": error.code,
            "details": error.details,
        },
        status=http_status,
    )


class StoreShippingContextMixin:
    """
    URL의 서브도메인으로 스토어 배송 설정을 불러오는 Mixin

    스토어가 없으면 404 에러 Response를 반환합니다.
    """

    def load_store_context(self, subdomain: str) -> tuple[Optional[StoreShippingContext], Optional[Response]]:
        """
        Returns:
            (context, None) 또는 (None, 404 에러 Response)
        """
        try:
            return ShippingPolicyService.load(subdomain), None
        except ShippingServiceError as e:
            logger.info("스토어 조회 실패: subdomain=%s, code=%s", subdomain, e.code)
            return None, service_error_response(e, status.HTTP_404_NOT_FOUND)
