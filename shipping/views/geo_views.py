from __future__ import annotations

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import permissions
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from shipping import geo
from shipping.serializers import LocalitiesResponseSerializer
from shipping.throttles import GeoLookupRateThrottle


class LocalitiesView(APIView):
    """
    지리 참조 데이터 조회 API

    - region 없음: 국가의 지역 목록
    - region만: 지역 내 주/도시 목록
    - region + locality: 구/동 목록
    """

    permission_classes = [permissions.AllowAny]
    throttle_classes = [GeoLookupRateThrottle]

    @extend_schema(
        parameters=[
            OpenApiParameter("region", OpenApiTypes.STR, description="지역명"),
            OpenApiParameter("locality", OpenApiTypes.STR, description="주/도시명"),
            OpenApiParameter("lang", OpenApiTypes.STR, description="명칭 언어 (es, en, pt)"),
        ],
        responses={200: LocalitiesResponseSerializer},
        summary="지역/도시/구 목록 조회",
        tags=["Geo"],
    )
    def get(self, request: Request, country: str) -> Response:
        region = request.query_params.get("region") or None
        locality = request.query_params.get("locality") or None
        language = request.query_params.get("lang", "es")

        data = {
            "country": country.upper(),
            "region": region,
            "locality": locality,
            "region_label": geo.region_label(country, language),
            "items": geo.lookup_localities(country, region, locality),
        }
        return Response(LocalitiesResponseSerializer(data).data)
