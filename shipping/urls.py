from django.urls import path

from shipping.views.geo_views import LocalitiesView
from shipping.views.shipping_views import (
    ShippingCoverageView,
    ShippingPolicyView,
    ShippingQuoteView,
)

# URL 패턴 정의
urlpatterns = [
    # 스토어 배송 정책 / 배송 가능 지역 / 배송비 견적
    path("stores/<slug:subdomain>/shipping/", ShippingPolicyView.as_view(), name="shipping-policy"),
    path(
        "stores/<slug:subdomain>/shipping/coverage/",
        ShippingCoverageView.as_view(),
        name="shipping-coverage",
    ),
    path(
        "stores/<slug:subdomain>/shipping/quote/",
        ShippingQuoteView.as_view(),
        name="shipping-quote",
    ),
    # 지리 참조 데이터
    path("geo/<str:country>/localities/", LocalitiesView.as_view(), name="geo-localities"),
]
