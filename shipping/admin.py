from django.contrib import admin

from .models import ShippingPolicy, ShippingZone, Store


# Store 관련 Inline
class ShippingPolicyInline(admin.StackedInline):
    """스토어 편집 페이지에서 배송 정책을 함께 편집"""

    model = ShippingPolicy
    extra = 0
    max_num = 1
    can_delete = False
    fields = [
        "enabled",
        "coverage_mode",
        ("cost", "local_cost", "national_cost"),
        "free_above",
        ("pickup_enabled", "delivery_enabled"),
    ]


# Store Admin
@admin.register(Store)
class StoreAdmin(admin.ModelAdmin):
    """
    스토어 관리
    - 소재지는 local/zones 모드 배송비 계산 기준
    """

    list_display = ["name", "subdomain", "currency", "country", "region", "coverage_mode", "is_active"]
    list_filter = ["is_active", "country", "currency"]
    search_fields = ["name", "subdomain", "region", "city"]
    prepopulated_fields = {"subdomain": ("name",)}
    readonly_fields = ["created_at", "updated_at"]

    fieldsets = (
        ("기본 정보", {"fields": ("name", "subdomain", "currency", "is_active")}),
        ("소재지", {"fields": ("country", "region", "city", "address")}),
        (
            "시간 정보",
            {"fields": ("created_at", "updated_at"), "classes": ("collapse",)},
        ),
    )

    inlines = [ShippingPolicyInline]

    def get_queryset(self, request):
        return super().get_queryset(request).select_related("shipping_policy")

    def coverage_mode(self, obj):
        """배송 범위 (정책이 없으면 '-')"""
        policy = getattr(obj, "shipping_policy", None)
        return policy.get_coverage_mode_display() if policy else "-"

    coverage_mode.short_description = "배송 범위"


# ShippingPolicy 관련 Inline
class ShippingZoneInline(admin.TabularInline):
    """배송 정책 편집 페이지에서 허용 지역을 함께 관리"""

    model = ShippingZone
    extra = 1
    fields = ["region", "province", "district"]


# ShippingPolicy Admin
@admin.register(ShippingPolicy)
class ShippingPolicyAdmin(admin.ModelAdmin):
    """
    배송 정책 관리
    - 허용 지역은 zones 모드에서만 사용
    """

    list_display = [
        "store",
        "enabled",
        "coverage_mode",
        "cost",
        "local_cost",
        "national_cost",
        "free_above",
        "zone_count",
        "updated_at",
    ]
    list_filter = ["enabled", "coverage_mode", "pickup_enabled", "delivery_enabled"]
    search_fields = ["store__name", "store__subdomain"]
    list_select_related = ["store"]
    readonly_fields = ["created_at", "updated_at"]

    fieldsets = (
        ("스토어", {"fields": ("store",)}),
        ("배송 범위", {"fields": ("enabled", "coverage_mode")}),
        ("배송비", {"fields": ("cost", "local_cost", "national_cost", "free_above")}),
        ("수령 방법", {"fields": ("pickup_enabled", "delivery_enabled")}),
        (
            "시간 정보",
            {"fields": ("created_at", "updated_at"), "classes": ("collapse",)},
        ),
    )

    inlines = [ShippingZoneInline]

    actions = ["enable_shipping", "disable_shipping"]

    def zone_count(self, obj):
        return obj.zones.count()

    zone_count.short_description = "허용 지역 수"

    def enable_shipping(self, request, queryset):
        """선택된 정책의 배송비 사용"""
        # update()는 시그널을 보내지 않으므로 save()로 캐시 무효화
        for policy in queryset:
            policy.enabled = True
            policy.save(update_fields=["enabled", "updated_at"])
        self.message_user(request, f"{queryset.count()}개 정책의 배송비를 사용하도록 변경했습니다.")

    enable_shipping.short_description = "선택된 정책 배송비 사용"

    def disable_shipping(self, request, queryset):
        """선택된 정책의 배송비 미사용 (배송비 0)"""
        for policy in queryset:
            policy.enabled = False
            policy.save(update_fields=["enabled", "updated_at"])
        self.message_user(request, f"{queryset.count()}개 정책의 배송비를 사용하지 않도록 변경했습니다.")

    disable_shipping.short_description = "선택된 정책 배송비 미사용"
