from django.apps import AppConfig


class ShippingConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "shipping"
    verbose_name = "배송"

    def ready(self):
        """
        앱이 준비되면 시그널 등록

        스토어/배송 정책/허용 지역이 바뀌면
        캐시된 배송 설정이 자동으로 무효화됩니다.
        """
        import shipping.signals  # noqa
