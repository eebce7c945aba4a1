"""
배송 설정 캐시 무효화 시그널

스토어프론트는 ShippingPolicyService.load()로 캐시된 설정을 읽으므로
관리자 화면 등에서 설정이 바뀌면 해당 스토어의 캐시를 지웁니다.
"""

from __future__ import annotations

import logging
from typing import Any

from django.db.models.signals import post_delete, post_save, pre_save
from django.dispatch import receiver

from shipping.models import ShippingPolicy, ShippingZone, Store
from shipping.services import ShippingPolicyService

logger = logging.getLogger(__name__)


@receiver(pre_save, sender=Store)
def invalidate_renamed_store(sender: type[Store], instance: Store, **kwargs: Any) -> None:
    """서브도메인이 바뀌면 이전 서브도메인의 캐시도 삭제"""
    if not instance.pk:
        return

    previous = Store.objects.filter(pk=instance.pk).values_list("subdomain", flat=True).first()
    if previous and previous != instance.subdomain:
        ShippingPolicyService.invalidate(previous)


@receiver(post_save, sender=Store)
@receiver(post_delete, sender=Store)
def invalidate_store(sender: type[Store], instance: Store, **kwargs: Any) -> None:
    ShippingPolicyService.invalidate(instance.subdomain)


@receiver(post_save, sender=ShippingPolicy)
@receiver(post_delete, sender=ShippingPolicy)
def invalidate_policy(sender: type[ShippingPolicy], instance: ShippingPolicy, **kwargs: Any) -> None:
    subdomain = Store.objects.filter(pk=instance.store_id).values_list("subdomain", flat=True).first()
    if subdomain:
        ShippingPolicyService.invalidate(subdomain)


@receiver(post_save, sender=ShippingZone)
@receiver(post_delete, sender=ShippingZone)
def invalidate_zone(sender: type[ShippingZone], instance: ShippingZone, **kwargs: Any) -> None:
    # 스토어 삭제로 연쇄 삭제되는 중에는 스토어가 먼저 사라졌을 수 있음
    subdomain = (
        ShippingPolicy.objects.filter(pk=instance.policy_id)
        .values_list("store__subdomain", flat=True)
        .first()
    )
    if subdomain:
        ShippingPolicyService.invalidate(subdomain)
