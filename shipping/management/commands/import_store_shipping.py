"""
스토어 배송 설정 가져오기 Management Command

스토어 설정 문서(JSON)를 읽어 스토어와 배송 정책/허용 지역을 생성하거나 갱신합니다.
기존 스토어프론트 설정을 옮겨 올 때 사용합니다.

파일 형식:
    [
        {
            "subdomain": "mystore",
            "name": "My Store",
            "currency": "PEN",
            "location": {"country": "PE", "state": "Lima", "city": "Lima"},
            "shipping": {
                "enabled": true,
                "coverageMode": "zones",
                "localCost": 5,
                "nationalCost": 15,
                "allowedZones": ["Lima", "Arequipa"],
                "allowedProvinces": ["Cusco|Cusco"]
            }
        }
    ]
"""

import json

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from shipping.domain import ShippingPolicy as ShippingPolicyValue
from shipping.models import Store
from shipping.services import ShippingPolicyService


class Command(BaseCommand):
    help = "JSON 설정 파일로 스토어 배송 정책을 가져옵니다"

    def add_arguments(self, parser):
        parser.add_argument("file", help="스토어 설정 문서 목록 JSON 파일 경로")
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="저장하지 않고 검증 결과만 출력",
        )

    def handle(self, *args, **options):
        dry_run = options["dry_run"]

        try:
            with open(options["file"], encoding="utf-8") as f:
                documents = json.load(f)
        except OSError as e:
            raise CommandError(f"파일을 읽을 수 없습니다: {e}")
        except json.JSONDecodeError as e:
            raise CommandError(f"JSON 형식이 올바르지 않습니다: {e}")

        if isinstance(documents, dict):
            documents = [documents]
        if not isinstance(documents, list):
            raise CommandError("최상위 값은 스토어 문서 객체 또는 목록이어야 합니다.")

        self.stdout.write(self.style.WARNING(f"=== 배송 설정 가져오기 {'(DRY RUN)' if dry_run else ''} ==="))

        # 저장 전에 전체 문서를 먼저 검증
        for index, document in enumerate(documents, start=1):
            subdomain = document.get("subdomain") if isinstance(document, dict) else None
            if not subdomain:
                raise CommandError(f"{index}번째 문서에 subdomain이 없습니다.")
            try:
                policy = ShippingPolicyValue.from_config(document.get("shipping") or {})
            except (TypeError, ValueError) as e:
                raise CommandError(f"{subdomain}: 배송 설정이 올바르지 않습니다 ({e})")

            self.stdout.write(
                f"{index}. {subdomain}: mode={policy.mode}, enabled={policy.enabled}, "
                f"zones={len(policy.allowed_zones)}, provinces={len(policy.allowed_provinces)}, "
                f"districts={len(policy.allowed_districts)}"
            )

        if dry_run:
            self.stdout.write(self.style.WARNING("DRY RUN 모드: 실제로 저장하지 않았습니다."))
            self.stdout.write("실제 저장하려면 --dry-run 옵션을 제거하세요.")
            return

        created_count = 0
        with transaction.atomic():
            for document in documents:
                location = document.get("location") or {}
                store, created = Store.objects.update_or_create(
                    subdomain=document["subdomain"],
                    defaults={
                        "name": document.get("name") or document["subdomain"],
                        "currency": document.get("currency") or "PEN",
                        "country": (location.get("country") or settings.SHIPPING_DEFAULT_COUNTRY).upper(),
                        "region": location.get("state") or "",
                        "city": location.get("city") or "",
                        "address": location.get("address") or "",
                    },
                )
                ShippingPolicyService.import_config(store, document.get("shipping") or {})
                created_count += int(created)

        self.stdout.write(self.style.SUCCESS("[가져오기 완료]"))
        self.stdout.write(f"신규 스토어: {created_count}개")
        self.stdout.write(self.style.SUCCESS(f"✓ 총 {len(documents)}개 스토어 배송 설정 저장됨"))
