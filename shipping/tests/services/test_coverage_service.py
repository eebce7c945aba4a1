"""ZoneCoverageService 단위 테스트"""

import pytest

from shipping.domain import Address, ShippingPolicy, StoreLocation
from shipping.services import ShippingServiceError, ZoneCoverageService


class TestIsZoneAllowedNationwide:
    """전국 배송 / 정책 없음"""

    def test_no_policy_allows_everything(self):
        """정책이 없으면 제한 없음"""
        assert ZoneCoverageService.is_zone_allowed(None, None, Address(region="Cusco")) is True

    def test_nationwide_allows_any_address(self):
        """Scenario A: 전국 배송은 어떤 주소든 허용"""
        # Arrange
        policy = ShippingPolicy(enabled=True, coverage_mode="nationwide", cost=10)

        # Act & Assert
        for address in [Address(), Address(region="Lima"), Address(region="Tacna", province="Tarata")]:
            assert ZoneCoverageService.is_zone_allowed(policy, StoreLocation(region="Lima"), address) is True

    def test_missing_mode_defaults_to_nationwide(self):
        """coverage_mode 미설정은 전국 배송"""
        policy = ShippingPolicy(enabled=True)

        assert ZoneCoverageService.is_zone_allowed(policy, None, Address(region="Puno")) is True

    def test_unknown_mode_fails_open(self):
        """알 수 없는 모드는 허용 (fail open)"""
        policy = ShippingPolicy(enabled=True, coverage_mode="international")

        assert ZoneCoverageService.is_zone_allowed(policy, None, Address(region="Puno")) is True


class TestIsZoneAllowedZones:
    """지정 지역 배송 (zones)"""

    def test_local_region_in_allowed_zones(self, zones_policy, lima_store_location, lima_address):
        """Scenario C: 스토어 지역이 허용 목록에 있음"""
        assert ZoneCoverageService.is_zone_allowed(zones_policy, lima_store_location, lima_address) is True

    def test_other_store_region_but_address_region_allowed(self, zones_policy, lima_address):
        """Scenario D: 스토어는 Cusco, 배송지 Lima는 명시적으로 허용"""
        store_location = StoreLocation(region="Cusco")

        assert ZoneCoverageService.is_zone_allowed(zones_policy, store_location, lima_address) is True

    def test_region_not_listed(self, zones_policy, lima_store_location):
        """허용 목록에 없는 지역"""
        address = Address(region="Tacna")

        assert ZoneCoverageService.is_zone_allowed(zones_policy, lima_store_location, address) is False

    def test_no_region_selected_yet_is_allowed(self, zones_policy, lima_store_location):
        """지역을 아직 고르지 않은 상태는 허용"""
        assert ZoneCoverageService.is_zone_allowed(zones_policy, lima_store_location, Address()) is True
        assert ZoneCoverageService.is_zone_allowed(zones_policy, lima_store_location, None) is True

    def test_empty_region_string_treated_as_unselected(self, zones_policy, lima_store_location):
        """빈 문자열 지역은 미선택과 동일"""
        assert ZoneCoverageService.is_zone_allowed(zones_policy, lima_store_location, Address(region="")) is True

    def test_province_level_exception(self, lima_store_location):
        """Scenario E: 주/도 단위 허용"""
        # Arrange
        policy = ShippingPolicy(
            enabled=True,
            coverage_mode="zones",
            allowed_zones=[],
            allowed_provinces=["Lima|Callao"],
        )

        # Act & Assert
        assert ZoneCoverageService.is_zone_allowed(
            policy, lima_store_location, Address(region="Lima", province="Callao")
        ) is True
        assert ZoneCoverageService.is_zone_allowed(
            policy, lima_store_location, Address(region="Lima", province="OtherProvince")
        ) is False

    def test_region_only_when_only_provinces_listed(self, lima_store_location):
        """주/도만 허용된 지역에서 주/도 미선택이면 거부"""
        policy = ShippingPolicy(coverage_mode="zones", allowed_provinces=[("Lima", "Callao")])

        assert ZoneCoverageService.is_zone_allowed(policy, lima_store_location, Address(region="Lima")) is False

    def test_district_level_exception(self, lima_store_location):
        """구/동 단위 허용"""
        policy = ShippingPolicy(
            coverage_mode="zones",
            allowed_districts=["Cusco|Cusco|Wanchaq"],
        )

        assert ZoneCoverageService.is_zone_allowed(
            policy, lima_store_location, Address(region="Cusco", province="Cusco", district="Wanchaq")
        ) is True
        assert ZoneCoverageService.is_zone_allowed(
            policy, lima_store_location, Address(region="Cusco", province="Cusco", district="Santiago")
        ) is False

    def test_district_without_province_is_not_checked(self, lima_store_location):
        """주/도 없이 구/동만 있으면 구/동 목록을 확인하지 않음"""
        policy = ShippingPolicy(
            coverage_mode="zones",
            allowed_districts=["Cusco|Cusco|Wanchaq"],
        )

        assert ZoneCoverageService.is_zone_allowed(
            policy, lima_store_location, Address(region="Cusco", district="Wanchaq")
        ) is False

    def test_coarser_allow_implies_finer_allow(self, zones_policy, lima_store_location):
        """지역이 허용되면 하위 주/도, 구/동도 모두 허용"""
        addresses = [
            Address(region="Lima"),
            Address(region="Lima", province="Huaral"),
            Address(region="Lima", province="Huaral", district="Chancay"),
        ]

        for address in addresses:
            assert ZoneCoverageService.is_zone_allowed(zones_policy, lima_store_location, address) is True

    def test_zone_names_with_separator_do_not_collide(self, lima_store_location):
        """구분자(|)가 들어간 지명이 다른 키와 섞이지 않음"""
        policy = ShippingPolicy(coverage_mode="zones", allowed_provinces=[("Lima", "Callao")])

        assert ZoneCoverageService.is_zone_allowed(
            policy, lima_store_location, Address(region="Lima|Callao")
        ) is False

    def test_coverage_does_not_depend_on_enabled(self, lima_store_location):
        """배송비 사용 여부와 커버리지는 별개"""
        policy = ShippingPolicy(enabled=False, coverage_mode="zones", allowed_zones=["Lima"])

        assert ZoneCoverageService.is_zone_allowed(policy, lima_store_location, Address(region="Tacna")) is False


class TestIsZoneAllowedLocal:
    """스토어 소재 지역만 배송 (local)"""

    def test_local_mode_mismatch(self, lima_store_location):
        """Scenario F: 스토어 Lima, 배송지 Cusco"""
        policy = ShippingPolicy(coverage_mode="local")

        assert ZoneCoverageService.is_zone_allowed(policy, lima_store_location, Address(region="Cusco")) is False

    def test_local_mode_match(self, lima_store_location):
        policy = ShippingPolicy(coverage_mode="local")

        assert ZoneCoverageService.is_zone_allowed(
            policy, lima_store_location, Address(region="Lima", province="Lima")
        ) is True

    def test_local_mode_without_region_selected(self, lima_store_location):
        """지역 미선택은 허용"""
        policy = ShippingPolicy(coverage_mode="local")

        assert ZoneCoverageService.is_zone_allowed(policy, lima_store_location, Address()) is True

    def test_local_mode_store_without_region(self):
        """스토어 소재지가 없으면 선택된 지역과 일치하지 않음"""
        policy = ShippingPolicy(coverage_mode="local")

        assert ZoneCoverageService.is_zone_allowed(policy, StoreLocation(), Address(region="Lima")) is False
        assert ZoneCoverageService.is_zone_allowed(policy, None, Address(region="Lima")) is False


class TestValidateCheckoutAddress:
    """주문 확정 시 최종 검증"""

    def test_nationwide_accepts_empty_address(self):
        """전국 배송은 주소 미선택도 통과"""
        policy = ShippingPolicy(coverage_mode="nationwide")

        ZoneCoverageService.validate_checkout_address(policy, None, Address())

    def test_no_policy_accepts_anything(self):
        ZoneCoverageService.validate_checkout_address(None, None, None)

    @pytest.mark.parametrize("mode", ["zones", "local"])
    def test_restricted_mode_requires_region(self, mode, lima_store_location):
        """zones/local 모드는 지역 선택 필수"""
        policy = ShippingPolicy(coverage_mode=mode, allowed_zones=["Lima"])

        with pytest.raises(ShippingServiceError) as exc_info:
            ZoneCoverageService.validate_checkout_address(policy, lima_store_location, Address())

        assert exc_info.value.code == "ADDRESS_INCOMPLETE"
        assert exc_info.value.details["coverage_mode"] == mode

    def test_zone_not_allowed(self, zones_policy, lima_store_location):
        """허용되지 않은 지역"""
        address = Address(region="Tacna", province="Tacna")

        with pytest.raises(ShippingServiceError) as exc_info:
            ZoneCoverageService.validate_checkout_address(zones_policy, lima_store_location, address)

        assert exc_info.value.code == "ZONE_NOT_ALLOWED"
        assert exc_info.value.details == {"region": "Tacna", "province": "Tacna", "district": None}

    def test_allowed_address_passes(self, zones_policy, lima_store_location, lima_address):
        ZoneCoverageService.validate_checkout_address(zones_policy, lima_store_location, lima_address)

    def test_rejection_is_logged_as_business_error(self, zones_policy, lima_store_location, caplog):
        """비즈니스 에러는 WARNING으로 기록"""
        with caplog.at_level("WARNING", logger="shipping.services"):
            with pytest.raises(ShippingServiceError):
                ZoneCoverageService.validate_checkout_address(
                    zones_policy, lima_store_location, Address(region="Tacna")
                )

        assert any("ZONE_NOT_ALLOWED" in record.getMessage() for record in caplog.records)
