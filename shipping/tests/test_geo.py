"""지리 참조 데이터 조회 테스트"""

from shipping import geo


class TestLookupLocalities:
    def test_regions_of_country(self):
        regions = geo.lookup_localities("PE")

        assert "Lima" in regions
        assert "Cusco" in regions
        assert len(regions) == 25

    def test_country_code_is_case_insensitive(self):
        assert geo.lookup_localities("pe") == geo.lookup_localities("PE")

    def test_localities_of_region(self):
        assert "Callao" in geo.lookup_localities("PE", "Callao")
        assert "Barranca" in geo.lookup_localities("PE", "Lima")

    def test_sub_localities(self):
        districts = geo.lookup_localities("PE", "Lima", "Lima")

        assert "Miraflores" in districts
        assert "San Isidro" in districts

    def test_unknown_keys_return_empty_list(self):
        assert geo.lookup_localities("ZZ") == []
        assert geo.lookup_localities("PE", "Atlantis") == []
        assert geo.lookup_localities("PE", "Lima", "Atlantis") == []

    def test_result_is_a_copy(self):
        """반환 목록을 수정해도 참조 데이터는 그대로"""
        regions = geo.lookup_localities("PE")
        regions.clear()

        assert geo.lookup_localities("PE")


class TestRegionLabel:
    def test_known_country(self):
        assert geo.region_label("PE") == "Departamento"
        assert geo.region_label("mx") == "Estado"

    def test_language_fallback(self):
        assert geo.region_label("PE", "en-US") == "Department"
        assert geo.region_label("PE", "fr") == "Departamento"

    def test_unknown_country(self):
        assert geo.region_label("ZZ") == geo.DEFAULT_REGION_LABEL
