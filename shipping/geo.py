"""
지리 참조 데이터 조회

국가 → 지역 → 도시/주 → 구/동 계층의 이름 목록을 제공합니다.
체크아웃 화면의 주소 선택 목록을 채우는 용도이며,
배송 가능 여부 판별 로직은 이 데이터로 주소를 검증하지 않습니다.

사용 예시:
    lookup_localities("PE")                      # 지역 목록
    lookup_localities("PE", "Lima")              # 지역 내 주/도시 목록
    lookup_localities("PE", "Lima", "Lima")      # 구/동 목록
"""

from __future__ import annotations

from typing import Optional

# 국가별 최상위 행정구역 (전체)
REGIONS_BY_COUNTRY: dict[str, list[str]] = {
    "PE": [
        "Amazonas", "Áncash", "Apurímac", "Arequipa", "Ayacucho",
        "Cajamarca", "Callao", "Cusco", "Huancavelica", "Huánuco",
        "Ica", "Junín", "La Libertad", "Lambayeque", "Lima",
        "Loreto", "Madre de Dios", "Moquegua", "Pasco", "Piura",
        "Puno", "San Martín", "Tacna", "Tumbes", "Ucayali",
    ],
    "MX": [
        "Aguascalientes", "Baja California", "Baja California Sur", "Campeche",
        "Chiapas", "Chihuahua", "Ciudad de México", "Coahuila", "Colima",
        "Durango", "Estado de México", "Guanajuato", "Guerrero", "Hidalgo",
        "Jalisco", "Michoacán", "Morelos", "Nayarit", "Nuevo León",
        "Oaxaca", "Puebla", "Querétaro", "Quintana Roo", "San Luis Potosí",
        "Sinaloa", "Sonora", "Tabasco", "Tamaulipas", "Tlaxcala",
        "Veracruz", "Yucatán", "Zacatecas",
    ],
    "CO": [
        "Amazonas", "Antioquia", "Arauca", "Atlántico", "Bogotá D.C.",
        "Bolívar", "Boyacá", "Caldas", "Caquetá", "Casanare",
        "Cauca", "Cesar", "Chocó", "Córdoba", "Cundinamarca",
        "Guainía", "Guaviare", "Huila", "La Guajira", "Magdalena",
        "Meta", "Nariño", "Norte de Santander", "Putumayo", "Quindío",
        "Risaralda", "San Andrés y Providencia", "Santander", "Sucre",
        "Tolima", "Valle del Cauca", "Vaupés", "Vichada",
    ],
    "AR": [
        "Buenos Aires", "CABA", "Catamarca", "Chaco", "Chubut",
        "Córdoba", "Corrientes", "Entre Ríos", "Formosa", "Jujuy",
        "La Pampa", "La Rioja", "Mendoza", "Misiones", "Neuquén",
        "Río Negro", "Salta", "San Juan", "San Luis", "Santa Cruz",
        "Santa Fe", "Santiago del Estero", "Tierra del Fuego", "Tucumán",
    ],
    "CL": [
        "Arica y Parinacota", "Tarapacá", "Antofagasta", "Atacama",
        "Coquimbo", "Valparaíso", "Metropolitana de Santiago", "O'Higgins",
        "Maule", "Ñuble", "Biobío", "La Araucanía", "Los Ríos",
        "Los Lagos", "Aysén", "Magallanes",
    ],
    "EC": [
        "Azuay", "Bolívar", "Cañar", "Carchi", "Chimborazo",
        "Cotopaxi", "El Oro", "Esmeraldas", "Galápagos", "Guayas",
        "Imbabura", "Loja", "Los Ríos", "Manabí", "Morona Santiago",
        "Napo", "Orellana", "Pastaza", "Pichincha", "Santa Elena",
        "Santo Domingo de los Tsáchilas", "Sucumbíos", "Tungurahua",
        "Zamora-Chinchipe",
    ],
    "US": [
        "Alabama", "Alaska", "Arizona", "Arkansas", "California",
        "Colorado", "Connecticut", "Delaware", "District of Columbia", "Florida",
        "Georgia", "Hawaii", "Idaho", "Illinois", "Indiana",
        "Iowa", "Kansas", "Kentucky", "Louisiana", "Maine",
        "Maryland", "Massachusetts", "Michigan", "Minnesota", "Mississippi",
        "Missouri", "Montana", "Nebraska", "Nevada", "New Hampshire",
        "New Jersey", "New Mexico", "New York", "North Carolina", "North Dakota",
        "Ohio", "Oklahoma", "Oregon", "Pennsylvania", "Rhode Island",
        "South Carolina", "South Dakota", "Tennessee", "Texas", "Utah",
        "Vermont", "Virginia", "Washington", "West Virginia", "Wisconsin",
        "Wyoming",
    ],
    "ES": [
        "Andalucía", "Aragón", "Asturias", "Baleares", "Canarias",
        "Cantabria", "Castilla-La Mancha", "Castilla y León", "Cataluña",
        "Ceuta", "Comunidad Valenciana", "Extremadura", "Galicia",
        "La Rioja", "Madrid", "Melilla", "Murcia", "Navarra", "País Vasco",
    ],
}

# 지역 → 주/도시 → 구/동 (주요 도시권만)
LOCALITIES_BY_COUNTRY: dict[str, dict[str, dict[str, list[str]]]] = {
    "PE": {
        "Lima": {
            "Lima": [
                "Ancón", "Ate", "Barranco", "Breña", "Carabayllo", "Chaclacayo", "Chorrillos",
                "Cieneguilla", "Comas", "El Agustino", "Independencia", "Jesús María",
                "La Molina", "La Victoria", "Lima", "Lince", "Los Olivos", "Lurigancho",
                "Lurín", "Magdalena del Mar", "Miraflores", "Pachacámac", "Pucusana",
                "Pueblo Libre", "Puente Piedra", "Punta Hermosa", "Punta Negra", "Rímac",
                "San Bartolo", "San Borja", "San Isidro", "San Juan de Lurigancho",
                "San Juan de Miraflores", "San Luis", "San Martín de Porres", "San Miguel",
                "Santa Anita", "Santa María del Mar", "Santa Rosa", "Santiago de Surco",
                "Surquillo", "Villa El Salvador", "Villa María del Triunfo",
            ],
            "Barranca": ["Barranca", "Paramonga", "Pativilca", "Supe", "Supe Puerto"],
            "Cañete": [
                "Asia", "Calango", "Cerro Azul", "Chilca", "Coayllo", "Imperial", "Lunahuaná",
                "Mala", "Nuevo Imperial", "Pacarán", "Quilmaná", "San Antonio", "San Luis",
                "San Vicente de Cañete", "Santa Cruz de Flores", "Zúñiga",
            ],
        },
        "Callao": {
            "Callao": [
                "Bellavista", "Callao", "Carmen de la Legua Reynoso", "La Perla", "La Punta",
                "Mi Perú", "Ventanilla",
            ],
        },
        "Arequipa": {
            "Arequipa": [
                "Alto Selva Alegre", "Arequipa", "Cayma", "Cerro Colorado", "Characato",
                "Chiguata", "Jacobo Hunter", "José Luis Bustamante y Rivero", "La Joya",
                "Mariano Melgar", "Miraflores", "Mollebaya", "Paucarpata", "Pocsi", "Polobaya",
                "Quequeña", "Sabandía", "Sachaca", "San Juan de Siguas", "San Juan de Tarucani",
                "Santa Isabel de Siguas", "Santa Rita de Siguas", "Socabaya", "Tiabaya",
                "Uchumayo", "Vítor", "Yanahuara", "Yarabamba", "Yura",
            ],
        },
        "Cusco": {
            "Cusco": [
                "Ccorca", "Cusco", "Poroy", "San Jerónimo", "San Sebastián", "Santiago",
                "Saylla", "Wanchaq",
            ],
            "Anta": [
                "Ancahuasi", "Anta", "Cachimayo", "Chinchaypujio", "Huarocondo", "Limatambo",
                "Mollepata", "Pucyura", "Zurite",
            ],
        },
    },
    "MX": {
        "Ciudad de México": {
            "Benito Juárez": [
                "Álamos", "Del Valle", "Insurgentes Mixcoac", "Letrán Valle", "Nápoles",
                "Narvarte", "Portales", "San José Insurgentes", "Xoco",
            ],
            "Coyoacán": [
                "Campestre Churubusco", "Copilco Universidad", "Del Carmen", "Educación",
                "Pedregal de Santo Domingo", "Romero de Terreros", "Santa Úrsula Coapa",
                "Villa Coyoacán",
            ],
            "Cuauhtémoc": [
                "Centro Histórico", "Condesa", "Doctores", "Guerrero", "Hipódromo", "Juárez",
                "Roma Norte", "Roma Sur", "San Rafael", "Santa María la Ribera", "Tabacalera",
                "Zona Rosa",
            ],
        },
    },
    "CO": {
        "Bogotá D.C.": {
            "Bogotá": [
                "Usaquén", "Chapinero", "Santa Fe", "San Cristóbal", "Usme",
                "Tunjuelito", "Bosa", "Kennedy", "Fontibón", "Engativá",
                "Suba", "Barrios Unidos", "Teusaquillo", "Los Mártires", "Antonio Nariño",
                "Puente Aranda", "La Candelaria", "Rafael Uribe Uribe", "Ciudad Bolívar", "Sumapaz",
            ],
        },
    },
    "AR": {
        "CABA": {
            "Buenos Aires": [
                "Agronomía", "Almagro", "Balvanera", "Barracas", "Belgrano",
                "Boedo", "Caballito", "Chacarita", "Coghlan", "Colegiales",
                "Constitución", "Flores", "Floresta", "La Boca", "La Paternal",
                "Liniers", "Mataderos", "Monte Castro", "Montserrat", "Nueva Pompeya",
                "Núñez", "Palermo", "Parque Avellaneda", "Parque Chacabuco", "Parque Chas",
                "Parque Patricios", "Puerto Madero", "Recoleta", "Retiro", "Saavedra",
                "San Cristóbal", "San Nicolás", "San Telmo", "Vélez Sarsfield", "Versalles",
                "Villa Crespo", "Villa del Parque", "Villa Devoto", "Villa General Mitre",
                "Villa Lugano", "Villa Luro", "Villa Ortúzar", "Villa Pueyrredón",
                "Villa Real", "Villa Riachuelo", "Villa Santa Rita", "Villa Soldati", "Villa Urquiza",
            ],
        },
    },
    "CL": {
        "Metropolitana de Santiago": {
            "Santiago": [
                "Centro", "Barrio Brasil", "Barrio Concha y Toro", "Barrio Dieciocho",
                "Barrio Lastarria", "Barrio París-Londres", "Barrio República", "Barrio Yungay",
                "Franklin", "Matta Sur", "San Diego", "Santa Isabel", "Parque O'Higgins",
            ],
            "Providencia": [
                "Barrio Italia", "Barrio Bellavista", "El Golf", "Los Leones", "Manuel Montt",
                "Pedro de Valdivia", "Salvador", "Seminario", "Tobalaba", "Inés de Suárez",
            ],
        },
    },
    "EC": {
        "Pichincha": {
            "Quito": [
                "Centro Histórico", "La Mariscal", "La Floresta", "González Suárez", "Iñaquito",
                "La Carolina", "Bellavista", "Rumipamba", "Jipijapa", "Cochapamba",
                "Concepción", "Kennedy", "Comité del Pueblo", "El Condado", "Carcelén",
                "Cotocollao", "Ponceano", "La Ecuatoriana", "Quitumbe", "Chillogallo",
                "Solanda", "La Argelia", "Chimbacalle", "La Magdalena", "San Bartolo",
            ],
        },
    },
    "US": {
        "California": {
            "Los Angeles": [
                "Downtown", "Hollywood", "Beverly Hills", "Santa Monica", "Venice",
                "Westwood", "Brentwood", "Culver City", "West Hollywood", "Silver Lake",
                "Echo Park", "Los Feliz", "Koreatown", "Mid-Wilshire", "Hancock Park",
                "Arts District", "Boyle Heights", "East LA", "Highland Park", "Eagle Rock",
            ],
        },
    },
    "ES": {
        "Madrid": {
            "Madrid": [
                "Arganzuela", "Barajas", "Carabanchel", "Centro", "Chamartín",
                "Chamberí", "Ciudad Lineal", "Fuencarral-El Pardo", "Hortaleza", "Latina",
                "Moncloa-Aravaca", "Moratalaz", "Puente de Vallecas", "Retiro", "Salamanca",
                "San Blas-Canillejas", "Tetuán", "Usera", "Vicálvaro", "Villa de Vallecas", "Villaverde",
            ],
        },
    },
}

# 국가별 최상위 행정구역 명칭
REGION_LABELS: dict[str, dict[str, str]] = {
    "PE": {"es": "Departamento", "en": "Department", "pt": "Departamento"},
    "MX": {"es": "Estado", "en": "State", "pt": "Estado"},
    "CO": {"es": "Departamento", "en": "Department", "pt": "Departamento"},
    "AR": {"es": "Provincia", "en": "Province", "pt": "Província"},
    "CL": {"es": "Región", "en": "Region", "pt": "Região"},
    "EC": {"es": "Provincia", "en": "Province", "pt": "Província"},
    "US": {"es": "Estado", "en": "State", "pt": "Estado"},
    "ES": {"es": "Comunidad", "en": "Community", "pt": "Comunidade"},
}

DEFAULT_REGION_LABEL = "Estado"


def lookup_localities(
    country: str,
    region: Optional[str] = None,
    locality: Optional[str] = None,
) -> list[str]:
    """
    계층별 이름 목록 조회

    Args:
        country: ISO 국가 코드 (대소문자 무관)
        region: 지역명 (없으면 지역 목록 반환)
        locality: 주/도시명 (없으면 region 하위 목록 반환)

    Returns:
        list[str]: 이름 목록 (알 수 없는 키면 빈 목록)
    """
    country = (country or "").upper()

    if not region:
        return list(REGIONS_BY_COUNTRY.get(country, []))

    localities = LOCALITIES_BY_COUNTRY.get(country, {}).get(region, {})
    if not locality:
        return list(localities)

    return list(localities.get(locality, []))


def region_label(country: str, language: str = "es") -> str:
    """국가별 최상위 행정구역 명칭 (언어 코드 앞 두 글자 기준, 없으면 스페인어)"""
    labels = REGION_LABELS.get((country or "").upper())
    if not labels:
        return DEFAULT_REGION_LABEL
    return labels.get((language or "es")[:2].lower(), labels["es"])
