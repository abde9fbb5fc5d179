"""Simple two-language (ko/en) translation helper."""

_STRINGS: dict[str, dict[str, str]] = {
    "page_title": {
        "ko": "생명가능지대 타임라인",
        "en": "Habitable Zone Timeline",
    },
    "heading_controls": {
        "ko": "타임라인과 시뮬레이션 조작",
        "en": "Timeline and Simulation Controls",
    },
    "label_star": {
        "ko": "별의 질량",
        "en": "Star mass",
    },
    "label_distance": {
        "ko": "행성 거리 (AU)",
        "en": "Planet distance (AU)",
    },
    "label_rate": {
        "ko": "재생 속도",
        "en": "Animation rate",
    },
    "label_position": {
        "ko": "타임라인",
        "en": "Timeline",
    },
    "label_elapsed": {
        "ko": "항성계 형성 후 경과 시간: {age}",
        "en": "Time since star system formation: {age}",
    },
    "btn_play": {
        "ko": "재생",
        "en": "Play",
    },
    "btn_stop": {
        "ko": "정지",
        "en": "Stop",
    },
    "planet_temp": {
        "ko": "행성 표면 온도: {temp:.0f} °C",
        "en": "Planet surface temperature: {temp:.0f} °C",
    },
    "zone_legend": {
        "ko": "너무 추움 · 생명가능 · 너무 뜨거움 · 백색왜성",
        "en": "Too cold · Temperate · Too hot · White dwarf",
    },
    "error_catalog": {
        "ko": "별 목록을 불러올 수 없어요. ({error})",
        "en": "Could not load the star catalog. ({error})",
    },
    "error_track": {
        "ko": "이 별의 진화 경로를 계산할 수 없어요. ({error})",
        "en": "This star's track cannot be used. ({error})",
    },
}


def t(key: str, lang: str) -> str:
    """Return the translated string for key in lang.

    Falls back to 'en', then to the key itself if not found.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    return entry.get(lang) or entry.get("en") or key
