"""Static keyword tables for news-update classification.

Every table is an ordered list. Place and severity tables are first-match:
the earliest rule whose keyword appears in the text wins, so more specific
names are listed before the shorter names they contain (e.g. a named camp
before the bare word for camp). Context groups are all-match.
"""

from __future__ import annotations

from app.classification.types import (
    Category,
    ContextGroup,
    KeywordRule,
    PlaceInfo,
    Severity,
    SeverityLevel,
    Status,
)

# ── Region ──────────────────────────────────────────────────────────────

REGION_NAMES: tuple[str, ...] = ("قطاع غزة", "غزة")

REGION_CENTER = PlaceInfo(
    name="غزة",
    coordinates=(31.5017, 34.4668),
    category=Category.SUPPLIES,
    default_needs=("Food", "Water", "Medical Supplies", "Shelter", "Security"),
)

# ── Inclusion filter ────────────────────────────────────────────────────

# Military / occupation terms. An update mentioning any of these is dropped
# unless it also carries a civilian signal.
EXCLUDE_KEYWORDS: tuple[str, ...] = (
    "إسرائيلي",
    "جنود إسرائيليين",
    "جندي إسرائيلي",
    "الجيش الإسرائيلي",
    "قوات الاحتلال",
    "كمين",
    "اشتباك",
    "هجوم",
    "قصف",
    "مقتل جندي",
    "مقتل جنود",
    "إصابة جندي",
    "إصابة جنود",
    "الجيش",
    "إطلاق نار",
    "عملية عسكرية",
    "توغل",
    "دبابة",
    "صاروخ",
    "مروحية",
    "طائرة حربية",
    "مستوطنة",
    "مستوطنين",
    "مستوطن",
    "إسرائيليون",
    "إسرائيليين",
    "جنود الاحتلال",
    "قوات إسرائيلية",
    "قوات خاصة",
    "قوات عسكرية",
    "موقع عسكري",
    "مواقع عسكرية",
    "مقتل ضابط",
    "إصابة ضابط",
    "ضابط إسرائيلي",
    "ضباط إسرائيليين",
    "قادة عسكريين",
    "قادة إسرائيليين",
    "قادة جيش",
    "قادة قوات",
    "قادة الاحتلال",
    "عسكري",
    "قائد",
    "جندي",
)

CIVILIAN_KEYWORDS: tuple[str, ...] = (
    "مدني",
    "مدنيين",
    "مستشفى",
    "مشفى",
    "إغاثة",
    "مساعدات",
    "نزوح",
    "لاجئ",
    "لاجئين",
    "عائلة",
    "عائلات",
    "أسر",
    "أطفال",
    "نساء",
    "مأوى",
    "مأوى مؤقت",
    "إيواء",
    "مخيم",
    "مخيمات",
    "جرحى",
    "مصاب",
    "شهيد",
    "مقتل مدني",
    "توزيع مساعدات",
    "توزيع",
    "مياه",
    "طعام",
    "دواء",
    "عيادة",
    "إسعاف",
    "منتظر",
    "منتظري",
    "معونة",
    "إغاثة إنسانية",
    "مساعدات إنسانية",
    "مساعدات طبية",
    "مساعدات غذائية",
    "إجلاء",
    "منازل",
    "منزل",
    "سكن",
    "سكني",
    "سكنية",
)

# ── Places (first match wins) ───────────────────────────────────────────

_HOSPITAL_NEEDS = ("Medical Supplies", "Staff", "Equipment")
_BORDER_NEEDS = ("Security", "Emergency Response")


def _place(name: str, lat: float, lon: float, category: Category, *needs: str) -> KeywordRule[PlaceInfo]:
    return KeywordRule(
        keywords=(name,),
        result=PlaceInfo(name=name, coordinates=(lat, lon), category=category, default_needs=needs),
    )


PLACE_RULES: list[KeywordRule[PlaceInfo]] = [
    # Hospitals
    _place("مستشفى الشفاء", 31.5231, 34.4667, Category.MEDICAL, *_HOSPITAL_NEEDS),
    _place("مستشفى الأوروبي", 31.3450, 34.3030, Category.MEDICAL, *_HOSPITAL_NEEDS),
    _place("مستشفى ناصر", 31.3400, 34.3030, Category.MEDICAL, *_HOSPITAL_NEEDS),
    # Humanitarian crossing
    _place("معبر كرم أبو سالم", 31.2241, 34.2658, Category.SUPPLIES, "Medical Supplies", "Food", "Water"),
    # Borders
    _place("الحدود البرية مع إسرائيل", 31.5067, 34.5511, Category.OTHER, *_BORDER_NEEDS),
    _place("الحدود البرية مع البحر", 31.4890, 34.4500, Category.OTHER, *_BORDER_NEEDS),
    _place("الحدود البرية مع مصر", 31.2200, 34.2650, Category.OTHER, *_BORDER_NEEDS),
    _place("الحدود مع إسرائيل", 31.5067, 34.5511, Category.OTHER, *_BORDER_NEEDS),
    _place("الحدود مع البحر", 31.5170, 34.4200, Category.OTHER, *_BORDER_NEEDS),
    _place("الحدود مع مصر", 31.2200, 34.2650, Category.OTHER, *_BORDER_NEEDS),
    _place("الحدود البحرية", 31.5170, 34.4200, Category.OTHER, *_BORDER_NEEDS),
    _place("الحدود البرية", 31.5010, 34.4660, Category.OTHER, *_BORDER_NEEDS),
    _place("الحدود", 31.5010, 34.4660, Category.OTHER, *_BORDER_NEEDS),
    # Named camps
    _place("مخيم جباليا", 31.5367, 34.4983, Category.SHELTER, "Shelter", "Food", "Water", "Blankets"),
    _place("مخيم الشاطئ", 31.5010, 34.4660, Category.SHELTER, "Shelter", "Food", "Water", "Blankets"),
    _place("مخيم المغازي", 31.4218351, 34.3852095, Category.SHELTER, "Shelter", "Food", "Water"),
    _place("مخيم النصيرات", 31.444084, 34.3865377, Category.SHELTER, "Shelter", "Food", "Water"),
    _place("مخيم البريج", 31.4381976, 34.4035751, Category.SHELTER, "Shelter", "Food", "Water"),
    _place("مخيم الشابورة", 31.2968, 34.2435, Category.SHELTER, "Shelter", "Food", "Water"),
    # Sub-regions
    _place("بجنوب قطاع غزة", 31.2710, 34.2455, Category.MEDICAL, "Medical Supplies", "Food", "Water"),
    _place("جنوب قطاع غزة", 31.2710, 34.2455, Category.MEDICAL, "Medical Supplies", "Food", "Water"),
    _place("شمال قطاع غزة", 31.5501268, 34.5033134, Category.SHELTER, "Shelter", "Food", "Water", "Blankets"),
    _place("وسط قطاع غزة", 31.5225078, 34.4482441, Category.MEDICAL, "Medical Supplies", "Food"),
    _place("مدينة غزة القديمة", 31.5050311, 34.4641381, Category.MEDICAL, "Medical Supplies", "Food", "Water", "Shelter"),
    _place("مدينة غزة", 31.5050311, 34.4641381, Category.MEDICAL, "Medical Supplies", "Food", "Water", "Shelter"),
    _place("شمال غزة", 31.5501268, 34.5033134, Category.MEDICAL, "Medical Supplies", "Food", "Water", "Shelter"),
    # Cities and towns
    _place("خان يونس", 31.3452, 34.3037, Category.MEDICAL, "Medical Supplies", "Food", "Water"),
    _place("خانيونس", 31.3452, 34.3037, Category.MEDICAL, "Medical Supplies", "Food", "Water"),
    _place("رفح", 31.2968, 34.2435, Category.SUPPLIES, "Food", "Water", "Shelter"),
    _place("بيت لاهيا", 31.5506, 34.5000, Category.SHELTER, "Shelter", "Food", "Water"),
    _place("بيت حانون", 31.5522, 34.5361, Category.SHELTER, "Shelter", "Food", "Water"),
    _place("جباليا", 31.5367, 34.4983, Category.SHELTER, "Shelter", "Food", "Water", "Blankets"),
    _place("دير البلح", 31.4183455, 34.3502476, Category.MEDICAL, "Medical Supplies", "Food"),
    _place("النصيرات", 31.444084, 34.3865377, Category.SHELTER, "Shelter", "Food", "Water"),
    # Generic shelter terms
    _place("مخيم", 31.5010, 34.4660, Category.SHELTER, "Shelter", "Food", "Water", "Blankets"),
    _place("مأوى", 31.5010, 34.4660, Category.SHELTER, "Shelter", "Food", "Water"),
]

# ── Context groups (every match contributes needs) ──────────────────────

CONTEXT_RULES: list[KeywordRule[ContextGroup]] = [
    KeywordRule(  # medical
        keywords=(
            "إصابة", "جرحى", "مستشفى", "طبي", "صحي", "علاج", "جرح", "دم", "إسعاف",
            "عيادة", "طبيب", "مريض", "دواء", "شهيدا", "إسعافات أولية",
        ),
        result=ContextGroup(
            category=Category.MEDICAL,
            needs=("Medical Supplies", "Staff", "Equipment", "Blood", "Medicines"),
        ),
    ),
    KeywordRule(  # military
        keywords=("قصف", "اشتباك", "كمين", "جندي", "عسكري", "هجوم"),
        result=ContextGroup(
            category=Category.OTHER,
            needs=("Security", "Emergency Response", "Evacuation Support"),
        ),
    ),
    KeywordRule(  # humanitarian
        keywords=(
            "مساعدات", "إغاثة", "إجلاء", "مأوى", "مخيم", "طعام", "ماء", "دواء", "ملابس",
            "إيواء", "إغاثة إنسانية", "مساعدات إنسانية", "مساعدات طبية",
            "مساعدات غذائية", "المساعدات",
        ),
        result=ContextGroup(
            category=Category.SUPPLIES,
            needs=("Food", "Water", "Shelter", "Medical Supplies", "Clothing"),
        ),
    ),
    KeywordRule(  # food
        keywords=("طعام", "غذاء", "وجبة", "توزيع", "معونة"),
        result=ContextGroup(
            category=Category.FOOD,
            needs=("Food Supplies", "Distribution Equipment", "Storage"),
        ),
    ),
    KeywordRule(  # water
        keywords=("ماء", "شرب", "مياه", "توزيع"),
        result=ContextGroup(
            category=Category.WATER,
            needs=("Water", "Water Tanks", "Purification Tablets"),
        ),
    ),
]

# ── Severity (first match wins, high → medium → low) ────────────────────

SEVERITY_RULES: list[KeywordRule[SeverityLevel]] = [
    KeywordRule(
        keywords=(
            "قتل", "استشهاد", "قصف", "دمار", "تدمير", "انفجار", "هجوم", "غارة",
            "قصف جوي", "قصف مدفعي", "قصف صاروخي",
        ),
        result=SeverityLevel(severity=Severity.HIGH, status=Status.NEEDS_SUPPORT),
    ),
    KeywordRule(
        keywords=("إصابة", "جرحى", "تدمير", "ضرر", "أضرار"),
        result=SeverityLevel(severity=Severity.MEDIUM, status=Status.ACTIVE),
    ),
    KeywordRule(
        keywords=("تقرير", "تطور", "وضع", "حالة", "أخبار"),
        result=SeverityLevel(severity=Severity.LOW, status=Status.ACTIVE),
    ),
]
