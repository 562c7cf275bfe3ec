"""ISO 639-1 language codes.

This module defines the closed set of two-letter language codes from ISO 639-1
as a ``str`` enum, together with the two conversions used throughout the package:

- ``to_code``: member to canonical two-letter code (total)
- ``from_code``: canonical two-letter code to member (raises ``UnrecognizedCode``)

Lookups are exact: no trimming, no case folding, no three-letter codes.

Example:
    >>> from_code("en")
    <LanguageCode.EN: 'en'>
    >>> to_code(LanguageCode.FR)
    'fr'
"""

from enum import Enum
from typing import Dict, Iterator, Tuple


class UnrecognizedCode(ValueError):
    """Raised when a string is not one of the ISO 639-1 two-letter codes."""

    def __init__(self, code: object):
        self.code = code
        super().__init__(
            f"{code!r} is not a valid ISO 639-1 2 letter language code"
        )


class LanguageCode(str, Enum):
    """ISO 639-1 language, valued by its two-letter code.

    Members are declared in ISO 639-1 table order. Each member also carries
    the ISO reference name (``english_name``) and its language ``family``.
    """

    def __new__(cls, code: str, english_name: str, family: str):
        member = str.__new__(cls, code)
        member._value_ = code
        member.english_name = english_name
        member.family = family
        return member

    AB = ("ab", "Abkhazian", "Northwest Caucasian")
    AA = ("aa", "Afar", "Afro-Asiatic")
    AF = ("af", "Afrikaans", "Indo-European")
    AK = ("ak", "Akan", "Niger–Congo")
    SQ = ("sq", "Albanian", "Indo-European")
    AM = ("am", "Amharic", "Afro-Asiatic")
    AR = ("ar", "Arabic", "Afro-Asiatic")
    AN = ("an", "Aragonese", "Indo-European")
    HY = ("hy", "Armenian", "Indo-European")
    AS = ("as", "Assamese", "Indo-European")
    AV = ("av", "Avaric", "Northeast Caucasian")
    AE = ("ae", "Avestan", "Indo-European")
    AY = ("ay", "Aymara", "Aymaran")
    AZ = ("az", "Azerbaijani", "Turkic")
    BM = ("bm", "Bambara", "Niger–Congo")
    BA = ("ba", "Bashkir", "Turkic")
    EU = ("eu", "Basque", "Language isolate")
    BE = ("be", "Belarusian", "Indo-European")
    BN = ("bn", "Bengali", "Indo-European")
    BH = ("bh", "Bihari languages", "Indo-European")
    BI = ("bi", "Bislama", "Creole")
    BS = ("bs", "Bosnian", "Indo-European")
    BR = ("br", "Breton", "Indo-European")
    BG = ("bg", "Bulgarian", "Indo-European")
    MY = ("my", "Burmese", "Sino-Tibetan")
    CA = ("ca", "Catalan", "Indo-European")
    CH = ("ch", "Chamorro", "Austronesian")
    CE = ("ce", "Chechen", "Northeast Caucasian")
    NY = ("ny", "Chichewa", "Niger–Congo")
    ZH = ("zh", "Chinese", "Sino-Tibetan")
    CV = ("cv", "Chuvash", "Turkic")
    KW = ("kw", "Cornish", "Indo-European")
    CO = ("co", "Corsican", "Indo-European")
    CR = ("cr", "Cree", "Algonquian")
    HR = ("hr", "Croatian", "Indo-European")
    CS = ("cs", "Czech", "Indo-European")
    DA = ("da", "Danish", "Indo-European")
    DV = ("dv", "Divehi", "Indo-European")
    NL = ("nl", "Dutch", "Indo-European")
    DZ = ("dz", "Dzongkha", "Sino-Tibetan")
    EN = ("en", "English", "Indo-European")
    EO = ("eo", "Esperanto", "Constructed")
    ET = ("et", "Estonian", "Uralic")
    EE = ("ee", "Ewe", "Niger–Congo")
    FO = ("fo", "Faroese", "Indo-European")
    FJ = ("fj", "Fijian", "Austronesian")
    FI = ("fi", "Finnish", "Uralic")
    FR = ("fr", "French", "Indo-European")
    FF = ("ff", "Fulah", "Niger–Congo")
    GL = ("gl", "Galician", "Indo-European")
    KA = ("ka", "Georgian", "Kartvelian")
    DE = ("de", "German", "Indo-European")
    EL = ("el", "Greek", "Indo-European")
    GN = ("gn", "Guarani", "Tupian")
    GU = ("gu", "Gujarati", "Indo-European")
    HT = ("ht", "Haitian", "Creole")
    HA = ("ha", "Hausa", "Afro-Asiatic")
    HE = ("he", "Hebrew", "Afro-Asiatic")
    HZ = ("hz", "Herero", "Niger–Congo")
    HI = ("hi", "Hindi", "Indo-European")
    HO = ("ho", "Hiri Motu", "Austronesian")
    HU = ("hu", "Hungarian", "Uralic")
    IA = ("ia", "Interlingua", "Constructed")
    ID = ("id", "Indonesian", "Austronesian")
    IE = ("ie", "Interlingue", "Constructed")
    GA = ("ga", "Irish", "Indo-European")
    IG = ("ig", "Igbo", "Niger–Congo")
    IK = ("ik", "Inupiaq", "Eskimo–Aleut")
    IO = ("io", "Ido", "Constructed")
    IS = ("is", "Icelandic", "Indo-European")
    IT = ("it", "Italian", "Indo-European")
    IU = ("iu", "Inuktitut", "Eskimo–Aleut")
    JA = ("ja", "Japanese", "Japonic")
    JV = ("jv", "Javanese", "Austronesian")
    KL = ("kl", "Kalaallisut", "Eskimo–Aleut")
    KN = ("kn", "Kannada", "Dravidian")
    KR = ("kr", "Kanuri", "Nilo-Saharan")
    KS = ("ks", "Kashmiri", "Indo-European")
    KK = ("kk", "Kazakh", "Turkic")
    KM = ("km", "Central Khmer", "Austroasiatic")
    KI = ("ki", "Kikuyu", "Niger–Congo")
    RW = ("rw", "Kinyarwanda", "Niger–Congo")
    KY = ("ky", "Kirghiz", "Turkic")
    KV = ("kv", "Komi", "Uralic")
    KG = ("kg", "Kongo", "Niger–Congo")
    KO = ("ko", "Korean", "Koreanic")
    KU = ("ku", "Kurdish", "Indo-European")
    KJ = ("kj", "Kuanyama", "Niger–Congo")
    LA = ("la", "Latin", "Indo-European")
    LB = ("lb", "Luxembourgish", "Indo-European")
    LG = ("lg", "Ganda", "Niger–Congo")
    LI = ("li", "Limburgan", "Indo-European")
    LN = ("ln", "Lingala", "Niger–Congo")
    LO = ("lo", "Lao", "Tai–Kadai")
    LT = ("lt", "Lithuanian", "Indo-European")
    LU = ("lu", "Luba-Katanga", "Niger–Congo")
    LV = ("lv", "Latvian", "Indo-European")
    GV = ("gv", "Manx", "Indo-European")
    MK = ("mk", "Macedonian", "Indo-European")
    MG = ("mg", "Malagasy", "Austronesian")
    MS = ("ms", "Malay", "Austronesian")
    ML = ("ml", "Malayalam", "Dravidian")
    MT = ("mt", "Maltese", "Afro-Asiatic")
    MI = ("mi", "Maori", "Austronesian")
    MR = ("mr", "Marathi", "Indo-European")
    MH = ("mh", "Marshallese", "Austronesian")
    MN = ("mn", "Mongolian", "Mongolic")
    NA = ("na", "Nauru", "Austronesian")
    NV = ("nv", "Navajo", "Dené–Yeniseian")
    ND = ("nd", "North Ndebele", "Niger–Congo")
    NE = ("ne", "Nepali", "Indo-European")
    NG = ("ng", "Ndonga", "Niger–Congo")
    NB = ("nb", "Norwegian Bokmål", "Indo-European")
    NN = ("nn", "Norwegian Nynorsk", "Indo-European")
    NO = ("no", "Norwegian", "Indo-European")
    II = ("ii", "Sichuan Yi", "Sino-Tibetan")
    NR = ("nr", "South Ndebele", "Niger–Congo")
    OC = ("oc", "Occitan", "Indo-European")
    OJ = ("oj", "Ojibwa", "Algonquian")
    CU = ("cu", "Church Slavic", "Indo-European")
    OM = ("om", "Oromo", "Afro-Asiatic")
    OR = ("or", "Oriya", "Indo-European")
    OS = ("os", "Ossetian", "Indo-European")
    PA = ("pa", "Punjabi", "Indo-European")
    PI = ("pi", "Pali", "Indo-European")
    FA = ("fa", "Persian", "Indo-European")
    PL = ("pl", "Polish", "Indo-European")
    PS = ("ps", "Pashto", "Indo-European")
    PT = ("pt", "Portuguese", "Indo-European")
    QU = ("qu", "Quechua", "Quechuan")
    RM = ("rm", "Romansh", "Indo-European")
    RN = ("rn", "Rundi", "Niger–Congo")
    RO = ("ro", "Romanian", "Indo-European")
    RU = ("ru", "Russian", "Indo-European")
    SA = ("sa", "Sanskrit", "Indo-European")
    SC = ("sc", "Sardinian", "Indo-European")
    SD = ("sd", "Sindhi", "Indo-European")
    SE = ("se", "Northern Sami", "Uralic")
    SM = ("sm", "Samoan", "Austronesian")
    SG = ("sg", "Sango", "Creole")
    SR = ("sr", "Serbian", "Indo-European")
    GD = ("gd", "Gaelic", "Indo-European")
    SN = ("sn", "Shona", "Niger–Congo")
    SI = ("si", "Sinhala", "Indo-European")
    SK = ("sk", "Slovak", "Indo-European")
    SL = ("sl", "Slovenian", "Indo-European")
    SO = ("so", "Somali", "Afro-Asiatic")
    ST = ("st", "Southern Sotho", "Niger–Congo")
    ES = ("es", "Spanish", "Indo-European")
    SU = ("su", "Sundanese", "Austronesian")
    SW = ("sw", "Swahili", "Niger–Congo")
    SS = ("ss", "Swati", "Niger–Congo")
    SV = ("sv", "Swedish", "Indo-European")
    TA = ("ta", "Tamil", "Dravidian")
    TE = ("te", "Telugu", "Dravidian")
    TG = ("tg", "Tajik", "Indo-European")
    TH = ("th", "Thai", "Tai–Kadai")
    TI = ("ti", "Tigrinya", "Afro-Asiatic")
    BO = ("bo", "Tibetan", "Sino-Tibetan")
    TK = ("tk", "Turkmen", "Turkic")
    TL = ("tl", "Tagalog", "Austronesian")
    TN = ("tn", "Tswana", "Niger–Congo")
    TO = ("to", "Tonga", "Austronesian")
    TR = ("tr", "Turkish", "Turkic")
    TS = ("ts", "Tsonga", "Niger–Congo")
    TT = ("tt", "Tatar", "Turkic")
    TW = ("tw", "Twi", "Niger–Congo")
    TY = ("ty", "Tahitian", "Austronesian")
    UG = ("ug", "Uighur", "Turkic")
    UK = ("uk", "Ukrainian", "Indo-European")
    UR = ("ur", "Urdu", "Indo-European")
    UZ = ("uz", "Uzbek", "Turkic")
    VE = ("ve", "Venda", "Niger–Congo")
    VI = ("vi", "Vietnamese", "Austroasiatic")
    VO = ("vo", "Volapük", "Constructed")
    WA = ("wa", "Walloon", "Indo-European")
    CY = ("cy", "Welsh", "Indo-European")
    WO = ("wo", "Wolof", "Niger–Congo")
    FY = ("fy", "Western Frisian", "Indo-European")
    XH = ("xh", "Xhosa", "Niger–Congo")
    YI = ("yi", "Yiddish", "Indo-European")
    YO = ("yo", "Yoruba", "Niger–Congo")
    ZA = ("za", "Zhuang", "Tai–Kadai")
    ZU = ("zu", "Zulu", "Niger–Congo")

    @classmethod
    def _missing_(cls, value: object) -> "LanguageCode":
        raise UnrecognizedCode(value)

    def __str__(self) -> str:
        return self.value

    def __format__(self, format_spec: str) -> str:
        return format(self.value, format_spec)

    @property
    def code(self) -> str:
        """Two-letter ISO 639-1 code, e.g. ``"en"``."""
        return self.value

    @classmethod
    def from_code(cls, code: str) -> "LanguageCode":
        """Alias of the module-level ``from_code``."""
        return from_code(code)


_BY_CODE: Dict[str, LanguageCode] = {
    language.value: language for language in LanguageCode
}

FAMILIES: Tuple[str, ...] = tuple(
    sorted({language.family for language in LanguageCode})
)


def to_code(language: LanguageCode) -> str:
    """Return the two-letter code of a language.

    Args:
        language: LanguageCode member

    Returns:
        Lowercase two-letter ISO 639-1 code (e.g., "zh")
    """
    return language.value


def from_code(code: str) -> LanguageCode:
    """Resolve a two-letter ISO 639-1 code to its LanguageCode member.

    The match is exact and case-sensitive: "EN", " en" and "eng" are all
    rejected.

    Args:
        code: Two-letter lowercase code (e.g., "fr")

    Returns:
        Matching LanguageCode member

    Raises:
        UnrecognizedCode: If the input is not one of the registered codes
    """
    if isinstance(code, LanguageCode):
        return code
    if not isinstance(code, str):
        raise UnrecognizedCode(code)

    try:
        return _BY_CODE[code]
    except KeyError:
        raise UnrecognizedCode(code) from None


def codes() -> Iterator[str]:
    """Iterate over all two-letter codes in ISO 639-1 table order."""
    return (language.value for language in LanguageCode)


def families() -> Iterator[str]:
    """Iterate over the distinct language families, sorted by name."""
    return iter(FAMILIES)
