from __future__ import annotations

from enum import Enum


class Language(Enum):
    """
    Languages understood by the translate endpoint.

    Each member is ``(code, display_name, *aliases)``:
    - code: value sent as ``sl``/``tl`` and returned as the detected language
    - display_name: canonical English name
    - aliases: ISO 639-2/3 codes, legacy Google codes and common spellings

    ``AUTO`` asks the endpoint to detect the source language. It is never a
    valid target.
    """

    AUTO = ("auto", "Automatic", "detect")
    AFRIKAANS = ("af", "Afrikaans", "afr")
    ALBANIAN = ("sq", "Albanian", "sqi", "alb", "shqip")
    AMHARIC = ("am", "Amharic", "amh")
    ARABIC = ("ar", "Arabic", "ara")
    ARMENIAN = ("hy", "Armenian", "hye", "arm")
    ASSAMESE = ("as", "Assamese", "asm")
    AYMARA = ("ay", "Aymara", "aym")
    AZERBAIJANI = ("az", "Azerbaijani", "aze")
    BAMBARA = ("bm", "Bambara", "bam")
    BASQUE = ("eu", "Basque", "eus", "baq")
    BELARUSIAN = ("be", "Belarusian", "bel")
    BENGALI = ("bn", "Bengali", "ben", "bangla")
    BHOJPURI = ("bho", "Bhojpuri")
    BOSNIAN = ("bs", "Bosnian", "bos")
    BULGARIAN = ("bg", "Bulgarian", "bul")
    CATALAN = ("ca", "Catalan", "cat")
    CEBUANO = ("ceb", "Cebuano")
    CHICHEWA = ("ny", "Chichewa", "nya", "chewa", "nyanja")
    CHINESE_SIMPLIFIED = ("zh-CN", "Chinese (Simplified)", "zh", "zho", "chi", "zh-hans", "chinese")
    CHINESE_TRADITIONAL = ("zh-TW", "Chinese (Traditional)", "zh-hant")
    CORSICAN = ("co", "Corsican", "cos")
    CROATIAN = ("hr", "Croatian", "hrv", "hrvatski")
    CZECH = ("cs", "Czech", "ces", "cze")
    DANISH = ("da", "Danish", "dan")
    DHIVEHI = ("dv", "Dhivehi", "div")
    DOGRI = ("doi", "Dogri")
    DUTCH = ("nl", "Dutch", "nld", "dut")
    ENGLISH = ("en", "English", "eng")
    ESPERANTO = ("eo", "Esperanto", "epo")
    ESTONIAN = ("et", "Estonian", "est")
    EWE = ("ee", "Ewe")
    FILIPINO = ("tl", "Filipino", "fil", "tgl", "tagalog")
    FINNISH = ("fi", "Finnish", "fin")
    FRENCH = ("fr", "French", "fra", "fre", "francais")
    FRISIAN = ("fy", "Frisian", "fry")
    GALICIAN = ("gl", "Galician", "glg")
    GEORGIAN = ("ka", "Georgian", "kat", "geo")
    GERMAN = ("de", "German", "deu", "ger", "deutsch")
    GREEK = ("el", "Greek", "ell", "gre")
    GUARANI = ("gn", "Guarani", "grn")
    GUJARATI = ("gu", "Gujarati", "guj")
    HAITIAN_CREOLE = ("ht", "Haitian Creole", "hat")
    HAUSA = ("ha", "Hausa", "hau")
    HAWAIIAN = ("haw", "Hawaiian")
    HEBREW = ("he", "Hebrew", "iw", "heb")
    HINDI = ("hi", "Hindi", "hin")
    HMONG = ("hmn", "Hmong")
    HUNGARIAN = ("hu", "Hungarian", "hun")
    ICELANDIC = ("is", "Icelandic", "isl", "ice")
    IGBO = ("ig", "Igbo", "ibo")
    ILOCANO = ("ilo", "Ilocano")
    INDONESIAN = ("id", "Indonesian", "ind")
    IRISH = ("ga", "Irish", "gle")
    ITALIAN = ("it", "Italian", "ita", "italiano")
    JAPANESE = ("ja", "Japanese", "jpn")
    JAVANESE = ("jw", "Javanese", "jv", "jav")
    KANNADA = ("kn", "Kannada", "kan")
    KAZAKH = ("kk", "Kazakh", "kaz")
    KHMER = ("km", "Khmer", "khm")
    KINYARWANDA = ("rw", "Kinyarwanda", "kin")
    KONKANI = ("gom", "Konkani")
    KOREAN = ("ko", "Korean", "kor")
    KRIO = ("kri", "Krio")
    KURDISH_KURMANJI = ("ku", "Kurdish (Kurmanji)", "kur", "kmr")
    KURDISH_SORANI = ("ckb", "Kurdish (Sorani)", "sorani")
    KYRGYZ = ("ky", "Kyrgyz", "kir")
    LAO = ("lo", "Lao")
    LATIN = ("la", "Latin", "lat")
    LATVIAN = ("lv", "Latvian", "lav")
    LINGALA = ("ln", "Lingala", "lin")
    LITHUANIAN = ("lt", "Lithuanian", "lit")
    LUGANDA = ("lg", "Luganda", "lug")
    LUXEMBOURGISH = ("lb", "Luxembourgish", "ltz")
    MACEDONIAN = ("mk", "Macedonian", "mkd", "mac", "makedonski")
    MAITHILI = ("mai", "Maithili")
    MALAGASY = ("mg", "Malagasy", "mlg")
    MALAY = ("ms", "Malay", "msa", "may")
    MALAYALAM = ("ml", "Malayalam", "mal")
    MALTESE = ("mt", "Maltese", "mlt")
    MAORI = ("mi", "Maori", "mri", "mao")
    MARATHI = ("mr", "Marathi", "mar")
    MEITEILON_MANIPURI = ("mni-Mtei", "Meiteilon (Manipuri)", "mni", "manipuri")
    MIZO = ("lus", "Mizo")
    MONGOLIAN = ("mn", "Mongolian", "mon")
    MYANMAR_BURMESE = ("my", "Myanmar (Burmese)", "mya", "bur", "burmese")
    NEPALI = ("ne", "Nepali", "nep")
    NORWEGIAN = ("no", "Norwegian", "nor", "nb", "nob")
    ODIA_ORIYA = ("or", "Odia (Oriya)", "ori", "oriya")
    OROMO = ("om", "Oromo", "orm")
    PASHTO = ("ps", "Pashto", "pus")
    PERSIAN = ("fa", "Persian", "fas", "per", "farsi")
    POLISH = ("pl", "Polish", "pol")
    PORTUGUESE = ("pt", "Portuguese", "por")
    PUNJABI = ("pa", "Punjabi", "pan")
    QUECHUA = ("qu", "Quechua", "que")
    ROMANIAN = ("ro", "Romanian", "ron", "rum")
    RUSSIAN = ("ru", "Russian", "rus")
    SAMOAN = ("sm", "Samoan", "smo")
    SANSKRIT = ("sa", "Sanskrit", "san")
    SCOTS_GAELIC = ("gd", "Scots Gaelic", "gla")
    SEPEDI = ("nso", "Sepedi")
    SERBIAN = ("sr", "Serbian", "srp", "srpski")
    SESOTHO = ("st", "Sesotho", "sot")
    SHONA = ("sn", "Shona", "sna")
    SINDHI = ("sd", "Sindhi", "snd")
    SINHALA = ("si", "Sinhala", "sin", "sinhalese")
    SLOVAK = ("sk", "Slovak", "slk", "slo")
    SLOVENIAN = ("sl", "Slovenian", "slv")
    SOMALI = ("so", "Somali", "som")
    SPANISH = ("es", "Spanish", "spa", "espanol")
    SUNDANESE = ("su", "Sundanese", "sun")
    SWAHILI = ("sw", "Swahili", "swa")
    SWEDISH = ("sv", "Swedish", "swe")
    TAJIK = ("tg", "Tajik", "tgk")
    TAMIL = ("ta", "Tamil", "tam")
    TATAR = ("tt", "Tatar", "tat")
    TELUGU = ("te", "Telugu", "tel")
    THAI = ("th", "Thai", "tha")
    TIGRINYA = ("ti", "Tigrinya", "tir")
    TSONGA = ("ts", "Tsonga", "tso")
    TURKISH = ("tr", "Turkish", "tur")
    TURKMEN = ("tk", "Turkmen", "tuk")
    TWI = ("ak", "Twi", "twi", "akan")
    UKRAINIAN = ("uk", "Ukrainian", "ukr")
    URDU = ("ur", "Urdu", "urd")
    UYGHUR = ("ug", "Uyghur", "uig")
    UZBEK = ("uz", "Uzbek", "uzb")
    VIETNAMESE = ("vi", "Vietnamese", "vie")
    WELSH = ("cy", "Welsh", "cym", "wel")
    XHOSA = ("xh", "Xhosa", "xho")
    YIDDISH = ("yi", "Yiddish", "yid")
    YORUBA = ("yo", "Yoruba", "yor")
    ZULU = ("zu", "Zulu", "zul")

    def __init__(self, code: str, display_name: str, *aliases: str) -> None:
        self.code = code
        self.display_name = display_name
        self.aliases = aliases

    def __str__(self) -> str:
        return self.display_name

    @classmethod
    def resolve(cls, value: str | Language) -> Language:
        """Shortcut for :func:`gtx_translate.utils.language_resolver.resolve_language`."""
        from gtx_translate.utils.language_resolver import resolve_language

        return resolve_language(value)
