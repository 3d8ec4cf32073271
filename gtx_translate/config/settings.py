import os

def env_bool(key, default=False):
    return os.getenv(key, str(default)).lower() in ("1", "true", "yes", "on")

DEBUG_PRINT = env_bool("GTX_TRANSLATE_DEBUG")

TRANSLATE_URL = "https://translate.googleapis.com/translate_a/single"

# The endpoint may reject default client identifiers.
USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64)"

# Borrowed from py-googletrans.
DT_PARAMS = ("at", "bd", "ex", "ld", "md", "qca", "rw", "rm", "ss", "t")

FIXED_PARAMS = (
    ("ie", "UTF-8"),
    ("oe", "UTF-8"),
    ("otf", "1"),
    ("ssel", "0"),
    ("tsel", "0"),
    ("tk", "bushissocool"),
)
