# passgen_app/core/definitions.py

UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
NUMBERS = "0123456789"
# Jeu de symboles canonique (avec <>?)
SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"

# Ordre fixe de concaténation du pool : (option, caractères, libellé)
CHARACTER_CLASSES = [
    ("include_uppercase", UPPERCASE, "Majuscules (A-Z)"),
    ("include_lowercase", LOWERCASE, "Minuscules (a-z)"),
    ("include_numbers", NUMBERS, "Chiffres (0-9)"),
    ("include_symbols", SYMBOLS, "Symboles (!@#$%^&*)"),
]

OPTION_NAMES = tuple(name for name, _, _ in CHARACTER_CLASSES)

# Log Event Types
LOG_EVENT_PASSWORD_GENERATED = "PASSWORD_GENERATED"
LOG_EVENT_EMPTY_SELECTION = "EMPTY_SELECTION"
LOG_EVENT_COPY_SUCCESS = "COPY_SUCCESS"
LOG_EVENT_COPY_FALLBACK = "COPY_FALLBACK"
LOG_EVENT_COPY_FAILED = "COPY_FAILED"
