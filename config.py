import os
import json

# --- Chemins de l'application ---
APP_DATA_DIR = os.getenv("PASSGEN_DATA_DIR", os.path.join(os.path.expanduser("~"), ".passgen"))
SETTINGS_FILE = os.path.join(APP_DATA_DIR, "settings.json")
LOG_FILE = os.path.join(APP_DATA_DIR, "passgen.log")

# --- Paramètres du générateur ---
MIN_LENGTH = 4
MAX_LENGTH = 50
DEFAULT_LENGTH = 16

# Durée d'affichage de l'indicateur "Copié" (ms)
COPIED_DISPLAY_MS = 2000

# --- Apparence ---
THEME = 'light'

def load_settings(path: str = None) -> dict:
    """Charge la configuration utilisateur depuis le fichier JSON si existant.
    Retourne les valeurs lues (vide si aucun fichier).
    """
    global THEME, DEFAULT_LENGTH, COPIED_DISPLAY_MS
    path = path or SETTINGS_FILE
    if not os.path.exists(path):
        return {}
    try:
        with open(path, 'r') as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        print(f"Avertissement: impossible de lire {path} ({e}), paramètres par défaut utilisés.")
        return {}
    if not isinstance(data, dict):
        print(f"Avertissement: {path} ne contient pas un objet JSON, ignoré.")
        return {}

    theme_val = data.get("theme")
    if theme_val in ("dark", "light"):
        THEME = theme_val
    try:
        if "default_length" in data:
            DEFAULT_LENGTH = max(MIN_LENGTH, min(MAX_LENGTH, int(data["default_length"])))
        if "copied_display_ms" in data:
            COPIED_DISPLAY_MS = max(0, int(data["copied_display_ms"]))
    except (TypeError, ValueError):
        print(f"Avertissement: valeur numérique invalide dans {path}, ignorée.")
    return data

load_settings()
