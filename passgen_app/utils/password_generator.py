# passgen_app/utils/password_generator.py
import random
from dataclasses import dataclass
import config
from passgen_app.core.definitions import CHARACTER_CLASSES


class PasswordGeneratorError(ValueError):
    pass

class EmptySelectionError(PasswordGeneratorError):
    """Aucun type de caractère n'est sélectionné."""

class InvalidLengthError(PasswordGeneratorError):
    """Longueur hors de [MIN_LENGTH, MAX_LENGTH]."""


@dataclass(frozen=True)
class GenerationRequest:
    length: int = config.DEFAULT_LENGTH
    include_uppercase: bool = True
    include_lowercase: bool = True
    include_numbers: bool = True
    include_symbols: bool = True


def clamp_length(length: int) -> int:
    return max(config.MIN_LENGTH, min(config.MAX_LENGTH, int(length)))

def build_character_pool(request: GenerationRequest) -> str:
    """Concatène, dans l'ordre fixe, les jeux de caractères activés."""
    pool = ""
    for option, characters, _ in CHARACTER_CLASSES:
        if getattr(request, option):
            pool += characters
    return pool

def generate_password(request: GenerationRequest, rng=None) -> str:
    """
    Tire `request.length` caractères indépendamment et uniformément dans le pool.

    Le générateur par défaut est le module `random` (Mersenne Twister) : il n'est
    PAS adapté à un usage cryptographique. Passer `random.SystemRandom()` via `rng`
    pour une source sûre.
    """
    pool = build_character_pool(request)
    if not pool:
        raise EmptySelectionError("Veuillez sélectionner au moins un type de caractère !")
    if isinstance(request.length, bool) or not isinstance(request.length, int) \
            or not config.MIN_LENGTH <= request.length <= config.MAX_LENGTH:
        raise InvalidLengthError(
            f"La longueur doit être comprise entre {config.MIN_LENGTH} et {config.MAX_LENGTH} "
            f"(reçu : {request.length!r})."
        )
    rng = rng or random
    return ''.join(pool[rng.randrange(len(pool))] for _ in range(request.length))
