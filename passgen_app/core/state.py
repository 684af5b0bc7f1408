# passgen_app/core/state.py
from dataclasses import dataclass, replace
import config
from passgen_app.core.definitions import OPTION_NAMES
from passgen_app.utils.password_generator import (
    GenerationRequest, clamp_length, generate_password
)


@dataclass(frozen=True)
class GeneratorState:
    """
    État complet du générateur, possédé par une seule fenêtre.
    Chaque action utilisateur produit un nouvel état via les fonctions ci-dessous.
    """
    password: str = ""
    length: int = config.DEFAULT_LENGTH
    include_uppercase: bool = True
    include_lowercase: bool = True
    include_numbers: bool = True
    include_symbols: bool = True
    copied: bool = False

    @property
    def has_password(self) -> bool:
        return bool(self.password)


def initial_state() -> GeneratorState:
    # Relu à l'appel : load_settings() peut avoir changé la longueur par défaut
    return GeneratorState(length=config.DEFAULT_LENGTH)

def with_length(state: GeneratorState, length: int) -> GeneratorState:
    return replace(state, length=clamp_length(length))

def with_option(state: GeneratorState, option: str, enabled: bool) -> GeneratorState:
    if option not in OPTION_NAMES:
        raise KeyError(f"Option inconnue : {option}")
    return replace(state, **{option: bool(enabled)})

def to_request(state: GeneratorState) -> GenerationRequest:
    return GenerationRequest(
        length=state.length,
        include_uppercase=state.include_uppercase,
        include_lowercase=state.include_lowercase,
        include_numbers=state.include_numbers,
        include_symbols=state.include_symbols,
    )

def generate(state: GeneratorState, rng=None) -> GeneratorState:
    """Raises EmptySelectionError; the caller keeps the previous state in that case."""
    password = generate_password(to_request(state), rng)
    return replace(state, password=password, copied=False)

def mark_copied(state: GeneratorState) -> GeneratorState:
    return replace(state, copied=True)

def clear_copied(state: GeneratorState) -> GeneratorState:
    return replace(state, copied=False)
