"""Tests for the password builder."""

import random
import re
import pytest

import config
from passgen_app.core.definitions import UPPERCASE, LOWERCASE, NUMBERS, SYMBOLS
from passgen_app.utils.password_generator import (
    GenerationRequest, build_character_pool, clamp_length, generate_password,
    EmptySelectionError, InvalidLengthError, PasswordGeneratorError,
)

NONE_SELECTED = dict(include_uppercase=False, include_lowercase=False,
                     include_numbers=False, include_symbols=False)


class TestCharacterPool:

    def test_all_classes_in_fixed_order(self):
        pool = build_character_pool(GenerationRequest())
        assert pool == UPPERCASE + LOWERCASE + NUMBERS + SYMBOLS

    def test_subset_keeps_order(self):
        request = GenerationRequest(include_uppercase=False, include_lowercase=True,
                                    include_numbers=False, include_symbols=True)
        assert build_character_pool(request) == LOWERCASE + SYMBOLS

    def test_empty_when_nothing_selected(self):
        assert build_character_pool(GenerationRequest(**NONE_SELECTED)) == ""

    def test_symbol_set_is_canonical(self):
        assert SYMBOLS == "!@#$%^&*()_+-=[]{}|;:,.<>?"
        assert len(set(SYMBOLS)) == len(SYMBOLS)


class TestGeneratePassword:

    def test_numbers_only(self):
        request = GenerationRequest(length=8, **dict(NONE_SELECTED, include_numbers=True))
        assert re.fullmatch(r"[0-9]{8}", generate_password(request))

    def test_all_classes_length_and_alphabet(self):
        allowed = set(UPPERCASE + LOWERCASE + NUMBERS + SYMBOLS)
        for _ in range(50):
            password = generate_password(GenerationRequest(length=16))
            assert len(password) == 16
            assert set(password) <= allowed

    @pytest.mark.parametrize("length", [config.MIN_LENGTH, 12, config.MAX_LENGTH])
    def test_length_bounds(self, length):
        request = GenerationRequest(length=length, **dict(NONE_SELECTED, include_lowercase=True))
        password = generate_password(request)
        assert len(password) == length
        assert set(password) <= set(LOWERCASE)

    def test_empty_selection_raises(self):
        with pytest.raises(EmptySelectionError):
            generate_password(GenerationRequest(**NONE_SELECTED))

    def test_empty_selection_is_a_value_error(self):
        assert issubclass(EmptySelectionError, PasswordGeneratorError)
        assert issubclass(PasswordGeneratorError, ValueError)

    @pytest.mark.parametrize("length", [0, 3, 51, -1, True, 16.0])
    def test_out_of_range_length_rejected(self, length):
        with pytest.raises(InvalidLengthError):
            generate_password(GenerationRequest(length=length))

    def test_seeded_rng_is_reproducible(self):
        request = GenerationRequest(length=20)
        first = generate_password(request, random.Random(42))
        second = generate_password(request, random.Random(42))
        assert first == second

    def test_uses_rng_randrange_over_pool(self):
        class LastIndex:
            def randrange(self, n):
                return n - 1

        request = GenerationRequest(length=5, **dict(NONE_SELECTED, include_uppercase=True))
        assert generate_password(request, LastIndex()) == "ZZZZZ"

    def test_accepts_system_random(self):
        password = generate_password(GenerationRequest(length=10), random.SystemRandom())
        assert len(password) == 10

    def test_draws_cover_the_pool(self):
        request = GenerationRequest(length=50, **dict(NONE_SELECTED, include_numbers=True))
        rng = random.Random(7)
        seen = set()
        for _ in range(20):
            seen |= set(generate_password(request, rng))
        assert seen == set(NUMBERS)


class TestClampLength:

    @pytest.mark.parametrize("raw, expected", [(1, 4), (4, 4), (16, 16), (50, 50), (99, 50)])
    def test_clamp(self, raw, expected):
        assert clamp_length(raw) == expected
