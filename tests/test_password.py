"""Tests for password generation."""

from collections import Counter

import pytest

from gpgvault.crypto.password import CHARSETS, generate_password

ALL_CHARS = set("".join(CHARSETS))


def char_class(c: str) -> int:
    for i, charset in enumerate(CHARSETS):
        if c in charset:
            return i
    raise AssertionError(f"{c!r} is not in any class")


class TestGeneratePassword:
    def test_default_length(self):
        assert len(generate_password()) == 20

    @pytest.mark.parametrize("length", [1, 8, 64])
    def test_custom_length(self, length: int):
        assert len(generate_password(length)) == length

    def test_only_known_characters(self):
        for _ in range(200):
            assert set(generate_password(20)) <= ALL_CHARS

    def test_rejects_non_positive_length(self):
        with pytest.raises(ValueError):
            generate_password(0)

    def test_classes_are_disjoint(self):
        seen = set()
        for charset in CHARSETS:
            assert not seen & set(charset)
            seen |= set(charset)

    def test_classes_chosen_uniformly(self):
        # 1000 passwords of 20 chars; each class should get about a quarter of
        # the characters even though the digit class is much smaller
        sample = "".join(generate_password(20) for _ in range(1000))
        counts = Counter(char_class(c) for c in sample)
        for i in range(len(CHARSETS)):
            assert abs(counts[i] / len(sample) - 0.25) < 0.02

    def test_not_weighted_by_class_size(self):
        sample = "".join(generate_password(20) for _ in range(1000))
        digits = sum(c in CHARSETS[2] for c in sample) / len(sample)
        by_size = len(CHARSETS[2]) / len(ALL_CHARS)
        assert digits > by_size + 0.1
