"""Tests for aoeu.core.corpus – word list loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from aoeu.core.corpus import load_corpus
from aoeu.core.lessons import LessonRepository
from aoeu.core.sampler import WordSampler


class TestLoadCorpus:
    def test_splits_on_any_whitespace(self, tmp_path: Path):
        p = tmp_path / "words.txt"
        p.write_text("aa oo\nzoo\n\n  ao\t", encoding="utf-8")
        assert load_corpus(p) == ("aa", "oo", "zoo", "ao")

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_corpus(tmp_path / "missing.txt")

    def test_empty_file(self, tmp_path: Path):
        p = tmp_path / "words.txt"
        p.write_text("  \n", encoding="utf-8")
        with pytest.raises(ValueError, match="empty"):
            load_corpus(p)


class TestBundledCorpus:
    def test_loads(self):
        assert len(load_corpus()) > 100

    def test_lowercase_letters_only(self):
        assert all(word.isalpha() and word.islower() for word in load_corpus())

    def test_every_bundled_lesson_has_words(self):
        sampler = WordSampler(load_corpus())
        for lesson in LessonRepository().all():
            assert len(sampler.eligible(lesson.alphabet)) >= 10, lesson.key
