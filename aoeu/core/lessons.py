from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, FrozenSet, List, Optional

import yaml

DEFAULT_LESSONS_DIR = Path(__file__).resolve().parent.parent / "data" / "lessons"


@dataclass(frozen=True)
class Lesson:
    key: str
    title: str
    alphabet: FrozenSet[str]

    @property
    def letters(self) -> str:
        """The alphabet as a sorted string, for display."""
        return "".join(sorted(self.alphabet))


class LessonRepository:
    def __init__(self, base_dir: Optional[Path] = None) -> None:
        self._base_dir = base_dir or DEFAULT_LESSONS_DIR
        self._lessons = self._load_lessons()

    def all(self) -> List[Lesson]:
        return list(self._lessons.values())

    def get(self, key: str) -> Lesson:
        return self._lessons[key]

    def _load_lessons(self) -> Dict[str, Lesson]:
        base_dir = self._base_dir
        if not base_dir.exists():
            raise FileNotFoundError(f"Lessons directory not found: {base_dir}")

        lessons: Dict[str, Lesson] = {}

        def _sort_key(p: Path) -> tuple[int, str]:
            m = re.match(r"^lesson(\d+)$", p.stem)
            if m:
                return (int(m.group(1)), p.stem)
            return (10**9, p.stem)

        for lesson_path in sorted(base_dir.glob("lesson*.yaml"), key=_sort_key):
            key = lesson_path.stem
            raw = yaml.safe_load(lesson_path.read_text(encoding="utf-8"))
            if not raw or not isinstance(raw, dict):
                raise ValueError(f"{lesson_path.name}: expected YAML with 'title' and 'alphabet'")
            title = raw.get("title")
            alphabet = raw.get("alphabet")
            if not title or not isinstance(title, str):
                raise ValueError(f"{lesson_path.name}: missing or invalid 'title'")
            if alphabet is None:
                raise ValueError(f"{lesson_path.name}: missing 'alphabet'")
            # whitespace inside the alphabet is only for readability
            letters = frozenset("".join(str(alphabet).split()))
            if not letters:
                raise ValueError(f"{lesson_path.name}: 'alphabet' is empty")
            lessons[key] = Lesson(key=key, title=title.strip(), alphabet=letters)

        if not lessons:
            raise ValueError(f"No lesson files (lesson*.yaml) found in {base_dir}")
        return lessons
