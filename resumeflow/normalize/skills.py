"""
Skill inference.

Skills are guessed from free text with two cheap signals: a fixed
vocabulary of technologies and job functions, and hashtags that look
tech‑ or design‑related.  Matching is plain case‑insensitive substring
search, so short terms such as "AI" or "Java" will also fire inside
longer words.  The vocabulary is bilingual because the profiles this
tool targets are frequently written in Japanese.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, List

from .schema import MAX_SKILLS

logger = logging.getLogger(__name__)

SKILL_VOCABULARY: List[str] = [
    "JavaScript", "TypeScript", "React", "Vue.js", "Angular", "Node.js",
    "PHP", "Python", "Ruby", "Java", "C#", "Swift",
    "HTML", "CSS", "Sass", "UI/UX", "Figma", "Adobe XD",
    "SQL", "MongoDB", "Firebase", "AWS", "Azure", "GCP",
    "Docker", "Kubernetes", "CI/CD", "Git", "Agile", "Scrum",
    "プロジェクト管理", "マーケティング", "セールス", "カスタマーサポート",
    "データ分析", "機械学習", "AI", "ブロックチェーン",
    "SEO", "SEM", "コンテンツマーケティング", "SNSマーケティング",
]

HASHTAG_RE = re.compile(r"#(\w+)")
TECH_HASHTAG_RE = re.compile(
    r"tech|dev|design|marketing|エンジニア|プログラミング|開発|デザイン|マーケティング",
    re.IGNORECASE,
)


def merge_skills(*groups: Iterable[str], limit: int = MAX_SKILLS) -> List[str]:
    """Union skill lists, dropping duplicates and keeping first‑seen order."""
    seen = set()
    merged: List[str] = []
    for group in groups:
        for skill in group or []:
            if not skill or skill in seen:
                continue
            seen.add(skill)
            merged.append(skill)
    return merged[:limit]


def match_vocabulary(text: str) -> List[str]:
    """Return vocabulary terms found in `text`, in vocabulary order."""
    haystack = (text or "").lower()
    return [skill for skill in SKILL_VOCABULARY if skill.lower() in haystack]


def tech_hashtags(text: str) -> List[str]:
    """Return hashtags (without '#') that pass the tech keyword filter."""
    return [tag for tag in HASHTAG_RE.findall(text or "") if TECH_HASHTAG_RE.search(tag)]


def infer_skills(bio: str, post_texts: Iterable[str] = ()) -> List[str]:
    """Infer a capped, deduplicated skill list from a bio and post texts."""
    all_text = " ".join([bio or "", *[t or "" for t in post_texts]])
    skills = merge_skills(match_vocabulary(all_text), tech_hashtags(all_text))
    logger.debug("Inferred %d skills", len(skills))
    return skills
