"""Tests for vocabulary and hashtag based skill inference."""

from __future__ import annotations

from resumeflow.normalize.skills import (
    SKILL_VOCABULARY,
    infer_skills,
    match_vocabulary,
    merge_skills,
    tech_hashtags,
)


def test_vocabulary_matches_in_vocabulary_order() -> None:
    skills = infer_skills("I love Python and React", ["Deploying on AWS #devops #cooking"])
    assert skills == ["React", "Python", "AWS", "devops"]


def test_matching_is_case_insensitive() -> None:
    assert match_vocabulary("working with DOCKER and kubernetes") == ["Docker", "Kubernetes"]


def test_japanese_hashtags_pass_the_filter() -> None:
    assert tech_hashtags("今日も #プログラミング と #ランチ") == ["プログラミング"]


def test_skills_are_unique_and_capped() -> None:
    text = " ".join(SKILL_VOCABULARY)
    skills = infer_skills(text, ["#dev #dev #techtalk", text])
    assert len(skills) == 15
    assert len(set(skills)) == len(skills)


def test_duplicate_hashtags_collapse() -> None:
    assert infer_skills("", ["#webdev is fun", "more #webdev"]) == ["webdev"]


def test_merge_skills_keeps_first_seen_order() -> None:
    assert merge_skills(["A", "B"], ["B", "C"], ["A", "D"]) == ["A", "B", "C", "D"]
    assert merge_skills(["A", "B", "C"], limit=2) == ["A", "B"]


def test_empty_input_yields_no_skills() -> None:
    assert infer_skills("", []) == []
