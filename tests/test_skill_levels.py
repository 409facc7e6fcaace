"""Tests for skill level metadata."""

from job_board.models.skill import Skill, SkillLevel
from job_board.skills.levels import classify, sort_by_level


class TestClassify:
    def test_ranks(self):
        assert classify(SkillLevel.BEGINNER).rank == 1
        assert classify(SkillLevel.INTERMEDIATE).rank == 2
        assert classify(SkillLevel.ADVANCED).rank == 3
        assert classify(SkillLevel.EXPERT).rank == 4

    def test_label(self):
        assert classify("expert").label == "Expert"

    def test_unknown_falls_back_to_beginner(self):
        info = classify("WIZARD")
        assert info.level == SkillLevel.BEGINNER
        assert info.rank == 1

    def test_none_falls_back_to_beginner(self):
        assert classify(None).label == "Beginner"


class TestSortByLevel:
    def test_highest_first_and_stable(self):
        skills = [
            Skill(id="a", profile_id="p", name="A", level=SkillLevel.BEGINNER),
            Skill(id="b", profile_id="p", name="B", level=SkillLevel.EXPERT),
            Skill(id="c", profile_id="p", name="C", level=SkillLevel.BEGINNER),
            Skill(id="d", profile_id="p", name="D", level=SkillLevel.ADVANCED),
        ]
        assert [s.id for s in sort_by_level(skills)] == ["b", "d", "a", "c"]
