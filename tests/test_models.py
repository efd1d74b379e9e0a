"""Tests for Pydantic data models."""

import pytest
from pydantic import ValidationError

from resumancer.models import (
    Constraints,
    GenerationRequest,
    GenerationResult,
    Idea,
    NoUsableIdeas,
)


class TestGenerationRequest:
    def test_defaults(self):
        request = GenerationRequest(mood=5)
        assert request.target_role == ""
        assert request.skills == []
        assert request.previous_titles == []
        assert request.time_horizon == "30 days"
        assert request.constraints is None
        assert request.novelty_seed is None

    def test_camel_case_aliases(self):
        request = GenerationRequest.model_validate(
            {"mood": 3, "targetRole": "PM", "additionalContext": "x", "previousTitles": ["A"], "noveltySeed": 7}
        )
        assert request.target_role == "PM"
        assert request.additional_context == "x"
        assert request.previous_titles == ["A"]
        assert request.novelty_seed == 7

    def test_snake_case_names(self):
        assert GenerationRequest(mood=3, target_role="PM").target_role == "PM"

    def test_comma_separated_interests(self):
        request = GenerationRequest(mood=5, interests="climate tech, fintech, , edtech")
        assert request.interests == ["climate tech", "fintech", "edtech"]

    def test_nulls_become_empty(self):
        request = GenerationRequest.model_validate(
            {"mood": 5, "industry": None, "skills": None, "previousTitles": None, "timeHorizon": None}
        )
        assert request.industry == ""
        assert request.skills == []
        assert request.previous_titles == []
        assert request.time_horizon == "30 days"

    def test_constraints_object(self):
        request = GenerationRequest.model_validate(
            {"mood": 5, "constraints": {"remoteOnly": True, "partTimeOk": True}}
        )
        assert isinstance(request.constraints, Constraints)
        assert request.constraints.remote_only is True
        assert request.constraints.no_coding is False

    def test_constraints_free_text(self):
        request = GenerationRequest(mood=5, constraints="Evenings only")
        assert request.constraints == "Evenings only"

    @pytest.mark.parametrize("mood", ["5", True, float("nan"), {"v": 5}])
    def test_bad_mood_rejected(self, mood):
        with pytest.raises(ValidationError):
            GenerationRequest(mood=mood)

    def test_huge_integer_mood_accepted(self):
        assert GenerationRequest(mood=10**400).mood == float("inf")
        assert GenerationRequest(mood=-(10**400)).mood == float("-inf")

    def test_unknown_fields_ignored(self):
        assert GenerationRequest.model_validate({"mood": 1, "theme": "dark"}).mood == 1


class TestIdea:
    def test_extra_field_forbidden(self, make_idea):
        data = make_idea("practical")
        data["score"] = 1
        with pytest.raises(ValidationError):
            Idea(**data)

    def test_category_literal(self, make_idea):
        with pytest.raises(ValidationError):
            Idea(**make_idea("boring"))


class TestGenerationResult:
    def test_requires_exactly_three(self, sample_ideas):
        ideas = [Idea(**i) for i in sample_ideas]
        with pytest.raises(ValidationError):
            GenerationResult(ideas=ideas[:2], mood=5, temperature=0.5)

    def test_payload(self, sample_ideas):
        result = GenerationResult(ideas=[Idea(**i) for i in sample_ideas], mood=5, temperature=0.5)
        payload = result.to_payload()
        assert payload["status"] == "ok"
        assert payload["ideas"] == sample_ideas
        assert "usage" not in payload


class TestNoUsableIdeas:
    def test_payload(self):
        payload = NoUsableIdeas(message="bad", raw="{}", mood=4, temperature=0.44).to_payload()
        assert payload == {
            "status": "no_usable_ideas",
            "error": "bad",
            "raw": "{}",
            "mood": 4,
            "temperature": 0.44,
        }
