"""
Tests for the employer onboarding steps.
"""

import pytest
from pydantic import ValidationError

from jobboard.services.onboarding import (
    EMPLOYER_ONBOARDING_STEPS,
    get_step,
    next_step,
    previous_step,
)


@pytest.mark.unit
class TestEmployerOnboardingSteps:

    def test_order(self):
        assert [step.key for step in EMPLOYER_ONBOARDING_STEPS] == [
            "general-info",
            "location-info",
            "contact-info",
        ]

    def test_step_content(self):
        first = EMPLOYER_ONBOARDING_STEPS[0]

        assert first.title == "General Info"
        assert first.component == "GeneralCompanyInfoForm"
        assert first.description == "Provide general information about your company"

    def test_next_step(self):
        assert next_step("general-info").key == "location-info"
        assert next_step("location-info").key == "contact-info"
        assert next_step("contact-info") is None

    def test_previous_step(self):
        assert previous_step("general-info") is None
        assert previous_step("contact-info").key == "location-info"

    def test_unknown_key(self):
        assert get_step("billing") is None
        assert next_step("billing") is None
        assert previous_step("billing") is None

    def test_steps_are_immutable(self):
        with pytest.raises(ValidationError):
            EMPLOYER_ONBOARDING_STEPS[0].title = "Changed"
