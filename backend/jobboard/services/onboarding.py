"""
Employer onboarding steps.

The wizard is linear: General Info, then Location Info, then Contact Info.
"""

from typing import Optional, Tuple

from pydantic import ConfigDict

from jobboard.schemas.common import CamelModel


class OnboardingStep(CamelModel):
    model_config = ConfigDict(frozen=True)

    title: str
    component: str
    key: str
    description: str


EMPLOYER_ONBOARDING_STEPS: Tuple[OnboardingStep, ...] = (
    OnboardingStep(
        title="General Info",
        component="GeneralCompanyInfoForm",
        key="general-info",
        description="Provide general information about your company",
    ),
    OnboardingStep(
        title="Location Info",
        component="LocationInfoForm",
        key="location-info",
        description="Provide location details of your company",
    ),
    OnboardingStep(
        title="Contact Info",
        component="ContactInfoForm",
        key="contact-info",
        description="Provide contact details for your company",
    ),
)


def _index_of(key: str) -> Optional[int]:
    for index, step in enumerate(EMPLOYER_ONBOARDING_STEPS):
        if step.key == key:
            return index
    return None


def get_step(key: str) -> Optional[OnboardingStep]:
    index = _index_of(key)
    return EMPLOYER_ONBOARDING_STEPS[index] if index is not None else None


def next_step(key: str) -> Optional[OnboardingStep]:
    """Step after `key`, or None at the last step or for an unknown key."""
    index = _index_of(key)
    if index is None or index + 1 >= len(EMPLOYER_ONBOARDING_STEPS):
        return None
    return EMPLOYER_ONBOARDING_STEPS[index + 1]


def previous_step(key: str) -> Optional[OnboardingStep]:
    """Step before `key`, or None at the first step or for an unknown key."""
    index = _index_of(key)
    if not index:
        return None
    return EMPLOYER_ONBOARDING_STEPS[index - 1]
