"""Unit tests for model rules."""

import pytest
from pydantic import ValidationError

from needahand.config import Settings
from needahand.models.job import JobStatus, can_transition
from needahand.models.worker import CustomerProfile, WorkerProfileUpdate
from needahand.services.profiles import build_worker_profile, earnings_summary


class TestJobTransitions:

    @pytest.mark.unit
    @pytest.mark.parametrize("current,target", [
        (JobStatus.PENDING, JobStatus.ACCEPTED),
        (JobStatus.ACCEPTED, JobStatus.COMPLETED),
        (JobStatus.PENDING, JobStatus.CANCELED),
    ])
    def test_forward_moves_allowed(self, current, target):
        assert can_transition(current, target)

    @pytest.mark.unit
    @pytest.mark.parametrize("current,target", [
        (JobStatus.ACCEPTED, JobStatus.CANCELED),
        (JobStatus.PENDING, JobStatus.COMPLETED),
        (JobStatus.COMPLETED, JobStatus.ACCEPTED),
        (JobStatus.CANCELED, JobStatus.PENDING),
        (JobStatus.CANCELED, JobStatus.ACCEPTED),
    ])
    def test_other_moves_rejected(self, current, target):
        assert not can_transition(current, target)


class TestProfiles:

    @pytest.mark.unit
    def test_customer_defaults(self):
        customer = CustomerProfile(id="c-1", name=None, location="")

        assert customer.name == "Customer"
        assert customer.location == "Unknown"

    @pytest.mark.unit
    def test_new_worker_gets_specialty_skills(self):
        profile = build_worker_profile("abcdef123", WorkerProfileUpdate(specialty="Driver"))

        assert profile.name == "Worker abcdef"
        assert profile.specialty == "Driver"
        assert profile.skills == ["driving", "transport", "delivery", "airport runs"]
        assert profile.available is True

    @pytest.mark.unit
    def test_update_keeps_existing_skills_for_same_specialty(self, plumber):
        profile = build_worker_profile(
            plumber.id,
            WorkerProfileUpdate(specialty="Plumber", hourly_rate=80),
            plumber
        )

        assert profile.skills == plumber.skills
        assert profile.hourly_rate == 80
        assert profile.rating == plumber.rating

    @pytest.mark.unit
    def test_partial_update_keeps_specialty_and_skills(self, plumber):
        profile = build_worker_profile(plumber.id, WorkerProfileUpdate(bio="New bio"), plumber)

        assert profile.specialty == "Plumber"
        assert profile.skills == ["plumbing", "leak repair"]
        assert profile.bio == "New bio"

    @pytest.mark.unit
    def test_new_worker_without_specialty_is_general(self):
        profile = build_worker_profile("u2", WorkerProfileUpdate(name="Gil"))

        assert profile.specialty == "General"
        assert profile.skills == ["assembly", "mounting", "repair", "install"]

    @pytest.mark.unit
    def test_unknown_specialty_becomes_general(self):
        profile = build_worker_profile("u1", WorkerProfileUpdate(specialty="Juggler"))

        assert profile.specialty == "General"

    @pytest.mark.unit
    def test_earnings_summary(self):
        summary = earnings_summary(2)

        assert summary.week == 150
        assert summary.month == 600


class TestSettings:

    @pytest.mark.unit
    def test_recommendations_capped_at_three(self):
        with pytest.raises(ValidationError):
            Settings(secret_key="s", max_recommendations=5)

        assert Settings(secret_key="s", max_recommendations=2).max_recommendations == 2
