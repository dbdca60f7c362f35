from datetime import timedelta

import pytest

from readiness import init_progress, record_progress_event, score_skill_gap
from readiness.progress import ProgressEventType


@pytest.fixture
def baseline(user_skill, frontend_role):
    return score_skill_gap([user_skill("js", "beginner")], frontend_role)


@pytest.fixture
def improved(user_skill, frontend_role):
    return score_skill_gap([user_skill("js", "advanced"), user_skill("css", "beginner")], frontend_role)


class TestInitProgress:
    def test_baseline_fields(self, baseline, fixed_now):
        progress = init_progress(baseline, fixed_now)

        assert progress.role_id == "frontend-dev"
        assert progress.initial_score == progress.current_score == 0
        assert progress.initial_matched_skills == progress.current_matched_skills == 0
        assert progress.score_improvement == 0
        assert progress.completed_roadmap_items == 0
        assert progress.progress_history == []
        assert progress.created_at == fixed_now


class TestRecordProgressEvent:
    def test_updates_current_values(self, baseline, improved, fixed_now):
        progress = init_progress(baseline, fixed_now)
        later = fixed_now + timedelta(hours=1)

        updated = record_progress_event(progress, improved, "roadmap_completion", "css", later)

        assert updated.current_score == 100
        assert updated.score_improvement == 100
        assert updated.current_matched_skills == 2
        assert updated.skills_improvement == 2
        assert updated.completed_roadmap_items == 1
        assert updated.last_updated == later

        entry = updated.progress_history[-1]
        assert entry.readiness_score == 100
        assert entry.completed_skills == 2
        assert entry.event == "roadmap_completion"
        assert entry.skill_id == "css"
        assert entry.timestamp == later

    def test_baseline_is_never_changed(self, baseline, improved, fixed_now):
        progress = init_progress(baseline, fixed_now)
        updated = record_progress_event(progress, improved, ProgressEventType.ROADMAP_COMPLETION, "css")

        assert updated.initial_score == 0
        assert updated.initial_matched_skills == 0
        assert progress.progress_history == []
        assert progress.current_score == 0

    def test_other_events_do_not_count_as_completions(self, baseline, improved, fixed_now):
        progress = init_progress(baseline, fixed_now)
        updated = record_progress_event(progress, improved, ProgressEventType.SKILL_ADDED, "css")

        assert updated.completed_roadmap_items == 0
        assert updated.progress_history[-1].event == "skill_added"

    def test_identical_events_are_both_recorded(self, baseline, improved, fixed_now):
        progress = init_progress(baseline, fixed_now)

        once = record_progress_event(progress, improved, "roadmap_completion", "css", fixed_now)
        twice = record_progress_event(once, improved, "roadmap_completion", "css", fixed_now)

        assert len(twice.progress_history) == 2
        assert twice.progress_history[0] == twice.progress_history[1]
        assert twice.completed_roadmap_items == 2

    def test_history_keeps_order(self, baseline, improved, fixed_now):
        progress = init_progress(baseline, fixed_now)
        progress = record_progress_event(progress, improved, "roadmap_completion", "css")
        progress = record_progress_event(progress, baseline, "skill_removed", "css")

        assert [e.event for e in progress.progress_history] == ["roadmap_completion", "skill_removed"]
        assert progress.current_score == 0
        assert progress.score_improvement == 0

    def test_rejects_analysis_of_another_role(self, baseline, user_skill, make_role, fixed_now):
        progress = init_progress(baseline, fixed_now)
        other = score_skill_gap([user_skill("go", "advanced")], make_role(("go", "beginner"), role_id="backend"))

        with pytest.raises(ValueError):
            record_progress_event(progress, other, "roadmap_completion")
