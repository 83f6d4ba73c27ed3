"""Tests for checklist assembly and time-period bucketing."""

from datetime import date

import pytest

from clubhouse.core.categories import TaskCategory
from clubhouse.core.checklist import (
    DayChecklist,
    TimeBuckets,
    assemble_checklist,
    bucket_by_period,
    completion_progress,
    format_checklist_sections,
    format_task_line,
    tasks_per_day,
)
from clubhouse.core.games import DayClassification, build_series
from clubhouse.core.tasks import (
    GAME_DAYS_ONLY,
    OFF_DAYS_ONLY,
    RecurringTag,
    RecurringTaskDef,
    ScheduledTask,
    TaskInstance,
    TaskKey,
)


@pytest.fixture
def game_day():
    return date(2026, 2, 10)


@pytest.fixture
def off_day():
    return date(2026, 2, 13)


@pytest.fixture
def make_instance(game_day):
    """Factory for task instances at a given time."""
    def _make(task_id: str, time: str, completed: bool = False) -> TaskInstance:
        return TaskInstance(
            key=TaskKey.scheduled(task_id, game_day),
            title=f"Task {task_id}",
            time=time,
            completed=completed,
        )
    return _make


@pytest.fixture
def series(game_day):
    return [build_series("Ducks", "Hawks", game_day, times=["6:35 PM", "7:05 PM", None])]


@pytest.fixture
def recurring():
    return [
        RecurringTaskDef(id="g1", title="Stock dugout", tag=RecurringTag.GAME_DAY, time="2:00 PM"),
        RecurringTaskDef(id="g2", title="Post-game laundry", tag=RecurringTag.GAME_DAY, time="10:30 PM"),
        RecurringTaskDef(id="o1", title="Inventory count", tag=RecurringTag.OFF_DAY, time="10:00 AM"),
    ]


@pytest.fixture
def scheduled(game_day, off_day):
    return [
        ScheduledTask(id="1", title="Meet delivery", date=game_day, time="08:00"),
        ScheduledTask(id="2", title="Game-only prep", date=game_day, time="17:00", task_type=GAME_DAYS_ONLY),
        ScheduledTask(id="3", title="Off-only errand", date=game_day, time="11:00", task_type=OFF_DAYS_ONLY),
        ScheduledTask(id="4", title="Repaint lockers", date=off_day, time="13:00", completed=True),
    ]


class TestBucketByPeriod:
    def test_default_cutoff_is_seven_pm(self, make_instance):
        late = make_instance("late", "20:00")
        early = make_instance("early", "08:00")
        buckets = bucket_by_period([late, early], game_time=None)
        assert buckets.postgame == [late]
        assert buckets.morning == [early]
        assert buckets.pregame == []

    def test_default_cutoff_boundary(self, make_instance):
        at_cutoff = make_instance("a", "19:00")
        before = make_instance("b", "18:59")
        buckets = bucket_by_period([at_cutoff, before], game_time=None)
        assert buckets.pregame == [before]
        assert buckets.postgame == [at_cutoff]

    def test_noon_is_pregame(self, make_instance):
        noon = make_instance("n", "12:00")
        before_noon = make_instance("m", "11:59")
        buckets = bucket_by_period([noon, before_noon], game_time="19:05")
        assert buckets.morning == [before_noon]
        assert buckets.pregame == [noon]

    def test_uses_game_time(self, make_instance):
        task = make_instance("t", "18:30")
        assert bucket_by_period([task], game_time="18:05").postgame == [task]
        assert bucket_by_period([task], game_time="7:05 PM").pregame == [task]

    def test_partition_is_complete(self, make_instance):
        tasks = [make_instance(str(i), t) for i, t in enumerate(
            ["00:00", "06:15", "11:59", "12:00", "15:45", "18:59", "19:05", "23:59"]
        )]
        buckets = bucket_by_period(tasks, game_time="19:05")
        seen = [t.id for t in buckets.morning + buckets.pregame + buckets.postgame]
        assert sorted(seen) == sorted(t.id for t in tasks)
        assert len(seen) == len(set(seen))
        assert len(buckets) == len(tasks)

    def test_buckets_sorted(self, make_instance):
        tasks = [make_instance(str(i), t) for i, t in enumerate(
            ["10:00", "08:00", "16:00", "13:00", "23:00", "20:00"]
        )]
        buckets = bucket_by_period(tasks, game_time=None)
        for bucket in (buckets.morning, buckets.pregame, buckets.postgame):
            minutes = [t.minutes for t in bucket]
            assert minutes == sorted(minutes)

    def test_off_day_gets_empty_buckets(self, make_instance):
        buckets = bucket_by_period([make_instance("a", "08:00")], game_time="19:00", game_day=False)
        assert buckets == TimeBuckets()

    def test_cutoff_before_noon_leaves_pregame_empty(self, make_instance):
        tasks = [make_instance("a", "10:00"), make_instance("b", "12:00"), make_instance("c", "15:00")]
        buckets = bucket_by_period(tasks, game_time="11:00")
        assert buckets.pregame == []
        assert [t.id for t in buckets.morning] == ["a"]
        assert [t.id for t in buckets.postgame] == ["b", "c"]

    def test_empty(self):
        assert bucket_by_period([], game_time=None) == TimeBuckets()


class TestCompletionProgress:
    def test_counts(self, make_instance):
        tasks = [make_instance("a", "08:00", True), make_instance("b", "09:00"), make_instance("c", "10:00"), make_instance("d", "11:00", True)]
        assert completion_progress(tasks) == (2, 4, 50.0)

    def test_empty_is_zero(self):
        assert completion_progress([]) == (0, 0, 0.0)


class TestAssembleChecklist:
    def test_game_day(self, scheduled, recurring, series, game_day):
        data = assemble_checklist(scheduled, recurring, series, "Ducks", {}, as_of=game_day)

        assert data.classification is DayClassification.HOME
        assert data.is_game_day is True
        assert data.game_time == "18:35"
        assert [t.id for t in data.scheduled] == ["1", "2"]
        assert [t.id for t in data.recurring] == ["recurring-g1-2026-02-10", "recurring-g2-2026-02-10"]
        assert [t.time for t in data.tasks] == ["08:00", "14:00", "17:00", "22:30"]
        assert [t.id for t in data.buckets.morning] == ["1"]
        assert [t.id for t in data.buckets.pregame] == ["recurring-g1-2026-02-10", "2"]
        assert [t.id for t in data.buckets.postgame] == ["recurring-g2-2026-02-10"]

    def test_game_day_without_time_uses_default(self, scheduled, recurring, series):
        data = assemble_checklist(scheduled, recurring, series, "Ducks", as_of=date(2026, 2, 12))
        assert data.game_time is None
        assert data.is_game_day is True
        assert [t.id for t in data.buckets.postgame] == ["recurring-g2-2026-02-12"]

    def test_configured_default_game_time(self, recurring, series):
        data = assemble_checklist(
            [], recurring, series, "Ducks", as_of=date(2026, 2, 12), default_game_time="13:00"
        )
        assert [t.id for t in data.buckets.postgame] == [
            "recurring-g1-2026-02-12",
            "recurring-g2-2026-02-12",
        ]

    def test_off_day(self, scheduled, recurring, series, off_day):
        data = assemble_checklist(scheduled, recurring, series, "Ducks", {}, as_of=off_day)

        assert data.classification is DayClassification.NONE
        assert data.game_time is None
        assert [t.id for t in data.tasks] == ["recurring-o1-2026-02-13", "4"]
        assert data.buckets == TimeBuckets()
        assert data.completed_count == 1
        assert data.percent_complete == 50.0

    def test_no_team_means_off_day(self, scheduled, recurring, series, game_day):
        data = assemble_checklist(scheduled, recurring, series, None, as_of=game_day)
        assert data.is_game_day is False
        assert [t.id for t in data.tasks] == ["1", "recurring-o1-2026-02-10", "3"]

    def test_applies_completions(self, recurring, series, game_day):
        completions = {"2026-02-10": {"g1": True}}
        data = assemble_checklist([], recurring, series, "Ducks", completions, as_of=game_day)
        assert [t.completed for t in data.recurring] == [True, False]

    def test_both_day_lists_tasks_once(self, recurring, series, game_day):
        clash = build_series("Owls", "Ducks", game_day, times=["1:05 PM"], series_id="clash")
        data = assemble_checklist([], recurring, series + [clash], "Ducks", as_of=game_day)

        assert data.classification is DayClassification.BOTH
        assert data.game_time == "13:05"
        assert [t.key.task_id for t in data.tasks] == ["g1", "g2"]
        assert [t.id for t in data.buckets.postgame] == [
            "recurring-g1-2026-02-10",
            "recurring-g2-2026-02-10",
        ]


class TestTasksPerDay:
    def test_counts_game_and_off_days(self, scheduled, recurring, series):
        counts = tasks_per_day(
            scheduled, recurring, series, "Ducks", date(2026, 2, 10), date(2026, 2, 13)
        )
        assert counts == {
            date(2026, 2, 10): 4,
            date(2026, 2, 11): 2,
            date(2026, 2, 12): 2,
            date(2026, 2, 13): 2,
        }

    def test_omits_empty_days(self, scheduled, series):
        counts = tasks_per_day(scheduled, [], series, "Ducks", date(2026, 2, 10), date(2026, 2, 14))
        assert counts == {date(2026, 2, 10): 2, date(2026, 2, 13): 1}


class TestFormatting:
    def test_task_line(self, game_day):
        task = TaskInstance(
            key=TaskKey.recurring("g1", game_day),
            title="Stock dugout",
            time="14:00",
            category=TaskCategory.MAINTENANCE,
            completed=True,
        )
        line = format_task_line(task)
        assert line.startswith("- [x]")
        assert "2:00 PM" in line
        assert "Stock dugout" in line
        assert "Maintenance & Supplies" in line
        assert "(recurring)" in line

    def test_game_day_sections(self, scheduled, recurring, series, game_day):
        data = assemble_checklist(scheduled, recurring, series, "Ducks", as_of=game_day)
        sections = format_checklist_sections(data)

        assert "Home game day" in sections["header"]
        assert "6:35 PM" in sections["header"]
        assert sections["progress"] == "0 / 4 complete (0%)"
        assert "Meet delivery" in sections["morning"]
        assert "Post-game laundry" in sections["postgame"]
        assert "tasks" not in sections

    def test_off_day_sections(self, off_day):
        data = DayChecklist(
            date=off_day,
            classification=DayClassification.NONE,
            game_time=None,
            scheduled=[],
            recurring=[],
            tasks=[],
            buckets=TimeBuckets(),
        )
        sections = format_checklist_sections(data)
        assert sections["header"] == "Friday, February 13 - Off day"
        assert sections["tasks"] == "None"
        assert "morning" not in sections
