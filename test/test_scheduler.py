import copy
from datetime import date, timedelta

import pytest

from scheduling.intervals import IntervalFormatError
from scheduling.ordering import order_tasks
from scheduling.scheduler import Scheduler, schedule, task_minutes
from scheduling.slot_finder import OPTIMAL

TOMORROW = date(2026, 10, 20)


def test_example_single_high_task_morning_slot(make_task):
    task = make_task("Report", priority="High", estimated_hours=2, energy_level="high", deadline=TOMORROW)

    out = schedule([task], {"Mon": ["08:00-12:00"]}, {})

    assert len(out) == 1
    a = out[0]
    assert (a.day, a.start_time, a.end_time) == ("Mon", 800, 1000)
    assert a.scheduled == "Mon 08:00-10:00"
    assert a.task == "Report"
    assert a.task_id == task.id
    assert a.priority == "High"
    assert a.energy_level == "high"
    assert a.deadline == TOMORROW
    assert a.duration == 2.0
    assert a.placement == "optimal"


def test_example_slot_too_short(make_task):
    task = make_task("Long", estimated_hours=3, energy_level="low")
    assert schedule([task], {"Mon": ["08:00-10:00"]}, {}) == []


def test_example_high_priority_takes_the_only_slot(make_task):
    high = make_task("Big", priority="High", estimated_hours=3, energy_level="high")
    low = make_task("Small", priority="Low", estimated_hours=2, energy_level="low")

    out = schedule([low, high], {"Mon": ["08:00-12:00"]}, {})

    assert [a.task for a in out] == ["Big"]
    assert (out[0].start_time, out[0].end_time) == (800, 1100)


def test_low_priority_task_moves_to_another_day(make_task):
    high = make_task("Big", priority="High", estimated_hours=3, energy_level="high")
    low = make_task("Small", priority="Low", estimated_hours=2, energy_level="low")

    out = schedule([low, high], {"Mon": ["08:00-12:00"], "Tue": ["09:00-11:00"]}, {})

    assert [(a.task, a.scheduled) for a in out] == [
        ("Big", "Mon 08:00-11:00"),
        ("Small", "Tue 09:00-11:00"),
    ]


def test_example_energy_fallback(make_task):
    task = make_task("Gym", estimated_hours=2, energy_level="high")

    out = schedule([task], {"Mon": ["13:00-15:00"]}, {})

    assert len(out) == 1
    assert out[0].scheduled == "Mon 13:00-15:00"
    assert out[0].placement == "fallback"


def test_optimal_pass_scans_every_day_before_fallback(make_task):
    task = make_task("Review", estimated_hours=2)  # medium energy by default

    out = schedule([task], {"Mon": ["08:00-12:00"], "Tue": ["13:00-17:00"]}, {})

    assert out[0].scheduled == "Tue 13:00-15:00"
    assert out[0].placement == "optimal"


def test_strict_only_scheduler_leaves_mismatched_tasks_out(make_task):
    task = make_task("Gym", estimated_hours=2, energy_level="high")
    assert Scheduler(passes=(OPTIMAL,)).schedule([task], {"Mon": ["13:00-15:00"]}) == []


def test_power_window_must_contain_placement(make_task):
    task = make_task("Code", estimated_hours=2, energy_level="low")

    out = schedule(
        [task],
        {"Mon": ["08:00-12:00", "13:00-16:00"]},
        {"Mon": ["12:30-18:00"]},
    )

    assert out[0].scheduled == "Mon 13:00-15:00"


def test_power_window_blocks_slot_start(make_task):
    # Placement always starts at the slot start, so a window opening later rules the slot out.
    task = make_task("Code", estimated_hours=2, energy_level="low")
    assert schedule([task], {"Mon": ["08:00-12:00"]}, {"Mon": ["09:00-17:00"]}) == []


def test_power_for_other_days_does_not_restrict(make_task):
    task = make_task("Code", estimated_hours=1, energy_level="low")
    out = schedule([task], {"Mon": ["08:00-12:00"]}, {"Tue": ["20:00-21:00"], "Mon": []})
    assert out[0].scheduled == "Mon 08:00-09:00"


def test_fractional_hours_use_real_minutes(make_task):
    a = make_task("A", priority="High", estimated_hours=1.5, energy_level="low")
    b = make_task("B", priority="Medium", estimated_hours=0.75, energy_level="low")
    c = make_task("C", priority="Low", estimated_hours=1.01, energy_level="low")

    out = schedule([a, b, c], {"Mon": ["08:00-10:00", "10:00-12:00", "13:00-15:00"]}, {})

    assert [a.scheduled for a in out] == [
        "Mon 08:00-09:30",
        "Mon 10:00-10:45",
        "Mon 10:45-11:45",
    ]
    assert out[1].end_time == 1045


def test_task_minutes_rounds_down():
    from planner_ai.models import Task

    assert task_minutes(Task(title="x", estimated_hours=1.01)) == 60
    assert task_minutes(Task(title="x", estimated_hours=0.001)) == 1


def test_remainder_reused_by_next_task(make_task):
    a = make_task("A", priority="High", estimated_hours=2, energy_level="low")
    b = make_task("B", priority="Medium", estimated_hours=2, energy_level="low")

    out = schedule([a, b], {"Mon": ["08:00-12:00"]}, {})

    assert [x.scheduled for x in out] == ["Mon 08:00-10:00", "Mon 10:00-12:00"]


def test_completed_tasks_are_skipped(make_task):
    done = make_task("Done", priority="High", completed=True, energy_level="low")
    todo = make_task("Todo", priority="Low", energy_level="low")

    out = schedule([done, todo], {"Mon": ["08:00-12:00"]}, {})

    assert [a.task for a in out] == ["Todo"]


def test_empty_inputs_return_empty_list(make_task):
    assert schedule([], {"Mon": ["08:00-12:00"]}, {}) == []
    assert schedule([make_task("A")], {}, {}) == []
    assert schedule([make_task("A")], None, None) == []


def test_malformed_availability_aborts_whole_run(make_task):
    tasks = [make_task("A", energy_level="low")]
    with pytest.raises(IntervalFormatError):
        schedule(tasks, {"Mon": ["08:00-12:00"], "Tue": ["nine-ten"]}, {})


def test_malformed_power_aborts_even_without_tasks():
    with pytest.raises(IntervalFormatError):
        schedule([], {"Mon": ["08:00-12:00"]}, {"Mon": ["25:00-26:00"]})


def test_ordering_priority_then_deadline_then_input_order(make_task):
    base = date(2026, 10, 20)
    tasks = [
        make_task("low", priority="Low", deadline=base),
        make_task("unknown", priority="Someday", deadline=base),
        make_task("med-late", priority="Medium", deadline=base + timedelta(days=3)),
        make_task("med-early", priority="Medium", deadline=base),
        make_task("high-a", priority="High", deadline=base + timedelta(days=1)),
        make_task("high-b", priority="High", deadline=base + timedelta(days=1)),
        make_task("high-undated", priority="High", deadline=None),
    ]

    ordered = [t.title for t in order_tasks(tasks)]

    assert ordered == ["high-a", "high-b", "high-undated", "med-early", "med-late", "low", "unknown"]


def _week():
    return {
        "Mon": ["08:00-12:00", "13:00-17:00", "18:00-21:00"],
        "Tue": ["09:00-10:30", "12:00-18:00"],
        "Wed": ["07:00-09:00", "19:00-23:00"],
    }


def _power():
    return {"Mon": ["06:00-16:00", "18:00-22:00"], "Wed": ["07:00-23:00"]}


def _mixed_tasks(make_task):
    levels = ["high", "medium", "low", None, "weird"]
    priorities = ["High", "Medium", "Low", None]
    return [
        make_task(
            f"task-{i}",
            priority=priorities[i % len(priorities)],
            energy_level=levels[i % len(levels)],
            estimated_hours=[0.5, 1, 1.25, 2, 3][i % 5],
            deadline=date(2026, 10, 20) + timedelta(days=i % 4),
        )
        for i in range(14)
    ]


def test_no_overlap_and_power_containment(make_task):
    out = schedule(_mixed_tasks(make_task), _week(), _power())
    assert out

    by_day = {}
    for a in out:
        by_day.setdefault(a.day, []).append((a.start_time, a.end_time))

    for day, ranges in by_day.items():
        ranges.sort()
        for (s1, e1), (s2, e2) in zip(ranges, ranges[1:]):
            assert e1 <= s2, f"overlap on {day}"

    power = _power()
    for a in out:
        if power.get(a.day):
            windows = [
                tuple(int(p.replace(":", "")) for p in w.split("-")) for w in power[a.day]
            ]
            assert any(ws <= a.start_time and a.end_time <= we for ws, we in windows)


def test_output_respects_task_order(make_task):
    tasks = _mixed_tasks(make_task)
    out = schedule(tasks, _week(), _power())

    rank = {t.title: i for i, t in enumerate(order_tasks(tasks))}
    positions = [rank[a.task] for a in out]
    assert positions == sorted(positions)


def test_inputs_are_not_mutated(make_task):
    tasks = _mixed_tasks(make_task)
    before_tasks = [t.model_dump() for t in tasks]
    availability, power = _week(), _power()
    before_av, before_pw = copy.deepcopy(availability), copy.deepcopy(power)

    schedule(tasks, availability, power)

    assert [t.model_dump() for t in tasks] == before_tasks
    assert availability == before_av
    assert power == before_pw


def test_identical_inputs_give_identical_output(make_task):
    tasks = _mixed_tasks(make_task)
    first = [a.model_dump() for a in schedule(tasks, _week(), _power())]
    second = [a.model_dump() for a in schedule(tasks, _week(), _power())]
    assert first == second


def test_huge_effort_is_left_unplaced_without_breaking_the_run(make_task):
    huge = make_task("Forever", priority="High", estimated_hours=1e308, energy_level="low")
    small = make_task("Small", priority="Low", estimated_hours=1, energy_level="low")

    out = schedule([huge, small], {"Mon": ["08:00-12:00"]}, {})

    assert [a.task for a in out] == ["Small"]


def test_task_minutes_caps_multi_day_effort():
    from planner_ai.models import Task

    assert task_minutes(Task(title="x", estimated_hours=1e308)) == 24 * 60 + 1
    assert task_minutes(Task(title="x", estimated_hours=30)) == 24 * 60 + 1
