import random
import re
import unittest
from datetime import datetime, timezone

import pytz

from fitstreak.services import plan_service
from fitstreak.services.plan_service import (
    ALTERNATIVE_EXERCISES,
    DAY_KEYS,
    PlanNotFoundError,
    PlanValidationError,
    RestDayError,
)


def _utc_today():
    return datetime.now(timezone.utc).date().isoformat()


class TestWeekPlan(unittest.TestCase):

    def test_week_plan_has_every_day_once(self):
        plan = plan_service.get_week_plan()
        self.assertEqual(len(plan), 7)
        for day in DAY_KEYS:
            self.assertEqual(list(plan.keys()).count(day), 1)

    def test_sunday_is_rest_day(self):
        plan = plan_service.get_week_plan()
        self.assertIsNone(plan["sun"])
        self.assertEqual([d for d, w in plan.items() if w is None], ["sun"])

    def test_week_plan_is_a_copy(self):
        plan = plan_service.get_week_plan()
        plan["mon"].exercises.clear()
        plan["mon"].title = "changed"
        fresh = plan_service.get_week_plan()
        self.assertEqual(fresh["mon"].title, "push day")
        self.assertEqual(len(fresh["mon"].exercises), 4)

    def test_serialized_plan_drops_unset_fields(self):
        data = plan_service.serialize_week_plan(plan_service.get_week_plan())
        self.assertIsNone(data["sun"])
        jumping_jacks = data["tue"]["exercises"][0]
        self.assertEqual(jumping_jacks, {"name": "jumping jacks", "duration": "2 min", "equipment": "bodyweight"})
        self.assertTrue(data["tue"]["completed"])


class TestDayPlan(unittest.TestCase):

    def test_monday_is_push_day(self):
        workout = plan_service.get_day_plan("mon", "2024-06-03")
        self.assertEqual(workout.title, "push day")
        self.assertEqual(len(workout.exercises), 4)
        self.assertEqual(workout.exercises[0].name, "push-ups")
        self.assertFalse(workout.completed)

    def test_sunday_is_not_found(self):
        with self.assertRaises(PlanNotFoundError) as ctx:
            plan_service.get_day_plan("sun", "2024-06-02")
        self.assertIsInstance(ctx.exception, RestDayError)
        self.assertEqual(str(ctx.exception), "rest day - no workout planned")
        self.assertEqual(ctx.exception.day, "sun")

    def test_supplied_date_is_returned_unchanged(self):
        for day in DAY_KEYS:
            if day == "sun":
                continue
            self.assertEqual(plan_service.get_day_plan(day, "not-really-a-date").date, "not-really-a-date")

    def test_missing_date_defaults_to_today(self):
        before = _utc_today()
        workout = plan_service.get_day_plan("thu")
        after = _utc_today()
        self.assertRegex(workout.date, r"^\d{4}-\d{2}-\d{2}$")
        self.assertIn(workout.date, {before, after})
        self.assertEqual(len(workout.exercises), 3)

    def test_missing_date_uses_requested_timezone(self):
        zone = pytz.timezone("Pacific/Kiritimati")
        before = datetime.now(zone).date().isoformat()
        workout = plan_service.get_day_plan("mon", tz_name="Pacific/Kiritimati")
        after = datetime.now(zone).date().isoformat()
        self.assertIn(workout.date, {before, after})

    def test_unknown_timezone_falls_back_to_utc(self):
        before = _utc_today()
        workout = plan_service.get_day_plan("mon", tz_name="Nowhere/Special")
        self.assertIn(workout.date, {before, _utc_today()})

    def test_unknown_day_is_rejected(self):
        with self.assertRaises(PlanValidationError):
            plan_service.get_day_plan("someday", "2024-06-03")


class TestRegenerate(unittest.TestCase):

    def _category_of(self, workout):
        match = re.match(r"^(\w+) day \(regenerated\)$", workout.title)
        self.assertIsNotNone(match)
        return match.group(1)

    def test_shape_across_repeated_calls(self):
        for _ in range(50):
            workout = plan_service.regenerate("2024-06-01")
            self.assertTrue(workout.title.endswith("day (regenerated)"))
            self.assertIn(len(workout.exercises), (3, 4))
            self.assertFalse(workout.completed)
            self.assertEqual(workout.date, "2024-06-01")

    def test_exercises_come_from_a_single_category(self):
        rng = random.Random(7)
        for _ in range(50):
            workout = plan_service.regenerate("2024-06-01", rng=rng)
            category = self._category_of(workout)
            allowed = {e["name"] for e in ALTERNATIVE_EXERCISES[category]}
            names = [e.name for e in workout.exercises]
            self.assertTrue(set(names) <= allowed)
            self.assertEqual(len(names), len(set(names)))

    def test_every_category_and_length_is_reachable(self):
        rng = random.Random(11)
        categories, lengths = set(), set()
        for _ in range(200):
            workout = plan_service.regenerate("2024-06-01", rng=rng)
            categories.add(self._category_of(workout))
            lengths.add(len(workout.exercises))
        self.assertEqual(categories, {"push", "pull", "legs", "cardio"})
        self.assertEqual(lengths, {3, 4})

    def test_seeded_rng_is_reproducible(self):
        first = plan_service.regenerate("2024-06-01", rng=random.Random(42))
        second = plan_service.regenerate("2024-06-01", rng=random.Random(42))
        self.assertEqual(first, second)

    def test_missing_date_is_a_validation_error(self):
        for value in ("", None):
            with self.assertRaises(PlanValidationError) as ctx:
                plan_service.regenerate(value)
            self.assertEqual(str(ctx.exception), "date is required")

    def test_non_string_date_is_a_validation_error(self):
        with self.assertRaises(PlanValidationError) as ctx:
            plan_service.regenerate(123)
        self.assertEqual(str(ctx.exception), "date must be a string")

    def test_catalog_is_not_mutated(self):
        before = [dict(e) for e in ALTERNATIVE_EXERCISES["push"]]
        rng = random.Random(3)
        for _ in range(20):
            plan_service.regenerate("2024-06-01", rng=rng)
        self.assertEqual(ALTERNATIVE_EXERCISES["push"], before)


if __name__ == '__main__':
    unittest.main()
