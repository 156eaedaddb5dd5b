import unittest
from datetime import date, datetime, time, timedelta

from schedule import service
from shift.schemas import ShiftCreate
from shifttype.schemas import ShiftTypeCreate
from teammember.schemas import TeamMemberCreate
from storage.base import PLACEHOLDER_ID
from storage.memory import MemStorage

WEDNESDAY = date(2025, 10, 15)
SUNDAY = date(2025, 10, 12)
SATURDAY = date(2025, 10, 18)


class WeekBoundsTests(unittest.TestCase):

    def test_week_start_for_every_day_of_a_week(self):
        for offset in range(7):
            day = SUNDAY + timedelta(days=offset)
            self.assertEqual(service.week_start(day), SUNDAY, day)

    def test_week_start_of_sunday_is_itself(self):
        self.assertEqual(service.week_start(SUNDAY), SUNDAY)

    def test_week_start_crosses_month_and_year(self):
        self.assertEqual(service.week_start(date(2025, 10, 1)), date(2025, 9, 28))
        self.assertEqual(service.week_start(date(2026, 1, 1)), date(2025, 12, 28))

    def test_week_bounds_ignore_time_of_day(self):
        start, end = service.week_bounds(datetime(2025, 10, 15, 23, 30))
        self.assertEqual(start, datetime(2025, 10, 12, 0, 0, 0))
        self.assertEqual(end, datetime(2025, 10, 18, 23, 59, 59, 999000))

    def test_same_week_same_bounds(self):
        self.assertEqual(service.week_bounds(SUNDAY), service.week_bounds(SATURDAY))
        self.assertNotEqual(service.week_bounds(SATURDAY), service.week_bounds(SATURDAY + timedelta(days=1)))


class BuildWeekScheduleTests(unittest.TestCase):
    def setUp(self):
        self.storage = MemStorage()
        self.morning = self.storage.create_shift_type(
            ShiftTypeCreate(name="Morning", start_time=time(6), end_time=time(14))
        )
        self.member = self.storage.create_team_member(
            TeamMemberCreate(name="A", position="Analyst", email="a@vilcomnetworks.com")
        )

    def test_empty_week_still_has_seven_days(self):
        week = service.build_week_schedule(self.storage, WEDNESDAY)
        self.assertEqual(len(week.days), 7)
        self.assertEqual(week.days[0].date, SUNDAY)
        self.assertEqual(week.days[6].date, SATURDAY)
        self.assertTrue(all(day.shifts == [] for day in week.days))
        self.assertEqual(
            [d.date for d in week.days],
            [SUNDAY + timedelta(days=i) for i in range(7)],
        )

    def test_unassigned_wednesday_shift_lands_in_wednesday_bucket(self):
        shift = self.storage.create_shift(
            ShiftCreate(date=WEDNESDAY, team_member_id=None, shift_type_id=self.morning.id, needs_coverage=True)
        )
        week = service.build_week_schedule(self.storage, WEDNESDAY)

        wednesday = week.days[3]
        self.assertEqual(wednesday.date, WEDNESDAY)
        self.assertEqual([s.id for s in wednesday.shifts], [shift.id])
        got = wednesday.shifts[0]
        self.assertTrue(got.needs_coverage)
        self.assertEqual(got.team_member.id, PLACEHOLDER_ID)
        self.assertEqual(got.team_member.name, "Unassigned")
        self.assertEqual(got.shift_type.id, self.morning.id)
        self.assertEqual(sum(len(d.shifts) for d in week.days), 1)

    def test_shifts_outside_week_are_left_out(self):
        self.storage.create_shift(ShiftCreate(date=SUNDAY - timedelta(days=1), shift_type_id=self.morning.id))
        self.storage.create_shift(ShiftCreate(date=SATURDAY + timedelta(days=1), shift_type_id=self.morning.id))
        inside = self.storage.create_shift(
            ShiftCreate(date=SATURDAY, team_member_id=self.member.id, shift_type_id=self.morning.id)
        )

        week = service.build_week_schedule(self.storage, WEDNESDAY)
        self.assertEqual([s.id for d in week.days for s in d.shifts], [inside.id])
        self.assertEqual(week.days[6].shifts[0].team_member.name, "A")

    def test_repeated_calls_are_identical(self):
        self.storage.create_shift(ShiftCreate(date=WEDNESDAY, team_member_id=self.member.id, shift_type_id=self.morning.id))
        first = service.build_week_schedule(self.storage, WEDNESDAY)
        second = service.build_week_schedule(self.storage, datetime(2025, 10, 17, 8, 0))
        self.assertEqual(first, second)


if __name__ == "__main__":
    unittest.main()
