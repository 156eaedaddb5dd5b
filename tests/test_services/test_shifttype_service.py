import unittest
from datetime import time

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from core.database import Base
from shifttype.models import ShiftType, DEFAULT_SHIFT_COLOR
from shifttype import service
from shifttype.schemas import ShiftTypeCreate, ShiftTypeUpdate
import models_bootstrap


class ShiftTypeServiceTests(unittest.TestCase):
    def setUp(self):
        self.engine = create_engine("sqlite:///:memory:", future=True)
        Base.metadata.create_all(self.engine)

        Session = sessionmaker(bind=self.engine, future=True)
        self.db = Session()

        night = ShiftType(name="Night Shift", start_time=time(22), end_time=time(6), color="#6366F1")
        self.db.add(night)
        self.db.commit()
        self.db.refresh(night)
        self.night_id = night.id

    def tearDown(self):
        self.db.close()
        self.engine.dispose()

    def test_overnight_times_round_trip(self):
        got = service.get_shift_type(self.db, self.night_id)
        self.assertEqual(got.start_time, time(22, 0))
        self.assertEqual(got.end_time, time(6, 0))

    def test_create_shift_type_uses_default_color(self):
        created = service.create_shift_type(
            self.db, ShiftTypeCreate(name="Morning", start_time="06:00:00", end_time="14:00:00")
        )
        self.assertEqual(created.color, DEFAULT_SHIFT_COLOR)
        self.assertIsNone(created.description)
        self.assertEqual([t.id for t in service.get_shift_types(self.db)], [self.night_id, created.id])

    def test_update_shift_type_partial(self):
        updated = service.update_shift_type(self.db, self.night_id, ShiftTypeUpdate(description="Overnight"))
        self.assertEqual(updated.description, "Overnight")
        self.assertEqual(updated.name, "Night Shift")
        self.assertEqual(updated.color, "#6366F1")

    def test_update_missing_shift_type_returns_none(self):
        self.assertIsNone(service.update_shift_type(self.db, 4242, ShiftTypeUpdate(name="x")))

    def test_delete_shift_type(self):
        self.assertTrue(service.delete_shift_type(self.db, self.night_id))
        self.assertFalse(service.delete_shift_type(self.db, self.night_id))


if __name__ == "__main__":
    unittest.main()
