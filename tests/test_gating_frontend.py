"""Tests for data-space registry and gating specification construction."""

import unittest

from pydantic import ValidationError

from accelgate.frontend.gating import (
    ComputeGating,
    DataSpaceGating,
    FullyGated,
    GatedAction,
    GatedOn,
    LevelGating,
    gate_from_names,
)
from accelgate.frontend.workload import DataSpaces
from accelgate.util.exceptions import EvaluationError, UnknownDataSpaceError

DATA_SPACES = DataSpaces(names=("Weights", "Inputs", "Outputs"))


class TestDataSpaces(unittest.TestCase):
    def test_ids_follow_order(self):
        self.assertEqual(DATA_SPACES.num_data_spaces, 3)
        self.assertEqual(DATA_SPACES.name_to_id("Weights"), 0)
        self.assertEqual(DATA_SPACES.name_to_id("Outputs"), 2)
        self.assertEqual(DATA_SPACES.id_to_name(1), "Inputs")
        self.assertEqual(list(DATA_SPACES.ids()), [0, 1, 2])

    def test_unknown_name(self):
        with self.assertRaises(LookupError):
            DATA_SPACES.name_to_id("Psums")

    def test_unknown_id(self):
        with self.assertRaises(UnknownDataSpaceError):
            DATA_SPACES.id_to_name(3)

    def test_duplicate_names_rejected(self):
        with self.assertRaises(ValidationError):
            DataSpaces(names=("A", "A"))

    def test_contains(self):
        self.assertIn("Inputs", DATA_SPACES)
        self.assertNotIn("Psums", DATA_SPACES)


class TestGateFromNames(unittest.TestCase):
    def test_all_is_fully_gated(self):
        self.assertIsInstance(gate_from_names(["all"], DATA_SPACES), FullyGated)

    def test_names_resolved_in_order(self):
        gate = gate_from_names(["Outputs", "Weights"], DATA_SPACES)
        self.assertIsInstance(gate, GatedOn)
        self.assertEqual(gate.data_space_ids, (2, 0))

    def test_unknown_name(self):
        with self.assertRaises(UnknownDataSpaceError):
            gate_from_names(["Psums"], DATA_SPACES)


class TestDataSpaceGating(unittest.TestCase):
    def test_from_names(self):
        gating = DataSpaceGating.from_names(
            {"read": ["Inputs"], "metadata_write": ["all"]}, DATA_SPACES
        )
        self.assertIn(GatedAction.READ, gating)
        self.assertNotIn(GatedAction.WRITE, gating)
        self.assertEqual(gating.get(GatedAction.READ), GatedOn(data_space_ids=(1,)))
        self.assertEqual(gating.get(GatedAction.METADATA_WRITE), FullyGated())
        self.assertIsNone(gating.get(GatedAction.WRITE))

    def test_string_actions_accepted(self):
        gating = DataSpaceGating(actions={"read": {"kind": "fully_gated"}})
        self.assertEqual(gating.get("read"), FullyGated())

    def test_unknown_action(self):
        with self.assertRaises(EvaluationError):
            DataSpaceGating.from_names({"skip": ["Inputs"]}, DATA_SPACES)

    def test_compute_not_allowed_at_storage(self):
        with self.assertRaises(ValidationError):
            DataSpaceGating.from_names({"compute": ["Inputs"]}, DATA_SPACES)

    def test_storage_action_not_allowed_at_compute(self):
        with self.assertRaises(ValidationError):
            ComputeGating.from_names({"read": ["Inputs"]}, DATA_SPACES)

    def test_error_names_action(self):
        with self.assertRaises(UnknownDataSpaceError) as cm:
            DataSpaceGating.from_names({"write": ["Psums"]}, DATA_SPACES)
        self.assertIn("write", str(cm.exception))


class TestLevelGating(unittest.TestCase):
    def test_from_names(self):
        gating = LevelGating.from_names(
            {"Weights": {"read": ["Inputs"]}, "Outputs": {"write": ["all"]}}, DATA_SPACES
        )
        self.assertIn(0, gating)
        self.assertNotIn(1, gating)
        self.assertIsNone(gating.get(1))
        self.assertEqual(gating.get(2).get(GatedAction.WRITE), FullyGated())

    def test_unknown_tensor(self):
        with self.assertRaises(UnknownDataSpaceError) as cm:
            LevelGating.from_names({"Psums": {"read": ["Inputs"]}}, DATA_SPACES)
        self.assertIn("Psums", str(cm.exception))

    def test_error_path(self):
        with self.assertRaises(UnknownDataSpaceError) as cm:
            LevelGating.from_names({"Weights": {"read": ["Psums"]}}, DATA_SPACES)
        self.assertIn("Weights.read", str(cm.exception))


if __name__ == "__main__":
    unittest.main()
