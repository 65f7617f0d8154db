"""Tests for running fine-grained accounting over a whole evaluation."""

import unittest

from accelgate.frontend.gating import ComputeGating
from accelgate.model.main import ComputeUnit, Evaluation, evaluate, evaluate_many
from accelgate.model.types import ComputeRecord
from accelgate.util.exceptions import EvaluationError, UnknownDataSpaceError

from .util import DATA_SPACES, make_evaluation


class TestEvaluate(unittest.TestCase):
    def test_levels_and_compute(self):
        result = evaluate(make_evaluation())
        dram = result.find_level("DRAM")
        for record in dram.data_movement:
            self.assertEqual(record.fine_grained_accesses["random_read"], 100)
            self.assertEqual(record.fine_grained_accesses["gated_read"], 0)

        buffer = result.find_level("Buffer")
        weights, inputs, outputs = buffer.data_movement
        self.assertEqual(weights.fine_grained_accesses["random_read"], 4)
        self.assertEqual(weights.fine_grained_accesses["gated_metadata_read"], 6)
        self.assertEqual(inputs.fine_grained_accesses["gated_read"], 0)
        self.assertEqual(outputs.fine_grained_accesses["random_fill"], 2)
        self.assertEqual(outputs.fine_grained_accesses["gated_fill"], 8)
        self.assertEqual(outputs.fine_grained_accesses["random_update"], 10)

        mac = result.compute_units[0].compute
        # 20 computes at density 0.2
        self.assertEqual(mac.fine_grained_accesses["random_compute"], 4)
        self.assertEqual(mac.fine_grained_accesses["gated_compute"], 16)

    def test_does_not_mutate_input(self):
        evaluation = make_evaluation()
        evaluate(evaluation)
        for level in evaluation.storage_levels:
            for record in level.data_movement:
                self.assertEqual(record.fine_grained_accesses, {})
        self.assertEqual(evaluation.compute_units[0].compute.fine_grained_accesses, {})

    def test_in_place(self):
        evaluation = make_evaluation()
        result = evaluate(evaluation, copy=False)
        self.assertIs(result, evaluation)
        self.assertIn("random_read", evaluation.storage_levels[0].data_movement[0].fine_grained_accesses)

    def test_deterministic(self):
        first = evaluate(make_evaluation())
        second = evaluate(make_evaluation())
        self.assertEqual(first, second)

    def test_compute_density_level(self):
        evaluation = make_evaluation()
        evaluation.storage_levels[0].data_movement[0].tile_density = 1.0
        evaluation.storage_levels[0].data_movement[1].tile_density = 1.0
        evaluation.compute_units[0].density_level = "DRAM"
        mac = evaluate(evaluation).compute_units[0].compute
        self.assertEqual(mac.fine_grained_accesses["random_compute"], 20)

    def test_unknown_density_level(self):
        evaluation = make_evaluation()
        evaluation.compute_units[0].density_level = "Reg"
        with self.assertRaises(EvaluationError) as cm:
            evaluate(evaluation)
        self.assertIn("MAC", str(cm.exception))

    def test_wrong_number_of_records(self):
        evaluation = make_evaluation()
        evaluation.storage_levels[1].data_movement.pop()
        with self.assertRaises(EvaluationError) as cm:
            evaluate(evaluation)
        self.assertIn("Buffer", str(cm.exception))

    def test_compute_without_levels(self):
        evaluation = Evaluation(
            data_spaces=DATA_SPACES,
            compute_units=[
                ComputeUnit(
                    "MAC",
                    ComputeRecord(replication_factor=1, accesses=3),
                    ComputeGating.from_names({"compute": ["Inputs"]}, DATA_SPACES),
                )
            ],
        )
        with self.assertRaises(UnknownDataSpaceError):
            evaluate(evaluation)


class TestEvaluateMany(unittest.TestCase):
    def test_matches_serial(self):
        evaluations = [make_evaluation(d, 0.4) for d in (1.0, 0.5, 0.25, 0.0)]
        serial = [evaluate(e) for e in evaluations]
        self.assertEqual(evaluate_many(evaluations, n_jobs=1), serial)
        self.assertEqual(evaluate_many(evaluations, n_jobs=2), serial)

    def test_does_not_mutate_inputs(self):
        evaluations = [make_evaluation(), make_evaluation(0.1, 0.9)]
        evaluate_many(evaluations, n_jobs=2)
        for evaluation in evaluations:
            for level in evaluation.storage_levels:
                for record in level.data_movement:
                    self.assertEqual(record.fine_grained_accesses, {})

    def test_empty(self):
        self.assertEqual(evaluate_many([]), [])


if __name__ == "__main__":
    unittest.main()
