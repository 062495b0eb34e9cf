'''
Tests for switching the network between annotated and inferred states.
'''

import pytest

from marginmln.mln.annotation import AnnotationDB
from marginmln.mln.constants import TRUE, UNKNOWN
from marginmln.mln.errors import AnnotationError, InferenceError, SweepError
from marginmln.mln.learning.context import LearningContext
from marginmln.mln.learning.state import StateController


def states(network):
    return dict((idx, atom.state) for idx, atom in network.atoms.items())


class TestStateController:

    def test_annotated_state_has_no_error(self, hard_network, hard_annotation):
        controller = StateController(LearningContext(hard_network, hard_annotation))
        controller.set_annotated_state()
        assert states(hard_network) == {1: True, 2: True, 3: True}
        assert controller.calculate_error() == 0

    def test_hamming_error(self, unit_network, mixed_annotation):
        controller = StateController(LearningContext(unit_network, mixed_annotation))
        controller.apply_assignment({1: False, 2: True})
        assert controller.calculate_error() == 2
        controller.apply_assignment({1: True, 2: True})
        assert controller.calculate_error() == 1

    def test_unknown_atoms(self, unit_network):
        annotation = AnnotationDB({'Q/1': {1: UNKNOWN, 2: TRUE}})
        controller = StateController(LearningContext(unit_network, annotation))
        controller.set_annotated_state()
        assert states(unit_network) == {1: False, 2: True}
        controller.apply_assignment({1: True, 2: True})
        assert controller.calculate_error() == 0

    def test_incomplete_assignment_writes_nothing(self, unit_network, unit_annotation):
        controller = StateController(LearningContext(unit_network, unit_annotation))
        controller.set_annotated_state()
        with pytest.raises(InferenceError):
            controller.apply_assignment({1: False})
        assert states(unit_network) == {1: True, 2: True}

    def test_unknown_atoms_in_assignment(self, unit_network, unit_annotation):
        controller = StateController(LearningContext(unit_network, unit_annotation))
        with pytest.raises(InferenceError):
            controller.apply_assignment({1: True, 2: True, 9: True})
        assert states(unit_network) == {1: False, 2: False}

    def test_missing_annotation(self, hard_network, unit_annotation):
        controller = StateController(LearningContext(hard_network, unit_annotation))
        with pytest.raises(AnnotationError):
            controller.set_annotated_state()
        assert hard_network.sweeping is None

    def test_error_refused_during_sweep(self, unit_network, unit_annotation):
        ctx = LearningContext(unit_network, unit_annotation)
        with ctx.weight_sweep():
            with pytest.raises(SweepError):
                StateController(ctx).calculate_error()
