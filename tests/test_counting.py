'''
Tests for counting the true groundings of clauses.
'''

import numpy
import pytest

from marginmln.mln.errors import SweepError
from marginmln.mln.learning.context import LearningContext
from marginmln.mln.learning.counting import count_groundings
from marginmln.mln.learning.state import StateController

from tests.networks import make_network, random_network, set_states


class TestCountGroundings:

    def test_hard_clause_scenario(self, hard_network, hard_annotation):
        ctx = LearningContext(hard_network, hard_annotation)
        StateController(ctx).set_annotated_state()
        counts = count_groundings(ctx)
        assert list(counts) == [2, 1]

    def test_inverted_frequency(self):
        network = make_network([('Q(x)', False)], [(1, 'Q/1')], {0: [1]}, {0: {0: -2}})
        ctx = LearningContext(network, None)
        # nsat = 0
        assert list(count_groundings(ctx)) == [2]
        set_states(network, {1: True})
        # nsat = 1
        assert list(count_groundings(ctx)) == [0]

    def test_negative_literal(self):
        network = make_network([('!Q(x)', False)], [(1, 'Q/1')], {0: [-1]}, {0: {0: 1}})
        ctx = LearningContext(network, None)
        assert list(count_groundings(ctx)) == [1]
        set_states(network, {1: True})
        assert list(count_groundings(ctx)) == [0]

    def test_frequency_magnitude(self):
        network = make_network([('Q(x)', False), ('Q(y)', False)], [(1, 'Q/1')], {0: [1]}, {0: {0: 3, 1: 1}})
        set_states(network, {1: True})
        assert list(count_groundings(LearningContext(network, None))) == [3, 1]

    def test_no_side_effects(self, hard_network):
        set_states(hard_network, {1: True, 3: True})
        before = [(a.idx, a.state) for a in hard_network.atoms.values()]
        weights = [c.weight for c in hard_network.constraints.values()]
        count_groundings(LearningContext(hard_network, None))
        assert [(a.idx, a.state) for a in hard_network.atoms.values()] == before
        assert [c.weight for c in hard_network.constraints.values()] == weights

    def test_refused_during_sweep(self, unit_network):
        ctx = LearningContext(unit_network, None)
        with unit_network.state_sweep():
            with pytest.raises(SweepError):
                count_groundings(ctx)

    @pytest.mark.parametrize('seed', range(10))
    def test_idempotent(self, seed):
        ctx = LearningContext(random_network(seed), None)
        assert numpy.array_equal(count_groundings(ctx), count_groundings(ctx))

    @pytest.mark.parametrize('seed', range(10))
    def test_bounds_with_unit_frequencies(self, seed):
        network = random_network(seed, unit=True)
        counts = count_groundings(LearningContext(network, None))
        for clauseidx, count in enumerate(counts):
            referencing = sum(1 for _, deps in network.dependencies.items() if clauseidx in deps)
            assert 0 <= count <= referencing

    @pytest.mark.parametrize('seed', range(10))
    def test_bounds(self, seed):
        network = random_network(seed)
        counts = count_groundings(LearningContext(network, None))
        for clauseidx, count in enumerate(counts):
            total = sum(abs(deps[clauseidx]) for _, deps in network.dependencies.items() if clauseidx in deps)
            assert 0 <= count <= total
