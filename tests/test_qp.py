'''
Tests for the quadratic and linear cutting-plane programs.
'''

import types

import numpy
import pytest

from marginmln.mln.errors import SolverError
from marginmln.mln.learning import qp
from marginmln.mln.learning.qp import L1Program, L2Program, program


class TestL2Program:

    def test_single_cut(self):
        p = L2Program(1, 1e3)
        p.add_cut(p.layout([2.]), 1.)
        p.solve()
        assert p.weights()[0] == pytest.approx(0.5, abs=1e-4)
        assert p.slack() == pytest.approx(0., abs=1e-4)
        assert p.constraints_satisfied()
        assert p.solves == 1

    def test_all_cuts_active(self):
        p = L2Program(2, 1e3)
        for delta, rhs in (([0., -1.], 4.), ([0., 1.], 3.), ([2., -1.], 5.)):
            p.add_cut(p.layout(delta), rhs)
        # warm start away from the optimum
        p._x = numpy.array([4., 3., 0.])
        p.solve()
        assert list(p.weights()) == pytest.approx([0.5, -0.5], abs=1e-4)
        assert p.slack() == pytest.approx(3.5, abs=1e-4)
        assert p.constraints_satisfied(tol=1e-9)

    def test_solver_failure(self, monkeypatch):
        failed = types.SimpleNamespace(success=False, status=0, message='The maximum number of function evaluations is exceeded.', x=None)
        monkeypatch.setattr(qp, 'minimize', lambda *args, **kwargs: failed)
        p = L2Program(1, 1e3)
        p.add_cut(p.layout([1.]), 1.)
        with pytest.raises(SolverError, match='maximum number'):
            p.solve()

    def test_weights_are_unbounded_below(self):
        p = L2Program(2, 1e3)
        p.add_cut(p.layout([-1., 0.]), 2.)
        p.solve()
        assert p.weights() == pytest.approx([-2., 0.], abs=1e-4)

    def test_slack_absorbs_expensive_margins(self):
        p = L2Program(1, 1.)
        p.add_cut(p.layout([1.]), 10.)
        p.solve()
        # minimizes w^2/2 + (10 - w)
        assert p.weights()[0] == pytest.approx(1., abs=1e-3)
        assert p.slack() == pytest.approx(9., abs=1e-3)


class TestL1Program:

    def test_single_cut(self):
        p = L1Program(1, 1e3)
        assert p.width == 2
        p.add_cut(p.layout([2.]), 1.)
        p.solve()
        assert p.weights()[0] == pytest.approx(0.5)
        assert p.slack() == pytest.approx(0.)

    def test_negative_weights(self):
        p = L1Program(2, 1e3)
        p.add_cut(p.layout([0., -4.]), 2.)
        p.solve()
        assert list(p.weights()) == pytest.approx([0., -0.5])

    def test_solver_failure(self, monkeypatch):
        failed = types.SimpleNamespace(status=2, message='The problem is infeasible.', x=None, fun=None)
        monkeypatch.setattr(qp, 'linprog', lambda *args, **kwargs: failed)
        p = L1Program(1, 1e3)
        p.add_cut(p.layout([1.]), 1.)
        with pytest.raises(SolverError, match='infeasible'):
            p.solve()


class TestCuts:

    def test_solve_without_cuts(self):
        with pytest.raises(SolverError):
            L2Program(1, 1e3).solve()

    def test_cut_width(self):
        p = L1Program(2, 1e3)
        with pytest.raises(ValueError):
            p.add_cut([1., 2.], 1.)

    def test_duplicate_cuts(self):
        p = program(2, 1e3)
        for _ in range(3):
            p.add_cut(p.layout([1., 1.]), 2.)
        assert p.ncuts == 3
        A, b = p._matrix()
        assert A.shape == (1, 3)
        assert list(b) == [2.]

    def test_release(self):
        p = program(1, 1e3, l1=True)
        assert isinstance(p, L1Program)
        p.add_cut(p.layout([1.]), 1.)
        p.release()
        assert p.ncuts == 0
