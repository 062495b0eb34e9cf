# -*- coding: utf-8 -*-
#
# Markov Logic Networks
#
# (C) 2012-2015 by Daniel Nyga (nyga@cs.uni-bremen.de)
# (C) 2006-2011 by Dominik Jain (jain@cs.tum.edu)
#
# Permission is hereby granted, free of charge, to any person obtaining
# a copy of this software and associated documentation files (the
# "Software"), to deal in the Software without restriction, including
# without limitation the rights to use, copy, modify, merge, publish,
# distribute, sublicense, and/or sell copies of the Software, and to
# permit persons to whom the Software is furnished to do so, subject to
# the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT.
# IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY
# CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF CONTRACT,
# TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE
# SOFTWARE OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.
import numpy
from scipy.optimize import minimize, linprog, LinearConstraint, Bounds

from marginmln import mlnlog
from marginmln.mln.errors import SolverError


logger = mlnlog.logger(__name__)


class CuttingPlaneProgram(object):
    '''
    Abstract base class of the mathematical programs solved by the
    cutting-plane learner. The variables are the clause weights (in a
    layout defined by the subclass) followed by a single non-negative
    slack variable. Cuts of the form

        sum_i(x_i * delta_i) + slack >= rhs

    are added one at a time and never removed.
    '''

    def __init__(self, nclauses, C, **params):
        self.nclauses = nclauses
        self.C = float(C)
        self._params = params
        self._rows = []
        self._rhs = []
        self._x = numpy.zeros(self.width + 1)
        self.solves = 0
        self.objective = None
        self.message = None

    @property
    def width(self):
        '''Number of weight variables.'''
        raise NotImplementedError()

    @property
    def ncuts(self):
        return len(self._rows)

    def layout(self, delta):
        '''
        Maps a per-clause vector to the weight variables of the program.
        '''
        raise NotImplementedError()

    def weights(self):
        '''
        Per-clause weights of the last solution.
        '''
        raise NotImplementedError()

    def slack(self):
        return float(self._x[-1])

    def add_cut(self, delta, rhs):
        delta = numpy.asarray(delta, dtype=numpy.float64)
        if len(delta) != self.width:
            raise ValueError('Cut has %d coefficients, expected %d' % (len(delta), self.width))
        self._rows.append(numpy.append(delta, 1.))
        self._rhs.append(float(rhs))
        logger.debug('%s + slack >= %s' % (' + '.join('%s*x%d' % (d, i) for i, d in enumerate(delta) if d), rhs))

    def _matrix(self):
        # identical cuts are solved once
        rows = numpy.unique(numpy.column_stack((numpy.array(self._rows), numpy.array(self._rhs))), axis=0)
        return rows[:, :-1], rows[:, -1]

    def solve(self):
        if not self._rows:
            raise SolverError('Cannot solve a program without constraints')
        A, b = self._matrix()
        self._x = self._solve(A, b)
        self.solves += 1
        return self._x

    def _solve(self, A, b):
        raise NotImplementedError()

    def constraints_satisfied(self, tol=1e-6):
        if not self._rows:
            return True
        A, b = self._matrix()
        return bool(numpy.all(A.dot(self._x) >= b - tol))

    def release(self):
        self._rows = []
        self._rhs = []

    @property
    def name(self):
        return self.__class__.__name__


class L2Program(CuttingPlaneProgram):
    '''
    Quadratic program of the 2-norm max-margin problem

        min 1/2 ||w||^2 + C * slack

    with one free variable per clause. Solved with the trust-region
    interior point method of scipy using the exact (constant) Hessian
    diag(1, ..., 1, 0), warm-started at the previous solution.

    The slack of the returned solution is the smallest one that satisfies
    all cuts for the weights found, i.e. max(0, max_k(rhs_k - delta_k * w)),
    which is the optimal slack for these weights.
    '''

    @property
    def width(self):
        return self.nclauses

    def layout(self, delta):
        return numpy.asarray(delta, dtype=numpy.float64)

    def weights(self):
        return numpy.array(self._x[:self.nclauses])

    def _slack(self, A, b, w):
        return max(0., float(numpy.max(b - A[:, :self.nclauses].dot(w))))

    def _solve(self, A, b):
        n = self.nclauses
        C = self.C
        x0 = numpy.array(self._x)
        x0[n] = self._slack(A, b, x0[:n]) + 1.
        hessian = numpy.diag(numpy.append(numpy.ones(n), 0.))
        f = lambda x: 0.5 * numpy.dot(x[:n], x[:n]) + C * x[n]
        grad = lambda x: numpy.append(x[:n], C)
        hess = lambda x: hessian
        cuts = LinearConstraint(A, b, numpy.inf)
        bounds = Bounds(numpy.append(numpy.full(n, -numpy.inf), 0.), numpy.full(n + 1, numpy.inf))
        options = {'maxiter': self._params.get('maxiter', 5000),
                   'gtol': self._params.get('gtol', 1e-8),
                   'xtol': self._params.get('xtol', 1e-8)}
        logger.debug('starting optimization with trust-constr... %s' % options)
        result = minimize(f, x0, jac=grad, hess=hess, bounds=bounds, constraints=[cuts],
                          method='trust-constr', options=options)
        self.message = result.message
        if not result.success:
            raise SolverError('Quadratic program could not be solved: %s (status %d)' % (result.message, result.status))
        w = numpy.array(result.x[:n])
        x = numpy.append(w, self._slack(A, b, w))
        self.objective = float(f(x))
        return x


class L1Program(CuttingPlaneProgram):
    '''
    Linear program of the 1-norm max-margin problem

        min sum_i(w+_i + w-_i) + C * slack

    where every clause weight is split into two non-negative variables
    w_i = w+_i - w-_i. Solved with the HiGHS solver of scipy.
    '''

    @property
    def width(self):
        return 2 * self.nclauses

    def layout(self, delta):
        delta = numpy.asarray(delta, dtype=numpy.float64)
        return numpy.concatenate((delta, -delta))

    def weights(self):
        n = self.nclauses
        return self._x[:n] - self._x[n:2 * n]

    def _solve(self, A, b):
        c = numpy.append(numpy.ones(self.width), self.C)
        bounds = [(0., None)] * (self.width + 1)
        logger.debug('starting optimization with HiGHS...')
        result = linprog(c, A_ub=-A, b_ub=-b, bounds=bounds, method='highs')
        self.message = result.message
        if result.status != 0:
            raise SolverError('Linear program could not be solved: %s (status %d)' % (result.message, result.status))
        self.objective = float(result.fun)
        return result.x


def program(nclauses, C, l1=False, **params):
    '''
    Returns the program for 1-norm or 2-norm regularized learning.
    '''
    if l1:
        return L1Program(nclauses, C, **params)
    return L2Program(nclauses, C, **params)
