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
import sys

import numpy
from tabulate import tabulate

from marginmln import mlnlog
from marginmln.mln.constants import INIT, ITERATING, CONVERGED, MAX_ITERS_REACHED, \
    comment_color, predicate_color, weight_color
from marginmln.mln.inference.oracle import InferenceAdapter
from marginmln.mln.learning.common import AbstractLearner
from marginmln.mln.learning.context import LearningContext
from marginmln.mln.learning.counting import count_groundings
from marginmln.mln.learning.qp import program
from marginmln.mln.learning.reconstruct import ConstraintWeightReconstructor
from marginmln.mln.learning.state import StateController
from marginmln.mln.network import symbol
from marginmln.mln.util import StopWatch, colorize, fmtweight


logger = mlnlog.logger(__name__)


class IterationStats(object):

    def __init__(self, iteration, loss, error, slack, nonzero):
        self.iteration = iteration
        self.loss = loss
        self.error = error
        self.slack = slack
        self.nonzero = nonzero

    def __repr__(self):
        return '<Iteration %d: loss=%s, error=%s, slack=%s, non-zero=%d>' % (self.iteration, self.loss, self.error, self.slack, self.nonzero)


class MaxMarginLearner(AbstractLearner):
    '''
    Max-margin weight learning for Markov logic networks using the
    cutting-plane method, as described in

    Tuyen N. Huynh and Raymond J. Mooney. Max-Margin Weight Learning for
    Markov Logic Networks. In Proceedings of ECML PKDD 2009, pp. 564-579.

    Starting from all-zero weights, every iteration runs (loss-augmented)
    MAP inference for the current weights, adds the most violated margin
    constraint found to a quadratic (L2) or linear (L1) program and solves
    it for the next weights. Learning stops as soon as the error does not
    exceed the slack by more than `epsilon`, the weights do not change
    anymore, or `iterations` iterations have been run.

    :param network:     the :class:`GroundNetwork`, built with dependency tracking.
    :param annotation:  the :class:`AnnotationDB` holding the truth values of
                        all atoms of the network.
    :param oracle:      the :class:`MAPOracle` used for inference.

    Parameters (see `marginmln.utils.config.learn_defaults`):
    `C`, `epsilon`, `iterations`, `loss_scale`, `loss_function`,
    `margin_rescaling`, `loss_augmented`, `l1_regularization`,
    `print_learned_weights_per_iteration`.
    '''

    def __init__(self, network, annotation, oracle, **params):
        AbstractLearner.__init__(self, network, **params)
        self.ctx = LearningContext(network, annotation)
        self.oracle = oracle
        self.state = StateController(self.ctx)
        self.reconstructor = ConstraintWeightReconstructor(self.ctx)
        self.adapter = InferenceAdapter(self.ctx, oracle, self.reconstructor, self.state,
                                        loss_augmented=self.loss_augmented)
        self.softmask = numpy.array([not c.ishard for c in network.clauses], dtype=bool)
        self.true_counts = None
        self.history = []
        self.status = INIT
        self._program = None
        self._watch = StopWatch()

    @property
    def C(self):
        return float(self._param('C'))

    @property
    def epsilon(self):
        return float(self._param('epsilon'))

    @property
    def maxiter(self):
        return self._param('iterations')

    @property
    def loss_scale(self):
        return float(self._param('loss_scale'))

    @property
    def margin_rescaling(self):
        return self._param('margin_rescaling')

    @property
    def loss_augmented(self):
        return self._param('loss_augmented')

    @property
    def l1_regularization(self):
        return self._param('l1_regularization')

    @property
    def print_learned_weights_per_iteration(self):
        return self._param('print_learned_weights_per_iteration')

    @property
    def iterations(self):
        '''Number of inference iterations run so far.'''
        return self.adapter.calls

    @property
    def solves(self):
        return self._program.solves if self._program is not None else 0

    @property
    def learned_weights(self):
        '''
        The learned weights of the soft clauses, indexed by clause.
        '''
        if self._w is None:
            return {}
        return dict((c.idx, float(self._w[c.idx])) for c in self.network.clauses if not c.ishard)

    @property
    def elapsedtime(self):
        return self._watch['learning'].elapsedtime

    @property
    def name(self):
        return '%s[%s, C=%s]' % (self.__class__.__name__, 'L1' if self.l1_regularization else 'L2', self.C)

    def _prepare(self):
        # the true counts of the annotated state are computed once
        self.state.set_annotated_state()
        self.true_counts = count_groundings(self.ctx)
        logger.info('True counts: %s' % list(self.true_counts))

    def _optimize(self, **params):
        n = self.nclauses
        logger.info('%d-norm max margin weight learning using cutting plane method. Number of weights: %d' %
                    (1 if self.l1_regularization else 2, n))
        self._watch.tag('learning')
        self._program = program(n, self.C, l1=self.l1_regularization, **params)
        error = 1e5
        slack = -1e5
        iteration = 1
        self.status = ITERATING
        try:
            while error > slack + self.epsilon and iteration <= self.maxiter:
                logger.info('Iteration: %d/%d' % (iteration, self.maxiter))
                # inference has to be run once before there is anything to learn
                if iteration > 1:
                    converged, slack = self._solve(iteration)
                    if converged:
                        self.status = CONVERGED
                        break
                self.adapter.infer(self._w)
                loss = self.state.calculate_error() * self.loss_scale
                logger.info('Current loss: %s' % loss)
                inferred_counts = count_groundings(self.ctx)
                logger.info('Inferred counts: %s' % list(inferred_counts))
                # true counts minus inferred counts, zero for hard clauses
                delta = numpy.where(self.softmask, self.true_counts - inferred_counts, 0)
                current_error = float(numpy.dot(self._w, delta))
                logger.info('Delta: %s\nCount difference: %d\nCurrent weighted count difference: %s' %
                            (list(delta), delta.sum(), current_error))
                self._program.add_cut(self._program.layout(delta), loss if self.margin_rescaling else 1.)
                if self.margin_rescaling:
                    error = loss - current_error
                else:
                    error = 1. - current_error if loss > 0 else 0.
                logger.info('Current error: %s, current stopping criterion: %s' % (error, slack + self.epsilon))
                self.history.append(IterationStats(iteration, loss, error, slack, int(numpy.count_nonzero(self._w))))
                iteration += 1
            else:
                self.status = MAX_ITERS_REACHED if error > slack + self.epsilon else CONVERGED
        finally:
            self._program.release()
            self._watch.finish('learning')
        if self.status == MAX_ITERS_REACHED:
            logger.warning('Learning did not converge within %d iterations' % self.maxiter)
        logger.info('Weight learning finished (%s)' % self.status)
        self._watch.printSteps()

    def _solve(self, iteration):
        '''
        Solves the current program and takes over the new weights.
        Returns whether the weights stayed the same, and the slack.
        '''
        logger.info('Running solver for the current QP problem...')
        self._program.solve()
        logger.info('Constraints satisfied: %s, objective = %s' %
                    (self._program.constraints_satisfied(), self._program.objective))
        learned = numpy.where(self.softmask, self._program.weights(), 0.)
        converged = bool(numpy.all(learned == self._w))
        self._w = learned
        logger.info('Non-zero weights: %d' % numpy.count_nonzero(self._w))
        slack = self._program.slack()
        logger.info('Current slack value: %s' % slack)
        if self.print_learned_weights_per_iteration:
            logger.info('Learned weights on iteration %d:\n%s' % (iteration, self.tabulate_weights()))
        return converged, slack

    def tabulate_weights(self):
        rows = []
        for clause in self.network.clauses:
            w = 'hard' if clause.ishard else fmtweight(self._w[clause.idx])
            rows.append((clause.idx, w, clause.text))
        return tabulate(rows, headers=('#', 'Weight:', 'Clause:'))

    def write_results(self, stream=sys.stdout, color=False):
        '''
        Writes the predicate and function declarations followed by the
        clauses with their learned weights to `stream`. Hard clauses are
        written without a weight, terminated by a period.
        '''
        schema = self.network.schema
        weights = self._w if self._w is not None else numpy.zeros(self.nclauses)
        stream.write(colorize('// Predicate definitions\n', comment_color, color))
        for signature, args in schema.predicates.items():
            name = colorize(symbol(signature), predicate_color, color)
            stream.write('%s(%s)\n' % (name, ','.join(args)) if args else '%s\n' % name)
        if schema.functions:
            stream.write(colorize('\n// Functions definitions\n', comment_color, color))
            for signature, (rettype, args) in schema.functions.items():
                stream.write('%s %s(%s)\n' % (rettype, symbol(signature), ','.join(args)))
        stream.write(colorize('\n// Clauses\n', comment_color, color))
        for clause in self.network.clauses:
            if clause.ishard:
                stream.write('%s.\n\n' % clause.text)
            else:
                w = colorize(fmtweight(weights[clause.idx]), weight_color, color)
                stream.write('%s %s\n\n' % (w, clause.text))
