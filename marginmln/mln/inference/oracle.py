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
import importlib

from marginmln import mlnlog
from marginmln.mln.errors import InferenceError


logger = mlnlog.logger(__name__)


class MAPOracle(object):
    '''
    Interface of an external MAP inference solver.

    An oracle computes the most probable truth assignment of the ground
    atoms under the current constraint weights of the network. If an
    annotation is given, the objective is augmented by the loss with
    respect to the annotation, i.e. assignments disagreeing with the
    annotation are preferred (loss-augmented inference).

    The call must be synchronous and complete: it returns a dict mapping
    every atom id of the network to its truth value, or raises an
    exception. Oracles must not modify the network.
    '''

    def infer(self, network, annotation=None):
        raise NotImplementedError('%s does not implement infer()' % self.__class__.__name__)

    @property
    def name(self):
        return self.__class__.__name__


class InferenceAdapter(object):
    '''
    Runs inference for the clause weights learned so far: reconstructs
    the constraint weights, calls the oracle once and hands its result
    to the state controller.
    '''

    def __init__(self, ctx, oracle, reconstructor, state, loss_augmented=True):
        self.ctx = ctx
        self.oracle = oracle
        self.reconstructor = reconstructor
        self.state = state
        self.loss_augmented = loss_augmented
        self.calls = 0

    def infer(self, weights):
        self.reconstructor.update(weights)
        annotation = self.ctx.annotation if self.loss_augmented else None
        logger.debug('running %sinference with %s...' % ('loss augmented ' if self.loss_augmented else '', self.oracle.name))
        self.calls += 1
        assignment = self.oracle.infer(self.ctx.network, annotation=annotation)
        if assignment is None:
            raise InferenceError('%s returned no result' % self.oracle.name)
        self.state.apply_assignment(assignment)


def load_oracle(path, **params):
    '''
    Instantiates an oracle class given as "package.module:ClassName".
    '''
    modname, _, clsname = path.partition(':')
    if not modname or not clsname:
        raise InferenceError('Oracle must be given as module:Class, got "%s"' % path)
    try:
        module = importlib.import_module(modname)
    except ImportError as e:
        raise InferenceError('Cannot import oracle module %s: %s' % (modname, e))
    clazz = getattr(module, clsname, None)
    if clazz is None:
        raise InferenceError('Module %s has no oracle named %s' % (modname, clsname))
    oracle = clazz(**params)
    if not callable(getattr(oracle, 'infer', None)):
        raise InferenceError('%s is not an inference oracle' % path)
    return oracle
