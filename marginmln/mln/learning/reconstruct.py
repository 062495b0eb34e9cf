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
from marginmln import mlnlog


logger = mlnlog.logger(__name__)


class ConstraintWeightReconstructor(object):
    '''
    Sole writer of the ground constraint weights during learning.
    Recomputes the constraint weights from the clause weights learned so
    far, so the network can be handed to inference again without being
    re-grounded.
    '''

    def __init__(self, ctx):
        self.ctx = ctx

    def update(self, weights):
        '''
        Every constraint gets the sum of the weights of the clauses that
        produced it, each multiplied by its frequency. A constraint that
        descends from a hard clause gets the hard weight of the network,
        no matter what other clauses produced it.

        Negative frequencies are accumulated as they are, but reported,
        since the clause weights are expected to have been made positive
        during grounding.
        '''
        network = self.ctx.network
        clauses = self.ctx.clauses
        dependencies = self.ctx.dependencies
        inverted = 0
        with self.ctx.weight_sweep() as cweights:
            for constraint in network.constraints.values():
                weight = 0.
                hard = False
                for clauseidx, frequency in dependencies[constraint.idx].items():
                    if clauses[clauseidx].ishard:
                        hard = True
                        continue
                    if frequency < 0:
                        inverted += 1
                    weight += weights[clauseidx] * frequency
                cweights[constraint.idx] = network.hard_weight if hard else weight
        if inverted:
            logger.warning('%d dependencies with negative frequency found while reconstructing constraint weights' % inverted)
        return inverted
