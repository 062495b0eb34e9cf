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

from marginmln import mlnlog


logger = mlnlog.logger(__name__)


def count_groundings(ctx):
    '''
    Counts the true groundings of every clause under the current truth
    values of the ground atoms.

    A ground constraint counts as a true grounding of a clause that
    produced it if at least one of its literals is satisfied. If the
    weight of the clause has been inverted during grounding (negative
    frequency), the constraint counts only if none of its literals is
    satisfied. Each counted constraint contributes the absolute
    frequency of the clause.

    :param ctx:     the :class:`LearningContext` of the learning run.
    :returns:       integer array of length `ctx.nclauses`.
    '''
    network = ctx.network
    network.check_stable()
    atoms = network.atoms
    dependencies = ctx.dependencies
    counts = numpy.zeros(ctx.nclauses, dtype=numpy.int64)
    for constraint in network.constraints.values():
        nsat = constraint.nsat(atoms)
        for clauseidx, frequency in dependencies[constraint.idx].items():
            if (frequency < 0 and nsat == 0) or (frequency > 0 and nsat > 0):
                counts[clauseidx] += abs(frequency)
    return counts
