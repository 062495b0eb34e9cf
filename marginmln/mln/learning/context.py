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
from marginmln.mln.errors import DependencyMapError


class LearningContext(object):
    '''
    Everything a learning run operates on: the ground network, its
    dependency map and the annotation of its atoms. It is handed to every
    component of the learner instead of sharing module-level state.

    Components do not write the network directly but open a sweep:
    :meth:`state_sweep` for atom truth values and :meth:`weight_sweep`
    for constraint weights.
    '''

    def __init__(self, network, annotation):
        network.check_dependencies()
        self.network = network
        self.annotation = annotation

    @property
    def clauses(self):
        return self.network.clauses

    @property
    def atoms(self):
        return self.network.atoms

    @property
    def constraints(self):
        return self.network.constraints

    @property
    def dependencies(self):
        if self.network.dependencies is None:
            raise DependencyMapError('Dependency map does not exist.')
        return self.network.dependencies

    @property
    def nclauses(self):
        return len(self.network.clauses)

    def state_sweep(self):
        return self.network.state_sweep()

    def weight_sweep(self):
        return self.network.weight_sweep()
