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
from marginmln.utils.config import check_params, learn_defaults


logger = mlnlog.logger(__name__)


class AbstractLearner(object):
    '''
    Abstract base class for every MLN weight learning algorithm.

    The parameters are validated before the network is looked at, so a
    malformed configuration never touches the network.
    '''

    def __init__(self, network=None, **params):
        check_params(params)
        self._params = params
        self.network = network
        self._w = None

    def _param(self, name):
        return self._params.get(name, learn_defaults[name])

    @property
    def nclauses(self):
        return len(self.network.clauses)

    @property
    def weights(self):
        return self._w

    def run(self, **params):
        '''
        Learn the weights of the MLN given the ground network previously
        loaded.
        '''
        # initial parameter vector: all zeros
        self._w = numpy.zeros(self.nclauses, dtype=numpy.float64)
        self._prepare()
        self._optimize(**params)
        self._cleanup()
        return self.weights

    def _prepare(self):
        pass

    def _cleanup(self):
        pass

    def _optimize(self, **params):
        raise NotImplementedError('%s does not implement _optimize()' % self.__class__.__name__)

    @property
    def name(self):
        return self.__class__.__name__
