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
import ast
import numbers
import os
import pprint

from marginmln.mln.constants import HAMMING, LOSS_FUNCTIONS
from marginmln.mln.errors import ConfigError


learn_config_pattern = '%s.learn.conf'


learn_defaults = {
    'C': 1e3,
    'epsilon': 0.001,
    'iterations': 1000,
    'loss_scale': 1.,
    'loss_function': HAMMING,
    'margin_rescaling': True,
    'loss_augmented': True,
    'l1_regularization': False,
    'print_learned_weights_per_iteration': False,
}


def check_params(params):
    '''
    Validates the learning parameters in `params` and raises a
    :class:`ConfigError` for the first malformed one.
    '''
    iterations = params.get('iterations', learn_defaults['iterations'])
    if isinstance(iterations, bool) or not isinstance(iterations, numbers.Integral):
        raise ConfigError('The maximum number of iterations must be an integer, got %r' % (iterations,))
    if iterations < 0:
        raise ConfigError('The maximum number of iterations must be a non-negative integer, but you gave: %d' % iterations)
    for name in ('C', 'epsilon', 'loss_scale'):
        value = params.get(name, learn_defaults[name])
        try:
            value = float(value)
        except (TypeError, ValueError):
            raise ConfigError('Parameter %s must be a number, got %r' % (name, value))
        if value < 0 or value != value:
            raise ConfigError('Parameter %s must be non-negative, got %s' % (name, value))
    if float(params.get('C', learn_defaults['C'])) == 0:
        raise ConfigError('The regularization parameter C must be positive')
    lossfct = params.get('loss_function', learn_defaults['loss_function'])
    if lossfct not in LOSS_FUNCTIONS:
        raise ConfigError('Unsupported loss function "%s". Available: %s' % (lossfct, ', '.join(LOSS_FUNCTIONS)))
    return params


class LearnConfig(object):
    '''
    Dict-backed configuration of a learning task, which can be stored in
    and loaded from a text file holding a Python dict literal.
    '''

    def __init__(self, filepath=None):
        self.config_file = filepath
        self.config = {}
        self._dirty = False
        if filepath is not None and os.path.exists(filepath):
            self.load(filepath)

    @property
    def dirty(self):
        return self._dirty

    def __getitem__(self, key):
        return self.config.get(key)

    def __setitem__(self, key, value):
        self.config[key] = value
        self._dirty = True

    def __contains__(self, key):
        return key in self.config

    def get(self, key, default=None):
        return self.config.get(key, default)

    def update(self, d):
        self.config.update(d)
        self._dirty = True

    def dumps(self):
        return pprint.pformat(self.config)

    def dump(self, filepath=None):
        filepath = filepath or self.config_file
        if filepath is None:
            raise ConfigError('No file given to store the configuration')
        with open(filepath, 'w+') as f:
            f.write(self.dumps())
        self.config_file = filepath
        self._dirty = False

    def load(self, filepath):
        with open(filepath) as f:
            try:
                self.config = ast.literal_eval(f.read())
            except (SyntaxError, ValueError) as e:
                raise ConfigError('Malformed configuration file %s: %s' % (filepath, e))
        if not isinstance(self.config, dict):
            raise ConfigError('Configuration file %s does not contain a dict' % filepath)
        self.config_file = filepath
        self._dirty = False
