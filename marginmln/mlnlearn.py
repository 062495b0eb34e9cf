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
import argparse
import logging
import os
import sys

from tabulate import tabulate

from marginmln import mlnlog
from marginmln.mln.annotation import AnnotationDB, load_annotation
from marginmln.mln.constants import LOSS_FUNCTIONS
from marginmln.mln.errors import ConfigError, MLNError
from marginmln.mln.inference.oracle import load_oracle
from marginmln.mln.learning.maxmargin import MaxMarginLearner
from marginmln.mln.network import GroundNetwork, load_network
from marginmln.mln.util import headline
from marginmln.utils.config import LearnConfig, check_params, learn_defaults


logger = mlnlog.logger(__name__)


class MLNLearn(object):
    '''
    Wrapper class for max-margin weight learning using a configuration.

    The learning parameters are validated when the wrapper is created,
    before any network is loaded.
    '''

    def __init__(self, config=None, **params):
        if config is None:
            self._config = LearnConfig()
        else:
            self._config = config
        self._config.update(params)
        check_params(self.params)

    @property
    def config(self):
        return self._config

    @property
    def network(self):
        return self._config.get('network')

    @property
    def annotation(self):
        return self._config.get('annotation')

    @property
    def oracle(self):
        return self._config.get('oracle')

    @property
    def output_filename(self):
        return self._config.get('output_filename')

    @property
    def verbose(self):
        return self._config.get('verbose', False)

    @property
    def debug(self):
        return self._config.get('debug', 'WARNING')

    @property
    def params(self):
        return dict((k, self._config.get(k, v)) for k, v in learn_defaults.items())

    @property
    def directory(self):
        if self._config.config_file is None:
            return os.getcwd()
        return os.path.dirname(os.path.abspath(self._config.config_file))

    def _path(self, filename):
        return os.path.join(self.directory, filename)

    def _load_network(self):
        if isinstance(self.network, GroundNetwork):
            return self.network
        if not self.network:
            raise ConfigError('No ground network given')
        return load_network(self._path(self.network))

    def _load_annotation(self):
        if isinstance(self.annotation, AnnotationDB):
            return self.annotation
        if not self.annotation:
            raise ConfigError('No annotation given')
        return load_annotation(self._path(self.annotation))

    def _load_oracle(self):
        if self.oracle is None:
            raise ConfigError('No inference oracle given')
        if isinstance(self.oracle, str):
            return load_oracle(self.oracle)
        return self.oracle

    def run(self):
        '''
        Run the weight learning with the given parameters.
        '''
        debug = self.debug if isinstance(self.debug, int) else getattr(logging, str(self.debug).upper())
        olddebug = mlnlog.level(debug)
        try:
            if self.verbose:
                conf = [(k, v) for k, v in self._config.config.items() if not isinstance(v, (GroundNetwork, AnnotationDB))]
                print(tabulate(sorted(conf, key=lambda kv: str(kv[0])), headers=('Parameter:', 'Value:')))
            oracle = self._load_oracle()
            network = self._load_network()
            annotation = self._load_annotation()
            logger.info('Ground network: %d clauses, %d atoms, %d constraints' %
                        (len(network.clauses), len(network.atoms), len(network.constraints)))
            logger.info('Atoms with annotations: %s' % ', '.join(sorted(annotation.signatures)))
            for clause in network.clauses:
                logger.info('%d: %s%s' % (clause.idx, clause, '.' if clause.ishard else ''))
            network.write_dependencies()
            learner = MaxMarginLearner(network, annotation, oracle, **self.params)
            learner.run()
            if self.verbose:
                print()
                print(headline('LEARNT MARKOV LOGIC NETWORK'))
                print()
                learner.write_results(sys.stdout, color=True)
            if self.output_filename:
                with open(self._path(self.output_filename), 'w+') as f:
                    learner.write_results(f)
            elif not self.verbose:
                learner.write_results(sys.stdout)
        finally:
            mlnlog.level(olddebug)
        return learner


def nonnegative_int(s):
    try:
        v = int(s)
    except ValueError:
        raise argparse.ArgumentTypeError('not an integer: %s' % s)
    if v < 0:
        raise argparse.ArgumentTypeError('The maximum iterations value must be a non-negative integer, but you gave: %d' % v)
    return v


def parser():
    p = argparse.ArgumentParser(prog='mlnlearn', description='Max-margin weight learning for Markov logic networks.')
    p.add_argument('-i', '--network', dest='network', required=True, help='ground network file (JSON)', metavar='FILE')
    p.add_argument('-a', '--annotation', dest='annotation', required=True, help='annotation file (JSON)', metavar='FILE')
    p.add_argument('-o', '--output', dest='output_filename', help='output MLN file (default is stdout)', metavar='FILE')
    p.add_argument('--oracle', dest='oracle', required=True, help='MAP inference oracle given as module:Class')
    p.add_argument('--C', dest='C', type=float, default=learn_defaults['C'],
                   help='regularization parameter (default is %(default)s)')
    p.add_argument('--epsilon', dest='epsilon', type=float, default=learn_defaults['epsilon'],
                   help='stopping parameter (default is %(default)s)')
    p.add_argument('--loss-scale', dest='loss_scale', type=float, default=learn_defaults['loss_scale'],
                   help='the loss value will be multiplied by this number (default is %(default)s)')
    p.add_argument('--loss-function', dest='loss_function', choices=LOSS_FUNCTIONS, default=learn_defaults['loss_function'])
    p.add_argument('--iterations', dest='iterations', type=nonnegative_int, default=learn_defaults['iterations'],
                   help='the maximum number of iterations to run learning (default is %(default)s)')
    p.add_argument('--l1-regularization', dest='l1_regularization', action='store_true', default=False,
                   help='use L1 regularization instead of L2')
    p.add_argument('--non-margin-rescaling', dest='margin_rescaling', action='store_false', default=True,
                   help="don't scale the margin by the loss")
    p.add_argument('--no-loss-augmented', dest='loss_augmented', action='store_false', default=True,
                   help='do not perform loss augmented inference')
    p.add_argument('--print-learned-weights-per-iteration', dest='print_learned_weights_per_iteration',
                   action='store_true', default=False, help='print the learned weights for each iteration')
    p.add_argument('-v', '--verbose', dest='verbose', action='store_true', default=False)
    p.add_argument('--debug', dest='debug', default='INFO', choices=('DEBUG', 'INFO', 'WARNING', 'ERROR'),
                   help='logging level (default is %(default)s)')
    p.add_argument('--save-config', dest='save_config', metavar='FILE', help='store the configuration in FILE')
    return p


def main(argv=None):
    args = parser().parse_args(argv)
    params = vars(args)
    save_config = params.pop('save_config')
    try:
        learning = MLNLearn(**params)
        if save_config:
            learning.config.dump(save_config)
        learning.run()
    except MLNError as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
