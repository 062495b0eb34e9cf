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
import json
from collections import OrderedDict
from contextlib import contextmanager

from marginmln import mlnlog
from marginmln.mln.constants import HARD_WEIGHT
from marginmln.mln.errors import NetworkError, DependencyMapError, SweepError


logger = mlnlog.logger(__name__)


STATE_SWEEP = 'state'
WEIGHT_SWEEP = 'weight'


class Clause(object):
    '''
    A first-order clause of the MLN in clausal form.

    :param idx:     the (stable, 0-based) index of the clause.
    :param text:    textual representation used when the theory is written.
    :param hard:    whether the clause must always hold.
    '''

    def __init__(self, idx, text, hard=False):
        self.idx = idx
        self.text = text
        self.ishard = bool(hard)

    def __str__(self):
        return self.text

    def __repr__(self):
        return '<Clause #%d: %s%s>' % (self.idx, self.text, '.' if self.ishard else '')


class GroundAtom(object):
    '''
    A ground atom of the network. The truth value can only be changed
    through a state sweep of the network holding the atom.
    '''

    def __init__(self, idx, signature, state=False, text=None):
        if idx <= 0:
            raise NetworkError('Ground atom ids must be positive integers, got %s' % idx)
        self.idx = idx
        self.signature = signature
        self.text = text
        self._state = bool(state)

    @property
    def state(self):
        return self._state

    def __str__(self):
        return self.text if self.text is not None else '%s#%d' % (self.signature, self.idx)

    def __repr__(self):
        return '<GroundAtom %s=%s>' % (str(self), self._state)


class GroundConstraint(object):
    '''
    A disjunction of ground literals. A literal is encoded by the id of
    its atom, negated if the atom must be false in order to satisfy it.
    The weight can only be changed through a weight sweep.
    '''

    def __init__(self, idx, literals, weight=0.):
        if not literals:
            raise NetworkError('Ground constraint %s has no literals' % idx)
        self.idx = idx
        self.literals = tuple(literals)
        self._weight = float(weight)

    @property
    def weight(self):
        return self._weight

    def nsat(self, atoms):
        '''
        Number of literals satisfied under the current truth values of `atoms`.
        '''
        return sum(1 for lit in self.literals if (lit > 0) == atoms[abs(lit)].state)

    def __repr__(self):
        return '<GroundConstraint #%s: %s (%s)>' % (self.idx, ' v '.join(map(str, self.literals)), self._weight)


class DependencyMap(object):
    '''
    Maps every ground constraint id to the clauses that produced it, i.e.
    a dict mapping clause indices to signed frequencies. A negative
    frequency means that the weight of the clause has been inverted
    during grounding.
    '''

    def __init__(self, entries=None):
        self._entries = OrderedDict()
        if entries is not None:
            for cidx, deps in entries.items():
                self._entries[cidx] = OrderedDict((int(k), int(v)) for k, v in deps.items())

    def __getitem__(self, cidx):
        deps = self._entries.get(cidx)
        if not deps:
            raise DependencyMapError('No dependencies recorded for ground constraint %s' % cidx)
        return deps

    def __contains__(self, cidx):
        return cidx in self._entries

    def __len__(self):
        return len(self._entries)

    def items(self):
        return self._entries.items()


class Schema(object):
    '''
    Predicate and function declarations of the MLN, written unchanged
    together with the learned theory.
    '''

    def __init__(self, predicates=None, functions=None):
        self.predicates = OrderedDict(predicates or [])
        self.functions = OrderedDict(functions or [])


def symbol(signature):
    return signature.split('/')[0]


class AtomStateWriter(object):
    '''
    Write handle for atom truth values, valid while its state sweep is open.
    '''

    def __init__(self, network):
        self._network = network
        self._staged = {}

    def __setitem__(self, atomidx, value):
        if atomidx not in self._network.atoms:
            raise NetworkError('No such ground atom: %s' % atomidx)
        self._staged[atomidx] = bool(value)

    def _commit(self):
        atoms = self._network.atoms
        for atomidx, value in self._staged.items():
            atoms[atomidx]._state = value


class ConstraintWeightWriter(object):
    '''
    Write handle for constraint weights, valid while its weight sweep is open.
    '''

    def __init__(self, network):
        self._network = network
        self._staged = {}

    def __setitem__(self, cidx, weight):
        if cidx not in self._network.constraints:
            raise NetworkError('No such ground constraint: %s' % cidx)
        self._staged[cidx] = float(weight)

    def _commit(self):
        constraints = self._network.constraints
        for cidx, weight in self._staged.items():
            constraints[cidx]._weight = weight


class GroundNetwork(object):
    '''
    Read-only view of a ground Markov network as produced by an external
    grounder.

    Atom truth values and constraint weights are modified in sweeps only:
    :meth:`state_sweep` and :meth:`weight_sweep` hand out a writer whose
    writes are staged and committed together when the sweep is closed
    without an error. At most one sweep may be open at a time.

    :param clauses:         list of :class:`Clause` objects, ordered by index.
    :param atoms:           iterable of :class:`GroundAtom` objects.
    :param constraints:     iterable of :class:`GroundConstraint` objects.
    :param dependencies:    the :class:`DependencyMap` or None, if the network
                            has been built without dependency tracking.
    :param schema:          the :class:`Schema` of the MLN.
    :param hard_weight:     the weight assigned to constraints of hard clauses.
    '''

    def __init__(self, clauses, atoms, constraints, dependencies=None, schema=None, hard_weight=HARD_WEIGHT):
        self.clauses = list(clauses)
        for i, clause in enumerate(self.clauses):
            if clause.idx != i:
                raise NetworkError('Clause %r is stored at position %d' % (clause, i))
        self.atoms = OrderedDict()
        for atom in sorted(atoms, key=lambda a: a.idx):
            if atom.idx in self.atoms:
                raise NetworkError('Duplicate ground atom id: %d' % atom.idx)
            self.atoms[atom.idx] = atom
        self.constraints = OrderedDict()
        for constraint in constraints:
            if constraint.idx in self.constraints:
                raise NetworkError('Duplicate ground constraint id: %s' % constraint.idx)
            for lit in constraint.literals:
                if abs(lit) not in self.atoms:
                    raise NetworkError('Ground constraint %s refers to unknown atom %d' % (constraint.idx, abs(lit)))
            self.constraints[constraint.idx] = constraint
        self.dependencies = dependencies
        self.schema = schema if schema is not None else Schema()
        self.hard_weight = float(hard_weight)
        self._sweep = None

    @property
    def sweeping(self):
        return self._sweep

    def check_stable(self):
        '''
        Makes sure no sweep is currently writing to the network.
        '''
        if self._sweep is not None:
            raise SweepError('The network is being modified by a %s sweep' % self._sweep)

    def check_dependencies(self):
        '''
        Makes sure the network has been built with dependency tracking and
        every ground constraint has at least one dependency entry.
        '''
        if self.dependencies is None:
            raise DependencyMapError('Dependency map does not exist. The ground network must be built with dependency tracking.')
        for cidx in self.constraints:
            deps = self.dependencies[cidx]
            for clauseidx in deps:
                if not 0 <= clauseidx < len(self.clauses):
                    raise DependencyMapError('Ground constraint %s depends on unknown clause %d' % (cidx, clauseidx))

    def atom(self, literal):
        return self.atoms[abs(literal)]

    @contextmanager
    def _open(self, kind, writer):
        self.check_stable()
        self._sweep = kind
        try:
            yield writer
        finally:
            self._sweep = None
        writer._commit()

    def state_sweep(self):
        return self._open(STATE_SWEEP, AtomStateWriter(self))

    def weight_sweep(self):
        return self._open(WEIGHT_SWEEP, ConstraintWeightWriter(self))

    def __str__(self):
        return '<GroundNetwork: %d clauses, %d atoms, %d constraints>' % (len(self.clauses), len(self.atoms), len(self.constraints))

    def write_dependencies(self):
        '''
        Logs every ground constraint with the clauses it descends from.
        '''
        if self.dependencies is None:
            return
        for cidx, deps in self.dependencies.items():
            constraint = self.constraints[cidx]
            lits = ' v '.join(('' if lit > 0 else '!') + str(self.atom(lit)) for lit in constraint.literals)
            logger.debug('%s:' % lits)
            for clauseidx, freq in deps.items():
                clause = self.clauses[clauseidx]
                logger.debug('    %s%s %d' % (clause, ' (hard)' if clause.ishard else '', freq))

    @staticmethod
    def from_dict(data):
        '''
        Creates a ground network from its JSON-compatible representation::

            {"hard_weight": 1e6,
             "predicates": {"Smokes/1": ["person"]},
             "functions": {"mother/1": ["person", ["person"]]},
             "clauses": [{"text": "!Smokes(x) v Cancer(x)", "hard": false}],
             "atoms": [{"id": 1, "signature": "Smokes/1", "text": "Smokes(Anna)"}],
             "constraints": [{"id": 0, "literals": [-1, 2]}],
             "dependencies": {"0": {"0": 1}}}
        '''
        try:
            clauses = [Clause(i, c['text'], c.get('hard', False)) for i, c in enumerate(data['clauses'])]
            atoms = [GroundAtom(int(a['id']), a['signature'], a.get('state', False), a.get('text')) for a in data['atoms']]
            constraints = [GroundConstraint(int(c['id']), [int(l) for l in c['literals']], c.get('weight', 0.)) for c in data['constraints']]
        except KeyError as e:
            raise NetworkError('Missing field in ground network: %s' % e)
        dependencies = None
        if data.get('dependencies') is not None:
            dependencies = DependencyMap(OrderedDict((int(k), v) for k, v in data['dependencies'].items()))
        functions = OrderedDict((sig, (f[0], list(f[1]))) for sig, f in data.get('functions', {}).items())
        schema = Schema(data.get('predicates', {}), functions)
        return GroundNetwork(clauses, atoms, constraints, dependencies, schema, data.get('hard_weight', HARD_WEIGHT))


def load_network(path):
    logger.debug('loading ground network from %s' % path)
    with open(path) as f:
        return GroundNetwork.from_dict(json.load(f, object_pairs_hook=OrderedDict))
