'''
Construction of small ground networks for tests.
'''

import random

from marginmln.mln.annotation import AnnotationDB
from marginmln.mln.constants import TRUE, FALSE
from marginmln.mln.network import Clause, GroundAtom, GroundConstraint, DependencyMap, GroundNetwork


def make_network(clauses, atoms, constraints, dependencies, **kwargs):
    '''
    clauses:        list of (text, hard) tuples
    atoms:          list of (id, signature) tuples
    constraints:    dict constraint id -> literals
    dependencies:   dict constraint id -> {clause index: frequency}, or None
    '''
    return GroundNetwork(
        [Clause(i, text, hard) for i, (text, hard) in enumerate(clauses)],
        [GroundAtom(idx, sig) for idx, sig in atoms],
        [GroundConstraint(cidx, lits) for cidx, lits in constraints.items()],
        DependencyMap(dependencies) if dependencies is not None else None,
        **kwargs)


def set_states(network, states):
    with network.state_sweep() as writer:
        for idx, value in states.items():
            writer[idx] = value


def random_network(seed, unit=False, clauses=(1, 4), atoms=(2, 6)):
    '''
    Random soft network with random atom states. `clauses` and `atoms`
    bound the number of clauses and ground atoms.
    '''
    rnd = random.Random(seed)
    nclauses = rnd.randint(*clauses)
    natoms = rnd.randint(*atoms)
    constraints = {}
    dependencies = {}
    for cidx in range(rnd.randint(1, 10)):
        lits = rnd.sample(range(1, natoms + 1), rnd.randint(1, min(3, natoms)))
        constraints[cidx] = [a if rnd.random() < .5 else -a for a in lits]
        deps = rnd.sample(range(nclauses), rnd.randint(1, nclauses))
        freqs = (-1, 1) if unit else (-3, -2, -1, 1, 2, 3)
        dependencies[cidx] = dict((c, rnd.choice(freqs)) for c in deps)
    network = make_network([('C%d' % i, False) for i in range(nclauses)],
                           [(i, 'Q/1') for i in range(1, natoms + 1)],
                           constraints, dependencies)
    set_states(network, dict((i, rnd.random() < .5) for i in range(1, natoms + 1)))
    return network


def random_annotation(network, seed):
    rnd = random.Random(seed)
    return AnnotationDB({'Q/1': dict((idx, TRUE if rnd.random() < .5 else FALSE) for idx in network.atoms)})
