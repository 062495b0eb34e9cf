'''
Inference oracles for small test networks.
'''

import itertools

from marginmln.mln.constants import TRUE, FALSE
from marginmln.mln.errors import InferenceError
from marginmln.mln.inference.oracle import MAPOracle


class ExhaustiveMAP(MAPOracle):
    '''
    Enumerates all truth assignments and returns the first one with the
    highest sum of satisfied constraint weights, plus the Hamming loss if
    an annotation is given.
    '''

    def __init__(self):
        self.calls = []

    def infer(self, network, annotation=None):
        self.calls.append(annotation)
        atoms = list(network.atoms.values())
        best, bestscore = None, None
        for values in itertools.product((False, True), repeat=len(atoms)):
            world = dict(zip((a.idx for a in atoms), values))
            score = 0.
            for c in network.constraints.values():
                if any((lit > 0) == world[abs(lit)] for lit in c.literals):
                    score += c.weight
            if annotation is not None:
                for a in atoms:
                    v = annotation.lookup(a)
                    if (world[a.idx] and v == FALSE) or (not world[a.idx] and v == TRUE):
                        score += 1
            if bestscore is None or score > bestscore:
                best, bestscore = world, score
        return best


class FailingOracle(MAPOracle):

    def infer(self, network, annotation=None):
        raise InferenceError('solver reported an infeasible problem')


class PartialOracle(MAPOracle):
    '''Returns an assignment for the first atom only.'''

    def infer(self, network, annotation=None):
        first = next(iter(network.atoms))
        return {first: False}
