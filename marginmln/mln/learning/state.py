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
from marginmln.mln.constants import TRUE, FALSE
from marginmln.mln.errors import InferenceError


logger = mlnlog.logger(__name__)


class StateController(object):
    '''
    Sole writer of the truth values of the ground atoms during learning.
    Switches the network between the annotated state and the states
    computed by the inference oracle, and measures the error between them.
    '''

    def __init__(self, ctx):
        self.ctx = ctx

    def set_annotated_state(self):
        '''
        Sets every atom to true if it is annotated TRUE, to false otherwise.
        '''
        annotation = self.ctx.annotation
        with self.ctx.state_sweep() as states:
            for atom in self.ctx.atoms.values():
                states[atom.idx] = annotation.lookup(atom) == TRUE

    def apply_assignment(self, assignment):
        '''
        Sets the atoms to a complete assignment `{atom id: truth}` as
        returned by an inference oracle. Nothing is written if the
        assignment misses any atom or refers to unknown ones.
        '''
        atoms = self.ctx.atoms
        missing = [idx for idx in atoms if idx not in assignment]
        if missing:
            raise InferenceError('Inference result misses %d of %d ground atoms, e.g. %s' %
                                 (len(missing), len(atoms), atoms[missing[0]]))
        unknown = [idx for idx in assignment if idx not in atoms]
        if unknown:
            raise InferenceError('Inference result contains unknown ground atoms: %s' % unknown[:10])
        with self.ctx.state_sweep() as states:
            for idx, value in assignment.items():
                states[idx] = value

    def calculate_error(self):
        '''
        Number of atoms whose truth value disagrees with the annotation
        (Hamming distance). Atoms annotated UNKNOWN never count as errors.
        '''
        self.ctx.network.check_stable()
        annotation = self.ctx.annotation
        error = 0
        for atom in self.ctx.atoms.values():
            value = annotation.lookup(atom)
            if (atom.state and value == FALSE) or (not atom.state and value == TRUE):
                error += 1
        logger.info('Total inferred error: %d/%d' % (error, len(self.ctx.atoms)))
        return error
