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

from marginmln import mlnlog
from marginmln.mln.constants import TRUE, FALSE, UNKNOWN
from marginmln.mln.errors import AnnotationError


logger = mlnlog.logger(__name__)


def truthvalue(value):
    '''
    Converts the JSON representation of an annotation into one of
    TRUE, FALSE or UNKNOWN.
    '''
    if value is True or value == 1:
        return TRUE
    if value is False or value == 0:
        return FALSE
    if value is None:
        return UNKNOWN
    v = str(value).upper()
    if v in (TRUE, FALSE, UNKNOWN):
        return v
    raise AnnotationError('Illegal annotation value: %r' % value)


class AnnotationDB(object):
    '''
    Ground truth values of the non-evidence atoms, stored per atom
    signature (e.g. "Cancer/1") as a dict mapping atom ids to TRUE, FALSE
    or UNKNOWN.
    '''

    def __init__(self, dbs=None):
        self._dbs = {}
        for signature, db in (dbs or {}).items():
            self._dbs[signature] = dict((int(k), truthvalue(v)) for k, v in db.items())

    @property
    def signatures(self):
        return list(self._dbs)

    def __getitem__(self, signature):
        return self._dbs[signature]

    def lookup(self, atom):
        '''
        Returns the annotation of the given ground atom. Raises an
        :class:`AnnotationError` if there is no annotation for the atom.
        '''
        db = self._dbs.get(atom.signature)
        if db is None:
            raise AnnotationError('No annotation given for atoms of signature %s' % atom.signature)
        value = db.get(atom.idx)
        if value is None:
            raise AnnotationError('No annotation given for ground atom %s' % atom)
        return value

    def count(self, value):
        return sum(1 for db in self._dbs.values() for v in db.values() if v == value)

    @staticmethod
    def from_dict(data):
        return AnnotationDB(data)


def load_annotation(path):
    logger.debug('loading annotation from %s' % path)
    with open(path) as f:
        return AnnotationDB.from_dict(json.load(f))
