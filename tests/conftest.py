import pytest

from marginmln.mln.annotation import AnnotationDB
from marginmln.mln.constants import TRUE, FALSE
from marginmln.mln.network import Schema

from tests.networks import make_network


@pytest.fixture
def unit_network():
    '''A single soft unit clause Q(x) over two atoms.'''
    return make_network(
        [('Q(x)', False)],
        [(1, 'Q/1'), (2, 'Q/1')],
        {0: [1], 1: [2]},
        {0: {0: 1}, 1: {0: 1}},
        schema=Schema({'Q/1': ['dom']}))


@pytest.fixture
def unit_annotation():
    return AnnotationDB({'Q/1': {1: TRUE, 2: TRUE}})


@pytest.fixture
def hard_network():
    '''Soft clause 0 and hard clause 1, three ground constraints.'''
    return make_network(
        [('Q(x)', False), ('!Q(x) v R(x)', True)],
        [(1, 'Q/1'), (2, 'Q/1'), (3, 'R/1')],
        {0: [1], 1: [2], 2: [-1, 3]},
        {0: {0: 1}, 1: {0: 1}, 2: {1: 1}},
        schema=Schema({'Q/1': ['dom'], 'R/1': ['dom']}),
        hard_weight=1e6)


@pytest.fixture
def hard_annotation():
    return AnnotationDB({'Q/1': {1: TRUE, 2: TRUE}, 'R/1': {3: TRUE}})


@pytest.fixture
def mixed_annotation():
    return AnnotationDB({'Q/1': {1: TRUE, 2: FALSE}})
