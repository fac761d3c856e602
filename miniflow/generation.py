import logging
import math
import numbers

from . import utils
from .lattice import Lattice, SOLID

logger = logging.getLogger(__name__)


class InvalidParameter(ValueError):
    msg = "{name} must be {rule}, got {value!r}"
    def __init__(self, name, value, rule):
        self.name = name
        self.value = value
        self.rule = rule
    def __str__(self):
        return self.msg.format(**vars(self))


def validate(n, p):
    '''
    checks the construction parameters and returns them as (int, float).
    nothing is allocated until both pass
    '''
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise InvalidParameter('n', n, 'an integer')
    if n < 0:
        raise InvalidParameter('n', n, 'non-negative')
    try:
        p = float(p)
    except (TypeError, ValueError):
        raise InvalidParameter('p', p, 'a real number')
    if math.isnan(p) or not 0 <= p <= 1:
        raise InvalidParameter('p', p, 'between 0 and 1')
    return int(n), p


def build(n, p, random_state=None):
    '''
    Returns an n*n*n lattice in which every voxel is, independently of all
    the others, solid with probability p and empty otherwise.

    random_state : None, an integer seed, or a numpy RandomState/Generator
    '''
    n, p = validate(n, p)
    source = utils.random_source(random_state)

    lattice = Lattice(n)
    # uniform draws in [0, 1), so p == 0 never fills and p == 1 always does
    lattice.mark(SOLID, source.random((n, n, n)) < p)

    logger.debug("built %r with %d solid voxel(s) at p=%g",
                 lattice, lattice.counts()['solid'], p)
    return lattice
