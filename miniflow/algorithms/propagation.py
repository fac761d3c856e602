import logging
import warnings

import numpy as np
from scipy import ndimage

from .. import config
from ..lattice import SOLID, FLUID
from ..utils import AXIAL, inside

logger = logging.getLogger(__name__)


def entry_layer(entry, n):
    if entry == 'top':
        return 0
    if entry == 'bottom':
        return n-1
    raise ValueError("entry face must be 'top' or 'bottom', got {!r}".format(entry))


def spreading(entry, gravity=False):
    '''
    the axis offsets fluid spreads along. with gravity on, fluid never moves
    back towards the face it was poured into
    '''
    if not gravity:
        return list(AXIAL)
    upward = (-1,0,0) if entry == 'top' else (1,0,0)
    return [offset for offset in AXIAL if offset != upward]


def reachable(lattice, entry=None):
    '''
    Boolean mask of the non-solid voxels connected to the entry face through
    six-connected non-solid voxels. The lattice is left untouched.

    The same set the work-list flood produces, obtained by labelling the open
    space in one go instead of walking it.
    '''
    entry = config.ENTRY_FACE if entry is None else entry
    n = lattice.order
    layer = entry_layer(entry, n)
    if n == 0:
        return np.zeros(lattice.shape, dtype=bool)

    open_space = ~lattice.solid
    structure = ndimage.generate_binary_structure(3, 1)
    labels, _ = ndimage.label(open_space, structure=structure)
    sources = np.unique(labels[layer][open_space[layer]])
    return np.isin(labels, sources)


def flood(lattice, entry=None, gravity=False, method='stack'):
    '''
    Pours fluid into every non-solid voxel of the entry face and lets it run
    into every non-solid voxel it can reach, marking them FLUID.

    The traversal keeps its own last-in-first-out work-list on the heap, so
    arbitrarily long and twisted channels cost memory, never recursion depth.
    Voxels are pushed without checks and filtered when popped; each voxel can
    only be filled once, which bounds the work.

    entry   : 'top' (i == 0) or 'bottom' (i == n-1)
    gravity : forbid flow back towards the entry face
    method  : 'stack' walks the work-list, 'label' uses `reachable`

    returns the number of voxels filled by this call
    '''
    entry = config.ENTRY_FACE if entry is None else entry
    n = lattice.order
    layer = entry_layer(entry, n)

    if method == 'label':
        if gravity:
            raise ValueError("gravity flow has no labelling equivalent")
        fresh = reachable(lattice, entry) & ~lattice.fluid
        lattice.mark(FLUID, fresh)
        filled = int(np.count_nonzero(fresh))
        logger.debug("labelling flood filled %d voxel(s)", filled)
        return filled
    elif method != 'stack':
        raise ValueError("unknown flood method {!r}".format(method))

    if n == 0:
        return 0
    if lattice.size > config.LARGE_LATTICE:
        warnings.warn("flooding {} voxels one at a time, consider method='label'".format(lattice.size))

    state = lattice._state
    offsets = spreading(entry, gravity)
    stack = [(layer, j, k) for j, k in np.argwhere(~lattice.solid[layer]).tolist()]

    filled = 0
    while stack:
        i, j, k = stack.pop()
        if not inside(n, i, j, k):
            continue
        if state[i, j, k] & (SOLID | FLUID):
            continue
        state[i, j, k] |= FLUID
        filled += 1
        for di, dj, dk in offsets:
            stack.append((i+di, j+dj, k+dk))

    logger.debug("flood from %s filled %d voxel(s)", entry, filled)
    return filled
