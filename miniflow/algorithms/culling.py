import logging

import numpy as np

from ..lattice import SOLID, FLUID, VISIBLE_COMBINED, VISIBLE_ISOLATED
from ..utils import AXIAL, inside

logger = logging.getLogger(__name__)

'''
The viewer looks at the cube from above, with the j == n-1 face on the left
and the k == 0 face on the right. Every line of sight enters through one of
those three faces and runs diagonally into the cube along DIRECTION.
'''
DIRECTION = (1, -1, 1)

# target : (material that blocks the view, flag given to what is seen)
TARGETS = {
    'combined': (SOLID | FLUID, VISIBLE_COMBINED),
    'solid': (SOLID, VISIBLE_ISOLATED),
    'fluid': (FLUID, VISIBLE_ISOLATED),
}


def target_flags(target):
    try:
        return TARGETS[target]
    except KeyError:
        raise ValueError("unknown target {!r}, expected one of {}".format(
            target, sorted(TARGETS)))


def visible_faces(n):
    '''
    mask of the voxels on the three faces turned towards the viewer. each of
    them starts exactly one line of sight, 3n^2 - 3n + 1 in total
    '''
    mask = np.zeros([n, n, n], dtype=bool)
    if n:
        mask[0] = True
        mask[:,-1] = True
        mask[:,:,0] = True
    return mask


def ray_scan(lattice, target):
    '''
    Walks every line of sight from its entry voxel until it meets a voxel of
    the target material, which gets flagged, or until it leaves the lattice.
    No line flags more than one voxel.

    Lines never cross, so instead of walking them one by one all of them are
    advanced together as index arrays, dropping each as soon as it hits.

    returns the number of voxels flagged
    '''
    material, flag = target_flags(target)
    n = lattice.order
    state = lattice._state
    di, dj, dk = DIRECTION

    i, j, k = np.nonzero(visible_faces(n))
    marked = 0
    while i.size:
        hit = (state[i, j, k] & material).astype(bool)
        state[i[hit], j[hit], k[hit]] |= flag
        marked += int(np.count_nonzero(hit))

        i, j, k = i[~hit] + di, j[~hit] + dj, k[~hit] + dk
        staying = (0 <= i) & (i < n) & (0 <= j) & (j < n) & (0 <= k) & (k < n)
        i, j, k = i[staying], j[staying], k[staying]

    logger.debug("ray scan for %s flagged %d voxel(s)", target, marked)
    return marked


def region_flood(lattice, target):
    '''
    Floods the space the viewer can see through, everything that is not the
    target material, starting from the three visible faces. Target voxels
    touched by the flood are flagged and stop it.

    The visited mask belongs to this pass alone and is thrown away with it.

    returns the number of voxels flagged
    '''
    material, flag = target_flags(target)
    n = lattice.order
    state = lattice._state
    visited = np.zeros(state.shape, dtype=bool)

    stack = [tuple(ijk) for ijk in np.argwhere(visible_faces(n)).tolist()]
    marked = 0
    while stack:
        i, j, k = stack.pop()
        if not inside(n, i, j, k):
            continue
        if visited[i, j, k]:
            continue
        visited[i, j, k] = True
        if state[i, j, k] & material:
            state[i, j, k] |= flag
            marked += 1
            continue
        for oi, oj, ok in AXIAL:
            stack.append((i+oi, j+oj, k+ok))

    logger.debug("region flood for %s flagged %d voxel(s)", target, marked)
    return marked


STRATEGIES = {
    'ray': ray_scan,
    'region': region_flood,
}


def cull(lattice, strategy='ray'):
    '''
    Runs the three visibility sweeps (both materials together, solid alone,
    fluid alone) and returns how many voxels each one flagged.
    '''
    try:
        sweep = STRATEGIES[strategy]
    except KeyError:
        raise ValueError("unknown culling strategy {!r}, expected one of {}".format(
            strategy, sorted(STRATEGIES)))

    counts = {}
    for target in ('combined', 'solid', 'fluid'):
        counts[target] = sweep(lattice, target)
    return counts
