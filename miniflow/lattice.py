import numpy as np

from . import utils

# voxel attributes, one bit each. a voxel may carry several at once
EMPTY = 0
SOLID = 1
FLUID = 2
VISIBLE_COMBINED = 4
VISIBLE_ISOLATED = 8

NAMES = [
    ('solid', SOLID),
    ('fluid', FLUID),
    ('visible_combined', VISIBLE_COMBINED),
    ('visible_isolated', VISIBLE_ISOLATED),
]


class ExclusiveMaterials(Exception):
    msg = "{} voxel(s) would be both solid and fluid"
    def __init__(self, count):
        self.count = count
    def __str__(self):
        return self.msg.format(self.count)


class Lattice(object):
    '''
    A lattice is an n*n*n block of voxels, stored as a single uint8 array in
    which every attribute is one bit. `i` is the vertical axis, with i == 0 the
    top layer, while `j` and `k` run horizontally.

    Attributes are only ever added. Solid is decided once at generation, fluid
    is poured in afterwards and can never enter a solid voxel, and the
    visibility bits come last. `state` is a read-only view; writing goes
    through `mark`, except for the engines, which OR their bits into `_state`
    after doing the same checks themselves.
    '''
    solid = utils.flag_property(SOLID)
    fluid = utils.flag_property(FLUID)
    visible_combined = utils.flag_property(VISIBLE_COMBINED)
    visible_isolated = utils.flag_property(VISIBLE_ISOLATED)

    def __init__(self, n):
        self._state = np.zeros([n, n, n], dtype=np.uint8)

    @classmethod
    def from_array(cls, solid):
        solid = np.asarray(solid, dtype=bool)
        if solid.ndim != 3 or len(set(solid.shape)) > 1:
            raise ValueError("lattice must be cubic, got shape {}".format(solid.shape))
        inst = cls(len(solid))
        inst._state[solid] = SOLID
        return inst

    @property
    def state(self):
        view = self._state.view()
        view.flags.writeable = False
        return view

    @property
    def order(self):
        return len(self.state)

    @property
    def shape(self):
        return self.state.shape

    @property
    def size(self):
        return self.state.size

    @property
    def occupied(self):
        return (self.state & (SOLID | FLUID)).astype(bool)

    @property
    def empty(self):
        return ~self.occupied

    def has(self, flag, i, j, k):
        return bool(self.state[i, j, k] & flag)

    def is_solid(self, i, j, k):
        return self.has(SOLID, i, j, k)

    def is_fluid(self, i, j, k):
        return self.has(FLUID, i, j, k)

    def is_empty(self, i, j, k):
        return not self.has(SOLID | FLUID, i, j, k)

    def is_visible_combined(self, i, j, k):
        return self.has(VISIBLE_COMBINED, i, j, k)

    def is_visible_isolated(self, i, j, k):
        return self.has(VISIBLE_ISOLATED, i, j, k)

    def contains(self, i, j, k):
        return utils.inside(self.order, i, j, k)

    def mark(self, flag, where):
        '''
        sets `flag` on the voxels selected by `where`, which can be anything
        numpy accepts as an index: a boolean mask, an (i, j, k) tuple, or a
        tuple of index arrays
        '''
        if flag & SOLID and flag & FLUID:
            raise ExclusiveMaterials(np.size(self._state[where]))
        for material, other in [(FLUID, SOLID), (SOLID, FLUID)]:
            if flag & material:
                clash = np.count_nonzero(self._state[where] & other)
                if clash:
                    raise ExclusiveMaterials(clash)
        self._state[where] |= flag

    def counts(self):
        return {name: int(np.count_nonzero(self.state & flag)) for name, flag in NAMES}

    def copy(self):
        inst = self.__class__.__new__(self.__class__)
        inst._state = self._state.copy()
        return inst

    def __repr__(self):
        return self.__class__.__name__+str(self.order)

    def __str__(self):
        entries = [self.__class__.__name__]
        for name, count in sorted(self.counts().items()):
            entries.append('{:<17}: {:<10}'.format(name, count))
        return '<'+'\n\t'.join(entries)+\
            '\nOrder: {}, Size: {}>'.format(self.order, self.size)
