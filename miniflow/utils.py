import numbers
import numpy as np

'''
utils houses software developer tools and helpers
'''

# the six axis-aligned neighbours of a voxel
AXIAL = [(1,0,0), (-1,0,0), (0,1,0), (0,-1,0), (0,0,1), (0,0,-1)]


def flag_property(flag):
    '''
    Shortcut for the process of creating thin properties that expose one bit
    of the state array as a boolean mask of the same shape
    '''
    def getter(self):
        return (self.state & flag).astype(bool)

    return property(getter)


def random_source(random_state=None):
    '''
    Anything with a numpy-like `random(size)` method is accepted as is. None
    falls back to the global numpy generator, integers are used as seeds.
    '''
    if random_state is None:
        return np.random
    if isinstance(random_state, numbers.Integral):
        return np.random.RandomState(random_state)
    return random_state


def inside(n, i, j, k):
    return 0 <= i < n and 0 <= j < n and 0 <= k < n
