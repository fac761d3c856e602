import numpy as np

'''
config houses the constants every stage falls back on when a keyword is not
given. Nothing here is read from the environment; override per call instead.
'''

# vertical index of the layer the fluid is poured into. 'top' is i == 0
ENTRY_FACE = 'top'

# isometric projection
ANGLE = np.pi/6
MARGIN = 0.05

# above this many voxels the pure python work-lists get slow
LARGE_LATTICE = 200**3

# face colours as (left, right, top) per material
COLORS = {
    'solid': ('gray', 'black', 'dimgray'),
    'fluid': ('#67c6f3', '#095aa6', '#67c6f3'),
}
BACKGROUND = '#96231f'
