'''
usage: python flow.py n p [--no-cull] [--gravity] [--seed S] [--out FILE]

Pours fluid through an n*n*n lattice of blocks placed with probability p and
shows both materials, the blocks alone and the fluid alone.
'''
import argparse
import logging

import matplotlib.pyplot as plt
import miniflow as mini

parser = argparse.ArgumentParser(description=__doc__.strip().split('\n')[0])
parser.add_argument('n', type=int, help="size of the system (n x n x n)")
parser.add_argument('p', type=float, help="probability of a block being occupied")
parser.add_argument('--no-cull', action='store_true', help="draw every voxel")
parser.add_argument('--gravity', action='store_true', help="fluid never flows upwards")
parser.add_argument('--seed', type=int, default=None)
parser.add_argument('--out', default=None, help="save to file instead of showing")
parser.add_argument('-v', '--verbose', action='store_true')
args = parser.parse_args()

mini.setup_logging(logging.DEBUG if args.verbose else logging.INFO)

try:
    sim = mini.FlowSimulation.random(args.n, args.p, args.seed,
                                     gravity=args.gravity, cull=not args.no_cull)
except mini.InvalidParameter as error:
    parser.error(str(error))

print(sim.lattice)
print("porosity: {:.3f}, saturation: {:.3f}, percolates: {}".format(
    sim.porosity, sim.saturation, sim.percolates))

if sim.lattice.order:
    if args.out:
        mini.graphics.save(sim.lattice, args.out, culled=not args.no_cull)
    else:
        mini.graphics.render(sim.lattice, culled=not args.no_cull)
        plt.show()
