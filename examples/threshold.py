import time
import numpy as np
import matplotlib.pyplot as plt
import miniflow as mini

'''
fraction of random lattices in which the fluid reaches the bottom, as the
block probability goes up. the drop sits near the site percolation threshold
of the simple cubic lattice (open fraction ~0.31)
'''

n, trials = 20, 30
probabilities = np.linspace(0, 1, 21)
rng = np.random.RandomState(44)

t0 = time.time()
fractions = []
for p in probabilities:
    hits = 0
    for _ in range(trials):
        sim = mini.FlowSimulation.random(n, p, rng, method='label', cull=False)
        hits += sim.percolates
    fractions.append(hits / trials)
tt = time.time()-t0

plt.plot(probabilities, fractions, 'o-')
plt.xlabel('p (block probability)')
plt.ylabel('fraction percolating')
plt.title("{} lattices of {}^3 in {:.1f}s".format(len(probabilities)*trials, n, tt))
plt.show()
