import matplotlib
import numpy as np
import pytest
import miniflow as mini

matplotlib.use('Agg')

sim = mini.FlowSimulation.random(6, 0.4, 17)

def test_painter_order():
    ijk = mini.graphics.draw_list(sim.lattice, 'combined', culled=False)
    keys = [(-i, j, -k) for i, j, k in ijk.tolist()]
    assert keys == sorted(keys)
    assert len(ijk) == sim.lattice.occupied.sum()

def test_culling_only_removes():
    for view in mini.graphics.VIEWS:
        everything = {tuple(v) for v in mini.graphics.draw_list(sim.lattice, view, culled=False).tolist()}
        visible = {tuple(v) for v in mini.graphics.draw_list(sim.lattice, view).tolist()}
        assert visible <= everything

def test_views_split_materials():
    for i, j, k in mini.graphics.draw_list(sim.lattice, 'solid').tolist():
        assert sim.lattice.is_solid(i, j, k)
    for i, j, k in mini.graphics.draw_list(sim.lattice, 'fluid').tolist():
        assert sim.lattice.is_fluid(i, j, k)

def test_polygons():
    vertices, colors = mini.graphics.polygons(sim.lattice, 'combined')
    count = len(mini.graphics.draw_list(sim.lattice, 'combined'))
    assert vertices.shape == (3*count, 4, 2)
    assert len(colors) == 3*count

def test_nothing_to_draw():
    dry = mini.FlowSimulation.random(4, 1, 0)
    vertices, colors = mini.graphics.polygons(dry.lattice, 'fluid')
    assert vertices.shape == (0, 4, 2)
    assert colors == []

def test_render_and_save(tmp_path):
    import matplotlib.pyplot as plt
    fig = mini.graphics.render(sim.lattice)
    assert len(fig.axes) == 3
    assert all(len(ax.collections) == 1 for ax in fig.axes)
    plt.close(fig)
    target = tmp_path / 'flow.png'
    mini.graphics.save(sim.lattice, str(target), views=('fluid',), culled=False)
    assert target.stat().st_size > 0

if __name__ == '__main__':
    pytest.main(__file__)
