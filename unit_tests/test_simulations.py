import numpy as np
import pytest
import miniflow as mini

sim = mini.FlowSimulation.random(8, 0.35, 3)

def test_history_per_stage():
    assert sim.stages == ['build', 'flood', 'cull']
    assert sim.step == 2
    assert sim.history.shape == (3, 8, 8, 8)
    np.testing.assert_array_equal(sim.state, sim.lattice.state)

def test_stages_only_add():
    history = sim.history
    for before, after in zip(history[:-1], history[1:]):
        assert not (before & ~after).any()
    # build only places solids, flood only adds fluid
    assert not (history[0] & ~np.uint8(mini.SOLID)).any()
    np.testing.assert_array_equal(history[1] & ~np.uint8(mini.FLUID), history[0])

def test_clearing_refused():
    other = mini.FlowSimulation.random(4, 0.5, 1)
    with pytest.raises(other.NonMonotonicChange) as info:
        other.state = np.zeros([4,4,4], dtype=np.uint8)
    assert 'cull' in str(info.value)
    assert other.step == 2

def test_culling_can_be_skipped():
    raw = mini.FlowSimulation.random(8, 0.35, 3, cull=False)
    assert raw.stages == ['build', 'flood']
    assert not raw.lattice.visible_combined.any()
    np.testing.assert_array_equal(raw.lattice.fluid, sim.lattice.fluid)

def test_counts():
    assert sim.counts['flood'] == sim.lattice.fluid.sum()
    assert sim.counts['cull']['combined'] == sim.lattice.visible_combined.sum()

def test_region_strategy_and_label_method():
    alt = mini.FlowSimulation.random(8, 0.35, 3, method='label', strategy='region')
    np.testing.assert_array_equal(alt.lattice.fluid, sim.lattice.fluid)
    assert alt.lattice.visible_combined.any()

def test_summary_properties():
    hollow = mini.FlowSimulation.random(5, 0)
    assert hollow.porosity == 1
    assert hollow.saturation == 1
    assert hollow.percolates
    packed = mini.FlowSimulation.random(5, 1)
    assert packed.porosity == 0
    assert packed.saturation == 0
    assert not packed.percolates
    assert 0 <= sim.saturation <= 1

def test_percolation_direction():
    solid = np.zeros([4,4,4], dtype=bool)
    solid[2] = True
    assert not mini.FlowSimulation(mini.Lattice.from_array(solid)).percolates
    assert not mini.FlowSimulation(mini.Lattice.from_array(solid), entry='bottom').percolates
    solid[2,1,1] = False
    assert mini.FlowSimulation(mini.Lattice.from_array(solid)).percolates

def test_empty_run():
    empty = mini.FlowSimulation.random(0, 0.5)
    assert empty.history.shape == (3, 0, 0, 0)
    assert empty.porosity == 0
    assert empty.saturation == 0
    assert not empty.percolates

def test_invalid_parameters():
    with pytest.raises(mini.InvalidParameter):
        mini.FlowSimulation.random(-2, 0.5)

if __name__ == '__main__':
    pytest.main(__file__)
