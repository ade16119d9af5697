import numpy as np

from tokeq.interp.accel import Accelerator


XA = np.array([0.0, 1.0, 2.0, 3.0, 4.0])


def test_find_brackets():
    acc = Accelerator()
    assert acc.find(XA, 0.0) == 0
    assert acc.find(XA, 2.5) == 2
    assert acc.find(XA, 3.999) == 3


def test_upper_end_maps_to_last_interval():
    acc = Accelerator()
    assert acc.find(XA, 4.0) == 3


def test_hits_and_misses():
    acc = Accelerator()
    acc.find(XA, 2.2)   # miss: cache starts at interval 0
    acc.find(XA, 2.4)   # hit
    acc.find(XA, 2.9)   # hit
    acc.find(XA, 0.5)   # miss, below the cached interval
    assert (acc.hits, acc.misses) == (2, 2)
    assert acc.cache == 0


def test_reset_clears_cache_and_counters():
    acc = Accelerator()
    acc.find(XA, 3.5)
    acc.reset()
    assert (acc.cache, acc.hits, acc.misses) == (0, 0, 0)


def test_results_do_not_depend_on_cache_state():
    acc = Accelerator()
    queries = np.random.default_rng(0).uniform(0.0, 4.0, 200)
    expected = np.minimum(np.searchsorted(XA, queries, side="right") - 1, XA.size - 2)
    got = [acc.find(XA, q) for q in queries]
    assert got == expected.tolist()
