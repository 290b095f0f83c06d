from __future__ import annotations


def test_sanity_import() -> None:
    import numpy as np
    import rigid_inertia as ri

    assert isinstance(ri.__version__, str)
    assert np.add(1.0, 2.0) == 3.0
    assert ri.MassProperties().mass == 1.0
