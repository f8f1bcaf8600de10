"""Smoke test to ensure top-level package import works and exposes the
kernel through the flat API layer (`flatgeom/__init__.py`).
"""

def test_import_flatgeom_smoke():
    import flatgeom  # noqa: F401
    for name in ('convex_hull', 'minimum_oriented_bounding_box', 'intersect_lines',
                 'intersect_segments', 'delta_resample', 'DeltaPathIterator', 'EPS_GEOM'):
        assert hasattr(flatgeom, name)
    assert set(flatgeom.__all__) <= set(dir(flatgeom))


def test_facade_keeps_plotting_separate():
    import flatgeom
    assert not hasattr(flatgeom, 'plot_hull_and_box')
    assert 'visualization' not in flatgeom.__all__


def test_eps_geom_is_widened_float32():
    import flatgeom
    assert isinstance(flatgeom.EPS_GEOM, float)
    assert 9.9e-09 < flatgeom.EPS_GEOM < 1.0e-08


def test_facade_exposes_shape_builders():
    import flatgeom
    for name in ('create_star_shape', 'ArrowCreator', 'interpolate', 'WindingRule'):
        assert name in flatgeom.__all__
    assert isinstance(flatgeom.arrows.create(), flatgeom.ArrowCreator)
    assert not hasattr(flatgeom, 'GeomConfig')
