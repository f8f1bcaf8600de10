from demos.delta_resample_demo import build_demo_path, run_delta_resample_demo, step_lengths
from demos.hull_obb_demo import run_hull_obb_demo
from flatgeom.core.constants import EPS_GEOM


def test_hull_obb_demo(tmp_path):
    out = tmp_path / 'demo_hull.png'
    hull, area = run_hull_obb_demo(npts=80, angle_deg=20.0, seed=1, out=str(out))
    assert hull.shape[0] >= 3
    assert area > 0.0
    assert out.exists()


def test_delta_resample_demo(tmp_path):
    out = tmp_path / 'demo_delta.png'
    resampled = run_delta_resample_demo(max_delta=0.3, out=str(out))
    assert len(resampled) > len(build_demo_path())
    assert step_lengths(resampled).max() <= 0.3 + EPS_GEOM
    assert out.exists()
