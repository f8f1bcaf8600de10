import pathlib
import re

FORBIDDEN = [r"1e-8", r"1e-08", r"1\.0e-8"]
ALLOW_FILES = {
    'constants.py',  # defines the constants
}

def test_no_raw_tolerance_literals():
    root = pathlib.Path(__file__).resolve().parent.parent / 'flatgeom'
    py_files = [p for p in root.rglob('*.py') if 'tests' not in p.parts]
    pattern = re.compile('|'.join(FORBIDDEN))
    offenders = []
    for f in py_files:
        if f.name in ALLOW_FILES:
            continue
        text = f.read_text(encoding='utf-8', errors='ignore')
        for m in pattern.finditer(text):
            offenders.append((str(f.relative_to(root)), m.group(0)))
    assert not offenders, "Raw tolerance literals found (use constants.EPS_GEOM):\n" + '\n'.join(f"{f}: {lit}" for f, lit in offenders)
