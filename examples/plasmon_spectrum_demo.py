"""
Plasmon spectrum demo (no plotting).

- Sweeps wavelength (and optionally radius) for a preset material in water.
- Prints the wavelength of peak extinction per radius and the albedo there.
- Flags radii whose size parameter leaves the Rayleigh regime somewhere in the range.

Usage (default gold, r=10,20,40 nm, 300..800 nm in 5 nm steps):
    python examples/plasmon_spectrum_demo.py

Options:
    --material Au        Preset symbol or name (Au, Ag, Si, TiO2)
    --radii 10 20 40     Particle radii in nm
    --n-medium 1.33      Refractive index of the surrounding medium
    --backend serial     Sweep backend (serial, thread, loky, process)
"""
import argparse
import os
import sys
import warnings

import numpy as np

# Allow running the script directly without installing the package
_THIS_DIR = os.path.dirname(__file__)
_REPO_ROOT = os.path.abspath(os.path.join(_THIS_DIR, os.pardir))
if _REPO_ROOT not in sys.path:
    sys.path.insert(0, _REPO_ROOT)

from nanocalc.config import SpectrumRange
from nanocalc.model.material import get_preset
from nanocalc.solve.simulate import RegimeWarning, simulate


def main():
    parser = argparse.ArgumentParser(description="Extinction peak per particle radius")
    parser.add_argument("--material", default="Au")
    parser.add_argument("--radii", type=float, nargs="+", default=[10.0, 20.0, 40.0])
    parser.add_argument("--n-medium", type=float, default=1.33)
    parser.add_argument("--backend", default="serial")
    args = parser.parse_args()

    preset = get_preset(args.material)
    wavelengths = SpectrumRange().wavelengths()

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", RegimeWarning)
        grid = simulate(args.radii, wavelengths, preset.refractive_index, args.n_medium,
                        backend=args.backend)

    q_ext = grid.get('q_ext')
    print(f"{preset.name}, n = {preset.refractive_index}, medium n = {args.n_medium}")
    for i, r in enumerate(args.radii):
        j = int(np.argmax(q_ext[i]))
        peak = grid.isel(radius=i, wavelength=j)
        print(f"  r = {r:6.1f} nm  peak at {peak.wavelength:6.1f} nm  "
              f"Q_ext = {peak.q_ext:.4g}  albedo = {peak.albedo:.3f}")
    for w in caught:
        print(f"note: {w.message}")


if __name__ == "__main__":
    main()
