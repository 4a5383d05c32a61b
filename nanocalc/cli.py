import argparse
import json
import logging
import sys
from typing import Any, Dict, List

from nanocalc.config import load_scene
from nanocalc.core.types import CalculationError
from nanocalc.solve.sweep import Sweep

logger = logging.getLogger(__name__)


def _records(grid) -> List[Dict[str, Any]]:
    return [r.to_dict() for r in grid]


def main(argv=None):
    parser = argparse.ArgumentParser(prog="nanocalc", description="Nanoparticle optical properties calculator")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="cmd")

    p_sim = sub.add_parser("sim", help="Run a calculation from a YAML scene file")
    p_sim.add_argument("scene", help="Path to scene YAML file")
    p_sim.add_argument("--spectrum", action="store_true", help="Evaluate the scene's wavelength range")
    p_sim.add_argument("--backend", default=None, help="Sweep backend (serial, thread, loky, process)")

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    if args.cmd == "sim":
        try:
            scene = load_scene(args.scene)
            scene.check_ranges()
        except (OSError, ValueError) as e:
            logger.error("Invalid scene '%s': %s", args.scene, e)
            return 2

        model = scene.to_model()
        for msg in model.warnings():
            logger.warning(msg)

        try:
            if args.spectrum:
                sweep = Sweep({'wavelength': scene.spectrum.wavelengths()},
                              backend=args.backend or scene.backend)
                payload: Any = {
                    'model': model.name(),
                    'parameters': model.cache_params(),
                    'spectrum': _records(sweep.run(model)),
                }
            else:
                payload = {
                    'model': model.name(),
                    'parameters': model.cache_params(),
                    'result': model.calculate().to_dict(),
                    'warnings': model.warnings(),
                }
        except (CalculationError, ValueError) as e:
            logger.error("Calculation failed: %s", e)
            return 1

        json.dump(payload, sys.stdout, indent=2)
        sys.stdout.write("\n")
        return 0

    parser.print_help()
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
