import importlib


def test_facade_basic_import_and_objects():
    nc = importlib.import_module("nanocalc")

    for name in ("RayleighModel", "RefractiveIndex", "Sweep", "simulate", "constants", "Scene"):
        assert hasattr(nc, name)
    for name in nc.__all__:
        assert hasattr(nc, name)

    model = nc.RayleighModel(10.0, 500.0, nc.RefractiveIndex(1.5, 0.0), 1.0)
    assert isinstance(model, nc.OpticalModel)
    assert model.name() == "Mie Scattering (Rayleigh Approximation)"
