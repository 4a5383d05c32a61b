import pytest

from nanocalc.config import INPUT_RANGES, Scene, SpectrumRange, load_scene
from nanocalc.core.types import OutOfRange, RefractiveIndex


def test_scene_defaults():
    scene = Scene()
    assert scene.radius == 50.0
    assert scene.wavelength == 500.0
    assert scene.n_particle == RefractiveIndex(0.5, 2.5)
    assert scene.n_medium == 1.33
    assert scene.backend == 'serial'
    scene.check_ranges()


def test_default_spectrum_grid():
    wls = SpectrumRange().wavelengths()
    assert len(wls) == 101
    assert wls[0] == 300.0 and wls[-1] == 800.0
    assert SpectrumRange(400, 402, 0.5).wavelengths() == [400.0, 400.5, 401.0, 401.5, 402.0]
    with pytest.raises(ValueError):
        SpectrumRange(300, 800, 0).wavelengths()
    with pytest.raises(ValueError):
        SpectrumRange(800, 300, 5).wavelengths()


@pytest.mark.parametrize("value, expected", [
    ({'n': 1.5, 'k': 0.1}, RefractiveIndex(1.5, 0.1)),
    ({'n': 2.0}, RefractiveIndex(2.0, 0.0)),
    ([0.47, 2.40], RefractiveIndex(0.47, 2.40)),
    (1.45, RefractiveIndex(1.45, 0.0)),
])
def test_particle_index_forms(value, expected):
    assert Scene.from_dict({'n_particle': value}).n_particle == expected


def test_material_preset_and_conflicts():
    scene = Scene.from_dict({'material': 'Ag', 'radius': 20})
    assert scene.n_particle == RefractiveIndex(0.05, 3.00)
    assert scene.radius == 20.0
    with pytest.raises(ValueError):
        Scene.from_dict({'material': 'Au', 'n_particle': 1.5})
    with pytest.raises(ValueError):
        Scene.from_dict({'material': 'Unobtainium'})
    with pytest.raises(ValueError):
        Scene.from_dict({'thickness': 3})
    with pytest.raises(ValueError):
        Scene.from_dict({'n_particle': {'k': 1.0}})
    with pytest.raises(ValueError):
        Scene.from_dict({'spectrum': [300, 800]})


@pytest.mark.parametrize("key, value", [
    ('radius', 0.5),
    ('radius', 5000.0),
    ('wavelength', 100.0),
    ('n_medium', 0.9),
])
def test_check_ranges_rejects(key, value):
    scene = Scene.from_dict({key: value})
    with pytest.raises(OutOfRange) as exc:
        scene.check_ranges()
    lo, hi = INPUT_RANGES[key]
    assert exc.value.min == lo and exc.value.max == hi
    assert exc.value.value == value


def test_spectrum_bounds_checked():
    scene = Scene.from_dict({'spectrum': {'start': 150, 'stop': 800, 'step': 5}})
    with pytest.raises(OutOfRange):
        scene.check_ranges()


def test_load_scene_from_yaml(tmp_path):
    path = tmp_path / "scene.yaml"
    path.write_text(
        "radius: 20\n"
        "wavelength: 520\n"
        "material: Au\n"
        "n_medium: 1.33\n"
        "spectrum: {start: 400, stop: 600, step: 10}\n"
        "backend: thread\n",
        encoding="utf-8",
    )
    scene = load_scene(str(path))
    assert scene.backend == 'thread'
    assert len(scene.spectrum.wavelengths()) == 21
    model = scene.to_model()
    assert model.radius == 20.0
    assert model.n_particle == RefractiveIndex(0.47, 2.40)
    assert model.calculate().wavelength == 520.0


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_scene(str(path)) == Scene()


@pytest.mark.parametrize("data", [
    {'spectrum': {'begin': 300}},
    {'spectrum': {'start': 'low'}},
    {'radius': [1, 2]},
    {'n_particle': {'n': 'gold'}},
    [10, 20],
])
def test_malformed_scene_values_are_value_errors(data):
    with pytest.raises(ValueError):
        Scene.from_dict(data)


def test_malformed_yaml_is_value_error(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("radius: [1, 2\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Malformed scene file"):
        load_scene(str(path))
