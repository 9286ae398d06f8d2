"""Tests for I/O functionality."""

import pytest
from galaxy_collision.astro import Star, Galaxy
from galaxy_collision.math import Vec3
from galaxy_collision.io.state_io import save_galaxies, load_galaxies


def make_scene():
    a = Galaxy(Vec3(-1.0, 0.5, 0.0), Vec3(0.1, 0.0, 0.0), Vec3(0.3, 0.2, 0.1), 3.0)
    a.stars.append(Star(Vec3(-1.2, 0.5, 0.0), Vec3(0.0, 0.4, 0.0)))
    a.stars.append(Star(Vec3(-0.8, 0.5, 0.1), Vec3(0.0, -0.4, 0.0)))
    b = Galaxy(Vec3(2.0, 0.0, 0.0), Vec3(-0.1, 0.0, 0.0), Vec3(1.0, 0.0, 0.0), 1.0)
    c = Galaxy(Vec3(0.0, 3.0, 0.0), Vec3(), Vec3(), 1.0)
    c.stars.append(Star(Vec3(0.0, 3.5, 0.0), Vec3(0.2, 0.0, 0.0), mass=0.5))
    return [a, b, c]


def assert_same_scene(loaded, original):
    assert len(loaded) == len(original)
    for g_loaded, g_original in zip(loaded, original):
        assert g_loaded.position == g_original.position
        assert g_loaded.velocity == g_original.velocity
        assert g_loaded.orientation == g_original.orientation
        assert g_loaded.mass == g_original.mass
        assert len(g_loaded.stars) == len(g_original.stars)
        for s_loaded, s_original in zip(g_loaded.stars, g_original.stars):
            assert s_loaded.position == s_original.position
            assert s_loaded.velocity == s_original.velocity
            assert s_loaded.mass == s_original.mass


def test_save_load_npz(tmp_path):
    """Test saving and loading NPZ format."""
    galaxies = make_scene()
    path = tmp_path / "state.npz"

    save_galaxies(galaxies, str(path), {"time": 10.0, "steps": 100, "note": "demo", "skipped": [1, 2]})
    loaded, metadata = load_galaxies(str(path))

    assert_same_scene(loaded, galaxies)
    assert metadata.get("time") == 10.0
    assert metadata.get("steps") == 100
    assert metadata.get("note") == "demo"
    assert "skipped" not in metadata


def test_save_load_json(tmp_path):
    """Test saving and loading JSON format, attributes included."""
    galaxies = make_scene()
    galaxies[0].attributes["color"] = "#ffadad"
    path = tmp_path / "state.json"

    save_galaxies(galaxies, str(path), {"time": 10.0})
    loaded, metadata = load_galaxies(str(path))

    assert_same_scene(loaded, galaxies)
    assert loaded[0].attributes == {"color": "#ffadad"}
    assert metadata == {"time": 10.0}


def test_empty_collection(tmp_path):
    for suffix in (".npz", ".json"):
        path = tmp_path / f"empty{suffix}"
        save_galaxies([], str(path))
        loaded, _ = load_galaxies(str(path))
        assert loaded == []


def test_unsupported_format(tmp_path):
    with pytest.raises(ValueError, match="Unsupported file format"):
        save_galaxies(make_scene(), str(tmp_path / "state.txt"))
    with pytest.raises(ValueError, match="Unsupported file format"):
        load_galaxies(str(tmp_path / "state.csv"))
