"""Tests for the 2D renderer and the CLI."""

import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest
from galaxy_collision.astro import Star, Galaxy
from galaxy_collision.math import Vec3
from galaxy_collision.render import Renderer2D, RenderManager, project_stars
from galaxy_collision.cli.main import build_config, make_parser, main


def make_scene():
    a = Galaxy(Vec3(), Vec3(), Vec3(), 1.0)
    a.stars.extend([Star(Vec3(1.0, 2.0, 3.0), Vec3()), Star(Vec3(-1.0, 0.0, 0.5), Vec3())])
    b = Galaxy(Vec3(), Vec3(), Vec3(), 1.0)
    b.stars.append(Star(Vec3(4.0, -4.0, 0.0), Vec3()))
    return [a, b]


def test_project_stars():
    positions, owners = project_stars(make_scene())

    assert positions.shape == (3, 3)
    assert np.allclose(positions[0], [1.0, 2.0, 3.0])
    assert list(owners) == [0, 0, 1]


def test_renderer_does_not_touch_entities():
    """Colours come from the renderer's palette, not entity attributes."""
    galaxies = make_scene()
    renderer = Renderer2D(interactive=False, target_fps=0, palette=("red", "blue"))

    renderer.render(galaxies)
    frame = renderer.capture_frame()
    renderer.close()

    assert frame.ndim == 3 and frame.shape[2] == 3
    assert frame.dtype == np.uint8
    assert all(g.attributes == {} for g in galaxies)
    assert renderer.colors_for(np.array([0, 1, 2])) == ["red", "blue", "red"]


def test_capture_before_render_fails():
    with pytest.raises(RuntimeError):
        Renderer2D(interactive=False).capture_frame()


def test_render_manager_modes():
    manager = RenderManager(mode="2d", interactive=False)
    assert isinstance(manager.renderer, Renderer2D)
    manager.close()

    with pytest.raises(ValueError):
        RenderManager(mode="3d")


def test_cli_runs_and_saves_state(tmp_path, capsys):
    out = tmp_path / "final.json"

    main([
        "--galaxies", "2", "--min-stars", "5", "--max-stars", "5",
        "--steps", "4", "--seed", "1", "--debug-every", "2",
        "--reset-after", "0", "--save-state", str(out),
    ])

    captured = capsys.readouterr().out
    assert "Running simulation: 2 galaxies, 10 stars" in captured
    assert "Simulation complete!" in captured
    assert out.exists()


def test_cli_render_every_zero_never_renders(capsys):
    main([
        "--galaxies", "1", "--min-stars", "2", "--max-stars", "2",
        "--steps", "3", "--seed", "1", "--debug-every", "0",
        "--render", "--render-every", "0",
    ])

    assert "Simulation complete!" in capsys.readouterr().out


def test_cli_galaxy_count_range():
    args = make_parser().parse_args(["--galaxies", "2", "--max-galaxies", "5", "--reset-after", "0"])
    config = build_config(args)

    assert config.galaxy_count == 2
    assert config.max_galaxy_count == 5
    assert config.reset_after_steps is None


def test_cli_seed_ignores_global_random_state(tmp_path):
    """The seed alone fixes the scene; global numpy state plays no part."""
    paths = [tmp_path / "a.json", tmp_path / "b.json"]
    for global_seed, path in zip((0, 99), paths):
        np.random.seed(global_seed)
        main([
            "--galaxies", "2", "--min-stars", "3", "--max-stars", "3",
            "--steps", "2", "--seed", "4", "--debug-every", "0",
            "--save-state", str(path),
        ])

    assert paths[0].read_text() == paths[1].read_text()
