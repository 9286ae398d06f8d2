"""CLI main entry point."""

import argparse
from dataclasses import replace
from galaxy_collision.physics.simulator import Simulator
from galaxy_collision.physics.diagnostics import kinetic_energy, potential_energy, center_of_mass
from galaxy_collision.physics.util import star_count
from galaxy_collision.io.state_io import save_galaxies
from galaxy_collision.utils.config import Config, load_config


# CLI flag -> Config field, for flags that override a loaded config
_OVERRIDES = {
    'galaxies': 'galaxy_count',
    'max_galaxies': 'max_galaxy_count',
    'min_stars': 'min_star_count',
    'max_stars': 'max_star_count',
    'min_radius': 'min_galaxy_radius',
    'max_radius': 'max_galaxy_radius',
    'max_speed': 'max_initial_speed',
    'steps': 'steps',
    'dt': 'dt',
    'G': 'G',
    'reset_after': 'reset_after_steps',
    'seed': 'seed',
    'render_every': 'render_every',
}


def build_config(args) -> Config:
    """Config from --config (if given) with command-line flags on top."""
    config = load_config(args.config) if args.config else Config()
    overrides = {
        field: getattr(args, flag)
        for flag, field in _OVERRIDES.items()
        if getattr(args, flag) is not None
    }
    if args.render:
        overrides['render'] = True
    # --reset-after 0 disables resets
    if overrides.get('reset_after_steps') == 0:
        overrides['reset_after_steps'] = None
    return replace(config, **overrides)


def print_diagnostics_row(sim: Simulator):
    K = kinetic_energy(sim.galaxies)
    U = potential_energy(sim.galaxies, sim.G)
    com = center_of_mass(sim.galaxies)
    print(
        f"{sim.step_count:<8} {sim.time:<10.3f} {K:<12.4f} {U:<12.4f} {K + U:<12.4f} "
        f"{com.x:<9.3f} {com.y:<9.3f} {com.z:<9.3f} {sim.resets:<6}"
    )


def run_simulation(config: Config, args):
    """Run a simulation."""
    sim = Simulator(config, verbose=True)
    sim.initialize()

    renderer = None
    if config.render:
        from galaxy_collision.render.manager import RenderManager
        renderer = RenderManager(mode="2d")

    print(f"Running simulation: {len(sim.galaxies)} galaxies, {star_count(sim.galaxies)} stars")
    print(f"Integrator: {sim.integrator.name}, dt: {sim.dt}, G: {sim.G}, reset after: {config.reset_after_steps}")

    print(f"{'Step':<8} {'Time':<10} {'K':<12} {'U':<12} {'E':<12} {'COMx':<9} {'COMy':<9} {'COMz':<9} {'Resets':<6}")
    print("-" * 92)
    print_diagnostics_row(sim)

    for step in range(config.steps):
        sim.step()

        if renderer and config.render_every and step % config.render_every == 0:
            renderer.render(sim.galaxies)

        if args.debug_every and step % args.debug_every == 0:
            print_diagnostics_row(sim)

    if args.save_state:
        save_galaxies(sim.galaxies, args.save_state, metadata={
            'time': sim.time,
            'steps': sim.step_count,
            'resets': sim.resets,
            'integrator': sim.integrator.name,
        })
        print(f"State saved to {args.save_state}")

    if renderer:
        renderer.close()

    print("Simulation complete!")


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Galaxy Collision - galaxies with massless star disks")

    # Scene
    parser.add_argument('--config', type=str, default=None,
                       help='Load settings from a .json or .yaml file (flags override it)')
    parser.add_argument('--galaxies', type=int, default=None,
                       help='Number of galaxies (default: 3)')
    parser.add_argument('--max-galaxies', type=int, default=None,
                       help='Pick a random galaxy count in [galaxies, max-galaxies) per scene')
    parser.add_argument('--min-stars', type=float, default=None,
                       help='Minimum stars per galaxy (default: 700)')
    parser.add_argument('--max-stars', type=float, default=None,
                       help='Maximum stars per galaxy (default: 1000)')
    parser.add_argument('--min-radius', type=float, default=None,
                       help='Minimum disk radius (default: 0.5)')
    parser.add_argument('--max-radius', type=float, default=None,
                       help='Maximum disk radius (default: 1.5)')
    parser.add_argument('--max-speed', type=float, default=None,
                       help='Maximum initial galaxy speed (default: 4)')

    # Integration
    parser.add_argument('--steps', type=int, default=None,
                       help='Number of simulation steps (default: 1500)')
    parser.add_argument('--dt', type=float, default=None,
                       help='Time step (default: 0.005)')
    parser.add_argument('--G', type=float, default=None,
                       help='Gravitational constant (default: 0.001)')
    parser.add_argument('--reset-after', type=int, default=None,
                       help='Regenerate galaxies after N steps, 0 to never reset (default: 1500)')
    parser.add_argument('--debug-every', type=int, default=100,
                       help='Print diagnostics every N steps, 0 to disable')

    # Rendering
    parser.add_argument('--render', action='store_true',
                       help='Enable real-time rendering')
    parser.add_argument('--render-every', type=int, default=None,
                       help='Render every N steps, 0 to disable')

    # Reproducibility
    parser.add_argument('--seed', type=int, default=None,
                       help='Random seed for reproducibility')
    parser.add_argument('--save-state', type=str, default=None,
                       help='Save final state to file (.npz or .json)')
    return parser


def main(argv=None):
    """CLI entry point."""
    parser = make_parser()
    args = parser.parse_args(argv)
    config = build_config(args)
    run_simulation(config, args)


if __name__ == '__main__':
    main()
