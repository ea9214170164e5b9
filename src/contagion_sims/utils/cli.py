import argparse


def build_parser():
    parser = argparse.ArgumentParser(description='Contagion simulation on a square arena')
    parser.add_argument('--exp_name', type=str, default='', metavar='N',
                        help='experiment name (default: none)')
    parser.add_argument('--seed', type=int, default=None, metavar='N',
                        help='random seed (default: fresh entropy every run)')
    parser.add_argument('--preset', type=str, default=None, metavar='PATH',
                        help='YAML preset with SimConfig fields; explicit options override it')
    parser.add_argument('--ticks', type=int, default=3000, metavar='N',
                        help='number of ticks to simulate (default: 3000)')
    parser.add_argument('--outdir', type=str, default='results', metavar='N',
                        help='directory to save outputs (default: results)')
    parser.add_argument('--frame_rate', type=int, default=60, metavar='N',
                        help='frame rate for rendering (default: 60)')
    parser.add_argument('--ticks_per_frame', type=int, default=5, metavar='N',
                        help='simulation ticks per rendered frame (default: 5)')
    parser.add_argument('--log_interval', type=int, default=500, metavar='N',
                        help='ticks between progress reports (default: 500)')
    parser.add_argument('--no_video', action='store_true',
                        help='skip the MP4, only write the recording and the curves')
    parser.add_argument('--preview', action='store_true',
                        help='whether to use preview settings for faster rendering')

    # SimConfig fields; None means "use the preset / SimConfig default"
    parser.add_argument('--n_subjects', type=int, default=None, metavar='N',
                        help='number of subjects (default: 100)')
    parser.add_argument('--sick_percentage', type=float, default=None, metavar='F',
                        help='fraction of subjects sick at the start, in [0, 1] (default: 0.1)')
    parser.add_argument('--freeze_percentage', type=float, default=None, metavar='F',
                        help='fraction of subjects that never move, in [0, 1] (default: 0.1)')
    parser.add_argument('--radius', type=float, default=None, metavar='R',
                        help='subject radius (default: 5.0)')
    parser.add_argument('--sick_time', type=float, default=None, metavar='T',
                        help='time units until a sick subject recovers (default: 500)')
    parser.add_argument('--minimal_speed', type=float, default=None, metavar='F',
                        help='ratio of the fastest to the slowest speed (default: 10)')
    parser.add_argument('--speed_scale', type=float, default=None, metavar='K',
                        help='slowest speed is arena_size / K per time unit (default: 10000)')
    parser.add_argument('--delta_t', type=float, default=None, metavar='DT',
                        help='simulation time per tick (default: 1.0)')
    parser.add_argument('--tick_interval_ms', type=int, default=None, metavar='MS',
                        help='wall-clock milliseconds between live ticks (default: 10)')
    parser.add_argument('--arena_size', type=float, default=None, metavar='S',
                        help='side of the square arena (default: 500)')
    parser.add_argument('--capacity', type=float, default=None, metavar='F',
                        help='capacity line on the curves, as a population fraction (default: 0.2)')
    return parser


def config_from_args(args):
    """SimConfig from parsed options, layered over `--preset` when given."""
    from dataclasses import fields
    from contagion_sims.core import SimConfig

    if args.preset is None:
        return SimConfig.from_args(args)
    overrides = {f.name: getattr(args, f.name, None) for f in fields(SimConfig)}
    return SimConfig.from_preset(args.preset, **overrides)


'''
usage: python scripts/main.py --exp_name lockdown --seed 42 --preset presets/lockdown.yaml \
    --ticks 5000 --ticks_per_frame 5 --frame_rate 60
'''
