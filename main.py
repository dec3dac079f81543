#!/usr/bin/env python3
"""
Noise Meter - entry point

Offline level analysis of a calibrated recording: overall Leq,
Fast/Slow level stream and session statistics.

Usage:
    python main.py audio_file [--gain PA_PER_FS] [--period fast|slow]

Example:
    python main.py recording.wav --gain 25.0 --period slow
"""

import argparse
import logging
import sys


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="noise-meter",
        description="Compute equivalent sound levels of a recording.",
    )
    parser.add_argument("audio_file", help="WAV/FLAC recording")
    parser.add_argument(
        "--gain", type=float, default=1.0,
        help="Calibration gain in Pa per digital full scale (default: 1.0)",
    )
    parser.add_argument(
        "--period", choices=("fast", "slow"), default="fast",
        help="Time period of the level stream (default: fast)",
    )
    parser.add_argument(
        "--ref", type=float, default=None,
        help="Reference pressure in Pa (default: 20 µPa)",
    )
    parser.add_argument("--channel", type=int, default=0, help="Channel index")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress")
    return parser


def main(argv=None) -> int:
    """Run the level analysis and print the results."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    from noise_meter.core import (
        REF_SOUND_PRESSURE,
        EngineConfig,
        MeasurementSession,
        NoiseMeterError,
        TimePeriod,
        load_sample_block,
    )
    from noise_meter.utils import format_db, format_statistics

    period = TimePeriod.SLOW if args.period == "slow" else TimePeriod.FAST
    reference = args.ref if args.ref is not None else REF_SOUND_PRESSURE

    try:
        config = EngineConfig(reference_pressure=reference, time_period=period)
        block = load_sample_block(args.audio_file, args.gain, args.channel)
        session = MeasurementSession(config)
        result = session.process_block(block)
        stats = session.statistics() if len(result.levels) else None
    except (FileNotFoundError, NoiseMeterError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"File:     {args.audio_file}")
    print(f"Duration: {block.duration_seconds:.3f} s at {block.sample_rate} Hz")
    print(f"Leq:      {format_db(result.leq)}")
    print(f"Levels:   {len(result.levels)} x {float(period)} s ({args.period})")
    if stats is not None:
        print(f"Stats:    {format_statistics(stats)}")
    else:
        print("Stats:    recording shorter than one time period")
    return 0


if __name__ == "__main__":
    sys.exit(main())
