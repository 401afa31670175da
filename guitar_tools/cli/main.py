"""Main entry point for the Guitar Tools CLI."""

import sys
import argparse
from typing import List, Optional

from ..logger import get_logger
from ..logging_config import setup_logging
from ..audio.audio_capture import SoundDeviceCapture, WavFileCapture
from ..audio.devices import describe_devices
from ..audio.reference_tone import MAX_VOLUME, ReferenceTonePlayer
from ..core.config import ConfigManager, TunerConfig
from ..core.errors import GuitarToolsError
from ..note_types import Note
from ..services.tuning_service import TuningService
from ..tunings import TUNINGS

logger = get_logger(__name__)


def _note(value: str) -> Note:
    try:
        return Note.from_name(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _volume(value: str) -> int:
    volume = int(value)
    if not 0 <= volume <= MAX_VOLUME:
        raise argparse.ArgumentTypeError(f"volume must be between 0 and {MAX_VOLUME}")
    return volume


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="guitar-tools",
        description="Guitar Tools - play reference pitches and check your tuning",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-level", default=None, help="Log level for guitar_tools modules")
    parser.add_argument(
        "--no-config",
        action="store_true",
        help="Ignore ~/.config/guitar_tools and use built-in settings",
    )
    parser.add_argument("--config-dir", default=None, help="Configuration directory")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    subparsers.add_parser("tunings", help="List the supported tunings and their notes")

    play_parser = subparsers.add_parser("play", help="Play a reference pitch (tune by ear)")
    play_parser.add_argument("note", type=_note, help="Note to play, e.g. E2 or G3S")
    play_parser.add_argument(
        "--volume", type=_volume, default=None, help="Volume from 0 to 100"
    )

    tune_parser = subparsers.add_parser("tune", help="Record a string and compare it with a note")
    tune_parser.add_argument("note", type=_note, help="Target note, e.g. E2")
    tune_parser.add_argument("--device", type=int, default=None, help="Audio input device ID")
    tune_parser.add_argument(
        "--duration", type=float, default=None, help="Recording length in seconds"
    )

    analyze_parser = subparsers.add_parser("analyze", help="Compare a recording on disk with a note")
    analyze_parser.add_argument("path", help="Audio file to analyze")
    analyze_parser.add_argument("note", type=_note, help="Target note, e.g. E2")
    analyze_parser.add_argument(
        "--duration", type=float, default=None, help="Only analyze the first N seconds"
    )

    devices_parser = subparsers.add_parser("devices", help="List audio devices")
    devices_parser.add_argument(
        "--check-rates", action="store_true", help="Probe supported input sample rates"
    )

    return parser


def _load_config(parsed_args) -> TunerConfig:
    if parsed_args.no_config:
        return TunerConfig()
    return ConfigManager(parsed_args.config_dir).to_tuner_config()


def _print_tunings() -> None:
    for tuning in TUNINGS.values():
        print(f"{tuning.title} ({tuning.name}):")
        print(
            "  "
            + "  ".join(f"{label}={note}/{note.frequency}Hz" for label, note in tuning.strings)
        )


def main(args: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI.

    Args:
        args: Command line arguments, or None to use sys.argv

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = build_parser()
    parsed_args = parser.parse_args(args)

    try:
        setup_logging("DEBUG" if parsed_args.debug else parsed_args.log_level)
    except ValueError as e:
        parser.error(str(e))

    if parsed_args.command is None:
        parser.print_help()
        return 2

    try:
        if parsed_args.command == "tunings":
            _print_tunings()
        elif parsed_args.command == "devices":
            print("\n".join(describe_devices(check_rates=parsed_args.check_rates)))
        else:
            config = _load_config(parsed_args)
            if parsed_args.command == "play":
                volume = parsed_args.volume
                if volume is None:
                    volume = config.default_volume
                ReferenceTonePlayer(sample_rate=config.reference_sample_rate).play(
                    parsed_args.note, volume
                )
            elif parsed_args.command == "tune":
                capture = SoundDeviceCapture(
                    duration=(
                        config.capture_duration
                        if parsed_args.duration is None
                        else parsed_args.duration
                    ),
                    device_id=parsed_args.device,
                )
                print(f"Play your {parsed_args.note} string now...")
                result = TuningService(capture=capture, config=config).tune(parsed_args.note)
                print(result.report())
            elif parsed_args.command == "analyze":
                capture = WavFileCapture(parsed_args.path, duration=parsed_args.duration)
                result = TuningService(capture=capture, config=config).tune(parsed_args.note)
                print(result.report())
    except (GuitarToolsError, ValueError) as e:
        logger.error(f"{parsed_args.command} failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
