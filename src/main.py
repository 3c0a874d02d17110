import argparse
import logging
import os
import sys
from logging.handlers import RotatingFileHandler

# Add the project root directory to Python path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.audio_engine.music_theory import PitchTable
from src.config import WAVEFORMS, AppConfig, AudioConfig, KeyboardConfig, LogConfig
from src.errors import ConfigError, PianoError

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_LOG_PATH = os.path.join("logs", "console_piano.log")

logger = logging.getLogger(__name__)


def build_parser():
    ap = argparse.ArgumentParser(description="Play, record and replay notes from the computer keyboard.")
    ap.add_argument('--octave', type=int, default=4, help="starting octave (1-8)")
    ap.add_argument('--duration', type=int, default=200, help="tone length in milliseconds")
    ap.add_argument('--waveform', default='sine', choices=WAVEFORMS)
    ap.add_argument('--volume', type=float, default=0.5, help="master volume (0-1)")
    ap.add_argument('--sample-rate', type=int, default=44100)
    ap.add_argument('--device', default=None, help="output device name or index")
    ap.add_argument('--log-level', default='INFO', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])
    ap.add_argument('--log-file', default=None, help=f"log file path (default {DEFAULT_LOG_PATH})")
    return ap


def config_from_args(args):
    device = args.device
    if device is not None and device.isdigit():
        device = int(device)
    return AppConfig(
        audio=AudioConfig(
            sample_rate=args.sample_rate,
            waveform=args.waveform,
            volume=args.volume,
            tone_duration_ms=args.duration,
            device=device,
        ),
        keyboard=KeyboardConfig(start_octave=args.octave),
        log=LogConfig(level=args.log_level, path=args.log_file),
    )


def init_logging(cfg):
    """Send log records to a rotating file; the terminal belongs to the piano."""
    root = logging.getLogger()
    if root.handlers:
        return
    path = cfg.path or DEFAULT_LOG_PATH
    log_dir = os.path.dirname(path)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
    fh = RotatingFileHandler(path, maxBytes=2 * 1024 * 1024, backupCount=3, encoding="utf-8")
    fh.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(fh)
    root.setLevel(cfg.level)


def main(argv=None):
    ap = build_parser()
    args = ap.parse_args(argv)
    cfg = config_from_args(args)
    try:
        cfg.validate()
    except ConfigError as e:
        ap.error(str(e))

    init_logging(cfg.log)
    logger.info("Starting console piano: %s", cfg)

    # Audio and keyboard backends need hardware, load them only when running
    from src.audio_engine.synthesizer import Synthesizer
    from src.console.app import ConsolePiano
    from src.console.display import ConsoleDisplay
    from src.console.keys import KeyboardSource

    synth = Synthesizer(cfg.audio)
    try:
        synth.check_device()
        display = ConsoleDisplay(pitch_table=PitchTable())
        with KeyboardSource() as keys:
            ConsolePiano(keys, synth, display, cfg=cfg).run()
    except PianoError as e:
        logger.error("Fatal: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted")
    finally:
        synth.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
