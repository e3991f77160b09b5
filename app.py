# app.py
import argparse
import logging
import sys

from config import PlotterConfig
from core.serial_source import SerialByteSource, SourceUnavailableError

LOG = logging.getLogger(__name__)

RECORD_FORMAT_HELP = """\
input format:
  Each sample is described as a line of format:
    TIME:CHAN1;CHAN2...
  TIME is the board time in microseconds, channels are decimal floats.
"""


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="plotty",
        description="Live scrolling plot of timestamped samples read from a serial device.",
        epilog=RECORD_FORMAT_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("-p", "--port", help="tty port to read data from [/dev/ttyACM0]")
    p.add_argument("-b", "--baud", type=int, help="baud rate [115200]")
    p.add_argument("-c", "--channels", type=int, help="max channels expected in stream [2]")
    p.add_argument("-s", "--samples", type=int, help="max samples stored in buffer [1024]")
    p.add_argument(
        "-S", "--samples-per-frame", type=int, help="max samples read in one frame [10]"
    )
    p.add_argument("-u", "--upper", type=float, help="upper bound of expected values [3.3]")
    p.add_argument("-l", "--lower", type=float, help="lower bound of expected values [0.0]")
    p.add_argument("-T", "--period", type=int, help="time period to display in view, usecs [1000000]")
    p.add_argument("--fps", type=int, help="target frame rate [60]")
    p.add_argument("--config", help="INI file with persistent settings [plotty.ini]")
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging verbosity [WARNING]",
    )
    return p


def config_from_args(args: argparse.Namespace) -> PlotterConfig:
    cfg = PlotterConfig.load(args.config)
    if args.port is not None:
        cfg.port = args.port
    if args.baud is not None:
        cfg.baud = args.baud
    if args.channels is not None:
        cfg.max_channels = args.channels
    if args.samples is not None:
        cfg.max_sample_count = args.samples
    if args.samples_per_frame is not None:
        cfg.max_samples_per_frame = args.samples_per_frame
    if args.upper is not None:
        cfg.value_upper = args.upper
    if args.lower is not None:
        cfg.value_lower = args.lower
    if args.period is not None:
        cfg.display_period_us = args.period
    if args.fps is not None:
        cfg.target_fps = args.fps
    return cfg.validate()


def main(argv=None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        cfg = config_from_args(args)
    except ValueError as exc:
        parser.error(str(exc))

    source = SerialByteSource(cfg.port, cfg.baud)
    try:
        source.open()
    except SourceUnavailableError as exc:
        LOG.error("%s", exc)
        return 1

    from PySide6 import QtWidgets
    from ui.main_window import MainWindow

    app = QtWidgets.QApplication(sys.argv[:1])
    try:
        w = MainWindow(source, config=cfg)
        w.resize(1000, 800)
        w.show()
        app.exec()
    finally:
        source.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
