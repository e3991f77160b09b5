from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from core.serial_source import DEFAULT_BAUD


@dataclass
class PlotterConfig:
    port: str = "/dev/ttyACM0"
    baud: int = DEFAULT_BAUD
    max_channels: int = 2
    max_sample_count: int = 1024
    max_samples_per_frame: int = 10
    read_size: int = 1023
    accept_zero_timestamp: bool = False
    value_lower: float = 0.0
    value_upper: float = 3.3
    display_period_us: int = 1_000_000
    target_fps: int = 60
    theme: str = "Midnight"
    ini_path: Path | None = None

    @classmethod
    def load(cls, ini_path: str | Path | None = None) -> "PlotterConfig":
        cfg = cls()
        path = Path(ini_path or "plotty.ini")
        if path.exists():
            import configparser

            parser = configparser.ConfigParser()
            parser.read(path)
            serial_section = parser["serial"] if "serial" in parser else None
            if serial_section:
                cfg.port = serial_section.get("port", fallback=cfg.port)
                cfg.baud = serial_section.getint("baud", fallback=cfg.baud)
                cfg.read_size = serial_section.getint("read_size", fallback=cfg.read_size)

            buffer_section = parser["buffer"] if "buffer" in parser else None
            if buffer_section:
                cfg.max_channels = buffer_section.getint(
                    "max_channels", fallback=cfg.max_channels
                )
                cfg.max_sample_count = buffer_section.getint(
                    "max_sample_count", fallback=cfg.max_sample_count
                )
                cfg.max_samples_per_frame = buffer_section.getint(
                    "max_samples_per_frame", fallback=cfg.max_samples_per_frame
                )
                cfg.accept_zero_timestamp = buffer_section.getboolean(
                    "accept_zero_timestamp", fallback=cfg.accept_zero_timestamp
                )

            view_section = parser["view"] if "view" in parser else None
            if view_section:
                cfg.value_lower = view_section.getfloat("value_lower", fallback=cfg.value_lower)
                cfg.value_upper = view_section.getfloat("value_upper", fallback=cfg.value_upper)
                cfg.display_period_us = view_section.getint(
                    "display_period_us", fallback=cfg.display_period_us
                )

            ui_section = parser["ui"] if "ui" in parser else None
            if ui_section:
                cfg.target_fps = ui_section.getint("target_fps", fallback=cfg.target_fps)
                cfg.theme = ui_section.get("theme", fallback=cfg.theme)
        cfg.ini_path = path
        return cfg

    def validate(self) -> "PlotterConfig":
        if self.max_channels < 1:
            raise ValueError("max_channels must be at least 1")
        if self.max_sample_count < 1:
            raise ValueError("max_sample_count must be at least 1")
        if self.max_samples_per_frame < 1:
            raise ValueError("max_samples_per_frame must be at least 1")
        if self.read_size < 1:
            raise ValueError("read_size must be at least 1")
        if self.display_period_us <= 0:
            raise ValueError("display_period_us must be positive")
        if self.target_fps <= 0:
            raise ValueError("target_fps must be positive")
        if self.value_upper == self.value_lower:
            raise ValueError("value_upper and value_lower must differ")
        return self

    def save(self) -> None:
        if self.ini_path is None:
            return
        import configparser

        parser = configparser.ConfigParser()
        parser["serial"] = {
            "port": self.port,
            "baud": str(self.baud),
            "read_size": str(self.read_size),
        }
        parser["buffer"] = {
            "max_channels": str(self.max_channels),
            "max_sample_count": str(self.max_sample_count),
            "max_samples_per_frame": str(self.max_samples_per_frame),
            "accept_zero_timestamp": "true" if self.accept_zero_timestamp else "false",
        }
        parser["view"] = {
            "value_lower": f"{self.value_lower:.6g}",
            "value_upper": f"{self.value_upper:.6g}",
            "display_period_us": str(self.display_period_us),
        }
        parser["ui"] = {
            "target_fps": str(self.target_fps),
            "theme": self.theme,
        }
        with self.ini_path.open("w") as fh:
            parser.write(fh)
