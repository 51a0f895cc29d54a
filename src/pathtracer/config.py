# config.py
import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Named presets; explicit settings override them.
QUALITY_LEVELS = {
    "preview": {"width": 200, "samples": 4, "bounces": 8},
    "low": {"width": 400, "samples": 20, "bounces": 20},
    "medium": {"width": 600, "samples": 100, "bounces": 50},
    "high": {"width": 1200, "samples": 500, "bounces": 50},
}
DEFAULT_QUALITY = "low"
DEFAULT_ASPECT_RATIO = 16.0 / 9.0

class RenderSettings:
    """
    Everything needed to turn a named scene into an image.
    """
    def __init__(self, width: int = 400, aspect_ratio: float = DEFAULT_ASPECT_RATIO,
                 samples_per_pixel: int = 20, max_depth: int = 20,
                 seed: Optional[int] = None, scene: str = "random",
                 aperture: Optional[float] = None, output: Optional[str] = None,
                 png: Optional[str] = None, time_limit: Optional[float] = None):
        self.width = width
        self.aspect_ratio = aspect_ratio
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth
        self.seed = seed
        self.scene = scene
        self.aperture = aperture  # None keeps the scene's own aperture
        self.output = output      # None writes the PPM to stdout
        self.png = png
        self.time_limit = time_limit
        self.validate()

    @property
    def height(self) -> int:
        return int(self.width / self.aspect_ratio)

    @classmethod
    def from_quality(cls, quality: str = DEFAULT_QUALITY, **overrides) -> "RenderSettings":
        """
        Build settings from a QUALITY_LEVELS preset. Overrides that are None
        are ignored so unset command line options fall through to the preset.
        """
        if quality not in QUALITY_LEVELS:
            raise ValueError(f"unknown quality {quality!r}, choose from {sorted(QUALITY_LEVELS)}")
        level = QUALITY_LEVELS[quality]
        kwargs = {
            "width": level["width"],
            "samples_per_pixel": level["samples"],
            "max_depth": level["bounces"],
        }
        kwargs.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**kwargs)

    def validate(self):
        if self.aspect_ratio <= 0:
            raise ValueError(f"aspect_ratio must be positive, got {self.aspect_ratio}")
        if self.width < 2 or self.height < 2:
            raise ValueError(f"image must be at least 2x2 pixels, got {self.width}x{self.height}")
        if self.samples_per_pixel <= 0:
            raise ValueError(f"samples_per_pixel must be positive, got {self.samples_per_pixel}")
        if self.max_depth <= 0:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")
        if self.aperture is not None and self.aperture < 0:
            raise ValueError(f"aperture must not be negative, got {self.aperture}")
        if self.time_limit is not None and self.time_limit <= 0:
            raise ValueError(f"time_limit must be positive, got {self.time_limit}")

    def __repr__(self) -> str:
        return (f"RenderSettings(scene={self.scene!r}, {self.width}x{self.height}, "
                f"spp={self.samples_per_pixel}, depth={self.max_depth}, seed={self.seed})")

def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Configure the package logger to write to stderr. Stdout stays free for
    image data.
    """
    logger = logging.getLogger("pathtracer")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    # Start from a clean slate; an earlier handler may hold a closed stream.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.setLevel(logger.level)
    logger.addHandler(handler)
    return logger
