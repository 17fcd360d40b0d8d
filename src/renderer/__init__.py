from renderer.settings import QUALITY_PRESETS, TraceSettings, setup_logging
from renderer.path import ray_color, sky_color

__all__ = ["QUALITY_PRESETS", "TraceSettings", "setup_logging", "ray_color", "sky_color"]
