"""silencespeedup — play silences faster, or skip them."""

__version__ = "0.1.0"

from silencespeedup.plugin import SilenceSpeedUp  # noqa: E402

__all__ = ["SilenceSpeedUp", "__version__"]
