"""Fatal errors raised while scanning the hardware-monitor tree."""


class HwmonError(Exception):
    """Base class for errors that abort a scan."""


class HwmonUnavailableError(HwmonError):
    """The hardware-monitor root directory could not be listed."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Unable to list hardware monitor directory {path}: {reason}")
        self.path = path
        self.reason = reason


class NoDevicesError(HwmonError):
    """The hardware-monitor root directory exists but holds no devices."""

    def __init__(self, path: str):
        super().__init__(f"No hardware monitor devices found in {path}")
        self.path = path
