from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Runtime constants for the scanner. Every field can be overridden from the
    environment with the TEMPCHK_ prefix, e.g. TEMPCHK_HWMON_DIRECTORY.
    """
    model_config = SettingsConfigDict(env_prefix="TEMPCHK_")

    app_name: str = "tempchk"
    debug: bool = False
    # Current location of the hardware sensor data, as of kernel 4.4+
    hwmon_directory: str = "/sys/class/hwmon/"
    cpuinfo_path: str = "/proc/cpuinfo"
    # Attribute file holding the device driver name
    name_file: str = "name"
    input_suffix: str = "_input"
    spacer_size: int = 4
