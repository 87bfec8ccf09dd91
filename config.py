import configparser
import logging
import os

logger = logging.getLogger(__name__)

CONFIG_DIR = os.path.expanduser("~/.config/ghostype")
CONFIG_FILE = os.path.join(CONFIG_DIR, "config.ini")

# Typing speed in characters per second
SPEED_PRESETS = [3, 6, 10]
DEFAULT_SPEED = 6
MIN_SPEED = 1
MAX_SPEED = 50

PROTOCOL_VERSION = "2.0"


def clamp_speed(speed):
    return max(MIN_SPEED, min(MAX_SPEED, int(speed)))


class Settings:
    def __init__(self, typing_speed=DEFAULT_SPEED, protocol_version=PROTOCOL_VERSION):
        self.typing_speed = clamp_speed(typing_speed)
        self.protocol_version = protocol_version

    def __eq__(self, other):
        if not isinstance(other, Settings):
            return NotImplemented
        return (self.typing_speed, self.protocol_version) == \
            (other.typing_speed, other.protocol_version)

    def __repr__(self):
        return f"Settings(typing_speed={self.typing_speed}, protocol_version={self.protocol_version!r})"


def config_path(path=None):
    return path or os.environ.get("GHOSTYPE_CONFIG") or CONFIG_FILE


def load_settings(path=None):
    path = config_path(path)
    settings = Settings()
    if not os.path.exists(path):
        return settings

    config = configparser.ConfigParser()
    config.optionxform = str # Preserve case for keys
    try:
        config.read(path, encoding="utf-8")
        if "Settings" in config:
            speed = config.getint("Settings", "TypingSpeed", fallback=DEFAULT_SPEED)
            if not MIN_SPEED <= speed <= MAX_SPEED:
                logger.warning("TypingSpeed %d out of range, clamping", speed)
            settings.typing_speed = clamp_speed(speed)
            settings.protocol_version = config.get(
                "Settings", "ProtocolVersion", fallback=PROTOCOL_VERSION)
    except (configparser.Error, ValueError) as e:
        logger.warning("Error loading config %s: %s", path, e)
        return Settings()
    return settings


def save_settings(settings, path=None):
    path = config_path(path)
    config = configparser.ConfigParser()
    config.optionxform = str
    config["Settings"] = {
        "TypingSpeed": str(settings.typing_speed),
        "ProtocolVersion": settings.protocol_version,
    }

    config_dir = os.path.dirname(path)
    if config_dir and not os.path.exists(config_dir):
        os.makedirs(config_dir)
    with open(path, "w", encoding="utf-8") as f:
        config.write(f)
    return path
