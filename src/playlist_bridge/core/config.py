"""
Configuration management for playlist-bridge
"""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

APP_NAME = "playlist-bridge"

DEFAULT_API_URL = "http://localhost:8080/api/v1"


@dataclass
class ApiConfig:
    """Configuration for the conversion backend connection."""

    base_url: str = DEFAULT_API_URL
    timeout_seconds: Optional[float] = None  # None = transport default
    verify_ssl: bool = True
    cookies: Dict[str, str] = field(default_factory=dict)  # Seed session credentials

    def validate(self) -> None:
        """Validate API configuration values.

        Raises:
            ValueError: If configuration values are invalid
        """
        if not self.base_url.startswith(("http://", "https://")):
            raise ValueError(
                f"Invalid api.base_url: {self.base_url!r} (must start with http:// or https://)"
            )
        if self.timeout_seconds is not None and self.timeout_seconds <= 0:
            raise ValueError(
                f"Invalid api.timeout_seconds: {self.timeout_seconds} (must be positive)"
            )


@dataclass
class SessionConfig:
    """Identity of the current user, injected into mutating calls."""

    user_id: str = "user123"


@dataclass
class ImportConfig:
    """Placeholder metadata for imported playlists.

    The backend does not enrich metadata before creation, so these values
    are what a freshly imported playlist is named until it is edited.
    """

    default_name: str = "Imported Playlist"
    default_description: str = "Imported from Spotify"


@dataclass
class UIConfig:
    """Configuration for the terminal views."""

    use_colors: bool = True
    recent_playlists: int = 5  # Dashboard "Recent Playlists" length
    song_preview: int = 3  # Songs listed per playlist card
    server_search: bool = False  # Use POST /songs/search instead of local filter

    def validate(self) -> None:
        """Validate UI configuration values.

        Raises:
            ValueError: If configuration values are invalid
        """
        if self.recent_playlists < 0:
            raise ValueError("ui.recent_playlists must be >= 0")
        if self.song_preview < 0:
            raise ValueError("ui.song_preview must be >= 0")


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_file: Optional[str] = (
        None  # Custom log file path (default: ~/.local/share/playlist-bridge/playlist-bridge.log)
    )
    console_output: bool = False  # Also output to console (for debugging)

    def validate(self) -> None:
        valid_levels = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}
        if self.level.upper() not in valid_levels:
            raise ValueError(
                f"Invalid logging level: {self.level}. Valid levels are: {sorted(valid_levels)}"
            )


@dataclass
class Config:
    """Main configuration object."""

    api: ApiConfig = field(default_factory=ApiConfig)
    session: SessionConfig = field(default_factory=SessionConfig)
    importer: ImportConfig = field(default_factory=ImportConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def validate(self) -> None:
        """Validate every section."""
        self.api.validate()
        self.ui.validate()
        self.logging.validate()


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def _find_project_config() -> Optional[Path]:
    """Find config.toml in project root by looking for pyproject.toml.

    Returns:
        Path to config.toml in project root, or None if not found
    """
    current = Path(__file__).resolve().parent
    for parent in [current] + list(current.parents):
        if (parent / "pyproject.toml").exists():
            config_path = parent / "config.toml"
            if config_path.exists():
                return config_path
            # Found project root but no config.toml there
            return None
    return None


def get_config_path() -> Path:
    """Get the main configuration file path.

    Checks for config.toml in the following order:
    1. Project root (detected via pyproject.toml) - for development
    2. Current working directory
    3. XDG_CONFIG_HOME/playlist-bridge (or ~/.config/playlist-bridge)
    """
    project_config = _find_project_config()
    if project_config:
        return project_config

    local_config = Path.cwd() / "config.toml"
    if local_config.exists():
        return local_config

    return get_config_dir() / "config.toml"


def get_data_dir() -> Path:
    """Get the data directory path."""
    data_home = os.environ.get("XDG_DATA_HOME")
    if data_home:
        return Path(data_home) / APP_NAME
    return Path.home() / ".local" / "share" / APP_NAME


def create_default_config() -> str:
    """Create a default configuration TOML content."""
    return f"""
# playlist-bridge Configuration

[api]
# Conversion backend base URL (all paths are relative to it)
base_url = "{DEFAULT_API_URL}"

# Request timeout in seconds (omit to use the transport default)
# timeout_seconds = 30

# Verify TLS certificates
verify_ssl = true

# Session cookies sent with every request
# [api.cookies]
# session = "..."

[session]
# Owner recorded on imported playlists
user_id = "user123"

[import]
default_name = "Imported Playlist"
default_description = "Imported from Spotify"

[ui]
use_colors = true
recent_playlists = 5
song_preview = 3

# Search songs through the backend instead of filtering locally
server_search = false

[logging]
# DEBUG, INFO, WARNING, ERROR, CRITICAL
level = "INFO"

# log_file = "~/.local/share/playlist-bridge/playlist-bridge.log"
console_output = false
"""


def _apply_toml(config: Config, toml_data: dict) -> Config:
    """Overlay parsed TOML sections onto a default Config."""
    if "api" in toml_data:
        api_data = toml_data["api"]
        config.api = ApiConfig(
            base_url=str(api_data.get("base_url", config.api.base_url)).rstrip("/"),
            timeout_seconds=api_data.get("timeout_seconds", config.api.timeout_seconds),
            verify_ssl=api_data.get("verify_ssl", config.api.verify_ssl),
            cookies={str(k): str(v) for k, v in api_data.get("cookies", {}).items()},
        )

    if "session" in toml_data:
        session_data = toml_data["session"]
        config.session = SessionConfig(
            user_id=str(session_data.get("user_id", config.session.user_id)),
        )

    if "import" in toml_data:
        import_data = toml_data["import"]
        config.importer = ImportConfig(
            default_name=import_data.get("default_name", config.importer.default_name),
            default_description=import_data.get(
                "default_description", config.importer.default_description
            ),
        )

    if "ui" in toml_data:
        ui_data = toml_data["ui"]
        config.ui = UIConfig(
            use_colors=ui_data.get("use_colors", config.ui.use_colors),
            recent_playlists=ui_data.get(
                "recent_playlists", config.ui.recent_playlists
            ),
            song_preview=ui_data.get("song_preview", config.ui.song_preview),
            server_search=ui_data.get("server_search", config.ui.server_search),
        )

    if "logging" in toml_data:
        logging_data = toml_data["logging"]
        log_file = logging_data.get("log_file", config.logging.log_file)
        config.logging = LoggingConfig(
            level=logging_data.get("level", config.logging.level),
            log_file=str(Path(log_file).expanduser()) if log_file else None,
            console_output=logging_data.get(
                "console_output", config.logging.console_output
            ),
        )

    return config


def _apply_env(config: Config) -> Config:
    """Environment variables override TOML values."""
    api_url = os.environ.get("PLAYLIST_BRIDGE_API_URL")
    user_id = os.environ.get("PLAYLIST_BRIDGE_USER_ID")

    if api_url:
        config.api.base_url = api_url.rstrip("/")
    if user_id:
        config.session.user_id = user_id

    return config


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from file or create default.

    Environment variables override TOML values:
    - PLAYLIST_BRIDGE_API_URL
    - PLAYLIST_BRIDGE_USER_ID

    Raises:
        ValueError: If a loaded value fails validation
    """
    from dotenv import load_dotenv

    env_path = get_config_dir() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            f.write(create_default_config())
        print(f"Created default configuration at: {config_path}")
        config = _apply_env(Config())
        config.validate()
        return config

    try:
        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        print(f"Error loading configuration from {config_path}: {e}")
        print("Using default configuration.")
        toml_data = {}

    config = _apply_env(_apply_toml(Config(), toml_data))
    config.validate()
    return config
