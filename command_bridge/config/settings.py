import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

from command_bridge.config.constants import (
    DEFAULT_ALLOWED_ORIGINS,
    DEFAULT_HOST,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PORT,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BridgeSettings:
    """
    Server-level settings for the command bridge process.

    The command handlers themselves read no environment variables; these
    values only configure the HTTP boundary around them and the optional
    filesystem sandbox handed to the file commands.
    """

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    allowed_origins: List[str] = field(
        default_factory=lambda: list(DEFAULT_ALLOWED_ORIGINS)
    )
    fs_root: Optional[str] = None
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "BridgeSettings":
        """
        Build settings from environment variables.

        A ``.env`` file is loaded first when one exists; variables already
        present in the environment take precedence over it.

        Args:
            env_file: Path to the .env file (default: ``.env`` in the working directory)

        Returns:
            BridgeSettings populated from the environment

        Raises:
            ValueError: If BRIDGE_PORT is not a valid port number or
                BRIDGE_LOG_LEVEL is not a logging level name
        """
        env_path = env_file or os.path.join(os.getcwd(), ".env")
        if os.path.exists(env_path):
            load_dotenv(env_path)
            logger.info(f"Loaded environment from {env_path}")
        else:
            logger.debug(f"No .env file found at {env_path}, using system environment")

        port_str = os.environ.get("BRIDGE_PORT", str(DEFAULT_PORT))
        try:
            port = int(port_str)
        except ValueError:
            raise ValueError(f"BRIDGE_PORT must be an integer, got '{port_str}'")
        if not 0 < port < 65536:
            raise ValueError(f"BRIDGE_PORT out of range: {port}")

        origins_str = os.environ.get("BRIDGE_ALLOWED_ORIGINS")
        if origins_str:
            allowed_origins = [o.strip() for o in origins_str.split(",") if o.strip()]
        else:
            allowed_origins = list(DEFAULT_ALLOWED_ORIGINS)

        log_level = os.environ.get("BRIDGE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"BRIDGE_LOG_LEVEL is not a logging level: '{log_level}'")

        return cls(
            host=os.environ.get("BRIDGE_HOST", DEFAULT_HOST),
            port=port,
            allowed_origins=allowed_origins,
            fs_root=os.environ.get("BRIDGE_FS_ROOT") or None,
            log_level=log_level,
        )
