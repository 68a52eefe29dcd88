import logging

import command_bridge
from command_bridge.commands.impl.system_info_command import get_system_info
from command_bridge.commands.registry.command_registry import CommandRegistry

logger = logging.getLogger(__name__)


def on_startup(registry: CommandRegistry) -> None:
    """
    One-time initialization run before the registry is exposed.

    Only emits a log record. Any exception raised here aborts application
    startup.
    """
    info = get_system_info()
    logger.info(
        f"Command bridge v{command_bridge.__version__} starting on "
        f"{info.platform}/{info.architecture} with commands: "
        f"{registry.get_available_commands()}"
    )
