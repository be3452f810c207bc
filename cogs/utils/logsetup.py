import logging
from typing import Optional

from discord.ext import commands
from loguru import logger

from wordfilter.config import settings

LOG_FORMAT = "%(levelname)s:%(name)s:%(message)s"


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def setup_logging(level: Optional[str] = None) -> None:
    """Configure stdlib logging (wordlist loader, discord.py) from ``LOG_LEVEL``."""
    name = (level or settings.LOG_LEVEL).upper()
    logging.basicConfig(level=getattr(logging, name, logging.INFO), format=LOG_FORMAT)
    # discord.client warns about missing voice deps on every boot
    logging.getLogger("discord.client").setLevel(logging.ERROR)


class LogSetup(commands.Cog):
    def __init__(self, bot: commands.Bot):
        self.bot = bot
        setup_logging()

    @commands.Cog.listener()
    async def on_ready(self):
        logger.info(f"LogSetup ready (level {settings.LOG_LEVEL}).")


async def setup(bot: commands.Bot):
    await bot.add_cog(LogSetup(bot))
