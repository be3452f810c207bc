import asyncio
import logging

import discord
from discord.ext import commands
from dotenv import load_dotenv

log = logging.getLogger("bot")

# ---- Intents
intents = discord.Intents.default()
intents.message_content = True
intents.guilds = True

EXTENSIONS = [
    "cogs.utils.logsetup",
    "cogs.watchers.profanity_watch",
]


class Bot(commands.Bot):
    def __init__(self, guild_id=None) -> None:
        super().__init__(command_prefix="!", intents=intents)
        self.guild_id = guild_id

    async def setup_hook(self) -> None:
        for ext in EXTENSIONS:
            try:
                await self.load_extension(ext)
                log.info(f"Loaded cog: {ext}")
            except commands.ExtensionError:
                log.exception(f"Failed to load {ext}")
        if not self.guild_id:
            return
        try:
            synced = await self.tree.sync(guild=discord.Object(id=self.guild_id))
            log.info("App commands synced to guild %s: %d", self.guild_id, len(synced))
        except discord.HTTPException:
            log.exception("Command sync failed")

    async def on_ready(self):
        log.info(f"Logged in as {self.user} ({self.user.id})")


async def main():
    load_dotenv()
    # settings read the environment on import, so import after .env is loaded
    from wordfilter.config import settings

    if not settings.DISCORD_TOKEN:
        raise SystemExit("DISCORD_TOKEN missing in environment.")
    bot = Bot(guild_id=settings.GUILD_ID)
    async with bot:
        await bot.start(settings.DISCORD_TOKEN)


if __name__ == "__main__":
    asyncio.run(main())
