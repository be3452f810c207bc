from typing import Optional

import discord
from discord.ext import commands
from loguru import logger

from wordfilter import ProfanityFilter, mask
from wordfilter.config import Settings, settings

ECHO_HOOK_NAME = "Wordfilter Echo"


async def echo_censored(msg, txt: str, use_webhook: bool = True) -> None:
    """Re-post ``txt`` as the author through a webhook, else as the bot."""
    if use_webhook and hasattr(msg.channel, "webhooks"):
        try:
            hooks = await msg.channel.webhooks()
            hook = next((h for h in hooks if h.name == ECHO_HOOK_NAME), None)
            if hook is None:
                hook = await msg.channel.create_webhook(name=ECHO_HOOK_NAME, reason="Profanity echo")
            await hook.send(
                txt,
                username=msg.author.display_name,
                avatar_url=getattr(msg.author.display_avatar, "url", None),
                allowed_mentions=discord.AllowedMentions.none(),
            )
            return
        except discord.HTTPException as e:
            logger.warning(f"Webhook echo fallback: {e}")
    await msg.channel.send(txt, allowed_mentions=discord.AllowedMentions.none())


class ProfanityWatcher(commands.Cog):
    def __init__(self, bot, engine: Optional[ProfanityFilter] = None, cfg: Optional[Settings] = None):
        self.bot = bot
        self.cfg = cfg or settings
        self.engine = engine or ProfanityFilter.from_settings(self.cfg)
        logger.info(f"Profanity Watcher loaded ({len(self.engine.words)} words)")

    def _is_nsfw(self, channel) -> bool:
        if getattr(channel, "id", 0) in self.cfg.nsfw_channels:
            return True
        return bool(getattr(channel, "is_nsfw", lambda: False)())

    @commands.Cog.listener()
    async def on_message(self, message):
        if not message.guild or message.author.bot:
            return
        if message.author.id in self.cfg.exempt_user_ids:
            return
        txt = message.content or ""
        if not txt.strip():
            return
        matches = self.engine.find(txt)
        if not matches:
            return
        try:
            await message.delete()
        except discord.HTTPException as e:
            logger.warning(f"Could not delete message: {e}")
        starred = mask(txt, matches, self.cfg.PROFANITY_MASK_CHAR)
        await self._modlog(message, original=txt, starred=starred, hits=len(matches))
        if self._is_nsfw(message.channel):
            return
        await echo_censored(message, starred, use_webhook=self.cfg.USE_WEBHOOK_MIMIC)

    async def _modlog(self, message, *, original: str, starred: str, hits: int) -> None:
        ch_id = self.cfg.CHANNEL_MOD_LOGS
        if not ch_id:
            return
        ch = message.guild.get_channel(ch_id)
        if ch is None:
            return
        try:
            await ch.send(
                f"[profanity] {message.author.mention} in <#{message.channel.id}> ({hits} hit(s))\n"
                f"`{original}`\n→ `{starred}`",
                allowed_mentions=discord.AllowedMentions.none(),
            )
        except discord.HTTPException:
            logger.exception("modlog send failed")


async def setup(bot):
    await bot.add_cog(ProfanityWatcher(bot))
