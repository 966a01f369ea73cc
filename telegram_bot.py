from __future__ import annotations

import tempfile
from typing import Optional

from telegram import Update
from telegram.ext import (
    Application,
    ApplicationBuilder,
    CommandHandler,
    ContextTypes,
    MessageHandler,
    filters,
)

from bot import FALLBACK, Bot
from knowledge import KnowledgeBase, load
from logger import logger
from settings import settings
from speech import transcribe

GREETING = "Hello! Ask me anything, I'll answer from my keyword list."


def create_application(
    token: Optional[str] = None, knowledge: Optional[KnowledgeBase] = None
) -> Application:
    """Create a Telegram application answering from the keyword knowledge base."""
    token = token or settings.TELEGRAM_TOKEN
    if not token:
        raise ValueError("TELEGRAM_TOKEN is not set")
    if knowledge is None:
        knowledge = load(settings.KNOWLEDGE_FILE)
    application = ApplicationBuilder().token(token).build()
    convo = Bot(knowledge)

    async def start(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        await update.effective_message.reply_text(GREETING)

    async def handle_message(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        # edited messages arrive with update.message unset
        message = update.effective_message
        await message.reply_text(convo.respond(message.text))

    async def handle_voice(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        """Transcribe voice message and answer it like free text."""
        voice = update.effective_message.voice
        file = await voice.get_file()
        try:
            with tempfile.NamedTemporaryFile(suffix=".ogg") as tmp:
                await file.download_to_drive(tmp.name)
                text = await transcribe(tmp.name)
        except Exception:
            logger.exception("voice transcription failed")
            await update.effective_message.reply_text(FALLBACK)
            return
        await update.effective_message.reply_text(convo.respond(text))

    application.add_handler(CommandHandler("start", start))
    application.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND, handle_message))
    application.add_handler(MessageHandler(filters.VOICE, handle_voice))
    logger.info("telegram bot ready with %d entries", len(knowledge))
    return application


def main() -> None:
    app = create_application()
    app.run_polling()


if __name__ == "__main__":
    main()
