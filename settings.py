import os

from dotenv import load_dotenv

load_dotenv()


class Settings:
    KNOWLEDGE_FILE = os.getenv("KNOWLEDGE_FILE", "knowledge.txt")

    TELEGRAM_TOKEN = os.getenv("TELEGRAM_TOKEN", "")

    OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")
    TRANSCRIBE_MODEL = os.getenv("TRANSCRIBE_MODEL", "gpt-4o-mini-transcribe")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()


settings = Settings()
