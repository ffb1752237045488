import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./tablet_monitor.db")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
    TABLET_ACTIVITY_LIMIT = int(os.getenv("TABLET_ACTIVITY_LIMIT", 10))

settings = Settings()
