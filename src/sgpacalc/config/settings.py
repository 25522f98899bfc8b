from dataclasses import dataclass
import os
from dotenv import load_dotenv


load_dotenv()


@dataclass(frozen=True)
class Settings:
    web_mode: bool = os.getenv("SGPACALC_WEB", "1") == "1"
    port: int = int(os.getenv("PORT", "8550"))
    title: str = os.getenv("SGPACALC_TITLE", "SGPA Calculator")
    log_level: str = os.getenv("SGPACALC_LOG_LEVEL", "INFO").upper()


settings = Settings()
