import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

@dataclass
class Settings:
    # Uygulama Ayarları
    app_name: str = os.getenv("APP_NAME", "Library Book Management System")
    debug: bool = os.getenv("DEBUG", "False").lower() in ("true", "1", "yes")

    # Çıktı Ayarları ('plain', 'json', 'rich')
    output_mode: str = os.getenv("LIB_CLI_OUTPUT", "plain")

    # Log Ayarları
    log_level: str = os.getenv("LOG_LEVEL", "WARNING")

    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level.upper()


settings = Settings()
